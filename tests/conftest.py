import math
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from halfmesh.hds import Mesh


TETRAHEDRON_FACES = [[0, 2, 1], [0, 1, 3], [1, 2, 3], [0, 3, 2]]
TETRAHEDRON_POINTS = [[0.0, 0.0, 0.0],
                      [1.0, 0.0, 0.0],
                      [0.0, 1.0, 0.0],
                      [0.0, 0.0, 1.0]]

CUBE_FACES = [[0, 3, 2, 1], [4, 5, 6, 7], [0, 1, 5, 4],
              [2, 3, 7, 6], [0, 4, 7, 3], [1, 2, 6, 5]]
CUBE_POINTS = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0],
               [1.0, 1.0, 0.0], [0.0, 1.0, 0.0],
               [0.0, 0.0, 1.0], [1.0, 0.0, 1.0],
               [1.0, 1.0, 1.0], [0.0, 1.0, 1.0]]

OCTAHEDRON_FACES = [[0, 2, 4], [2, 1, 4], [1, 3, 4], [3, 0, 4],
                    [2, 0, 5], [1, 2, 5], [3, 1, 5], [0, 3, 5]]
OCTAHEDRON_POINTS = [[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0],
                     [0.0, 1.0, 0.0], [0.0, -1.0, 0.0],
                     [0.0, 0.0, 1.0], [0.0, 0.0, -1.0]]


def uv_sphere(n_lat=4, n_lon=8):
    """ Triangulated unit sphere with poles 0 and 1 + n_lat * n_lon. """
    points = [[0.0, 0.0, 1.0]]

    for i in range(1, n_lat + 1):
        theta = math.pi * i / (n_lat + 1)

        for j in range(n_lon):
            phi = 2.0 * math.pi * j / n_lon
            points.append([math.sin(theta) * math.cos(phi),
                           math.sin(theta) * math.sin(phi),
                           math.cos(theta)])

    points.append([0.0, 0.0, -1.0])
    south = len(points) - 1

    def ring(i, j):
        return 1 + (i - 1) * n_lon + j % n_lon

    faces = []

    for j in range(n_lon):
        faces.append([0, ring(1, j), ring(1, j + 1)])

    for i in range(1, n_lat):
        for j in range(n_lon):
            a, b = ring(i, j), ring(i, j + 1)
            c, d = ring(i + 1, j), ring(i + 1, j + 1)
            faces.append([a, c, d])
            faces.append([a, d, b])

    for j in range(n_lon):
        faces.append([south, ring(n_lat, j + 1), ring(n_lat, j)])

    return faces, np.array(points)


def check(mesh):
    """ Run all verification passes, in order. """
    mesh.verify_properties()
    mesh.verify_references()
    mesh.verify_invariants()
    return mesh


@pytest.fixture
def tetrahedron():
    mesh, vmap, fmap = Mesh.from_faces(TETRAHEDRON_FACES, TETRAHEDRON_POINTS)
    return check(mesh), vmap, fmap


@pytest.fixture
def cube():
    mesh, vmap, fmap = Mesh.from_faces(CUBE_FACES, CUBE_POINTS)
    return check(mesh), vmap, fmap


@pytest.fixture
def octahedron():
    mesh, vmap, fmap = Mesh.from_faces(OCTAHEDRON_FACES, OCTAHEDRON_POINTS)
    return check(mesh), vmap, fmap


@pytest.fixture
def sphere():
    faces, points = uv_sphere()
    mesh, vmap, fmap = Mesh.from_faces(faces, points)
    return check(mesh), vmap, fmap
