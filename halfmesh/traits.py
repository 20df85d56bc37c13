# Copyright 2024, m3shware
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

""" Geometric mesh traits.

Convenience functions to compute common geometric traits of an embedded
mesh like edge vectors, face normals, and angular defects. All functions
read positions and normals from the mesh payloads; a missing position or
normal raises :exc:`AttributeError`.
"""

import math
import numpy as np

import halfmesh.linalg as linalg


EPS = 1e-9
""" Default coplanarity tolerance of :func:`is_planar`. """


def vector(mesh, halfedge):
    """ Edge vector.

    Parameters
    ----------
    mesh : Mesh
        An embedded mesh.
    halfedge : HalfedgeHandle
        Halfedge of `mesh`.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
        Vector from origin to target of `halfedge`.
    """
    a, b = mesh.endpoints(halfedge)
    return mesh.position(b) - mesh.position(a)


def length(mesh, halfedge):
    """ Edge length.
    """
    return linalg.norm(vector(mesh, halfedge))


def midpoint(mesh, halfedge, offset=0.5):
    """ Point on an edge.

    Parameters
    ----------
    mesh : Mesh
        An embedded mesh.
    halfedge : HalfedgeHandle
        Halfedge of `mesh`.
    offset : float, optional
        Relative position along `halfedge`. The origin corresponds to
        0.0, the target to 1.0.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
    """
    return mesh.position(mesh.root(halfedge)) + offset * vector(mesh, halfedge)


def distance(mesh, a, b):
    """ Euclidean distance of two vertices.
    """
    return linalg.norm(mesh.position(b) - mesh.position(a))


def angle(mesh, a, b, deg=False):
    """ Angle enclosed by the edge vectors of two halfedges.
    """
    return linalg.angle(vector(mesh, a), vector(mesh, b), deg=deg)


def angle_defect(mesh, vertex):
    r""" Angular defect.

    The value :math:`2\pi - \sum_i \alpha_i` where the :math:`\alpha_i`
    are the corner angles at `vertex`. A corner angle is enclosed by an
    outgoing halfedge ``e`` and its fan successor ``next(twin(e))``.

    Returns
    -------
    float
        Discrete Gaussian curvature at `vertex`.

    Note
    ----
    Summed over all vertices of a closed mesh the defects equal
    :math:`2\pi\chi`, i.e., :math:`4\pi` for a sphere.
    """
    total = 0.0

    for h in mesh.outgoing(vertex):
        total += angle(mesh, h, mesh.next(mesh.twin(h)))

    return 2.0 * math.pi - total


def centroid(mesh, face):
    """ Face centroid.

    Average of the corner positions of `face`.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
    """
    return linalg.average(mesh.position(v) for v in mesh.corners(face))


def vector_area(mesh, face):
    r""" Vector area of a face.

    Computes :math:`\frac{1}{2} \sum_i p_i \times p_{i+1}` over the corner
    positions in loop order. For a planar face the result is orthogonal to
    the face and its length is the face area. Its direction is the
    outward normal of a counter-clockwise face loop.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
    """
    points = [mesh.position(v) for v in mesh.corners(face)]
    area = np.zeros(3)

    for p, q in zip(points, points[1:] + points[:1]):
        area += linalg.cross(p, q)

    return 0.5 * area


def face_area(mesh, face):
    """ Face area.

    Exact for planar faces. For non-planar faces this is the area of the
    projection onto the plane orthogonal to the vector area.
    """
    return linalg.norm(vector_area(mesh, face))


def face_normal(mesh, face):
    """ Face normal.

    Unit vector area of `face`. Independent of the choice of the start
    corner and well defined for non-convex and slightly non-planar faces.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
        Unit normal vector, the zero vector for faces of vanishing area.
    """
    return linalg.unit(vector_area(mesh, face))


def compute_normals(mesh):
    """ Assign computed normals to all faces.

    Parameters
    ----------
    mesh : Mesh
        An embedded mesh.

    Returns
    -------
    ~numpy.ndarray, shape (m, 3)
        Unit normal vectors for a mesh with m faces, in face slot order.
    """
    normals = []

    for f in mesh.faces:
        n = face_normal(mesh, f)
        mesh.set_normal(f, n)
        normals.append(n)

    return np.array(normals, dtype=float).reshape(-1, 3)


def vertex_normal(mesh, vertex):
    """ Vertex normal.

    Normalized sum of the normals of all faces incident to `vertex`.
    Uses stored face normals.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
        Unit normal vector.
    """
    return linalg.unit(sum(mesh.normal(f) for f in mesh.star(vertex)))


def edge_normal(mesh, halfedge, offset=0.5):
    """ Edge normal.

    Blend of the stored normals of the two faces incident to an edge.

    Parameters
    ----------
    mesh : Mesh
        An embedded mesh.
    halfedge : HalfedgeHandle
        Halfedge of `mesh`.
    offset : float, optional
        Weight of the normal of ``face(halfedge)``. The normal of the
        twin's face is weighted by ``1 - offset``.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
        Unit normal vector.
    """
    f, g = mesh.faces_of(halfedge)

    return linalg.unit(offset * mesh.normal(f) +
                       (1.0 - offset) * mesh.normal(g))


def is_planar(mesh, face, eps=EPS):
    """ Coplanarity test.

    Parameters
    ----------
    mesh : Mesh
        An embedded mesh.
    face : FaceHandle
        Face of `mesh`.
    eps : float, optional
        Absolute tolerance on the distance of each corner to the plane
        through the centroid orthogonal to the face normal.

    Returns
    -------
    bool
        :obj:`True` if all corners of `face` lie within `eps` of a
        common plane.
    """
    n = face_normal(mesh, face)
    c = centroid(mesh, face)

    return all(abs(n.dot(mesh.position(v) - c)) <= eps
               for v in mesh.corners(face))


def edge_length(mesh):
    """ Edge length statistics.

    Returns
    -------
    min : float
        Length of the shortest edge.
    max : float
        Length of the longest edge.
    avg : float
        Average edge length.
    """
    lengths = np.array([length(mesh, h) for h in mesh.halfedges])

    return np.min(lengths), np.max(lengths), np.mean(lengths)


def crossing(mesh, entry, leave):
    """ Direction of a face crossing.

    Parameters
    ----------
    mesh : Mesh
        An embedded mesh.
    entry, leave : HalfedgeHandle
        Distinct halfedges of a common face.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
        Vector from the midpoint of `entry` to the midpoint of `leave`.
    """
    return midpoint(mesh, leave) - midpoint(mesh, entry)


def crossing_alignment(mesh, entry, leave, axis, deg=False):
    """ Alignment of a face crossing with a reference axis.

    The crossing direction is crossed with the edge normal of `entry`.
    The result lies in the tangent plane and is orthogonal to the
    direction of travel. Its angle with `axis` measures how well the
    crossing follows the iso-lines of `axis`.

    Returns
    -------
    float
        Angle in radians, or degrees if requested.
    """
    side = linalg.cross(crossing(mesh, entry, leave),
                        edge_normal(mesh, entry))

    return linalg.angle(side, axis, deg=deg)
