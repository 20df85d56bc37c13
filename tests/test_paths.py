import math

import pytest

from conftest import TETRAHEDRON_FACES
from conftest import TETRAHEDRON_POINTS
from conftest import check
from conftest import uv_sphere

import halfmesh.graphs as graphs
import halfmesh.paths as paths
import halfmesh.weights as weights

from halfmesh.hds import Mesh


GRAPH = {
    'a': {'b': 1.0, 'c': 4.0},
    'b': {'c': 1.0, 'd': 5.0},
    'c': {'d': 1.0, 'a': 1.0},
    'd': {'a': 3.0},
    'e': {'a': 1.0},
}


def neighbors(node):
    return list(GRAPH[node])


def weight(a, b):
    return GRAPH[a][b]


class TestShortestPath:
    def test_small_graph(self):
        path, cost = paths.shortest_path('a', 'd', neighbors, weight)

        assert path == ['a', 'b', 'c', 'd']
        assert cost == 3.0

    def test_trivial_path(self):
        assert paths.shortest_path('a', 'a', neighbors, weight) == (['a'], 0.0)

    def test_unreachable(self):
        assert paths.shortest_path('a', 'e', neighbors, weight) is None

    def test_fills_cache(self):
        cache = dict()
        paths.shortest_path('a', 'd', neighbors, weight, cache)

        assert cache['a'] == [('b', 1.0), ('c', 4.0)]
        assert 'e' not in cache

    def test_cache_is_used(self):
        calls = []

        def counting(a, b):
            calls.append((a, b))
            return weight(a, b)

        cache = paths.Cache()
        first = paths.shortest_path('a', 'd', neighbors, counting, cache)
        n = len(calls)
        second = paths.shortest_path('a', 'd', neighbors, counting, cache)

        assert first == second
        assert len(calls) == n

    def test_cache_bound_to_weight(self):
        cache = paths.Cache()
        paths.shortest_path('a', 'd', neighbors, weight, cache)

        with pytest.raises(ValueError):
            paths.shortest_path('a', 'd', neighbors, lambda a, b: 1.0, cache)

        cache.clear()
        assert paths.shortest_path('a', 'd', neighbors,
                                   lambda a, b: 1.0, cache)[1] == 2.0

    def test_negative_weight(self):
        with pytest.raises(ValueError):
            paths.shortest_path('a', 'd', neighbors, lambda a, b: -1.0)

    def test_cube_vertices(self, cube):
        mesh, vmap, _ = cube
        view = graphs.vertex_view(mesh)
        w = weights.euclidean(mesh)

        path, cost = paths.shortest_path(vmap[0], vmap[6], view, w)

        assert cost == pytest.approx(3.0)
        assert len(path) == 4
        assert path[0] == vmap[0] and path[-1] == vmap[6]

        for a, b in zip(path, path[1:]):
            assert mesh.edge_between_verts(a, b) is not None

    def test_cache_shared_by_one_view(self, cube):
        mesh, vmap, _ = cube
        view = graphs.vertex_view(mesh)
        w = weights.euclidean(mesh)
        cache = paths.Cache()

        assert paths.shortest_path(vmap[0], vmap[6], view, w, cache)[1] == \
            pytest.approx(3.0)
        assert paths.shortest_path(vmap[1], vmap[7], view, w, cache)[1] == \
            pytest.approx(3.0)

        # An equivalent but distinct view object is a different function.
        with pytest.raises(ValueError):
            paths.shortest_path(vmap[0], vmap[6], graphs.vertex_view(mesh),
                                w, cache)

    def test_deterministic(self, cube):
        mesh, vmap, _ = cube
        view = graphs.vertex_view(mesh)
        w = weights.euclidean(mesh)

        results = [paths.shortest_path(vmap[0], vmap[6], view, w, dict())
                   for _ in range(5)]

        assert all(r == results[0] for r in results)

    def test_sphere_meridian(self):
        n_lat = 5
        faces, points = uv_sphere(n_lat, 12)
        mesh, vmap, _ = Mesh.from_faces(faces, points)
        check(mesh)

        north, south = vmap[0], vmap[len(points) - 1]
        path, cost = paths.shortest_path(north, south,
                                         graphs.vertex_view(mesh),
                                         weights.euclidean(mesh))

        chord = 2.0 * math.sin(math.pi / (n_lat + 1) / 2.0)

        assert len(path) == n_lat + 2
        assert cost == pytest.approx((n_lat + 1) * chord)

    def test_disconnected_components(self):
        faces = TETRAHEDRON_FACES + [[i + 4 for i in face]
                                     for face in TETRAHEDRON_FACES]
        points = TETRAHEDRON_POINTS + [[x + 5.0, y, z]
                                       for x, y, z in TETRAHEDRON_POINTS]
        mesh, vmap, _ = Mesh.from_faces(faces, points)
        check(mesh)

        assert paths.shortest_path(vmap[0], vmap[4],
                                   graphs.vertex_view(mesh),
                                   weights.euclidean(mesh)) is None

    def test_halfedge_route(self, sphere):
        mesh, vmap, _ = sphere
        view = graphs.halfedge_view(mesh)
        w = weights.angle_edges(mesh, 2)

        source = mesh.vrep(vmap[0])
        target = mesh.twin(mesh.vrep(vmap[20]))
        path, cost = paths.shortest_path(source, target, view, w)

        assert path[0] == source and path[-1] == target
        assert cost >= 0.0

        for a, b in zip(path, path[1:]):
            assert mesh.root(b) == mesh.toor(a)

    def test_dual_route(self, cube):
        mesh, _, fmap = cube
        path, cost = paths.shortest_path(fmap[0], fmap[1],
                                         graphs.face_view(mesh),
                                         weights.centroid_distance(mesh))

        assert len(path) == 3
        assert cost == pytest.approx(2.0 * math.sqrt(0.5))


class TestShortestCycle:
    def test_small_graph(self):
        cycle, cost = paths.shortest_cycle('a', neighbors, weight)

        assert cycle == ['a', 'b', 'c', 'a']
        assert cost == 3.0

    def test_no_cycle(self):
        assert paths.shortest_cycle('e', neighbors, weight) is None

    def test_vertex_view_backtracks(self, tetrahedron):
        mesh, vmap, _ = tetrahedron
        v = vmap[0]
        cycle, cost = paths.shortest_cycle(v, graphs.vertex_view(mesh),
                                           weights.euclidean(mesh))

        # Undirected adjacency admits a cycle over a single edge.
        assert len(cycle) == 3
        assert cycle[0] == cycle[-1] == v
        assert cost == pytest.approx(2.0)

    def test_edgepair_view(self, cube):
        mesh, _, fmap = cube
        view = graphs.edgepair_view(mesh)
        w = weights.angle_edgepairs(mesh, 1)
        cache = paths.Cache()

        a, _, c, _ = mesh.edges(fmap[0])
        node = (a, c)
        cycle, cost = paths.shortest_cycle(node, view, w, cache)

        assert cycle[0] == cycle[-1] == node

        total = 0.0
        for u, v in zip(cycle, cycle[1:]):
            assert v in view(u)
            total += w(u, v)

        assert cost == pytest.approx(total)

        # Going around the cube straight ahead turns four times.
        assert cost <= 2.0 * math.pi + 1e-9

        again = paths.shortest_cycle(node, view, w, paths.Cache())
        assert again == (cycle, cost)
