import pytest

import halfmesh.graphs as graphs
import halfmesh.paths as paths
import halfmesh.weights as weights


def test_vertex_view(cube):
    mesh, vmap, _ = cube
    neighbors = graphs.vertex_view(mesh)

    assert set(neighbors(vmap[6])) == {vmap[2], vmap[5], vmap[7]}
    assert graphs.vertex_nodes(mesh) == mesh.vertices.keys()


def test_halfedge_view(sphere):
    mesh, _, _ = sphere
    neighbors = graphs.halfedge_view(mesh)

    for h in graphs.halfedge_nodes(mesh):
        following = neighbors(h)

        assert mesh.twin(h) in following
        assert all(mesh.root(g) == mesh.toor(h) for g in following)
        assert len(following) == mesh.degree(mesh.toor(h))


def test_edgepair_view(cube):
    mesh, _, _ = cube
    neighbors = graphs.edgepair_view(mesh)
    nodes = graphs.edgepair_nodes(mesh)

    assert len(nodes) == 24 * 3

    for entry, leave in nodes:
        assert entry != leave
        assert mesh.face(entry) == mesh.face(leave)

        twin = mesh.twin(leave)
        following = neighbors((entry, leave))

        assert len(following) == 3
        assert all(node[0] == twin for node in following)
        assert (twin, twin) not in following


def test_face_view(cube):
    mesh, _, fmap = cube
    neighbors = graphs.face_view(mesh)

    assert set(neighbors(fmap[0])) == {fmap[2], fmap[3], fmap[4], fmap[5]}
    assert graphs.face_nodes(mesh) == fmap.handles()


def test_edge_list(cube):
    mesh, _, _ = cube
    edges = graphs.edge_list(graphs.vertex_nodes(mesh),
                             graphs.vertex_view(mesh),
                             weights.euclidean(mesh))

    assert len(edges) == mesh.nr_edges
    assert all(w == 1.0 for _, _, w in edges)
    assert {(u, v) for u, v, _ in edges} == {
        mesh.endpoints(h) for h in mesh.halfedges}


def test_filtered_vertex_view(cube):
    mesh, vmap, _ = cube
    h, t = mesh.edge_between_verts(vmap[0], vmap[1])
    neighbors = graphs.filtered(graphs.vertex_view(mesh),
                                exclude_nodes=[vmap[4]],
                                exclude_edges=[mesh.endpoints(h)])

    assert neighbors(vmap[0]) == [vmap[3]]
    assert vmap[0] in neighbors(vmap[1])
    assert neighbors(vmap[4]) == []
    assert vmap[4] not in neighbors(vmap[5])


def test_filtered_path_detours(cube):
    mesh, vmap, _ = cube
    w = weights.euclidean(mesh)

    # All edges at vertex 1 but the one to vertex 2 are blocked.
    neighbors = graphs.filtered(graphs.vertex_view(mesh),
                                exclude_nodes=[vmap[0], vmap[5]])
    path, cost = paths.shortest_path(vmap[1], vmap[4], neighbors, w)

    assert path[:2] == [vmap[1], vmap[2]]
    assert vmap[0] not in path and vmap[5] not in path
    assert cost == pytest.approx(4.0)


def test_aligned_edgepair_view(cube):
    mesh, vmap, fmap = cube
    a, _, c, _ = mesh.edges(fmap[0])
    twin = mesh.twin(c)
    down, _ = mesh.edge_between_verts(vmap[5], vmap[1])

    # Leaving the bottom face across x = 1, the crossings of the side face
    # lead up (90 degrees off), diagonally up and back (about 125 degrees)
    # and diagonally up and forward (about 55 degrees).
    neighbors = graphs.edgepair_view(mesh, axis=[0.0, 0.0, 1.0])
    assert neighbors((a, c)) == [(twin, down)]

    loose = graphs.edgepair_view(mesh, axis=[0.0, 0.0, 1.0], limit=180.0)
    assert loose((a, c)) == graphs.edgepair_view(mesh)((a, c))

    strict = graphs.edgepair_view(mesh, axis=[0.0, 0.0, 2.0], limit=50.0)
    assert strict((a, c)) == []
