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

""" Graph views of a mesh.

A view is a neighbor function ``neighbors(node) -> list`` over one kind of
graph node. Views never materialize a graph, they walk the halfedge data
structure on demand. Together with a weight function from
:mod:`halfmesh.weights` a view is all :mod:`halfmesh.paths` needs.

============ ======================== ==================================
view         node                     neighbors
============ ======================== ==================================
vertex       vertex                   adjacent vertices
halfedge     halfedge                 halfedges leaving its target
edge pair    (entry, exit) halfedges  crossings of the face across exit
face         face                     faces sharing an edge
============ ======================== ==================================

The edge pair view describes routes across faces. A node ``(h, c)``
enters the face of `h` through `h` and leaves it through `c`. The next
crossing enters the neighboring face through ``twin(c)`` and may leave it
through any of its other edges, so a route never turns back across the
edge it just crossed.

Views can be restricted. :func:`filtered` removes nodes and edges from any
view, the `axis` argument of :func:`edgepair_view` drops crossings that
are not aligned with a reference direction.

Each call of a view function returns a new neighbor function. A
:class:`~halfmesh.paths.Cache` is bound to the function objects it was
first used with, so create a view once and reuse it across searches.
"""

import halfmesh.linalg as linalg
import halfmesh.traits as traits


def vertex_view(mesh):
    """ Vertex adjacency.

    Returns
    -------
    callable
        ``neighbors(vertex)``
    """
    def neighbors(vertex):
        return mesh.vneighbors(vertex)

    return neighbors


def vertex_nodes(mesh):
    """ Nodes of the vertex view. """
    return mesh.vertices.keys()


def halfedge_view(mesh):
    """ Directed edge adjacency.

    A halfedge is followed by every halfedge that leaves its target,
    including its own twin.

    Returns
    -------
    callable
        ``neighbors(halfedge)``
    """
    def neighbors(halfedge):
        return mesh.outgoing(mesh.toor(halfedge))

    return neighbors


def halfedge_nodes(mesh):
    """ Nodes of the halfedge view. """
    return mesh.halfedges.keys()


def edgepair_view(mesh, axis=None, limit=90.0):
    """ Face crossing adjacency.

    Parameters
    ----------
    mesh : Mesh
        A mesh, embedded with face normals if `axis` is given.
    axis : array_like, shape (3, ), optional
        Reference direction. If given, crossings whose alignment angle
        (see :func:`~halfmesh.traits.crossing_alignment`) is not below
        `limit` are dropped.
    limit : float, optional
        Alignment bound in degrees.

    Returns
    -------
    callable
        ``neighbors((entry, exit))``
    """
    if axis is not None:
        axis = linalg.unit(axis)

    def aligned(node):
        return traits.crossing_alignment(mesh, *node, axis, deg=True) < limit

    def neighbors(node):
        twin = mesh.twin(node[1])
        following = [(twin, h) for h in mesh.edges(mesh.face(twin))
                     if h != twin]

        if axis is None:
            return following

        return [n for n in following if aligned(n)]

    return neighbors


def edgepair_nodes(mesh):
    """ Nodes of the edge pair view.

    Returns
    -------
    list[tuple(HalfedgeHandle, HalfedgeHandle)]
        Every pair of distinct halfedges of a common face.
    """
    return [(h, c) for h in mesh.halfedges
            for c in mesh.edges(mesh.face(h)) if c != h]


def face_view(mesh):
    """ Dual graph adjacency.

    Returns
    -------
    callable
        ``neighbors(face)``
    """
    def neighbors(face):
        return mesh.fneighbors(face)

    return neighbors


def face_nodes(mesh):
    """ Nodes of the face view. """
    return mesh.faces.keys()


def filtered(neighbors, exclude_nodes=(), exclude_edges=()):
    """ View with obstacles.

    Wraps a neighbor function such that excluded nodes are never
    reached and excluded directed edges are never followed.

    Parameters
    ----------
    neighbors : callable
        Neighbor function of a view.
    exclude_nodes : iterable, optional
        Nodes to remove from the graph.
    exclude_edges : iterable, optional
        Directed `(u, v)` node pairs to remove from the graph. For the
        vertex view, :meth:`~halfmesh.hds.Mesh.endpoints` maps a halfedge
        to its pair.

    Returns
    -------
    callable
        ``neighbors(node)``

    Note
    ----
    Excluded nodes may still be used as search source. They have no
    outgoing edges in the wrapped view.
    """
    exclude_nodes = set(exclude_nodes)
    exclude_edges = set(exclude_edges)

    def wrapped(node):
        if node in exclude_nodes:
            return []

        return [n for n in neighbors(node) if n not in exclude_nodes
                and (node, n) not in exclude_edges]

    return wrapped


def edge_list(nodes, neighbors, weight):
    """ Weighted directed edge list of a view.

    Materializes a view for external graph libraries.

    Parameters
    ----------
    nodes : iterable
        Graph nodes, typically from one of the ``*_nodes`` functions.
    neighbors : callable
        View neighbor function.
    weight : callable
        Weight function.

    Returns
    -------
    list[tuple]
        Triples ``(u, v, w)`` in node order.
    """
    return [(u, v, weight(u, v)) for u in nodes for v in neighbors(u)]
