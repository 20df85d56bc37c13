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

""" Shortest paths and cycles.

Dijkstra's algorithm over an implicit graph given by a neighbor function
(see :mod:`halfmesh.graphs`) and a weight function (see
:mod:`halfmesh.weights`). Adjacency lists, i.e., neighbors together with
edge weights, are computed on first use. Passing a cache keeps them
around for later queries on the same graph.


.. code-block:: python
   :linenos:

    neighbors = graphs.vertex_view(mesh)
    weight = weights.euclidean(mesh)
    cache = paths.Cache()

    for a, b in queries:
        found = paths.shortest_path(a, b, neighbors, weight, cache)

Note
----
A cache has no internal locking. Searches that share a cache must not
run concurrently.
"""

import logging

from halfmesh.heap import MinHeap


logger = logging.getLogger(__name__)


class Cache(dict):
    """ Adjacency list cache.

    Maps a node to its list of `(neighbor, weight)` pairs. A cache is
    bound to the neighbor and weight function of the first search that
    uses it. Later searches with other functions are rejected since their
    adjacency lists differ.

    Functions are compared by identity. View and weight factories return
    a new function on every call, even for identical arguments. Create
    them once and pass the same objects to every search that shares the
    cache.

    Note
    ----
    A plain :class:`dict` is accepted as cache, too. No binding checks are
    performed in that case.
    """

    def __init__(self):
        super().__init__()
        self._bound = None

    def bind(self, neighbors, weight):
        """ Bind cache to a neighbor and weight function.

        Raises
        ------
        ValueError
            If the cache is bound to different functions already.
        """
        if self._bound is None:
            self._bound = (neighbors, weight)
        elif self._bound != (neighbors, weight):
            raise ValueError('cache is bound to another view or weight')

    def clear(self):
        """ Drop all adjacency lists and the binding.
        """
        super().clear()
        self._bound = None


def _adjacent(node, neighbors, weight, cache):
    if cache is not None and node in cache:
        return cache[node]

    adjacent = []

    for other in neighbors(node):
        w = weight(node, other)

        if w < 0:
            raise ValueError(f'negative weight {w} for {node!r} -> {other!r}')

        adjacent.append((other, w))

    if cache is not None:
        cache[node] = adjacent

    return adjacent


def shortest_path(source, target, neighbors, weight, cache=None):
    """ Shortest path between two nodes.

    Parameters
    ----------
    source, target : object
        Start and end node, any hashable object of the view.
    neighbors : callable
        Neighbor function of a view.
    weight : callable
        Non-negative weight function.
    cache : Cache or dict, optional
        Adjacency list cache. Filled as a side effect.

    Returns
    -------
    path : list
        Nodes from `source` to `target`, both included.
    cost : float
        Sum of edge weights along `path`.

    Or :obj:`None` if `target` cannot be reached.

    Raises
    ------
    ValueError
        If a negative weight is encountered or `cache` is bound to other
        functions.

    Note
    ----
    Ties between paths of equal cost are broken by the order in which the
    neighbor function lists nodes. For a fixed mesh the result is
    deterministic.
    """
    if isinstance(cache, Cache):
        cache.bind(neighbors, weight)

    dist = {source: 0.0}
    pred = dict()
    done = set()

    queue = MinHeap([(source, 0.0)])

    while queue:
        node, cost = queue.pop()

        if node == target:
            path = [node]

            while node != source:
                node = pred[node]
                path.append(node)

            logger.debug('path of length %d and cost %g, %d nodes settled',
                         len(path), cost, len(done) + 1)

            return path[::-1], cost

        done.add(node)

        for other, w in _adjacent(node, neighbors, weight, cache):
            if other in done:
                continue

            alt = cost + w

            if other not in dist or alt < dist[other]:
                dist[other] = alt
                pred[other] = node
                queue.push(other, alt)

    logger.debug('no path, %d nodes settled', len(done))
    return None


def shortest_cycle(node, neighbors, weight, cache=None):
    """ Shortest cycle through a node.

    For every neighbor `n` of `node` the shortest path from `n` back to
    `node` is computed. The cheapest of these closes the cycle.

    Parameters
    ----------
    node : object
        Start and end node.
    neighbors : callable
        Neighbor function of a view.
    weight : callable
        Non-negative weight function.
    cache : Cache or dict, optional
        Adjacency list cache, shared by all searches.

    Returns
    -------
    cycle : list
        Nodes of the cycle. Starts and ends with `node`.
    cost : float
        Total weight including the edge from `node` to its successor.

    Or :obj:`None` if no cycle passes through `node`.

    Note
    ----
    Among cycles of equal cost the first one found wins, in neighbor
    order.
    """
    if isinstance(cache, Cache):
        cache.bind(neighbors, weight)

    best = None

    for first, w in _adjacent(node, neighbors, weight, cache):
        found = shortest_path(first, node, neighbors, weight, cache)

        if found is None:
            continue

        path, cost = found

        if best is None or w + cost < best[1]:
            best = [node] + path, w + cost

    return best
