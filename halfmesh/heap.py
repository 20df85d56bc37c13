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

""" Indexed priority queue.

Array based binary heap as described in **Algorithms in C**, *Parts 1--4*
by Robert Sedgewick. Unlike :mod:`heapq` the queue tracks the position of
each item, which allows priorities of queued items to be decreased (or
increased) in place.

Items of equal priority leave the queue in the order they were first
pushed. Searches driven by this queue are therefore deterministic.
"""


class MinHeap:
    """ Min-priority queue.

    Smaller priority values signify higher priority.

    Parameters
    ----------
    items : iterable, optional
        A sequence of `(object, priority)` pairs.

    Note
    ----
    Only hashable objects can be queued. Priorities have to be totally
    ordered.
    """

    def __init__(self, items=None):
        # _heap[0] is never used, it simplifies parent/child index math.
        # Entries are [priority, sequence number, item] lists.
        self._heap = [None]
        self._hpos = dict()
        self._seq = 0

        if items is not None:
            for item in items:
                self.push(*item)

    def __bool__(self):
        return len(self._heap) > 1

    def __contains__(self, item):
        return item in self._hpos

    def __len__(self):
        return len(self._heap) - 1

    def pop(self):
        """ Remove item of highest priority.

        Returns
        -------
        item : object
        priority : object

        Raises
        ------
        IndexError
            When trying to remove items from an empty queue.
        """
        if len(self._heap) == 1:
            raise IndexError('pop from empty heap')

        self._swap(1, len(self._heap) - 1)
        priority, _, item = self._heap.pop()
        del self._hpos[item]

        if len(self._heap) > 1:
            self._fixdown(1)

        return item, priority

    def push(self, item, priority):
        """ Add item or change the priority of a queued item.

        A re-pushed item keeps its original sequence number, i.e., its
        rank among items of equal priority.
        """
        if item in self._hpos:
            self.update(item, priority)
        else:
            self._hpos[item] = len(self._heap)
            self._heap.append([priority, self._seq, item])
            self._seq += 1
            self._fixup(len(self._heap) - 1)

    def update(self, item, priority):
        """ Change priority of a queued item.

        Raises
        ------
        KeyError
            If `item` is not queued.
        """
        k = self._hpos[item]
        self._heap[k][0] = priority

        self._fixup(k)
        self._fixdown(self._hpos[item])

    def _less(self, i, j):
        a, b = self._heap[i], self._heap[j]
        return (a[0], a[1]) < (b[0], b[1])

    def _swap(self, i, j):
        self._hpos[self._heap[i][2]] = j
        self._hpos[self._heap[j][2]] = i
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _fixup(self, k):
        # Move the entry at k towards the root while it beats its parent.
        while k > 1 and self._less(k, k // 2):
            self._swap(k, k // 2)
            k = k // 2

    def _fixdown(self, k):
        n = len(self._heap) - 1

        # Children of k are 2k and 2k+1.
        while 2 * k <= n:
            j = 2 * k

            if j < n and self._less(j + 1, j):
                j += 1

            if not self._less(j, k):
                break

            self._swap(j, k)
            k = j
