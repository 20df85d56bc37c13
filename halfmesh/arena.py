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

""" Generational arena and mesh item handles.

Mesh items are stored in :class:`Arena` containers and addressed by
opaque handles. A handle records the slot of its item and the generation
of that slot. Removing an item bumps the slot's generation, so handles
to removed items are detected instead of silently referring to a new
item that re-uses the slot.

Note
----
Handles support equality and hashing only. They carry no arithmetic and
are meaningful only together with the arena that issued them.
"""

from halfmesh.errors import DanglingHandleError


class Handle:
    """ Handle base class.

    Parameters
    ----------
    slot : int
        Storage slot within the issuing arena.
    gen : int
        Generation of the slot at allocation time.
    """

    __slots__ = ('_slot', '_gen')

    def __init__(self, slot, gen=0):
        self._slot = slot
        self._gen = gen

    def __repr__(self):
        return f'{type(self).__name__}({self._slot}v{self._gen})'

    def __eq__(self, other):
        return (type(other) is type(self)
                and other._slot == self._slot
                and other._gen == self._gen)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, self._slot, self._gen))


class VertexHandle(Handle):
    """ Vertex handle. """

    __slots__ = ()


class HalfedgeHandle(Handle):
    """ Halfedge handle. """

    __slots__ = ()


class FaceHandle(Handle):
    """ Face handle. """

    __slots__ = ()


class Arena:
    """ Slot based item container.

    Parameters
    ----------
    kind : type
        Handle type issued by the arena, a subclass of :class:`Handle`.

    Note
    ----
    Handles of live items are visited in slot order. The order is stable
    as long as no item is removed, in particular within one construction
    pass.
    """

    def __init__(self, kind):
        self._kind = kind

        # Parallel per-slot lists. A slot is live iff its payload entry
        # is not the _FREE sentinel.
        self._payload = []
        self._gen = []
        self._free = []

    def __len__(self):
        return len(self._payload) - len(self._free)

    def __iter__(self):
        """ Live handle iterator.

        Yields
        ------
        Handle
            Next live handle in slot order.
        """
        kind = self._kind

        for slot, payload in enumerate(self._payload):
            if payload is not _FREE:
                yield kind(slot, self._gen[slot])

    def __contains__(self, handle):
        """ Liveness test.

        Parameters
        ----------
        handle : object
            Any object, typically a :class:`Handle`.

        Returns
        -------
        bool
            :obj:`True` if `handle` was issued by this arena and its item
            has not been removed since.
        """
        if type(handle) is not self._kind:
            return False

        slot = handle._slot

        return (0 <= slot < len(self._payload)
                and self._gen[slot] == handle._gen
                and self._payload[slot] is not _FREE)

    @property
    def kind(self):
        """ Handle type.

        :type: type
        """
        return self._kind

    def insert(self, payload=None):
        """ Add an item.

        Freed slots are re-used before the arena grows.

        Parameters
        ----------
        payload : object, optional
            Item payload.

        Returns
        -------
        Handle
            Handle of the new item.
        """
        if self._free:
            slot = self._free.pop()
            self._payload[slot] = payload
        else:
            slot = len(self._payload)
            self._payload.append(payload)
            self._gen.append(0)

        return self._kind(slot, self._gen[slot])

    def get(self, handle):
        """ Item payload.

        Raises
        ------
        DanglingHandleError
            If `handle` is not live.
        """
        self._check(handle)
        return self._payload[handle._slot]

    def set(self, handle, payload):
        """ Replace item payload.

        Raises
        ------
        DanglingHandleError
            If `handle` is not live.
        """
        self._check(handle)
        self._payload[handle._slot] = payload

    def remove(self, handle):
        """ Remove an item.

        The slot generation is incremented which invalidates all copies
        of `handle`.

        Returns
        -------
        object
            Payload of the removed item.

        Raises
        ------
        DanglingHandleError
            If `handle` is not live.
        """
        self._check(handle)

        slot = handle._slot
        payload = self._payload[slot]

        self._payload[slot] = _FREE
        self._gen[slot] += 1
        self._free.append(slot)

        return payload

    def keys(self):
        """ Live handles.

        Returns
        -------
        list[Handle]
            Live handles in slot order.
        """
        return list(self)

    def items(self):
        """ Live handle and payload pairs.

        Returns
        -------
        list[tuple(Handle, object)]
        """
        return [(h, self._payload[h._slot]) for h in self]

    def _check(self, handle):
        if handle not in self:
            raise DanglingHandleError(handle)


class _Free:
    """ Marker for unused slots. """

    __slots__ = ()

    def __repr__(self):
        return '<free>'


_FREE = _Free()
