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

""" Mesh exceptions.

Two families of errors are raised by this package. A
:class:`StructuralError` is raised while building a mesh from malformed
face data; no mesh is returned in this case. An :class:`IntegrityError`
signals a corrupted halfedge data structure and typically indicates a
programming error.

Note
----
Failed adjacency queries are not errors. Functions like
:meth:`~halfmesh.hds.Mesh.edge_between_verts` return :obj:`None` instead.
"""


class MeshError(Exception):
    """ Base class of all mesh exceptions.
    """

    pass


class StructuralError(MeshError):
    """ Malformed input detected during mesh construction.
    """

    pass


class NonManifoldError(StructuralError):
    """ Manifold violation.

    Raised when a directed edge is claimed by more than one face or when
    the outgoing halfedges of a vertex do not form a single fan.

    Parameters
    ----------
    message : str
        Error description.
    pair : tuple(int, int), optional
        Offending directed edge given by input vertex indices.
    handles : tuple(HalfedgeHandle, ...), optional
        Offending halfedges.
    vertex : int, optional
        Offending input vertex index.
    """

    def __init__(self, message, pair=None, handles=(), vertex=None):
        super().__init__(message)
        self.pair = pair
        self.handles = tuple(handles)
        self.vertex = vertex


class NonWatertightError(StructuralError):
    """ Open boundary.

    Raised when a directed edge ``(a, b)`` has no oppositely oriented
    counterpart ``(b, a)``.
    """

    def __init__(self, pair, handle):
        a, b = pair
        super().__init__(f'edge ({a}, {b}) has no twin, '
                         f'halfedge {handle!r} is unpaired')
        self.pair = pair
        self.handle = handle


class DegenerateFaceError(StructuralError, ValueError):
    """ Face with less than three distinct corners.
    """

    def __init__(self, face, corners):
        super().__init__(f'face #{face} {list(corners)} is degenerate')
        self.face = face
        self.corners = tuple(corners)


class DegreeError(StructuralError, ValueError):
    """ Face or vertex degree exceeds the walk bound of a mesh.

    Parameters
    ----------
    item : str
        Either ``'face'`` or ``'vertex'``.
    index : int
        Input index of the offending face or vertex.
    degree : int
        Number of corners of the face or outgoing edges of the vertex.
    bound : int
        The walk bound.
    """

    def __init__(self, item, index, degree, bound):
        super().__init__(f'{item} #{index} has degree {degree}, '
                         f'walks are bounded by {bound}')
        self.item = item
        self.index = index
        self.degree = degree
        self.bound = bound


class IntegrityError(MeshError):
    """ Corrupted halfedge data structure.
    """

    pass


class MissingRelationError(IntegrityError):
    """ Undefined topological relation.
    """

    def __init__(self, relation, handle):
        super().__init__(f'{relation.name.lower()} of {handle!r} is undefined')
        self.relation = relation
        self.handle = handle


class DanglingHandleError(IntegrityError):
    """ Handle does not refer to a live mesh item.

    Either the handle belongs to another container or the item it once
    referred to has been removed.
    """

    def __init__(self, handle, message=None):
        super().__init__(message or f'{handle!r} is not a live handle')
        self.handle = handle


class DanglingReferenceError(DanglingHandleError):
    """ A stored relation refers to an item that is no longer live.
    """

    def __init__(self, relation, handle, target):
        msg = (f'{relation.name.lower()} of {handle!r} refers to ' +
               f'{target!r} which is not live')
        super().__init__(target, msg)
        self.relation = relation
        self.source = handle
        self.target = target


class InvariantError(IntegrityError):
    """ Violated structural invariant.

    Parameters
    ----------
    kind : Invariant
        The violated invariant.
    handle : Handle
        Item at which the violation was detected.
    """

    def __init__(self, kind, handle, detail=None):
        msg = f'invariant {kind.name} violated at {handle!r}'
        super().__init__(f'{msg}: {detail}' if detail else msg)
        self.kind = kind
        self.handle = handle
