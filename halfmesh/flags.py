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

""" Relation and invariant flags.

The topology store of a mesh consists of six partial maps. Members of
:class:`Relation` name these maps and can be combined to select a subset
of relations, e.g., when checking for completeness.
"""

from enum import Flag
from enum import auto


class Relation(Flag):
    """ Topological relations.
    """

    ROOT = auto()
    """ Halfedge to its origin vertex. """

    FACE = auto()
    """ Halfedge to its incident face. """

    NEXT = auto()
    """ Halfedge to its successor in the face loop. """

    TWIN = auto()
    """ Halfedge to the oppositely oriented halfedge. """

    VREP = auto()
    """ Vertex to one of its outgoing halfedges. """

    FREP = auto()
    """ Face to one of its boundary halfedges. """

    EDGE = ROOT | FACE | NEXT | TWIN
    """ All halfedge relations. """

    ALL = EDGE | VREP | FREP


class Invariant(Flag):
    """ Structural invariants of a valid mesh.
    """

    TWIN = auto()
    """ ``twin(twin(e)) == e`` """

    ROOT = auto()
    """ ``root(next(twin(e))) == root(e)`` """

    FACE = auto()
    """ ``face(next(e)) == face(e)`` """

    LOOP = auto()
    """ Repeated ``next`` returns to ``e`` within the degree bound. """

    REP = auto()
    """ Representatives are incident to the item they represent. """

    ALL = TWIN | ROOT | FACE | LOOP | REP


def members(flag):
    """ Decompose a composite flag value.

    Parameters
    ----------
    flag : Relation or Invariant
        Possibly composite flag value.

    Returns
    -------
    list
        Single-bit members of `flag` in definition order.
    """
    return [m for m in type(flag)
            if m.value & (m.value - 1) == 0 and m in flag]
