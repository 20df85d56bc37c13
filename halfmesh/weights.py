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

""" Weight function factories.

Each factory binds an embedded mesh and returns a function ``w(a, b)``
that maps a pair of graph nodes to a non-negative float. The node type
depends on the view the weight is meant for, see :mod:`halfmesh.graphs`.

=========================== ================================
factory                     nodes
=========================== ================================
:func:`euclidean`           vertices
:func:`centroid_distance`   faces
:func:`angle_edges`         halfedges
:func:`angle_edgepairs`     edge pairs
=========================== ================================

Weights read geometry lazily. They reflect the mesh payloads at the time
of evaluation, which matters for cached adjacency lists.
"""

import halfmesh.linalg as linalg
import halfmesh.traits as traits


def euclidean(mesh):
    """ Distance of vertex positions.

    Returns
    -------
    callable
        ``w(a, b)`` for vertices `a` and `b`.
    """
    def weight(a, b):
        return traits.distance(mesh, a, b)

    return weight


def centroid_distance(mesh):
    """ Distance of face centroids, for the dual graph.
    """
    def weight(a, b):
        return linalg.norm(traits.centroid(mesh, b) - traits.centroid(mesh, a))

    return weight


def angle_edges(mesh, slack=1):
    """ Turning penalty between halfedges.

    Parameters
    ----------
    mesh : Mesh
        An embedded mesh.
    slack : int, optional
        Exponent applied to the turning angle. Large values favor straight
        paths over short ones.

    Returns
    -------
    callable
        ``w(a, b)`` for halfedges `a` and `b`, the angle enclosed by their
        edge vectors raised to `slack`.
    """
    def weight(a, b):
        return traits.angle(mesh, a, b) ** slack

    return weight


def angle_edgepairs(mesh, slack=1):
    """ Turning penalty between edge pairs.

    Parameters
    ----------
    mesh : Mesh
        An embedded mesh.
    slack : int, optional
        Exponent applied to the turning angle.

    Returns
    -------
    callable
        ``w(a, b)`` for edge pairs `a` and `b`. Each pair describes a
        crossing of a face, its direction is the vector between the
        midpoints of the two edges.
    """
    def weight(a, b):
        phi = linalg.angle(traits.crossing(mesh, *a),
                           traits.crossing(mesh, *b))

        return phi ** slack

    return weight


def angle_edgepairs_aligned(mesh, angular_slack, alignment_slack, axis):
    r""" Turning and alignment penalty between edge pairs.

    The weight of two consecutive face crossings `a` and `b` is

    .. math::

        \phi_{ab}^{s} + \psi_a^{t} + \psi_b^{t}

    where :math:`\phi_{ab}` is the turning angle between the crossing
    directions, :math:`s` the angular slack, and :math:`t` the alignment
    slack. The alignment angle :math:`\psi` is enclosed by `axis` and the
    cross product of a crossing direction with the edge normal of its
    entry edge.

    Parameters
    ----------
    mesh : Mesh
        An embedded mesh with face normals.
    angular_slack : int
        Exponent of the turning angle.
    alignment_slack : int
        Exponent of the alignment angles.
    axis : array_like, shape (3, )
        Reference direction.

    Returns
    -------
    callable
        ``w(a, b)`` for edge pairs `a` and `b`.
    """
    axis = linalg.unit(axis)

    def weight(a, b):
        phi = linalg.angle(traits.crossing(mesh, *a),
                           traits.crossing(mesh, *b))
        psi_a = traits.crossing_alignment(mesh, *a, axis)
        psi_b = traits.crossing_alignment(mesh, *b, axis)

        return (phi ** angular_slack +
                psi_a ** alignment_slack +
                psi_b ** alignment_slack)

    return weight
