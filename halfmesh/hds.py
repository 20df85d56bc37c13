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

""" Halfedge data structure.

A closed, orientable 2-manifold polygon mesh is described by three
:class:`~halfmesh.arena.Arena` containers (vertices, halfedges, faces)
and six partial maps that link their items:

    - ``root``, ``face``, ``next``, ``twin`` for every halfedge,
    - ``vrep`` (one outgoing halfedge) for every vertex,
    - ``frep`` (one boundary halfedge) for every face.

These maps form the topology store. They are managed by the :class:`Mesh`
class and read exclusively through its accessor methods.

A mesh is built in one pass by :meth:`Mesh.from_faces`. Construction either
returns a mesh that passes all verification passes or raises a
:class:`~halfmesh.errors.StructuralError`; a partially linked mesh is never
returned.

Note
----
A mesh is not thread-safe. Concurrent reads are fine, any modification
requires exclusive access.
"""

import logging

from time import time

import numpy as np

import halfmesh.traits as traits

from halfmesh.arena import Arena
from halfmesh.arena import FaceHandle
from halfmesh.arena import HalfedgeHandle
from halfmesh.arena import VertexHandle
from halfmesh.errors import DanglingHandleError
from halfmesh.errors import DanglingReferenceError
from halfmesh.errors import DegenerateFaceError
from halfmesh.errors import DegreeError
from halfmesh.errors import InvariantError
from halfmesh.errors import MissingRelationError
from halfmesh.errors import NonManifoldError
from halfmesh.errors import NonWatertightError
from halfmesh.flags import Invariant
from halfmesh.flags import Relation
from halfmesh.flags import members


logger = logging.getLogger(__name__)

MAX_DEGREE = 1024
""" Default bound on the length of any face loop or vertex fan walk. """


class IndexMap:
    """ Bidirectional map between input indices and handles.

    Returned by :meth:`Mesh.from_faces` to translate between the caller's
    vertex (or face) indices and the handles of the new mesh.


    .. code-block:: python
       :linenos:

        mesh, vmap, fmap = Mesh.from_faces(faces)

        v = vmap[7]                 # handle of input vertex 7
        i = vmap.index(v)           # and back again, i == 7
    """

    def __init__(self):
        self._fwd = dict()
        self._inv = dict()

    def __repr__(self):
        return f'IndexMap({len(self._fwd)} entries)'

    def __len__(self):
        return len(self._fwd)

    def __iter__(self):
        """ Input indices in insertion order. """
        return iter(self._fwd)

    def __contains__(self, index):
        return index in self._fwd

    def __getitem__(self, index):
        """ Handle of an input index.

        Raises
        ------
        KeyError
            If `index` is not mapped.
        """
        return self._fwd[index]

    def add(self, index, handle):
        """ Map `index` to `handle` and vice versa.

        Raises
        ------
        ValueError
            If either side is mapped already.
        """
        if index in self._fwd or handle in self._inv:
            raise ValueError(f'{index!r} or {handle!r} already mapped')

        self._fwd[index] = handle
        self._inv[handle] = index

    def index(self, handle):
        """ Input index of a handle.

        Raises
        ------
        KeyError
            If `handle` is not mapped.
        """
        return self._inv[handle]

    def handles(self):
        """ Mapped handles in insertion order. """
        return list(self._fwd.values())

    def items(self):
        """ `(index, handle)` pairs in insertion order. """
        return list(self._fwd.items())


class Mesh:
    """ Mesh kernel.

    An empty mesh is rarely useful on its own. Meshes are typically
    created via :meth:`from_faces`.

    Parameters
    ----------
    max_degree : int, optional
        Bound on the number of steps of any face loop or vertex fan walk.
        Defaults to :data:`MAX_DEGREE`. Walks that do not close within the
        bound indicate a corrupted data structure.
    checked : bool, optional
        Referential-checked mode. Every relation accessor additionally
        verifies that the stored target is a live item.
    """

    def __init__(self, *, max_degree=None, checked=False):
        self._verts = Arena(VertexHandle)
        self._halfs = Arena(HalfedgeHandle)
        self._faces = Arena(FaceHandle)

        # The topology store, one partial map per relation.
        self._rel = {relation: dict() for relation in members(Relation.ALL)}

        self._max_degree = MAX_DEGREE if max_degree is None else max_degree
        self._checked = checked

        if self._max_degree < 3:
            raise ValueError(f'max_degree must be >= 3, got {max_degree}')

    def __repr__(self):
        return (f'Mesh(verts={len(self._verts)}, ' +
                f'halfedges={len(self._halfs)}, faces={len(self._faces)})')

    def __iter__(self):
        """ Face iterator.

        Yields
        ------
        FaceHandle
            Next live face in slot order.
        """
        return iter(self._faces)

    @property
    def vertices(self):
        """ Vertex container.

        Read access to the vertex arena. It should not be modified
        directly.

        :type: ~halfmesh.arena.Arena
        """
        return self._verts

    @property
    def halfedges(self):
        """ Halfedge container.

        :type: ~halfmesh.arena.Arena
        """
        return self._halfs

    @property
    def faces(self):
        """ Face container.

        :type: ~halfmesh.arena.Arena
        """
        return self._faces

    @property
    def checked(self):
        """ Referential-checked mode.

        :type: bool
        """
        return self._checked

    @checked.setter
    def checked(self, value):
        self._checked = bool(value)

    @property
    def max_degree(self):
        """ Walk length bound.

        :type: int
        """
        return self._max_degree

    @property
    def nr_verts(self):
        """ Number of vertices.

        :type: int
        """
        return len(self._verts)

    @property
    def nr_edges(self):
        """ Number of halfedges.

        Twice the number of undirected edges of a valid mesh.

        :type: int
        """
        return len(self._halfs)

    @property
    def nr_faces(self):
        """ Number of faces.

        :type: int
        """
        return len(self._faces)

    @property
    def size(self):
        """ Mesh size.

        The value :math:`(v, e, f)` holds the number of vertices, the
        number of undirected edges, and the number of faces.

        :type: (int, int, int)
        """
        return len(self._verts), len(self._halfs) // 2, len(self._faces)

    @property
    def points(self):
        """ Vertex coordinate array.

        Positions stacked in vertex slot order. This is a copy, changes
        to the array do not affect the mesh.

        :type: ~numpy.ndarray

        Raises
        ------
        AttributeError
            If a vertex has no position.
        """
        return np.array([self.position(v) for v in self._verts], dtype=float)

    # -- topology store ---------------------------------------------------

    def _source(self, relation):
        if relation in Relation.EDGE:
            return self._halfs

        return self._verts if relation is Relation.VREP else self._faces

    def _target(self, relation):
        if relation is Relation.ROOT:
            return self._verts

        return self._faces if relation is Relation.FACE else self._halfs

    def _get(self, relation, handle):
        try:
            target = self._rel[relation][handle]
        except KeyError:
            raise MissingRelationError(relation, handle) from None

        if self._checked and target not in self._target(relation):
            raise DanglingReferenceError(relation, handle, target)

        return target

    def _link(self, relation, handle, target):
        """ Set a relation.

        Low level write access to the topology store. No consistency
        checks are performed, callers have to restore all invariants.
        """
        self._rel[relation][handle] = target

    def _unlink(self, relation, handle):
        """ Clear a relation, if set.
        """
        self._rel[relation].pop(handle, None)

    def root(self, halfedge):
        """ Origin vertex of a halfedge.

        Raises
        ------
        MissingRelationError
            If the relation is undefined.
        DanglingReferenceError
            In checked mode, if the stored vertex is not live.
        """
        return self._get(Relation.ROOT, halfedge)

    def face(self, halfedge):
        """ Face of a halfedge.

        Raises
        ------
        MissingRelationError
            If the relation is undefined.
        DanglingReferenceError
            In checked mode, if the stored face is not live.
        """
        return self._get(Relation.FACE, halfedge)

    def next(self, halfedge):
        """ Successor of a halfedge in its face loop.

        Raises
        ------
        MissingRelationError
            If the relation is undefined.
        DanglingReferenceError
            In checked mode, if the stored halfedge is not live.
        """
        return self._get(Relation.NEXT, halfedge)

    def twin(self, halfedge):
        """ Oppositely oriented halfedge.

        Raises
        ------
        MissingRelationError
            If the relation is undefined.
        DanglingReferenceError
            In checked mode, if the stored halfedge is not live.
        """
        return self._get(Relation.TWIN, halfedge)

    def vrep(self, vertex):
        """ Representative outgoing halfedge of a vertex.

        Raises
        ------
        MissingRelationError
            If the relation is undefined.
        DanglingReferenceError
            In checked mode, if the stored halfedge is not live.
        """
        return self._get(Relation.VREP, vertex)

    def frep(self, face):
        """ Representative boundary halfedge of a face.

        Raises
        ------
        MissingRelationError
            If the relation is undefined.
        DanglingReferenceError
            In checked mode, if the stored halfedge is not live.
        """
        return self._get(Relation.FREP, face)

    # -- verification -----------------------------------------------------

    def verify_properties(self):
        """ Completeness check.

        Every halfedge has all four relations defined, every vertex and
        every face has a representative halfedge.

        Raises
        ------
        MissingRelationError
            For the first undefined relation found.
        """
        for relation in members(Relation.ALL):
            stored = self._rel[relation]

            for handle in self._source(relation):
                if handle not in stored:
                    raise MissingRelationError(relation, handle)

    def verify_references(self):
        """ Referential integrity check.

        Every key and every value of the topology store refers to a live
        item of the appropriate container.

        Raises
        ------
        DanglingHandleError
            If a relation is stored for an item that is no longer live.
        DanglingReferenceError
            If a relation refers to an item that is no longer live.
        """
        for relation in members(Relation.ALL):
            source = self._source(relation)
            target = self._target(relation)

            for handle, value in self._rel[relation].items():
                if handle not in source:
                    raise DanglingHandleError(handle)

                if value not in target:
                    raise DanglingReferenceError(relation, handle, value)

    def verify_invariants(self):
        """ Structural invariant check.

        Assumes that :meth:`verify_properties` and :meth:`verify_references`
        passed. For every halfedge ``e`` checks

            - ``twin(twin(e)) == e``,
            - ``root(next(twin(e))) == root(e)``,
            - ``face(next(e)) == face(e)``,
            - repeated ``next`` returns to ``e`` within :attr:`max_degree`
              steps,

        and that representatives are incident to the item they represent.

        Raises
        ------
        InvariantError
            For the first violation found.
        """
        for h in self._halfs:
            twin = self.twin(h)

            if self.twin(twin) != h:
                raise InvariantError(Invariant.TWIN, h)

            if self.root(self.next(twin)) != self.root(h):
                raise InvariantError(Invariant.ROOT, h)

            if self.face(self.next(h)) != self.face(h):
                raise InvariantError(Invariant.FACE, h)

            self._walk(h, self.next, Invariant.LOOP)

        for v in self._verts:
            if self.root(self.vrep(v)) != v:
                raise InvariantError(Invariant.REP, v, 'vrep does not start here')

        for f in self._faces:
            if self.face(self.frep(f)) != f:
                raise InvariantError(Invariant.REP, f, 'frep lies elsewhere')

    def verify(self):
        """ Run all three verification passes in order.
        """
        self.verify_properties()
        self.verify_references()
        self.verify_invariants()

    # -- construction -----------------------------------------------------

    @classmethod
    def from_faces(cls, faces, points=None, normals=None, *, max_degree=None,
                   checked=False, verify=True, quiet=True):
        """ Build a mesh from face definitions.

        Parameters
        ----------
        faces : sequence of sequence of int
            Face definitions. Each face lists at least three distinct vertex
            indices, consecutive indices (and the last and first index)
            define its edges. Indices need not be contiguous.
        points : array_like or dict, optional
            Vertex positions indexed by input vertex index. Arrays of
            shape (n, 3) are indexed by non-negative indices, use a dict for
            other indices.
        normals : array_like, optional
            Face normals, one per face in input order. Computed from
            `points` if omitted.
        max_degree : int, optional
            Walk length bound, see :class:`Mesh`.
        checked : bool, optional
            Referential-checked mode, see :class:`Mesh`.
        verify : bool, optional
            Run all verification passes before returning.
        quiet : bool, optional
            Suppress console output.

        Returns
        -------
        mesh : Mesh
            The new mesh.
        vmap : IndexMap
            Input vertex index to vertex handle map.
        fmap : IndexMap
            Input face index to face handle map.

        Raises
        ------
        DegenerateFaceError
            If a face has less than three distinct vertices.
        DegreeError
            If a face or vertex degree exceeds `max_degree`.
        NonManifoldError
            If a directed edge belongs to two faces or if the faces around
            a vertex do not form a single fan.
        NonWatertightError
            If a directed edge has no oppositely oriented counterpart.
        ValueError
            If `points` or `normals` do not match the face data.


        A single tetrahedron:

        >>> faces = [[0, 2, 1], [0, 1, 3], [1, 2, 3], [0, 3, 2]]
        >>> mesh, vmap, fmap = Mesh.from_faces(faces)
        >>> mesh.size
        (4, 6, 4)
        """
        CBOLD = '\33[1m'                    # bold text, white on black
        CEND = '\33[0m'

        start = time()

        mesh = cls(max_degree=max_degree, checked=checked)
        vmap, fmap = mesh._build(faces)

        if points is not None:
            mesh._embed_points(points, vmap)

        if normals is not None:
            mesh._embed_normals(normals, fmap)
        elif points is not None:
            traits.compute_normals(mesh)

        if verify:
            mesh.verify()

        logger.debug('built mesh: %d vertices, %d halfedges, %d faces',
                     mesh.nr_verts, mesh.nr_edges, mesh.nr_faces)

        if not quiet:
            print(f'built {CBOLD}{mesh!r}{CEND} ' +
                  f'({time()-start:.3f} sec, {verify=})')
            print(f'\t\u251c\u2500 {mesh.nr_verts} vertices')
            print(f'\t\u251c\u2500 {mesh.nr_edges} halfedges')
            print(f'\t\u2514\u2500 {mesh.nr_faces} faces')

        return mesh, vmap, fmap

    def _build(self, faces):
        """ Link the combinatorics of a face list.

        Internal helper of :meth:`from_faces`, only to be called on an
        empty mesh.
        """
        assert not self._verts and not self._halfs and not self._faces

        faces = [list(face) for face in faces]

        for k, face in enumerate(faces):
            if len(face) < 3 or len(set(face)) != len(face):
                raise DegenerateFaceError(k, face)

            if len(face) > self._max_degree:
                raise DegreeError('face', k, len(face), self._max_degree)

        vmap = IndexMap()
        fmap = IndexMap()

        # Vertices in order of first appearance.
        for face in faces:
            for i in face:
                if i not in vmap:
                    vmap.add(i, self._verts.insert(dict()))

        # Halfedges of each face with their directed index pairs. The first
        # halfedge of a face is its representative. A vertex is represented
        # by the first outgoing halfedge created.
        directed = []
        vhout = {v: 0 for v in vmap.handles()}

        for k, face in enumerate(faces):
            f = self._faces.insert(dict())
            fmap.add(k, f)

            loop = []
            n = len(face)

            for j, i in enumerate(face):
                v = vmap[i]
                h = self._halfs.insert(dict())

                self._link(Relation.ROOT, h, v)
                self._link(Relation.FACE, h, f)

                if v not in self._rel[Relation.VREP]:
                    self._link(Relation.VREP, v, h)

                vhout[v] += 1
                loop.append(h)
                directed.append(((i, face[(j + 1) % n]), h))

            for j in range(n):
                self._link(Relation.NEXT, loop[j], loop[(j + 1) % n])

            self._link(Relation.FREP, f, loop[0])

        # Twin resolution needs all halfedges of all faces. A directed edge
        # may be claimed only once.
        pairs = dict()

        for pair, h in directed:
            other = pairs.setdefault(pair, h)

            if other != h:
                msg = f'edge {pair} is claimed by {other!r} and {h!r}'
                raise NonManifoldError(msg, pair=pair, handles=(other, h))

        for (a, b), h in pairs.items():
            twin = pairs.get((b, a))

            if twin is None:
                raise NonWatertightError((a, b), h)

            self._link(Relation.TWIN, h, twin)

        # Every outgoing halfedge of a manifold vertex is reached from its
        # representative. Otherwise several fans share the vertex.
        for i, v in vmap.items():
            if vhout[v] > self._max_degree:
                raise DegreeError('vertex', i, vhout[v], self._max_degree)

            fan = self._walk(self.vrep(v), self._rotate, Invariant.ROOT)

            if len(fan) != vhout[v]:
                msg = (f'vertex {i} is non-manifold, {vhout[v]} outgoing ' +
                       f'halfedges but a fan of {len(fan)}')
                raise NonManifoldError(msg, handles=fan, vertex=i)

        return vmap, fmap

    def _embed_points(self, points, vmap):
        rows = not isinstance(points, dict)

        if rows:
            lookup = np.asarray(points, dtype=float)

            if lookup.ndim != 2 or lookup.shape[1] != 3:
                raise ValueError(f'points must have shape (n, 3), got ' +
                                 f'{lookup.shape}')

            unused = [i for i in range(len(lookup)) if i not in vmap]
        else:
            lookup = points
            unused = [i for i in points if i not in vmap]

        for i, v in vmap.items():
            # Array rows are addressed by non-negative indices only, numpy
            # would wrap negative ones around.
            if rows and not (isinstance(i, (int, np.integer))
                             and 0 <= i < len(lookup)):
                raise ValueError(f'no position for vertex index {i!r}')

            try:
                point = np.asarray(lookup[i], dtype=float)
            except (IndexError, KeyError, TypeError):
                raise ValueError(f'no position for vertex index {i!r}') \
                    from None

            if point.shape != (3, ):
                raise ValueError(f'position of vertex index {i!r} must ' +
                                 f'have shape (3, ), got {point.shape}')

            self.set_position(v, point)

        if unused:
            logger.warning('%d positions belong to isolated vertices and '
                           'were dropped', len(unused))

    def _embed_normals(self, normals, fmap):
        normals = np.asarray(normals, dtype=float)

        if normals.ndim != 2 or normals.shape[1] != 3:
            raise ValueError(f'normals must have shape (n, 3), got ' +
                             f'{normals.shape}')

        if len(normals) != len(fmap):
            raise ValueError(f'number of normals ({len(normals)}) != ' +
                             f'number of faces ({len(fmap)})')

        for k, f in fmap.items():
            self.set_normal(f, normals[k])

    # -- payloads ---------------------------------------------------------

    def _arena(self, handle):
        if isinstance(handle, VertexHandle):
            return self._verts
        elif isinstance(handle, HalfedgeHandle):
            return self._halfs
        elif isinstance(handle, FaceHandle):
            return self._faces

        raise TypeError(f'expected a mesh item handle, got {handle!r}')

    def payload(self, handle):
        """ Attribute payload of a mesh item.

        The payload is a :class:`dict` that serves as extension slot for
        user defined per-item data.

        Raises
        ------
        DanglingHandleError
            If `handle` is not live.
        """
        return self._arena(handle).get(handle)

    def position(self, vertex):
        """ Vertex coordinates.

        Raises
        ------
        AttributeError
            If no position was assigned.
        """
        try:
            return self._verts.get(vertex)['position']
        except KeyError:
            raise AttributeError(f'{vertex!r} has no position') from None

    def set_position(self, vertex, value):
        """ Assign vertex coordinates.
        """
        self._verts.get(vertex)['position'] = np.array(value, dtype=float)

    def normal(self, face):
        """ Face normal.

        Raises
        ------
        AttributeError
            If no normal was assigned.
        """
        try:
            return self._faces.get(face)['normal']
        except KeyError:
            raise AttributeError(f'{face!r} has no normal') from None

    def set_normal(self, face, value):
        """ Assign a face normal.
        """
        self._faces.get(face)['normal'] = np.array(value, dtype=float)

    def color(self, face, default=None):
        """ Face color, or `default` if unset.
        """
        return self._faces.get(face).get('color', default)

    def set_color(self, face, value):
        """ Assign a face color.
        """
        self._faces.get(face)['color'] = value

    # -- traversal --------------------------------------------------------

    def _walk(self, start, step, kind):
        """ Collect the orbit of `start` under `step`.

        Raises
        ------
        InvariantError
            If the walk does not return to `start` within
            :attr:`max_degree` steps.
        """
        loop = [start]
        h = step(start)

        while h != start:
            if len(loop) >= self._max_degree:
                raise InvariantError(kind, start, 'walk did not close ' +
                                     f'within {self._max_degree} steps')

            loop.append(h)
            h = step(h)

        return loop

    def _rotate(self, halfedge):
        return self.next(self.twin(halfedge))

    def toor(self, halfedge):
        """ Target vertex of a halfedge.
        """
        return self.root(self.twin(halfedge))

    def endpoints(self, halfedge):
        """ Origin and target vertex of a halfedge.

        Returns
        -------
        tuple(VertexHandle, VertexHandle)
        """
        return self.root(halfedge), self.root(self.twin(halfedge))

    def faces_of(self, halfedge):
        """ The two faces incident to the edge of a halfedge.

        Returns
        -------
        tuple(FaceHandle, FaceHandle)
            Face of `halfedge` followed by the face of its twin.
        """
        return self.face(halfedge), self.face(self.twin(halfedge))

    def prev(self, halfedge):
        """ Predecessor of a halfedge in its face loop.
        """
        return self._walk(halfedge, self.next, Invariant.LOOP)[-1]

    def outgoing(self, vertex):
        """ Outgoing halfedges of a vertex.

        The fan is walked from the representative halfedge by repeated
        ``next(twin(e))`` steps until it closes.

        Returns
        -------
        list[HalfedgeHandle]
            The complete cycle of outgoing halfedges.

        Raises
        ------
        MissingRelationError
            For a vertex without representative.
        InvariantError
            If the fan does not close.
        """
        return self._walk(self.vrep(vertex), self._rotate, Invariant.ROOT)

    def edges(self, face):
        """ Boundary halfedges of a face.

        Returns
        -------
        list[HalfedgeHandle]
            Halfedge loop starting at the representative halfedge.

        Raises
        ------
        MissingRelationError
            For a face without representative.
        InvariantError
            If the loop does not close.
        """
        return self._walk(self.frep(face), self.next, Invariant.LOOP)

    def star(self, vertex):
        """ Faces incident to a vertex, in fan order.
        """
        return [self.face(h) for h in self.outgoing(vertex)]

    def corners(self, face):
        """ Vertices of a face, in loop order.
        """
        return [self.root(h) for h in self.edges(face)]

    def vneighbors(self, vertex):
        """ Vertices adjacent to a vertex, in fan order.
        """
        return [self.toor(h) for h in self.outgoing(vertex)]

    def fneighbors(self, face):
        """ Faces sharing an edge with a face, in loop order.
        """
        return [self.face(self.twin(h)) for h in self.edges(face)]

    def degree(self, vertex):
        """ Number of edges incident to a vertex.
        """
        return len(self.outgoing(vertex))

    def valence(self, face):
        """ Number of corners of a face.
        """
        return len(self.edges(face))

    def edge_between_verts(self, a, b):
        """ Edge connecting two vertices.

        Returns
        -------
        tuple(HalfedgeHandle, HalfedgeHandle) or None
            The halfedge from `a` to `b` and its twin, or :obj:`None` if
            the vertices are not adjacent.
        """
        targets = set(self.outgoing(b))

        for h in self.outgoing(a):
            twin = self.twin(h)

            if twin in targets:
                return h, twin

        return None

    def edge_between_faces(self, a, b):
        """ Edge shared by two faces.

        Returns
        -------
        tuple(HalfedgeHandle, HalfedgeHandle) or None
            The halfedge of `a` on the common edge and its twin in `b`, or
            :obj:`None` if the faces are not adjacent.
        """
        targets = set(self.edges(b))

        for h in self.edges(a):
            twin = self.twin(h)

            if twin in targets:
                return h, twin

        return None

    # -- export -----------------------------------------------------------

    def corner_lists(self, vmap=None):
        """ Index based face definitions.

        Parameters
        ----------
        vmap : IndexMap, optional
            Map used to translate vertices to indices. By default vertices
            are numbered in slot order.

        Returns
        -------
        list[list[int]]
            One corner list per face, in face slot order.


        Rebuilding from the corner lists yields an isomorphic mesh:

        >>> other, _, _ = Mesh.from_faces(mesh.corner_lists())
        """
        if vmap is None:
            index = {v: i for i, v in enumerate(self._verts)}.__getitem__
        else:
            index = vmap.index

        return [[index(v) for v in self.corners(f)] for f in self._faces]

    def dump(self):
        """ Structural dump.

        Handles are replaced by their position in slot order. Payload
        arrays are converted to lists.

        Returns
        -------
        dict
            Keys ``'vertices'``, ``'halfedges'``, and ``'faces'``.

        Note
        ----
        The layout of the dump is meant for inspection and debugging and
        is not a stable file format.
        """
        vid = {v: i for i, v in enumerate(self._verts)}
        hid = {h: i for i, h in enumerate(self._halfs)}
        fid = {f: i for i, f in enumerate(self._faces)}

        def plain(payload):
            return {key: value.tolist() if isinstance(value, np.ndarray)
                    else value for key, value in payload.items()}

        return {
            'vertices': [dict(rep=hid[self.vrep(v)], **plain(data))
                         for v, data in self._verts.items()],
            'halfedges': [dict(root=vid[self.root(h)],
                               face=fid[self.face(h)],
                               next=hid[self.next(h)],
                               twin=hid[self.twin(h)], **plain(data))
                          for h, data in self._halfs.items()],
            'faces': [dict(rep=hid[self.frep(f)], **plain(data))
                      for f, data in self._faces.items()],
        }
