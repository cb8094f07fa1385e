# -*- coding: utf-8 -*-
#
#  Copyright 2026 MODtools authors
#  This file is part of MODtools.
#
#  MODtools is free software; you can redistribute it and/or modify
#  it under the terms of the GNU Lesser General Public License as published by
#  the Free Software Foundation; either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  GNU Lesser General Public License for more details.
#
#  You should have received a copy of the GNU Lesser General Public License
#  along with this program; if not, see <https://www.gnu.org/licenses/>.
#
from CachedMethods import cached_property
from collections import Counter
from itertools import count
from random import Random
from threading import Lock
from typing import Dict, Iterable, Optional, Tuple, Union
from .handles import Vertex, Edge, VertexRange, EdgeRange, IncidentEdgeRange
from ..algorithms.calculate2d import Calculate2D
from ..algorithms.depict import Depict
from ..algorithms.gml import GML
from ..algorithms.graphdfs import GraphDFS
from ..algorithms.isomorphism import Isomorphism
from ..algorithms.morgan import Morgan
from ..algorithms.properties import Properties, PropertiesCalculator
from ..algorithms.smiles import Smiles
from ..exceptions import FormatError, InvalidHandleError
from ..labels import parse_atom_label, is_bond_label


_ids = count()
_ids_lock = Lock()


def _next_id() -> int:
    with _ids_lock:
        return next(_ids)


class Graph(Isomorphism, Smiles, GraphDFS, GML, Morgan, Calculate2D, Properties, Depict):
    """
    Undirected labeled graph without loops and parallel edges.
    Structure is immutable after construction. Name, cached energy and molar mass and depiction settings are mutable.

    Vertices are numbered in construction order starting from 0.
    """
    __slots__ = ('_labels', '_edges', '_edge_labels', '_bonds', '_external_ids', '_plane', '_id', '_name',
                 '_energy', '_molar_mass', '_image', '_image_name', '_image_command', '__dict__', '__weakref__')

    calculator: PropertiesCalculator = PropertiesCalculator()

    def __init__(self, vertices: Iterable[str], edges: Iterable[Tuple[int, int, str]] = (), *,
                 external_ids: Optional[Dict[int, int]] = None,
                 plane: Optional[Dict[int, Tuple[float, float]]] = None):
        """
        :param vertices: labels of vertices
        :param edges: (vertex index, vertex index, label) triples
        :param external_ids: external id to vertex index mapping
        :param plane: 2D coordinates hints of vertices
        """
        labels = tuple(vertices)
        for n, label in enumerate(labels):
            if not isinstance(label, str) or not label:
                raise FormatError(f'vertex {n}: label should be non-empty string')

        size = len(labels)
        bonds = tuple({} for _ in range(size))
        pairs = []
        edge_labels = []
        for i, (n, m, label) in enumerate(edges):
            if not isinstance(n, int) or not isinstance(m, int) or not 0 <= n < size or not 0 <= m < size:
                raise FormatError(f'edge {i} ({n}, {m}): vertex not found')
            if n == m:
                raise FormatError(f'edge {i} ({n}, {m}): loops impossible')
            if m in bonds[n]:
                raise FormatError(f'edge {i} ({n}, {m}): vertices already connected')
            if not isinstance(label, str) or not label:
                raise FormatError(f'edge {i} ({n}, {m}): label should be non-empty string')
            bonds[n][m] = bonds[m][n] = i
            pairs.append((n, m))
            edge_labels.append(label)

        if external_ids:
            for k, n in external_ids.items():
                if not isinstance(k, int) or not isinstance(n, int) or not 0 <= n < size:
                    raise FormatError(f'external id {k}: invalid vertex {n}')
            external_ids = dict(external_ids)
        else:
            external_ids = {}

        self._labels: Tuple[str, ...] = labels
        self._edges: Tuple[Tuple[int, int], ...] = tuple(pairs)
        self._edge_labels: Tuple[str, ...] = tuple(edge_labels)
        self._bonds: Tuple[Dict[int, int], ...] = bonds
        self._external_ids: Dict[int, int] = external_ids
        self._plane: Dict[int, Tuple[float, float]] = dict(plane) if plane else {}
        self.__init_meta()

    def __init_meta(self):
        self._id = _next_id()
        self._name = f'g_{self._id}'
        self._energy = None
        self._molar_mass = None
        self._image = None
        self._image_name = None
        self._image_command = ''

    def __getstate__(self):
        return {'labels': self._labels, 'edges': self._edges, 'edge_labels': self._edge_labels,
                'external_ids': self._external_ids, 'plane': self._plane, 'name': self._name,
                'energy': self._energy, 'molar_mass': self._molar_mass, 'image_command': self._image_command}

    def __setstate__(self, state):
        self._labels = state['labels']
        self._edges = state['edges']
        self._edge_labels = state['edge_labels']
        self._bonds = bonds = tuple({} for _ in self._labels)
        for i, (n, m) in enumerate(self._edges):
            bonds[n][m] = bonds[m][n] = i
        self._external_ids = state['external_ids']
        self._plane = state['plane']
        self.__init_meta()  # unpickled graph is new instance
        self._name = state['name']
        self._energy = state['energy']
        self._molar_mass = state['molar_mass']
        self._image_command = state['image_command']

    def __len__(self):
        return len(self._labels)

    def __iter__(self):
        return iter(VertexRange(self))

    def __lt__(self, other: 'Graph'):
        return self._id < other._id

    def __repr__(self):
        return f'{self.__class__.__name__}({self._name!r})'

    @property
    def id(self) -> int:
        """
        unique instance id among graphs
        """
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str):
        self._name = name

    @property
    def vertices_count(self) -> int:
        return len(self._labels)

    @property
    def edges_count(self) -> int:
        return len(self._edges)

    def vertices(self) -> VertexRange:
        """
        all vertices in construction order
        """
        return VertexRange(self)

    def edges(self) -> EdgeRange:
        """
        all edges in construction order
        """
        return EdgeRange(self)

    def incident_edges(self, vertex: Vertex) -> IncidentEdgeRange:
        return IncidentEdgeRange(self, self._vertex_index(vertex))

    def label_of(self, item: Union[Vertex, Edge]) -> str:
        if isinstance(item, Edge):
            return self._edge_labels[self._edge_index(item)]
        return self._labels[self._vertex_index(item)]

    def vertex_by_external_id(self, external_id: int) -> Vertex:
        """
        vertex loaded with given id from external format.

        :return: null vertex if id not used or graph data has no unique ids
        """
        try:
            return Vertex(self, self._external_ids[external_id])
        except KeyError:
            return Vertex()

    def vertex_label_count(self, label: str) -> int:
        return self._vertex_labels_counter.get(label, 0)

    def edge_label_count(self, label: str) -> int:
        return self._edge_labels_counter.get(label, 0)

    @cached_property
    def is_molecule(self) -> bool:
        """
        all vertices are atoms and all edges are bonds
        """
        return all(parse_atom_label(x) for x in self._labels) and all(is_bond_label(x) for x in self._edge_labels)

    @cached_property
    def linear_encoding(self) -> str:
        """
        SMILES for molecules and GraphDFS for other graphs
        """
        if self.is_molecule:
            return self.smiles
        return self.graph_dfs

    def make_permutation(self, seed: Optional[int] = None) -> 'Graph':
        """
        isomorphic copy of graph with randomly permuted vertices and edges order.
        External ids are not copied.

        :param seed: random generator seed
        """
        rnd = Random(seed)
        order = list(range(len(self._labels)))
        rnd.shuffle(order)
        new = {n: i for i, n in enumerate(order)}

        edges = []
        for (n, m), label in zip(self._edges, self._edge_labels):
            n, m = new[n], new[m]
            if rnd.random() < .5:
                n, m = m, n
            edges.append((n, m, label))
        rnd.shuffle(edges)

        copy = self.__class__((self._labels[n] for n in order), edges,
                              plane={new[n]: xy for n, xy in self._plane.items()})
        copy._name = self._name
        copy._energy = self._energy
        copy._molar_mass = self._molar_mass
        return copy

    @cached_property
    def _vertex_labels_counter(self) -> Counter:
        return Counter(self._labels)

    @cached_property
    def _edge_labels_counter(self) -> Counter:
        return Counter(self._edge_labels)

    def _vertex_index(self, vertex: Vertex) -> int:
        if not isinstance(vertex, Vertex):
            raise InvalidHandleError(f'vertex descriptor expected, got {type(vertex).__name__}')
        if vertex._graph is not self:
            raise InvalidHandleError('null vertex' if vertex._graph is None else 'vertex of another graph')
        return vertex._index

    def _edge_index(self, edge: Edge) -> int:
        if not isinstance(edge, Edge):
            raise InvalidHandleError(f'edge descriptor expected, got {type(edge).__name__}')
        if edge._graph is not self:
            raise InvalidHandleError('null edge' if edge._graph is None else 'edge of another graph')
        return edge._index


__all__ = ['Graph']
