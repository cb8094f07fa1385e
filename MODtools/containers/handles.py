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
from typing import Iterator, TYPE_CHECKING
from ..exceptions import InvalidHandleError


if TYPE_CHECKING:
    from .graph import Graph


class Vertex:
    """
    vertex descriptor. valid only for its own graph. Vertex() is null descriptor
    """
    __slots__ = ('_graph', '_index')

    def __init__(self, graph: 'Graph' = None, index: int = None):
        self._graph = graph
        self._index = index

    def __bool__(self):
        return self._graph is not None

    def __eq__(self, other):
        return isinstance(other, Vertex) and self._graph is other._graph and self._index == other._index

    def __hash__(self):
        return hash((None if self._graph is None else self._graph.id, self._index))

    def __repr__(self):
        if self._graph is None:
            return 'Vertex()'
        return f'Vertex({self._graph.name!r}, {self._index})'

    @property
    def is_null(self) -> bool:
        return self._graph is None

    @property
    def id(self) -> int:
        """
        internal index of vertex in graph
        """
        if self._graph is None:
            raise InvalidHandleError('null vertex')
        return self._index

    @property
    def graph(self) -> 'Graph':
        if self._graph is None:
            raise InvalidHandleError('null vertex')
        return self._graph

    @property
    def degree(self) -> int:
        return len(self.graph._bonds[self._index])

    @property
    def label(self) -> str:
        return self.graph.label_of(self)

    @property
    def incident_edges(self) -> 'IncidentEdgeRange':
        return self.graph.incident_edges(self)


class Edge:
    """
    edge descriptor. valid only for its own graph. Edge() is null descriptor
    """
    __slots__ = ('_graph', '_index')

    def __init__(self, graph: 'Graph' = None, index: int = None):
        self._graph = graph
        self._index = index

    def __bool__(self):
        return self._graph is not None

    def __eq__(self, other):
        return isinstance(other, Edge) and self._graph is other._graph and self._index == other._index

    def __hash__(self):
        return hash((None if self._graph is None else self._graph.id, self._index, 'edge'))

    def __repr__(self):
        if self._graph is None:
            return 'Edge()'
        n, m = self._graph._edges[self._index]
        return f'Edge({self._graph.name!r}, {n}, {m})'

    @property
    def is_null(self) -> bool:
        return self._graph is None

    @property
    def graph(self) -> 'Graph':
        if self._graph is None:
            raise InvalidHandleError('null edge')
        return self._graph

    @property
    def source(self) -> Vertex:
        return Vertex(self.graph, self._graph._edges[self._index][0])

    @property
    def target(self) -> Vertex:
        return Vertex(self.graph, self._graph._edges[self._index][1])

    @property
    def label(self) -> str:
        return self.graph.label_of(self)


class VertexRange:
    """
    restartable sequence of graph vertices in construction order
    """
    __slots__ = ('_graph',)

    def __init__(self, graph: 'Graph'):
        self._graph = graph

    def __len__(self):
        return len(self._graph._labels)

    def __iter__(self) -> Iterator[Vertex]:
        g = self._graph
        return (Vertex(g, n) for n in range(len(g._labels)))

    def __getitem__(self, item: int) -> Vertex:
        return Vertex(self._graph, range(len(self._graph._labels))[item])


class EdgeRange:
    """
    restartable sequence of graph edges in construction order
    """
    __slots__ = ('_graph',)

    def __init__(self, graph: 'Graph'):
        self._graph = graph

    def __len__(self):
        return len(self._graph._edges)

    def __iter__(self) -> Iterator[Edge]:
        g = self._graph
        return (Edge(g, n) for n in range(len(g._edges)))

    def __getitem__(self, item: int) -> Edge:
        return Edge(self._graph, range(len(self._graph._edges))[item])


class IncidentEdgeRange:
    __slots__ = ('_graph', '_index')

    def __init__(self, graph: 'Graph', index: int):
        self._graph = graph
        self._index = index

    def __len__(self):
        return len(self._graph._bonds[self._index])

    def __iter__(self) -> Iterator[Edge]:
        g = self._graph
        return (Edge(g, e) for e in g._bonds[self._index].values())


__all__ = ['Vertex', 'Edge', 'VertexRange', 'EdgeRange', 'IncidentEdgeRange']
