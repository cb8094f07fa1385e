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
from io import StringIO, TextIOWrapper
from logging import warning
from pathlib import Path
from typing import List, Tuple, Union
from ..containers import Graph
from ..exceptions import IncorrectGML


class GMLRead:
    """
    GML graph reader. file should contain single `graph [ ... ]` record with `node` and `edge` records.

    node records: `node [ id 0 label "C" vis2D [ x 0.0 y 0.0 ] ]`, ids are any distinct integers.
    edge records: `edge [ source 0 target 1 label "-" ]`.
    """
    def __init__(self, file: Union[str, Path, TextIOWrapper, StringIO]):
        if isinstance(file, str):
            self.__file = open(file)
            self.__is_buffer = False
        elif isinstance(file, Path):
            self.__file = file.open()
            self.__is_buffer = False
        elif isinstance(file, (TextIOWrapper, StringIO)):
            self.__file = file
            self.__is_buffer = True
        else:
            raise TypeError('invalid file. TextIOWrapper, StringIO subclasses possible')

    def close(self, force=False):
        if not self.__is_buffer or force:
            self.__file.close()

    def __enter__(self):
        return self

    def __exit__(self, _type, value, traceback):
        self.close()

    def read(self) -> Graph:
        return self.parse(self.__file.read())

    @classmethod
    def parse(cls, text: str) -> Graph:
        """
        :raise IncorrectGML: invalid text
        """
        tokens = cls._tokenize(text)
        records, i = cls._parse_list(tokens, 0)
        if i != len(tokens):
            raise IncorrectGML('unbalanced ]')
        graphs = [v for k, v in records if k == 'graph']
        if len(graphs) != 1:
            raise IncorrectGML('single graph record expected')
        for k, _ in records:
            if k != 'graph':
                warning(f'GML: unknown key {k} ignored')
        if not isinstance(graphs[0], list):
            raise IncorrectGML('graph record should be list')
        return cls._convert_structure(graphs[0])

    @staticmethod
    def _tokenize(text: str) -> List[tuple]:
        tokens = []
        i = 0
        size = len(text)
        while i < size:
            s = text[i]
            if s.isspace():
                i += 1
            elif s == '#':  # comment till end of line
                j = text.find('\n', i)
                i = size if j == -1 else j + 1
            elif s in '[]':
                tokens.append((s, None))
                i += 1
            elif s == '"':
                value = []
                j = i + 1
                while True:
                    if j >= size:
                        raise IncorrectGML(f'unclosed string at position {i}')
                    c = text[j]
                    if c == '\\' and j + 1 < size:
                        value.append(text[j + 1])
                        j += 2
                    elif c == '"':
                        break
                    else:
                        value.append(c)
                        j += 1
                tokens.append(('value', ''.join(value)))
                i = j + 1
            else:
                j = i
                while j < size and not text[j].isspace() and text[j] not in '[]"':
                    j += 1
                word = text[i:j]
                if word[0].isalpha() or word[0] == '_':
                    tokens.append(('key', word))
                else:
                    try:
                        value = int(word)
                    except ValueError:
                        try:
                            value = float(word)
                        except ValueError:
                            raise IncorrectGML(f'invalid token {word!r} at position {i}')
                    tokens.append(('value', value))
                i = j
        return tokens

    @classmethod
    def _parse_list(cls, tokens: List[tuple], i: int) -> Tuple[List[Tuple[str, object]], int]:
        records = []
        size = len(tokens)
        while i < size:
            kind, key = tokens[i]
            if kind == ']':
                return records, i
            elif kind != 'key':
                raise IncorrectGML(f'key expected, got {key!r}')
            i += 1
            if i == size:
                raise IncorrectGML(f'value of {key} expected')
            kind, value = tokens[i]
            if kind == '[':
                value, i = cls._parse_list(tokens, i + 1)
                if i == size:
                    raise IncorrectGML(f'unclosed list of {key}')
            elif kind != 'value':
                raise IncorrectGML(f'value of {key} expected')
            records.append((key, value))
            i += 1
        return records, i

    @staticmethod
    def _convert_structure(records: List[Tuple[str, object]]) -> Graph:
        labels = []
        plane = {}
        mapping = {}
        edges = []
        name = None
        for key, value in records:
            if key == 'node':
                record = f'node {len(labels)}'
                if not isinstance(value, list):
                    raise IncorrectGML(f'{record}: list expected')
                node = {}
                for k, v in value:
                    if k in ('id', 'label', 'vis2D'):
                        node[k] = v
                    else:
                        warning(f'GML {record}: unknown key {k} ignored')
                if not isinstance(node.get('id'), int):
                    raise IncorrectGML(f'{record}: integer id required')
                record = f'node {node["id"]}'
                if not isinstance(node.get('label'), str) or not node['label']:
                    raise IncorrectGML(f'{record}: non-empty string label required')
                if node['id'] in mapping:
                    raise IncorrectGML(f'{record}: duplicate id')
                n = mapping[node['id']] = len(labels)
                labels.append(node['label'])
                if 'vis2D' in node:
                    coords = node['vis2D']
                    coords = dict(coords) if isinstance(coords, list) else {}
                    x, y = coords.get('x'), coords.get('y')
                    if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
                        raise IncorrectGML(f'{record}: vis2D should contain numeric x and y')
                    plane[n] = (float(x), float(y))
            elif key == 'edge':
                record = f'edge {len(edges)}'
                if not isinstance(value, list):
                    raise IncorrectGML(f'{record}: list expected')
                edge = {}
                for k, v in value:
                    if k in ('source', 'target', 'label'):
                        edge[k] = v
                    else:
                        warning(f'GML {record}: unknown key {k} ignored')
                if not isinstance(edge.get('source'), int) or not isinstance(edge.get('target'), int):
                    raise IncorrectGML(f'{record}: integer source and target required')
                record = f'edge {len(edges)} ({edge["source"]}, {edge["target"]})'
                if not isinstance(edge.get('label'), str) or not edge['label']:
                    raise IncorrectGML(f'{record}: non-empty string label required')
                edges.append((edge['source'], edge['target'], edge['label']))
            elif key == 'name':
                if not isinstance(value, str):
                    raise IncorrectGML('graph name should be string')
                name = value
            else:
                warning(f'GML graph: unknown key {key} ignored')

        bonds = []
        seen = set()
        for i, (n, m, label) in enumerate(edges):
            record = f'edge {i} ({n}, {m})'
            if n not in mapping or m not in mapping:
                raise IncorrectGML(f'{record}: node not found')
            if n == m:
                raise IncorrectGML(f'{record}: loops impossible')
            n, m = mapping[n], mapping[m]
            pair = (n, m) if n < m else (m, n)
            if pair in seen:
                raise IncorrectGML(f'{record}: duplicate edge')
            seen.add(pair)
            bonds.append((n, m, label))

        g = Graph(labels, bonds, external_ids=mapping, plane=plane)
        if name is not None:
            g.name = name
        return g


def gml_string(text: str) -> Graph:
    """
    graph from GML string

    :raise IncorrectGML: invalid text
    """
    return GMLRead.parse(text)


def gml(file: Union[str, Path, TextIOWrapper, StringIO]) -> Graph:
    """
    graph from GML file

    :param file: path or opened text stream
    :raise IncorrectGML: invalid file
    """
    with GMLRead(file) as f:
        return f.read()


__all__ = ['GMLRead', 'gml_string', 'gml']
