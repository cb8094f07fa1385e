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
from typing import List, Tuple
from ..containers import Graph
from ..exceptions import IncorrectGraphDFS
from ..labels import digits, implicit_hydrogens, is_bond_label, organic_set


# tokens structure:
# (type: int, value, position)
# types:
# 0: vertex label in brackets
# 1: edge label
# 2: open branch (
# 3: close branch )
# 4: dot
# 5: bare organic atom with implicit hydrogens
# 6: number. vertex id or ring closure reference


class GraphDFSRead:
    """
    GraphDFS strings parser.

    vertices written as `[label]` or as bare organic subset symbol with implicit hydrogens.
    number after vertex assigns id to it, number after edge label refers to vertex with this id.
    edges written as bond symbols `-=#:` or `{label}`. `-` may be omitted.
    """
    @classmethod
    def parse(cls, string: str) -> Graph:
        """
        :raise IncorrectGraphDFS: invalid string
        """
        return cls._convert_structure(*cls._parse_tokens(cls._raw_tokenize(string)))

    @staticmethod
    def _read_escaped(string: str, start: int, close: str) -> Tuple[str, int]:
        value = []
        i = start
        size = len(string)
        while i < size:
            s = string[i]
            if s == '\\':
                if i + 1 == size:
                    break
                value.append(string[i + 1])
                i += 2
            elif s == close:
                return ''.join(value), i + 1
            else:
                value.append(s)
                i += 1
        raise IncorrectGraphDFS(f'unclosed label started at position {start - 1}')

    @classmethod
    def _raw_tokenize(cls, string: str) -> List[tuple]:
        tokens = []
        i = 0
        size = len(string)
        while i < size:
            s = string[i]
            if s == '[':
                label, j = cls._read_escaped(string, i + 1, ']')
                if not label:
                    raise IncorrectGraphDFS(f'empty vertex label at position {i}')
                tokens.append((0, label, i))
                i = j
                continue
            elif s == '{':
                label, j = cls._read_escaped(string, i + 1, '}')
                if not label:
                    raise IncorrectGraphDFS(f'empty edge label at position {i}')
                tokens.append((1, label, i))
                i = j
                continue
            elif s in digits:
                j = i + 1
                while j < size and string[j] in digits:
                    j += 1
                tokens.append((6, int(string[i:j]), i))
                i = j
                continue
            elif s in '-=#:':
                tokens.append((1, s, i))
            elif s == '(':
                tokens.append((2, None, i))
            elif s == ')':
                tokens.append((3, None, i))
            elif s == '.':
                tokens.append((4, None, i))
            elif s.isspace():
                pass
            elif string[i:i + 2] in organic_set:
                tokens.append((5, string[i:i + 2], i))
                i += 2
                continue
            elif s in organic_set:
                tokens.append((5, s, i))
            else:
                raise IncorrectGraphDFS(f'invalid symbol {s!r} at position {i}')
            i += 1
        return tokens

    @staticmethod
    def _parse_tokens(tokens: List[tuple]):
        labels = []
        edges = []
        bare = []
        ids = {}
        connected = set()
        stack = []
        last = None
        previous = None
        previous_type = None

        for token_type, token, position in tokens:
            if token_type in (0, 5):
                n = len(labels)
                if last is not None:
                    edges.append((last, n, previous or '-'))
                    connected.add((last, n))
                labels.append(token)
                if token_type == 5:
                    bare.append(n)
                last = n
                previous = None
            elif token_type == 6:
                if previous is not None:  # ring closure
                    try:
                        m = ids[token]
                    except KeyError:
                        raise IncorrectGraphDFS(f'reference to undefined id {token} at position {position}')
                    if m == last:
                        raise IncorrectGraphDFS(f'vertex {token} refers to itself at position {position}')
                    pair = (last, m) if last < m else (m, last)
                    if pair in connected:
                        raise IncorrectGraphDFS(f'vertex {token} already connected at position {position}')
                    connected.add(pair)
                    edges.append((last, m, previous))
                    previous = None
                elif previous_type in (0, 5):
                    if token in ids:
                        raise IncorrectGraphDFS(f'id {token} redefined at position {position}')
                    ids[token] = last
                else:
                    raise IncorrectGraphDFS(f'number without vertex or edge at position {position}')
            elif token_type == 1:
                if previous is not None:
                    raise IncorrectGraphDFS(f'2 edges in a row at position {position}')
                elif last is None:
                    raise IncorrectGraphDFS(f'edge without vertex at position {position}')
                previous = token
            elif token_type == 2:
                if previous is not None:
                    raise IncorrectGraphDFS(f'edge before branch at position {position}')
                elif last is None:
                    raise IncorrectGraphDFS(f'branch before vertex at position {position}')
                elif previous_type == 2:
                    raise IncorrectGraphDFS(f'(( pattern invalid at position {position}')
                stack.append(last)
            elif token_type == 3:
                if previous is not None:
                    raise IncorrectGraphDFS(f'edge before branch closure at position {position}')
                elif previous_type == 2:
                    raise IncorrectGraphDFS(f'empty branch at position {position}')
                try:
                    last = stack.pop()
                except IndexError:
                    raise IncorrectGraphDFS(f'unbalanced ) at position {position}')
            else:  # dot
                if previous is not None:
                    raise IncorrectGraphDFS(f'edge before dot at position {position}')
                elif stack:
                    raise IncorrectGraphDFS(f'dot in branch at position {position}')
                elif last is None:
                    raise IncorrectGraphDFS(f'empty component at position {position}')
                last = None
            previous_type = token_type

        if stack:
            raise IncorrectGraphDFS('number of ( does not equal to number of )')
        elif previous is not None:
            raise IncorrectGraphDFS('edge on the end')
        elif previous_type == 4:
            raise IncorrectGraphDFS('dot on the end')
        return labels, edges, bare, ids

    @staticmethod
    def _convert_structure(labels, edges, bare, ids) -> Graph:
        if bare:
            environment = [[] for _ in labels]
            for n, m, label in edges:
                environment[n].append(label)
                environment[m].append(label)
            for n in bare:
                env = environment[n]
                if not all(is_bond_label(x) for x in env):
                    raise IncorrectGraphDFS(f'vertex {n} ({labels[n]}): implicit hydrogens with non bond edges')
                for _ in range(implicit_hydrogens(labels[n], env)):
                    edges.append((n, len(labels), '-'))
                    labels.append('H')
        return Graph(labels, edges, external_ids=ids)


def graph_dfs(string: str) -> Graph:
    """
    graph from GraphDFS string

    :raise IncorrectGraphDFS: invalid string
    """
    return GraphDFSRead.parse(string)


__all__ = ['GraphDFSRead', 'graph_dfs']
