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
from typing import Dict


bond_str = {'-': '-', '=': '=', '#': '#', ':': ':'}


def escape(label: str, close: str) -> str:
    return label.replace('\\', '\\\\').replace(close, '\\' + close)


def edge_str(label: str) -> str:
    try:
        return bond_str[label]
    except KeyError:
        return f'{{{escape(label, "}")}}}'


class GraphDFS:
    __slots__ = ()

    @cached_property
    def graph_dfs(self) -> str:
        """
        Canonical GraphDFS string. Available for any graph.
        """
        edge_labels = self._edge_labels
        bonds = {n: {m: edge_labels[e] for m, e in ms.items()} for n, ms in enumerate(self._bonds)}
        return self._canonic_string(dict(enumerate(self._labels)), bonds, lambda w: self.__graph_dfs(w, bonds))

    def __graph_dfs(self, weights: Dict[int, int], bonds: Dict[int, Dict[int, str]]) -> str:
        roots, children, closures = self._dfs_tree(weights, bonds)
        labels = self._labels
        string = []
        ids = {}
        done = set()

        def write_chain(n, parent):
            while True:
                if parent is not None:
                    label = bonds[parent][n]
                    if label != '-':
                        string.append(edge_str(label))
                string.append(f'[{escape(labels[n], "]")}]')
                done.add(n)

                back = [m for m in closures[n] if m in done]
                if len(back) != len(closures[n]):  # ring closures will refer to this vertex
                    ids[n] = len(ids) + 1
                    string.append(str(ids[n]))

                tail = children[n]
                for i, m in enumerate(back, start=1):
                    if not tail and i == len(back):  # last back reference ends chain
                        string.append(edge_str(bonds[n][m]))
                        string.append(str(ids[m]))
                    else:
                        string.append('(')
                        string.append(edge_str(bonds[n][m]))
                        string.append(str(ids[m]))
                        string.append(')')

                if not tail:
                    return
                for child in tail[:-1]:
                    string.append('(')
                    write_chain(child, n)
                    string.append(')')
                parent, n = n, tail[-1]

        for root in roots:
            if string:
                string.append('.')
            write_chain(root, None)
        return ''.join(string)


__all__ = ['GraphDFS']
