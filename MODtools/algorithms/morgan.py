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
from collections import defaultdict
from itertools import groupby
from operator import itemgetter
from typing import Any, Callable, Dict, Hashable, List, Optional, Set, Tuple


class Morgan:
    __slots__ = ()

    @classmethod
    def _canonic_string(cls, atoms: Dict[int, Hashable], bonds: Dict[int, Dict[int, str]],
                        writer: Callable[[Dict[int, int]], str]) -> str:
        """
        Canonical linear notation of graph.

        Each connected component ordered independently by Morgan like refinement of (label, degree) classes.
        Unresolved classes are split by individualization of each member with following refinement.
        Smallest string produced by writer for discrete orders is canonical.
        Components are ordered by their canonical strings.

        :param atoms: vertex-invariant pairs
        :param bonds: adjacency with edge labels
        :param writer: function converting vertex-order pairs into string
        """
        components = []
        for component in cls._components(bonds):
            c_atoms = {n: atoms[n] for n in component}
            c_bonds = {n: bonds[n] for n in component}
            components.append(cls._canonic_order(c_atoms, c_bonds, writer))

        weights = {}
        for _, order in sorted(components, key=itemgetter(0)):
            shift = len(weights)
            weights.update((n, i + shift) for n, i in order.items())
        return writer(weights)

    @classmethod
    def _canonic_order(cls, atoms: Dict[int, Hashable], bonds: Dict[int, Dict[int, str]],
                       writer: Callable[[Dict[int, int]], str]) -> Tuple[str, Dict[int, int]]:
        """
        Depth-first individualization-refinement search.

        Discrete orders producing equal relabeled graphs give automorphisms.
        Branches equivalent under found automorphisms fixing current path are skipped.
        """
        first = best = None
        automorphisms = []
        weights = cls._refine(cls._rank({n: (a, len(bonds[n])) for n, a in atoms.items()}), bonds)
        stack = [(weights, (), cls._branches(weights, bonds), set())]
        while stack:
            weights, path, branches, explored = stack[-1]
            if branches is None:  # discrete
                stack.pop()
                string = writer(weights)
                if first is None:
                    first = best = (string, weights)
                    continue
                for _, leaf in (first, best):
                    automorphism = cls._automorphism(leaf, weights, atoms, bonds)
                    if automorphism is not None:
                        automorphisms.append(automorphism)
                        break
                if string < best[0]:
                    best = (string, weights)
                continue
            elif not branches:
                stack.pop()
                continue

            n = branches.pop()
            if explored and not explored.isdisjoint(cls._orbit(n, path, automorphisms)):
                continue
            explored.add(n)
            weights = cls._refine(cls._rank({m: (w, m != n) for m, w in weights.items()}), bonds)
            stack.append((weights, path + (n,), cls._branches(weights, bonds), set()))
        return best

    @classmethod
    def _branches(cls, weights: Dict[int, int], bonds: Dict[int, Dict[int, str]]) -> Optional[List[int]]:
        """
        vertices of first non-singleton cell to individualize in popping order. None for discrete order
        """
        cell = cls._first_cell(weights)
        if cell is not None:
            return cls._twins_filter(cell, bonds)[::-1]

    @staticmethod
    def _automorphism(first: Dict[int, int], second: Dict[int, int], atoms: Dict[int, Hashable],
                      bonds: Dict[int, Dict[int, str]]) -> Optional[Dict[int, int]]:
        """
        mapping of vertices with equal positions in two discrete orders if it is nontrivial automorphism
        """
        position = {w: n for n, w in second.items()}
        mapping = {n: position[w] for n, w in first.items()}
        if all(n == m for n, m in mapping.items()):
            return
        for n, m in mapping.items():
            if atoms[n] != atoms[m]:
                return
            bm = bonds[m]
            if len(bonds[n]) != len(bm):
                return
            for k, b in bonds[n].items():
                if bm.get(mapping[k]) != b:
                    return
        return mapping

    @staticmethod
    def _orbit(n: int, path: Tuple[int, ...], automorphisms: List[Dict[int, int]]) -> Set[int]:
        """
        orbit of vertex under automorphisms which fix all vertices of path
        """
        generators = [g for g in automorphisms if all(g[x] == x for x in path)]
        orbit = {n}
        stack = [n]
        while stack:
            x = stack.pop()
            for g in generators:
                y = g[x]
                if y not in orbit:
                    orbit.add(y)
                    stack.append(y)
        return orbit

    @classmethod
    def _refine(cls, weights: Dict[int, int], bonds: Dict[int, Dict[int, str]]) -> Dict[int, int]:
        numb = len(set(weights.values()))
        while numb < len(weights):
            weights = cls._rank({n: (w, tuple(sorted((weights[m], b) for m, b in bonds[n].items())))
                                 for n, w in weights.items()})
            old_numb, numb = numb, len(set(weights.values()))
            if numb == old_numb:  # stable partition
                break
        return weights

    @staticmethod
    def _rank(keys: Dict[int, Any]) -> Dict[int, int]:
        return {n: i for i, (_, g) in enumerate(groupby(sorted(keys.items(), key=itemgetter(1)), key=itemgetter(1)))
                for n, _ in g}

    @staticmethod
    def _first_cell(weights: Dict[int, int]) -> Optional[List[int]]:
        cells = defaultdict(list)
        for n, w in weights.items():
            cells[w].append(n)
        for w in sorted(cells):
            cell = cells[w]
            if len(cell) > 1:
                return sorted(cell)

    @staticmethod
    def _twins_filter(cell: List[int], bonds: Dict[int, Dict[int, str]]) -> List[int]:
        """
        one vertex of each group of interchangeable vertices.
        twins have equal neighbors with equal edges, thus transposition of them is automorphism.
        """
        representatives = []
        for n in cell:
            bn = bonds[n]
            for m in representatives:
                bm = bonds[m]
                if len(bn) == len(bm) and \
                        {k: v for k, v in bn.items() if k != m} == {k: v for k, v in bm.items() if k != n}:
                    break
            else:
                representatives.append(n)
        return representatives

    @staticmethod
    def _components(bonds: Dict[int, Dict[int, str]]) -> List[List[int]]:
        seen = set()
        components = []
        for start in bonds:
            if start in seen:
                continue
            seen.add(start)
            component = [start]
            stack = [start]
            while stack:
                for m in bonds[stack.pop()]:
                    if m not in seen:
                        seen.add(m)
                        component.append(m)
                        stack.append(m)
            components.append(component)
        return components


__all__ = ['Morgan']
