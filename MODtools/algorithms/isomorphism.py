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
from typing import List, Mapping, Optional, Tuple, TYPE_CHECKING


if TYPE_CHECKING:
    from ..containers import Graph


modes = ('isomorphism', 'monomorphism')


def count_matches(source: 'Graph', target: 'Graph', mode: str = 'isomorphism',
                  max_matches: Optional[int] = 1) -> int:
    """
    Count label preserving mappings of source vertices into target.

    Isomorphism: bijection preserving adjacency in both directions.
    Monomorphism: injection mapping each source edge into target edge, target can have extra vertices and edges.
    Mappings are distinct if differ as functions, thus isomorphism of graph to itself gives automorphisms count.
    Search stops then max_matches found. Order of found mappings is not defined.

    :param mode: isomorphism or monomorphism
    :param max_matches: matches limit. None for unlimited search
    """
    if mode not in modes:
        raise ValueError(f'mode should be one of {modes}')
    if max_matches is not None:
        if max_matches < 0:
            raise ValueError('max_matches should be non-negative')
        elif not max_matches:
            return 0

    induced = mode == 'isomorphism'
    s_atoms = source._labels
    t_atoms = target._labels
    if induced:
        if len(s_atoms) != len(t_atoms) or len(source._edges) != len(target._edges):
            return 0
    elif len(s_atoms) > len(t_atoms) or len(source._edges) > len(target._edges):
        return 0
    # with equal sizes multiset inclusion means equality
    if _exceeds(source._vertex_labels_counter, target._vertex_labels_counter) or \
            _exceeds(source._edge_labels_counter, target._edge_labels_counter):
        return 0
    if not s_atoms:
        return 1  # empty mapping

    plan = _compile_query(source)
    size = len(plan)
    t_bonds = target._bonds
    t_edge_labels = target._edge_labels
    all_atoms = range(len(t_atoms))

    mapping: List[Optional[int]] = [None] * size
    used = set()

    def candidates(depth):
        s_atom, s_degree, anchor, closures = plan[depth]
        for n in (all_atoms if anchor is None else t_bonds[mapping[anchor]]):
            if n in used or t_atoms[n] != s_atom:
                continue
            bonds = t_bonds[n]
            if induced:
                if len(bonds) != s_degree:
                    continue
            elif len(bonds) < s_degree:
                continue
            for i, label in closures:
                e = bonds.get(mapping[i])
                if e is None or t_edge_labels[e] != label:
                    break
            else:
                # no extra edges between mapped vertices
                if induced and sum(m in used for m in bonds) != len(closures):
                    continue
                yield n

    found = 0
    stack = [candidates(0)]
    while stack:
        depth = len(stack) - 1
        if mapping[depth] is not None:  # backtrack
            used.discard(mapping[depth])
            mapping[depth] = None
        n = next(stack[-1], None)
        if n is None:
            stack.pop()
        elif depth + 1 == size:
            found += 1
            if found == max_matches:
                break
        else:
            mapping[depth] = n
            used.add(n)
            stack.append(candidates(depth + 1))
    return found


def _exceeds(source: Mapping[str, int], target: Mapping[str, int]) -> bool:
    """
    source labels multiset is not included into target
    """
    return any(c > target.get(k, 0) for k, c in source.items())


def _compile_query(graph: 'Graph') -> List[Tuple[str, int, Optional[int], List[Tuple[int, str]]]]:
    """
    Order of source vertices. Vertex with most already ordered neighbors first, lowest index on ties.

    :return: list of (label, degree, position of anchor neighbor, [(position of ordered neighbor, edge label)])
    """
    atoms = graph._labels
    bonds = graph._bonds
    edge_labels = graph._edge_labels

    connectivity = dict.fromkeys(range(len(atoms)), 0)
    position = {}
    plan = []
    while connectivity:
        n = max(connectivity, key=lambda x: (connectivity[x], -x))
        del connectivity[n]
        closures = sorted((position[m], edge_labels[e]) for m, e in bonds[n].items() if m in position)
        plan.append((atoms[n], len(bonds[n]), closures[0][0] if closures else None, closures))
        position[n] = len(position)
        for m in bonds[n]:
            if m in connectivity:
                connectivity[m] += 1
    return plan


class Isomorphism:
    __slots__ = ()

    def isomorphism(self, other: 'Graph', max_matches: Optional[int] = 1) -> int:
        """
        number of isomorphisms from this graph to other, but at most max_matches
        """
        return count_matches(self, other, 'isomorphism', max_matches)

    def monomorphism(self, other: 'Graph', max_matches: Optional[int] = 1) -> int:
        """
        number of monomorphisms from this graph to other, but at most max_matches
        """
        return count_matches(self, other, 'monomorphism', max_matches)


__all__ = ['Isomorphism', 'count_matches']
