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
from collections import defaultdict
from itertools import count
from typing import Dict, List, Set, Tuple
from ..exceptions import LogicError
from ..labels import AtomLabel, parse_atom_label, implicit_hydrogens, organic_set, aromatic_set


def closure_str(number: int) -> str:
    if number < 10:
        return str(number)
    elif number < 100:
        return f'%{number}'
    return f'%({number})'


class Smiles:
    __slots__ = ()

    @cached_property
    def smiles(self) -> str:
        """
        Canonical SMILES of molecule. Terminal hydrogens are written as implicit.
        """
        if not self.is_molecule:
            raise LogicError('SMILES possible only for molecules')
        atoms, bonds, hydrogens = self.__skeleton()
        aromatics = {n for n, a in atoms.items()
                     if a.symbol in aromatic_set and any(b == ':' for b in bonds[n].values())}
        labels = self._labels
        return self._canonic_string({n: (labels[n], hydrogens[n]) for n in atoms}, bonds,
                                    lambda w: self.__smiles(w, atoms, bonds, hydrogens, aromatics))

    def __skeleton(self) -> Tuple[Dict[int, AtomLabel], Dict[int, Dict[int, str]], Dict[int, int]]:
        """
        graph without terminal hydrogens. hydrogens count stored per atom
        """
        labels = self._labels
        edge_labels = self._edge_labels
        sb = self._bonds
        parsed = [parse_atom_label(x) for x in labels]

        hydrogens = dict.fromkeys(range(len(labels)), 0)
        implicit = set()
        for n, label in enumerate(labels):
            if label == 'H' and len(sb[n]) == 1:
                (m, e), = sb[n].items()
                if parsed[m].symbol != 'H' and edge_labels[e] == '-':
                    hydrogens[m] += 1
                    implicit.add(n)

        atoms = {n: a for n, a in enumerate(parsed) if n not in implicit}
        bonds = {n: {m: edge_labels[e] for m, e in sb[n].items() if m not in implicit} for n in atoms}
        return atoms, bonds, {n: hydrogens[n] for n in atoms}

    def __smiles(self, weights: Dict[int, int], atoms: Dict[int, AtomLabel], bonds: Dict[int, Dict[int, str]],
                 hydrogens: Dict[int, int], aromatics: Set[int]) -> str:
        roots, children, closures = self._dfs_tree(weights, bonds)
        string = []
        opened = {}
        used = set()

        def format_bond(n, m):
            order = bonds[n][m]
            if order == '-':
                return '-' if n in aromatics and m in aromatics else ''
            elif order == ':':
                return '' if n in aromatics and m in aromatics else ':'
            return order

        def format_atom(n):
            atom = atoms[n]
            ih = hydrogens[n]
            symbol = atom.symbol.lower() if n in aromatics else atom.symbol
            if atom.symbol in organic_set and not atom.isotope and not atom.charge and not atom.is_radical and \
                    ih == implicit_hydrogens(atom.symbol, bonds[n].values()):
                return symbol

            smi = ['[']
            if atom.isotope:
                smi.append(str(atom.isotope))
            smi.append(symbol)
            if ih == 1:
                smi.append('H')
            elif ih:
                smi.append(f'H{ih}')
            if atom.charge == 1:
                smi.append('+')
            elif atom.charge == -1:
                smi.append('-')
            elif atom.charge:
                smi.append(f'{atom.charge:+d}')
            if atom.is_radical:
                smi.append('.')
            smi.append(']')
            return ''.join(smi)

        def write_chain(n, parent):
            while True:
                if parent is not None:
                    string.append(format_bond(parent, n))
                string.append(format_atom(n))
                for m in closures[n]:
                    if (n, m) in opened:  # close ring
                        c = opened.pop((n, m))
                        used.discard(c)
                    else:
                        c = next(x for x in count(1) if x not in used)
                        used.add(c)
                        opened[(m, n)] = c
                        string.append(format_bond(n, m))
                    string.append(closure_str(c))

                tail = children[n]
                if not tail:
                    return
                for child in tail[:-1]:  # side chains
                    string.append('(')
                    write_chain(child, n)
                    string.append(')')
                parent, n = n, tail[-1]

        for root in roots:
            if string:
                string.append('.')
            write_chain(root, None)
        return ''.join(string)

    @staticmethod
    def _dfs_tree(weights: Dict[int, int], bonds: Dict[int, Dict[int, str]]) -> \
            Tuple[List[int], Dict[int, List[int]], Dict[int, List[int]]]:
        """
        depth-first spanning forest. roots and children are visited in weights order.

        :return: roots, children of each vertex, ring closures of each vertex ordered by visiting
        """
        key = weights.__getitem__
        visited = {}
        children = {}
        closures = defaultdict(list)
        roots = []
        for start in sorted(weights, key=key):
            if start in visited:
                continue
            roots.append(start)
            visited[start] = len(visited)
            children[start] = []
            path = {start}
            stack = [(start, None, iter(sorted(bonds[start], key=key)))]
            while stack:
                parent, back, neighbors = stack[-1]
                for child in neighbors:
                    if child == back:
                        continue
                    elif child not in visited:
                        visited[child] = len(visited)
                        children[parent].append(child)
                        children[child] = []
                        path.add(child)
                        stack.append((child, parent, iter(sorted(bonds[child], key=key))))
                        break
                    elif child in path:  # back edge to ancestor
                        closures[parent].append(child)
                        closures[child].append(parent)
                else:
                    stack.pop()
                    path.discard(parent)

        for ms in closures.values():
            ms.sort(key=visited.__getitem__)
        return roots, children, closures


__all__ = ['Smiles']
