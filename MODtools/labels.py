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
"""
chemical labels grammar. vertex labels like `C`, `O-`, `Fe3+`, `13C`, `C.` and bond labels `-`, `=`, `#`, `:`
"""
from collections import namedtuple
from periodictable import elements
from re import compile
from typing import Optional, Iterable


AtomLabel = namedtuple('AtomLabel', ['isotope', 'symbol', 'charge', 'is_radical'])

atom_label_re = compile(r'^([1-9][0-9]*)?([A-Z][a-z]?)((?:[2-9]|[1-9][0-9]+)?[+-])?(\.)?$')
symbols = frozenset(x.symbol for x in elements if x.number)

bond_orders = {'-': 1, '=': 2, '#': 3, ':': 4}
aromatic_bond = ':'

organic_set = frozenset(('B', 'C', 'N', 'O', 'P', 'S', 'F', 'Cl', 'Br', 'I'))
aromatic_set = frozenset(('B', 'C', 'N', 'O', 'P', 'S', 'As', 'Se'))
valences = {'B': (3,), 'C': (4,), 'N': (3, 5), 'O': (2,), 'P': (3, 5), 'S': (2, 4, 6),
            'F': (1,), 'Cl': (1,), 'Br': (1,), 'I': (1,)}


digits = frozenset('0123456789')


def is_number(string: str) -> bool:
    """
    non-empty string of ascii digits
    """
    return bool(string) and all(x in digits for x in string)


def parse_atom_label(label: str) -> Optional[AtomLabel]:
    """
    split vertex label into atom attributes.

    :return: None if label is not an atom
    """
    match = atom_label_re.match(label)
    if match is None:
        return
    isotope, symbol, charge, radical = match.groups()
    if symbol not in symbols:
        return
    if charge:
        sign = 1 if charge[-1] == '+' else -1
        charge = sign * int(charge[:-1] or 1)
    else:
        charge = 0
    return AtomLabel(isotope and int(isotope), symbol, charge, bool(radical))


def format_atom_label(symbol: str, isotope: Optional[int] = None, charge: int = 0, is_radical: bool = False) -> str:
    label = [symbol]
    if isotope:
        label.insert(0, str(isotope))
    if charge:
        if abs(charge) != 1:
            label.append(str(abs(charge)))
        label.append('+' if charge > 0 else '-')
    if is_radical:
        label.append('.')
    return ''.join(label)


def is_bond_label(label: str) -> bool:
    return label in bond_orders


def implicit_hydrogens(symbol: str, bonds: Iterable[str]) -> int:
    """
    number of hydrogens required by lowest suitable valence of organic subset atom.

    :param bonds: labels of bonds to heavy atoms
    """
    total = aromatic = 0
    for b in bonds:
        if b == aromatic_bond:
            aromatic += 1
        else:
            total += bond_orders[b]
    total += (3 * aromatic + 1) // 2  # 1.5 per aromatic bond rounded up
    for v in valences[symbol]:
        if v >= total:
            return v - total
    return 0


__all__ = ['AtomLabel', 'parse_atom_label', 'format_atom_label', 'is_bond_label', 'implicit_hydrogens', 'is_number', 'digits',
           'bond_orders', 'organic_set', 'aromatic_set', 'symbols']
