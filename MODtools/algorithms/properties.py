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
from periodictable import elements
from typing import TYPE_CHECKING
from ..exceptions import CalculatorError, LogicError
from ..labels import parse_atom_label


if TYPE_CHECKING:
    from ..containers import Graph


class PropertiesCalculator:
    """
    Default chemical properties calculator.
    Molar mass calculated from periodictable data. Energy calculation requires external tool.
    Subclass and assign to `Graph.calculator` to replace.
    """
    def energy(self, graph: 'Graph') -> float:
        raise CalculatorError('energy calculator not configured. assign Graph.calculator')

    def molar_mass(self, graph: 'Graph') -> float:
        mass = 0.
        for label in graph._labels:
            atom = parse_atom_label(label)
            element = elements.symbol(atom.symbol)
            if atom.isotope:
                try:
                    element = element[atom.isotope]
                except KeyError as e:
                    raise CalculatorError(f'unknown isotope: {label}') from e
            if element.mass is None:
                raise CalculatorError(f'mass of {label} unknown')
            mass += element.mass
        return mass


class Properties:
    __slots__ = ()

    @property
    def energy(self) -> float:
        """
        Energy of molecule. Calculated once by `Graph.calculator` if not cached.
        """
        if self._energy is None:
            if not self.is_molecule:
                raise LogicError('energy available only for molecules')
            self._energy = float(self.calculator.energy(self))
        return self._energy

    def cache_energy(self, value: float):
        """
        set energy of molecule
        """
        if not self.is_molecule:
            raise LogicError('energy caching possible only for molecules')
        self._energy = float(value)

    @property
    def molar_mass(self) -> float:
        """
        Molar mass of molecule. Calculated once by `Graph.calculator` if not cached.
        """
        if self._molar_mass is None:
            if not self.is_molecule:
                raise LogicError('molar mass available only for molecules')
            self._molar_mass = float(self.calculator.molar_mass(self))
        return self._molar_mass

    def cache_molar_mass(self, value: float):
        if not self.is_molecule:
            raise LogicError('molar mass caching possible only for molecules')
        self._molar_mass = float(value)


__all__ = ['Properties', 'PropertiesCalculator']
