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
from MODtools import CalculatorError, Graph, LogicError, PropertiesCalculator, smiles
from pytest import approx, raises


class CountingCalculator(PropertiesCalculator):
    def __init__(self):
        self.calls = 0

    def energy(self, graph):
        self.calls += 1
        return -graph.vertices_count


def test_molar_mass():
    assert smiles('O').molar_mass == approx(18.015, abs=.01)
    assert smiles('CCO').molar_mass == approx(46.07, abs=.01)
    assert smiles('[13CH4]').molar_mass > smiles('C').molar_mass
    with raises(CalculatorError):
        smiles('[300C]').molar_mass


def test_cached_molar_mass():
    g = smiles('O')
    g.cache_molar_mass(1)
    assert g.molar_mass == 1.
    with raises(LogicError):
        Graph(['X']).cache_molar_mass(1.)
    with raises(LogicError):
        Graph(['X']).molar_mass


def test_energy(monkeypatch):
    with raises(CalculatorError):
        smiles('O').energy

    calculator = CountingCalculator()
    monkeypatch.setattr(Graph, 'calculator', calculator)
    g = smiles('O')
    assert g.energy == -3.
    assert g.energy == -3.
    assert calculator.calls == 1

    g = smiles('C')
    g.cache_energy(42)
    assert g.energy == 42.
    assert calculator.calls == 1
    assert g.make_permutation().energy == 42.

    with raises(LogicError):
        Graph(['C', 'X'], [(0, 1, '-')]).energy
    with raises(LogicError):
        Graph(['C', 'X'], [(0, 1, '-')]).cache_energy(1.)


def test_depiction():
    g = smiles('CCO')
    assert g.image is None
    assert g.depiction_name == f'g_{g.id}'
    assert g.depiction_file == f'g_{g.id}.pdf'

    calls = []

    def image():
        calls.append(1)
        return 'ethanol'

    g.set_image(image)
    assert g.image is image
    assert g.depiction_name == 'ethanol'
    assert g.depiction_file == 'ethanol.pdf'
    assert len(calls) == 1

    g.image_command = 'convert ethanol.pdf ethanol.png'
    assert g.image_command == 'convert ethanol.pdf ethanol.png'
    g.set_image(None)
    assert g.depiction_name == f'g_{g.id}'
    with raises(TypeError):
        g.set_image('ethanol')
