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
from MODtools import Graph, graph_dfs, smiles
from time import perf_counter


equivalents = [('CCO', 'OCC', 'C(O)C', '[H]OC([H])([H])C'),
               ('CC(=O)O', 'OC(C)=O', 'O=C(O)C', 'C(=O)(O)C'),
               ('c1ccncc1', 'n1ccccc1', 'c1cnccc1', 'c1ccc[n]c1'),
               ('CC1CCCCC1', 'C1CCCCC1C', 'C1CC(C)CCC1'),
               ('C.C.O', 'O.C.C', 'C.O.C'),
               ('[Na+].[Cl-]', '[Cl-].[Na+]'),
               ('C1CC2CCC1C2', 'C1CC2CC1CC2'),
               ('OC(=O)C1=CC=CC=C1O', 'C1=CC=C(C(=C1)C(=O)O)O')]


def test_canonical_smiles():
    for group in equivalents:
        first, *others = [smiles(x) for x in group]
        for g in others:
            assert g.smiles == first.smiles, f'{g.smiles} != {first.smiles}'
            assert g.graph_dfs == first.graph_dfs


def test_different_molecules():
    assert smiles('CCO').smiles != smiles('COC').smiles
    assert smiles('C1CCC1C').smiles != smiles('C1CCCC1').smiles
    assert smiles('CC=O').graph_dfs != smiles('C=CO').graph_dfs


def test_permutation_stability():
    for group in equivalents:
        g = smiles(group[0])
        for seed in range(10):
            p = g.make_permutation(seed)
            assert p.smiles == g.smiles
            assert p.graph_dfs == g.graph_dfs


def test_known_strings():
    assert smiles('C').smiles == 'C'
    assert smiles('[H]C([H])([H])[H]').smiles == 'C'
    assert smiles('c1ccccc1').smiles == 'c1ccccc1'
    assert smiles('C1CCCCC1').smiles == 'C1CCCCC1'
    assert smiles('[Na+].[Cl-]').smiles == '[Cl-].[Na+]'
    assert smiles('[CH3]').smiles == '[CH3]'
    assert smiles('[13CH4]').smiles == '[13CH4]'
    assert smiles('[NH4+]').smiles == '[NH4+]'
    assert smiles('[O-2]').smiles == '[O-2]'
    assert smiles('[CH3.]').smiles == '[CH3.]'
    assert smiles('[H][H]').smiles == '[H][H]'
    assert Graph(['X']).graph_dfs == '[X]'
    assert Graph(['A', 'A', 'A'], [(0, 1, '-'), (1, 2, '-'), (2, 0, '-')]).graph_dfs == '[A]1[A][A]-1'


def test_smiles_round_trip():
    for s in ('CC(=O)OC1=CC=CC=C1C(=O)O', 'c1ccc2ccccc2c1', 'C1CC2CCC1C2', 'N[C@@H](C)C(=O)O',
              '[NH3+]CC([O-])=O', 'c1cc[nH]c1', 'C#N', '[2H]C([2H])([2H])Cl', 'O=[Se]=O', 'c1cc[se]c1',
              'C1CCCCCCCCCCC2CCCCCCCCCCC12'):
        g = smiles(s)
        r = smiles(g.smiles)
        assert r.isomorphism(g) == 1, f'{s} -> {g.smiles}'
        assert r.smiles == g.smiles


def test_graph_dfs_round_trip():
    for g in (Graph(['A', 'B', 'A', 'B'], [(0, 1, 'x'), (1, 2, 'x'), (2, 3, 'y'), (3, 0, 'y'), (0, 2, 'z')]),
              Graph(['a]b', 'c\\d', 'e'], [(0, 1, 'f}g'), (1, 2, '{')]),
              Graph(['X', 'Y', 'Z']),
              Graph(['v'] * 6, [(n, m, '-') for n in range(4) for m in range(n + 1, 4)] + [(4, 5, ':')]),
              smiles('c1ccc2ccccc2c1')):
        r = graph_dfs(g.graph_dfs)
        assert r.isomorphism(g) == 1, g.graph_dfs
        assert r.graph_dfs == g.graph_dfs


def test_many_ring_closures():
    # more than nine open rings at once
    size = 14
    g = Graph(['C'] * size, [(n, m, '-') for n in range(size) for m in range(n + 1, size) if m - n in (1, 2, 5)])
    assert g.is_molecule
    r = smiles(g.smiles)
    assert r.isomorphism(g) == 1
    assert graph_dfs(g.graph_dfs).isomorphism(g) == 1


def star(arms):
    return Graph(['A'] + ['B', 'C'] * arms, [e for n in range(arms) for e in ((0, 2 * n + 1, '-'),
                                                                            (2 * n + 1, 2 * n + 2, '='))])


def test_symmetric_star():
    start = perf_counter()
    g = star(12)
    string = g.graph_dfs
    assert string == g.make_permutation(1).graph_dfs
    assert graph_dfs(string).isomorphism(g) == 1
    h = Graph(['C'] + ['C', 'O'] * 10, [e for n in range(10) for e in ((0, 2 * n + 1, '-'), (2 * n + 1, 2 * n + 2, '-'))])
    assert h.smiles == h.make_permutation(2).smiles
    assert perf_counter() - start < 10


def test_symmetric_cage():
    # cube: automorphism group of order 48
    cube = Graph(['C'] * 8, [(n, n ^ b, '-') for n in range(8) for b in (1, 2, 4) if n < n ^ b])
    start = perf_counter()
    assert cube.smiles == cube.make_permutation(3).smiles
    assert cube.graph_dfs == cube.make_permutation(4).graph_dfs
    assert smiles(cube.smiles).isomorphism(cube) == 1
    assert perf_counter() - start < 10
