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
from MODtools import Graph, IncorrectGraphDFS, FormatError, graph_dfs, smiles
from pytest import raises


def test_parse():
    g = graph_dfs('[A]1[B][C]-1')
    assert [v.label for v in g] == ['A', 'B', 'C']
    assert g.edges_count == 3
    assert g.edge_label_count('-') == 3
    assert g.vertex_by_external_id(1).label == 'A'

    g = graph_dfs('[A]{bond}[B](=[C])[D].[E]')
    assert [v.label for v in g] == ['A', 'B', 'C', 'D', 'E']
    assert [e.label for e in g.edges()] == ['bond', '=', '-']
    assert g.vertices()[4].degree == 0


def test_branches_and_references():
    g = graph_dfs('[R]1[A]([B]2[C]3)([D]:2)[E]#3')
    assert g.vertices_count == 6
    assert g.edges_count == 7
    b = g.vertex_by_external_id(2)
    assert b.label == 'B' and b.degree == 3
    assert g.vertex_by_external_id(3).degree == 2
    assert g.edge_label_count(':') == 1
    assert g.edge_label_count('#') == 1


def test_escapes():
    g = graph_dfs(r'[a\]b]{c\}d}[e\\f]')
    assert [v.label for v in g] == ['a]b', 'e\\f']
    assert g.label_of(g.edges()[0]) == 'c}d'


def test_implicit_hydrogens():
    g = graph_dfs('CO')
    assert g.vertices_count == 6
    assert g.vertex_label_count('H') == 4
    assert graph_dfs('C=[O]').vertex_label_count('H') == 2
    assert graph_dfs('[C]').vertex_label_count('H') == 0
    assert graph_dfs('ClCBr').vertex_label_count('H') == 2
    assert graph_dfs('CO').isomorphism(smiles('CO')) == 1
    with raises(IncorrectGraphDFS):
        graph_dfs('C{x}[Y]')


def test_errors():
    for s in ('[A]1[B]1', '[A]1[B]-1', '[A]-2', '[A]1-1', '[A]1[B]-1-1', '[A', '[A]{x', '[A](', '[A]..[B]', '[A]-', '-[A]',
              '[A]([B]', '[A])', '[]', '[A]{}[B]', '[A]()', '[A]--[B]', '[A]-([B])', '[A]1.2', 'X', '[A].'):
        with raises(IncorrectGraphDFS):
            graph_dfs(s)
    with raises(FormatError):
        graph_dfs('[A]1[B]-1-1')


def test_writer():
    assert graph_dfs('').graph_dfs == ''
    assert Graph(['X', 'Y']).graph_dfs == '[X].[Y]'
    assert Graph(['a]b']).graph_dfs == r'[a\]b]'
    assert Graph(['A', 'A'], [(0, 1, '{')]).graph_dfs == '[A]{{}[A]'
    assert Graph(['A', 'A'], [(0, 1, 'x}')]).graph_dfs == r'[A]{x\}}[A]'
    assert Graph(['A', 'A'], [(0, 1, '=')]).graph_dfs == '[A]=[A]'
    assert Graph(['A', 'B', 'C'], [(0, 1, '-'), (1, 2, '-')]).graph_dfs == '[A][B][C]'


def test_non_molecule_encoding():
    g = Graph(['C', 'X', 'C'], [(0, 1, '-'), (1, 2, '-')])
    assert g.linear_encoding == g.graph_dfs == '[C][X][C]'


def test_non_ascii_digits():
    for s in ('[A]²', '[A]1[B]-¹', '[A]١[B]', 'C²'):
        with raises(IncorrectGraphDFS):
            graph_dfs(s)
