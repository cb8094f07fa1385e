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
from io import StringIO
from MODtools import Graph, IncorrectGML, LogicError, gml, gml_string, smiles
from pytest import raises


text = '''# test graph
graph [
    name "ethanol skeleton"
    directed 0
    node [ id 10 label "C" vis2D [ x 0.0 y 0.0 ] ]
    node [ id 20 label "C" vis2D [ x 1.5 y 0 ] ]
    node [ id 30 label "O" vis2D [ x 2.25 y -1.3 ] weight 5 ]
    edge [ source 10 target 20 label "-" ]
    edge [ source 30 target 20 label "-" ]
]
'''


def test_parse():
    g = gml_string(text)
    assert g.name == 'ethanol skeleton'
    assert [v.label for v in g] == ['C', 'C', 'O']
    assert g.edges_count == 2
    assert g.vertex_by_external_id(30).label == 'O'
    assert g.vertex_by_external_id(30).degree == 1
    assert g.vertex_by_external_id(20).degree == 2
    assert g.vertex_by_external_id(0).is_null
    assert g.get_gml_string(True).count('vis2D') == 3
    assert 'x 2.25 y -1.3' in g.get_gml_string(True)


def test_quoted_labels():
    g = gml_string('graph [ node [ id 0 label "a \\"b\\" \\\\" ] node [ id 1 label "[x]" ] '
                   'edge [ source 0 target 1 label "e f" ] ]')
    assert [v.label for v in g] == ['a "b" \\', '[x]']
    assert g.label_of(g.edges()[0]) == 'e f'
    assert gml_string(g.get_gml_string()).isomorphism(g) == 1


def test_writer():
    g = Graph(['C', 'O'], [(0, 1, '=')])
    assert g.get_gml_string() == 'graph [\n\tnode [ id 0 label "C" ]\n\tnode [ id 1 label "O" ]\n' \
                                 '\tedge [ source 0 target 1 label "=" ]\n]\n'
    g = Graph(['C', 'O'], [(0, 1, '=')], plane={0: (0., 1.), 1: (1.25, -1.)})
    assert g.get_gml_string(True) == 'graph [\n\tnode [ id 0 label "C" vis2D [ x 0.0 y 1.0 ] ]\n' \
                                     '\tnode [ id 1 label "O" vis2D [ x 1.25 y -1.0 ] ]\n' \
                                     '\tedge [ source 0 target 1 label "=" ]\n]\n'


def test_round_trip():
    for g in (smiles('CC(=O)OC1=CC=CC=C1C(=O)O'), Graph(['A', 'B', 'A'], [(0, 1, 'x'), (2, 1, 'y')]), Graph([])):
        r = gml_string(g.get_gml_string())
        assert r.isomorphism(g) == 1
        assert [v.label for v in r] == [v.label for v in g]


def test_layout():
    g = smiles('c1ccccc1')
    r = gml_string(g.get_gml_string(with_coords=True))
    assert r.isomorphism(g) == 1
    assert len(r._plane) == g.vertices_count
    # stored coordinates used as is
    assert r.get_gml_string(True) == gml_string(r.get_gml_string(True)).get_gml_string(True)
    assert Graph(['X']).get_gml_string(True).count('x 0.0 y 0.0') == 1
    assert gml_string(Graph([]).get_gml_string(True)).vertices_count == 0


def test_non_planar():
    k5 = Graph(['A'] * 5, [(n, m, '-') for n in range(5) for m in range(n + 1, 5)])
    assert 'vis2D' not in k5.get_gml_string()
    with raises(LogicError):
        k5.get_gml_string(with_coords=True)
    partial = Graph(['A'] * 5, [(n, m, '-') for n in range(5) for m in range(n + 1, 5)], plane={0: (0, 0)})
    with raises(LogicError):
        partial.get_gml_string(True)
    complete = Graph(['A'] * 5, [(n, m, '-') for n in range(5) for m in range(n + 1, 5)],
                     plane={n: (n, n) for n in range(5)})
    assert complete.get_gml_string(True).count('vis2D') == 5


def test_errors():
    for t in ('graph [ node [ id 0 label "A" ] node [ id 1 label "B" ] edge [ source 0 target 0 label "-" ] ]',
              'graph [ node [ id 0 label "A" ] node [ id 1 label "B" ] edge [ source 0 target 1 label "-" ] '
              'edge [ source 1 target 0 label "=" ] ]',
              'graph [ node [ id 0 label "A" ] edge [ source 0 target 1 label "-" ] ]',
              'graph [ node [ label "A" ] ]',
              'graph [ node [ id 0 label "A" ] node [ id 0 label "B" ] ]',
              'graph [ node [ id 0 ] ]',
              'graph [ node [ id 0 label 5 ] ]',
              'graph [ node [ id 0 label "" ] ]',
              'graph [ node [ id 0 label "A" vis2D [ x 0 ] ] ]',
              'graph [ node [ id 0 label "A" ] node [ id 1 label "B" ] edge [ source 0 target 1 ] ]',
              'graph [ node [ id 0 label "A" ] ',
              'graph [ node [ id 0 label "A" ] ] ]',
              'graph [ node [ id 0 label "A ] ]',
              'graph [ node id ]',
              'graph [ node [ id 1.5 label "A" ] ]',
              'node [ id 0 label "A" ]',
              'graph [ ] graph [ ]',
              'graph 5',
              'graph [ name 5 ]',
              'graph [ node [ id @ label "A" ] ]'):
        with raises(IncorrectGML):
            gml_string(t)


def test_error_names_record():
    with raises(IncorrectGML, match='node 7'):
        gml_string('graph [ node [ id 7 label "A" ] node [ id 7 label "B" ] ]')
    with raises(IncorrectGML, match=r'edge 1 \(0, 2\)'):
        gml_string('graph [ node [ id 0 label "A" ] node [ id 1 label "B" ] '
                   'edge [ source 0 target 1 label "-" ] edge [ source 0 target 2 label "-" ] ]')


def test_files(tmp_path):
    assert gml(StringIO(text)).vertices_count == 3
    file = tmp_path / 'graph.gml'
    file.write_text(text)
    assert gml(str(file)).name == 'ethanol skeleton'
    assert gml(file).edges_count == 2


def test_coordinates_precision():
    plane = {0: (0.1 + 0.2, -1 / 3), 1: (1e-07, 123456.789012345), 2: (2, -0.)}
    g = Graph(['A', 'B', 'C'], [(0, 1, '-'), (1, 2, '-')], plane=plane)
    r = gml_string(g.get_gml_string(with_coords=True))
    assert r._plane == {n: (float(x), float(y)) for n, (x, y) in plane.items()}
    assert r.get_gml_string(True) == g.get_gml_string(True)
