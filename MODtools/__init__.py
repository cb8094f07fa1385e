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
MODtools main module. labeled undirected graphs of molecules with
SMILES, GraphDFS and GML formats, canonical strings and isomorphism counting
"""
from .algorithms import *
from .containers import *
from .exceptions import *
from .files import *


__all__ = ['Graph', 'Vertex', 'Edge', 'count_matches', 'PropertiesCalculator',
           'smiles', 'graph_dfs', 'gml_string', 'gml', 'SMILESRead', 'GraphDFSRead', 'GMLRead',
           'FormatError', 'IncorrectSmiles', 'IncorrectGraphDFS', 'IncorrectGML', 'LogicError',
           'InvalidHandleError', 'CalculatorError']
