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


class FormatError(ValueError):
    """
    malformed input data
    """


class IncorrectSmiles(FormatError):
    """
    SMILES string parsing error
    """


class IncorrectGraphDFS(FormatError):
    """
    GraphDFS string parsing error
    """


class IncorrectGML(FormatError):
    """
    GML data parsing error
    """


class LogicError(Exception):
    """
    operation is invalid for current graph state
    """


class InvalidHandleError(KeyError):
    """
    null or foreign vertex or edge descriptor
    """


class CalculatorError(Exception):
    """
    chemical properties calculation impossible
    """


__all__ = ['FormatError', 'IncorrectSmiles', 'IncorrectGraphDFS', 'IncorrectGML', 'LogicError',
           'InvalidHandleError', 'CalculatorError']
