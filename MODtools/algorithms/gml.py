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
from logging import info


def gml_str(value: str) -> str:
    return '"{}"'.format(value.replace('\\', '\\\\').replace('"', '\\"'))


class GML:
    __slots__ = ()

    def get_gml_string(self, with_coords: bool = False) -> str:
        """
        GML representation of graph. Vertices ids are internal indices.

        :param with_coords: write 2D coordinates. stored coordinates used if available for all vertices,
            otherwise layout generated.
        :raise LogicError: coordinates requested but can not be generated
        """
        if with_coords:
            plane = self._plane
            if len(plane) != len(self._labels):
                info(f'{self._name}: generating 2D layout')
                plane = self._calculate_2d()
        else:
            plane = None

        gml = ['graph [']
        for n, label in enumerate(self._labels):
            if plane is None:
                gml.append(f'\tnode [ id {n} label {gml_str(label)} ]')
            else:
                x, y = plane[n]
                gml.append(f'\tnode [ id {n} label {gml_str(label)} vis2D [ x {float(x)!r} y {float(y)!r} ] ]')
        for (n, m), label in zip(self._edges, self._edge_labels):
            gml.append(f'\tedge [ source {n} target {m} label {gml_str(label)} ]')
        gml.append(']')
        gml.append('')
        return '\n'.join(gml)


__all__ = ['GML']
