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
from networkx import Graph as nxGraph, NetworkXException, planar_layout
from typing import Dict, Tuple
from ..exceptions import LogicError


class Calculate2D:
    __slots__ = ()

    def _calculate_2d(self) -> Dict[int, Tuple[float, float]]:
        """
        planar layout of graph vertices.

        :raise LogicError: graph is not planar
        """
        size = len(self._labels)
        if size < 2:
            return dict.fromkeys(range(size), (0., 0.))

        g = nxGraph()
        g.add_nodes_from(range(size))
        g.add_edges_from(self._edges)
        try:
            layout = planar_layout(g, scale=size ** .5)
        except NetworkXException as e:
            raise LogicError(f'{self._name}: coordinates can not be generated: {e}') from e
        return {n: (float(x), float(y)) for n, (x, y) in layout.items()}


__all__ = ['Calculate2D']
