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
from typing import Callable, Optional


class Depict:
    """
    Depiction settings for external renderer. Renderer itself is not a part of package.
    """
    __slots__ = ()

    @property
    def image(self) -> Optional[Callable[[], str]]:
        """
        custom depiction function. returns file name prefix of depiction.
        """
        return self._image

    @image.setter
    def image(self, image: Optional[Callable[[], str]]):
        if image is not None and not callable(image):
            raise TypeError('callable expected')
        self._image = image
        self._image_name = None

    def set_image(self, image: Optional[Callable[[], str]]):
        """
        Set custom depiction. Function will be called only once. None resets to autogenerated depiction.
        """
        self.image = image

    @property
    def image_command(self) -> str:
        """
        command for post-processing of custom depiction
        """
        return self._image_command

    @image_command.setter
    def image_command(self, command: str):
        self._image_command = command

    @property
    def depiction_name(self) -> str:
        """
        name of depiction file without extension
        """
        if self._image is None:
            return f'g_{self._id}'
        if self._image_name is None:
            self._image_name = self._image()
        return self._image_name

    @property
    def depiction_file(self) -> str:
        return f'{self.depiction_name}.pdf'


__all__ = ['Depict']
