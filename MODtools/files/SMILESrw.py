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
from io import StringIO, TextIOWrapper
from itertools import takewhile
from logging import info, warning
from pathlib import Path
from typing import Iterator, List, Union
from ..containers import Graph
from ..exceptions import IncorrectSmiles
from ..labels import digits, format_atom_label, implicit_hydrogens, is_number, symbols


# tokens structure:
# (type: int, value)
# types:
# 0: atom
# 1: bond
# 2: open branch (
# 3: close branch )
# 4: dot
# 6: ring closure number

organic_atoms = {'B', 'C', 'N', 'O', 'P', 'S', 'F', 'Cl', 'Br', 'I'}
aromatic_atoms = {'b', 'c', 'n', 'o', 'p', 's'}
bracket_aromatic_atoms = {'b', 'c', 'n', 'o', 'p', 's', 'se', 'as'}
charge_dict = {'+': 1, '++': 2, '+++': 3, '++++': 4, '-': -1, '--': -2, '---': -3, '----': -4}


class SMILESRead:
    """
    SMILES separated per lines files reader. works similar to opened file object. support `with` context manager.
    on initialization accept opened in text mode file, string path to file,
    pathlib.Path object or another buffered reader object.
    line should be start with SMILES string and optionally continues with space/tab separated name of graph.
        example:
            CC(=O)O acetic_acid
    """
    def __init__(self, file: Union[str, Path, TextIOWrapper, StringIO]):
        if isinstance(file, str):
            self.__file = open(file)
            self.__is_buffer = False
        elif isinstance(file, Path):
            self.__file = file.open()
            self.__is_buffer = False
        elif isinstance(file, (TextIOWrapper, StringIO)):
            self.__file = file
            self.__is_buffer = True
        else:
            raise TypeError('invalid file. TextIOWrapper, StringIO subclasses possible')

    def close(self, force=False):
        """
        close opened file

        :param force: force closing of externally opened file or buffer
        """
        if not self.__is_buffer or force:
            self.__file.close()

    def __enter__(self):
        return self

    def __exit__(self, _type, value, traceback):
        self.close()

    def read(self) -> List[Graph]:
        """
        parse whole file

        :return: list of parsed graphs
        """
        return list(iter(self))

    def __iter__(self) -> Iterator[Graph]:
        for line in self.__file:
            line = line.strip()
            if not line:
                continue
            smi, *name = line.split(maxsplit=1)
            g = self.parse(smi)
            if name:
                g.name = name[0]
            yield g

    @classmethod
    def parse(cls, smiles: str) -> Graph:
        """
        SMILES string parser

        :raise IncorrectSmiles: invalid string
        """
        return cls._convert_structure(cls._parse_tokens(cls._raw_tokenize(smiles)))

    @classmethod
    def _raw_tokenize(cls, smiles: str) -> List[tuple]:
        tokens = []
        i = 0
        size = len(smiles)
        while i < size:
            s = smiles[i]
            if s == '[':
                j = smiles.find(']', i)
                if j == -1:
                    raise IncorrectSmiles('atom description has not finished')
                tokens.append((0, cls._atom_parse(smiles[i + 1:j])))
                i = j + 1
                continue
            elif s == ']':
                raise IncorrectSmiles(f']..] at position {i}')
            elif s == '(':
                tokens.append((2, None))
            elif s == ')':
                tokens.append((3, None))
            elif s in digits:
                tokens.append((6, int(s)))
            elif s == '%':
                if smiles[i + 1:i + 2] == '(':  # %(nnn) closure
                    j = smiles.find(')', i)
                    number = smiles[i + 2:j] if j != -1 else ''
                    end = j + 1
                else:
                    number = smiles[i + 1:i + 3]
                    if len(number) != 2:
                        number = ''
                    end = i + 3
                if not is_number(number):
                    raise IncorrectSmiles(f'invalid closure at position {i}')
                tokens.append((6, int(number)))
                i = end
                continue
            elif s in '-=#:':
                tokens.append((1, s))
            elif s in r'\/':  # directional bonds. stereo not supported
                tokens.append((1, '-'))
            elif s == '.':
                tokens.append((4, None))
            elif s in 'CB' and smiles[i + 1:i + 2] in ('l', 'r'):
                symbol = s + smiles[i + 1]
                if symbol not in organic_atoms:  # Cr or Bl
                    raise IncorrectSmiles(f'invalid element {symbol} at position {i}')
                tokens.append((0, cls._organic_atom(symbol, False)))
                i += 2
                continue
            elif s in organic_atoms:
                tokens.append((0, cls._organic_atom(s, False)))
            elif s in aromatic_atoms:
                tokens.append((0, cls._organic_atom(s.upper(), True)))
            else:
                raise IncorrectSmiles(f'invalid symbol {s!r} at position {i}')
            i += 1
        return tokens

    @staticmethod
    def _organic_atom(element, aromatic):
        return {'element': element, 'isotope': None, 'charge': 0, 'is_radical': False, 'hydrogens': None,
                'mapping': None, 'aromatic': aromatic}

    @staticmethod
    def _atom_parse(token: str) -> dict:
        """
        bracket atom: [isotope]symbol[chirality][hydrogens][charge][radical][:class]
        """
        if not token:
            raise IncorrectSmiles('empty [] brackets')
        raw = token
        isotope = ''.join(takewhile(digits.__contains__, token))
        if isotope:
            token = token[len(isotope):]
            if isotope[0] == '0':
                raise IncorrectSmiles(f'isotope starts with 0: [{raw}]')
            isotope = int(isotope)
        else:
            isotope = None

        if token[:2] in bracket_aromatic_atoms:
            element, aromatic = token[:2].capitalize(), True
            token = token[2:]
        elif token[:1] in bracket_aromatic_atoms:
            element, aromatic = token[0].upper(), True
            token = token[1:]
        elif token[:2] in symbols:
            element, aromatic = token[:2], False
            token = token[2:]
        elif token[:1] in symbols:
            element, aromatic = token[0], False
            token = token[1:]
        else:
            raise IncorrectSmiles(f'invalid element: [{raw}]')

        if token.startswith('@'):
            chirality = ''.join(takewhile(lambda x: x == '@', token))
            token = token[len(chirality):]
            warning(f'stereo mark ignored: [{raw}]')

        if token.startswith('H'):
            h = ''.join(takewhile(digits.__contains__, token[1:]))
            token = token[1 + len(h):]
            hydrogens = int(h) if h else 1
        else:
            hydrogens = 0

        if ':' in token:
            token, mapping = token.split(':', 1)
            if not is_number(mapping):
                raise IncorrectSmiles(f'invalid class label: [{raw}]')
            mapping = int(mapping)
        else:
            mapping = None

        if token.endswith('.'):
            is_radical = True
            token = token[:-1]
        else:
            is_radical = False

        if not token:
            charge = 0
        elif token in charge_dict:
            charge = charge_dict[token]
        elif token[0] in '+-' and is_number(token[1:]):
            charge = int(token)
        else:
            raise IncorrectSmiles(f'invalid charge or atom token: [{raw}]')
        return {'element': element, 'isotope': isotope, 'charge': charge, 'is_radical': is_radical,
                'hydrogens': hydrogens, 'mapping': mapping, 'aromatic': aromatic}

    @staticmethod
    def _parse_tokens(tokens: List[tuple]) -> dict:
        atoms = []
        bonds = []
        stack = []
        cycles = {}
        last = None
        previous = None
        previous_type = None

        for token_type, token in tokens:
            if token_type == 2:  # ((((((
                if previous:
                    raise IncorrectSmiles('bond before side chain')
                elif last is None:
                    raise IncorrectSmiles('side chain before atom')
                elif previous_type == 2:
                    raise IncorrectSmiles('(( pattern invalid')
                stack.append(last)
            elif token_type == 3:  # ))))))
                if previous:
                    raise IncorrectSmiles('bond before side chain closure')
                elif previous_type == 2:
                    raise IncorrectSmiles('empty side chain')
                try:
                    last = stack.pop()
                except IndexError:
                    raise IncorrectSmiles('close side chain more than open')
            elif token_type == 1:
                if previous:
                    raise IncorrectSmiles('2 bonds in a row')
                elif last is None:
                    raise IncorrectSmiles('started from bond')
                previous = token
            elif token_type == 4:
                if previous:
                    raise IncorrectSmiles('bond before dot')
                elif stack:
                    raise IncorrectSmiles('dot in side chain')
                elif last is None:
                    raise IncorrectSmiles('empty component')
                last = None
            elif token_type == 6:  # cycle
                if last is None:
                    raise IncorrectSmiles('ring closure before atom')
                elif token in cycles:
                    n, bond = cycles.pop(token)
                    if bond and previous and bond != previous:
                        raise IncorrectSmiles(f'not equal ring closure {token} bonds')
                    if n == last:
                        raise IncorrectSmiles(f'ring closure {token} on same atom')
                    bond = bond or previous or (':' if atoms[n]['aromatic'] and atoms[last]['aromatic'] else '-')
                    bonds.append((n, last, bond))
                else:
                    cycles[token] = (last, previous)
                previous = None
            else:  # atom
                n = len(atoms)
                if last is not None:
                    bonds.append((last, n, previous or
                                  (':' if atoms[last]['aromatic'] and token['aromatic'] else '-')))
                atoms.append(token)
                last = n
                previous = None
            previous_type = token_type

        if stack:
            raise IncorrectSmiles('number of ( does not equal to number of )')
        elif cycles:
            raise IncorrectSmiles(f'ring closures {list(cycles)} are not finished')
        elif previous:
            raise IncorrectSmiles('bond on the end')
        elif previous_type == 4:
            raise IncorrectSmiles('dot on the end')
        return {'atoms': atoms, 'bonds': bonds}

    @staticmethod
    def _convert_structure(molecule: dict) -> Graph:
        atoms = molecule['atoms']
        bonds = molecule['bonds']

        labels = [format_atom_label(a['element'], a['isotope'], a['charge'], a['is_radical']) for a in atoms]
        environment = [[] for _ in atoms]
        for n, m, b in bonds:
            environment[n].append(b)
            environment[m].append(b)

        edges = list(bonds)
        for n, atom in enumerate(atoms):
            hydrogens = atom['hydrogens']
            if hydrogens is None:  # organic subset
                hydrogens = implicit_hydrogens(atom['element'], environment[n])
            for _ in range(hydrogens):
                edges.append((n, len(labels), '-'))
                labels.append('H')

        mapping = [(a['mapping'], n) for n, a in enumerate(atoms) if a['mapping'] is not None]
        external_ids = dict(mapping)
        if len(external_ids) != len(mapping):
            info('class labels are not unique. external ids ignored')
            external_ids = None
        return Graph(labels, edges, external_ids=external_ids)


def smiles(string: str) -> Graph:
    """
    graph of molecule from SMILES string

    :raise IncorrectSmiles: invalid string
    """
    return SMILESRead.parse(string)


__all__ = ['SMILESRead', 'smiles']
