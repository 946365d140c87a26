"""moji/registry.py

Defines the registry that resolves external names and canonical keys into the characters of the table

Copyright (C) 2016  Timothy Edmund Crosley

Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
documentation files (the "Software"), to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software, and
to permit persons to whom the Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all copies or
substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED
TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
OTHER DEALINGS IN THE SOFTWARE.

"""
from __future__ import absolute_import

import logging
from types import MappingProxyType

from moji import format
from moji.characters import CHARACTERS
from moji.exceptions import UnknownCharacter

logger = logging.getLogger('moji')


class Registry(object):
    """Read-only access to a table of characters, by external name or by canonical key.

    The wrapped table is never modified, so a single registry can be shared freely between threads.
    """
    __slots__ = ('table', )

    def __init__(self, table=CHARACTERS):
        self.table = table if table is CHARACTERS else MappingProxyType(dict(table))

    def character(self, name):
        """Returns the character for an external name such as grinningFace, tRex or keycap10"""
        return self._lookup(format.canonical_key(name), name)

    def key(self, key):
        """Returns the character stored under an exact canonical key such as CHARACTER_GRINNING_FACE"""
        return self._lookup(key, key)

    def all(self):
        """Returns every canonical key together with its character"""
        return self.table

    def names(self):
        """Returns every character keyed by the camelcased name that resolves to it"""
        return {format.camelcase(key): value for key, value in self.table.items()}

    def _lookup(self, key, name):
        try:
            return self.table[key]
        except KeyError:
            logger.debug('Unknown character: {0} ({1})'.format(name, key))
            raise UnknownCharacter(name)

    def __contains__(self, key):
        return key in self.table

    def __iter__(self):
        return iter(self.table)

    def __len__(self):
        return len(self.table)


default = Registry()


def character(name):
    """Returns the character for the given external name using the default table"""
    return default.character(name)


def key(key):
    """Returns the character stored under the given canonical key in the default table"""
    return default.key(key)


def all_characters():
    """Returns every (canonical key, character) pair of the default table"""
    return default.all()


def names():
    return default.names()
