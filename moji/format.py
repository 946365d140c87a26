"""moji/format.py

Defines how external names are converted into the canonical keys of the character table, and back

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

import re

from moji import defaults

NORMALIZED = re.compile('[a-z]+')
WHITESPACE = re.compile(r'\s+')
BOUNDARIES = (re.compile('(?<=.)(?=[A-Z])'), re.compile('(?<=[^0-9])(?=[0-9])'))
KEY = re.compile('[A-Z][A-Z0-9_]*')


def words(name, separator=None):
    """Splits a camelcased name into separated words, leaving runs of digits together: keycap10 -> keycap_10"""
    separator = defaults.separator if separator is None else separator
    if NORMALIZED.fullmatch(name):
        return name

    name = WHITESPACE.sub('', name)
    for boundary in BOUNDARIES:
        name = boundary.sub(separator, name)
    return name.lower()


def canonical_key(name, prefix=None, separator=None):
    """Converts any external name (grinningFace, tRex, keycap10, ...) into the canonical key used by the character table

    Never fails: names without a matching entry are only detected when the key is looked up.
    """
    separator = defaults.separator if separator is None else separator
    prefix = defaults.prefix if prefix is None else prefix
    return '{0}{1}{2}'.format(prefix, separator, words(name, separator)).upper()


def camelcase(key, prefix=None, separator=None):
    """Converts a canonical key back into the camelcased name that resolves to it: CHARACTER_T_REX -> tRex"""
    separator = defaults.separator if separator is None else separator
    prefix = '{0}{1}'.format(defaults.prefix if prefix is None else prefix, separator)
    if key.startswith(prefix):
        key = key[len(prefix):]

    parts = key.lower().split(separator)
    return parts[0] + ''.join(part.capitalize() for part in parts[1:])


def is_canonical(key):
    """Returns True if the given string has the shape of a canonical key"""
    return bool(KEY.fullmatch(key))
