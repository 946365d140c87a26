"""moji/__init__.py

moji resolves human-readable names to emoji and builds flag emoji from ISO 3166 country and subdivision codes.

    >>> import moji
    >>> moji.character('grinningFace')
    '😀'
    >>> moji.country('us')
    '🇺🇸'

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

from moji import (
    defaults,
    exceptions,
    flags,
    format,
    http,
    middleware,
    output_format,
    registry,
    test,
    use,
)
from moji._version import current
from moji.exceptions import CouldNotDetermineFlag, MojiError, UnknownCharacter
from moji.flags import country, subdivision
from moji.format import camelcase, canonical_key
from moji.registry import Registry, all_characters, character, key, names

__version__ = current
