"""moji/flags.py

Builds flag characters from ISO 3166 codes: pairs of regional indicators for countries and tag sequences for
subdivisions such as England, Scotland and Wales

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

import string

from moji.exceptions import CouldNotDetermineFlag

REGIONAL_INDICATOR_A = 0x1F1E6
WAVING_BLACK_FLAG = 0x1F3F4
TAG_BASE = 0xE0000
CANCEL_TAG = 0xE007F

LETTERS = frozenset(string.ascii_letters)
TAG_CHARACTERS = frozenset(string.ascii_letters + string.digits)


def regional_indicator(letter):
    """Returns the regional indicator symbol for a single uppercase letter, A -> U+1F1E6"""
    return chr(REGIONAL_INDICATOR_A + ord(letter) - ord('A'))


def country(code):
    """Returns the flag of the country with the given ISO 3166-1 alpha-2 code, regardless of case: us -> 🇺🇸"""
    if len(code) != 2:
        raise CouldNotDetermineFlag.wrong_length(code)

    if not LETTERS.issuperset(code):
        raise CouldNotDetermineFlag.not_letters(code)

    return ''.join(regional_indicator(letter) for letter in code.upper())


def tag(character):
    """Returns the invisible tag character that mirrors the given ASCII character"""
    return chr(TAG_BASE + ord(character))


def subdivision(code):
    """Returns the tag sequence flag of an ISO 3166-2 subdivision given without its hyphen: gbeng -> England"""
    if not code or not TAG_CHARACTERS.issuperset(code):
        raise CouldNotDetermineFlag.invalid_tag(code)

    return chr(WAVING_BLACK_FLAG) + ''.join(tag(character) for character in code.lower()) + chr(CANCEL_TAG)
