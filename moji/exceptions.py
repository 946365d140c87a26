"""moji/exceptions.py

Defines the exceptions raised by moji when a character or flag can not be produced

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


class MojiError(Exception):
    """The base class for every error moji raises on purpose"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class UnknownCharacter(MojiError):
    """Raised when a name does not resolve to any character in the table.

    The name attribute holds what the caller passed in, not the canonical key derived from it, as that is the
    value they will recognize.
    """

    def __init__(self, name, message=None):
        super().__init__(message or '`{0}` is not a known character.'.format(name))
        self.name = name


class CouldNotDetermineFlag(MojiError):
    """Raised when a country or subdivision code can not be turned into a flag"""
    reasons = ('length', 'letters', 'tag')

    def __init__(self, code, reason, message=None):
        if reason not in self.reasons:
            raise ValueError('Unknown flag failure reason: {0}'.format(reason))

        super().__init__(message or '`{0}` is not a valid flag code.'.format(code))
        self.code = code
        self.reason = reason

    @classmethod
    def wrong_length(cls, code):
        return cls(code, 'length', '`{0}` is not a valid country code. '
                                   'A valid country code should have two characters.'.format(code))

    @classmethod
    def not_letters(cls, code):
        return cls(code, 'letters', '`{0}` is not a valid country code. '
                                    'A valid country code should only contain the letters A to Z.'.format(code))

    @classmethod
    def invalid_tag(cls, code):
        return cls(code, 'tag', '`{0}` is not a valid subdivision code. '
                                'A valid subdivision code should only contain ASCII letters and digits.'.format(code))
