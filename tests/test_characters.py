"""tests/test_characters.py.

Tests to ensure the shipped character table is well formed and agrees with the flag encoders

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
import pytest

from moji import flags, format
from moji.characters import CHARACTERS

COUNTRIES = {
    'CHARACTER_FLAG_ARGENTINA': 'ar',
    'CHARACTER_FLAG_CANADA': 'ca',
    'CHARACTER_FLAG_EUROPEAN_UNION': 'eu',
    'CHARACTER_FLAG_GERMANY': 'de',
    'CHARACTER_FLAG_JAPAN': 'jp',
    'CHARACTER_FLAG_SOUTH_AFRICA': 'za',
    'CHARACTER_FLAG_UKRAINE': 'ua',
    'CHARACTER_FLAG_UNITED_KINGDOM': 'gb',
    'CHARACTER_FLAG_UNITED_STATES': 'us',
}

SUBDIVISIONS = {
    'CHARACTER_FLAG_ENGLAND': 'gbeng',
    'CHARACTER_FLAG_SCOTLAND': 'gbsct',
    'CHARACTER_FLAG_WALES': 'gbwls',
}


def test_keys_are_canonical():
    """Test to ensure every key of the table has the canonical upper snake case shape"""
    for key in CHARACTERS:
        assert format.is_canonical(key)
        assert key.startswith('CHARACTER_')


def test_values_are_sequences():
    """Test to ensure every entry holds a non empty string"""
    for value in CHARACTERS.values():
        assert isinstance(value, str)
        assert value


def test_table_is_immutable():
    """Test to ensure the table can not be changed at runtime"""
    with pytest.raises(TypeError):
        CHARACTERS['CHARACTER_NEW'] = 'new'

    with pytest.raises(TypeError):
        del CHARACTERS['CHARACTER_GRINNING_FACE']


def test_sequences_are_kept_whole():
    """Test to ensure joiners, variation selectors and skin tone modifiers are part of the stored sequence"""
    assert CHARACTERS['CHARACTER_HEART_ON_FIRE'] == '\u2764\uFE0F\u200D\U0001F525'
    assert CHARACTERS['CHARACTER_WAVING_HAND_DARK_SKIN_TONE'] == '\U0001F44B\U0001F3FF'
    assert CHARACTERS['CHARACTER_KEYCAP_NUMBER_SIGN'] == '#\uFE0F\u20E3'


@pytest.mark.parametrize('key, code', sorted(COUNTRIES.items()))
def test_country_flags(key, code):
    """Test to ensure the stored country flags are exactly what the region flag encoder builds"""
    assert CHARACTERS[key] == flags.country(code)


@pytest.mark.parametrize('key, code', sorted(SUBDIVISIONS.items()))
def test_subdivision_flags(key, code):
    """Test to ensure the stored subdivision flags are exactly what the tag sequence encoder builds"""
    assert CHARACTERS[key] == flags.subdivision(code)


def test_every_regional_indicator_pair_is_a_country_flag():
    """Test to ensure any stored pair of regional indicators decodes back to letters the encoder accepts"""
    for key, value in CHARACTERS.items():
        if len(value) == 2 and all(0x1F1E6 <= ord(character) <= 0x1F1FF for character in value):
            code = ''.join(chr(ord(character) - 0x1F1E6 + ord('A')) for character in value)
            assert flags.country(code) == value
            assert key.startswith('CHARACTER_FLAG_')
