"""Defines fixtures that can be used to streamline tests and / or define dependencies"""
import pytest

from moji.registry import Registry


@pytest.fixture
def small_registry():
    """Defines a registry over a tiny table, independent of the characters moji ships with"""
    return Registry({
        'CHARACTER_SMILE': ':)',
        'CHARACTER_FROWN': ':(',
        'CHARACTER_KEYCAP_10': '[10]',
    })


@pytest.fixture
def log_output():
    """Defines a logger stand-in that collects every info message it is given"""
    output = []

    class Logger(object):
        def info(self, content):
            output.append(content)

    Logger.output = output
    return Logger()
