"""moji/cli.py

Defines the moji command line tool: resolve characters, build flags, list the table or serve it over HTTP

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

import argparse
import sys

from moji import defaults, flags, http
from moji._version import current
from moji.exceptions import MojiError
from moji.registry import default as default_registry


def character(arguments, registry):
    return registry.character(arguments.name)


def key(arguments, registry):
    return registry.key(arguments.key)


def flag(arguments, registry):
    if arguments.subdivision:
        return flags.subdivision(arguments.code)
    return flags.country(arguments.code)


def listing(arguments, registry):
    entries = registry.all() if arguments.keys else registry.names()
    return '\n'.join('{0}\t{1}'.format(name, value) for name, value in entries.items())


def serve(arguments, registry):
    http.serve(arguments.host, arguments.port, registry)


def parser():
    """Returns the argument parser that defines every moji command"""
    parser = argparse.ArgumentParser(prog='moji', description='Resolve emoji by name and build flags from ISO codes')
    parser.add_argument('-v', '--version', action='version', version='moji {0}'.format(current))
    commands = parser.add_subparsers(dest='command', metavar='command')
    commands.required = True

    command = commands.add_parser('character', help='Print the character for a name such as grinningFace')
    command.add_argument('name')
    command.set_defaults(handler=character)

    command = commands.add_parser('key', help='Print the character for a canonical key such as CHARACTER_T_REX')
    command.add_argument('key')
    command.set_defaults(handler=key)

    command = commands.add_parser('flag', help='Print the flag for a two letter country code')
    command.add_argument('code')
    command.add_argument('-s', '--subdivision', action='store_true',
                         help='Treat the code as an ISO 3166-2 subdivision, such as gbsct')
    command.set_defaults(handler=flag)

    command = commands.add_parser('list', help='Print every known character')
    command.add_argument('-k', '--keys', action='store_true', help='Show canonical keys instead of names')
    command.set_defaults(handler=listing)

    command = commands.add_parser('serve', help='Serve the characters and flags over HTTP')
    command.add_argument('--host', default=defaults.host, help='Interface to bind to')
    command.add_argument('-p', '--port', default=defaults.port, type=int, help='Port on which to run the server')
    command.set_defaults(handler=serve)
    return parser


def terminal(argv=None, registry=None):
    """Starts the terminal application, returning the exit status"""
    arguments = parser().parse_args(argv)
    try:
        output = arguments.handler(arguments, default_registry if registry is None else registry)
    except MojiError as exception:
        print("Error: {0}".format(exception.message), file=sys.stderr)
        return 1

    if output is not None:
        print(output)
    return 0
