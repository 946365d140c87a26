"""moji/http.py

Exposes the character registry and the flag encoders over HTTP as a WSGI compatible falcon application

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

from wsgiref.simple_server import make_server

import falcon

from moji import defaults, flags, format, output_format
from moji.exceptions import CouldNotDetermineFlag, UnknownCharacter
from moji.middleware import LogMiddleware
from moji.registry import default as default_registry


def render(response, content, status=falcon.HTTP_200):
    """Renders the given content onto the response using the JSON output format"""
    response.status = status
    response.content_type = output_format.json.content_type
    response.data = output_format.json(content)


class Resource(object):
    __slots__ = ('registry', )

    def __init__(self, registry):
        self.registry = registry


class Characters(Resource):

    def on_get(self, request, response):
        render(response, {'characters': self.registry.all()})


class Character(Resource):

    def on_get(self, request, response, name):
        render(response, {'name': name, 'key': format.canonical_key(name), 'character': self.registry.character(name)})


class Key(Resource):

    def on_get(self, request, response, key):
        render(response, {'key': key, 'character': self.registry.key(key)})


class Flag(Resource):

    def on_get(self, request, response, code):
        render(response, {'code': code, 'flag': flags.country(code)})


class Subdivision(Resource):

    def on_get(self, request, response, code):
        render(response, {'code': code, 'flag': flags.subdivision(code)})


def unknown_character(request, response, exception, params):
    render(response, {'errors': {'character': exception.message}, 'name': exception.name}, falcon.HTTP_404)


def could_not_determine_flag(request, response, exception, params):
    render(response, {'errors': {'flag': exception.message}, 'code': exception.code, 'reason': exception.reason},
           falcon.HTTP_400)


def server(registry=None, middleware=None):
    """Returns a WSGI compatible server for the given registry, or the default one"""
    registry = default_registry if registry is None else registry
    middleware = [LogMiddleware()] if middleware is None else middleware

    api = falcon.App(middleware=middleware)
    api.add_route('/characters', Characters(registry))
    api.add_route('/characters/{name:path}', Character(registry))
    api.add_route('/keys/{key:path}', Key(registry))
    api.add_route('/flags/{code:path}', Flag(registry))
    api.add_route('/subdivisions/{code:path}', Subdivision(registry))
    api.add_error_handler(UnknownCharacter, unknown_character)
    api.add_error_handler(CouldNotDetermineFlag, could_not_determine_flag)
    return api


def serve(host=None, port=None, registry=None):
    """Runs the basic moji development server"""
    host = defaults.host if host is None else host
    port = defaults.port if port is None else port

    httpd = make_server(host, port, server(registry))
    print("Serving on {0}:{1}...".format(host, port))
    httpd.serve_forever()
