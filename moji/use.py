"""moji/use.py

Defines the services that consume a moji HTTP server, either remotely over HTTP or locally in-process,
behind the same interface as the registry itself

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

from collections import namedtuple
from urllib.parse import quote

import requests
from falcon.testing import simulate_request

from moji import defaults
from moji.exceptions import CouldNotDetermineFlag, UnknownCharacter
from moji.http import server

Response = namedtuple('Response', ('data', 'status_code', 'headers'))


class Service(object):
    """Defines the base concept of a consumed moji service.
        This is to enable encapsulating the logic of calling a service so usage can be independant of the transport
    """
    __slots__ = ('timeout', 'raise_on')

    def __init__(self, timeout=None, raise_on=None, **kwargs):
        self.timeout = defaults.timeout if timeout is None else timeout
        raise_on = defaults.raise_on if raise_on is None else raise_on
        self.raise_on = raise_on if type(raise_on) in (tuple, list) else (raise_on, )

    def request(self, method, url, timeout=None, **params):
        """Calls the service at the specified URL using the given method"""
        raise NotImplementedError("Concrete services must define the request method")

    def get(self, url, timeout=None, **params):
        """Calls the service at the specified URL using the "GET" method"""
        return self.request('GET', url, timeout=timeout, **params)

    def character(self, name):
        """Returns the character the service resolves the given external name to"""
        return self._read(self.get('/characters/{0}'.format(quote(name, safe=''))), 'character')

    def key(self, key):
        """Returns the character the service stores under the given canonical key"""
        return self._read(self.get('/keys/{0}'.format(quote(key, safe=''))), 'character')

    def flag(self, code):
        """Returns the country flag the service builds for the given ISO 3166-1 alpha-2 code"""
        return self._read(self.get('/flags/{0}'.format(quote(code, safe=''))), 'flag')

    def subdivision(self, code):
        """Returns the subdivision flag the service builds for the given ISO 3166-2 code"""
        return self._read(self.get('/subdivisions/{0}'.format(quote(code, safe=''))), 'flag')

    def all(self):
        """Returns every canonical key the service knows about together with its character"""
        return self._read(self.get('/characters'), 'characters')

    def _read(self, response, field):
        data = response.data
        if response.status_code < 400:
            return data[field]

        if isinstance(data, dict):
            errors = data.get('errors', {})
            if 'character' in errors:
                raise UnknownCharacter(data['name'], errors['character'])
            if 'flag' in errors:
                raise CouldNotDetermineFlag(data['code'], data['reason'], errors['flag'])
        raise requests.HTTPError('{0} occured reading {1}'.format(response.status_code, field))


class HTTP(Service):
    __slots__ = ('endpoint', 'session')

    def __init__(self, endpoint, auth=None, headers=None, timeout=None, raise_on=None, **kwargs):
        super().__init__(timeout=timeout, raise_on=raise_on, **kwargs)
        self.endpoint = endpoint.rstrip('/')
        self.session = requests.Session()
        self.session.auth = auth
        self.session.headers.update(headers or {})

    def request(self, method, url, timeout=None, **params):
        response = self.session.request(method, self.endpoint + url, params=params,
                                        timeout=self.timeout if timeout is None else timeout)

        if 'json' in response.headers.get('content-type', ''):
            data = response.json()
        else:
            data = response.text

        if response.status_code in self.raise_on:
            raise requests.HTTPError('{0} {1} occured for url: {2}'.format(response.status_code, response.reason, url))

        return Response(data, response.status_code, response.headers)


class Local(Service):
    __slots__ = ('api', )

    def __init__(self, api=None, registry=None, timeout=None, raise_on=None, **kwargs):
        super().__init__(timeout=timeout, raise_on=raise_on, **kwargs)
        self.api = server(registry) if api is None else api

    def request(self, method, url, timeout=None, **params):
        result = simulate_request(self.api, method, url, params=params)

        if 'json' in result.headers.get('content-type', ''):
            data = result.json
        else:
            data = result.text

        if result.status_code in self.raise_on:
            raise requests.HTTPError('{0} occured for url: {1}'.format(result.status, url))

        return Response(data, result.status_code, result.headers)
