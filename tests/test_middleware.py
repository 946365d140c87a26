"""tests/test_middleware.py.

Tests the middleware that can be attached to the moji HTTP server

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
from falcon.testing import simulate_get

from moji.http import server
from moji.middleware import LogMiddleware


def test_logging_middleware(log_output):
    api = server(middleware=[LogMiddleware(logger=log_output)])

    simulate_get(api, '/flags/us')
    assert log_output.output[0].startswith('Requested: GET /flags/us')
    assert '/flags/us' in log_output.output[1]
    assert '200' in log_output.output[1]

    simulate_get(api, '/characters/notAnEmoji')
    assert '404' in log_output.output[3]


def test_logging_middleware_default_logger():
    assert LogMiddleware().logger.name == 'moji'


def test_server_logs_by_default(caplog):
    caplog.set_level('INFO', logger='moji')
    simulate_get(server(), '/characters/tRex')
    assert 'Requested: GET /characters/tRex' in caplog.text
