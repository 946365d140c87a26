"""tests/test_use.py.

Tests to ensure the services that consume a moji server behave like the local registry

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
from unittest import mock

import pytest
import requests

import moji
from moji import use


def fake_response(status_code, data, reason='OK'):
    response = mock.Mock()
    response.status_code = status_code
    response.reason = reason
    response.headers = {'content-type': 'application/json; charset=utf-8'}
    response.json.return_value = data
    return response


class TestService(object):
    """Test to ensure the base Service object works as a base Abstract service runner"""
    service = use.Service(timeout=100, raise_on=500)

    def test_init(self):
        """Test to ensure base service instantiation populates expected attributes"""
        assert self.service.timeout == 100
        assert self.service.raise_on == (500, )

    def test_defaults(self):
        """Test to ensure services fall back to the configured defaults"""
        service = use.Service()
        assert service.timeout == moji.defaults.timeout
        assert service.raise_on == moji.defaults.raise_on

    def test_request(self):
        """Test to ensure the abstract service request method raises NotImplementedError to show its abstract nature"""
        with pytest.raises(NotImplementedError):
            self.service.request('GET', '/characters')

    def test_get(self):
        """Test to ensure the abstract service get method raises NotImplementedError to show its abstract nature"""
        with pytest.raises(NotImplementedError):
            self.service.get('/characters')

    def test_character(self):
        """Test to ensure the lookup methods rely on the concrete request method"""
        with pytest.raises(NotImplementedError):
            self.service.character('grinningFace')


class TestLocal(object):
    """Test to ensure the Local service reads characters and flags from an in-process server"""
    service = use.Local()

    def test_character(self):
        assert self.service.character('grinningFace') == moji.character('grinningFace')
        assert self.service.character('keycap10') == '\U0001F51F'

    def test_key(self):
        assert self.service.key('CHARACTER_T_REX') == moji.key('CHARACTER_T_REX')

    def test_flags(self):
        assert self.service.flag('us') == moji.country('us')
        assert self.service.subdivision('gbsct') == moji.subdivision('gbsct')

    def test_all(self):
        assert self.service.all() == dict(moji.all_characters())

    def test_unknown_character(self):
        with pytest.raises(moji.UnknownCharacter) as error:
            self.service.character('notAnEmoji')
        assert error.value.name == 'notAnEmoji'

    def test_could_not_determine_flag(self):
        with pytest.raises(moji.CouldNotDetermineFlag) as error:
            self.service.flag('usa')
        assert error.value.code == 'usa'
        assert error.value.reason == 'length'

    def test_unexpected_response(self):
        response = self.service.get('/unknown')
        assert response.status_code == 404
        with pytest.raises(requests.HTTPError):
            self.service._read(response, 'character')

    def test_raise_on(self):
        with pytest.raises(requests.HTTPError):
            use.Local(raise_on=404).get('/unknown')

    def test_custom_registry(self, small_registry):
        assert use.Local(registry=small_registry).character('smile') == ':)'


class TestHTTP(object):
    """Test to ensure the HTTP service calls a remote server and translates its answers"""

    def test_init(self):
        service = use.HTTP('http://moji.test/', auth=('user', 'password'), headers={'x-client': 'tests'})
        assert service.endpoint == 'http://moji.test'
        assert service.session.auth == ('user', 'password')
        assert service.session.headers['x-client'] == 'tests'

    def test_character(self):
        service = use.HTTP('http://moji.test')
        answer = fake_response(200, {'name': 'grinningFace', 'key': 'CHARACTER_GRINNING_FACE',
                                     'character': '\U0001F600'})
        with mock.patch.object(service.session, 'request', return_value=answer) as request:
            assert service.character('grinningFace') == '\U0001F600'
        request.assert_called_once_with('GET', 'http://moji.test/characters/grinningFace', params={},
                                        timeout=moji.defaults.timeout)

    def test_flag(self):
        service = use.HTTP('http://moji.test', timeout=2)
        answer = fake_response(200, {'code': 'us', 'flag': '\U0001F1FA\U0001F1F8'})
        with mock.patch.object(service.session, 'request', return_value=answer) as request:
            assert service.flag('us') == '\U0001F1FA\U0001F1F8'
        request.assert_called_once_with('GET', 'http://moji.test/flags/us', params={}, timeout=2)

    def test_unknown_character(self):
        service = use.HTTP('http://moji.test')
        answer = fake_response(404, {'errors': {'character': '`nope` is not a known character.'}, 'name': 'nope'},
                               reason='Not Found')
        with mock.patch.object(service.session, 'request', return_value=answer):
            with pytest.raises(moji.UnknownCharacter) as error:
                service.character('nope')
        assert error.value.name == 'nope'
        assert error.value.message == '`nope` is not a known character.'

    def test_could_not_determine_flag(self):
        service = use.HTTP('http://moji.test')
        answer = fake_response(400, {'errors': {'flag': 'bad'}, 'code': 'usa', 'reason': 'length'},
                               reason='Bad Request')
        with mock.patch.object(service.session, 'request', return_value=answer):
            with pytest.raises(moji.CouldNotDetermineFlag) as error:
                service.flag('usa')
        assert error.value.reason == 'length'

    def test_server_error(self):
        service = use.HTTP('http://moji.test')
        answer = fake_response(500, {'title': '500 Internal Server Error'}, reason='Internal Server Error')
        with mock.patch.object(service.session, 'request', return_value=answer):
            with pytest.raises(requests.HTTPError):
                service.character('grinningFace')

    def test_text_response(self):
        service = use.HTTP('http://moji.test')
        answer = fake_response(200, None)
        answer.headers = {'content-type': 'text/plain'}
        answer.text = 'plain'
        with mock.patch.object(service.session, 'request', return_value=answer):
            assert service.get('/anything').data == 'plain'


def test_local_names_with_slashes():
    """Test to ensure names and codes containing slashes still come back as moji errors"""
    service = use.Local()
    with pytest.raises(moji.UnknownCharacter) as error:
        service.character('a/b')
    assert error.value.name == 'a/b'

    with pytest.raises(moji.CouldNotDetermineFlag):
        service.flag('a/')

    with pytest.raises(moji.CouldNotDetermineFlag) as error:
        service.subdivision('gb/eng')
    assert error.value.reason == 'tag'
