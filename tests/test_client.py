import pytest
import requests

import client
from querystring import Pair


class FakeResponse:
    def __init__(self, data, status_code=200):
        self.data = data
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError('%d error' % self.status_code)

    def json(self):
        return self.data


@pytest.fixture
def calls(monkeypatch):
    calls = []

    def fake_get(url, params=None):
        calls.append(('GET', url, params))
        return FakeResponse({'GET': [['a', '1'], ['a', '2']], 'POST': []})

    def fake_post(url, data=None, headers=None):
        calls.append(('POST', url, data, headers))
        return FakeResponse({'GET': [], 'POST': [['b', 'x y']]})

    monkeypatch.setattr(requests, 'get', fake_get)
    monkeypatch.setattr(requests, 'post', fake_post)
    return calls


def test_submit_get(calls):
    pairs = client.submit('http://localhost/echo', 'a=1&a=2')
    assert pairs == [Pair('a', '1'), Pair('a', '2')]
    assert calls == [('GET', 'http://localhost/echo', 'a=1&a=2')]


def test_submit_post(calls):
    pairs = client.submit('http://localhost/echo', 'b=x%20y', method='POST')
    assert pairs == [('b', 'x y')]
    assert calls == [('POST', 'http://localhost/echo', 'b=x%20y',
                      {'Content-Type': 'application/x-www-form-urlencoded'})]


def test_unsupported_method(calls):
    with pytest.raises(ValueError):
        client.submit('http://localhost/echo', 'a=1', method='PUT')
    assert calls == []


def test_http_error(monkeypatch):
    monkeypatch.setattr(requests, 'get',
                        lambda url, params=None: FakeResponse({'error': 'bad'}, 400))
    with pytest.raises(requests.HTTPError):
        client.submit('http://localhost/echo', 'a=%FF')
