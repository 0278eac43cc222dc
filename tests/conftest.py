"""Shared fixtures: a requests.Session that records requests instead of sending them."""

import json

import pytest
import requests

from novacloud_client import Client

FIXED_TIME = 1672531200  # 2023-01-01T00:00:00Z


def make_response(status=200, body=None, headers=None):
    response = requests.Response()
    response.status_code = status
    response.encoding = "utf-8"
    if body is None:
        response._content = None
    elif isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode()
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = body.encode() if isinstance(body, str) else body
    response.headers.update(headers or {})
    return response


class FakeSession(requests.Session):
    def __init__(self):
        super().__init__()
        self.sent = []
        self.send_kwargs = []
        self._responses = []

    def queue(self, status=200, body=None, headers=None):
        self._responses.append(make_response(status, body, headers))

    def send(self, request, **kwargs):
        self.sent.append(request)
        self.send_kwargs.append(kwargs)
        if self._responses:
            return self._responses.pop(0)
        return make_response(200, "")

    @property
    def last(self):
        return self.sent[-1]

    def last_json(self):
        return json.loads(self.last.body)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return Client(
        app_key="app_key",
        app_secret="app_secret",
        service_domain="api.example.com",
        session=session,
    )
