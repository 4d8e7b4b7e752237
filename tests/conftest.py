"""Test fixtures: a fake upstream HTTP session wired into the app."""
import json

import pytest
import requests
from fastapi.testclient import TestClient

from composition.http import get_http_session
from composition.main import app
from composition.settings import Settings, get_settings


class FakeResponse:
    def __init__(self, *, payload=None, text=None, status_code=200):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Records GET calls and replays queued responses or errors."""

    def __init__(self):
        self.calls = []
        self.queue = []

    def reply(self, payload=None, *, text=None, status_code=200):
        self.queue.append(FakeResponse(payload=payload, text=text, status_code=status_code))

    def fail(self, exc: Exception):
        self.queue.append(exc)

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if not self.queue:
            raise AssertionError("unexpected upstream call")
        nxt = self.queue.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


@pytest.fixture
def test_settings():
    return Settings(
        MERCURY_TOKEN="mercury-token",
        YOUTUBE_TOKEN="youtube-key",
        MERCURY_URL="https://mercury.test/parser",
        YOUTUBE_API_URL="https://youtube.test/v3/videos",
    )


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session, test_settings):
    app.dependency_overrides[get_http_session] = lambda: session
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
