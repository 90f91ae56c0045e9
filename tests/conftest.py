"""Pytest configuration and fixtures."""

import json
import os

import pytest
import requests

from zoom_meeting.config import Settings, get_settings
from zoom_meeting.credentials import Credentials


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, body=None, raw: bytes | None = None):
        self.status_code = status_code
        if raw is None:
            raw = json.dumps(body if body is not None else {}).encode("utf-8")
        self.content = raw
        self.closed = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self):
        return json.loads(self.content)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class FakeSession:
    """Session returning queued responses and recording every post."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def queue(self, *responses):
        self.responses.extend(responses)

    def post(self, url, data=None, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "data": data, "headers": headers or {}, "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class RecordingClipboard:
    def __init__(self, error: Exception | None = None):
        self.copied = []
        self.error = error

    def copy(self, text):
        if self.error is not None:
            raise self.error
        self.copied.append(text)


class RecordingOpener:
    def __init__(self, error: Exception | None = None):
        self.opened = []
        self.error = error

    def open(self, url):
        if self.error is not None:
            raise self.error
        self.opened.append(url)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep tests independent of the developer's environment."""
    for key in list(os.environ):
        if key.upper().startswith("ZOOM_MEETING_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def credentials():
    return Credentials(account_id="A", client_id="B", client_secret="C")


@pytest.fixture
def credentials_file(tmp_path):
    """Write a credentials file and return its path."""
    path = tmp_path / ".zoom-meeting.config.json"
    path.write_text(
        json.dumps({"account_id": "A", "client_id": "B", "client_secret": "C"}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings(credentials_file):
    return Settings(_env_file=None, config_path=credentials_file)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def clipboard():
    return RecordingClipboard()


@pytest.fixture
def opener():
    return RecordingOpener()


@pytest.fixture
def network_error():
    return requests.ConnectionError("connection refused")
