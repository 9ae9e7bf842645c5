import http.client
import io
import urllib.error
import urllib.request

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app


class FakeResponse(io.BytesIO):
    """Stand-in for the object ``urllib.request.urlopen`` returns."""

    def __init__(self, body: bytes, status: int = 200, headers=None):
        super().__init__(body)
        self.status = status
        self.headers = http.client.HTTPMessage()
        for key, value in (headers or {}).items():
            self.headers[key] = value


@pytest.fixture
def settings(request):
    # Tests pass tighter bounds with parametrize(..., indirect=True)
    return getattr(request, "param", Settings())


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def upstream(monkeypatch):
    """
    Replace ``urlopen`` with a fake. Configure it by setting ``body``,
    ``status``, ``headers`` or ``error``; requests are recorded in ``calls``.
    """

    class Upstream:
        body = b""
        status = 200
        headers = {"Content-Type": "application/rss+xml; charset=utf-8"}
        error = None
        calls = []

        def __call__(self, request, timeout=None):
            self.calls.append((request, timeout))
            if self.error is not None:
                raise self.error
            if self.status >= 400:
                raise urllib.error.HTTPError(
                    request.full_url, self.status, "error", http.client.HTTPMessage(), None
                )
            return FakeResponse(self.body, self.status, self.headers)

    fake = Upstream()
    fake.calls = []
    monkeypatch.setattr(urllib.request, "urlopen", fake)
    return fake
