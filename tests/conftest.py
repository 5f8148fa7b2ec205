"""Shared fixtures: isolated settings, an in-memory store and a scripted backend."""
import json
from datetime import datetime, timezone

import httpx
import pytest

from bundlbe.config import Settings
from bundlbe.services.api_client import BundlBeAPIClient
from bundlbe.services.key_value_store import InMemoryStore

BASE_URL = "https://backend.test/functions/v1"
NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeBackend:
    """Records every request and answers from a per-route script."""

    def __init__(self):
        self.calls = []
        self.routes = {}

    def respond(self, method: str, path: str, status_code: int = 200, json_body=None, text=None, exc=None):
        self.routes[(method, path)] = (status_code, json_body, text, exc)

    def calls_to(self, method: str, path: str):
        return [c for c in self.calls if c["method"] == method and c["path"] == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.replace("/functions/v1", "", 1)
        body = json.loads(request.content) if request.content else None
        self.calls.append({"method": request.method, "path": path, "body": body, "headers": dict(request.headers)})

        status_code, json_body, text, exc = self.routes.get((request.method, path), (404, None, "not found", None))
        if exc is not None:
            raise exc
        if json_body is not None:
            return httpx.Response(status_code, json=json_body)
        return httpx.Response(status_code, text=text or "")


@pytest.fixture
def settings():
    return Settings(api_base_url=BASE_URL, _env_file=None)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def api_client(settings, backend):
    return BundlBeAPIClient(settings, transport=httpx.MockTransport(backend.handler))
