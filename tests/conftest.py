"""Shared fixtures for blog client tests."""

import json
from dataclasses import dataclass
from typing import Any
from unittest.mock import MagicMock, patch

import httpx
import pytest

from blog_client import BlogClient, BlogConfig, MemoryTokenStorage

BASE_URL = "http://blog.test"
TOKEN_URL = f"{BASE_URL}/api/token"


def make_response(status_code: int, json_data: Any = None) -> httpx.Response:
    """Create a mock httpx.Response."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.headers = {}
    response.json.return_value = json_data if json_data is not None else {}
    response.content = json.dumps(json_data).encode() if json_data is not None else b""
    return response


@dataclass
class RecordedCall:
    """One request seen by the fake server."""

    method: str
    url: str
    headers: dict[str, str]
    json: Any = None
    content: Any = None


class FakeServer:
    """Stands in for ``httpx.AsyncClient.request``.

    Responses are queued per (method, url); the last queued response is
    repeated once the queue is down to one entry. Exceptions are raised.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[Any]] = {}
        self.calls: list[RecordedCall] = []

    def respond(self, method: str, url: str, status_code: int, json_data: Any = None) -> None:
        self.routes.setdefault((method, url), []).append(make_response(status_code, json_data))

    def fail(self, method: str, url: str, error: Exception) -> None:
        self.routes.setdefault((method, url), []).append(error)

    def calls_to(self, url: str) -> list[RecordedCall]:
        return [c for c in self.calls if c.url == url]

    def __call__(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        self.calls.append(
            RecordedCall(
                method=method,
                url=url,
                headers=dict(kwargs.get("headers") or {}),
                json=kwargs.get("json"),
                content=kwargs.get("content"),
            )
        )
        queue = self.routes[(method, url)]
        item = queue[0] if len(queue) == 1 else queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def config() -> BlogConfig:
    """Create a test configuration."""
    return BlogConfig(base_url=BASE_URL)


@pytest.fixture
def storage() -> MemoryTokenStorage:
    """Storage holding a stale access token."""
    return MemoryTokenStorage({"access_token": "T1"})


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
async def client(config: BlogConfig, storage: MemoryTokenStorage, server: FakeServer):
    """Pooled client with a refresh_token cookie, wired to the fake server."""
    async with BlogClient(config, storage=storage, cookies="a=1; refresh_token=R1; b=2") as client:
        with patch.object(client._http_client, "request", side_effect=server):
            yield client


@pytest.fixture
async def anonymous_client(config: BlogConfig, storage: MemoryTokenStorage, server: FakeServer):
    """Pooled client without any refresh token."""
    async with BlogClient(config, storage=storage, cookies="a=1; b=2") as client:
        with patch.object(client._http_client, "request", side_effect=server):
            yield client
