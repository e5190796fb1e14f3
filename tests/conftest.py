from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from vimeokit.client import Client
from vimeokit.config import ClientConfig
from vimeokit.transport import HTTPTransport


class FakeAPI:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, *, status: int = 200, json_body: Any = None, content: bytes | None = None) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status, content=content)
            if json_body is None:
                return httpx.Response(status)
            return httpx.Response(status, json=json_body)

        self.routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"error": f"no route for {request.method} {request.url.path}"})
        return handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def last_params(self) -> dict[str, str]:
        return dict(self.last.url.params)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        _env_file=None,
        base_url="https://api.example.test",
        access_token="token-123",
        retry_attempts=1,
        retry_backoff_seconds=0,
    )


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def client(config: ClientConfig, api: FakeAPI):
    transport = HTTPTransport(config, transport=httpx.MockTransport(api))
    with Client(config, transport=transport) as c:
        yield c
