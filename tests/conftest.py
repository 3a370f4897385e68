"""Shared fixtures: settings and an httpx MockTransport that records requests."""

from __future__ import annotations

from typing import Any, Callable, List

import httpx
import pytest

from fantasypros_mcp.client import FantasyProsClient
from fantasypros_mcp.config import Settings


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def base_path() -> str:
    return "/public/v2"


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture
def transport_for() -> Callable[..., RecordingTransport]:
    """Build a recording transport answering every request with ``payload``."""

    def factory(payload: Any = None, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, json=payload))

    return factory


@pytest.fixture
def ok_transport(transport_for) -> RecordingTransport:
    return transport_for({"items": [{"id": 1, "title": "Injury update"}]})


@pytest.fixture
def make_client(settings: Settings) -> Callable[[httpx.AsyncBaseTransport], FantasyProsClient]:
    def factory(transport: httpx.AsyncBaseTransport) -> FantasyProsClient:
        return FantasyProsClient(settings, transport=transport)

    return factory
