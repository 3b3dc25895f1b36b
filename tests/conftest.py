"""Shared test fixtures and configuration."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from vibesort.client.client import AsyncVibesort
from vibesort.config.settings import Settings

BASE_URL = "http://llm.test/v1"


class MockEndpoint:
    """Programmable chat-completion endpoint backed by ``httpx.MockTransport``.

    Records every request it receives so tests can inspect the wire format.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._respond: Callable[[httpx.Request], httpx.Response] = lambda r: httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    def reply_with_content(self, content: str) -> None:
        """Answer 200 with a single choice carrying *content*."""
        self.reply_json({"choices": [{"message": {"content": content}}]})

    def reply_json(self, body: dict[str, Any], status_code: int = 200) -> None:
        self._respond = lambda r: httpx.Response(status_code, json=body)

    def reply_text(self, text: str, status_code: int) -> None:
        self._respond = lambda r: httpx.Response(status_code, text=text)

    def fail_with(self, exc_type: type[httpx.RequestError], message: str = "boom") -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_type(message, request=request)

        self._respond = _raise

    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        ai={"api_key": "test-api-key", "model": "test-model", "base_url": BASE_URL},
    )


@pytest.fixture
def endpoint() -> MockEndpoint:
    return MockEndpoint()


@pytest.fixture
def sorter(endpoint: MockEndpoint) -> AsyncVibesort:
    """Async client wired to the mock endpoint."""
    return AsyncVibesort("test-api-key", "test-model", BASE_URL, transport=endpoint.transport)
