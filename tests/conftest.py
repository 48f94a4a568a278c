"""Shared test constants, fixtures, and factory functions."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from blog_assistant.blog_client import BlogApiClient
from blog_assistant.config import Settings

# -- Constants --

BASE_URL = "https://blog.example.com/api/index.php"
BLOGS_URL = f"{BASE_URL}?api=blogs"
STATS_URL = f"{BASE_URL}?api=stats"
BOT_NAME = "TestBot"

POST_PAYLOAD: dict[str, Any] = {
    "id": "1",
    "title": "T",
    "author": "A",
    "content": "C",
    "created_at": "2024-01-01",
}

META_PAYLOAD: dict[str, Any] = {"total": 0, "limit": 10, "can_add_more": True}

STATS_PAYLOAD: dict[str, Any] = {
    "total_posts": 5,
    "max_posts": 100,
    "remaining_posts": 95,
    "percentage_used": 5.0,
    "can_add_more": True,
}

Handler = Callable[[httpx.Request], httpx.Response]


# -- Factories --


def make_settings(**overrides: Any) -> Settings:
    """Create a Settings instance with test defaults. Override any field."""
    defaults: dict[str, Any] = {"blog_api_base_url": BASE_URL, "bot_name": BOT_NAME}
    return Settings(**(defaults | overrides))  # type: ignore[call-arg]


def make_client(handler: Handler) -> BlogApiClient:
    """Create a BlogApiClient whose requests are answered by *handler*."""
    return BlogApiClient(BASE_URL, transport=httpx.MockTransport(handler))


def respond(status_code: int, **kwargs: Any) -> Handler:
    """Handler that answers every request with the same response."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, **kwargs)

    return _handler


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed response."""

    def __init__(self, status_code: int, **kwargs: Any) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._kwargs = kwargs

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self._status_code, **self._kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


# -- Fixtures --


@pytest.fixture
def env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set required env vars for Settings."""
    monkeypatch.setenv("BLOG_API_BASE_URL", BASE_URL)
    monkeypatch.delenv("BOT_NAME", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every env var Settings reads."""
    for name in ("BLOG_API_BASE_URL", "BOT_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
