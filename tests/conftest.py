"""Shared fixtures for the test suite (no external API keys required)."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest

from tasksplit.api.dependencies import get_extractor
from tasksplit.api.main import app
from tasksplit.config import Settings
from tasksplit.extraction.coordinator import TaskExtractor

Handler = Callable[[httpx.Request], httpx.Response]


def make_settings(**overrides: object) -> Settings:
    """Settings built from defaults only, ignoring any local .env file."""
    values: dict[str, object] = {"remote_api_key": "", "anthropic_api_key": ""}
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore[arg-type]


def chat_completion(content: str, total_tokens: int = 0) -> dict[str, object]:
    """Minimal chat-completions payload wrapping *content*."""
    return {
        "choices": [{"message": {"role": "assistant", "content": content}}],
        "usage": {"total_tokens": total_tokens},
    }


def mock_http_client(handler: Handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def keyed_settings() -> Settings:
    return make_settings(remote_api_key="test-key")


@pytest.fixture
def extractor(settings: Settings) -> TaskExtractor:
    return TaskExtractor(settings)


@pytest.fixture
def keyed_extractor(keyed_settings: Settings) -> TaskExtractor:
    return TaskExtractor(keyed_settings)


@pytest.fixture
def use_extractor() -> Iterator[Callable[[TaskExtractor], None]]:
    """Install an extractor for the API routes; removed after the test."""

    def install(extractor: TaskExtractor) -> None:
        app.dependency_overrides[get_extractor] = lambda: extractor

    yield install
    app.dependency_overrides.pop(get_extractor, None)
