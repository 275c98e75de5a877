"""
Shared pytest fixtures and configuration.
"""
from typing import Callable

import httpx
import pytest
from unittest.mock import AsyncMock

from ytsummarize.main import app
from ytsummarize.api.dependencies import get_artifact_store, get_pipeline
from ytsummarize.core.config import Settings
from ytsummarize.services.storage import ArtifactStore


class AsyncItems:
    """Minimal async iterable, standing in for SDK pagers."""

    def __init__(self, items):
        self._items = list(items)

    def __aiter__(self):
        return self._gen()

    async def _gen(self):
        for item in self._items:
            yield item


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """AsyncClient whose every request is answered by handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def http_client_factory():
    """Factory for MockTransport-backed httpx clients."""
    return make_client


@pytest.fixture
def async_items():
    """Factory for async iterables (SDK pager stand-ins)."""
    return AsyncItems


@pytest.fixture
def test_settings(tmp_path):
    """Settings with every key present and artifacts under tmp_path."""
    return Settings(
        _env_file=None,
        YOUTUBE_API_KEY="yt-key",
        GEMINI_API_KEY="gemini-key",
        GROQ_API_KEY="groq-key",
        DEFAULT_LLM_PROVIDER=None,
        OUTPUT_DIR=str(tmp_path / "output"),
        LOG_FILE="",
    )


@pytest.fixture
def keyless_settings(tmp_path):
    """Settings with no keys configured in the environment."""
    return Settings(
        _env_file=None,
        YOUTUBE_API_KEY=None,
        GEMINI_API_KEY=None,
        GROQ_API_KEY=None,
        DEFAULT_LLM_PROVIDER=None,
        OUTPUT_DIR=str(tmp_path / "output"),
        LOG_FILE="",
    )


@pytest.fixture
def artifact_store(tmp_path):
    return ArtifactStore(tmp_path / "output")


@pytest.fixture
def mock_pipeline():
    """Create a mock SummaryPipeline."""
    return AsyncMock()


@pytest.fixture
def override_dependencies(mock_pipeline, artifact_store):
    """Override FastAPI dependencies for testing."""
    def override_get_pipeline():
        return mock_pipeline

    def override_get_artifact_store():
        return artifact_store

    app.dependency_overrides[get_pipeline] = override_get_pipeline
    app.dependency_overrides[get_artifact_store] = override_get_artifact_store

    yield

    app.dependency_overrides.clear()
