"""
Dependency injection factories for FastAPI.

Everything that talks to an upstream is created per request, so requests
share no client or credential state.
"""
from functools import lru_cache
from typing import AsyncIterator

import httpx
from fastapi import Depends

from ytsummarize.core.config import Settings, settings
from ytsummarize.services.pipeline import SummaryPipeline
from ytsummarize.services.storage import ArtifactStore


def get_settings() -> Settings:
    """Application settings."""
    return settings


@lru_cache
def _artifact_store_for(output_dir: str) -> ArtifactStore:
    return ArtifactStore(output_dir)


def get_artifact_store(app_settings: Settings = Depends(get_settings)) -> ArtifactStore:
    """Get the artifact store for transcripts and summary reports."""
    return _artifact_store_for(app_settings.OUTPUT_DIR)


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Request-scoped HTTP client, closed when the response is sent."""
    async with httpx.AsyncClient(follow_redirects=True) as client:
        yield client


def get_pipeline(
    app_settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    artifact_store: ArtifactStore = Depends(get_artifact_store),
) -> SummaryPipeline:
    """
    Get the summarization pipeline.

    Wires together:
    - MetadataService for the existence check
    - ContentExtractor for transcripts / post videos
    - ArtifactStore for persisted results
    """
    return SummaryPipeline.from_settings(
        settings=app_settings,
        http_client=http_client,
        artifact_store=artifact_store,
    )
