"""
API endpoints for video summarization and artifact downloads.
"""
import time

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse
from loguru import logger

from ytsummarize.api.dependencies import get_artifact_store, get_pipeline
from ytsummarize.core.exceptions import NotFoundError
from ytsummarize.models.api import SummarizeRequest, SummarizeResponse
from ytsummarize.services.pipeline import SummaryPipeline
from ytsummarize.services.storage import ArtifactStore


router = APIRouter()


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize_video(
    payload: SummarizeRequest,
    pipeline: SummaryPipeline = Depends(get_pipeline),
):
    """
    Summarizes a YouTube video or the video attached to an X/Twitter post.

    Args:
        payload: Video id/URL, optional provider choice and optional API keys.
        pipeline: The request-scoped summarization pipeline.

    Returns:
        SummarizeResponse: Rendered report, raw summary and extracted text.
    """
    logger.info(f"Incoming summarize request for: {payload.video}")

    start_time = time.perf_counter()
    report = await pipeline.run(payload)
    duration = time.perf_counter() - start_time
    logger.info(f"Summarization completed in {duration:.2f}s")

    return SummarizeResponse(
        video_id=report.reference.artifact_id,
        video_title=report.metadata.title,
        author_name=report.metadata.author_name,
        source_kind=report.summary.source_kind,
        provider=report.provider,
        summary=report.summary.summary_html,
        transcript=report.content_text,
        html_content=report.html_document,
        transcript_length=len(report.content_text),
    )


@router.get("/download/transcript/{video_id}")
async def download_transcript(
    video_id: str,
    store: ArtifactStore = Depends(get_artifact_store),
):
    """Download the saved transcript (or post text) for a video id."""
    path = store.transcript_path(video_id)
    if path is None:
        raise NotFoundError("Transcript file", video_id)
    return FileResponse(path, media_type="text/plain", filename=path.name)


@router.get("/download/summary/{video_id}")
async def download_summary(
    video_id: str,
    store: ArtifactStore = Depends(get_artifact_store),
):
    """Download the saved HTML summary report for a video id."""
    path = store.summary_path(video_id)
    if path is None:
        raise NotFoundError("Summary file", video_id)
    return FileResponse(path, media_type="text/html", filename=path.name)
