"""
Summarization service: runs the selected provider and normalizes its output
into an embeddable HTML fragment.
"""
import re

from loguru import logger

from ytsummarize.core.exceptions import SummarizationFailedError
from ytsummarize.core.providers.llm_provider import SummaryProvider
from ytsummarize.models import (
    ExtractedContent,
    SourceKind,
    SummaryResult,
    VideoContent,
    VideoMetadata,
)

CODE_FENCE_RE = re.compile(r"^\s*```[a-zA-Z]*\s*\n?(.*?)\n?\s*```\s*$", re.DOTALL)
BODY_RE = re.compile(r"<body[^>]*>(.*?)</body>", re.DOTALL | re.IGNORECASE)
HEAD_RE = re.compile(r"<head[^>]*>.*?</head>", re.DOTALL | re.IGNORECASE)
DOCUMENT_TAG_RE = re.compile(r"<!DOCTYPE[^>]*>|</?html[^>]*>|</?body[^>]*>", re.IGNORECASE)


def clean_summary_html(raw: str) -> str:
    """
    Reduce model output to an HTML fragment.

    Strips a surrounding markdown code fence and any full-document wrapper
    (doctype, html, head, body).
    """
    text = raw.strip()

    fenced = CODE_FENCE_RE.match(text)
    if fenced:
        text = fenced.group(1).strip()

    body = BODY_RE.search(text)
    if body:
        text = body.group(1)

    text = HEAD_RE.sub("", text)
    text = DOCUMENT_TAG_RE.sub("", text)
    return text.strip()


class SummarizationService:
    """
    Summarizes extracted content with a provider chosen for this request.

    Attributes:
        llm_provider: Text or multimodal backend.
    """

    def __init__(self, llm_provider: SummaryProvider):
        """
        Initialize the summarization service.

        Args:
            llm_provider: Provider for summary generation.
        """
        self.llm_provider = llm_provider

    async def summarize(
        self,
        content: ExtractedContent,
        metadata: VideoMetadata,
        source_kind: SourceKind,
    ) -> SummaryResult:
        """
        Generate the summary fragment for one video.

        Returns:
            SummaryResult holding the cleaned HTML and the source kind.

        Raises:
            SummarizationFailedError: Video content for a text-only provider.
        """
        provider_name = self.llm_provider.provider_type.value.upper()
        if isinstance(content, VideoContent) and not self.llm_provider.supports_video:
            raise SummarizationFailedError(f"{provider_name} cannot summarize video content.")

        logger.info(f"Sending content to {provider_name} for summarization...")

        raw = await self.llm_provider.summarize(content, metadata)
        summary_html = clean_summary_html(raw)

        logger.info(f"Summary generated successfully ({len(summary_html)} chars)")
        return SummaryResult(summary_html=summary_html, source_kind=source_kind)
