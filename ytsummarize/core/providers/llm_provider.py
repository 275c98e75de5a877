"""
Abstract base class for summary providers.

This module defines a vendor-neutral interface for turning extracted video
content into an HTML summary fragment. Concrete implementations (Gemini,
Groq) must implement this interface.
"""
from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from ytsummarize.models import ExtractedContent, LLMProviderType, LLMRole, VideoMetadata


class LLMMessage(BaseModel):
    """Vendor-neutral message format for LLM conversations."""

    role: LLMRole
    content: str

    model_config = ConfigDict(frozen=True)


class SummaryProvider(ABC):
    """
    Abstract interface for summary providers.

    Implementations are constructed per request with the credentials that
    request resolved, so no client state is shared between requests.

    Example:
        provider = GeminiProvider(api_key="...", model_name="gemini-2.5-flash")
        html = await provider.summarize(
            TranscriptContent(text="Hello world"),
            VideoMetadata(title="Greeting"),
        )
    """

    provider_type: ClassVar[LLMProviderType]
    supports_video: ClassVar[bool] = False

    @abstractmethod
    async def summarize(self, content: ExtractedContent, metadata: VideoMetadata) -> str:
        """
        Summarize extracted content.

        Args:
            content: Transcript text or downloaded video bytes.
            metadata: Title and author, used for prompt context.

        Returns:
            The summary as an HTML fragment.
        """
        ...
