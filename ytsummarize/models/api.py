"""
Pydantic models for API request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ytsummarize.models.enums import LLMProviderType, SourceKind


class SummarizeRequest(BaseModel):
    """Request model for video summarization."""

    video: str
    provider: Optional[LLMProviderType] = None
    youtube_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("video")
    @classmethod
    def validate_video(cls, v: str) -> str:
        """Reject blank video identifiers."""
        v = v.strip()
        if not v:
            raise ValueError("A YouTube video ID/URL or an X/Twitter post URL is required")
        return v


class SummarizeResponse(BaseModel):
    """Response model for a completed summarization."""

    success: bool = True
    video_id: str
    video_title: str
    author_name: Optional[str] = None
    source_kind: SourceKind
    provider: LLMProviderType
    summary: str
    transcript: str
    html_content: str
    transcript_length: int

    model_config = ConfigDict(frozen=True)
