"""
Request-scoped domain values passed between the pipeline stages.
"""
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ytsummarize.models.enums import LLMProviderType, SourceKind

# --- Video references ---

class YouTubeReference(BaseModel):
    kind: Literal["youtube"] = "youtube"
    video_id: str

    model_config = ConfigDict(frozen=True)

    @property
    def artifact_id(self) -> str:
        return self.video_id

    @property
    def source_url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.video_id}"


class TweetReference(BaseModel):
    kind: Literal["twitter"] = "twitter"
    url: str
    tweet_id: str

    model_config = ConfigDict(frozen=True)

    @property
    def artifact_id(self) -> str:
        return self.tweet_id

    @property
    def source_url(self) -> str:
        return f"https://x.com/i/status/{self.tweet_id}"


VideoReference = Union[YouTubeReference, TweetReference]


def source_kind_of(reference: VideoReference) -> SourceKind:
    """Map a reference variant to its SourceKind."""
    if isinstance(reference, TweetReference):
        return SourceKind.TWITTER
    return SourceKind.YOUTUBE

# --- Metadata ---

class VideoMetadata(BaseModel):
    title: str
    author_name: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class MetadataLookup(BaseModel):
    """
    Result of the existence check.

    For tweets the raw mirror payload is kept so the extractor can locate
    the media without a second lookup.
    """
    metadata: VideoMetadata
    tweet: Optional[dict[str, Any]] = None

    model_config = ConfigDict(frozen=True)

# --- Extracted content ---

class TranscriptContent(BaseModel):
    kind: Literal["transcript"] = "transcript"
    text: str

    model_config = ConfigDict(frozen=True)

    @property
    def display_text(self) -> str:
        return self.text


class VideoContent(BaseModel):
    kind: Literal["video"] = "video"
    data: bytes = Field(repr=False)
    mime_type: str
    caption: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def display_text(self) -> str:
        return self.caption


ExtractedContent = Union[TranscriptContent, VideoContent]

# --- Results ---

class SummaryResult(BaseModel):
    summary_html: str
    source_kind: SourceKind

    model_config = ConfigDict(frozen=True)


class SummaryReport(BaseModel):
    """Everything a finished pipeline run produced."""
    reference: VideoReference = Field(discriminator="kind")
    metadata: VideoMetadata
    content_text: str
    summary: SummaryResult
    html_document: str
    provider: LLMProviderType

    model_config = ConfigDict(frozen=True)
