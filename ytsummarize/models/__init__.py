from .video import (
    YouTubeReference,
    TweetReference,
    VideoReference,
    VideoMetadata,
    MetadataLookup,
    TranscriptContent,
    VideoContent,
    ExtractedContent,
    SummaryResult,
    SummaryReport,
    source_kind_of,
)
from .api import SummarizeRequest, SummarizeResponse
from .enums import SourceKind, LLMRole, LLMProviderType
