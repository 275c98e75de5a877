"""
Application-wide constants and configuration limits.

Grouped into static classes for namespace management and discoverability.
"""

class ApiConfig:
    """Upstream endpoints."""
    YOUTUBE_VIDEOS_URL = "https://www.googleapis.com/youtube/v3/videos"
    YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


class ContentConfig:
    """Limits for downloaded media."""
    MAX_VIDEO_BYTES = 15 * 1024 * 1024  # 15 MiB, fits Gemini inline data
    DEFAULT_VIDEO_MIME_TYPE = "video/mp4"
    MIME_TYPES_BY_SUFFIX = {
        ".webm": "video/webm",
        ".mov": "video/mov",
    }
    TITLE_MAX_CHARS = 100


class CaptionConfig:
    """Caption-track fallback preferences."""
    PREFERRED_LANGUAGE = "en"
    PREFERRED_FORMAT = "srv1"  # plain <transcript><text> XML


class SummaryConfig:
    """Generation parameters for both backends."""
    TEMPERATURE = 0.7
    TEXT_MAX_TOKENS = 1000
    MULTIMODAL_MAX_TOKENS = 4000


class ArtifactConfig:
    """File naming for persisted transcripts and summaries."""
    TRANSCRIPT_TEMPLATE = "transcript_{id}.txt"
    SUMMARY_TEMPLATE = "summary_{id}.html"
    ID_PATTERN = r"^[A-Za-z0-9_-]+$"
