"""
Classify user input as a YouTube video or an X/Twitter post.
"""
import re
from urllib.parse import parse_qs, urlparse

from ytsummarize.core.exceptions import UnrecognizedUrlError
from ytsummarize.models import TweetReference, VideoReference, YouTubeReference

TWITTER_DOMAIN_RE = re.compile(r"(?:^|[/.@])(?:twitter\.com|x\.com)(?:[/:?#]|$)", re.IGNORECASE)
TWEET_STATUS_RE = re.compile(r"status(?:es)?/(\d+)")
YOUTUBE_PATH_RE = re.compile(r"^/(?:shorts|embed|live|v)/([^/?#]+)")


def _youtube_id_from_url(raw: str) -> str | None:
    """Pull the id out of common YouTube URL shapes, if raw is one."""
    parsed = urlparse(raw if "://" in raw else f"https://{raw}")
    host = (parsed.hostname or "").lower()

    if host == "youtu.be" or host.endswith(".youtu.be"):
        short = parsed.path.strip("/").split("/")[0]
        return short or None

    if host == "youtube.com" or host.endswith(".youtube.com"):
        v = parse_qs(parsed.query).get("v")
        if v and v[0]:
            return v[0]
        match = YOUTUBE_PATH_RE.match(parsed.path)
        if match:
            return match.group(1)
    return None


def resolve_reference(raw: str) -> VideoReference:
    """
    Turn a raw identifier into a VideoReference.

    X/Twitter links must carry a numeric status id. Everything else is
    treated as a YouTube video id; YouTube URLs are reduced to their id, any
    other string passes through unchanged.

    Raises:
        UnrecognizedUrlError: Empty input, or an X/Twitter link without a
            status id.
    """
    value = (raw or "").strip()
    if not value:
        raise UnrecognizedUrlError(raw or "")

    if TWITTER_DOMAIN_RE.search(value):
        match = TWEET_STATUS_RE.search(value)
        if not match:
            raise UnrecognizedUrlError(value)
        return TweetReference(url=value, tweet_id=match.group(1))

    return YouTubeReference(video_id=_youtube_id_from_url(value) or value)
