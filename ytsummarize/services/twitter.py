"""
Video download for X/Twitter posts via the mirror API payload.
"""
from typing import Any, Optional
from urllib.parse import urlparse

import httpx
from loguru import logger

from ytsummarize.core.constants import ContentConfig
from ytsummarize.core.exceptions import (
    ContentTooLargeError,
    MediaDownloadError,
    NoVideoInTweetError,
    UpstreamTimeoutError,
)
from ytsummarize.models import TweetReference, VideoContent

VIDEO_MEDIA_TYPES = ("video", "gif")


def find_video_url(tweet: dict[str, Any]) -> Optional[str]:
    """
    Locate a playable video URL in a mirror payload.

    Order: media.videos[0].url, then the last of its variants, then the
    first video item of media.all.
    """
    media = tweet.get("media") or {}

    videos = media.get("videos") or []
    if videos:
        first = videos[0] or {}
        if first.get("url"):
            return first["url"]
        variants = first.get("variants") or []
        if variants and (variants[-1] or {}).get("url"):
            return variants[-1]["url"]

    for item in media.get("all") or []:
        if (item or {}).get("type") in VIDEO_MEDIA_TYPES and item.get("url"):
            return item["url"]
    return None


def guess_mime_type(url: str) -> str:
    """Mime type from the URL path suffix, defaulting to mp4."""
    path = urlparse(url).path.lower()
    for suffix, mime_type in ContentConfig.MIME_TYPES_BY_SUFFIX.items():
        if path.endswith(suffix):
            return mime_type
    return ContentConfig.DEFAULT_VIDEO_MIME_TYPE


class TwitterMediaService:
    """Downloads the video attached to a post, bounded by a hard size cap."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        timeout: float,
        max_bytes: int = ContentConfig.MAX_VIDEO_BYTES,
    ):
        self.http = http_client
        self.timeout = timeout
        self.max_bytes = max_bytes

    async def download(self, url: str) -> bytes:
        """
        Stream the body into memory, aborting once it passes max_bytes.

        Raises:
            ContentTooLargeError: Declared or actual size exceeds the cap.
            UpstreamTimeoutError: The download timed out.
            MediaDownloadError: Non-2xx response or transport failure.
        """
        try:
            async with self.http.stream("GET", url, timeout=self.timeout, follow_redirects=True) as response:
                if response.is_error:
                    raise MediaDownloadError(
                        f"Video download failed with status {response.status_code}",
                        upstream_status=response.status_code,
                    )

                declared = response.headers.get("content-length")
                if declared and declared.isdigit() and int(declared) > self.max_bytes:
                    logger.warning(f"Video declares {declared} bytes, over the {self.max_bytes} byte cap")
                    raise ContentTooLargeError(self.max_bytes)

                buffer = bytearray()
                async for chunk in response.aiter_bytes():
                    buffer.extend(chunk)
                    if len(buffer) > self.max_bytes:
                        logger.warning(f"Video exceeded the {self.max_bytes} byte cap while streaming")
                        raise ContentTooLargeError(self.max_bytes)
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError("Video download") from e
        except httpx.HTTPError as e:
            raise MediaDownloadError(f"Video download failed: {e}") from e

        return bytes(buffer)

    async def fetch_video(self, reference: TweetReference, tweet: dict[str, Any]) -> VideoContent:
        """
        Find and download the post's video.

        Raises:
            NoVideoInTweetError: The payload has no video URL.
        """
        url = find_video_url(tweet)
        if not url:
            raise NoVideoInTweetError(reference.tweet_id)

        logger.info(f"Downloading video for post {reference.tweet_id}")
        data = await self.download(url)
        logger.info(f"Downloaded {len(data)} bytes for post {reference.tweet_id}")

        return VideoContent(
            data=data,
            mime_type=guess_mime_type(url),
            caption=tweet.get("text") or "",
        )
