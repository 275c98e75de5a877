"""
Existence check and display metadata for YouTube videos and X/Twitter posts.
"""
from typing import Any, Optional

import httpx
from loguru import logger

from ytsummarize.core.constants import ApiConfig, ContentConfig
from ytsummarize.core.exceptions import (
    MetadataFetchError,
    MissingApiKeyError,
    TweetNotFoundError,
    UpstreamTimeoutError,
    VideoNotFoundError,
)
from ytsummarize.models import (
    MetadataLookup,
    TweetReference,
    VideoMetadata,
    VideoReference,
    YouTubeReference,
)


def _shorten(text: str, limit: int = ContentConfig.TITLE_MAX_CHARS) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."


class MetadataService:
    """
    Looks up a video reference upstream and returns its display metadata.

    This step doubles as the existence check: extraction never starts for a
    reference that failed here.
    """

    def __init__(self, http_client: httpx.AsyncClient, mirror_base_url: str, timeout: float):
        """
        Args:
            http_client: Shared client for this request.
            mirror_base_url: Base URL of the fxtwitter-compatible mirror API.
            timeout: Per-call timeout in seconds.
        """
        self.http = http_client
        self.mirror_base_url = mirror_base_url.rstrip("/")
        self.timeout = timeout

    async def fetch(self, reference: VideoReference, youtube_api_key: Optional[str] = None) -> MetadataLookup:
        if isinstance(reference, TweetReference):
            return await self.fetch_tweet(reference)
        return await self.fetch_youtube(reference, youtube_api_key)

    async def fetch_youtube(self, reference: YouTubeReference, api_key: Optional[str]) -> MetadataLookup:
        """
        Query the YouTube Data API videos endpoint for the snippet.

        Raises:
            MissingApiKeyError: No YouTube Data API key was resolved.
            VideoNotFoundError: The API returned zero items.
            MetadataFetchError: Non-2xx response or transport failure.
            UpstreamTimeoutError: The call timed out.
        """
        if not api_key:
            raise MissingApiKeyError("A YouTube Data API key is required to look up YouTube videos.")

        params = {"part": "snippet", "id": reference.video_id, "key": api_key}
        try:
            response = await self.http.get(ApiConfig.YOUTUBE_VIDEOS_URL, params=params, timeout=self.timeout)
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError("YouTube Data API") from e
        except httpx.HTTPError as e:
            raise MetadataFetchError(f"Error fetching video details: {e}") from e

        if response.is_error:
            raise MetadataFetchError(
                f"Error fetching video details: YouTube Data API returned {response.status_code} - "
                f"{self._error_message(response)}",
                upstream_status=response.status_code,
            )

        items = self._json_object(response, "YouTube Data API").get("items") or []
        if not items:
            raise VideoNotFoundError(reference.video_id)

        snippet = items[0].get("snippet") or {}
        metadata = VideoMetadata(
            title=snippet.get("title") or reference.video_id,
            author_name=snippet.get("channelTitle"),
        )
        logger.info(f"Video found: {metadata.title}")
        return MetadataLookup(metadata=metadata)

    async def fetch_tweet(self, reference: TweetReference) -> MetadataLookup:
        """
        Look the post up on the mirror API.

        Raises:
            TweetNotFoundError: 404 upstream or no "tweet" field in the body.
            MetadataFetchError: Any other non-2xx response or transport failure.
            UpstreamTimeoutError: The call timed out.
        """
        url = f"{self.mirror_base_url}/status/{reference.tweet_id}"
        try:
            response = await self.http.get(url, timeout=self.timeout)
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError("Tweet mirror API") from e
        except httpx.HTTPError as e:
            raise MetadataFetchError(f"Error fetching post details: {e}") from e

        if response.status_code == 404:
            raise TweetNotFoundError(reference.tweet_id)
        if response.is_error:
            raise MetadataFetchError(
                f"Error fetching post details: mirror returned {response.status_code}",
                upstream_status=response.status_code,
            )

        tweet = self._json_object(response, "Tweet mirror API").get("tweet")
        if not isinstance(tweet, dict):
            raise TweetNotFoundError(reference.tweet_id)

        author = tweet.get("author") or {}
        handle = author.get("screen_name")
        text = tweet.get("text") or ""
        metadata = VideoMetadata(
            title=_shorten(text) if text.strip() else f"Post by @{handle or 'unknown'}",
            author_name=author.get("name") or handle,
        )
        logger.info(f"Post found: {metadata.title}")
        return MetadataLookup(metadata=metadata, tweet=tweet)

    @staticmethod
    def _json_object(response: httpx.Response, service: str) -> dict[str, Any]:
        """Decode a JSON object body; anything else is an upstream failure."""
        try:
            payload: Any = response.json()
        except ValueError as e:
            raise MetadataFetchError(
                f"{service} returned a non-JSON response", upstream_status=response.status_code
            ) from e
        if not isinstance(payload, dict):
            raise MetadataFetchError(
                f"{service} returned an unexpected response", upstream_status=response.status_code
            )
        return payload

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            payload: Any = response.json()
        except ValueError:
            return response.text[:200]
        if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
            return payload["error"].get("message") or "Unknown error"
        return "Unknown error"
