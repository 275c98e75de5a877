"""
YouTube transcript extraction.

The structured transcript from youtube-transcript-api is tried first. When
that fails, the caption-track list reported by yt-dlp is scanned and the raw
caption XML is downloaded and decoded to plain text.
"""
import asyncio
import re
from typing import List, Optional

import httpx
from loguru import logger
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.proxies import GenericProxyConfig
from yt_dlp import YoutubeDL
from yt_dlp.utils import DownloadError, ExtractorError

from ytsummarize.core.constants import ApiConfig, CaptionConfig
from ytsummarize.core.exceptions import NoCaptionsAvailableError
from ytsummarize.models import TranscriptContent, YouTubeReference
from ytsummarize.models.youtube import CaptionTrack, YtDlpInfo

TAG_RE = re.compile(r"<[^>]*>")

# Order matters: &amp; must be handled after &#39; and &quot;
CAPTION_ENTITIES = (
    ("&#39;", "'"),
    ("&quot;", '"'),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
)


def _unescape_caption_entities(text: str) -> str:
    for entity, char in CAPTION_ENTITIES:
        text = text.replace(entity, char)
    return text


def decode_caption_xml(xml_text: str) -> str:
    """
    Reduce a raw caption document to plain text.

    Tags are stripped, then the five caption entities are unescaped. The
    unescape runs once for the XML layer and once for the HTML-escaped
    caption text inside it. Finally whitespace is collapsed and trimmed.
    """
    text = TAG_RE.sub(" ", xml_text)
    for _ in range(2):
        text = _unescape_caption_entities(text)
    return " ".join(text.split())


def select_caption_track(tracks: List[CaptionTrack]) -> Optional[CaptionTrack]:
    """English track if there is one (en, en-US, ...), else the first track."""
    if not tracks:
        return None
    lang = CaptionConfig.PREFERRED_LANGUAGE
    for track in tracks:
        code = track.language.lower()
        if code == lang or code.startswith(f"{lang}-"):
            return track
    return tracks[0]


class YouTubeTranscriptService:
    """
    Service for fetching a single video's transcript.

    This service handles:
    1. Fetching the structured transcript via youtube-transcript-api.
    2. Falling back to yt-dlp's caption-track list and the raw caption XML.
    """

    def __init__(self, http_client: httpx.AsyncClient, timeout: float, proxy_url: Optional[str] = None):
        """
        Initialize the YouTubeTranscriptService.

        Args:
            http_client: Client used to download caption documents.
            timeout: Timeout for caption document downloads.
            proxy_url: Optional proxy for youtube-transcript-api.
        """
        self.http = http_client
        self.timeout = timeout
        self.proxy_url = proxy_url

    def _fetch_segments_sync(self, video_id: str) -> List[str]:
        """
        Synchronous helper listing transcripts and fetching the best one.

        Prioritizes Manual subtitles (any lang) > Automatic captions (any lang).
        """
        proxy_conf = None
        if self.proxy_url:
            proxy_conf = GenericProxyConfig(http_url=self.proxy_url, https_url=self.proxy_url)

        transcript_list = YouTubeTranscriptApi(proxy_config=proxy_conf).list(video_id)

        for generated in (False, True):
            for t in transcript_list:
                if t.is_generated == generated:
                    kind = "Automatic" if generated else "Manual"
                    logger.info(f"Video {video_id}: Using {kind} transcript in '{t.language}'")
                    return [snippet.text for snippet in t.fetch()]
        return []

    async def fetch_structured_transcript(self, video_id: str) -> Optional[str]:
        """
        Fetch the transcript segments and join them with single spaces.

        Returns:
            The transcript text, or None if the call failed or was empty.
        """
        logger.info(f"Attempting to fetch transcript for video ID: {video_id}")
        try:
            segments = await asyncio.to_thread(self._fetch_segments_sync, video_id)
        except Exception as e:
            logger.warning(f"Failed to fetch transcript for {video_id}: {e}")
            return None

        text = " ".join(seg.strip() for seg in segments if seg and seg.strip())
        if not text:
            logger.info(f"No transcript segments found for {video_id}")
            return None

        logger.info(f"Transcript fetched with {len(segments)} segments")
        return text

    def _extract_info_sync(self, video_id: str) -> dict:
        """Synchronous helper to read video info (incl. caption tracks) using yt-dlp."""
        ydl_opts = {
            "skip_download": True,
            "quiet": True,
            "no_warnings": True,
        }
        with YoutubeDL(ydl_opts) as ydl:
            return ydl.extract_info(ApiConfig.YOUTUBE_WATCH_URL.format(video_id=video_id), download=False)

    async def list_caption_tracks(self, video_id: str) -> List[CaptionTrack]:
        """Manual subtitle tracks followed by automatic caption tracks."""
        try:
            info_dict = await asyncio.to_thread(self._extract_info_sync, video_id)
        except (DownloadError, ExtractorError) as e:
            logger.warning(f"Could not list caption tracks for {video_id}: {e}")
            return []

        if not info_dict:
            return []

        info = YtDlpInfo(**info_dict)
        tracks = [
            CaptionTrack(language=lang, formats=formats)
            for lang, formats in info.subtitles.items()
        ]
        tracks.extend(
            CaptionTrack(language=lang, formats=formats, is_generated=True)
            for lang, formats in info.automatic_captions.items()
        )
        return tracks

    async def fetch_caption_fallback(self, video_id: str) -> Optional[str]:
        """
        Decode the raw caption document of the preferred track.

        Returns:
            Plain caption text, or None if no track could be used.
        """
        tracks = await self.list_caption_tracks(video_id)
        track = select_caption_track(tracks)
        if track is None:
            logger.info(f"No caption tracks listed for {video_id}")
            return None

        url = track.url_for(CaptionConfig.PREFERRED_FORMAT)
        if not url:
            logger.info(f"Caption track '{track.language}' for {video_id} has no downloadable format")
            return None

        logger.info(f"Falling back to caption track '{track.language}' for {video_id}")
        try:
            response = await self.http.get(url, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Caption download failed for {video_id}: {e}")
            return None

        return decode_caption_xml(response.text) or None

    async def fetch_transcript(self, reference: YouTubeReference) -> TranscriptContent:
        """
        Fetch the transcript, trying the structured API before caption tracks.

        Raises:
            NoCaptionsAvailableError: If both paths came up empty.
        """
        text = await self.fetch_structured_transcript(reference.video_id)
        if text is None:
            text = await self.fetch_caption_fallback(reference.video_id)
        if text is None:
            raise NoCaptionsAvailableError(reference.video_id)

        logger.info(f"Transcript fetched successfully ({len(text)} characters)")
        return TranscriptContent(text=text)
