"""
Content extraction dispatch over the two reference kinds.
"""
from ytsummarize.core.exceptions import TweetNotFoundError
from ytsummarize.models import (
    ExtractedContent,
    MetadataLookup,
    TweetReference,
    VideoReference,
    YouTubeReference,
)
from ytsummarize.services.twitter import TwitterMediaService
from ytsummarize.services.youtube import YouTubeTranscriptService


class ContentExtractor:
    """Routes a reference to the transcript or the media service."""

    def __init__(self, youtube_service: YouTubeTranscriptService, twitter_service: TwitterMediaService):
        self.youtube_service = youtube_service
        self.twitter_service = twitter_service

    async def extract(self, reference: VideoReference, lookup: MetadataLookup) -> ExtractedContent:
        if isinstance(reference, YouTubeReference):
            return await self.youtube_service.fetch_transcript(reference)
        if isinstance(reference, TweetReference):
            if lookup.tweet is None:
                raise TweetNotFoundError(reference.tweet_id)
            return await self.twitter_service.fetch_video(reference, lookup.tweet)
        raise TypeError(f"Unsupported reference type: {type(reference).__name__}")
