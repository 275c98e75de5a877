"""
Unit tests for Pydantic models.
"""
import pytest
from pydantic import ValidationError

from ytsummarize.models import (
    LLMProviderType,
    SourceKind,
    SummarizeRequest,
    SummaryReport,
    SummaryResult,
    TranscriptContent,
    TweetReference,
    VideoContent,
    VideoMetadata,
    YouTubeReference,
    source_kind_of,
)


def test_youtube_reference_urls():
    ref = YouTubeReference(video_id="abc123")
    assert ref.artifact_id == "abc123"
    assert ref.source_url == "https://www.youtube.com/watch?v=abc123"
    assert source_kind_of(ref) == SourceKind.YOUTUBE


def test_tweet_reference_urls():
    ref = TweetReference(url="https://twitter.com/u/status/42", tweet_id="42")
    assert ref.artifact_id == "42"
    assert ref.source_url == "https://x.com/i/status/42"
    assert source_kind_of(ref) == SourceKind.TWITTER


def test_display_text():
    """Transcripts display their text, videos their post caption."""
    assert TranscriptContent(text="Hello").display_text == "Hello"
    video = VideoContent(data=b"123", mime_type="video/mp4", caption="caption")
    assert video.display_text == "caption"
    assert "123" not in repr(video)


def test_reference_immutable():
    """Test that references are immutable (frozen)."""
    ref = YouTubeReference(video_id="abc123")
    with pytest.raises(ValidationError):
        ref.video_id = "other"


def test_report_discriminates_reference_kind():
    report = SummaryReport.model_validate({
        "reference": {"kind": "twitter", "url": "https://x.com/u/status/42", "tweet_id": "42"},
        "metadata": {"title": "Clip"},
        "content_text": "caption",
        "summary": {"summary_html": "<p>x</p>", "source_kind": "twitter"},
        "html_document": "<html></html>",
        "provider": "gemini",
    })
    assert isinstance(report.reference, TweetReference)
    assert report.provider == LLMProviderType.GEMINI
    assert report.summary == SummaryResult(summary_html="<p>x</p>", source_kind=SourceKind.TWITTER)
    assert report.metadata == VideoMetadata(title="Clip")


def test_summarize_request_strips_video():
    request = SummarizeRequest(video="  https://youtu.be/abc123 \n")
    assert request.video == "https://youtu.be/abc123"
    assert request.provider is None


@pytest.mark.parametrize("video", ["", "   "])
def test_summarize_request_rejects_blank_video(video):
    with pytest.raises(ValidationError):
        SummarizeRequest(video=video)


def test_summarize_request_provider_values():
    assert SummarizeRequest(video="a", provider="groq").provider == LLMProviderType.GROQ
    with pytest.raises(ValidationError):
        SummarizeRequest(video="a", provider="openai")
