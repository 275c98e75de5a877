"""
Custom exception classes and RFC 7807 error handling.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict
from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

PROBLEM_BASE = "https://problems.example.com"

OVERLOADED_MESSAGE = "The AI model is currently overloaded. Please try again in a moment."
RATE_LIMITED_MESSAGE = "Rate limit reached for the AI provider. Please wait a moment and try again."
RATE_LIMIT_SIGNALS = ("rate limit", "rate_limit", "resource_exhausted", "quota")


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details response model."""
    type: str
    title: str
    status: int
    detail: str
    instance: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        title: str,
        detail: str,
        upstream_status: Optional[int] = None,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        self.upstream_status = upstream_status
        super().__init__(detail)


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            status_code=404,
            error_type=f"{PROBLEM_BASE}/not-found",
            title="Resource Not Found",
            detail=f"{resource} with id '{resource_id}' was not found.",
        )


class BadRequestError(AppException):
    """Bad request exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=400,
            error_type=f"{PROBLEM_BASE}/bad-request",
            title="Bad Request",
            detail=detail,
        )


class UnrecognizedUrlError(AppException):
    """Input looked like an X/Twitter link but carried no status id."""

    def __init__(self, raw: str):
        super().__init__(
            status_code=400,
            error_type=f"{PROBLEM_BASE}/unrecognized-url",
            title="Unrecognized URL",
            detail=f"Could not find a post id in '{raw}'. Use a link like https://x.com/user/status/123.",
        )


class MissingApiKeyError(AppException):
    """A required credential is neither configured nor supplied."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=400,
            error_type=f"{PROBLEM_BASE}/missing-api-key",
            title="Missing API Key",
            detail=detail,
        )


class VideoNotFoundError(AppException):
    """YouTube Data API returned no items for the id."""

    def __init__(self, video_id: str):
        super().__init__(
            status_code=404,
            error_type=f"{PROBLEM_BASE}/video-not-found",
            title="Video Not Found",
            detail=f"Video '{video_id}' not found or inaccessible. Please check the video ID.",
        )


class TweetNotFoundError(AppException):
    """Mirror API has no post for the status id."""

    def __init__(self, tweet_id: str):
        super().__init__(
            status_code=404,
            error_type=f"{PROBLEM_BASE}/tweet-not-found",
            title="Post Not Found",
            detail=f"Post '{tweet_id}' not found or inaccessible.",
        )


class NoCaptionsAvailableError(AppException):
    """Neither the transcript API nor the caption tracks produced text."""

    def __init__(self, video_id: str):
        super().__init__(
            status_code=404,
            error_type=f"{PROBLEM_BASE}/no-captions",
            title="No Transcript",
            detail=f"No transcript could be fetched for '{video_id}'. The video may not have captions available.",
        )


class NoVideoInTweetError(AppException):
    """The post exists but has no video attached."""

    def __init__(self, tweet_id: str):
        super().__init__(
            status_code=404,
            error_type=f"{PROBLEM_BASE}/no-video",
            title="No Video",
            detail=f"Post '{tweet_id}' does not contain a video.",
        )


class InvalidApiKeyError(AppException):
    """The LLM provider rejected the key."""

    def __init__(self, provider: str, reason: str = "Unknown error"):
        super().__init__(
            status_code=401,
            error_type=f"{PROBLEM_BASE}/invalid-api-key",
            title="Invalid API Key",
            detail=f"Invalid {provider} API key: {reason}",
        )


class ContentTooLargeError(AppException):
    """Downloaded media exceeded the size cap."""

    def __init__(self, limit_bytes: int):
        super().__init__(
            status_code=413,
            error_type=f"{PROBLEM_BASE}/content-too-large",
            title="Content Too Large",
            detail=f"The video is larger than the {limit_bytes // (1024 * 1024)} MiB limit.",
        )


class MetadataFetchError(AppException):
    """Metadata lookup failed upstream."""

    def __init__(self, detail: str, upstream_status: Optional[int] = None):
        super().__init__(
            status_code=502,
            error_type=f"{PROBLEM_BASE}/metadata-fetch-failed",
            title="Metadata Fetch Failed",
            detail=detail,
            upstream_status=upstream_status,
        )


class MediaDownloadError(AppException):
    """Downloading the post's video failed upstream."""

    def __init__(self, detail: str, upstream_status: Optional[int] = None):
        super().__init__(
            status_code=502,
            error_type=f"{PROBLEM_BASE}/media-download-failed",
            title="Media Download Failed",
            detail=detail,
            upstream_status=upstream_status,
        )


class SummarizationFailedError(AppException):
    """The LLM backend did not return a usable summary."""

    def __init__(self, detail: str, upstream_status: Optional[int] = None):
        super().__init__(
            status_code=502,
            error_type=f"{PROBLEM_BASE}/summarization-failed",
            title="Summarization Failed",
            detail=detail,
            upstream_status=upstream_status,
        )


class ResponseTruncatedError(AppException):
    """Generation stopped at the token limit."""

    def __init__(self):
        super().__init__(
            status_code=502,
            error_type=f"{PROBLEM_BASE}/response-truncated",
            title="Response Truncated",
            detail="Response was truncated due to token limit. Try a shorter video.",
        )


class ModelUnavailableError(AppException):
    """Configured model is not offered for this key."""

    def __init__(self, model_name: str):
        super().__init__(
            status_code=503,
            error_type=f"{PROBLEM_BASE}/model-unavailable",
            title="Model Unavailable",
            detail=f"Model '{model_name}' is not available for this API key.",
        )


class UpstreamTimeoutError(AppException):
    """An upstream call exceeded its timeout."""

    def __init__(self, service: str):
        super().__init__(
            status_code=504,
            error_type=f"{PROBLEM_BASE}/upstream-timeout",
            title="Upstream Timeout",
            detail=f"{service} did not respond in time.",
        )


class InternalServerError(AppException):
    """Internal server error exception."""

    def __init__(self, detail: str = "An unexpected error occurred."):
        super().__init__(
            status_code=500,
            error_type=f"{PROBLEM_BASE}/internal-error",
            title="Internal Server Error",
            detail=detail,
        )


# Errors raised by the summary providers
AI_PROVIDER_ERRORS = (SummarizationFailedError, InvalidApiKeyError)


def translate_error_message(exc: Exception) -> str:
    """
    Map known AI-provider overload / rate-limit signals to friendlier text.

    Only provider failures are translated. Other application errors (for
    example a YouTube Data API quota error) and anything unrecognized pass
    through with their raw message.
    """
    if isinstance(exc, AppException):
        if not isinstance(exc, AI_PROVIDER_ERRORS):
            return exc.detail
        raw, status = exc.detail, exc.upstream_status
    else:
        # groq errors expose status_code, google-genai errors expose code
        raw = str(exc)
        status = getattr(exc, "status_code", None) or getattr(exc, "code", None)
    lowered = raw.lower()

    if status == 429 or any(signal in lowered for signal in RATE_LIMIT_SIGNALS):
        return RATE_LIMITED_MESSAGE
    if status == 503 or "overloaded" in lowered or "UNAVAILABLE" in raw:
        return OVERLOADED_MESSAGE
    return raw


def create_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    title: str,
    detail: str,
) -> JSONResponse:
    """Create a RFC 7807 compliant JSON error response."""
    error = ErrorResponse(
        type=error_type,
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
    )
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(),
        media_type="application/problem+json",
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return RFC 7807 response."""
    logger.warning(f"{exc.title}: {exc.detail}")
    return create_error_response(
        request=request,
        status_code=exc.status_code,
        error_type=exc.error_type,
        title=exc.title,
        detail=translate_error_message(exc),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so every failure still yields a problem response."""
    logger.exception(f"Unhandled error processing {request.url.path}: {exc}")
    fallback = InternalServerError(detail=translate_error_message(exc) or "An unexpected error occurred.")
    return create_error_response(
        request=request,
        status_code=fallback.status_code,
        error_type=fallback.error_type,
        title=fallback.title,
        detail=fallback.detail,
    )
