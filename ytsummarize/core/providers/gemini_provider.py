"""
Google Gemini implementation of SummaryProvider.

This is the multimodal backend: it accepts inline video bytes as well as
transcript text. Each instance owns its own google-genai client, so keys
supplied with one request never leak into another.
"""
import httpx
from google import genai
from google.genai import errors, types
from loguru import logger

from ytsummarize.core.constants import SummaryConfig
from ytsummarize.core.exceptions import (
    InvalidApiKeyError,
    ModelUnavailableError,
    ResponseTruncatedError,
    SummarizationFailedError,
)
from ytsummarize.core.prompts import SummarizationPrompts
from ytsummarize.core.providers.llm_provider import SummaryProvider
from ytsummarize.models import (
    ExtractedContent,
    LLMProviderType,
    VideoContent,
    VideoMetadata,
)


class GeminiProvider(SummaryProvider):
    """
    Google Gemini implementation of SummaryProvider.

    Before generating, the key is validated by listing the available models
    and the configured model must be in that listing. There is no silent
    fallback to a different model.

    Example:
        provider = GeminiProvider(
            api_key="your-api-key",
            model_name="gemini-2.5-flash",
        )
        html = await provider.summarize(content, metadata)
    """

    provider_type = LLMProviderType.GEMINI
    supports_video = True

    def __init__(self, api_key: str, model_name: str = "gemini-2.5-flash", client: genai.Client | None = None):
        """
        Initialize the Gemini provider.

        Args:
            api_key: Google AI API key.
            model_name: Gemini model to use (e.g., "gemini-2.5-flash").
            client: Pre-built client, mainly for tests.
        """
        self.client = client or genai.Client(api_key=api_key)
        self.model_name = model_name

    async def list_models(self) -> list[str]:
        """
        List model names available to this key, without the "models/" prefix.

        Raises:
            InvalidApiKeyError: If the listing call is rejected.
        """
        logger.debug("Validating Gemini API key by listing models")
        try:
            pager = await self.client.aio.models.list()
            names = [model.name async for model in pager]
        except errors.APIError as e:
            raise InvalidApiKeyError("Gemini", e.message or str(e)) from e
        except httpx.HTTPError as e:
            raise InvalidApiKeyError("Gemini", str(e) or type(e).__name__) from e
        return [name.removeprefix("models/") for name in names if name]

    async def ensure_model_available(self) -> None:
        """Validate the key and check that the configured model is offered."""
        available = await self.list_models()
        if self.model_name.removeprefix("models/") not in available:
            logger.warning(
                f"Gemini model {self.model_name} not in listing ({len(available)} models available)"
            )
            raise ModelUnavailableError(self.model_name)

    async def summarize(self, content: ExtractedContent, metadata: VideoMetadata) -> str:
        """Summarize a transcript or an inline video with Gemini."""
        await self.ensure_model_available()

        if isinstance(content, VideoContent):
            logger.info(
                f"Sending {len(content.data)} bytes of {content.mime_type} to Gemini ({self.model_name})"
            )
            contents = [
                types.Part.from_bytes(data=content.data, mime_type=content.mime_type),
                SummarizationPrompts.for_video(metadata.author_name or "unknown", content.caption),
            ]
        else:
            logger.info(f"Sending {len(content.text)} transcript chars to Gemini ({self.model_name})")
            contents = SummarizationPrompts.for_transcript(metadata.title, content.text)

        config = types.GenerateContentConfig(
            system_instruction=SummarizationPrompts.SYSTEM,
            temperature=SummaryConfig.TEMPERATURE,
            max_output_tokens=SummaryConfig.MULTIMODAL_MAX_TOKENS,
        )

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=contents,
                config=config,
            )
        except errors.APIError as e:
            raise SummarizationFailedError(
                f"Gemini API error: {e.code} {e.status or ''} - {e.message}",
                upstream_status=e.code,
            ) from e

        if response.usage_metadata:
            logger.debug(
                f"Gemini token usage: prompt={response.usage_metadata.prompt_token_count} "
                f"completion={response.usage_metadata.candidates_token_count}"
            )

        if not response.candidates:
            raise SummarizationFailedError("Unexpected Gemini API response format.")

        candidate = response.candidates[0]
        if candidate.finish_reason == types.FinishReason.MAX_TOKENS:
            raise ResponseTruncatedError()

        parts = candidate.content.parts if candidate.content else None
        text = "".join(part.text for part in parts or [] if part.text)
        if not text:
            raise SummarizationFailedError("Gemini API returned incomplete response.")
        return text
