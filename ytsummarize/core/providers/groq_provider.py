"""
Groq (Llama) implementation of SummaryProvider.

This is the text backend: a chat-completion API that only accepts
transcripts.
"""
from groq import APIError, APIStatusError, AsyncGroq
from loguru import logger

from ytsummarize.core.constants import SummaryConfig
from ytsummarize.core.exceptions import SummarizationFailedError
from ytsummarize.core.prompts import SummarizationPrompts
from ytsummarize.core.providers.llm_provider import LLMMessage, SummaryProvider
from ytsummarize.models import (
    ExtractedContent,
    LLMProviderType,
    LLMRole,
    TranscriptContent,
    VideoMetadata,
)


class GroqProvider(SummaryProvider):
    """
    Groq implementation of SummaryProvider.

    Uses the Groq SDK for fast Llama model inference.

    Example:
        provider = GroqProvider(
            api_key="your-api-key",
            model_name="llama-3.3-70b-versatile",
        )
        html = await provider.summarize(content, metadata)
    """

    provider_type = LLMProviderType.GROQ
    supports_video = False

    def __init__(self, api_key: str, model_name: str = "llama-3.3-70b-versatile", client: AsyncGroq | None = None):
        """
        Initialize the Groq provider.

        Args:
            api_key: Groq API key.
            model_name: Model to use (e.g., "llama-3.3-70b-versatile").
            client: Pre-built client, mainly for tests.
        """
        self.client = client or AsyncGroq(api_key=api_key)
        self.model_name = model_name

    async def summarize(self, content: ExtractedContent, metadata: VideoMetadata) -> str:
        """Summarize a transcript with a single chat completion."""
        if not isinstance(content, TranscriptContent):
            raise SummarizationFailedError("The text backend cannot summarize video content.")

        messages = [
            LLMMessage(role=LLMRole.SYSTEM, content=SummarizationPrompts.SYSTEM),
            LLMMessage(
                role=LLMRole.USER,
                content=SummarizationPrompts.for_transcript(metadata.title, content.text),
            ),
        ]
        # Convert to Groq message format (compatible with OpenAI format)
        groq_messages = [
            {"role": msg.role.value, "content": msg.content}
            for msg in messages
        ]

        logger.debug(f"Sending request to Groq ({self.model_name})")
        try:
            response = await self.client.chat.completions.create(
                model=self.model_name,
                messages=groq_messages,
                temperature=SummaryConfig.TEMPERATURE,
                max_tokens=SummaryConfig.TEXT_MAX_TOKENS,
            )
        except APIStatusError as e:
            raise SummarizationFailedError(
                f"Groq API error: {e.status_code} - {e.message}",
                upstream_status=e.status_code,
            ) from e
        except APIError as e:
            raise SummarizationFailedError(f"Groq API error: {e.message}") from e

        if response.usage:
            logger.debug(
                f"Groq token usage: prompt={response.usage.prompt_tokens} "
                f"completion={response.usage.completion_tokens}"
            )

        if not response.choices or not response.choices[0].message.content:
            raise SummarizationFailedError("Groq API returned no completion content.")

        return response.choices[0].message.content
