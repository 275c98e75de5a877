"""
Per-request provider selection and construction.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ytsummarize.core.config import Settings
from ytsummarize.core.exceptions import MissingApiKeyError
from ytsummarize.core.providers.gemini_provider import GeminiProvider
from ytsummarize.core.providers.groq_provider import GroqProvider
from ytsummarize.core.providers.llm_provider import SummaryProvider
from ytsummarize.models import LLMProviderType, SourceKind


class ProviderCredentials(BaseModel):
    """API keys resolved for a single request."""

    youtube_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def resolve(
        cls,
        settings: Settings,
        youtube_api_key: Optional[str] = None,
        gemini_api_key: Optional[str] = None,
        groq_api_key: Optional[str] = None,
    ) -> "ProviderCredentials":
        """Environment keys win; caller keys only fill the gaps."""
        return cls(
            youtube_api_key=settings.YOUTUBE_API_KEY or youtube_api_key or None,
            gemini_api_key=settings.GEMINI_API_KEY or gemini_api_key or None,
            groq_api_key=settings.GROQ_API_KEY or groq_api_key or None,
        )

    def key_for(self, provider_type: LLMProviderType) -> Optional[str]:
        if provider_type == LLMProviderType.GEMINI:
            return self.gemini_api_key
        return self.groq_api_key


def select_provider_type(
    source_kind: SourceKind,
    credentials: ProviderCredentials,
    preferred: Optional[LLMProviderType] = None,
) -> LLMProviderType:
    """
    Decide which backend handles this request.

    Twitter content always needs the multimodal backend. Otherwise an explicit
    preference wins, and without one Gemini is used when its key is present,
    then Groq.

    Raises:
        MissingApiKeyError: If the chosen backend has no key.
    """
    if source_kind == SourceKind.TWITTER:
        if not credentials.gemini_api_key:
            raise MissingApiKeyError(
                "A Google Gemini API key is required to summarize X/Twitter videos."
            )
        return LLMProviderType.GEMINI

    if preferred is not None:
        if not credentials.key_for(preferred):
            label = "Google Gemini" if preferred == LLMProviderType.GEMINI else "Groq"
            raise MissingApiKeyError(f"{label} API key is required when using {preferred.value}.")
        return preferred

    if credentials.gemini_api_key:
        return LLMProviderType.GEMINI
    if credentials.groq_api_key:
        return LLMProviderType.GROQ
    raise MissingApiKeyError("No AI provider key configured. Provide a Gemini or Groq API key.")


def build_provider(
    provider_type: LLMProviderType,
    credentials: ProviderCredentials,
    settings: Settings,
) -> SummaryProvider:
    """Construct a fresh provider for one request."""
    api_key = credentials.key_for(provider_type)
    if not api_key:
        raise MissingApiKeyError(f"No API key available for {provider_type.value}.")

    if provider_type == LLMProviderType.GEMINI:
        return GeminiProvider(api_key=api_key, model_name=settings.GEMINI_MODEL_NAME)
    elif provider_type == LLMProviderType.GROQ:
        return GroqProvider(api_key=api_key, model_name=settings.GROQ_MODEL_NAME)
    else:
        raise ValueError(f"Unknown LLM provider: {provider_type}")
