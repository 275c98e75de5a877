"""
Provider abstraction layer for model-agnostic summarization.
"""
from ytsummarize.core.providers.llm_provider import (
    LLMMessage,
    SummaryProvider,
)
from ytsummarize.core.providers.gemini_provider import GeminiProvider
from ytsummarize.core.providers.groq_provider import GroqProvider
from ytsummarize.core.providers.factory import (
    ProviderCredentials,
    build_provider,
    select_provider_type,
)

__all__ = [
    "LLMMessage",
    "SummaryProvider",
    "GeminiProvider",
    "GroqProvider",
    "ProviderCredentials",
    "build_provider",
    "select_provider_type",
]
