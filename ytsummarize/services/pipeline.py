"""
End-to-end summarization pipeline for a single request.

Stages run strictly in order: resolve -> provider selection -> metadata ->
extraction -> summarization -> report -> persistence. The first failure ends
the run, and nothing is written to disk unless every stage succeeded.
"""
from typing import Callable, Optional

import httpx
from loguru import logger

from ytsummarize.core.config import Settings
from ytsummarize.core.providers.factory import (
    ProviderCredentials,
    build_provider,
    select_provider_type,
)
from ytsummarize.core.providers.llm_provider import SummaryProvider
from ytsummarize.models import (
    LLMProviderType,
    SummarizeRequest,
    SummaryReport,
    source_kind_of,
)
from ytsummarize.services.extraction import ContentExtractor
from ytsummarize.services.metadata import MetadataService
from ytsummarize.services.report import render_report
from ytsummarize.services.resolver import resolve_reference
from ytsummarize.services.storage import ArtifactStore
from ytsummarize.services.summarization import SummarizationService
from ytsummarize.services.twitter import TwitterMediaService
from ytsummarize.services.youtube import YouTubeTranscriptService

ProviderBuilder = Callable[[LLMProviderType, ProviderCredentials, Settings], SummaryProvider]


class SummaryPipeline:
    """
    Orchestrates one summarization request.

    All collaborators are injected so each request can get its own HTTP
    client and provider.
    """

    def __init__(
        self,
        settings: Settings,
        metadata_service: MetadataService,
        extractor: ContentExtractor,
        artifact_store: Optional[ArtifactStore] = None,
        provider_builder: ProviderBuilder = build_provider,
    ):
        self.settings = settings
        self.metadata_service = metadata_service
        self.extractor = extractor
        self.artifact_store = artifact_store
        self.provider_builder = provider_builder

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        http_client: httpx.AsyncClient,
        artifact_store: Optional[ArtifactStore] = None,
    ) -> "SummaryPipeline":
        """Wire the default services around a request-scoped HTTP client."""
        metadata_service = MetadataService(
            http_client=http_client,
            mirror_base_url=settings.TWEET_MIRROR_BASE_URL,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        extractor = ContentExtractor(
            youtube_service=YouTubeTranscriptService(
                http_client=http_client,
                timeout=settings.HTTP_TIMEOUT_SECONDS,
                proxy_url=settings.TRANSCRIPT_PROXY_URL,
            ),
            twitter_service=TwitterMediaService(
                http_client=http_client,
                timeout=settings.DOWNLOAD_TIMEOUT_SECONDS,
            ),
        )
        return cls(
            settings=settings,
            metadata_service=metadata_service,
            extractor=extractor,
            artifact_store=artifact_store,
        )

    async def run(self, request: SummarizeRequest) -> SummaryReport:
        """
        Run every stage for one request.

        Raises:
            AppException: Whatever the first failing stage raised.
        """
        reference = resolve_reference(request.video)
        source_kind = source_kind_of(reference)
        logger.info(f"Resolved '{request.video}' as {source_kind.value} id {reference.artifact_id}")
        if self.artifact_store is not None:
            self.artifact_store.check_id(reference.artifact_id)

        credentials = ProviderCredentials.resolve(
            self.settings,
            youtube_api_key=request.youtube_api_key,
            gemini_api_key=request.gemini_api_key,
            groq_api_key=request.groq_api_key,
        )
        # Fail fast on missing keys before any upstream work
        provider_type = select_provider_type(
            source_kind,
            credentials,
            preferred=request.provider or self.settings.DEFAULT_LLM_PROVIDER,
        )
        logger.info(f"Using {provider_type.value} for summarization")

        lookup = await self.metadata_service.fetch(reference, credentials.youtube_api_key)
        content = await self.extractor.extract(reference, lookup)

        provider = self.provider_builder(provider_type, credentials, self.settings)
        summary = await SummarizationService(llm_provider=provider).summarize(
            content, lookup.metadata, source_kind
        )

        document = render_report(lookup.metadata, summary.summary_html, reference)

        if self.artifact_store is not None:
            self.artifact_store.save(reference.artifact_id, content.display_text, document)

        return SummaryReport(
            reference=reference,
            metadata=lookup.metadata,
            content_text=content.display_text,
            summary=summary,
            html_document=document,
            provider=provider_type,
        )
