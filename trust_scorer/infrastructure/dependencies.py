"""Dependency injection configuration for hexagonal architecture."""

import logging
from functools import lru_cache
from typing import Dict, Optional

from ..domain.ports.evidence_provider import EvidenceProvider
from ..domain.ports.history_store import HistoryStore
from ..domain.services.verification_service import VerificationService
from .analysis.lexicon_analyzer import LexiconContentAnalyzer
from .analysis.openai_analyzer import OpenAIAnalyzerConfig, OpenAIContentAnalyzer
from .config import AppConfig
from .evidence.perplexity_adapter import PerplexityConfig, PerplexityEvidenceProvider
from .extraction.web_extractor import WebContentExtractor, WebExtractorConfig
from .storage.json_file_history import JsonFileHistoryStore
from .storage.memory_history import InMemoryHistoryStore

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Service container for dependency injection."""

    def __init__(self, config: Optional[AppConfig] = None):
        """Initialize service container.

        Args:
            config: Application configuration; read from the environment if omitted
        """
        self._config = config or AppConfig.from_env()
        self._evidence_provider: Optional[EvidenceProvider] = None
        self._verification_service: Optional[VerificationService] = None
        self._setup_services()

    def _setup_services(self) -> None:
        """Setup all services that need no network access."""
        logger.info("🔧 Setting up service container...")
        engine = self._config.engine

        if self._config.openai_api_key:
            self.analyzer = OpenAIContentAnalyzer(
                OpenAIAnalyzerConfig(
                    api_key=self._config.openai_api_key,
                    model=self._config.openai_model,
                    timeout=engine.analysis_timeout,
                )
            )
        else:
            self.analyzer = LexiconContentAnalyzer()

        self.extractor = WebContentExtractor(WebExtractorConfig(timeout=engine.extraction_timeout))

        if self._config.history_file:
            self.history_store: HistoryStore = JsonFileHistoryStore(
                self._config.history_file, limit=engine.history_limit
            )
        else:
            self.history_store = InMemoryHistoryStore(limit=engine.history_limit)

        logger.info(
            f"✅ Service container setup completed (analyzer={self.analyzer.provider_name}, "
            f"history={self.history_store.backend_name})"
        )

    async def _setup_evidence_provider(self) -> Optional[EvidenceProvider]:
        """Create and initialize the evidence provider, or None when it cannot be used."""
        if not self._config.perplexity_api_key:
            logger.info("🎭 No evidence provider key, source verification will use sanity-derived results")
            return None

        provider = PerplexityEvidenceProvider(
            PerplexityConfig(
                api_key=self._config.perplexity_api_key,
                model=self._config.perplexity_model,
                timeout=self._config.engine.provider_timeout,
            )
        )
        try:
            await provider.initialize()
        except ConnectionError as e:
            logger.warning(f"⚠️ Failed to setup evidence provider: {e}")
            logger.info("🎭 Source verification will use sanity-derived results")
            return None

        return provider

    async def get_verification_service(self) -> VerificationService:
        """Get the verification service, creating providers on first use."""
        if self._verification_service is None:
            logger.info("🔧 Creating VerificationService with providers...")
            self._evidence_provider = await self._setup_evidence_provider()
            self._verification_service = VerificationService(
                evidence_provider=self._evidence_provider,
                sentiment_analyzer=self.analyzer,
                fact_check_provider=self.analyzer,
                content_classifier=self.analyzer,
                content_extractor=self.extractor,
                history_store=self.history_store,
                settings=self._config.engine,
            )
        return self._verification_service

    def get_history_store(self) -> HistoryStore:
        """Get the history store."""
        return self.history_store

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def evidence_status(self) -> Dict[str, bool]:
        """Whether the configured evidence provider is active."""
        provider = self._evidence_provider
        return {"perplexity": bool(provider and provider.is_available)}

    async def shutdown(self) -> None:
        """Release network clients."""
        if self._evidence_provider:
            await self._evidence_provider.shutdown()
            self._evidence_provider = None
        await self.extractor.shutdown()
        self._verification_service = None


# Global service container instance
@lru_cache()
def get_service_container() -> ServiceContainer:
    """Get global service container instance."""
    return ServiceContainer()


# Convenience functions for FastAPI dependency injection
async def get_verification_service() -> VerificationService:
    """FastAPI dependency for the verification service."""
    return await get_service_container().get_verification_service()


def get_history_store() -> HistoryStore:
    """FastAPI dependency for the history store."""
    return get_service_container().get_history_store()
