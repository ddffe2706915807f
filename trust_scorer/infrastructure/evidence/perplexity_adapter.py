"""Perplexity implementation of the evidence provider interface."""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import httpx
from cachetools import TTLCache
from pydantic import BaseModel, Field

from ...domain.exceptions import ProviderError
from ...domain.ports.evidence_provider import (
    Citation,
    EvidenceFilters,
    EvidenceProvider,
    EvidenceResponse,
)
from ...domain.services.response_parser import ProviderPayload

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an expert fact-checker and source verification specialist. Your job is to:

1. Find and verify information using only credible, citable sources
2. Provide exact URLs and relevant quotes for every claim verification
3. Assess source credibility based on domain authority, publication standards, and expertise
4. Identify conflicts between sources and explain them
5. Distinguish between factual claims and opinions
6. Focus on regional context when relevant, using local credible sources

ALWAYS prioritize:
- Government and official sources for policy/statistics
- Established news organizations with editorial standards
- Academic and research institutions for scientific claims
- Primary sources over secondary reporting
- Recent information over outdated sources"""

RETRYABLE_STATUS = {429, 500, 502, 503, 504}


class PerplexityConfig(BaseModel):
    """Configuration for Perplexity adapter."""

    api_key: str = Field(..., description="Perplexity API key")
    model: str = Field(default="sonar-pro", description="Search-enabled model to use")
    base_url: str = Field(default="https://api.perplexity.ai", description="API base URL")
    temperature: float = Field(default=0.1, description="Temperature for responses")
    max_tokens: int = Field(default=3000, description="Maximum tokens per response")
    timeout: float = Field(default=30.0, description="API timeout in seconds")
    search_recency_filter: Optional[str] = Field(default="month", description="day, week, month or year")
    structured_output: bool = Field(default=True, description="Request a JSON-schema constrained answer")
    max_retries: int = Field(default=2, description="Retries on transport errors and 429/5xx")
    retry_delay: float = Field(default=1.0, description="Base delay between retries in seconds")
    cache_ttl: int = Field(default=900, description="Response cache TTL in seconds")
    cache_maxsize: int = Field(default=256, description="Maximum cached responses")


class PerplexityEvidenceProvider(EvidenceProvider):
    """Perplexity chat-completions search with citations."""

    def __init__(
        self,
        config: Optional[PerplexityConfig] = None,
        provider_name: str = "Perplexity",
    ):
        """Initialize the adapter."""
        self._config = config or PerplexityConfig(api_key="")
        self._name = provider_name
        self._client: Optional[httpx.AsyncClient] = None
        self._initialized = False
        self._cache = TTLCache(maxsize=self._config.cache_maxsize, ttl=self._config.cache_ttl)

    async def initialize(self) -> None:
        """Create the HTTP client.

        Raises:
            ConnectionError: If no API key is configured
        """
        if not self._config.api_key:
            raise ConnectionError("Failed to initialize Perplexity provider: PERPLEXITY_API_KEY is not set")

        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout,
                headers={
                    "Authorization": f"Bearer {self._config.api_key}",
                    "Content-Type": "application/json",
                },
            )
        self._initialized = True
        logger.info(f"✅ {self._name} evidence provider ready (model={self._config.model})")

    def _build_body(self, prompt: str, filters: EvidenceFilters) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "model": self._config.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": self._config.max_tokens,
            "temperature": self._config.temperature,
            "top_p": 0.9,
            "return_citations": True,
        }
        if filters.domains:
            # The API accepts a limited allow list.
            body["search_domain_filter"] = filters.domains[:20]
        if self._config.search_recency_filter:
            body["search_recency_filter"] = self._config.search_recency_filter
        if self._config.structured_output:
            body["response_format"] = {
                "type": "json_schema",
                "json_schema": {"schema": ProviderPayload.model_json_schema(by_alias=True)},
            }
        return body

    async def _post(self, body: Dict[str, Any]) -> Dict[str, Any]:
        attempts = self._config.max_retries + 1
        for attempt in range(1, attempts + 1):
            try:
                response = await self._client.post("/chat/completions", json=body)
            except httpx.HTTPError as e:
                if attempt < attempts:
                    logger.warning(f"⚠️ {self._name} request failed ({e}), retry {attempt}/{self._config.max_retries}")
                    await asyncio.sleep(self._config.retry_delay * attempt)
                    continue
                raise ProviderError(f"{self._name} request failed: {e}", provider=self._name) from e

            if response.status_code in RETRYABLE_STATUS and attempt < attempts:
                logger.warning(
                    f"⚠️ {self._name} returned {response.status_code}, retry {attempt}/{self._config.max_retries}"
                )
                await asyncio.sleep(self._config.retry_delay * attempt)
                continue

            if response.status_code >= 400:
                raise ProviderError(
                    f"{self._name} API error: {response.status_code} - {response.text[:500]}",
                    provider=self._name,
                    status_code=response.status_code,
                )

            try:
                return response.json()
            except ValueError as e:
                raise ProviderError(f"{self._name} returned a non-JSON body", provider=self._name) from e

        raise ProviderError(f"{self._name} request failed after {attempts} attempts", provider=self._name)

    @staticmethod
    def _citations(data: Dict[str, Any]) -> List[Citation]:
        """Normalize ``search_results`` objects or plain ``citations`` URLs."""
        citations = []
        for item in data.get("search_results") or []:
            if isinstance(item, dict) and item.get("url"):
                citations.append(
                    Citation(
                        url=item["url"],
                        title=item.get("title") or "",
                        text=item.get("snippet") or item.get("text") or "",
                    )
                )
        if citations:
            return citations

        for item in data.get("citations") or []:
            if isinstance(item, str) and item:
                citations.append(Citation(url=item))
            elif isinstance(item, dict) and item.get("url"):
                citations.append(
                    Citation(url=item["url"], title=item.get("title") or "", text=item.get("text") or "")
                )
        return citations

    async def verify(self, claim: str, filters: EvidenceFilters) -> EvidenceResponse:
        """Search the web for evidence about a claim.

        Args:
            claim: Fact-check prompt for a single claim
            filters: Region, source-type and domain restrictions

        Returns:
            Answer text and citations

        Raises:
            ProviderError: On transport errors, non-2xx responses or malformed bodies
        """
        if not self._client:
            raise ProviderError("Provider not initialized", provider=self._name)

        cache_key = json.dumps([claim, filters.model_dump(mode="json")], sort_keys=True)
        if cache_key in self._cache:
            logger.debug("📦 Evidence cache hit")
            return self._cache[cache_key]

        data = await self._post(self._build_body(claim, filters))
        try:
            raw_text = data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"{self._name} response has no answer content", provider=self._name) from e

        result = EvidenceResponse(citations=self._citations(data), raw_text=raw_text)
        logger.info(f"📡 {self._name} answered with {len(result.citations)} citations, {len(raw_text)} chars")
        if result.has_usable_citations:
            self._cache[cache_key] = result
        return result

    async def shutdown(self) -> None:
        """Clean up resources and shut down the provider."""
        if self._client:
            await self._client.aclose()
            self._client = None
        self._initialized = False

    @property
    def provider_name(self) -> str:
        """Get the name of the evidence provider."""
        return self._name

    @property
    def is_available(self) -> bool:
        """Check if the provider is available and ready."""
        return self._initialized and self._client is not None

    @property
    def capabilities(self) -> Dict[str, bool]:
        """Get the provider's capabilities."""
        return {
            "citations": True,
            "structured_output": self._config.structured_output,
            "domain_filter": True,
            "recency_filter": True,
            "caching": True,
            "retry_mechanism": True,
        }
