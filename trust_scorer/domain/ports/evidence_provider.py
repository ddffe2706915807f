"""Port interface for external evidence providers."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..models.request import FocusRegion, SourceTypeFilter


class Citation(BaseModel):
    """A citation returned alongside the provider's answer."""

    url: str
    title: str = ""
    text: str = ""


class EvidenceFilters(BaseModel):
    """Search restrictions passed with each claim."""

    region: Optional[FocusRegion] = None
    source_types: List[SourceTypeFilter] = Field(default_factory=list)
    domains: List[str] = Field(default_factory=list, description="Allow list of search domains")


class EvidenceResponse(BaseModel):
    """Raw provider answer: free text plus the citation list."""

    citations: List[Citation] = Field(default_factory=list)
    raw_text: str = ""

    @property
    def usable_citations(self) -> List[Citation]:
        """Citations that carry a URL."""
        return [c for c in self.citations if c.url and c.url.strip()]

    @property
    def has_usable_citations(self) -> bool:
        return bool(self.usable_citations)


class EvidenceProvider(ABC):
    """Abstract interface for LLM-backed web-search evidence providers.

    Implementations raise ``ProviderError`` on network, timeout or quota
    failures. Callers treat a response without usable citations exactly
    like an error.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the provider and its resources."""
        pass

    @abstractmethod
    async def verify(self, claim: str, filters: EvidenceFilters) -> EvidenceResponse:
        """Search for evidence about a single claim.

        Args:
            claim: Prompt or claim text to verify
            filters: Region, source-type and domain restrictions

        Returns:
            Provider answer with citations
        """
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Shutdown the provider and clean up resources."""
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get the provider name."""
        pass

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is available."""
        pass

    @property
    def capabilities(self) -> Dict[str, bool]:
        """Get the provider capabilities."""
        return {"citations": True, "structured_output": False}
