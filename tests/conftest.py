"""Test configuration and common fixtures."""

from datetime import date
from typing import List, Optional

import pytest

from trust_scorer.domain.exceptions import ProviderError
from trust_scorer.domain.models.analysis import (
    ContentClassification,
    ContentKind,
    FactCheckResult,
    SentimentLabel,
    SentimentResult,
)
from trust_scorer.domain.models.sanity import SanityReport
from trust_scorer.domain.models.settings import EngineSettings
from trust_scorer.domain.ports.evidence_provider import (
    Citation,
    EvidenceFilters,
    EvidenceProvider,
    EvidenceResponse,
)
from trust_scorer.domain.services.evidence_aggregator import EvidenceAggregator
from trust_scorer.domain.services.sanity_checker import SanityChecker


class FakeEvidenceProvider(EvidenceProvider):
    """Evidence provider replaying scripted responses.

    Each scripted item is either an ``EvidenceResponse`` or an exception to
    raise. The last item repeats once the script is exhausted.
    """

    def __init__(self, script: Optional[List] = None, name: str = "Fake"):
        self._script = list(script or [])
        self._name = name
        self.calls: List[str] = []
        self.filters: List[EvidenceFilters] = []

    async def initialize(self) -> None:
        pass

    async def verify(self, claim: str, filters: EvidenceFilters) -> EvidenceResponse:
        self.calls.append(claim)
        self.filters.append(filters)
        if not self._script:
            return EvidenceResponse()
        item = self._script.pop(0) if len(self._script) > 1 else self._script[0]
        if isinstance(item, Exception):
            raise item
        return item

    async def shutdown(self) -> None:
        pass

    @property
    def provider_name(self) -> str:
        return self._name

    @property
    def is_available(self) -> bool:
        return True


class FakeAnalyzer:
    """Analyzer returning fixed results."""

    provider_name = "Fake"
    is_available = True

    def __init__(
        self,
        sentiment: Optional[SentimentResult] = None,
        fact_check: Optional[FactCheckResult] = None,
        classification: Optional[ContentClassification] = None,
    ):
        self.sentiment = sentiment or SentimentResult(score=50, label=SentimentLabel.NEUTRAL, confidence=50)
        self.fact_check = fact_check or FactCheckResult(score=50, confidence=50)
        self.classification = classification or ContentClassification(type=ContentKind.MIXED, confidence=50)

    async def analyze_sentiment(self, content: str) -> SentimentResult:
        return self.sentiment

    async def check_facts(self, content: str) -> FactCheckResult:
        return self.fact_check

    async def classify_content(self, content: str) -> ContentClassification:
        return self.classification


@pytest.fixture
def settings() -> EngineSettings:
    """Default engine settings."""
    return EngineSettings()


@pytest.fixture
def sanity_checker(settings: EngineSettings) -> SanityChecker:
    """Sanity checker with a fixed current year."""
    return SanityChecker(settings, current_year=lambda: 2025)


@pytest.fixture
def aggregator() -> EvidenceAggregator:
    """Aggregator with a fixed access date."""
    return EvidenceAggregator(today=lambda: date(2025, 1, 15))


@pytest.fixture
def clean_sanity() -> SanityReport:
    return SanityReport()


@pytest.fixture
def snow_sanity() -> SanityReport:
    return SanityReport(
        is_clean=False,
        issues=["Geographic impossibility: Nigeria does not experience snow"],
        confidence=70,
    )


@pytest.fixture
def citation_response() -> EvidenceResponse:
    """Free-text answer with two citations."""
    return EvidenceResponse(
        citations=[
            Citation(url="https://www.reuters.com/world/africa/story", title="Reuters story", text="Reuters quote"),
            Citation(url="https://medium.com/@writer/a-post", title="A post"),
        ],
        raw_text="The claim appears to be broadly accurate based on recent reporting.",
    )


@pytest.fixture
def failing_provider() -> FakeEvidenceProvider:
    """Provider that always fails."""
    return FakeEvidenceProvider([ProviderError("quota exceeded", provider="Fake", status_code=429)])
