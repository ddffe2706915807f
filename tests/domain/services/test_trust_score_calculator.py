"""Tests for the trust score calculator."""

from typing import List, Optional

import pytest

from trust_scorer.domain.models.analysis import (
    ContentClassification,
    ContentKind,
    FactCheckResult,
    SentimentLabel,
    SentimentResult,
)
from trust_scorer.domain.models.result import TrustScoreInputs
from trust_scorer.domain.models.sanity import SanityReport
from trust_scorer.domain.models.source import (
    DomainCredibility,
    SourceCredibilityResult,
    SourceRecord,
    SourceType,
)
from trust_scorer.domain.models.verification import ConflictRecord, SourceVerificationResult
from trust_scorer.domain.services.trust_score_calculator import ScoringPolicy, TrustScoreCalculator

SNOW_CONFLICT = ConflictRecord(
    topic="Content analysis",
    conflicting_statements=["Geographic impossibility: Nigeria does not experience snow"],
    sources=["Internal validation"],
)
SOURCE_CONFLICT = ConflictRecord(topic="Inflation figure", conflicting_statements=["33%", "31%"])


def make_inputs(
    credibility: int = 50,
    sources: Optional[List[SourceRecord]] = None,
    conflicts: Optional[List[ConflictRecord]] = None,
    sentiment: int = 50,
    fact_score: int = 50,
    verified: bool = False,
    kind: ContentKind = ContentKind.MIXED,
    kind_confidence: int = 50,
    origin_score: int = 40,
    origin_domains: Optional[List[DomainCredibility]] = None,
) -> TrustScoreInputs:
    return TrustScoreInputs(
        sanity=SanityReport(),
        source_verification=SourceVerificationResult(
            credibility=credibility,
            sources=sources or [],
            conflicts=conflicts or [],
        ),
        sentiment=SentimentResult(score=sentiment, label=SentimentLabel.NEUTRAL, confidence=50),
        fact_check=FactCheckResult(score=fact_score, verified=verified, confidence=50),
        classification=ContentClassification(type=kind, confidence=kind_confidence),
        source_credibility=SourceCredibilityResult(score=origin_score, domains=origin_domains or []),
    )


def news_domain(credibility: int) -> DomainCredibility:
    return DomainCredibility(domain="reuters.com", credibility=credibility, type=SourceType.NEWS)


@pytest.fixture
def calculator() -> TrustScoreCalculator:
    return TrustScoreCalculator()


def test_sanity_override_caps_score(calculator: TrustScoreCalculator):
    """Test that sanity conflicts cap the score at ten."""
    result = calculator.calculate(make_inputs(credibility=80, conflicts=[SNOW_CONFLICT]))

    assert result.policy == ScoringPolicy.SANITY_OVERRIDE
    assert result.score == 10


def test_sanity_override_keeps_lower_credibility(calculator: TrustScoreCalculator):
    """Test that the override never raises a low credibility."""
    result = calculator.calculate(make_inputs(credibility=5, conflicts=[SNOW_CONFLICT]))

    assert result.score == 5


def test_sanity_override_beats_established_news(calculator: TrustScoreCalculator):
    """Test that the override is evaluated first."""
    inputs = make_inputs(
        credibility=5,
        conflicts=[SNOW_CONFLICT],
        origin_score=95,
        origin_domains=[news_domain(95)],
    )

    assert calculator.calculate(inputs).score <= 10


def test_established_news(calculator: TrustScoreCalculator):
    """Test a credible news domain with neutral signals."""
    result = calculator.calculate(make_inputs(origin_score=95, origin_domains=[news_domain(95)]))

    assert result.policy == ScoringPolicy.ESTABLISHED_NEWS
    assert result.score == 95


@pytest.mark.parametrize(
    "sentiment, verified, conflicts, expected",
    [
        (50, False, [], 70),
        (80, False, [], 77),
        (20, False, [], 63),
        (50, True, [], 77),
        (80, True, [], 85),
        (50, False, [SOURCE_CONFLICT], 56),
    ],
)
def test_established_news_adjustments(calculator: TrustScoreCalculator, sentiment, verified, conflicts, expected):
    """Test sentiment, fact-check and conflict multipliers."""
    inputs = make_inputs(
        sentiment=sentiment,
        verified=verified,
        conflicts=conflicts,
        origin_score=70,
        origin_domains=[news_domain(70)],
    )

    assert calculator.calculate(inputs).score == expected


def test_established_news_floor(calculator: TrustScoreCalculator):
    """Test that the origin score is raised to the news threshold."""
    domains = [news_domain(65), DomainCredibility(domain="x.com", credibility=30, type=SourceType.SOCIAL)]

    result = calculator.calculate(make_inputs(origin_score=48, origin_domains=domains))

    assert result.policy == ScoringPolicy.ESTABLISHED_NEWS
    assert result.score == 60


def test_news_at_threshold_is_not_established(calculator: TrustScoreCalculator):
    """Test that the threshold itself does not qualify."""
    result = calculator.calculate(make_inputs(origin_score=60, origin_domains=[news_domain(60)]))

    assert result.policy != ScoringPolicy.ESTABLISHED_NEWS


def test_no_sources_factual_default(calculator: TrustScoreCalculator):
    """Test factual content without sources or domains."""
    result = calculator.calculate(make_inputs(kind=ContentKind.FACTUAL))

    assert result.policy == ScoringPolicy.NO_SOURCES_FACTUAL
    assert result.score == 15


@pytest.mark.parametrize("origin_score, expected", [(80, 30), (20, 20), (2, 5)])
def test_no_sources_factual_with_domains(calculator: TrustScoreCalculator, origin_score, expected):
    """Test that the origin score is bounded to [5, 30]."""
    domains = [DomainCredibility(domain="agency.gov", credibility=origin_score, type=SourceType.GOVERNMENT)]

    result = calculator.calculate(
        make_inputs(kind=ContentKind.FACTUAL, origin_score=origin_score, origin_domains=domains)
    )

    assert result.score == expected


def test_weighted_factual(calculator: TrustScoreCalculator):
    """Test the factual weights."""
    inputs = make_inputs(
        credibility=80,
        sources=[SourceRecord(url="https://nature.com/a", credibility_score=95)],
        kind=ContentKind.FACTUAL,
        kind_confidence=60,
    )

    result = calculator.calculate(inputs)

    assert result.policy == ScoringPolicy.WEIGHTED
    assert result.score == 59


def test_weighted_non_factual(calculator: TrustScoreCalculator):
    """Test the non-factual weights, which apply even without sources."""
    result = calculator.calculate(make_inputs(credibility=30, kind=ContentKind.OPINION, kind_confidence=40))

    assert result.policy == ScoringPolicy.WEIGHTED
    assert result.score == 43


@pytest.mark.parametrize("value, expected", [(0, 5), (100, 95)])
def test_weighted_bounds(calculator: TrustScoreCalculator, value, expected):
    """Test clamping of the weighted score."""
    inputs = make_inputs(
        credibility=value,
        sentiment=value,
        fact_score=value,
        kind_confidence=value,
        origin_score=value,
    )

    assert calculator.calculate(inputs).score == expected
