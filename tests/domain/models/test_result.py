"""Tests for request and result models."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from trust_scorer.domain.models.analysis import (
    ContentClassification,
    FactCheckResult,
    SentimentResult,
)
from trust_scorer.domain.models.request import ContentType, FocusRegion, VerificationRequest
from trust_scorer.domain.models.result import VerificationResult, make_preview
from trust_scorer.domain.models.sanity import SanityReport
from trust_scorer.domain.models.source import SourceCredibilityResult, SourceRecord
from trust_scorer.domain.models.verification import EvidenceTier, SourceVerificationResult


@pytest.fixture
def result() -> VerificationResult:
    return VerificationResult(
        trust_score=72,
        sanity_check=SanityReport(),
        source_verification=SourceVerificationResult(
            credibility=80,
            sources=[SourceRecord(url="https://reuters.com/a", credibility_score=95)],
            summary="Verified",
            evidence_tier=EvidenceTier.STRUCTURED,
        ),
        sentiment_analysis=SentimentResult.insufficient_data(),
        fact_check=FactCheckResult.insufficient_data(),
        source_credibility=SourceCredibilityResult(score=40),
        content_classification=ContentClassification.insufficient_data(),
        processing_time=1234,
        timestamp=datetime(2025, 3, 2, 9, 30, tzinfo=timezone.utc),
        content_preview="Some content",
    )


def test_request_accepts_camel_case():
    """Test parsing of the public request schema."""
    request = VerificationRequest.model_validate(
        {"content": "https://punchng.com/x", "contentType": "url", "focusRegion": "nigeria", "sourceTypes": ["news"]}
    )

    assert request.content_type == ContentType.URL
    assert request.focus_region == FocusRegion.NIGERIA


@pytest.mark.parametrize("content", ["", "   "])
def test_request_rejects_blank_content(content):
    """Test that blank content is invalid."""
    with pytest.raises(ValidationError):
        VerificationRequest(content=content)


def test_result_json_uses_camel_case(result: VerificationResult):
    """Test the public result schema."""
    data = json.loads(result.to_json())

    assert data["trustScore"] == 72
    assert data["processingTime"] == 1234
    assert data["sanityCheck"] == {"isClean": True, "issues": [], "confidence": 90}
    assert data["sourceVerification"]["evidenceTier"] == "structured"
    assert data["sourceVerification"]["sources"][0]["credibilityScore"] == 95
    assert data["timestamp"].startswith("2025-03-02T09:30:00")
    assert data["contentType"] == "text"


def test_result_json_round_trip(result: VerificationResult):
    """Test that serialized results load back unchanged."""
    assert VerificationResult.from_json(result.to_json()) == result


def test_result_is_immutable(result: VerificationResult):
    """Test that results are write-once."""
    with pytest.raises(ValidationError):
        result.trust_score = 10


def test_insufficient_data_defaults():
    """Test the documented defaults for missing analyses."""
    assert SentimentResult.insufficient_data().score == 50
    assert SentimentResult.insufficient_data().confidence == 0
    assert FactCheckResult.insufficient_data().verified is False
    assert FactCheckResult.insufficient_data().confidence == 0
    assert ContentClassification.insufficient_data().type.value == "mixed"


def test_make_preview():
    """Test preview truncation."""
    assert make_preview("short") == "short"
    assert make_preview("x" * 101) == "x" * 100 + "..."
