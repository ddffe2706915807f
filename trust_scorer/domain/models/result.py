"""Final verification result and the trust-score inputs it is built from."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import Field

from .analysis import ContentClassification, FactCheckResult, SentimentResult
from .base import CamelModel
from .request import ContentType
from .sanity import SanityReport
from .source import SourceCredibilityResult
from .verification import EvidenceTier, SourceVerificationResult

PREVIEW_LENGTH = 100


def make_preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    """Return the first ``length`` characters, with an ellipsis if cut."""
    if len(content) <= length:
        return content
    return content[:length] + "..."


class TrustScoreInputs(CamelModel):
    """Everything the trust-score calculator looks at."""

    sanity: SanityReport
    source_verification: SourceVerificationResult
    sentiment: SentimentResult
    fact_check: FactCheckResult
    classification: ContentClassification
    source_credibility: SourceCredibilityResult


class VerificationResult(CamelModel):
    """Write-once output of a verification request.

    Serialized with camelCase field names; this is the contract the
    history store and API clients rely on.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    trust_score: int = Field(..., ge=0, le=100)
    sanity_check: SanityReport
    source_verification: SourceVerificationResult
    sentiment_analysis: SentimentResult
    fact_check: FactCheckResult
    source_credibility: SourceCredibilityResult
    content_classification: ContentClassification
    processing_time: int = Field(..., ge=0, description="Milliseconds spent verifying")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    content_preview: str = ""
    content_type: ContentType = ContentType.TEXT

    def to_json(self) -> str:
        """Serialize using the public camelCase schema."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str) -> "VerificationResult":
        """Rebuild a result produced by :meth:`to_json`."""
        return cls.model_validate_json(data)

    @classmethod
    def degenerate(
        cls,
        content: str,
        content_type: ContentType,
        reason: str,
        processing_time: int = 0,
        timestamp: Optional[datetime] = None,
    ) -> "VerificationResult":
        """Result returned when every internal stage failed.

        It carries a zero trust score and an explanatory summary instead of
        raising to the caller.
        """
        return cls(
            trust_score=0,
            sanity_check=SanityReport(is_clean=True, issues=[], confidence=0),
            source_verification=SourceVerificationResult(
                credibility=0,
                summary=f"Verification failed: {reason}. This may indicate network issues or invalid content.",
                confidence=0,
                evidence_tier=EvidenceTier.FAILED,
            ),
            sentiment_analysis=SentimentResult.insufficient_data(),
            fact_check=FactCheckResult.insufficient_data(),
            source_credibility=SourceCredibilityResult(score=0, summary="Not assessed"),
            content_classification=ContentClassification.insufficient_data(),
            processing_time=processing_time,
            timestamp=timestamp or datetime.now(timezone.utc),
            content_preview=make_preview(content),
            content_type=content_type,
        )
