"""Domain models for source-backed claim verification."""

from enum import Enum
from typing import List

from pydantic import Field

from .base import CamelModel
from .source import SourceRecord


class Verdict(str, Enum):
    """Per-claim verification outcome."""

    VERIFIED = "VERIFIED"
    FALSE = "FALSE"
    PARTIALLY_TRUE = "PARTIALLY_TRUE"
    UNVERIFIED = "UNVERIFIED"
    OPINION = "OPINION"


class EvidenceTier(str, Enum):
    """Rung of the fallback ladder that produced a verification result."""

    STRUCTURED = "structured"  # Provider returned a parseable payload
    CITATIONS = "citations"  # Unstructured text, sources rebuilt from citations
    SANITY = "sanity"  # No usable evidence, derived from the sanity report
    FAILED = "failed"  # Every stage failed


class ClaimVerdict(CamelModel):
    """Verdict for one claim."""

    claim_text: str
    verdict: Verdict
    confidence: int = Field(..., ge=0, le=100)
    supporting_sources: List[str] = Field(default_factory=list)
    evidence: str = ""


class ConflictRecord(CamelModel):
    """Disagreement between sources, or between content and a sanity rule."""

    topic: str
    conflicting_statements: List[str] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """All text carried by the conflict, for category matching."""
        return " ".join([self.topic, *self.conflicting_statements])


class SourceVerificationResult(CamelModel):
    """Outcome of the evidence loop for one request."""

    credibility: int = Field(..., ge=0, le=100)
    verdicts: List[ClaimVerdict] = Field(default_factory=list)
    sources: List[SourceRecord] = Field(default_factory=list)
    conflicts: List[ConflictRecord] = Field(default_factory=list)
    summary: str = ""
    confidence: int = Field(default=0, ge=0, le=100)
    evidence_tier: EvidenceTier = EvidenceTier.SANITY
