"""Domain models for the independent content analyses.

Each model has an ``insufficient_data`` constructor returning the documented
default used when the analysis could not run. Those defaults always carry a
confidence of 0.
"""

from enum import Enum
from typing import List

from pydantic import Field

from .base import CamelModel


class SentimentLabel(str, Enum):
    """Overall tone of the content."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ContentKind(str, Enum):
    """Whether content reads as factual reporting or opinion."""

    FACTUAL = "factual"
    OPINION = "opinion"
    MIXED = "mixed"


class FactCheckVerdict(str, Enum):
    """Verdicts used by the independent fact-check provider."""

    TRUE = "TRUE"
    FALSE = "FALSE"
    PARTIALLY_TRUE = "PARTIALLY_TRUE"
    UNVERIFIED = "UNVERIFIED"


class SentimentResult(CamelModel):
    """Sentiment/toxicity score; higher is calmer and less hostile."""

    score: int = Field(..., ge=0, le=100)
    label: SentimentLabel
    confidence: int = Field(..., ge=0, le=100)

    @classmethod
    def insufficient_data(cls) -> "SentimentResult":
        return cls(score=50, label=SentimentLabel.NEUTRAL, confidence=0)


class FactCheckClaim(CamelModel):
    """A claim as judged by the independent fact-check provider."""

    text: str
    verdict: FactCheckVerdict = FactCheckVerdict.UNVERIFIED
    confidence: int = Field(default=0, ge=0, le=100)
    sources: List[str] = Field(default_factory=list)
    explanation: str = ""


class FactCheckResult(CamelModel):
    """Independent fact-check provider verdict on the whole content."""

    score: int = Field(..., ge=0, le=100)
    claims: List[FactCheckClaim] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)
    summary: str = ""
    confidence: int = Field(default=0, ge=0, le=100)
    verified: bool = False

    @classmethod
    def insufficient_data(cls) -> "FactCheckResult":
        return cls(
            score=50,
            summary="Insufficient data: no fact-check provider result available",
            confidence=0,
            verified=False,
        )


class ContentClassification(CamelModel):
    """Factual/opinion classification of the content."""

    type: ContentKind
    confidence: int = Field(..., ge=0, le=100)
    language: str = "en"

    @classmethod
    def insufficient_data(cls) -> "ContentClassification":
        return cls(type=ContentKind.MIXED, confidence=0)
