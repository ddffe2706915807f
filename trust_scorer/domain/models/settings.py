"""Tunable constants of the verification engine."""

from typing import Tuple

from pydantic import BaseModel, Field


class EngineSettings(BaseModel):
    """Numeric policy constants of the verification engine."""

    # Claim extraction
    claim_quota: int = Field(default=3, ge=1, description="Claims sent to the evidence provider at most")
    min_sentence_length: int = Field(default=10, description="Shorter fragments are not claims")
    fallback_claim_length: int = Field(default=200, description="Truncation of content used as the only claim")

    # Sanity check
    sanity_base_confidence: int = Field(default=90, ge=0, le=100)
    sanity_penalty_per_issue: int = Field(default=20, ge=0, le=100)
    sanity_confidence_floor: int = Field(default=10, ge=0, le=100)
    sanity_credibility_penalty: int = Field(default=50, ge=0, le=100)

    # Source verification fallbacks
    clean_fallback_credibility: int = Field(default=30, ge=0, le=100)
    unclean_fallback_credibility: int = Field(default=5, ge=0, le=100)
    default_structured_credibility: int = Field(default=50, ge=0, le=100)

    # Trust score policy
    sanity_cap: int = Field(default=10, ge=0, le=100)
    established_news_threshold: int = Field(default=60, ge=0, le=100)
    no_source_default_credibility: int = Field(default=15, ge=0, le=100)
    no_source_max_score: int = Field(default=30, ge=0, le=100)
    min_trust_score: int = Field(default=5, ge=0, le=100)
    max_trust_score: int = Field(default=95, ge=0, le=100)
    factual_weights: Tuple[float, float, float, float, float] = (0.35, 0.25, 0.20, 0.10, 0.10)
    non_factual_weights: Tuple[float, float, float, float, float] = (0.20, 0.15, 0.35, 0.15, 0.15)

    # Timeouts (seconds)
    provider_timeout: float = Field(default=30.0, gt=0)
    analysis_timeout: float = Field(default=20.0, gt=0)
    extraction_timeout: float = Field(default=15.0, gt=0)

    # History
    history_limit: int = Field(default=100, ge=1)
