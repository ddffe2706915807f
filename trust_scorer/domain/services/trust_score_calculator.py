"""Fusion of all verification signals into a single trust score.

The calculator evaluates an ordered list of policies; the first one that
applies produces the score:

1. sanity override: sanity-category conflicts cap the score at 10;
2. established news: a credible news domain sets a floor of 60, adjusted
   by sentiment, the fact-check verdict and conflicts;
3. no sources for factual content: heavily penalised, at most 30;
4. weighted sum of every signal, weights depending on content type.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.analysis import ContentKind
from ..models.result import TrustScoreInputs
from ..models.settings import EngineSettings
from ..models.source import SourceType
from .sanity_checker import matches_sanity_category

logger = logging.getLogger(__name__)


class ScoringPolicy(str, Enum):
    """Policy branch that produced a trust score."""

    SANITY_OVERRIDE = "sanity_override"
    ESTABLISHED_NEWS = "established_news"
    NO_SOURCES_FACTUAL = "no_sources_factual"
    WEIGHTED = "weighted"


@dataclass(frozen=True)
class TrustScore:
    """Calculated score and the branch it came from."""

    score: int
    policy: ScoringPolicy
    explanation: str


def clamp(value: float, low: int, high: int) -> int:
    """Round and clamp a value into [low, high]."""
    return int(max(low, min(high, round(value))))


class TrustScoreCalculator:
    """Combines sanity, evidence, sentiment, fact-check and classification."""

    def __init__(self, settings: Optional[EngineSettings] = None):
        self._settings = settings or EngineSettings()

    def calculate(self, inputs: TrustScoreInputs) -> TrustScore:
        """Calculate the trust score.

        Args:
            inputs: Results of every upstream stage

        Returns:
            Score in [5, 95], or in [0, 10] when the sanity override applies
        """
        for policy in (self._sanity_override, self._established_news, self._no_sources_factual):
            result = policy(inputs)
            if result is not None:
                logger.info(f"🧮 Trust score {result.score} via {result.policy.value}")
                return result

        result = self._weighted(inputs)
        logger.info(f"🧮 Trust score {result.score} via {result.policy.value}")
        return result

    def _is_established_news(self, inputs: TrustScoreInputs) -> bool:
        return any(
            d.type == SourceType.NEWS and d.credibility > self._settings.established_news_threshold
            for d in inputs.source_credibility.domains
        )

    def _sanity_override(self, inputs: TrustScoreInputs) -> Optional[TrustScore]:
        violations = [c for c in inputs.source_verification.conflicts if matches_sanity_category(c.text)]
        if not violations:
            return None
        score = clamp(
            min(self._settings.sanity_cap, inputs.source_verification.credibility),
            0,
            self._settings.sanity_cap,
        )
        return TrustScore(
            score=score,
            policy=ScoringPolicy.SANITY_OVERRIDE,
            explanation=f"Content failed {len(violations)} sanity check(s); score capped at {self._settings.sanity_cap}",
        )

    def _established_news(self, inputs: TrustScoreInputs) -> Optional[TrustScore]:
        if not self._is_established_news(inputs):
            return None

        threshold = self._settings.established_news_threshold
        score = float(max(inputs.source_credibility.score, threshold))
        if inputs.sentiment.score > 70:
            score *= 1.1
        elif inputs.sentiment.score < 30:
            score *= 0.9
        if inputs.fact_check.verified:
            score *= 1.1
        if inputs.source_verification.conflicts:
            score *= 0.8

        return TrustScore(
            score=clamp(score, self._settings.min_trust_score, self._settings.max_trust_score),
            policy=ScoringPolicy.ESTABLISHED_NEWS,
            explanation="Content comes from an established news source",
        )

    def _no_sources_factual(self, inputs: TrustScoreInputs) -> Optional[TrustScore]:
        if inputs.source_verification.sources:
            return None
        if inputs.classification.type != ContentKind.FACTUAL:
            return None

        domain_score = (
            inputs.source_credibility.score
            if inputs.source_credibility.domains
            else self._settings.no_source_default_credibility
        )
        score = max(
            self._settings.min_trust_score,
            min(self._settings.no_source_max_score, domain_score),
        )
        return TrustScore(
            score=int(score),
            policy=ScoringPolicy.NO_SOURCES_FACTUAL,
            explanation="Factual claims could not be corroborated by any source",
        )

    def _weighted(self, inputs: TrustScoreInputs) -> TrustScore:
        factual = inputs.classification.type == ContentKind.FACTUAL
        weights = self._settings.factual_weights if factual else self._settings.non_factual_weights
        signals = (
            inputs.source_verification.credibility,
            inputs.source_credibility.score,
            inputs.fact_check.score,
            inputs.sentiment.score,
            inputs.classification.confidence,
        )
        weighted = sum(weight * signal for weight, signal in zip(weights, signals))
        return TrustScore(
            score=clamp(weighted, self._settings.min_trust_score, self._settings.max_trust_score),
            policy=ScoringPolicy.WEIGHTED,
            explanation=f"Weighted combination of all signals ({'factual' if factual else 'non-factual'} weights)",
        )
