"""Deterministic word-list analyzer used when no LLM is configured.

Scores are coarse and confidences deliberately low. The fact check always
reports insufficient data since word lists cannot judge truth.
"""

import logging
import re
from typing import List

from ...domain.models.analysis import (
    ContentClassification,
    ContentKind,
    FactCheckResult,
    SentimentLabel,
    SentimentResult,
)
from ...domain.services.claim_extractor import SENTENCE_SPLIT, is_factual_sentence

logger = logging.getLogger(__name__)

POSITIVE_WORDS = {
    "good", "great", "improve", "improved", "growth", "success", "successful",
    "benefit", "progress", "safe", "peace", "support", "welcome", "achieve",
}
NEGATIVE_WORDS = {
    "bad", "crisis", "fail", "failed", "decline", "loss", "danger", "dangerous",
    "fear", "attack", "corrupt", "collapse", "disaster", "threat",
}
TOXIC_WORDS = {
    "idiot", "idiots", "stupid", "liar", "liars", "traitor", "scum", "hate",
    "disgusting", "moron", "fraudster", "evil",
}
OPINION_MARKERS = [
    "i think", "i believe", "i feel", "in my opinion", "in my view",
    "should", "must", "best", "worst", "terrible", "amazing", "obviously",
    "clearly", "shocking", "outrageous",
]

WORD = re.compile(r"[a-z']+")


def _words(content: str) -> List[str]:
    return WORD.findall(content.lower())


class LexiconContentAnalyzer:
    """Word-list sentiment and factual/opinion classification."""

    provider_name = "Lexicon"
    is_available = True

    async def analyze_sentiment(self, content: str) -> SentimentResult:
        """Score tone by counting positive, negative and toxic words."""
        words = _words(content)
        positive = sum(1 for w in words if w in POSITIVE_WORDS)
        negative = sum(1 for w in words if w in NEGATIVE_WORDS)
        toxic = sum(1 for w in words if w in TOXIC_WORDS)

        score = max(0, min(100, 50 + 8 * positive - 8 * negative - 15 * toxic))
        if score > 60:
            label = SentimentLabel.POSITIVE
        elif score < 40:
            label = SentimentLabel.NEGATIVE
        else:
            label = SentimentLabel.NEUTRAL

        hits = positive + negative + toxic
        return SentimentResult(score=score, label=label, confidence=min(60, 15 * hits))

    async def check_facts(self, content: str) -> FactCheckResult:
        """Word lists cannot judge truth; always insufficient data."""
        return FactCheckResult.insufficient_data()

    async def classify_content(self, content: str) -> ContentClassification:
        """Classify by the share of factual-looking sentences and opinion markers."""
        sentences = [s.strip() for s in SENTENCE_SPLIT.split(content) if s.strip()]
        lower = content.lower()
        opinion = sum(1 for marker in OPINION_MARKERS if re.search(rf"\b{re.escape(marker)}\b", lower))

        if not sentences:
            return ContentClassification.insufficient_data()

        factual_ratio = sum(1 for s in sentences if is_factual_sentence(s)) / len(sentences)
        if opinion == 0 and factual_ratio >= 0.5:
            kind = ContentKind.FACTUAL
            confidence = round(40 + 30 * factual_ratio)
        elif opinion >= 2 and factual_ratio < 0.5:
            kind = ContentKind.OPINION
            confidence = min(70, 40 + 10 * opinion)
        else:
            kind = ContentKind.MIXED
            confidence = 40

        return ContentClassification(type=kind, confidence=confidence, language="en")
