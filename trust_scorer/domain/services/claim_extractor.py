"""Heuristic extraction of candidate factual claims."""

import logging
import re
from typing import List, Optional

from ..models.claim import Claim
from ..models.settings import EngineSettings

logger = logging.getLogger(__name__)

SENTENCE_SPLIT = re.compile(r"[.!?]+")

FACTUAL_PATTERNS = [
    re.compile(r"\b(is|are|was|were|has|have|will|did|does)\b", re.IGNORECASE),
    re.compile(r"\b\d+"),
    re.compile(r"\b(according to|study|research|report|data)\b", re.IGNORECASE),
    re.compile(r"\b(president|minister|government|official)\b", re.IGNORECASE),
    re.compile(r"\b(country|city|state|nation)\b", re.IGNORECASE),
]


def is_factual_sentence(sentence: str) -> bool:
    """Check whether a sentence looks like a verifiable statement."""
    return any(pattern.search(sentence) for pattern in FACTUAL_PATTERNS)


class ClaimExtractor:
    """Splits content into candidate factual statements.

    Never returns an empty list: when no sentence qualifies, the content
    itself (truncated) becomes the only claim.
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        self._settings = settings or EngineSettings()

    def extract(self, content: str) -> List[Claim]:
        """Extract claims from raw content.

        Args:
            content: Raw text

        Returns:
            Non-empty list of claims in document order
        """
        claims = []
        for position, fragment in enumerate(SENTENCE_SPLIT.split(content)):
            sentence = fragment.strip()
            if len(sentence) <= self._settings.min_sentence_length:
                continue
            if is_factual_sentence(sentence):
                claims.append(Claim(text=sentence, position=position))

        if claims:
            logger.debug(f"📋 Extracted {len(claims)} claims")
            return claims

        fallback = content.strip()[: self._settings.fallback_claim_length]
        logger.debug("📋 No factual sentence found, using content as the only claim")
        return [Claim(text=fallback or content[: self._settings.fallback_claim_length], position=0)]

    def factual_share(self, content: str) -> float:
        """Share of sentences that look like verifiable statements.

        Returns 0.0 when the content has no sentence longer than the
        minimum length.
        """
        sentences = [
            s.strip() for s in SENTENCE_SPLIT.split(content)
            if len(s.strip()) > self._settings.min_sentence_length
        ]
        if not sentences:
            return 0.0
        return sum(1 for s in sentences if is_factual_sentence(s)) / len(sentences)
