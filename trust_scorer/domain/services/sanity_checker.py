"""Cheap lexical screening for self-evidently impossible statements.

This is a guard against obviously fabricated content, not a substitute for
fact checking. Every check is deterministic and yields at most one finding.
"""

import logging
import re
from datetime import datetime
from typing import Callable, List, Optional

from ..models.sanity import SanityCategory, SanityFinding, SanityReport
from ..models.settings import EngineSettings

logger = logging.getLogger(__name__)

TROPICAL_COUNTRIES = [
    "nigeria", "ghana", "senegal", "cameroon", "benin", "togo", "liberia",
    "sierra leone", "ivory coast", "gambia", "singapore", "malaysia",
    "indonesia", "philippines", "jamaica", "barbados", "sri lanka",
]

COLD_CLIMATE_TERMS = ["snow", "snowfall", "snowstorm", "blizzard", "sleet", "frostbite"]

FALSE_SCIENTIFIC_CLAIMS = [
    "earth is flat",
    "sun orbits earth",
    "sun orbits the earth",
    "gravity does not exist",
    "vaccines contain microchips",
    "moon is made of cheese",
]

YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")

# Issue prefixes; the trust-score calculator matches conflicts against these.
CATEGORY_PATTERNS = {
    SanityCategory.GEOGRAPHIC_IMPOSSIBILITY: re.compile(r"geographic impossibility", re.IGNORECASE),
    SanityCategory.TIMELINE_ERROR: re.compile(r"timeline error", re.IGNORECASE),
    SanityCategory.SCIENTIFICALLY_FALSE: re.compile(r"scientifically false", re.IGNORECASE),
}


def matches_sanity_category(text: str) -> bool:
    """Check whether text describes one of the sanity-violation categories."""
    return any(pattern.search(text) for pattern in CATEGORY_PATTERNS.values())


def _contains_word(text: str, term: str) -> bool:
    return re.search(rf"\b{re.escape(term)}\b", text) is not None


def _contains_word_prefix(text: str, term: str) -> bool:
    return re.search(rf"\b{re.escape(term)}\w*", text) is not None


class SanityChecker:
    """Runs the fixed battery of sanity checks."""

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        current_year: Optional[Callable[[], int]] = None,
    ):
        """Initialize the checker.

        Args:
            settings: Engine constants
            current_year: Clock returning the current calendar year
        """
        self._settings = settings or EngineSettings()
        self._current_year = current_year or (lambda: datetime.now().year)

    def check(self, content: str) -> SanityReport:
        """Screen content and summarise the findings."""
        findings = self.findings(content)
        if findings:
            logger.info(f"🧪 Sanity check found {len(findings)} issue(s): {[f.issue for f in findings]}")

        penalty = sum(f.severity for f in findings)
        confidence = max(
            self._settings.sanity_confidence_floor,
            self._settings.sanity_base_confidence - penalty,
        )
        return SanityReport(
            is_clean=not findings,
            issues=[f.issue for f in findings],
            confidence=confidence,
        )

    def findings(self, content: str) -> List[SanityFinding]:
        """Run every check and collect the findings."""
        lower = content.lower()
        checks = [
            self._check_geography(lower),
            self._check_timeline(content),
            self._check_science(lower),
        ]
        return [finding for finding in checks if finding is not None]

    def _finding(self, issue: str, category: SanityCategory) -> SanityFinding:
        return SanityFinding(
            issue=issue,
            category=category,
            severity=self._settings.sanity_penalty_per_issue,
        )

    def _check_geography(self, lower: str) -> Optional[SanityFinding]:
        if not any(_contains_word_prefix(lower, term) for term in COLD_CLIMATE_TERMS):
            return None
        for country in TROPICAL_COUNTRIES:
            if _contains_word(lower, country):
                return self._finding(
                    f"Geographic impossibility: {country.title()} does not experience snow",
                    SanityCategory.GEOGRAPHIC_IMPOSSIBILITY,
                )
        return None

    def _check_timeline(self, content: str) -> Optional[SanityFinding]:
        current_year = self._current_year()
        future_years = sorted({int(y) for y in YEAR_PATTERN.findall(content) if int(y) > current_year})
        if not future_years:
            return None
        years = ", ".join(str(y) for y in future_years)
        return self._finding(
            f"Timeline error: year {years} is in the future",
            SanityCategory.TIMELINE_ERROR,
        )

    def _check_science(self, lower: str) -> Optional[SanityFinding]:
        matched = [claim for claim in FALSE_SCIENTIFIC_CLAIMS if claim in lower]
        if not matched:
            return None
        return self._finding(
            f"Scientifically false claim: {', '.join(matched)}",
            SanityCategory.SCIENTIFICALLY_FALSE,
        )
