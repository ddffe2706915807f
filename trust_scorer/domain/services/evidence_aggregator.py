"""Merging of provider-declared sources with automatic citations."""

import logging
from datetime import date
from typing import Callable, Dict, Iterable, List

from ..models.source import DomainAssessment, SourceRecord
from ..ports.evidence_provider import Citation
from .domain_credibility import assess_domain, normalize_domain
from .response_parser import PayloadSource

logger = logging.getLogger(__name__)

QUOTE_LENGTH = 300


class EvidenceAggregator:
    """Builds the final, URL-unique source list.

    Provider-declared sources are written first and are never overwritten
    by citations; among duplicates the first writer wins.
    """

    def __init__(
        self,
        assessor: Callable[[str], DomainAssessment] = assess_domain,
        today: Callable[[], date] = date.today,
    ):
        self._assess = assessor
        self._today = today

    def merge(
        self,
        declared: Iterable[PayloadSource],
        citations: Iterable[Citation],
    ) -> List[SourceRecord]:
        """Merge declared sources and citations by URL.

        Args:
            declared: Sources parsed from the provider payload
            citations: Citations attached to the provider response

        Returns:
            Deduplicated source records, declared sources first
        """
        records: Dict[str, SourceRecord] = {}

        for source in declared:
            if not normalize_domain(source.url):
                logger.debug(f"🚫 Declared source without a valid host ignored: {source.url}")
                continue
            if source.url in records:
                logger.debug(f"🔁 Duplicate declared source ignored: {source.url}")
                continue
            records[source.url] = self._from_declared(source)

        for citation in citations:
            if not citation.url or citation.url in records:
                continue
            if not normalize_domain(citation.url):
                logger.debug(f"🚫 Citation without a valid host ignored: {citation.url}")
                continue
            records[citation.url] = self._from_citation(citation)

        return list(records.values())

    def from_citations(self, citations: Iterable[Citation]) -> List[SourceRecord]:
        """Rebuild sources from the citation list alone."""
        return self.merge([], citations)

    @staticmethod
    def mean_credibility(sources: List[SourceRecord]) -> int:
        """Mean credibility of the sources, 0 when there are none."""
        if not sources:
            return 0
        return round(sum(s.credibility_score for s in sources) / len(sources))

    def _from_declared(self, source: PayloadSource) -> SourceRecord:
        assessment = self._assess(source.url)
        return SourceRecord(
            url=source.url,
            title=source.title or "Source",
            domain=source.domain or normalize_domain(source.url),
            credibility_score=(
                source.credibility_score if source.credibility_score is not None else assessment.score
            ),
            source_type=source.source_type or assessment.source_type,
            is_regional_source=(
                source.is_regional_source if source.is_regional_source is not None else assessment.is_regional
            ),
            relevant_quote=source.relevant_quote[:QUOTE_LENGTH],
            publication_date=source.publication_date,
            access_date=self._today(),
        )

    def _from_citation(self, citation: Citation) -> SourceRecord:
        assessment = self._assess(citation.url)
        return SourceRecord(
            url=citation.url,
            title=citation.title or "Source",
            domain=normalize_domain(citation.url),
            credibility_score=assessment.score,
            source_type=assessment.source_type,
            is_regional_source=assessment.is_regional,
            relevant_quote=(citation.text or "")[:QUOTE_LENGTH],
            access_date=self._today(),
        )
