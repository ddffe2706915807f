"""Source-backed verification of extracted claims.

The verifier walks a three-rung fallback ladder and always returns a
usable result:

1. structured: the provider answer decodes into a verification payload;
2. citations: the answer is free text, sources are rebuilt from citations;
3. sanity: no claim produced usable evidence, the result is derived from
   the sanity report alone.

Confidence drops with each rung.
"""

import asyncio
import logging
from typing import List, Optional

from ..exceptions import ParseError, ProviderError
from ..models.claim import Claim
from ..models.request import FocusRegion, VerificationRequest
from ..models.sanity import SanityReport
from ..models.settings import EngineSettings
from ..models.verification import (
    ClaimVerdict,
    ConflictRecord,
    EvidenceTier,
    SourceVerificationResult,
    Verdict,
)
from ..ports.evidence_provider import EvidenceFilters, EvidenceProvider, EvidenceResponse
from .domain_credibility import build_domain_filter
from .evidence_aggregator import EvidenceAggregator
from .response_parser import parse_provider_payload

logger = logging.getLogger(__name__)

SANITY_TOPIC = "Content analysis"
SANITY_SOURCE = "Internal validation"
GENERAL_CLAIM = "General content verification"
CREDIBLE_SOURCE_SCORE = 80


def sanity_conflicts(sanity: SanityReport) -> List[ConflictRecord]:
    """One synthesized conflict per sanity issue."""
    return [
        ConflictRecord(topic=SANITY_TOPIC, conflicting_statements=[issue], sources=[SANITY_SOURCE])
        for issue in sanity.issues
    ]


def build_verification_prompt(claim: str, request: VerificationRequest) -> str:
    """Build the fact-check prompt for a single claim."""
    lines = [
        "FACT-CHECK THIS SPECIFIC CLAIM:",
        f'"{claim}"',
        "",
        "Please verify this claim and provide:",
        "1. Whether this claim is TRUE, FALSE, or PARTIALLY TRUE",
        "2. Credible sources that support or refute this claim",
        "3. Any conflicting information from different sources",
        "",
        "Focus on finding authoritative sources and be specific about the verification status.",
    ]
    if request.focus_region == FocusRegion.NIGERIA:
        lines.append("Pay special attention to Nigerian sources and context.")
    if request.source_types:
        kinds = ", ".join(t.value for t in request.source_types)
        lines.append(f"Prefer {kinds} sources.")
    lines.extend([
        "",
        "Return your response as a JSON object with overallCredibility (0-100), "
        "claimsVerified, sources, conflictingInformation, summary and confidence.",
    ])
    return "\n".join(lines)


class SourceVerifier:
    """Gathers external evidence for a bounded number of claims."""

    def __init__(
        self,
        provider: Optional[EvidenceProvider],
        aggregator: Optional[EvidenceAggregator] = None,
        settings: Optional[EngineSettings] = None,
    ):
        """Initialize the verifier.

        Args:
            provider: Evidence provider, or None when none is configured
            aggregator: Source merger
            settings: Engine constants
        """
        self._provider = provider
        self._aggregator = aggregator or EvidenceAggregator()
        self._settings = settings or EngineSettings()

    async def verify(
        self,
        request: VerificationRequest,
        claims: List[Claim],
        sanity: SanityReport,
    ) -> SourceVerificationResult:
        """Verify claims against external sources.

        Args:
            request: Original request, for region and source-type filters
            claims: Extracted claims, in priority order
            sanity: Sanity report of the same content

        Returns:
            Verification result from the highest rung of the ladder reached
        """
        response = await self._gather_evidence(request, claims)
        if response is None:
            logger.warning("⚠️ No usable evidence for any claim, using sanity-derived result")
            return self._sanity_result(claims, sanity)

        try:
            result = self._structured_result(response, sanity)
            logger.info(f"✅ Structured verification: {len(result.sources)} sources, credibility {result.credibility}")
            return result
        except ParseError as e:
            logger.warning(f"⚠️ Provider answer was not structured ({e}), rebuilding from citations")
            return self._citation_result(response, sanity)

    async def _gather_evidence(
        self,
        request: VerificationRequest,
        claims: List[Claim],
    ) -> Optional[EvidenceResponse]:
        if self._provider is None:
            logger.info("🎭 No evidence provider configured")
            return None

        filters = EvidenceFilters(
            region=request.focus_region,
            source_types=request.source_types,
            domains=build_domain_filter(request.focus_region, request.source_types),
        )

        for i, claim in enumerate(claims[: self._settings.claim_quota]):
            logger.info(f"🔍 Verifying claim {i + 1}: {claim.text[:100]}")
            prompt = build_verification_prompt(claim.text, request)
            try:
                response = await asyncio.wait_for(
                    self._provider.verify(prompt, filters),
                    timeout=self._settings.provider_timeout,
                )
            except asyncio.TimeoutError:
                logger.warning(f"⚠️ Evidence provider timed out for claim {i + 1}")
                continue
            except ProviderError as e:
                logger.warning(f"⚠️ Evidence provider failed for claim {i + 1}: {e}")
                continue
            except Exception as e:
                logger.warning(f"⚠️ Unexpected evidence provider error for claim {i + 1}: {e}", exc_info=True)
                continue

            if response.has_usable_citations:
                logger.info(f"📎 Claim {i + 1} returned {len(response.usable_citations)} citations")
                return response
            logger.info(f"📭 Claim {i + 1} returned no usable citations")

        return None

    def _apply_sanity_penalty(self, credibility: int, sanity: SanityReport) -> int:
        if sanity.is_clean:
            return credibility
        return max(0, credibility - self._settings.sanity_credibility_penalty)

    def _structured_result(
        self,
        response: EvidenceResponse,
        sanity: SanityReport,
    ) -> SourceVerificationResult:
        payload = parse_provider_payload(response.raw_text)
        sources = self._aggregator.merge(payload.sources, response.usable_citations)

        credibility = payload.overall_credibility
        if credibility is None:
            credibility = self._settings.default_structured_credibility

        verdicts = [
            ClaimVerdict(
                claim_text=v.claim,
                verdict=v.verification_status,
                confidence=v.confidence if v.confidence is not None else 50,
                supporting_sources=v.sources,
                evidence=v.evidence,
            )
            for v in payload.claims_verified
        ]
        conflicts = [
            ConflictRecord(topic=c.claim, conflicting_statements=c.conflicting_claims, sources=c.sources)
            for c in payload.conflicting_information
        ]

        confidence = payload.confidence
        if confidence is None:
            confidence = 80 if sources else 30

        return SourceVerificationResult(
            credibility=self._apply_sanity_penalty(credibility, sanity),
            verdicts=verdicts,
            sources=sources,
            conflicts=conflicts + sanity_conflicts(sanity),
            summary=payload.summary or f"Verification completed with {len(sources)} sources found",
            confidence=confidence,
            evidence_tier=EvidenceTier.STRUCTURED,
        )

    def _citation_result(
        self,
        response: EvidenceResponse,
        sanity: SanityReport,
    ) -> SourceVerificationResult:
        sources = self._aggregator.from_citations(response.usable_citations)
        has_credible = any(s.credibility_score >= CREDIBLE_SOURCE_SCORE for s in sources)

        return SourceVerificationResult(
            credibility=self._apply_sanity_penalty(self._aggregator.mean_credibility(sources), sanity),
            verdicts=[
                ClaimVerdict(
                    claim_text=GENERAL_CLAIM,
                    verdict=Verdict.UNVERIFIED,
                    confidence=50,
                    supporting_sources=[s.url for s in sources][:3],
                    evidence=response.raw_text[:200],
                )
            ],
            sources=sources,
            conflicts=sanity_conflicts(sanity),
            summary=f"Basic verification completed with {len(sources)} sources",
            confidence=60 if has_credible else 30,
            evidence_tier=EvidenceTier.CITATIONS,
        )

    def _sanity_result(self, claims: List[Claim], sanity: SanityReport) -> SourceVerificationResult:
        if sanity.is_clean:
            credibility = self._settings.clean_fallback_credibility
            verdict = Verdict.UNVERIFIED
            evidence = "No sources available for verification"
            summary = "No sources found to verify this content. Treat with caution."
        else:
            credibility = self._settings.unclean_fallback_credibility
            verdict = Verdict.FALSE
            evidence = "; ".join(sanity.issues)
            summary = f"Content failed basic verification checks: {', '.join(sanity.issues)}"

        return SourceVerificationResult(
            credibility=credibility,
            verdicts=[
                ClaimVerdict(
                    claim_text=claim.text,
                    verdict=verdict,
                    confidence=sanity.confidence,
                    evidence=evidence,
                )
                for claim in claims
            ],
            sources=[],
            conflicts=sanity_conflicts(sanity),
            summary=summary,
            confidence=sanity.confidence,
            evidence_tier=EvidenceTier.SANITY,
        )
