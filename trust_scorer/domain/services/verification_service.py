"""Service orchestrating a full verification request."""

import asyncio
import logging
import time
from typing import Awaitable, List, Optional, TypeVar

from ..models.analysis import ContentClassification, ContentKind, FactCheckResult, SentimentResult
from ..models.request import ContentType, VerificationRequest
from ..models.result import TrustScoreInputs, VerificationResult, make_preview
from ..models.settings import EngineSettings
from ..ports.analysis_provider import ContentClassifier, FactCheckProvider, SentimentAnalyzer
from ..ports.content_extractor import ContentExtractor, extraction_placeholder
from ..ports.evidence_provider import EvidenceProvider
from ..ports.history_store import HistoryStore
from .claim_extractor import ClaimExtractor
from .domain_credibility import assess_content_origin, find_urls
from .sanity_checker import SanityChecker
from .source_verifier import SourceVerifier
from .trust_score_calculator import TrustScoreCalculator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class VerificationService:
    """Turns a verification request into a scored, write-once result.

    The service never raises: provider failures degrade the affected stage
    and an unexpected failure produces a zero-score result with an
    explanatory summary.
    """

    def __init__(
        self,
        evidence_provider: Optional[EvidenceProvider] = None,
        sentiment_analyzer: Optional[SentimentAnalyzer] = None,
        fact_check_provider: Optional[FactCheckProvider] = None,
        content_classifier: Optional[ContentClassifier] = None,
        content_extractor: Optional[ContentExtractor] = None,
        history_store: Optional[HistoryStore] = None,
        settings: Optional[EngineSettings] = None,
        claim_extractor: Optional[ClaimExtractor] = None,
        sanity_checker: Optional[SanityChecker] = None,
        source_verifier: Optional[SourceVerifier] = None,
        calculator: Optional[TrustScoreCalculator] = None,
    ):
        """Initialize the service.

        Args:
            evidence_provider: Web-search evidence provider
            sentiment_analyzer: Sentiment/toxicity analyzer
            fact_check_provider: Independent fact-check provider
            content_classifier: Factual/opinion classifier
            content_extractor: URL content extractor
            history_store: Store receiving every result
            settings: Engine constants
        """
        self._settings = settings or EngineSettings()
        self._sentiment = sentiment_analyzer
        self._fact_check = fact_check_provider
        self._classifier = content_classifier
        self._extractor = content_extractor
        self._history = history_store
        self._claims = claim_extractor or ClaimExtractor(self._settings)
        self._sanity = sanity_checker or SanityChecker(self._settings)
        self._verifier = source_verifier or SourceVerifier(evidence_provider, settings=self._settings)
        self._calculator = calculator or TrustScoreCalculator(self._settings)
        logger.info("🔧 VerificationService initialized")

    async def verify(self, request: VerificationRequest) -> VerificationResult:
        """Verify content and return its trust score.

        Args:
            request: Content to verify

        Returns:
            Verification result, also appended to the history store
        """
        start = time.perf_counter()
        logger.info(f"🔍 Starting verification for: {request.content[:100]}...")

        try:
            result = await self._run(request, start)
        except Exception as e:
            logger.error(f"❌ Verification pipeline failed: {e}", exc_info=True)
            result = VerificationResult.degenerate(
                content=request.content,
                content_type=request.content_type,
                reason=str(e) or type(e).__name__,
                processing_time=self._elapsed_ms(start),
            )

        await self._store(result)
        return result

    async def _run(self, request: VerificationRequest, start: float) -> VerificationResult:
        text = await self._content_text(request)

        claims = self._claims.extract(text)
        sanity = self._sanity.check(text)
        logger.info(f"📋 {len(claims)} claims extracted, sanity clean: {sanity.is_clean}")

        source_verification, sentiment, fact_check, classification = await asyncio.gather(
            self._verifier.verify(request, claims, sanity),
            self._analyze(
                "sentiment",
                self._sentiment.analyze_sentiment(text) if self._sentiment else None,
                SentimentResult.insufficient_data(),
            ),
            self._analyze(
                "fact check",
                self._fact_check.check_facts(text) if self._fact_check else None,
                FactCheckResult.insufficient_data(),
            ),
            self._analyze(
                "classification",
                self._classifier.classify_content(text) if self._classifier else None,
                ContentClassification.insufficient_data(),
            ),
        )

        if classification.confidence == 0:
            classification = self._fallback_classification(text)

        source_credibility = assess_content_origin(self._origin_urls(request, text))

        trust = self._calculator.calculate(
            TrustScoreInputs(
                sanity=sanity,
                source_verification=source_verification,
                sentiment=sentiment,
                fact_check=fact_check,
                classification=classification,
                source_credibility=source_credibility,
            )
        )

        result = VerificationResult(
            trust_score=trust.score,
            sanity_check=sanity,
            source_verification=source_verification,
            sentiment_analysis=sentiment,
            fact_check=fact_check,
            source_credibility=source_credibility,
            content_classification=classification,
            processing_time=self._elapsed_ms(start),
            content_preview=make_preview(request.content),
            content_type=request.content_type,
        )
        logger.info(
            f"✅ Verification complete: trust={result.trust_score} ({trust.policy.value}), "
            f"sources={len(source_verification.sources)}, time={result.processing_time}ms"
        )
        return result

    async def _content_text(self, request: VerificationRequest) -> str:
        if request.content_type != ContentType.URL:
            return request.content

        url = request.content.strip()
        if self._extractor is None:
            logger.warning("⚠️ No content extractor configured, using placeholder text")
            return extraction_placeholder(url)

        try:
            text = await asyncio.wait_for(
                self._extractor.extract(url),
                timeout=self._settings.extraction_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"⚠️ Content extraction timed out for {url}")
            return extraction_placeholder(url)
        except Exception as e:
            logger.warning(f"⚠️ Content extraction failed for {url}: {e}")
            return extraction_placeholder(url)

        return text if text and text.strip() else extraction_placeholder(url)

    def _fallback_classification(self, text: str) -> ContentClassification:
        """Derive the content kind from the claim heuristic; confidence stays 0."""
        share = self._claims.factual_share(text)
        kind = ContentKind.FACTUAL if share >= 0.5 else ContentKind.MIXED
        logger.info(f"🎭 Classification unavailable, heuristic says {kind.value} (factual share {share:.2f})")
        return ContentClassification(type=kind, confidence=0)

    async def _analyze(self, name: str, call: Optional[Awaitable[T]], default: T) -> T:
        if call is None:
            logger.info(f"🎭 No {name} provider configured, using insufficient-data default")
            return default
        try:
            return await asyncio.wait_for(call, timeout=self._settings.analysis_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"⚠️ {name.capitalize()} analysis timed out, using insufficient-data default")
        except Exception as e:
            logger.warning(f"⚠️ {name.capitalize()} analysis failed: {e}, using insufficient-data default")
        return default

    async def _store(self, result: VerificationResult) -> None:
        if self._history is None:
            return
        try:
            await self._history.append(result)
        except Exception as e:
            logger.error(f"❌ Failed to store verification result {result.id}: {e}")

    @staticmethod
    def _origin_urls(request: VerificationRequest, text: str) -> List[str]:
        urls = []
        if request.content_type == ContentType.URL:
            urls.append(request.content.strip())
        urls.extend(find_urls(request.content if request.content_type == ContentType.TEXT else text))
        return urls

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int((time.perf_counter() - start) * 1000)
