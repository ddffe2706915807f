"""OpenAI implementation of the content analysis protocols."""

import json
import logging
from typing import Any, Dict, Optional

from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel, Field

from ...domain.exceptions import ParseError, ProviderError
from ...domain.models.analysis import (
    ContentClassification,
    ContentKind,
    FactCheckClaim,
    FactCheckResult,
    FactCheckVerdict,
    SentimentLabel,
    SentimentResult,
)
from ...domain.services.response_parser import clamp_score

logger = logging.getLogger(__name__)

SENTIMENT_PROMPT = """You are a content moderation assistant. Rate the tone of the text.
Respond in JSON format with:
{
    "score": number 0-100 (100 = calm, respectful and non-toxic; 0 = hostile, inflammatory or toxic),
    "label": "positive/neutral/negative",
    "confidence": number 0-100
}"""

FACT_CHECK_PROMPT = """You are a fact-checking assistant. Extract the key factual claims from the text and judge them.
Respond in JSON format with:
{
    "score": number 0-100 (overall factual accuracy),
    "claims": [
        {
            "text": "the claim",
            "verdict": "TRUE/FALSE/PARTIALLY_TRUE/UNVERIFIED",
            "confidence": number 0-100,
            "sources": ["relevant sources"],
            "explanation": "brief explanation (max 300 chars)"
        }
    ],
    "sources": ["relevant sources"],
    "summary": "one sentence summary",
    "confidence": number 0-100,
    "verified": true/false
}
Do NOT filter claims based on apparent truth value."""

CLASSIFICATION_PROMPT = """Classify the text as factual reporting, opinion, or a mix of both.
Respond in JSON format with:
{
    "type": "factual/opinion/mixed",
    "confidence": number 0-100,
    "language": "ISO 639-1 code"
}"""


class OpenAIAnalyzerConfig(BaseModel):
    """Configuration for the OpenAI analyzer."""

    api_key: str = Field(..., description="OpenAI API key")
    model: str = Field(default="gpt-4o-mini", description="Chat model to use")
    temperature: float = Field(default=0.1, description="Temperature for responses")
    max_tokens: int = Field(default=1000, description="Maximum tokens per response")
    timeout: float = Field(default=20.0, description="API timeout in seconds")
    max_content_chars: int = Field(default=8000, description="Content is truncated to this length")


def _enum_value(enum_cls, value: Any, default):
    try:
        return enum_cls(str(value).strip())
    except ValueError:
        try:
            return enum_cls(str(value).strip().lower())
        except ValueError:
            return default


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


class OpenAIContentAnalyzer:
    """Sentiment, fact-check and classification backed by OpenAI chat models."""

    def __init__(
        self,
        config: Optional[OpenAIAnalyzerConfig] = None,
        client: Optional[AsyncOpenAI] = None,
        provider_name: str = "OpenAI",
    ):
        """Initialize the analyzer.

        Args:
            config: Analyzer configuration
            client: Pre-built OpenAI client, mainly for tests
            provider_name: Name of the provider
        """
        self._config = config or OpenAIAnalyzerConfig(api_key="")
        self._name = provider_name
        self._client = client or AsyncOpenAI(
            api_key=self._config.api_key,
            timeout=self._config.timeout,
        )

    async def _complete_json(self, system_prompt: str, content: str) -> Dict[str, Any]:
        try:
            response = await self._client.chat.completions.create(
                model=self._config.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": f"Text: {content[: self._config.max_content_chars]}"},
                ],
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            raise ProviderError(f"{self._name} request failed: {e}", provider=self._name) from e

        text = response.choices[0].message.content or ""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"{self._name} returned invalid JSON: {text[:200]}") from e
        if not isinstance(data, dict):
            raise ParseError(f"{self._name} returned a non-object JSON value")
        return data

    async def analyze_sentiment(self, content: str) -> SentimentResult:
        """Rate tone and toxicity of the content."""
        data = await self._complete_json(SENTIMENT_PROMPT, content)
        score = clamp_score(data.get("score"))
        if score is None:
            raise ParseError("Sentiment response has no score")
        return SentimentResult(
            score=score,
            label=_enum_value(SentimentLabel, data.get("label"), SentimentLabel.NEUTRAL),
            confidence=clamp_score(data.get("confidence")) or 0,
        )

    async def check_facts(self, content: str) -> FactCheckResult:
        """Fact check the content as a whole."""
        data = await self._complete_json(FACT_CHECK_PROMPT, content)
        score = clamp_score(data.get("score"))
        if score is None:
            raise ParseError("Fact-check response has no score")

        claims = []
        for item in data.get("claims") or []:
            if not isinstance(item, dict) or not item.get("text"):
                continue
            claims.append(
                FactCheckClaim(
                    text=str(item["text"]),
                    verdict=_enum_value(
                        FactCheckVerdict,
                        str(item.get("verdict", "")).upper(),
                        FactCheckVerdict.UNVERIFIED,
                    ),
                    confidence=clamp_score(item.get("confidence")) or 0,
                    sources=[str(s) for s in item.get("sources") or []],
                    explanation=str(item.get("explanation") or "")[:300],
                )
            )

        return FactCheckResult(
            score=score,
            claims=claims,
            sources=[str(s) for s in data.get("sources") or []],
            summary=str(data.get("summary") or ""),
            confidence=clamp_score(data.get("confidence")) or 0,
            verified=_as_bool(data.get("verified"), score >= 70),
        )

    async def classify_content(self, content: str) -> ContentClassification:
        """Classify content as factual, opinion or mixed."""
        data = await self._complete_json(CLASSIFICATION_PROMPT, content)
        return ContentClassification(
            type=_enum_value(ContentKind, data.get("type"), ContentKind.MIXED),
            confidence=clamp_score(data.get("confidence")) or 0,
            language=str(data.get("language") or "en")[:8],
        )

    @property
    def provider_name(self) -> str:
        """Get the name of the analysis provider."""
        return self._name

    @property
    def is_available(self) -> bool:
        """Check if the analyzer has credentials."""
        return bool(self._config.api_key)
