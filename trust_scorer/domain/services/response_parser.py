"""Two-stage decoding of evidence-provider answers.

Stage one decodes the whole answer as JSON (the strict structured-output
mode). Stage two pulls the outermost ``{...}`` block out of free text. When
both fail a ``ParseError`` is raised and the caller falls back to rebuilding
sources from the citation list alone.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..exceptions import ParseError
from ..models.source import SourceType
from ..models.verification import Verdict

logger = logging.getLogger(__name__)

JSON_OBJECT = re.compile(r"\{[\s\S]*\}")
CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)

PAYLOAD_KEYS = {
    "overallCredibility", "claimsVerified", "sources", "conflictingInformation",
    "overall_credibility", "claims_verified", "conflicting_information",
}

VERDICT_ALIASES = {
    "VERIFIED": Verdict.VERIFIED,
    "TRUE": Verdict.VERIFIED,
    "FALSE": Verdict.FALSE,
    "PARTIALLY_TRUE": Verdict.PARTIALLY_TRUE,
    "PARTIALLY TRUE": Verdict.PARTIALLY_TRUE,
    "MISLEADING": Verdict.PARTIALLY_TRUE,
    "UNVERIFIED": Verdict.UNVERIFIED,
    "UNVERIFIABLE": Verdict.UNVERIFIED,
    "OPINION": Verdict.OPINION,
}


def clamp_score(value: Any) -> Optional[int]:
    """Coerce a provider number into an integer in [0, 100]."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # Some providers answer on a 0-1 scale.
    if 0 < number <= 1 and not float(number).is_integer():
        number *= 100
    return int(round(min(100.0, max(0.0, number))))


def text_or_empty(value: Any) -> str:
    """Render a provider text field, treating null as empty."""
    return "" if value is None else str(value)


def url_list(value: Any) -> List[str]:
    """Reduce a provider list of URLs or source objects to plain strings."""
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    urls = []
    for item in value:
        if isinstance(item, dict):
            item = item.get("url")
        if item:
            urls.append(str(item))
    return urls


class _PayloadModel(BaseModel):
    class Config:
        """Pydantic model configuration."""
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"


class PayloadVerdict(_PayloadModel):
    """Verdict as written by the provider."""

    claim: str = ""
    verification_status: Verdict = Verdict.UNVERIFIED
    confidence: Optional[int] = None
    evidence: str = ""
    sources: List[str] = Field(default_factory=list)

    @field_validator("verification_status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Verdict:
        key = str(value or "").strip().upper().replace("-", "_")
        return VERDICT_ALIASES.get(key, VERDICT_ALIASES.get(key.replace("_", " "), Verdict.UNVERIFIED))

    @field_validator("claim", "evidence", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return text_or_empty(value)

    @field_validator("sources", mode="before")
    @classmethod
    def _urls(cls, value: Any) -> List[str]:
        return url_list(value)

    @field_validator("confidence", mode="before")
    @classmethod
    def _clamp_confidence(cls, value: Any) -> Optional[int]:
        return clamp_score(value)


class PayloadSource(_PayloadModel):
    """Source as written by the provider; gaps are filled later."""

    url: str
    title: Optional[str] = None
    domain: Optional[str] = None
    credibility_score: Optional[int] = None
    publication_date: Optional[str] = None
    relevant_quote: str = ""
    source_type: Optional[SourceType] = None
    is_regional_source: Optional[bool] = None

    @field_validator("credibility_score", mode="before")
    @classmethod
    def _clamp_credibility(cls, value: Any) -> Optional[int]:
        return clamp_score(value)

    @field_validator("source_type", mode="before")
    @classmethod
    def _known_type(cls, value: Any) -> Optional[SourceType]:
        try:
            return SourceType(str(value).lower()) if value else None
        except ValueError:
            return None

    @field_validator("relevant_quote", mode="before")
    @classmethod
    def _quote(cls, value: Any) -> str:
        return text_or_empty(value)

    @field_validator("publication_date", mode="before")
    @classmethod
    def _date_as_text(cls, value: Any) -> Optional[str]:
        return str(value) if value else None


class PayloadConflict(_PayloadModel):
    """Conflict as written by the provider."""

    claim: str = ""
    conflicting_claims: List[str] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)

    @field_validator("claim", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return text_or_empty(value)

    @field_validator("conflicting_claims", "sources", mode="before")
    @classmethod
    def _texts(cls, value: Any) -> List[str]:
        return url_list(value)


class ProviderPayload(_PayloadModel):
    """Structured verification answer requested from the provider."""

    overall_credibility: Optional[int] = None
    claims_verified: List[PayloadVerdict] = Field(default_factory=list)
    sources: List[PayloadSource] = Field(default_factory=list)
    conflicting_information: List[PayloadConflict] = Field(default_factory=list)
    summary: Optional[str] = None
    confidence: Optional[int] = None

    @field_validator("overall_credibility", "confidence", mode="before")
    @classmethod
    def _clamp(cls, value: Any) -> Optional[int]:
        return clamp_score(value)

    @field_validator("sources", mode="before")
    @classmethod
    def _drop_urlless_sources(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [s for s in value if isinstance(s, dict) and s.get("url")]
        return value

    @field_validator("claims_verified", "conflicting_information", mode="before")
    @classmethod
    def _drop_non_objects(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if isinstance(item, dict)]
        return value


def _decode(text: str) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return data if isinstance(data, dict) else None


def parse_provider_payload(raw_text: str) -> ProviderPayload:
    """Decode a provider answer into a structured payload.

    Args:
        raw_text: Provider answer text

    Returns:
        Parsed payload

    Raises:
        ParseError: If neither decoding stage yields a verification payload
    """
    text = CODE_FENCE.sub("", (raw_text or "").strip())

    data = _decode(text)
    if data is None:
        match = JSON_OBJECT.search(text)
        if not match:
            raise ParseError("No JSON object found in provider response")
        data = _decode(match.group(0))
        if data is None:
            raise ParseError("Embedded JSON object could not be decoded")
        logger.debug("🔧 Recovered JSON payload embedded in free text")

    if not PAYLOAD_KEYS.intersection(data):
        raise ParseError("JSON object does not look like a verification payload")

    try:
        return ProviderPayload.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Provider payload failed validation: {e}") from e
