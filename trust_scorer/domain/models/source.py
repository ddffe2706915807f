"""Domain models for sources and domain credibility."""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class SourceType(str, Enum):
    """Category of a source domain."""

    NEWS = "news"
    GOVERNMENT = "government"
    ACADEMIC = "academic"
    SOCIAL = "social"
    BLOG = "blog"
    UNKNOWN = "unknown"


class DomainAssessment(CamelModel):
    """Credibility of a single domain as judged by the authority table."""

    domain: str
    score: int = Field(..., ge=0, le=100)
    source_type: SourceType
    is_regional: bool = False
    matched_by: str = Field(default="default", description="table, suffix, keyword or default")


class SourceRecord(CamelModel):
    """A cited source, unique by URL."""

    url: str = Field(..., description="URL of the source, used as the unique key")
    title: str = Field(default="Source", description="Title of the page")
    domain: str = Field(default="", description="Host name without www.")
    credibility_score: int = Field(..., ge=0, le=100)
    source_type: SourceType = SourceType.UNKNOWN
    is_regional_source: bool = False
    relevant_quote: str = ""
    publication_date: Optional[str] = None
    access_date: date = Field(default_factory=date.today)


class DomainCredibility(CamelModel):
    """Credibility entry for one of the content's own domains."""

    domain: str
    credibility: int = Field(..., ge=0, le=100)
    type: SourceType


class SourceCredibilityResult(CamelModel):
    """Credibility of where the content itself came from."""

    score: int = Field(..., ge=0, le=100)
    domains: List[DomainCredibility] = Field(default_factory=list)
    summary: str = ""
