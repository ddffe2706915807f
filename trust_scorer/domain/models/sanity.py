"""Domain models for the lexical sanity check."""

from enum import Enum
from typing import List

from pydantic import Field

from .base import CamelModel


class SanityCategory(str, Enum):
    """Kinds of self-evidently impossible statements the checker detects."""

    GEOGRAPHIC_IMPOSSIBILITY = "geographic_impossibility"
    TIMELINE_ERROR = "timeline_error"
    SCIENTIFICALLY_FALSE = "scientifically_false"


class SanityFinding(CamelModel):
    """One failed sanity check."""

    issue: str = Field(..., description="Human readable description of the problem")
    category: SanityCategory
    severity: int = Field(default=20, ge=0, le=100, description="Confidence points this finding costs")


class SanityReport(CamelModel):
    """Outcome of running the whole sanity battery over one piece of content."""

    is_clean: bool = True
    issues: List[str] = Field(default_factory=list)
    confidence: int = Field(default=90, ge=0, le=100)

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "example": {
                "isClean": False,
                "issues": ["Geographic impossibility: Nigeria does not experience snow"],
                "confidence": 70,
            }
        }
