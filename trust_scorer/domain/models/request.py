"""Domain model for verification requests."""

from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from .base import CamelModel


class ContentType(str, Enum):
    """Kind of content submitted for verification."""

    TEXT = "text"
    URL = "url"


class FocusRegion(str, Enum):
    """Region whose sources should be favoured during evidence search."""

    GLOBAL = "global"
    NIGERIA = "nigeria"


class SourceTypeFilter(str, Enum):
    """Source categories a caller may ask the evidence search to include."""

    NEWS = "news"
    GOVERNMENT = "government"
    ACADEMIC = "academic"
    MEDICAL = "medical"


class VerificationRequest(CamelModel):
    """A piece of content to be scored."""

    content: str = Field(..., min_length=1, description="Raw text or a URL")
    content_type: ContentType = Field(default=ContentType.TEXT, description="Whether content is text or a URL")
    focus_region: Optional[FocusRegion] = Field(None, description="Region to favour when searching for evidence")
    source_types: List[SourceTypeFilter] = Field(
        default_factory=list,
        description="Source categories to include in the evidence search",
    )

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content must not be blank")
        return value

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "example": {
                "content": "The unemployment rate rose to 8.2% according to a 2021 report.",
                "contentType": "text",
                "focusRegion": "nigeria",
                "sourceTypes": ["news", "government"],
            }
        }
