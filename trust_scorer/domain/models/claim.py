"""Domain model for extracted claims."""

from pydantic import Field

from .base import CamelModel


class Claim(CamelModel):
    """A candidate factual statement extracted from the content."""

    text: str = Field(..., description="The statement text to be verified")
    position: int = Field(default=0, ge=0, description="Index of the sentence in the content")
