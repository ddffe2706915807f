"""Shared pydantic base for domain models."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable model serialized with camelCase field names.

    Attributes are snake_case in Python; JSON uses the camelCase alias.
    Either spelling is accepted on input.
    """

    class Config:
        """Pydantic model configuration."""
        alias_generator = to_camel
        populate_by_name = True
        frozen = True  # Immutable model
