"""Error taxonomy for the verification engine.

These errors are raised by adapters and internal stages and are always
caught at the component boundary that produced them. They never escape
``VerificationService.verify``.
"""

from typing import Optional


class TrustScorerError(Exception):
    """Base class for all engine errors."""


class ProviderError(TrustScorerError):
    """An evidence, search or classification provider failed.

    Covers unreachable hosts, non-2xx responses, quota errors and timeouts.
    """

    def __init__(self, message: str, provider: str = "unknown", status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class ParseError(TrustScorerError):
    """A provider response was not in the expected structured form."""


class ExtractionError(TrustScorerError):
    """Content behind a URL could not be fetched or cleaned."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url
