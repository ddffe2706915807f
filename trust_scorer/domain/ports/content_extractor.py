"""Protocol for URL content extraction."""

from typing import Protocol


def extraction_placeholder(url: str) -> str:
    """Placeholder text used when a URL could not be extracted."""
    return f"Content from {url} could not be extracted"


class ContentExtractor(Protocol):
    """Turns a URL into plain text, best effort.

    Implementations never raise; on failure they return
    :func:`extraction_placeholder` so downstream stages have input.
    """

    async def extract(self, url: str) -> str:
        """Fetch ``url`` and return its readable text."""
        ...
