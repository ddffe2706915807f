"""Web page implementation of the content extractor protocol."""

import logging
import re
from typing import Optional

import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel, Field
from readability import Document

from ...domain.exceptions import ExtractionError
from ...domain.ports.content_extractor import extraction_placeholder

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s+")


class WebExtractorConfig(BaseModel):
    """Configuration for the web content extractor."""

    user_agent: str = Field(default="TrustScorer/1.0", description="User agent for page requests")
    timeout: float = Field(default=15.0, description="Request timeout in seconds")
    max_chars: int = Field(default=20000, description="Extracted text is truncated to this length")


def html_to_text(html: str) -> str:
    """Reduce an HTML page to its readable main text."""
    summary_html = Document(html).summary()
    text = BeautifulSoup(summary_html, "html.parser").get_text(separator=" ")
    text = WHITESPACE.sub(" ", text).strip()
    if text:
        return text
    # Readability found no article body; fall back to the whole page.
    return WHITESPACE.sub(" ", BeautifulSoup(html, "html.parser").get_text(separator=" ")).strip()


class WebContentExtractor:
    """Fetches a page over HTTP and keeps its readable text."""

    def __init__(
        self,
        config: Optional[WebExtractorConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the extractor."""
        self._config = config or WebExtractorConfig()
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout,
                follow_redirects=True,
                headers={"User-Agent": self._config.user_agent},
            )
        return self._client

    async def fetch_text(self, url: str) -> str:
        """Fetch and clean a page.

        Raises:
            ExtractionError: If the page cannot be fetched or has no text
        """
        try:
            response = await self._get_client().get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise ExtractionError(f"Could not fetch {url}: {e}", url=url) from e

        content_type = response.headers.get("content-type", "")
        if "html" in content_type:
            text = html_to_text(response.text)
        elif content_type.startswith("text/"):
            text = WHITESPACE.sub(" ", response.text).strip()
        else:
            raise ExtractionError(f"Unsupported content type {content_type!r} at {url}", url=url)

        if not text:
            raise ExtractionError(f"No readable text at {url}", url=url)
        return text[: self._config.max_chars]

    async def extract(self, url: str) -> str:
        """Return the readable text of ``url``, or a placeholder on failure."""
        try:
            text = await self.fetch_text(url)
            logger.info(f"📄 Extracted {len(text)} chars from {url}")
            return text
        except ExtractionError as e:
            logger.warning(f"⚠️ Content extraction failed: {e}")
            return extraction_placeholder(url)

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
