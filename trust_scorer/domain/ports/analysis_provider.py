"""Protocols for the independent content analyses."""

from typing import Protocol

from ..models.analysis import ContentClassification, FactCheckResult, SentimentResult


class SentimentAnalyzer(Protocol):
    """Scores tone and toxicity of content."""

    async def analyze_sentiment(self, content: str) -> SentimentResult:
        """Return a sentiment score where higher means calmer content."""
        ...


class FactCheckProvider(Protocol):
    """Independent whole-content fact check."""

    async def check_facts(self, content: str) -> FactCheckResult:
        """Fact check the content as a whole."""
        ...


class ContentClassifier(Protocol):
    """Factual/opinion classification."""

    async def classify_content(self, content: str) -> ContentClassification:
        """Classify content as factual, opinion or mixed."""
        ...
