"""Tests for the lexicon analyzer."""

import pytest

from trust_scorer.domain.models.analysis import ContentKind, FactCheckResult, SentimentLabel
from trust_scorer.infrastructure.analysis.lexicon_analyzer import LexiconContentAnalyzer


@pytest.fixture
def analyzer() -> LexiconContentAnalyzer:
    return LexiconContentAnalyzer()


@pytest.mark.asyncio
async def test_neutral_sentiment(analyzer: LexiconContentAnalyzer):
    """Test that plain text is neutral with no confidence."""
    result = await analyzer.analyze_sentiment("The meeting starts at noon.")

    assert result.score == 50
    assert result.label == SentimentLabel.NEUTRAL
    assert result.confidence == 0


@pytest.mark.asyncio
async def test_toxic_sentiment(analyzer: LexiconContentAnalyzer):
    """Test that insults push the score down."""
    result = await analyzer.analyze_sentiment("These idiots are liars and the plan is a disaster.")

    assert result.score == 12
    assert result.label == SentimentLabel.NEGATIVE
    assert result.confidence == 45


@pytest.mark.asyncio
async def test_positive_sentiment(analyzer: LexiconContentAnalyzer):
    """Test that positive words push the score up."""
    result = await analyzer.analyze_sentiment("Great progress and growth, a real success.")

    assert result.score == 82
    assert result.label == SentimentLabel.POSITIVE


@pytest.mark.asyncio
async def test_fact_check_is_insufficient_data(analyzer: LexiconContentAnalyzer):
    """Test that word lists never judge truth."""
    assert await analyzer.check_facts("The earth orbits the sun.") == FactCheckResult.insufficient_data()


@pytest.mark.asyncio
async def test_classify_factual(analyzer: LexiconContentAnalyzer):
    """Test factual classification."""
    result = await analyzer.classify_content("The unemployment rate rose to 8.2% according to a 2021 report")

    assert result.type == ContentKind.FACTUAL
    assert result.confidence == 70


@pytest.mark.asyncio
async def test_classify_opinion(analyzer: LexiconContentAnalyzer):
    """Test opinion classification."""
    result = await analyzer.classify_content("I think this plan looks terrible. Honestly, what a shocking idea!")

    assert result.type == ContentKind.OPINION


@pytest.mark.asyncio
async def test_classify_mixed(analyzer: LexiconContentAnalyzer):
    """Test that a single opinion marker yields mixed."""
    result = await analyzer.classify_content("The minister resigned on Monday. I believe that was right.")

    assert result.type == ContentKind.MIXED
    assert result.confidence == 40
