"""Tests for the claim extractor."""

from trust_scorer.domain.models.settings import EngineSettings
from trust_scorer.domain.services.claim_extractor import ClaimExtractor, is_factual_sentence


def test_extracts_factual_sentences_in_order():
    """Test that factual sentences are kept with their positions."""
    extractor = ClaimExtractor()
    claims = extractor.extract("The president signed the bill. Wow! The economy grew 3% in 2023.")

    assert [c.text for c in claims] == ["The president signed the bill", "The economy grew 3% in 2023"]
    assert [c.position for c in claims] == [0, 2]


def test_short_fragments_are_dropped():
    """Test that fragments of ten characters or fewer are never claims."""
    claims = ClaimExtractor().extract("It is 5. Prices are up by 20 percent this year.")

    assert [c.text for c in claims] == ["Prices are up by 20 percent this year"]


def test_falls_back_to_content_when_nothing_qualifies():
    """Test that the content itself becomes the only claim."""
    claims = ClaimExtractor().extract("Nigeria experienced heavy snow this week")

    assert len(claims) == 1
    assert claims[0].text == "Nigeria experienced heavy snow this week"


def test_fallback_claim_is_truncated():
    """Test that the fallback claim is cut to the configured length."""
    content = "lovely sunny afternoon walking " * 20
    claims = ClaimExtractor(EngineSettings(fallback_claim_length=50)).extract(content)

    assert len(claims) == 1
    assert len(claims[0].text) == 50


def test_never_returns_empty_list():
    """Test very short content still yields a claim."""
    claims = ClaimExtractor().extract("Hi")

    assert [c.text for c in claims] == ["Hi"]


def test_factual_patterns():
    """Test the factual sentence heuristic."""
    assert is_factual_sentence("According to the report inflation slowed")
    assert is_factual_sentence("The minister resigned")
    assert is_factual_sentence("Lagos has 15 million residents")
    assert not is_factual_sentence("Lovely weather for a walk")
