"""Tests for domain credibility assessment."""

import pytest

from trust_scorer.domain.models.request import FocusRegion, SourceTypeFilter
from trust_scorer.domain.models.source import SourceType
from trust_scorer.domain.services.domain_credibility import (
    DEFAULT_SCORE,
    assess_content_origin,
    assess_domain,
    build_domain_filter,
    find_urls,
    normalize_domain,
)


@pytest.mark.parametrize(
    "url, score, source_type, matched_by",
    [
        ("https://www.reuters.com/world/story", 95, SourceType.NEWS, "table"),
        ("https://news.bbc.co.uk/item", 95, SourceType.NEWS, "table"),
        ("https://ncdc.gov.ng/diseases", 90, SourceType.GOVERNMENT, "table"),
        ("https://energy.gov/report", 85, SourceType.GOVERNMENT, "suffix"),
        ("https://web.mit.edu/paper", 80, SourceType.ACADEMIC, "suffix"),
        ("https://www.ox.ac.uk/research", 80, SourceType.ACADEMIC, "suffix"),
        ("https://lagosdailynews.com/story", 60, SourceType.NEWS, "keyword"),
        ("https://example.com/page", DEFAULT_SCORE, SourceType.UNKNOWN, "default"),
        ("twitter.com", 30, SourceType.SOCIAL, "table"),
    ],
)
def test_assess_domain(url, score, source_type, matched_by):
    """Test the resolution order of the authority table."""
    assessment = assess_domain(url)

    assert assessment.score == score
    assert assessment.source_type == source_type
    assert assessment.matched_by == matched_by


def test_regional_sources():
    """Test that Nigerian outlets and .ng domains are regional."""
    assert assess_domain("https://punchng.com/story").is_regional
    assert assess_domain("https://health.gov.ng").is_regional
    assert not assess_domain("https://reuters.com").is_regional


def test_assessment_is_stable():
    """Test that the same domain always yields the same assessment."""
    assert assess_domain("https://www.vanguardngr.com/a") == assess_domain("vanguardngr.com")


def test_normalize_domain():
    """Test host normalization."""
    assert normalize_domain("HTTPS://WWW.Example.COM/path?q=1") == "example.com"
    assert normalize_domain("punchng.com") == "punchng.com"
    assert normalize_domain("   ") == ""
    assert normalize_domain("http://[draft") == ""
    assert normalize_domain("https://[broken/path") == ""


def test_find_urls():
    """Test URL discovery in free text."""
    text = "See https://reuters.com/a, and (https://punchng.com/b). Again: https://reuters.com/a."

    assert find_urls(text) == ["https://reuters.com/a", "https://punchng.com/b"]


def test_build_domain_filter():
    """Test region and source-type allow lists."""
    default = build_domain_filter()
    nigeria = build_domain_filter(FocusRegion.NIGERIA, [SourceTypeFilter.GOVERNMENT])
    medical = build_domain_filter(source_types=[SourceTypeFilter.MEDICAL])

    assert "reuters.com" in default
    assert nigeria[0] == "punchng.com"
    assert "who.int" in nigeria
    assert "pubmed.ncbi.nlm.nih.gov" in medical


def test_content_origin_without_domains():
    """Test the unknown default when no domain is present."""
    result = assess_content_origin([])

    assert result.score == DEFAULT_SCORE
    assert result.domains == []


def test_content_origin_averages_distinct_domains():
    """Test that distinct domains are averaged and duplicates ignored."""
    result = assess_content_origin([
        "https://www.reuters.com/a",
        "https://reuters.com/b",
        "https://medium.com/@someone/post",
    ])

    assert [d.domain for d in result.domains] == ["reuters.com", "medium.com"]
    assert result.score == 70
    assert result.domains[0].type == SourceType.NEWS
