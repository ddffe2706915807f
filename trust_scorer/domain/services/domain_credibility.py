"""Domain credibility assessment from a static authority table.

Resolution order: exact or sub-domain match against the authority table,
then government/academic suffixes, then news-like keywords, then the
unknown default. Results are memoised; the same domain always yields the
same assessment.
"""

import re
from functools import lru_cache
from typing import Dict, Iterable, List, NamedTuple, Optional
from urllib.parse import urlparse

from ..models.request import FocusRegion, SourceTypeFilter
from ..models.source import (
    DomainAssessment,
    DomainCredibility,
    SourceCredibilityResult,
    SourceType,
)

DEFAULT_SCORE = 40
KEYWORD_NEWS_SCORE = 60


class Authority(NamedTuple):
    score: int
    source_type: SourceType
    regional: bool = False


DOMAIN_AUTHORITY_TABLE: Dict[str, Authority] = {
    # Wire services and international outlets
    "reuters.com": Authority(95, SourceType.NEWS),
    "apnews.com": Authority(94, SourceType.NEWS),
    "ap.org": Authority(94, SourceType.NEWS),
    "afp.com": Authority(93, SourceType.NEWS),
    "bbc.com": Authority(95, SourceType.NEWS),
    "bbc.co.uk": Authority(95, SourceType.NEWS),
    "npr.org": Authority(88, SourceType.NEWS),
    "nytimes.com": Authority(90, SourceType.NEWS),
    "washingtonpost.com": Authority(88, SourceType.NEWS),
    "theguardian.com": Authority(88, SourceType.NEWS),
    "aljazeera.com": Authority(85, SourceType.NEWS),
    "cnn.com": Authority(82, SourceType.NEWS),
    # Nigerian outlets
    "punchng.com": Authority(85, SourceType.NEWS, True),
    "premiumtimesng.com": Authority(85, SourceType.NEWS, True),
    "thenationonlineng.net": Authority(82, SourceType.NEWS, True),
    "channelstv.com": Authority(82, SourceType.NEWS, True),
    "thisdaylive.com": Authority(80, SourceType.NEWS, True),
    "thisday.ng": Authority(80, SourceType.NEWS, True),
    "vanguardngr.com": Authority(80, SourceType.NEWS, True),
    "dailytrust.com": Authority(80, SourceType.NEWS, True),
    "leadership.ng": Authority(75, SourceType.NEWS, True),
    "saharareporters.com": Authority(72, SourceType.NEWS, True),
    # Government and intergovernmental bodies
    "gov.ng": Authority(90, SourceType.GOVERNMENT, True),
    "who.int": Authority(95, SourceType.GOVERNMENT),
    "un.org": Authority(90, SourceType.GOVERNMENT),
    "worldbank.org": Authority(92, SourceType.GOVERNMENT),
    "imf.org": Authority(92, SourceType.GOVERNMENT),
    "cdc.gov": Authority(95, SourceType.GOVERNMENT),
    "fda.gov": Authority(94, SourceType.GOVERNMENT),
    "ncdc.gov.ng": Authority(90, SourceType.GOVERNMENT, True),
    # Academic
    "nature.com": Authority(95, SourceType.ACADEMIC),
    "science.org": Authority(94, SourceType.ACADEMIC),
    "pubmed.ncbi.nlm.nih.gov": Authority(93, SourceType.ACADEMIC),
    "thelancet.com": Authority(93, SourceType.ACADEMIC),
    "jstor.org": Authority(90, SourceType.ACADEMIC),
    "scholar.google.com": Authority(85, SourceType.ACADEMIC),
    # Social media
    "facebook.com": Authority(30, SourceType.SOCIAL),
    "twitter.com": Authority(30, SourceType.SOCIAL),
    "x.com": Authority(30, SourceType.SOCIAL),
    "instagram.com": Authority(25, SourceType.SOCIAL),
    "tiktok.com": Authority(20, SourceType.SOCIAL),
    "youtube.com": Authority(35, SourceType.SOCIAL),
    "reddit.com": Authority(35, SourceType.SOCIAL),
    # Blog platforms
    "medium.com": Authority(45, SourceType.BLOG),
    "substack.com": Authority(45, SourceType.BLOG),
    "wordpress.com": Authority(30, SourceType.BLOG),
    "blogspot.com": Authority(30, SourceType.BLOG),
}

SUFFIX_RULES = [
    (re.compile(r"\.gov(\.[a-z]{2})?$"), Authority(85, SourceType.GOVERNMENT)),
    (re.compile(r"\.mil$"), Authority(85, SourceType.GOVERNMENT)),
    (re.compile(r"\.int$"), Authority(80, SourceType.GOVERNMENT)),
    (re.compile(r"\.edu(\.[a-z]{2})?$"), Authority(80, SourceType.ACADEMIC)),
    (re.compile(r"\.ac\.[a-z]{2}$"), Authority(80, SourceType.ACADEMIC)),
]

NEWS_KEYWORDS = [
    "news", "times", "post", "guardian", "herald", "tribune",
    "gazette", "daily", "journal", "chronicle",
]

REGIONAL_SUFFIXES = (".ng",)

# Search allow lists used to narrow the evidence provider's web search.
BASE_NEWS_DOMAINS = [
    "bbc.com", "reuters.com", "ap.org", "cnn.com", "theguardian.com",
    "nytimes.com", "washingtonpost.com", "npr.org",
]
NIGERIAN_DOMAINS = [
    "punchng.com", "thenationonlineng.net", "premiumtimesng.com",
    "thisday.ng", "vanguardngr.com", "dailytrust.com", "channelstv.com",
    "saharareporters.com", "leadership.ng",
]
GOVERNMENT_DOMAINS = ["gov.ng", "who.int", "un.org", "worldbank.org", "imf.org", "cdc.gov", "fda.gov"]
ACADEMIC_DOMAINS = ["scholar.google.com", "pubmed.ncbi.nlm.nih.gov", "nature.com", "science.org", "jstor.org"]

URL_PATTERN = re.compile(r"https?://[^\s<>\"')\]]+", re.IGNORECASE)


def normalize_domain(url_or_domain: str) -> str:
    """Reduce a URL or bare domain to a lower-case host without www.

    Returns an empty string for values that do not parse as a URL.
    """
    value = url_or_domain.strip().lower()
    if not value:
        return ""
    if "://" not in value:
        value = "http://" + value
    try:
        host = urlparse(value).hostname or ""
    except ValueError:
        return ""
    if host.startswith("www."):
        host = host[4:]
    return host.rstrip(".")


def _table_lookup(host: str) -> Optional[Authority]:
    # Longest key first so "ncdc.gov.ng" wins over "gov.ng".
    for key in sorted(DOMAIN_AUTHORITY_TABLE, key=len, reverse=True):
        if host == key or host.endswith("." + key):
            return DOMAIN_AUTHORITY_TABLE[key]
    return None


@lru_cache(maxsize=4096)
def _assess_host(host: str) -> DomainAssessment:
    regional = host.endswith(REGIONAL_SUFFIXES)

    authority = _table_lookup(host)
    if authority is not None:
        return DomainAssessment(
            domain=host,
            score=authority.score,
            source_type=authority.source_type,
            is_regional=authority.regional or regional,
            matched_by="table",
        )

    for pattern, rule in SUFFIX_RULES:
        if pattern.search(host):
            return DomainAssessment(
                domain=host,
                score=rule.score,
                source_type=rule.source_type,
                is_regional=regional,
                matched_by="suffix",
            )

    if any(keyword in host for keyword in NEWS_KEYWORDS):
        return DomainAssessment(
            domain=host,
            score=KEYWORD_NEWS_SCORE,
            source_type=SourceType.NEWS,
            is_regional=regional,
            matched_by="keyword",
        )

    return DomainAssessment(
        domain=host,
        score=DEFAULT_SCORE,
        source_type=SourceType.UNKNOWN,
        is_regional=regional,
        matched_by="default",
    )


def assess_domain(url_or_domain: str) -> DomainAssessment:
    """Assess the credibility of a URL or bare domain.

    Args:
        url_or_domain: Full URL or host name

    Returns:
        Score, source type and regional flag for the domain
    """
    return _assess_host(normalize_domain(url_or_domain))


def find_urls(text: str) -> List[str]:
    """Find http(s) URLs mentioned in free text, in order, without duplicates."""
    seen = []
    for match in URL_PATTERN.findall(text):
        url = match.rstrip(".,;:!?")
        if url not in seen:
            seen.append(url)
    return seen


def build_domain_filter(
    region: Optional[FocusRegion] = None,
    source_types: Iterable[SourceTypeFilter] = (),
) -> List[str]:
    """Build the search-domain allow list for the evidence provider."""
    source_types = set(source_types)
    domains = list(BASE_NEWS_DOMAINS)
    if region == FocusRegion.NIGERIA:
        domains = NIGERIAN_DOMAINS + domains
    if SourceTypeFilter.GOVERNMENT in source_types:
        domains.extend(GOVERNMENT_DOMAINS)
    if SourceTypeFilter.ACADEMIC in source_types or SourceTypeFilter.MEDICAL in source_types:
        domains.extend(ACADEMIC_DOMAINS)
    return domains


def assess_content_origin(urls: Iterable[str]) -> SourceCredibilityResult:
    """Assess the credibility of the domains content came from.

    Args:
        urls: URL the content was fetched from and URLs cited in it

    Returns:
        Mean credibility of the distinct domains, or the unknown default
        when there are none
    """
    domains: List[DomainCredibility] = []
    seen = set()
    for url in urls:
        assessment = assess_domain(url)
        if not assessment.domain or assessment.domain in seen:
            continue
        seen.add(assessment.domain)
        domains.append(
            DomainCredibility(
                domain=assessment.domain,
                credibility=assessment.score,
                type=assessment.source_type,
            )
        )

    if not domains:
        return SourceCredibilityResult(
            score=DEFAULT_SCORE,
            domains=[],
            summary="No source domain identified for this content",
        )

    score = round(sum(d.credibility for d in domains) / len(domains))
    names = ", ".join(d.domain for d in domains)
    return SourceCredibilityResult(
        score=score,
        domains=domains,
        summary=f"Assessed {len(domains)} domain(s): {names}",
    )
