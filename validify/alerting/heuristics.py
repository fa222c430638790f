"""
Link and keyword heuristics for message scanning.

The checks are plain substring/suffix tests against the configured sets.
The allowlist takes precedence: an allowlisted domain is never flagged,
even if it also contains a suspicious pattern.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List
from urllib.parse import urlsplit

from ..core.config import AlertConfig

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"https?://\S+", re.IGNORECASE)

SUSPICIOUS_DOMAIN_REASON = "Known shortener or risky domain pattern"


def extract_urls(text: str) -> List[str]:
    """Return every http(s) URL in text, in order of appearance."""
    if not text:
        return []
    return URL_PATTERN.findall(text)


def domain_of(url: str) -> str:
    """
    Extract the lower-cased hostname from a URL.

    Backslashes count as path separators, the way browsers read http(s)
    URLs, so `https://a.test\\@b.test` resolves to `a.test`.

    Returns an empty string when the URL cannot be parsed or has no host;
    callers skip such URLs.
    """
    try:
        hostname = urlsplit(url.replace("\\", "/")).hostname
    except ValueError:
        return ""
    return hostname or ""


def is_allowlisted(domain: str, suffixes: Iterable[str]) -> bool:
    """True if domain ends with any allowlisted suffix."""
    return any(domain.endswith(suffix) for suffix in suffixes)


def is_suspicious_domain(domain: str, patterns: Iterable[str]) -> bool:
    """True if domain contains any suspicious pattern."""
    return any(pattern in domain for pattern in patterns)


def contains_suspicious_keyword(text: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring test of text against each keyword."""
    lowered = text.lower()
    return any(keyword.lower() in lowered for keyword in keywords)


@dataclass(frozen=True)
class SuspiciousHit:
    """A flagged URL and the reason it was flagged."""
    url: str
    reason: str


@dataclass
class LinkScan:
    """
    Result of scanning one message.

    Attributes:
        urls: Every URL extracted from the message
        hits: URLs whose domain matched a suspicious pattern
        keyword_flag: Whether the text contained a suspicious keyword
    """
    urls: List[str] = field(default_factory=list)
    hits: List[SuspiciousHit] = field(default_factory=list)
    keyword_flag: bool = False

    @property
    def should_alert(self) -> bool:
        return bool(self.hits) or self.keyword_flag


class LinkScanner:
    """Applies the link and keyword heuristics using an AlertConfig."""

    def __init__(self, config: AlertConfig):
        self._allowlist = config.allowlist_domains
        self._suspicious_domains = config.suspicious_domains
        self._keywords = config.suspicious_keywords

    def scan(self, text: str) -> LinkScan:
        """
        Scan message text for suspicious links and keywords.

        Args:
            text: Raw message content

        Returns:
            LinkScan with all extracted URLs, flagged hits and keyword flag
        """
        text = text or ""
        result = LinkScan(
            urls=extract_urls(text),
            keyword_flag=contains_suspicious_keyword(text, self._keywords),
        )

        for url in result.urls:
            domain = domain_of(url)
            if not domain:
                logger.debug(f"Skipping URL without a parseable host: {url}")
                continue

            if is_allowlisted(domain, self._allowlist):
                continue

            if is_suspicious_domain(domain, self._suspicious_domains):
                result.hits.append(SuspiciousHit(url=url, reason=SUSPICIOUS_DOMAIN_REASON))

        return result


__all__ = [
    "URL_PATTERN",
    "SUSPICIOUS_DOMAIN_REASON",
    "extract_urls",
    "domain_of",
    "is_allowlisted",
    "is_suspicious_domain",
    "contains_suspicious_keyword",
    "SuspiciousHit",
    "LinkScan",
    "LinkScanner",
]
