# link_scout/crawler/models.py
"""
Data models and error types for the LinkScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CrawlError(Exception):
    """Base class for errors that abort the whole crawl."""


class DocumentFetchError(CrawlError):
    """Raised when a page or sitemap could not be downloaded."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"failed to fetch {url}: {reason}")


class DocumentParseError(CrawlError):
    """Raised when a fetched document cannot be parsed."""


class InvalidURLError(CrawlError, ValueError):
    """Raised for a root or sitemap URL that is not an absolute http(s) URL."""


class ReferenceKind(str, Enum):
    LINK = "link"
    IMAGE = "image"


class Outcome(str, Enum):
    OK = "OK"
    BROKEN = "Broken"


@dataclass(slots=True)
class PageData:
    """Fetched document: final URL, decoded text and HTTP status."""

    url: str
    content: str
    status: int = 200


@dataclass(slots=True)
class CheckResult:
    """Outcome of one reachability probe."""

    url: str
    outcome: Outcome
    status: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    def line(self) -> str:
        return f"{self.url} is {self.outcome.value}"
