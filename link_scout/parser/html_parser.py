# === FILE: link_scout/parser/html_parser.py ===
"""HTML parsing utilities for LinkScout.

The crawler only asks one question about a page: which values does a given
attribute take on all nodes with a given tag (``<a href>``, ``<img src>``,
``<base href>``). :class:`HtmlDocument` wraps a BeautifulSoup tree and answers
it, so the extractors never touch bs4 directly.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from link_scout.crawler.models import DocumentParseError

__all__: Sequence[str] = ("HtmlDocument", "parse_html")


@dataclass(slots=True)
class HtmlDocument:
    """Parsed HTML page together with the URL it was fetched from."""

    url: str
    soup: BeautifulSoup

    def attr_values(self, tag: str, attr: str) -> list[str]:
        """Values of *attr* on every ``<tag>`` that carries it, in document order."""
        values: list[str] = []
        for node in self.soup.find_all(tag):
            if not isinstance(node, Tag):
                continue
            value = node.get(attr)
            if isinstance(value, str):
                values.append(value)
        return values


def parse_html(page: Any) -> HtmlDocument:
    """Parse raw HTML (string) or :class:`~link_scout.crawler.models.PageData`.

    Parameters
    ----------
    page
        Either a *str* (HTML markup) **or** a ``PageData`` object with
        ``url`` and ``content`` attributes. A bare string gets an empty URL.
    """
    if hasattr(page, "content") and hasattr(page, "url"):
        html = page.content
        url = str(page.url)
    else:
        html = str(page)
        url = ""

    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise DocumentParseError(f"cannot parse HTML from {url or '<string>'}: {exc}") from exc
    return HtmlDocument(url=url, soup=soup)
