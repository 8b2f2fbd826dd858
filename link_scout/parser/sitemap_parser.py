# File: link_scout/parser/sitemap_parser.py
"""link_scout.parser.sitemap_parser: extraction of <loc> entries from sitemap XML."""

from __future__ import annotations

from typing import List, Union

from lxml import etree

from link_scout.crawler.models import DocumentParseError


def parse_sitemap(xml_content: Union[str, bytes]) -> List[str]:
    """Return the text of every ``<loc>`` element, in document order.

    Works for both ``<urlset>`` and ``<sitemapindex>`` documents, with or
    without the sitemaps.org namespace. Nothing is filtered here: the crawler
    decides which locations to follow.

    Raises:
        DocumentParseError: the content is not well-formed XML.

    Example:
    ```python
    from link_scout.parser.sitemap_parser import parse_sitemap

    with open('sitemap.xml', encoding='utf-8') as f:
        urls = parse_sitemap(f.read())
    ```
    """
    data = xml_content.encode("utf-8") if isinstance(xml_content, str) else xml_content
    parser = etree.XMLParser(ns_clean=True, resolve_entities=False)
    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise DocumentParseError(f"invalid sitemap XML: {exc}") from exc
    locs = root.findall(".//{*}loc")
    return [loc.text.strip() for loc in locs if loc.text and loc.text.strip()]
