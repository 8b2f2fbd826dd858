# link_scout/crawler/link_extractor.py
"""
Reference extraction for LinkScout: raw href/src strings of a parsed page.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

from link_scout.crawler.models import ReferenceKind
from link_scout.parser.html_parser import HtmlDocument

# (tag, attribute) read for each reference kind
REFERENCE_SOURCES: Dict[ReferenceKind, Tuple[str, str]] = {
    ReferenceKind.LINK: ("a", "href"),
    ReferenceKind.IMAGE: ("img", "src"),
}


def extract_references(document: HtmlDocument, kind: ReferenceKind) -> Set[str]:
    """
    Collect the raw references of *kind* found in *document*.

    Duplicates collapse because the result is a set; empty values are skipped.
    """
    tag, attr = REFERENCE_SOURCES[kind]
    return {value.strip() for value in document.attr_values(tag, attr) if value.strip()}


def extract_all(document: HtmlDocument, kinds: Iterable[ReferenceKind]) -> List[str]:
    """References of every requested kind, kinds in the given order, each sorted."""
    refs: List[str] = []
    for kind in kinds:
        refs.extend(sorted(extract_references(document, kind)))
    return refs


def find_base_href(document: HtmlDocument) -> Optional[str]:
    """First ``<base href>`` of the document, if any."""
    for href in document.attr_values("base", "href"):
        if href.strip():
            return href.strip()
    return None
