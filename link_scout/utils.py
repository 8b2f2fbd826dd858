# File: link_scout/utils.py
"""link_scout.utils: URL resolution, canonicalisation and crawl-scope helpers."""

from __future__ import annotations

import posixpath
from typing import Optional, Sequence
from urllib.parse import urljoin, urlsplit, urlunsplit

from link_scout.crawler.models import InvalidURLError
from link_scout.logger import logger

__all__: Sequence[str] = (
    "canonicalize_url",
    "resolve_reference",
    "parse_absolute_url",
    "document_base_url",
    "in_crawl_scope",
    "extract_host",
)

_WEB_SCHEMES = ("http", "https")
_DEFAULT_PORTS = {"http": 80, "https": 443}


def _split_checked(url: str):
    """urlsplit that also validates the port; raises ValueError on junk."""
    parts = urlsplit(url)
    parts.port  # noqa: B018 - raises ValueError for an out-of-range port
    return parts


def _remove_dot_segments(path: str) -> str:
    segments = path.split("/")
    if "." not in segments and ".." not in segments:
        return path
    norm = posixpath.normpath(path)
    # normpath keeps a leading "//" and drops the trailing slash
    if norm.startswith("//"):
        norm = "/" + norm.lstrip("/")
    if (path.endswith("/") or segments[-1] in (".", "..")) and not norm.endswith("/"):
        norm += "/"
    return norm


def canonicalize_url(url: str) -> str:
    """Lower-case scheme and host, drop the default port, remove ``.``/``..``
    path segments, default the path to ``/`` and drop the fragment."""
    parts = _split_checked(url)
    scheme = parts.scheme.lower()
    netloc = parts.netloc.lower()
    if parts.port is not None and parts.port == _DEFAULT_PORTS.get(scheme):
        netloc = netloc.rsplit(":", 1)[0]
    elif netloc.endswith(":"):
        netloc = netloc[:-1]
    path = _remove_dot_segments(parts.path) or "/"
    return urlunsplit((scheme, netloc, path, parts.query, ""))


def resolve_reference(raw: str, base: str) -> Optional[str]:
    """Resolve *raw* against *base* and return the canonical absolute URL.

    Returns ``None`` for references that cannot be parsed, have no host or
    point to a non-web scheme (``mailto:``, ``javascript:``, ``data:`` ...).
    """
    raw = raw.strip()
    if not raw:
        return None
    try:
        absolute = urljoin(base, raw)
        parts = _split_checked(absolute)
    except ValueError:
        logger.debug("Dropping unparsable reference %r (base %s)", raw, base)
        return None
    if parts.scheme.lower() not in _WEB_SCHEMES or not parts.hostname:
        logger.debug("Dropping non-web reference %r", raw)
        return None
    return canonicalize_url(absolute)


def parse_absolute_url(url: str) -> str:
    """Strict variant of :func:`resolve_reference` for root and sitemap URLs."""
    try:
        parts = _split_checked(url.strip())
    except ValueError as exc:
        raise InvalidURLError(f"malformed URL {url!r}: {exc}") from exc
    if parts.scheme.lower() not in _WEB_SCHEMES or not parts.hostname:
        raise InvalidURLError(f"not an absolute http(s) URL: {url!r}")
    return canonicalize_url(url.strip())


def document_base_url(doc_url: str, base_href: Optional[str] = None) -> str:
    """Base URL used to resolve the relative references of one document.

    An explicit ``<base href>`` wins; a relative one is resolved against the
    document URL. Without it the base is the document URL cut before its path.
    """
    if base_href and base_href.strip():
        return parse_absolute_url(urljoin(doc_url, base_href.strip()))
    parts = urlsplit(parse_absolute_url(doc_url))
    return urlunsplit((parts.scheme, parts.netloc, "/", "", ""))


def extract_host(url: str) -> str:
    """Hostname of *url* (lower-cased, without port)."""
    return urlsplit(url).hostname or ""


def in_crawl_scope(location: str, host: str, exact: bool = False) -> bool:
    """Decide whether a sitemap *location* belongs to the crawled site.

    The default is a plain substring test of *host* inside the location
    string, so ``notexample.com`` matches ``example.com``. ``exact=True``
    compares the parsed hostname instead.
    """
    if not exact:
        return host in location
    try:
        return (urlsplit(location.strip()).hostname or "") == host.lower()
    except ValueError:
        return False
