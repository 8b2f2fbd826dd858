# link_scout/crawler/fetcher.py
"""
Fetcher module: downloads the documents the crawler has to read (root page,
sitemaps, sitemap pages).
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession

from link_scout.crawler.models import DocumentFetchError, PageData
from link_scout.logger import logger


class Fetcher:
    """Single GET per document, any transport failure is fatal."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its decoded body.

        A non-200 status is logged but the body is still returned, like a
        browser would render an error page. Transport errors raise
        DocumentFetchError.
        """
        logger.info("Fetching document %s", url)
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                text = await resp.text(errors="replace")
                status = resp.status
        except asyncio.TimeoutError as exc:
            raise DocumentFetchError(url, "timed out") from exc
        except ClientError as exc:
            raise DocumentFetchError(url, str(exc) or type(exc).__name__) from exc

        if status != 200:
            logger.warning("Document %s answered HTTP %s", url, status)
        return PageData(url, text, status)
