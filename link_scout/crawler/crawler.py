# === FILE: link_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional, Sequence, Tuple

from aiohttp import ClientSession, ClientTimeout

from link_scout.crawler.checker import ReachabilityChecker
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.link_extractor import extract_all, find_base_href
from link_scout.crawler.models import CheckResult, PageData, ReferenceKind
from link_scout.crawler.visited import VisitedSet
from link_scout.logger import logger
from link_scout.parser.html_parser import parse_html
from link_scout.parser.sitemap_parser import parse_sitemap
from link_scout.report.stream import NullSink, ReportSink
from link_scout.utils import (
    document_base_url,
    extract_host,
    in_crawl_scope,
    parse_absolute_url,
    resolve_reference,
)

__all__ = ("LinkCrawler",)


class LinkCrawler:
    """Checks the links and images of a page, or of every page of a sitemap.

    Documents are fetched one at a time; the references of each document are
    probed concurrently and joined before the next document is read. The
    :class:`VisitedSet` is shared by the whole run, so every URL is fetched or
    probed at most once.
    """

    def __init__(
        self,
        config,
        sink: Optional[ReportSink] = None,
        visited: Optional[VisitedSet] = None,
    ) -> None:
        self.config = config
        self.sink = sink if sink is not None else NullSink()
        self.visited = visited if visited is not None else VisitedSet()
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.checker: Optional[ReachabilityChecker] = None
        self.results: List[CheckResult] = []
        self.pages_checked = 0

    async def __aenter__(self) -> LinkCrawler:
        session_kwargs = {}
        if self.config.timeout:
            session_kwargs["timeout"] = ClientTimeout(total=self.config.timeout)
        self.session = ClientSession(
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
            **session_kwargs,
        )
        self.fetcher = Fetcher(self.session)
        self.checker = ReachabilityChecker(self.session, accept_2xx=self.config.accept_2xx)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    @property
    def kinds(self) -> Tuple[ReferenceKind, ...]:
        """Reference kinds to check; links when no flag was given."""
        kinds: List[ReferenceKind] = []
        if self.config.find_broken_links:
            kinds.append(ReferenceKind.LINK)
        if self.config.find_broken_images:
            kinds.append(ReferenceKind.IMAGE)
        return tuple(kinds) or (ReferenceKind.LINK,)

    async def crawl(self) -> List[CheckResult]:
        if not self.fetcher:
            raise RuntimeError("Session not initialized")
        root_url = parse_absolute_url(str(self.config.url))
        start = time.monotonic()
        if self.config.is_xml_sitemap:
            self.visited.admit(root_url)
        root = await self.fetcher.fetch(root_url)

        self.sink.started()
        if self.config.is_xml_sitemap:
            await self._crawl_sitemap(root, document_base_url(root_url))
        else:
            await self.check_page(root)
        self.sink.done()

        duration = time.monotonic() - start
        broken = sum(1 for r in self.results if not r.ok)
        logger.info(
            "Finished: %d URLs checked (%d broken) on %d pages in %.2f s",
            len(self.results), broken, self.pages_checked, duration,
        )
        return self.results

    async def _crawl_sitemap(self, root: PageData, base_url: str) -> None:
        host = extract_host(base_url)
        page_urls: List[str] = []
        for sitemap_url in self._admit_locations(parse_sitemap(root.content), host):
            sitemap = await self.fetcher.fetch(sitemap_url)
            page_urls.extend(self._admit_locations(parse_sitemap(sitemap.content), host))
        # all pages are admitted before the first link is probed
        for page_url in page_urls:
            page = await self.fetcher.fetch(page_url)
            await self.check_page(page)

    def _admit_locations(self, locations: Sequence[str], host: str) -> List[str]:
        """Admit the in-scope locations not seen before, in sitemap order."""
        admitted: List[str] = []
        for location in locations:
            if not in_crawl_scope(location, host, exact=self.config.exact_host_match):
                logger.debug("Out of scope, skipped: %s", location)
                continue
            url = parse_absolute_url(location)
            if not self.visited.admit(url):
                logger.debug("Already visited, skipped: %s", url)
                continue
            admitted.append(url)
        return admitted

    async def check_page(self, page: PageData) -> List[CheckResult]:
        """Probe every not-yet-visited reference of *page* and wait for all probes."""
        document = parse_html(page)
        base_url = document_base_url(page.url, find_base_href(document))
        self.pages_checked += 1

        admitted: List[str] = []
        for raw in extract_all(document, self.kinds):
            url = resolve_reference(raw, base_url)
            if url is not None and self.visited.admit(url):
                admitted.append(url)
        logger.info("%s: %d new references (base %s)", page.url, len(admitted), base_url)
        return await self._check_batch(admitted)

    async def _check_batch(self, urls: Sequence[str]) -> List[CheckResult]:
        tasks = [asyncio.create_task(self._check_one(url)) for url in urls]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def _check_one(self, url: str) -> CheckResult:
        result = await self.checker.check(url)
        self.results.append(result)
        self.sink.result(result)
        return result
