# === FILE: sitecrawl/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Iterable, Optional
from urllib.parse import urlsplit

from sitecrawl.config import CrawlerConfig
from sitecrawl.crawler.fetcher import AiohttpTransport, Transport
from sitecrawl.crawler.ledger import VisitedLedger
from sitecrawl.crawler.link_extractor import extract_links
from sitecrawl.crawler.models import ContentKind, FetchResponse, WorkItem
from sitecrawl.crawler.normalizer import normalize_url, url_host
from sitecrawl.exceptions import (
    BranchError,
    FatalSeedError,
    HttpStatusError,
    InvalidURLError,
    OffsiteURLError,
    UnexpectedContentTypeError,
    UnparsableURLError,
)

__all__ = ("CrawlStats", "Crawler", "crawl")


@dataclass(slots=True)
class CrawlStats:
    """Counters collected during one crawl."""
    pages_fetched: int = 0
    links_found: int = 0
    repeat_visits: int = 0
    pruned: Counter = field(default_factory=Counter)

    def prune(self, error: BranchError) -> None:
        self.pruned[type(error).__name__] += 1


class Crawler:
    """
    Crawls one site from a seed URL and counts internal references per page.

    Work items are processed one at a time: pop, host-filter, normalize,
    dedup against the ledger, fetch, extract links, enqueue. Any
    :class:`BranchError` raised along the way only drops that item.
    """

    def __init__(
        self,
        config: Optional[CrawlerConfig] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self.config = config or CrawlerConfig()
        self.transport = transport
        self._own_transport: Optional[AiohttpTransport] = None
        self.ledger = VisitedLedger()
        self.stats = CrawlStats()
        self.logger = logging.getLogger("SiteCrawl")
        self._seed_url = ""
        self._seed_host = ""
        self._prefetched: Dict[str, FetchResponse] = {}

    async def __aenter__(self) -> Crawler:
        if self.transport is None:
            self._own_transport = AiohttpTransport(self.config)
            self.transport = await self._own_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._own_transport is not None:
            await self._own_transport.close()
            self._own_transport = None
            self.transport = None

    async def crawl(self, seed_url: str, max_depth: Optional[int] = None) -> VisitedLedger:
        """
        Crawl the site behind *seed_url* and return the visited ledger.

        Raises FatalSeedError if the seed is not a valid URL, cannot be
        fetched or answers with an error status.
        """
        if self.transport is None:
            raise RuntimeError("Transport not initialized; use 'async with Crawler(...)'")
        if max_depth is None:
            max_depth = self.config.max_depth
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        seed_url = seed_url.strip() if isinstance(seed_url, str) else seed_url

        self.ledger = VisitedLedger()
        self.stats = CrawlStats()
        self._prefetched.clear()

        self.logger.info("Start crawl: %s (max depth %d, %s)", seed_url, max_depth, self.config.traversal)
        start = time.monotonic()
        await self._check_seed(seed_url)

        work: Deque[WorkItem] = deque([WorkItem(seed_url, 0)])
        pop = work.popleft if self.config.traversal == "breadth-first" else work.pop
        while work:
            item = pop()
            try:
                await self._visit(item, work, max_depth)
            except OffsiteURLError as exc:
                self.stats.prune(exc)
                self.logger.debug("%s", exc)
            except BranchError as exc:
                self.stats.prune(exc)
                self.logger.warning("%s", exc)

        duration = time.monotonic() - start
        self.logger.info(
            "Finished: %d pages, %d fetched, %d repeat visits in %.2f s",
            len(self.ledger), self.stats.pages_fetched, self.stats.repeat_visits, duration,
        )
        if self.stats.pruned:
            self.logger.info("Pruned branches: %s", dict(self.stats.pruned))
        return self.ledger

    async def _check_seed(self, seed_url: str) -> None:
        try:
            normalize_url(seed_url)
            self._seed_host = url_host(seed_url)
        except InvalidURLError as exc:
            raise FatalSeedError(seed_url, exc.reason) from exc
        self._seed_url = seed_url

        try:
            response = await self.transport.fetch(seed_url)
        except BranchError as exc:
            raise FatalSeedError(seed_url, str(exc)) from exc
        if response.is_error:
            raise FatalSeedError(seed_url, f"returned status code {response.status}")
        # reused when the seed item is popped
        self._prefetched[seed_url] = response

    async def _visit(self, item: WorkItem, work: Deque[WorkItem], max_depth: int) -> None:
        if item.depth > max_depth:
            return

        try:
            parts = urlsplit(item.url.strip())
            host = parts.hostname
        except ValueError as exc:
            raise UnparsableURLError(item.url, str(exc)) from exc
        if not parts.scheme:
            raise UnparsableURLError(item.url, "relative URL without a base")
        if host != self._seed_host:
            raise OffsiteURLError(item.url, host or "")

        try:
            key = normalize_url(item.url)
        except InvalidURLError as exc:
            raise UnparsableURLError(item.url, exc.reason) from exc

        if not self.ledger.record(key):
            self.stats.repeat_visits += 1
            return

        # first visit: recorded before fetching, never retried on failure
        self.logger.info("Crawling: %s", item.url)
        response = await self._fetch(item.url)
        self.stats.pages_fetched += 1
        if response.is_error:
            raise HttpStatusError(item.url, response.status)
        if response.content_kind is not ContentKind.HTML:
            raise UnexpectedContentTypeError(item.url, response.content_type)

        links = extract_links(response.text(), self._seed_url)
        self.stats.links_found += len(links)
        self._enqueue(item, links, work, max_depth)

    async def _fetch(self, url: str) -> FetchResponse:
        response = self._prefetched.pop(url, None)
        if response is not None:
            return response
        return await self.transport.fetch(url)

    def _enqueue(
        self, parent: WorkItem, links: Iterable[str], work: Deque[WorkItem], max_depth: int
    ) -> None:
        if parent.depth + 1 > max_depth:
            return
        for link in links:
            try:
                key = normalize_url(link)
            except InvalidURLError:
                key = None
            if key is not None and key in self.ledger:
                # known page: count the reference without queueing it again
                self.ledger.record(key)
                self.stats.repeat_visits += 1
                continue
            work.append(parent.child(link))


async def crawl(
    seed_url: str,
    max_depth: Optional[int] = None,
    *,
    config: Optional[CrawlerConfig] = None,
    transport: Optional[Transport] = None,
) -> VisitedLedger:
    """Run a complete crawl and return its ledger."""
    async with Crawler(config, transport) as crawler:
        return await crawler.crawl(seed_url, max_depth)
