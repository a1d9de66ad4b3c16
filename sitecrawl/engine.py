# File: sitecrawl/engine.py
"""sitecrawl.engine: entry point used by the CLI to run a crawl."""

from __future__ import annotations

from typing import Mapping, Optional

from sitecrawl.config import CrawlerConfig
from sitecrawl.crawler.crawler import Crawler
from sitecrawl.logger import logger

__all__ = ["start_crawl"]


async def start_crawl(seed_url: str, cfg: Optional[CrawlerConfig] = None) -> Mapping[str, int]:
    """
    Run the crawler in its context and return the finished ledger as a
    read-only mapping of normalized URL -> internal link count.

    Parameters
    ----------
    seed_url : str
        Seed page; its host bounds the crawl.
    cfg : CrawlerConfig, optional
        Crawl settings, defaults if omitted.
    """
    cfg = cfg or CrawlerConfig()
    async with Crawler(cfg) as crawler:
        ledger = await crawler.crawl(seed_url, cfg.max_depth)
    logger.debug("Crawl of %s produced %d pages", seed_url, len(ledger))
    return ledger.snapshot()
