"""Crawling core: URL normalization, link extraction, ledger and traversal."""
from sitecrawl.crawler.crawler import Crawler, CrawlStats, crawl
from sitecrawl.crawler.ledger import VisitedLedger
from sitecrawl.crawler.link_extractor import extract_links
from sitecrawl.crawler.normalizer import normalize_url

__all__ = ["Crawler", "CrawlStats", "crawl", "VisitedLedger", "extract_links", "normalize_url"]
