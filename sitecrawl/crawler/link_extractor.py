# sitecrawl/crawler/link_extractor.py
"""
Link extraction for SiteCrawl: pulls every <a href> out of an HTML document
and turns it into an absolute URL.
"""
from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from bs4 import BeautifulSoup, ParserRejectedMarkup, SoupStrainer
from bs4.element import Tag

__all__ = ("extract_links",)

logger = logging.getLogger("SiteCrawl")

# only <a href> tags are of interest
LINK_STRAINER = SoupStrainer("a", href=True)


def _absolute(href: str) -> Optional[SplitResult]:
    """Return the split href if it already carries a scheme, else None."""
    try:
        parts = urlsplit(href)
    except ValueError:
        return None
    return parts if parts.scheme else None


def _serialize(parts: SplitResult) -> str:
    # hierarchical URLs always have at least "/" as path
    if parts.netloc and not parts.path:
        parts = parts._replace(path="/")
    return urlunsplit(parts._replace(scheme=parts.scheme.lower()))


def _usable_base(base_url: str) -> bool:
    try:
        parts = urlsplit(base_url)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


def extract_links(html: str, base_url: str) -> List[str]:
    """
    Extract absolute URLs from all anchors of *html*, in document order.

    Absolute hrefs are kept as they are; relative, absolute-path and
    protocol-relative hrefs are resolved against *base_url*. Duplicates are
    preserved. Hrefs that cannot be resolved are dropped.
    """
    try:
        soup = BeautifulSoup(html, "html.parser", parse_only=LINK_STRAINER)
    except ParserRejectedMarkup as exc:
        logger.debug("Skipping unparsable document: %s", exc)
        return []
    base_ok = _usable_base(base_url)
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()

        parts = _absolute(raw)
        if parts is not None:
            links.append(_serialize(parts))
            continue

        if not base_ok:
            logger.debug("Dropping link %r: cannot resolve against base %r", raw, base_url)
            continue
        try:
            resolved = urljoin(base_url, raw)
            links.append(_serialize(urlsplit(resolved)))
        except ValueError as exc:
            logger.debug("Dropping link %r: %s", raw, exc)
    return links
