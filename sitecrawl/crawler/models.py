# sitecrawl/crawler/models.py
"""
Data models for the SiteCrawl crawler.
"""
from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from sitecrawl.exceptions import BodyReadError


class ContentKind(Enum):
    """Classification of a response by its content-type header."""

    HTML = "html"
    NON_HTML = "non-html"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class WorkItem:
    """A raw URL waiting in the work list, with its distance from the seed."""

    url: str
    depth: int = 0

    def child(self, url: str) -> WorkItem:
        return WorkItem(url, self.depth + 1)


@dataclass(slots=True)
class FetchResponse:
    """Fully buffered HTTP response; header names are lowercased."""

    url: str
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    charset: Optional[str] = None

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("content-type")

    @property
    def is_error(self) -> bool:
        """True for client (4xx) and server (5xx) error statuses."""
        return 400 <= self.status < 600

    @property
    def content_kind(self) -> ContentKind:
        ctype = self.content_type
        if ctype is None:
            return ContentKind.MISSING
        mime = ctype.split(";", 1)[0].strip().lower()
        return ContentKind.HTML if mime == "text/html" else ContentKind.NON_HTML

    def text(self) -> str:
        """Decode the body using the response charset (UTF-8 if unknown)."""
        encoding = self.charset or "utf-8"
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise BodyReadError(self.url, exc) from exc
        return self.body.decode(encoding, errors="replace")
