"""Shared helpers for the report renderers."""

from __future__ import annotations

from typing import List, Mapping, Tuple

from sitecrawl.exceptions import EmptyReportError


def sort_pages(pages: Mapping[str, int]) -> List[Tuple[str, int]]:
    """Return (url, count) pairs by count descending, URL ascending on ties."""
    return sorted(pages.items(), key=lambda kv: (-kv[1], kv[0]))


def ensure_pages(pages: Mapping[str, int]) -> List[Tuple[str, int]]:
    """Sort *pages*, raising EmptyReportError if there is nothing to report."""
    if not pages:
        raise EmptyReportError()
    return sort_pages(pages)
