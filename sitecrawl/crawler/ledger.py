from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping


class VisitedLedger:
    """
    Tracks how many times each normalized URL was reached during a crawl.

    A key is inserted once, on the first visit; every later encounter only
    increments its count. The ledger belongs to a single crawl and is handed
    to the report renderers through :meth:`snapshot` once the crawl is over.
    """

    def __init__(self) -> None:
        self._pages: Dict[str, int] = {}

    def record(self, key: str) -> bool:
        """Count a visit to *key*. Return True if this is the first one."""
        if key in self._pages:
            self._pages[key] += 1
            return False
        self._pages[key] = 1
        return True

    def count(self, key: str) -> int:
        return self._pages.get(key, 0)

    def items(self):
        return self._pages.items()

    def snapshot(self) -> Mapping[str, int]:
        """Read-only view of the ledger."""
        return MappingProxyType(self._pages)

    def __contains__(self, key: object) -> bool:
        return key in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._pages)

    def __repr__(self) -> str:
        return f"VisitedLedger({self._pages!r})"
