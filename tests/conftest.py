# File: tests/conftest.py
import logging
from typing import Callable, Dict, List, Optional, Union

import pytest

from sitecrawl.config import CrawlerConfig
from sitecrawl.crawler.models import FetchResponse
from sitecrawl.logger import LOGGER_NAME

SEED = "https://example.com"


def make_page(
    url: str,
    body: str = "",
    status: int = 200,
    content_type: Optional[str] = "text/html; charset=utf-8",
    charset: Optional[str] = "utf-8",
) -> FetchResponse:
    headers = {} if content_type is None else {"content-type": content_type}
    return FetchResponse(url=url, status=status, headers=headers, body=body.encode(), charset=charset)


def links_to(*hrefs: str) -> str:
    anchors = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return f"<html><body>{anchors}</body></html>"


class FakeTransport:
    """
    In-memory transport: maps URL -> response or exception to raise.
    Unknown URLs answer 404.
    """

    def __init__(self, pages: Dict[str, Union[FetchResponse, Exception]]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FetchResponse:
        self.calls.append(url)
        result = self.pages.get(url)
        if result is None:
            return make_page(url, "not found", status=404)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed by the CLI so later tests do not write to closed streams."""
    yield
    lg = logging.getLogger(LOGGER_NAME)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()
    lg.propagate = True


@pytest.fixture()
def page() -> Callable[..., FetchResponse]:
    return make_page


@pytest.fixture()
def site() -> Callable[[Dict[str, Union[str, FetchResponse, Exception]]], FakeTransport]:
    """
    Build a FakeTransport from a mapping of path -> HTML body / response / exception.
    Paths are joined to SEED; the seed itself is the "" key.
    """

    def _build(pages):
        resolved = {}
        for path, value in pages.items():
            url = SEED + path
            if isinstance(value, str):
                value = make_page(url, value)
            resolved[url] = value
        return FakeTransport(resolved)

    return _build


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """
    Return a basic valid CrawlerConfig for crawler tests.
    """
    return CrawlerConfig(max_depth=3, timeout=2.0, user_agent="TestAgent/1.0", retry_times=0)
