# sitecrawl/crawler/fetcher.py
"""
Fetcher module: the HTTP transport used by the crawler. Handles timeouts and
retry/backoff on network errors; HTTP statuses are returned to the caller.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol

from aiohttp import ClientError, ClientPayloadError, ClientSession, ClientTimeout, InvalidURL

from sitecrawl.config import CrawlerConfig
from sitecrawl.crawler.models import FetchResponse
from sitecrawl.exceptions import BodyReadError, TransportError

__all__ = ("Transport", "AiohttpTransport")

logger = logging.getLogger("SiteCrawl")


class Transport(Protocol):
    """Anything that can GET a URL and return a buffered response."""

    async def fetch(self, url: str) -> FetchResponse:
        ...


class AiohttpTransport:
    """aiohttp-based transport with timeout and retries/backoff."""

    def __init__(self, config: CrawlerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> AiohttpTransport:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> FetchResponse:
        """
        GET *url* and buffer the whole body.

        Raises TransportError once retries are exhausted, BodyReadError if
        the body cannot be read.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        attempts = 0
        while True:
            try:
                async with self.session.get(url) as resp:
                    try:
                        body = await resp.read()
                    except ClientPayloadError as exc:
                        raise BodyReadError(url, exc) from exc
                    return FetchResponse(
                        url=str(resp.url),
                        status=resp.status,
                        headers={k.lower(): v for k, v in resp.headers.items()},
                        body=body,
                        charset=resp.charset,
                    )
            except InvalidURL as exc:
                # not retryable
                raise TransportError(url, exc) from exc
            except (ClientError, asyncio.TimeoutError) as exc:
                attempts += 1
                if attempts > self.config.retry_times:
                    raise TransportError(url, exc) from exc
                # exponential backoff, cap at 60s
                backoff = min(2**attempts, 60)
                logger.debug(
                    "Retry %d/%d for %s after %.2f s", attempts, self.config.retry_times, url, backoff
                )
                await asyncio.sleep(backoff)
