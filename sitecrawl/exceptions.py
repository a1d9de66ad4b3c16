"""Exception hierarchy for SiteCrawl.

Errors fall in two groups: fatal ones (:class:`FatalSeedError`) abort the
whole crawl, while every :class:`BranchError` only prunes the branch of the
traversal it was raised for.
"""
from __future__ import annotations

from typing import Optional


class CrawlError(Exception):
    """Base class for all crawl errors."""


class FatalSeedError(CrawlError):
    """Raised when the seed URL is unusable or the seed page cannot be fetched."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Cannot crawl {url!r}: {reason}")


class EmptyReportError(CrawlError):
    """Raised when a report is requested for a crawl that visited nothing."""

    def __init__(self, message: str = "no pages found"):
        super().__init__(message)


class InvalidURLError(ValueError):
    """Raised by the normalizer for strings that are not absolute URLs with a host."""

    def __init__(self, url: str, reason: str = "not an absolute URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"{url!r}: {reason}")


class BranchError(CrawlError):
    """A recoverable error that discards one work item."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class UnparsableURLError(BranchError):
    def __init__(self, url: str, reason: str):
        super().__init__(url, f"Error parsing URL {url}: {reason}")


class OffsiteURLError(BranchError):
    def __init__(self, url: str, host: str):
        self.host = host
        super().__init__(url, f"Skipping offsite URL {url} (host {host})")


class TransportError(BranchError):
    """Raised when an HTTP request fails at the network level."""

    def __init__(self, url: str, original: Exception):
        self.original = original
        super().__init__(url, f"Error sending HTTP request to {url}: {original}")


class HttpStatusError(BranchError):
    def __init__(self, url: str, status: int):
        self.status = status
        super().__init__(url, f"{url} returned status code {status}")


class UnexpectedContentTypeError(BranchError):
    def __init__(self, url: str, content_type: Optional[str]):
        self.content_type = content_type
        if content_type is None:
            message = f"No content-type header in response from {url}"
        else:
            message = f"Got non-html response from {url}: {content_type}"
        super().__init__(url, message)


class BodyReadError(BranchError):
    def __init__(self, url: str, original: Exception):
        self.original = original
        super().__init__(url, f"Error reading response body from {url}: {original}")
