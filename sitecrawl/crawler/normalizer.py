# sitecrawl/crawler/normalizer.py
"""
URL normalization: turns an absolute URL into the host+path key used to
deduplicate pages.
"""
from __future__ import annotations

from urllib.parse import SplitResult, urlsplit

from sitecrawl.exceptions import InvalidURLError

__all__ = ("normalize_url", "url_host", "split_absolute")


def split_absolute(url: str) -> SplitResult:
    """
    Split *url* and make sure it is absolute and has a host.

    Raises InvalidURLError otherwise (relative paths, mailto:, javascript:).
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLError(str(url), "empty URL")
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError as exc:
        raise InvalidURLError(url, str(exc)) from exc
    if not parts.scheme:
        raise InvalidURLError(url, "missing scheme")
    if not host:
        raise InvalidURLError(url, "no host")
    return parts


def url_host(url: str) -> str:
    """Return the lowercased host of *url*, without port or userinfo."""
    # SplitResult.hostname is already lowercased
    return split_absolute(url).hostname or ""


def normalize_url(url: str) -> str:
    """
    Normalize URL to ``host + path``: both lowercased, trailing slashes
    stripped. Scheme, port, query and fragment are dropped, so
    ``http://BLOG.boot.dev/path/`` and ``https://blog.boot.dev/path`` share
    the key ``blog.boot.dev/path``.
    """
    parts = split_absolute(url)
    path = parts.path.rstrip("/").lower()
    return f"{parts.hostname}{path}"
