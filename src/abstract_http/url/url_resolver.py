"""
Base/relative URL reconciliation

Combines a configured base URL with a request URL into an absolute URL
and the path relative to that base.
"""

import re
from typing import Optional


# "<scheme>://" or protocol-relative "//". Scheme per RFC 3986: a letter
# followed by letters, digits, "+", "-" or ".".
_ABSOLUTE_URL = re.compile(r"^([a-z][a-z\d+\-.]*:)?//", re.IGNORECASE)
_TRAILING_SLASHES = re.compile(r"/+$")
_LEADING_SLASHES = re.compile(r"^/+")


def is_absolute_url(url: Optional[str]) -> bool:
    """Check whether ``url`` carries a scheme or is protocol-relative"""
    if not url:
        return False
    return _ABSOLUTE_URL.match(url) is not None


def combine_urls(base_url: str, url: Optional[str]) -> str:
    """Join ``base_url`` and ``url`` with exactly one separating slash"""
    if not url:
        return base_url
    return _TRAILING_SLASHES.sub("", base_url) + "/" + _LEADING_SLASHES.sub("", url)


class UrlResolver:
    """
    Resolves a request URL against an optional base URL

    Example:
        >>> resolver = UrlResolver("http://server.com/", "/page?param1=45")
        >>> resolver.absolute_url
        'http://server.com/page?param1=45'
    """

    def __init__(self, base_url: Optional[str], url: Optional[str]) -> None:
        self._base_url = base_url or ""
        self._relative_url = self._build_relative_url(base_url, url)
        self._absolute_url = self._build_absolute_url(base_url, url)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def relative_url(self) -> str:
        return self._relative_url

    @property
    def absolute_url(self) -> str:
        return self._absolute_url

    def _build_absolute_url(self, base_url: Optional[str], url: Optional[str]) -> str:
        if not base_url or is_absolute_url(url):
            return url or ""
        return combine_urls(base_url, url)

    def _build_relative_url(self, base_url: Optional[str], url: Optional[str]) -> str:
        normalized = url or ""
        if not base_url or not is_absolute_url(url):
            return normalized
        without_base = normalized.replace(base_url, "", 1)
        if without_base.startswith("/"):
            return without_base
        return "/" + without_base

    def __repr__(self) -> str:
        return (
            f"UrlResolver(base_url={self._base_url!r}, "
            f"absolute_url={self._absolute_url!r})"
        )
