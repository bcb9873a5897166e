"""
URL helpers
"""

from abstract_http.url.url_resolver import (
    UrlResolver,
    is_absolute_url,
    combine_urls,
)
from abstract_http.url.query_string import QueryStringBuilder

__all__ = [
    "UrlResolver",
    "is_absolute_url",
    "combine_urls",
    "QueryStringBuilder",
]
