"""
HTTP Client module
"""

from abstract_http.client.http_client import HttpClient, RESPONSE_TYPES

__all__ = [
    "HttpClient",
    "RESPONSE_TYPES",
]
