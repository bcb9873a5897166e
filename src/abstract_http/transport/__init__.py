"""
Transport adapters
"""

from abstract_http.transport.base import (
    NETWORK_ERROR_MESSAGE,
    HttpTransport,
    ProgressCallback,
    ProgressEvent,
    ResponseType,
    TransportError,
    TransportErrorCode,
    TransportRequest,
    TransportResponse,
)
from abstract_http.transport.requests_transport import RequestsTransport

__all__ = [
    "NETWORK_ERROR_MESSAGE",
    "HttpTransport",
    "ProgressCallback",
    "ProgressEvent",
    "ResponseType",
    "TransportError",
    "TransportErrorCode",
    "TransportRequest",
    "TransportResponse",
    "RequestsTransport",
]
