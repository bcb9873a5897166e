"""
Transport adapter contract

The client core never talks to an HTTP engine directly. It hands a fully
built ``TransportRequest`` to an ``HttpTransport`` and receives either a
``TransportResponse`` or an exception, preferably a ``TransportError``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional


# Message carried by failures where no exchange with the server completed
NETWORK_ERROR_MESSAGE = "Network Error"


class ResponseType(str, Enum):
    """Response parsing modes understood by transports"""
    JSON = "json"
    STREAM = "stream"
    BINARY = "binary"


class TransportErrorCode(str, Enum):
    """Transport failure codes"""
    CONNECTION_REFUSED = "ECONNREFUSED"
    TIMEOUT = "ETIMEDOUT"
    BAD_RESPONSE = "ERR_BAD_RESPONSE"
    NETWORK = "ERR_NETWORK"
    UNKNOWN = "ERR_UNKNOWN"


@dataclass
class ProgressEvent:
    """Upload progress tick"""
    loaded: int
    total: Optional[int] = None


# Transport-level progress callback
ProgressCallback = Callable[[ProgressEvent], None]


@dataclass
class TransportRequest:
    """Request as handed to a transport"""
    method: str
    url: str
    base_url: Optional[str] = None
    body: Optional[Any] = None
    headers: Dict[str, str] = field(default_factory=dict)
    response_type: ResponseType = ResponseType.JSON
    on_upload_progress: Optional[ProgressCallback] = None


@dataclass
class TransportResponse:
    """Raw response returned by a transport"""
    status: int
    status_text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Any] = None
    url: str = ""


class TransportError(Exception):
    """
    Transport failure

    ``code`` tells a connection that could not be established apart from
    a server answering with an error status; ``response`` holds whatever
    part of the response was received.
    """

    def __init__(
        self,
        message: str,
        code: TransportErrorCode = TransportErrorCode.UNKNOWN,
        response: Optional[TransportResponse] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response
        self.cause = cause

    @classmethod
    def connection_refused(
        cls, cause: Optional[BaseException] = None
    ) -> "TransportError":
        """Create a connection refused error"""
        return cls(
            "Connection refused",
            code=TransportErrorCode.CONNECTION_REFUSED,
            cause=cause,
        )

    @classmethod
    def bad_response(
        cls, response: TransportResponse, cause: Optional[BaseException] = None
    ) -> "TransportError":
        """Create an error for a response with a failing status"""
        return cls(
            f"Request failed with status code {response.status}",
            code=TransportErrorCode.BAD_RESPONSE,
            response=response,
            cause=cause,
        )


class HttpTransport(ABC):
    """Performs the network exchange for an ``HttpClient``"""

    @abstractmethod
    async def request(self, request: TransportRequest) -> TransportResponse:
        """Perform the exchange or raise on failure"""

    def close(self) -> None:
        """Release transport resources"""
