"""
requests-based transport

Default ``HttpTransport`` binding. The blocking ``requests`` call runs in a
worker thread so interceptor hooks on the event loop are never blocked.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import requests

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
from abstract_http.url import UrlResolver


# Logger for this module
logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json, text/plain, */*",
}


class UploadReader:
    """
    File-like view of an encoded request body that reports upload progress

    ``requests`` sizes it through ``__len__``, so the body goes out with a
    plain ``Content-Length`` and is never chunk-encoded. A sized ``read``
    returns at most ``chunk_size`` bytes; each read reports the running total.
    """

    def __init__(
        self, data: bytes, on_progress: ProgressCallback, chunk_size: int
    ) -> None:
        self._data = data
        self._on_progress = on_progress
        self._chunk_size = chunk_size
        self._position = 0

    def __len__(self) -> int:
        return len(self._data)

    def read(self, size: Optional[int] = -1) -> bytes:
        if size is None or size < 0:
            end = len(self._data)
        else:
            end = self._position + min(size, self._chunk_size)
        chunk = self._data[self._position:end]
        if chunk:
            self._position += len(chunk)
            self._on_progress(
                ProgressEvent(loaded=self._position, total=len(self._data))
            )
        return chunk


class RequestsTransport(HttpTransport):
    """
    Transport over a ``requests.Session``

    Example:
        >>> transport = RequestsTransport(timeout=10000)
        >>> client = HttpClient("https://api.example.com", transport)
    """

    upload_chunk_size = 64 * 1024

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[int] = None,
        raise_for_status: bool = True,
    ) -> None:
        """
        Args:
            session: Session to send requests with, a new one is created if omitted
            timeout: Request timeout in milliseconds, ``None`` waits indefinitely
            raise_for_status: Treat status codes >= 400 as failures
        """
        self._owns_session = session is None
        self._session = session if session is not None else self._create_session()
        self.timeout = timeout
        self.raise_for_status = raise_for_status

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update(DEFAULT_HEADERS)
        return session

    async def request(self, request: TransportRequest) -> TransportResponse:
        return await asyncio.to_thread(self._perform, request)

    def _perform(self, request: TransportRequest) -> TransportResponse:
        url = UrlResolver(request.base_url, request.url).absolute_url
        headers = dict(request.headers)
        data: Any = self._encode_body(request.body, headers)

        if data and request.on_upload_progress is not None:
            data = UploadReader(data, request.on_upload_progress, self.upload_chunk_size)

        timeout = self.timeout / 1000.0 if self.timeout else None

        try:
            response = self._session.request(
                request.method,
                url,
                data=data,
                headers=headers,
                timeout=timeout,
                stream=request.response_type == ResponseType.STREAM,
            )
        except requests.exceptions.Timeout as e:
            logger.debug(f"{request.method} {url} timed out: {e}")
            raise TransportError(
                NETWORK_ERROR_MESSAGE, code=TransportErrorCode.TIMEOUT, cause=e
            ) from e
        except requests.exceptions.ConnectionError as e:
            logger.debug(f"{request.method} {url} could not connect: {e}")
            raise TransportError.connection_refused(cause=e) from e
        except requests.exceptions.RequestException as e:
            logger.debug(f"{request.method} {url} failed: {e}")
            raise TransportError(
                NETWORK_ERROR_MESSAGE, code=TransportErrorCode.NETWORK, cause=e
            ) from e

        failed = self.raise_for_status and response.status_code >= 400
        response_type = request.response_type
        if failed and response_type == ResponseType.STREAM:
            # Failed streams are read in full so the pooled connection is released
            response_type = ResponseType.BINARY

        raw = TransportResponse(
            status=response.status_code,
            status_text=response.reason or "",
            headers=dict(response.headers),
            body=self._read_body(response, response_type),
            url=response.url or url,
        )

        if failed:
            response.close()
            raise TransportError.bad_response(raw)

        return raw

    def _encode_body(self, body: Any, headers: Dict[str, str]) -> Optional[bytes]:
        """Encode the request body, structured data as JSON"""
        if body is None:
            return None
        if isinstance(body, bytes):
            return body
        if isinstance(body, (bytearray, memoryview)):
            return bytes(body)
        if isinstance(body, str):
            return body.encode("utf-8")

        if not any(name.lower() == "content-type" for name in headers):
            headers["Content-Type"] = "application/json"
        return json.dumps(body).encode("utf-8")

    def _read_body(
        self, response: requests.Response, response_type: ResponseType
    ) -> Any:
        """Decode the response body for the requested parsing mode"""
        if response_type == ResponseType.STREAM:
            return response.raw
        if response_type == ResponseType.BINARY:
            return response.content
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def close(self) -> None:
        """Close the session if this transport created it"""
        if self._owns_session:
            self._session.close()
