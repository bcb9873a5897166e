"""
Shared fixtures for unit tests
"""

from typing import Any, Optional

import pytest

from abstract_http.transport import (
    HttpTransport,
    ProgressEvent,
    TransportRequest,
    TransportResponse,
)


class StubTransport(HttpTransport):
    """In-memory transport recording the last request it received"""

    def __init__(self) -> None:
        self.status = 200
        self.body: Any = None
        self.headers: dict = {}
        self.error: Optional[BaseException] = None
        self.last_request: Optional[TransportRequest] = None
        self.calls = 0
        self.closed = False

    def set_response_status(self, status: int) -> None:
        self.status = status

    def set_response_body(self, body: Any) -> None:
        self.body = body

    def set_response_header(self, header: str, value: str) -> None:
        self.headers[header] = value

    def set_request_error(self, error: BaseException) -> None:
        self.error = error

    def notify_upload_progress(self, event: ProgressEvent) -> None:
        if self.last_request and self.last_request.on_upload_progress:
            self.last_request.on_upload_progress(event)

    async def request(self, request: TransportRequest) -> TransportResponse:
        self.calls += 1
        self.last_request = request
        if self.error is not None:
            raise self.error
        return TransportResponse(
            status=self.status,
            status_text="",
            headers=dict(self.headers),
            body=self.body,
            url=request.url,
        )

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()
