"""Logs every exchange passing through the pipeline"""

import logging
from typing import Any, Optional

from abstract_http.exceptions import HttpClientError
from abstract_http.interceptors.base import HttpInterceptor
from abstract_http.models import HttpRequest, HttpResponse
from abstract_http.utils import redact_sensitive_data


# Logger for this module
logger = logging.getLogger(__name__)


class LoggingInterceptor(HttpInterceptor):
    """
    Logs requests, responses and errors with sensitive headers redacted

    Errors are logged and passed on unchanged. Register it last to log the
    error the caller will actually see.
    """

    def __init__(
        self,
        log: Optional[logging.Logger] = None,
        level: int = logging.INFO,
    ) -> None:
        super().__init__()
        self.log = log or logger
        self.level = level

    async def on_request(self, request: HttpRequest) -> None:
        self.log.log(
            self.level,
            f"--> {request.method.value} {request.url} "
            f"headers={redact_sensitive_data(dict(request.headers))}",
        )

    async def on_response(self, response: HttpResponse[Any]) -> None:
        status = " ".join(filter(None, [str(response.status), response.status_text]))
        self.log.log(
            self.level,
            f"<-- {status} {response.method.value} {response.url}",
        )

    def on_error(self, error: Exception, request: HttpRequest) -> Exception:
        if isinstance(error, HttpClientError):
            details = error.get_description()
        else:
            details = repr(error)
        self.log.warning(
            f"<-- {request.method.value} {request.url} failed: {details}"
        )
        return error
