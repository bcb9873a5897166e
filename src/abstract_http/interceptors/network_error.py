"""Rewrites generic HTTP errors that indicate a network failure"""

from typing import Iterable, Optional

from abstract_http.exceptions import HttpError, HttpErrorKind, NetworkError
from abstract_http.interceptors.base import HttpInterceptor
from abstract_http.models import HttpRequest
from abstract_http.transport import NETWORK_ERROR_MESSAGE


DEFAULT_NETWORK_ERROR_STATUSES = frozenset({0, 502, 503, 504})


class NetworkErrorInterceptor(HttpInterceptor):
    """
    Turns an ``HttpError`` into a ``NetworkError`` when the inner cause
    reports a network failure or the status is network-indicating

    Installed first on every ``HttpClient``. Errors that are already
    classified are returned as they are.
    """

    def __init__(
        self,
        statuses: Optional[Iterable[int]] = None,
        message: str = NETWORK_ERROR_MESSAGE,
    ) -> None:
        super().__init__()
        self.statuses = frozenset(
            DEFAULT_NETWORK_ERROR_STATUSES if statuses is None else statuses
        )
        self.message = message

    def on_error(self, error: Exception, request: HttpRequest) -> Exception:
        if not isinstance(error, HttpError) or error.kind is not HttpErrorKind.HTTP:
            return error
        if not self._is_network_error(error):
            return error
        return NetworkError.from_error(error)

    def _is_network_error(self, error: HttpError) -> bool:
        inner = error.inner_error
        if inner is not None and str(inner) == self.message:
            return True
        return error.status is not None and error.status in self.statuses
