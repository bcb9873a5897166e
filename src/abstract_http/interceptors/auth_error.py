"""Rewrites 401/403 HTTP errors into AuthError"""

from typing import Iterable, Optional

from abstract_http.exceptions import AuthError, HttpError, HttpErrorKind
from abstract_http.interceptors.base import HttpInterceptor
from abstract_http.models import HttpRequest


DEFAULT_AUTH_ERROR_STATUSES = frozenset({401, 403})


class AuthErrorInterceptor(HttpInterceptor):
    """Opt-in classifier for authentication/authorization failures"""

    def __init__(self, statuses: Optional[Iterable[int]] = None) -> None:
        super().__init__()
        self.statuses = frozenset(
            DEFAULT_AUTH_ERROR_STATUSES if statuses is None else statuses
        )

    def on_error(self, error: Exception, request: HttpRequest) -> Exception:
        if not isinstance(error, HttpError) or error.kind is not HttpErrorKind.HTTP:
            return error
        if error.status not in self.statuses:
            return error
        return AuthError.from_error(error)
