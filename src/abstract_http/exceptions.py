"""Exception classes for the abstract HTTP client"""

from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from abstract_http.models import HttpMethod, HttpRequest, HttpResponse


class HttpErrorKind(str, Enum):
    """Discriminant for every error raised by the library"""
    HTTP = "HTTP"
    NETWORK = "NETWORK"
    AUTH = "AUTH"
    CONFIG = "CONFIG"
    VALIDATION = "VALIDATION"


class HttpClientError(Exception):
    """
    Base exception for abstract HTTP client errors

    All errors in the library extend from this class.
    Subclasses set ``kind`` so callers can dispatch on it
    instead of inspecting the concrete type.
    """

    kind: HttpErrorKind = HttpErrorKind.HTTP

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "kind": self.kind.value,
            "message": str(self),
            "code": self.code,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "details": self.details,
        }

    def has_code(self, code: str) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_kind(self, kind: HttpErrorKind) -> bool:
        """Check if error is of a given kind"""
        return self.kind == kind

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [str(self)]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        return " ".join(parts)


class HttpError(HttpClientError):
    """
    Failed HTTP exchange

    Owns a snapshot of the request and, when one was received, of the
    response. The diagnostic fields are projected from those snapshots,
    so mutating the original request afterwards does not change the error.
    """

    kind = HttpErrorKind.HTTP
    label = "Http error"

    def __init__(
        self,
        request: "HttpRequest",
        response: Optional["HttpResponse[Any]"] = None,
        inner_error: Optional[BaseException] = None,
    ) -> None:
        self._request = request.snapshot()
        self._response = response.snapshot() if response is not None else None
        self._inner_error = inner_error
        super().__init__(
            self._build_message(),
            code=self._code_of(inner_error),
            cause=inner_error,
        )

    @classmethod
    def from_error(cls, error: "HttpError") -> "HttpError":
        """Re-create ``error`` as this error class, keeping its fields"""
        return cls(error.request, error.response, error.inner_error)

    @staticmethod
    def _code_of(inner_error: Optional[BaseException]) -> Optional[str]:
        code = getattr(inner_error, "code", None)
        if code is None:
            return None
        return getattr(code, "value", str(code))

    def _build_message(self) -> str:
        message = f"{self.label}: {self.method.value} {self.url}"
        if self._response is not None:
            message += f" {self._response.status} {self._response.status_text}".rstrip()
        if self._inner_error is not None and str(self._inner_error):
            message += f" - {self._inner_error}"
        return message

    @property
    def request(self) -> "HttpRequest":
        return self._request

    @property
    def response(self) -> Optional["HttpResponse[Any]"]:
        return self._response

    @property
    def inner_error(self) -> Optional[BaseException]:
        return self._inner_error

    @property
    def method(self) -> "HttpMethod":
        return self._request.method

    @property
    def url(self) -> str:
        if self._response is not None:
            return self._response.url
        return self._request.url

    @property
    def status(self) -> Optional[int]:
        return self._response.status if self._response is not None else None

    @property
    def status_text(self) -> Optional[str]:
        return self._response.status_text if self._response is not None else None

    @property
    def body(self) -> Any:
        return self._response.body if self._response is not None else None

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return self._response.headers if self._response is not None else None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "method": self.method.value,
            "url": self.url,
            "status": self.status,
            "status_text": self.status_text,
            "inner_error": repr(self._inner_error) if self._inner_error else None,
        })
        return data

    def get_description(self) -> str:
        description = super().get_description()
        if self.status is not None:
            description += f" (HTTP {self.status})"
        return description


class NetworkError(HttpError):
    """
    The exchange never completed: refused connection, gateway
    failure or a transport-reported network failure
    """

    kind = HttpErrorKind.NETWORK
    label = "Network error"


class AuthError(HttpError):
    """Authentication or authorization failure (401/403)"""

    kind = HttpErrorKind.AUTH
    label = "Authentication error"


class ConfigError(HttpClientError):
    """Configuration error"""

    kind = HttpErrorKind.CONFIG

    def __init__(
        self,
        message: str,
        code: str = "CONFIG_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class ValidationError(HttpClientError):
    """Validation error"""

    kind = HttpErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field
