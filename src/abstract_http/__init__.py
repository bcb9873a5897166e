"""
Abstract HTTP client for Python

Main entry point for the library
"""

from abstract_http.client import HttpClient
from abstract_http.exceptions import (
    HttpClientError,
    HttpErrorKind,
    HttpError,
    NetworkError,
    AuthError,
    ConfigError,
    ValidationError,
)

# Models
from abstract_http.models import (
    HttpMethod,
    HttpRequest,
    HttpResponse,
    RequestOptions,
    ResponseBodyConversion,
)

# Interceptors
from abstract_http.interceptors import (
    HttpInterceptor,
    NetworkErrorInterceptor,
    AuthErrorInterceptor,
    LoggingInterceptor,
)

# Transport
from abstract_http.transport import (
    HttpTransport,
    RequestsTransport,
    TransportRequest,
    TransportResponse,
    TransportError,
    TransportErrorCode,
    ResponseType,
    ProgressEvent,
)

# URL helpers
from abstract_http.url import UrlResolver, QueryStringBuilder

# Configuration
from abstract_http.config import (
    ClientConfig,
    ConfigLoader,
    ConfigValidator,
    ConfigDefaults,
    ENV_VAR_MAPPING,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "HttpClient",
    # Exceptions
    "HttpClientError",
    "HttpErrorKind",
    "HttpError",
    "NetworkError",
    "AuthError",
    "ConfigError",
    "ValidationError",
    # Models
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "RequestOptions",
    "ResponseBodyConversion",
    # Interceptors
    "HttpInterceptor",
    "NetworkErrorInterceptor",
    "AuthErrorInterceptor",
    "LoggingInterceptor",
    # Transport
    "HttpTransport",
    "RequestsTransport",
    "TransportRequest",
    "TransportResponse",
    "TransportError",
    "TransportErrorCode",
    "ResponseType",
    "ProgressEvent",
    # URL helpers
    "UrlResolver",
    "QueryStringBuilder",
    # Configuration
    "ClientConfig",
    "ConfigLoader",
    "ConfigValidator",
    "ConfigDefaults",
    "ENV_VAR_MAPPING",
]
