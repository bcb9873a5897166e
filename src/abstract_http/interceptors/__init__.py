"""
Interceptor protocol and built-in interceptors
"""

from abstract_http.interceptors.base import (
    HttpInterceptor,
    RequestHook,
    ResponseHook,
    ErrorHook,
)
from abstract_http.interceptors.network_error import (
    NetworkErrorInterceptor,
    DEFAULT_NETWORK_ERROR_STATUSES,
)
from abstract_http.interceptors.auth_error import (
    AuthErrorInterceptor,
    DEFAULT_AUTH_ERROR_STATUSES,
)
from abstract_http.interceptors.request_logging import LoggingInterceptor

__all__ = [
    "HttpInterceptor",
    "RequestHook",
    "ResponseHook",
    "ErrorHook",
    "NetworkErrorInterceptor",
    "DEFAULT_NETWORK_ERROR_STATUSES",
    "AuthErrorInterceptor",
    "DEFAULT_AUTH_ERROR_STATUSES",
    "LoggingInterceptor",
]
