"""Models module initialization"""

from abstract_http.models.method import HttpMethod
from abstract_http.models.request import (
    HttpRequest,
    RequestOptions,
    ResponseBodyConversion,
    OnProgress,
)
from abstract_http.models.response import HttpResponse

__all__ = [
    "HttpMethod",
    "HttpRequest",
    "RequestOptions",
    "ResponseBodyConversion",
    "OnProgress",
    "HttpResponse",
]
