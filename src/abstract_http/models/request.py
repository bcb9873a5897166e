"""Outbound request model"""

import copy
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from abstract_http.models.method import HttpMethod


# Upload progress callback, receives a 0-100 percentage
OnProgress = Callable[[float], None]


class ResponseBodyConversion(str, Enum):
    """How the response payload is decoded into ``HttpResponse.body``"""
    JSON = "json"
    STREAM = "stream"
    ARRAY_BUFFER = "arraybuffer"
    BINARY = "arraybuffer"


@dataclass
class RequestOptions:
    """Per-request options"""
    response_body_conversion: ResponseBodyConversion = ResponseBodyConversion.JSON
    on_upload_progress: Optional[OnProgress] = None


@dataclass
class HttpRequest:
    """
    Outbound HTTP call

    Request interceptors mutate it in place before dispatch; after that
    it is treated as read-only.
    """
    method: HttpMethod
    url: str
    body: Optional[Any] = None
    headers: Dict[str, str] = field(default_factory=dict)
    options: RequestOptions = field(default_factory=RequestOptions)

    def __post_init__(self) -> None:
        self.method = _to_method(self.method)
        if self.headers is None:
            self.headers = {}
        if self.options is None:
            self.options = RequestOptions()

    def snapshot(self) -> "HttpRequest":
        """Copy that shares no mutable containers with this request"""
        return replace(
            self,
            body=copy_body(self.body),
            headers=dict(self.headers),
            options=copy.copy(self.options),
        )


def copy_body(body: Any) -> Any:
    """Deep copy container bodies; immutable and stream bodies are shared"""
    if isinstance(body, (dict, list, bytearray)):
        return copy.deepcopy(body)
    return body


def _to_method(method: Union[HttpMethod, str]) -> HttpMethod:
    if isinstance(method, HttpMethod):
        return method
    return HttpMethod(str(method).upper())
