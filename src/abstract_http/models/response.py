"""Response model"""

from dataclasses import dataclass, field, replace
from typing import Dict, Generic, Optional, TypeVar

from abstract_http.models.method import HttpMethod
from abstract_http.models.request import HttpRequest, copy_body


# Type variable for the decoded body
T = TypeVar("T")


@dataclass
class HttpResponse(Generic[T]):
    """HTTP response wrapper"""
    method: HttpMethod
    status: int
    status_text: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[T] = None
    request: Optional[HttpRequest] = field(default=None, compare=False, repr=False)

    def snapshot(self) -> "HttpResponse[T]":
        """Copy that shares no mutable containers with this response"""
        return replace(
            self,
            headers=dict(self.headers),
            body=copy_body(self.body),
            request=self.request.snapshot() if self.request is not None else None,
        )
