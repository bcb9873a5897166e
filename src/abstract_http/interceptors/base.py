"""Interceptor protocol"""

from typing import Any, Awaitable, Callable, Optional, Union

from abstract_http.models import HttpRequest, HttpResponse


# Hooks may be plain functions or coroutines
RequestHook = Callable[[HttpRequest], Union[None, Awaitable[None]]]
ResponseHook = Callable[[HttpResponse[Any]], Union[None, Awaitable[None]]]
ErrorHook = Callable[[Exception, HttpRequest], Exception]


class HttpInterceptor:
    """
    Handler invoked by ``HttpClient`` at each pipeline phase

    All three hooks are optional. A hook left as ``None`` is skipped in its
    phase. Define them as methods on a subclass, or pass them in:

        >>> client.add_interceptor(HttpInterceptor(on_request=add_token))

    ``on_request``/``on_response`` mutate their argument in place and may be
    coroutines. ``on_error`` is synchronous and returns the error to pass on,
    either the one it received or a replacement.
    """

    on_request: Optional[RequestHook] = None
    on_response: Optional[ResponseHook] = None
    on_error: Optional[ErrorHook] = None

    def __init__(
        self,
        on_request: Optional[RequestHook] = None,
        on_response: Optional[ResponseHook] = None,
        on_error: Optional[ErrorHook] = None,
    ) -> None:
        if on_request is not None:
            self.on_request = on_request
        if on_response is not None:
            self.on_response = on_response
        if on_error is not None:
            self.on_error = on_error
