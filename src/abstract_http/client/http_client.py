"""
Transport-agnostic HTTP client
Runs every call through the interceptor pipeline and normalizes
transport failures into the HttpError taxonomy
"""

import inspect
import logging
from typing import Any, Dict, List, Optional, Tuple

from abstract_http.config import ClientConfig
from abstract_http.exceptions import ConfigError, HttpError, NetworkError
from abstract_http.interceptors import (
    AuthErrorInterceptor,
    HttpInterceptor,
    LoggingInterceptor,
    NetworkErrorInterceptor,
)
from abstract_http.models import (
    HttpMethod,
    HttpRequest,
    HttpResponse,
    OnProgress,
    RequestOptions,
    ResponseBodyConversion,
)
from abstract_http.transport import (
    HttpTransport,
    ProgressCallback,
    ProgressEvent,
    RequestsTransport,
    ResponseType,
    TransportError,
    TransportErrorCode,
    TransportRequest,
    TransportResponse,
)
from abstract_http.url import UrlResolver


# Logger for this module
logger = logging.getLogger(__name__)


RESPONSE_TYPES = {
    ResponseBodyConversion.JSON: ResponseType.JSON,
    ResponseBodyConversion.STREAM: ResponseType.STREAM,
    ResponseBodyConversion.ARRAY_BUFFER: ResponseType.BINARY,
}


class HttpClient:
    """
    HTTP client facade

    Features:
    - Verb helpers (GET/POST/PUT/PATCH/DELETE/HEAD) and a general ``send``
    - Request/response/error interceptors, run in registration order
    - Failures normalized into HttpError, NetworkError or AuthError
    - Pluggable transport, ``requests`` by default

    Example:
        >>> client = HttpClient("https://api.example.com")
        >>> response = await client.get("/users/1")
        >>> print(response.body)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[HttpTransport] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        """
        Create a new HTTP client instance

        Args:
            base_url: Root URL relative request URLs are resolved against
            transport: Transport adapter, a RequestsTransport if omitted
            config: Optional client configuration
        """
        self.config = config or ClientConfig()
        self._base_url = base_url if base_url is not None else self.config.base_url
        self._owns_transport = transport is None
        self._transport = transport or RequestsTransport(timeout=self.config.timeout)

        self._interceptors: List[HttpInterceptor] = []
        self._error_interceptors: List[HttpInterceptor] = [
            NetworkErrorInterceptor(
                statuses=self.config.network_error_statuses,
                message=self.config.network_error_message,
            ),
        ]

        if self.config.enable_auth_errors:
            self.add_interceptor(AuthErrorInterceptor())
        if self.config.enable_request_log:
            self.add_interceptor(LoggingInterceptor())

    @property
    def base_url(self) -> Optional[str]:
        """Get base URL"""
        return self._base_url

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    @property
    def interceptors(self) -> Tuple[HttpInterceptor, ...]:
        """Interceptors run on requests and responses"""
        return tuple(self._interceptors)

    @property
    def error_interceptors(self) -> Tuple[HttpInterceptor, ...]:
        """Error chain, built-in network interceptor first"""
        return tuple(self._error_interceptors)

    def add_interceptor(self, interceptor: HttpInterceptor) -> None:
        """
        Register an interceptor

        It joins the request/response phases unconditionally and the error
        chain only when it has an ``on_error`` hook. Must not be called
        while requests are in flight.
        """
        self._interceptors.append(interceptor)
        if getattr(interceptor, "on_error", None) is not None:
            self._error_interceptors.append(interceptor)

    async def get(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[RequestOptions] = None,
    ) -> HttpResponse[Any]:
        """Perform GET request"""
        return await self.send(self._request(HttpMethod.GET, url, None, headers, options))

    async def post(
        self,
        url: str,
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[RequestOptions] = None,
    ) -> HttpResponse[Any]:
        """Perform POST request"""
        return await self.send(self._request(HttpMethod.POST, url, body, headers, options))

    async def put(
        self,
        url: str,
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[RequestOptions] = None,
    ) -> HttpResponse[Any]:
        """Perform PUT request"""
        return await self.send(self._request(HttpMethod.PUT, url, body, headers, options))

    async def patch(
        self,
        url: str,
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[RequestOptions] = None,
    ) -> HttpResponse[Any]:
        """Perform PATCH request"""
        return await self.send(self._request(HttpMethod.PATCH, url, body, headers, options))

    async def delete(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[RequestOptions] = None,
    ) -> HttpResponse[Any]:
        """Perform DELETE request"""
        return await self.send(self._request(HttpMethod.DELETE, url, None, headers, options))

    async def head(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        options: Optional[RequestOptions] = None,
    ) -> HttpResponse[Any]:
        """Perform HEAD request"""
        return await self.send(self._request(HttpMethod.HEAD, url, None, headers, options))

    def _request(
        self,
        method: HttpMethod,
        url: str,
        body: Optional[Any],
        headers: Optional[Dict[str, str]],
        options: Optional[RequestOptions],
    ) -> HttpRequest:
        return HttpRequest(
            method=method,
            url=url,
            body=body,
            headers=dict(headers) if headers else {},
            options=options or RequestOptions(),
        )

    async def send(self, request: HttpRequest) -> HttpResponse[Any]:
        """
        Send a request through the interceptor pipeline

        Args:
            request: Request to send, mutated in place by request interceptors

        Returns:
            Response after all response interceptors ran

        Raises:
            ConfigError: If the response body conversion is not supported
            HttpError: Or whatever the error interceptor chain produced
        """
        await self._intercept_request(request)
        transport_request = self._build_transport_request(request)

        logger.debug(f"Dispatching {request.method.value} {request.url}")
        try:
            raw = await self._transport.request(transport_request)
        except Exception as e:
            error = self._handle_error(e, request)
            logger.warning(
                f"{request.method.value} {request.url} failed: "
                f"{type(error).__name__}: {error}"
            )
            raise error

        response = self._create_response(raw, request)
        await self._intercept_response(response)
        return response

    async def _intercept_request(self, request: HttpRequest) -> None:
        for interceptor in self._interceptors:
            hook = getattr(interceptor, "on_request", None)
            if hook is None:
                continue
            result = hook(request)
            if inspect.isawaitable(result):
                await result

    async def _intercept_response(self, response: HttpResponse[Any]) -> None:
        for interceptor in self._interceptors:
            hook = getattr(interceptor, "on_response", None)
            if hook is None:
                continue
            result = hook(response)
            if inspect.isawaitable(result):
                await result

    def _build_transport_request(self, request: HttpRequest) -> TransportRequest:
        options = request.options
        return TransportRequest(
            method=request.method.value,
            url=request.url,
            base_url=self._base_url,
            body=request.body,
            headers=dict(request.headers),
            response_type=self._response_type(options.response_body_conversion),
            on_upload_progress=self._progress_handler(options.on_upload_progress),
        )

    def _response_type(self, conversion: Any) -> ResponseType:
        try:
            return RESPONSE_TYPES[conversion]
        except (KeyError, TypeError):
            raise ConfigError(
                f"Unsupported response body conversion: {conversion}",
                code="UNSUPPORTED_RESPONSE_BODY_CONVERSION",
            ) from None

    def _progress_handler(
        self, on_progress: Optional[OnProgress]
    ) -> Optional[ProgressCallback]:
        if on_progress is None:
            return None

        def handler(event: ProgressEvent) -> None:
            # Unknown totals cannot be turned into a percentage
            if not event.total:
                return
            on_progress(min(event.loaded * 100 / event.total, 100))

        return handler

    def _create_response(
        self, raw: TransportResponse, request: HttpRequest
    ) -> HttpResponse[Any]:
        return HttpResponse(
            method=request.method,
            status=raw.status,
            status_text=raw.status_text,
            url=UrlResolver(self._base_url, raw.url or request.url).absolute_url,
            headers=dict(raw.headers),
            body=raw.body,
            request=request,
        )

    def _handle_error(self, e: Exception, request: HttpRequest) -> Exception:
        """Fold the classified error through the error interceptor chain"""
        error: Exception = self._create_http_error(e, request)
        for interceptor in self._error_interceptors:
            error = interceptor.on_error(error, request)
        return error

    def _create_http_error(self, e: Exception, request: HttpRequest) -> HttpError:
        partial = e.response if isinstance(e, TransportError) else None
        url = UrlResolver(self._base_url, request.url).absolute_url

        if isinstance(e, TransportError) and e.code == TransportErrorCode.CONNECTION_REFUSED:
            response = HttpResponse(
                method=request.method,
                status=0,
                status_text=TransportErrorCode.CONNECTION_REFUSED.value,
                url=url,
                headers=dict(partial.headers) if partial is not None else {},
                body=partial.body if partial is not None else None,
                request=request,
            )
            return NetworkError(request, response, e)

        if partial is None:
            return HttpError(request, None, e)

        response = HttpResponse(
            method=request.method,
            status=partial.status or 0,
            status_text=partial.status_text or "",
            url=url,
            headers=dict(partial.headers),
            body=partial.body,
            request=request,
        )
        return HttpError(request, response, e)

    def close(self) -> None:
        """Close the transport if this client created it"""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> "HttpClient":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit"""
        self.close()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
