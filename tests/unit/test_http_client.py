"""
HttpClient Unit Tests
"""

from typing import Any, Optional

import pytest

from abstract_http import (
    AuthError,
    AuthErrorInterceptor,
    ClientConfig,
    ConfigError,
    HttpClient,
    HttpError,
    HttpErrorKind,
    HttpInterceptor,
    HttpMethod,
    HttpRequest,
    HttpResponse,
    NetworkError,
    NetworkErrorInterceptor,
    RequestOptions,
    ResponseBodyConversion,
    ResponseType,
    TransportError,
    TransportErrorCode,
    TransportResponse,
)
from abstract_http.transport import ProgressEvent


ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]
BODY_METHODS = ["POST", "PUT", "PATCH"]


async def call(
    client: HttpClient,
    method: str,
    url: str,
    body: Any = None,
    headers: Optional[dict] = None,
    options: Optional[RequestOptions] = None,
) -> HttpResponse:
    verb = getattr(client, method.lower())
    if method in BODY_METHODS:
        return await verb(url, body, headers, options)
    return await verb(url, headers, options)


def http_error(status: int, body: Any = "Page not found") -> TransportError:
    return TransportError.bad_response(TransportResponse(status=status, body=body))


class AppendHelloInterceptor(HttpInterceptor):
    async def on_request(self, request: HttpRequest) -> None:
        request.url += "/hello"

    async def on_response(self, response: HttpResponse) -> None:
        response.body += "/hello"


class MyError(Exception):
    pass


class MyOtherError(Exception):
    pass


class MyErrorOnStatusCodeInterceptor(HttpInterceptor):
    def __init__(self, expected_status: int) -> None:
        super().__init__()
        self.expected_status = expected_status

    def on_error(self, error: Exception, request: HttpRequest) -> Exception:
        if not isinstance(error, HttpError) or error.status != self.expected_status:
            return error
        return MyError()


class MyOtherErrorOnMyErrorInterceptor(HttpInterceptor):
    def on_error(self, error: Exception, request: HttpRequest) -> Exception:
        if not isinstance(error, MyError):
            return error
        return MyOtherError()


@pytest.fixture
def client(transport) -> HttpClient:
    return HttpClient("", transport)


class TestVerbs:
    """Tests shared by every verb helper"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ALL_METHODS)
    async def test_executes_request_to_url(self, client, transport, method):
        """Should dispatch the verb to the given URL"""
        response = await call(client, method, "http://server.com/page?param1=45")

        assert transport.last_request.method == method
        assert transport.last_request.url == "http://server.com/page?param1=45"
        assert response.method == HttpMethod(method)
        assert response.url == "http://server.com/page?param1=45"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ALL_METHODS)
    async def test_custom_headers(self, client, transport, method):
        """Should forward custom headers"""
        await call(client, method, "http://server.com/page", headers={"myHeader": "1"})

        assert transport.last_request.headers["myHeader"] == "1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ALL_METHODS)
    @pytest.mark.parametrize("base_url", ["http://server.com/", "http://server.com"])
    async def test_url_is_absolute(self, transport, method, base_url):
        """Should resolve the response URL against the base URL"""
        client = HttpClient(base_url, transport)

        response = await call(client, method, "/page?param1=45")

        assert response.url == "http://server.com/page?param1=45"
        assert transport.last_request.base_url == base_url

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ALL_METHODS)
    async def test_response_body(self, client, transport, method):
        """Should expose the transport body"""
        transport.set_response_body("some body")

        response = await call(client, method, "/page?param1=45")

        assert response.body == "some body"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ALL_METHODS)
    async def test_request_back_reference(self, client, method):
        """Should keep the originating request on the response"""
        response = await call(client, method, "/page?param1=45")

        assert response.request.method == HttpMethod(method)
        assert response.request.url == "/page?param1=45"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ALL_METHODS)
    @pytest.mark.parametrize("status", [200, 404, 500])
    async def test_status(self, client, transport, method, status):
        """Should expose the response status code"""
        transport.set_response_status(status)

        response = await call(client, method, "/page?param1=45")

        assert response.status == status

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ALL_METHODS)
    async def test_response_headers(self, client, transport, method):
        """Should expose the response headers"""
        transport.set_response_header("Content-Type", "application/json")
        transport.set_response_header("Server", "Apache")

        response = await call(client, method, "/page?param1=45")

        assert response.headers == {"Content-Type": "application/json", "Server": "Apache"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", BODY_METHODS)
    async def test_sends_request_body(self, client, transport, method):
        """Should send the body for POST/PUT/PATCH"""
        body = {"userId": 1, "newName": "Hector"}

        response = await call(client, method, "/page?param1=45", body)

        assert transport.last_request.body == body
        assert response.request.body == body

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "DELETE", "HEAD"])
    async def test_no_body_without_payload_verbs(self, client, transport, method):
        """Should send no body for GET/DELETE/HEAD"""
        await call(client, method, "/page")

        assert transport.last_request.body is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ALL_METHODS)
    async def test_network_error(self, client, transport, method):
        """Should raise NetworkError on a transport network failure"""
        transport.set_request_error(Exception("Network Error"))

        with pytest.raises(NetworkError):
            await call(client, method, "http://notfound.com")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ALL_METHODS)
    async def test_http_error(self, client, transport, method):
        """Should raise a plain HttpError for an error status"""
        transport.set_request_error(http_error(404))

        with pytest.raises(HttpError) as exc_info:
            await call(client, method, "http://notfound.com")

        assert type(exc_info.value) is HttpError
        assert exc_info.value.status == 404
        assert exc_info.value.body == "Page not found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ALL_METHODS)
    async def test_error_interceptor_fold(self, client, transport, method):
        """Should feed each error interceptor the previous one's result"""
        transport.set_request_error(http_error(426, "Must update"))
        client.add_interceptor(MyErrorOnStatusCodeInterceptor(426))
        client.add_interceptor(MyOtherErrorOnMyErrorInterceptor())

        with pytest.raises(MyOtherError):
            await call(client, method, "http://server.com/page")


class TestSend:
    """Tests for HttpClient.send"""

    @pytest.mark.asyncio
    async def test_send_request(self, client, transport):
        """Should execute the request with its method and URL"""
        response = await client.send(
            HttpRequest(HttpMethod.POST, "http://server.com/page?param1=45")
        )

        assert transport.last_request.method == "POST"
        assert response.method == HttpMethod.POST
        assert response.url == "http://server.com/page?param1=45"

    @pytest.mark.asyncio
    async def test_send_accepts_string_method(self, client, transport):
        """Should accept a plain method name"""
        await client.send(HttpRequest("patch", "http://server.com/page"))

        assert transport.last_request.method == "PATCH"

    @pytest.mark.asyncio
    async def test_upload_progress(self, client, transport):
        """Should notify upload progress as a percentage"""
        notified = []
        request = HttpRequest(HttpMethod.POST, "http://server.com/page")
        request.options.on_upload_progress = notified.append
        await client.send(request)

        transport.notify_upload_progress(ProgressEvent(loaded=10000000, total=20000000))
        transport.notify_upload_progress(ProgressEvent(loaded=15000000, total=20000000))
        transport.notify_upload_progress(ProgressEvent(loaded=20000000, total=20000000))

        assert notified == [50, 75, 100]

    @pytest.mark.asyncio
    async def test_upload_progress_is_capped(self, client, transport):
        """Should never report more than 100"""
        notified = []
        await client.post(
            "/upload", b"data", options=RequestOptions(on_upload_progress=notified.append)
        )

        transport.notify_upload_progress(ProgressEvent(loaded=30, total=20))
        transport.notify_upload_progress(ProgressEvent(loaded=10, total=None))

        assert notified == [100]

    @pytest.mark.asyncio
    async def test_no_progress_handler_without_callback(self, client, transport):
        """Should not wire a progress handler when none is requested"""
        await client.post("/upload", b"data")

        assert transport.last_request.on_upload_progress is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "conversion, response_type",
        [
            (ResponseBodyConversion.JSON, ResponseType.JSON),
            (ResponseBodyConversion.STREAM, ResponseType.STREAM),
            (ResponseBodyConversion.ARRAY_BUFFER, ResponseType.BINARY),
            (ResponseBodyConversion.BINARY, ResponseType.BINARY),
        ],
    )
    async def test_response_body_conversion(self, client, transport, conversion, response_type):
        """Should map body conversions to transport parsing modes"""
        buffer = bytes(100)
        transport.set_response_body(buffer)

        response = await client.get(
            "/page", options=RequestOptions(response_body_conversion=conversion)
        )

        assert transport.last_request.response_type == response_type
        assert response.body == buffer

    @pytest.mark.asyncio
    async def test_unsupported_body_conversion(self, client, transport):
        """Should fail before dispatch on an unknown conversion"""
        request = HttpRequest(HttpMethod.GET, "/page")
        request.options.response_body_conversion = "xml"

        with pytest.raises(ConfigError) as exc_info:
            await client.send(request)

        assert exc_info.value.has_code("UNSUPPORTED_RESPONSE_BODY_CONVERSION")
        assert transport.calls == 0

    @pytest.mark.asyncio
    async def test_default_options_are_not_shared(self, client):
        """Should give each request its own options"""
        first = HttpRequest(HttpMethod.GET, "/a")
        first.options.on_upload_progress = print
        second = HttpRequest(HttpMethod.GET, "/b")

        assert second.options.on_upload_progress is None


class TestInterceptors:
    """Tests for the interceptor pipeline"""

    @pytest.mark.asyncio
    async def test_intercepts_requests(self, client, transport):
        """Should let interceptors mutate the request before dispatch"""
        client.add_interceptor(AppendHelloInterceptor())

        await client.get("http://server.com/page")

        assert transport.last_request.url == "http://server.com/page/hello"

    @pytest.mark.asyncio
    async def test_intercepts_responses(self, client, transport):
        """Should let interceptors mutate the response"""
        transport.set_response_body("some body")
        client.add_interceptor(AppendHelloInterceptor())

        response = await client.get("http://server.com/page")

        assert response.body == "some body/hello"

    @pytest.mark.asyncio
    async def test_request_interceptors_run_in_order(self, client, transport):
        """Should let later interceptors see earlier mutations"""
        seen = []

        async def first(request):
            request.headers["X-Trace"] = "1"

        async def second(request):
            seen.append(dict(request.headers))
            request.headers["X-Trace"] += ",2"

        client.add_interceptor(HttpInterceptor(on_request=first))
        client.add_interceptor(HttpInterceptor(on_request=second))

        await client.get("/page")

        assert seen == [{"X-Trace": "1"}]
        assert transport.last_request.headers["X-Trace"] == "1,2"

    @pytest.mark.asyncio
    async def test_sync_hooks(self, client, transport):
        """Should accept plain functions as hooks"""
        transport.set_response_body("body")

        def on_request(request):
            request.url = "/changed"

        def on_response(response):
            response.body = response.body.upper()

        client.add_interceptor(HttpInterceptor(on_request=on_request, on_response=on_response))

        response = await client.get("/page")

        assert transport.last_request.url == "/changed"
        assert response.body == "BODY"

    def test_network_interceptor_installed_first(self, client):
        """Should start the error chain with the network interceptor"""
        client.add_interceptor(MyOtherErrorOnMyErrorInterceptor())

        assert isinstance(client.error_interceptors[0], NetworkErrorInterceptor)
        assert len(client.error_interceptors) == 2

    def test_error_chain_only_with_on_error(self, client):
        """Should skip the error chain for interceptors without on_error"""
        interceptor = AppendHelloInterceptor()

        client.add_interceptor(interceptor)

        assert interceptor in client.interceptors
        assert interceptor not in client.error_interceptors

    @pytest.mark.asyncio
    async def test_intercepts_errors(self, client, transport):
        """Should raise the error returned by an error interceptor"""
        transport.set_request_error(http_error(426, "Must update"))
        client.add_interceptor(MyErrorOnStatusCodeInterceptor(426))

        with pytest.raises(MyError):
            await client.get("http://server.com/page")

    @pytest.mark.asyncio
    async def test_request_hook_failure_propagates(self, client, transport):
        """Should raise request hook failures unchanged"""

        def broken(request):
            raise RuntimeError("boom")

        client.add_interceptor(HttpInterceptor(on_request=broken))

        with pytest.raises(RuntimeError, match="boom"):
            await client.get("/page")
        assert transport.calls == 0

    @pytest.mark.asyncio
    async def test_response_hooks_skipped_on_failure(self, client, transport):
        """Should not run response hooks when the transport fails"""
        transport.set_request_error(http_error(500))
        calls = []
        client.add_interceptor(HttpInterceptor(on_response=calls.append))

        with pytest.raises(HttpError):
            await client.get("/page")

        assert calls == []


class TestErrorClassification:
    """Tests for failure normalization"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [502, 503, 504])
    async def test_gateway_statuses_are_network_errors(self, client, transport, status):
        """Should classify gateway failures as network errors"""
        transport.set_request_error(http_error(status))

        with pytest.raises(NetworkError) as exc_info:
            await client.get("http://server.com/page")

        assert exc_info.value.status == status
        assert exc_info.value.kind is HttpErrorKind.NETWORK

    @pytest.mark.asyncio
    async def test_connection_refused(self, transport):
        """Should raise a NetworkError with status 0 on refused connections"""
        client = HttpClient("http://server.com", transport)
        transport.set_request_error(TransportError.connection_refused())

        with pytest.raises(NetworkError) as exc_info:
            await client.get("/page")

        error = exc_info.value
        assert error.status == 0
        assert error.status_text == "ECONNREFUSED"
        assert error.headers == {}
        assert error.url == "http://server.com/page"
        assert error.code == TransportErrorCode.CONNECTION_REFUSED.value

    @pytest.mark.asyncio
    async def test_failure_without_response(self, client, transport):
        """Should leave response fields empty when nothing was received"""
        transport.set_request_error(ValueError("unexpected"))

        with pytest.raises(HttpError) as exc_info:
            await client.get("/page")

        error = exc_info.value
        assert type(error) is HttpError
        assert error.response is None
        assert error.status is None
        assert error.status_text is None
        assert error.body is None
        assert error.headers is None
        assert error.url == "/page"

    @pytest.mark.asyncio
    async def test_inner_error_is_transport_failure(self, client, transport):
        """Should keep the original transport failure as inner error"""
        failure = Exception("Network Error")
        transport.set_request_error(failure)

        with pytest.raises(NetworkError) as exc_info:
            await client.get("/page")

        assert exc_info.value.inner_error is failure

    @pytest.mark.asyncio
    async def test_auth_error(self, client, transport):
        """Should raise AuthError for 401 when the auth interceptor is registered"""
        transport.set_request_error(http_error(401, "Unauthorized"))
        client.add_interceptor(AuthErrorInterceptor())

        with pytest.raises(AuthError) as exc_info:
            await client.get("/page")

        assert exc_info.value.status == 401
        assert exc_info.value.body == "Unauthorized"

    @pytest.mark.asyncio
    async def test_auth_error_is_opt_in(self, client, transport):
        """Should raise a plain HttpError for 401 by default"""
        transport.set_request_error(http_error(401))

        with pytest.raises(HttpError) as exc_info:
            await client.get("/page")

        assert type(exc_info.value) is HttpError

    @pytest.mark.asyncio
    async def test_error_keeps_request_snapshot(self, client, transport):
        """Should not reflect request mutations made after the failure"""
        transport.set_request_error(http_error(500))
        request = HttpRequest(HttpMethod.GET, "/page", headers={"A": "1"})

        with pytest.raises(HttpError) as exc_info:
            await client.send(request)
        request.headers["A"] = "2"
        request.url = "/other"

        assert exc_info.value.request.headers == {"A": "1"}
        assert exc_info.value.request.url == "/page"


class TestConfiguredClient:
    """Tests for clients built from ClientConfig"""

    @pytest.mark.asyncio
    async def test_base_url_from_config(self, transport):
        """Should use the configured base URL"""
        client = HttpClient(transport=transport, config=ClientConfig(base_url="http://server.com"))

        response = await client.get("/page")

        assert response.url == "http://server.com/page"

    @pytest.mark.asyncio
    async def test_explicit_base_url_wins(self, transport):
        """Should prefer the constructor base URL over the configured one"""
        client = HttpClient(
            "http://explicit.com", transport, ClientConfig(base_url="http://server.com")
        )

        response = await client.get("/page")

        assert response.url == "http://explicit.com/page"

    @pytest.mark.asyncio
    async def test_custom_network_statuses(self, transport):
        """Should classify the configured statuses as network failures"""
        client = HttpClient(
            transport=transport, config=ClientConfig(network_error_statuses=[599])
        )
        transport.set_request_error(http_error(599))

        with pytest.raises(NetworkError):
            await client.get("/page")

        transport.set_request_error(http_error(503))
        with pytest.raises(HttpError) as exc_info:
            await client.get("/page")
        assert type(exc_info.value) is HttpError

    @pytest.mark.asyncio
    async def test_enable_auth_errors(self, transport):
        """Should install the auth interceptor when configured"""
        client = HttpClient(transport=transport, config=ClientConfig(enable_auth_errors=True))
        transport.set_request_error(http_error(403))

        with pytest.raises(AuthError):
            await client.get("/page")

    def test_close_leaves_injected_transport_open(self, transport):
        """Should only close transports the client created"""
        with HttpClient(transport=transport):
            pass

        assert transport.closed is False
