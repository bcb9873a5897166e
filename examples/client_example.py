"""
Usage Examples for the abstract HTTP client
Demonstrates configuration, interceptors and error handling
"""

import asyncio
import logging

from abstract_http import (
    AuthError,
    AuthErrorInterceptor,
    ClientConfig,
    ConfigLoader,
    HttpClient,
    HttpError,
    HttpInterceptor,
    HttpRequest,
    NetworkError,
    RequestOptions,
    ResponseBodyConversion,
)
from abstract_http.url import QueryStringBuilder


# =============================================================================
# Example 1: Configured Client
# =============================================================================

def configured_client_example() -> HttpClient:
    """Build a client from file, environment and programmatic settings"""
    loader = ConfigLoader()

    config = loader.load(
        env=True,  # HTTP_CLIENT_* variables override the defaults
        config={
            "base_url": "https://jsonplaceholder.typicode.com",
            "timeout": 10000,
            "enable_request_log": True,
        },
    )

    return HttpClient(config=config)


# =============================================================================
# Example 2: Custom Interceptors
# =============================================================================

class BearerTokenInterceptor(HttpInterceptor):
    """Adds an Authorization header to every request"""

    def __init__(self, token: str) -> None:
        super().__init__()
        self.token = token

    async def on_request(self, request: HttpRequest) -> None:
        request.headers["Authorization"] = f"Bearer {self.token}"


async def interceptor_example(client: HttpClient) -> None:
    """Register interceptors and fetch a resource"""
    client.add_interceptor(BearerTokenInterceptor("example-token"))
    client.add_interceptor(AuthErrorInterceptor())

    query = QueryStringBuilder()
    query.add("userId", 1)

    response = await client.get("/posts" + query.build())
    print(f"{response.status} {response.url}: {len(response.body)} posts")


# =============================================================================
# Example 3: Uploads and Binary Downloads
# =============================================================================

async def upload_example(client: HttpClient) -> None:
    """Report upload progress and download raw bytes"""
    options = RequestOptions(
        on_upload_progress=lambda percent: print(f"  uploaded {percent:.0f}%"),
    )
    response = await client.post("/posts", {"title": "hello", "userId": 1}, options=options)
    print(f"Created post {response.body.get('id')}")

    response = await client.get(
        "/posts/1",
        options=RequestOptions(response_body_conversion=ResponseBodyConversion.ARRAY_BUFFER),
    )
    print(f"Downloaded {len(response.body)} bytes")


# =============================================================================
# Example 4: Error Handling
# =============================================================================

async def error_handling_example(client: HttpClient) -> None:
    """Tell error kinds apart"""
    try:
        await client.get("/does-not-exist")
    except NetworkError as e:
        print(f"Network failure, retry later: {e}")
    except AuthError as e:
        print(f"Credentials rejected: {e}")
    except HttpError as e:
        print(f"Request failed: {e.get_description()}")
        print(f"  details: {e.to_dict()}")


# =============================================================================
# Run Examples
# =============================================================================

async def main() -> None:
    with configured_client_example() as client:
        await interceptor_example(client)
        await upload_example(client)
        await error_handling_example(client)

    # A client without configuration, using absolute URLs
    async with HttpClient(config=ClientConfig(timeout=5000)) as client:
        response = await client.head("https://example.com")
        print(f"HEAD example.com: {response.status}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    print("=== Abstract HTTP Client Examples ===\n")
    asyncio.run(main())
