"""
HTTP client configuration types and schema
Type-safe configuration objects for HttpClient
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ConfigDefaults:
    """Default configuration values"""
    TIMEOUT = 30000
    NETWORK_ERROR_STATUSES = [0, 502, 503, 504]
    NETWORK_ERROR_MESSAGE = "Network Error"
    ENABLE_AUTH_ERRORS = False
    ENABLE_REQUEST_LOG = False


# Environment variable mapping
ENV_VAR_MAPPING = {
    "HTTP_CLIENT_BASE_URL": "base_url",
    "HTTP_CLIENT_TIMEOUT": "timeout",
    "HTTP_CLIENT_NETWORK_ERROR_STATUSES": "network_error_statuses",
    "HTTP_CLIENT_NETWORK_ERROR_MESSAGE": "network_error_message",
    "HTTP_CLIENT_ENABLE_AUTH_ERRORS": "enable_auth_errors",
    "HTTP_CLIENT_ENABLE_REQUEST_LOG": "enable_request_log",
}


class ClientConfig(BaseModel):
    """
    Main HTTP client configuration
    Every field is optional; ``HttpClient`` arguments take precedence
    """

    base_url: Optional[str] = Field(
        default=None,
        description="Root URL that relative request URLs are resolved against"
    )
    timeout: Optional[int] = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Transport timeout in milliseconds",
        ge=1000,
        le=300000
    )
    network_error_statuses: List[int] = Field(
        default_factory=lambda: list(ConfigDefaults.NETWORK_ERROR_STATUSES),
        description="Status codes classified as network failures"
    )
    network_error_message: str = Field(
        default=ConfigDefaults.NETWORK_ERROR_MESSAGE,
        description="Transport failure message classified as a network failure",
        min_length=1
    )
    enable_auth_errors: bool = Field(
        default=ConfigDefaults.ENABLE_AUTH_ERRORS,
        description="Install AuthErrorInterceptor on new clients"
    )
    enable_request_log: bool = Field(
        default=ConfigDefaults.ENABLE_REQUEST_LOG,
        description="Install LoggingInterceptor on new clients"
    )

    model_config = {
        "str_strip_whitespace": True,
        "validate_assignment": True,
    }

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate base_url is a valid URL"""
        if v is not None and v != "":
            if not v.startswith(("http://", "https://")):
                raise ValueError("base_url must be a valid HTTP/HTTPS URL")
        return v

    @field_validator("network_error_statuses")
    @classmethod
    def validate_statuses(cls, v: List[int]) -> List[int]:
        """Validate status codes are within 0-599"""
        for status in v:
            if status < 0 or status > 599:
                raise ValueError(f"invalid status code: {status}")
        return v
