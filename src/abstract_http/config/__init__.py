"""
Configuration module
"""

from abstract_http.config.client_config import (
    ClientConfig,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from abstract_http.config.config_loader import ConfigLoader
from abstract_http.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "ClientConfig",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
