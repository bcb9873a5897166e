"""
Configuration Loader
Loads HTTP client configuration from the environment and from code
"""

import os
from typing import Any, Dict, List, Optional

from abstract_http.config.client_config import (
    ClientConfig,
    ENV_VAR_MAPPING,
)
from abstract_http.config.config_validator import ConfigValidator


class ConfigLoader:
    """
    ConfigLoader class
    Provides multiple ways to load and merge configuration
    """

    def __init__(self) -> None:
        self._validator = ConfigValidator()

    def from_environment(self) -> Dict[str, Any]:
        """
        Load configuration from HTTP_CLIENT_* environment variables

        Returns:
            Configuration dictionary from environment variables
        """
        config: Dict[str, Any] = {}

        for env_var, config_key in ENV_VAR_MAPPING.items():
            value = os.environ.get(env_var)
            if value is not None and value != "":
                config[config_key] = self._parse_env_value(config_key, value)

        return config

    def from_dict(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of a programmatic configuration dictionary"""
        return config.copy()

    def merge(self, *sources: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple configuration sources
        Priority: later sources override earlier sources

        Args:
            sources: Configuration dictionaries in order of increasing priority

        Returns:
            Merged configuration dictionary
        """
        merged: Dict[str, Any] = {}

        for source in sources:
            merged.update(self._filter_none(source))

        return merged

    def resolve(self, config: Dict[str, Any]) -> ClientConfig:
        """
        Resolve configuration with defaults and validation

        Raises:
            ValidationError: If configuration is invalid
        """
        self._validator.validate_or_raise(config)
        return ClientConfig(**config)

    def load(
        self,
        env: bool = True,
        config: Optional[Dict[str, Any]] = None,
    ) -> ClientConfig:
        """
        Load, merge, and resolve configuration from multiple sources

        Args:
            env: Whether to load from environment variables (default: True)
            config: Programmatic configuration dictionary (optional)

        Returns:
            Fully resolved ClientConfig object
        """
        sources: List[Dict[str, Any]] = []

        if env:
            sources.append(self.from_environment())

        if config is not None:
            sources.append(self.from_dict(config))

        return self.resolve(self.merge(*sources))

    def _parse_env_value(self, key: str, value: str) -> Any:
        """Parse environment variable value to appropriate type"""
        if key in ("enable_auth_errors", "enable_request_log"):
            return value.lower() in ("true", "1", "yes")

        if key == "timeout":
            try:
                return int(value)
            except ValueError:
                return value

        if key == "network_error_statuses":
            try:
                return [int(part) for part in value.split(",") if part.strip()]
            except ValueError:
                return value

        return value

    def _filter_none(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Filter out None values from config dictionary"""
        return {k: v for k, v in config.items() if v is not None}
