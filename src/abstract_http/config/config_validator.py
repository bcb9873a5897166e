"""
Configuration Validator
Validates HTTP client configuration with clear error messages
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Validates a raw configuration dictionary before it becomes a ClientConfig
    """

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire configuration dictionary

        Args:
            config: Configuration dictionary to validate

        Returns:
            ValidationResult with any errors
        """
        self._errors = []

        self._validate_base_url(config)
        self._validate_timeout(config)
        self._validate_network_error_statuses(config)
        self._validate_flags(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Raises:
            ValidationError: If configuration is invalid
        """
        from abstract_http.exceptions import ValidationError

        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise ValidationError(
                f"Configuration validation failed: {error_messages}",
                field=result.errors[0].field,
            )

    def _validate_base_url(self, config: Dict[str, Any]) -> None:
        base_url = config.get("base_url")
        if base_url is None or base_url == "":
            return
        if not isinstance(base_url, str) or not base_url.startswith(("http://", "https://")):
            self._errors.append(ValidationErrorDetail(
                field="base_url",
                message="base_url must be a valid HTTP/HTTPS URL",
                value=base_url
            ))

    def _validate_timeout(self, config: Dict[str, Any]) -> None:
        timeout = config.get("timeout")
        if timeout is None:
            return
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            self._errors.append(ValidationErrorDetail(
                field="timeout",
                message="timeout must be a positive number (milliseconds)",
                value=timeout
            ))
        elif timeout < 1000:
            self._errors.append(ValidationErrorDetail(
                field="timeout",
                message="timeout should be at least 1000ms for reliable operation",
                value=timeout
            ))
        elif timeout > 300000:
            self._errors.append(ValidationErrorDetail(
                field="timeout",
                message="timeout should not exceed 300000ms (5 minutes)",
                value=timeout
            ))

    def _validate_network_error_statuses(self, config: Dict[str, Any]) -> None:
        statuses = config.get("network_error_statuses")
        if statuses is None:
            return
        if not isinstance(statuses, (list, tuple, set, frozenset)):
            self._errors.append(ValidationErrorDetail(
                field="network_error_statuses",
                message="network_error_statuses must be a list of status codes",
                value=statuses
            ))
            return
        for status in statuses:
            if isinstance(status, bool) or not isinstance(status, int) or not 0 <= status <= 599:
                self._errors.append(ValidationErrorDetail(
                    field="network_error_statuses",
                    message="network_error_statuses must contain integers between 0 and 599",
                    value=status
                ))

    def _validate_flags(self, config: Dict[str, Any]) -> None:
        for flag in ("enable_auth_errors", "enable_request_log"):
            value = config.get(flag)
            if value is not None and not isinstance(value, bool):
                self._errors.append(ValidationErrorDetail(
                    field=flag,
                    message=f"{flag} must be a boolean",
                    value=value
                ))
