"""Utilities module initialization"""

from abstract_http.utils.redaction import (
    SENSITIVE_FIELDS,
    REDACTED,
    redact_sensitive_data,
)

__all__ = ["SENSITIVE_FIELDS", "REDACTED", "redact_sensitive_data"]
