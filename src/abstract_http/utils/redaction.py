"""Redaction of sensitive values before logging"""

from typing import Any, Iterable


# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "cookie",
    "x-api-key",
    "api_key",
    "token",
    "password",
    "secret",
    "private_key",
]

REDACTED = "[REDACTED]"


def redact_sensitive_data(obj: Any, fields: Iterable[str] = SENSITIVE_FIELDS) -> Any:
    """
    Redact sensitive data from object for logging

    Dictionary keys containing any of ``fields`` (case-insensitive) have
    their values replaced; nested dicts and lists are walked.
    """
    fields = list(fields)

    if isinstance(obj, list):
        return [redact_sensitive_data(item, fields) for item in obj]

    if isinstance(obj, dict):
        redacted = {}
        for key, value in obj.items():
            lower_key = str(key).lower()
            if any(field in lower_key for field in fields):
                redacted[key] = REDACTED
            elif isinstance(value, (dict, list)):
                redacted[key] = redact_sensitive_data(value, fields)
            else:
                redacted[key] = value
        return redacted

    return obj
