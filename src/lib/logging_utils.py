"""
Logging Utilities
=================

Helpers for logging values that originate from client session state.

For On-Call Engineers:
    Role slugs, module ids and persisted session payloads are supplied by
    the identity backend or restored from browser storage. They are never
    trusted for log formatting. If a log line looks truncated or has
    spaces where newlines were expected, that is sanitize_for_log at work.

For Developers:
    - Pass any client-derived string through sanitize_for_log() before
      putting it in a log message or `extra` field.
    - Pass whole payloads (persisted state, user records) through
      redact_sensitive_fields(); tokens must never reach the logs.
    - Log exceptions with get_safe_error_info(), never with str(exc).
"""

import re
from typing import Any

# Maximum length for logged client input to prevent log flooding
MAX_LOG_INPUT_LENGTH = 200

# Field names that should never be logged
SENSITIVE_FIELDS = {
    "password",
    "secret",
    "token",
    "api_key",
    "apikey",
    "authorization",
    "credential",
    "credentials",
}

REDACTED = "***REDACTED***"


def sanitize_for_log(value: Any, max_length: int = MAX_LOG_INPUT_LENGTH) -> str:
    """
    Sanitize a value for safe logging by removing control characters and
    limiting length.

    Args:
        value: Value to sanitize (will be converted to string)
        max_length: Maximum length of output (default: 200)

    Returns:
        Sanitized string safe for logging

    Example:
        >>> sanitize_for_log("platform-sales\\n[FAKE] granted")
        'platform-sales [FAKE] granted'
    """
    text = str(value)

    text = text.replace("\r", " ").replace("\n", " ").replace("\t", " ")
    text = re.sub(r"[\x00-\x1f\x7f-\x9f]", " ", text)

    if len(text) > max_length:
        text = text[:max_length] + "..."

    return text


def get_safe_error_info(exception: BaseException) -> dict[str, str]:
    """
    Extract safe information from an exception for logging.

    Only the exception type is returned. Messages from JSON and pydantic
    errors echo the offending input, which may include a bearer token.

    Example:
        >>> get_safe_error_info(ValueError("eyJhbGciOi..."))
        {'error_type': 'ValueError'}
    """
    return {"error_type": type(exception).__name__}


def redact_sensitive_fields(data: dict[str, Any]) -> dict[str, Any]:
    """
    Redact sensitive fields from a dictionary before logging.

    Matching is case-insensitive on the field name and recurses into
    nested dictionaries. The input is not modified.

    Example:
        >>> redact_sensitive_fields({"userType": "finance", "token": "abc"})
        {'userType': 'finance', 'token': '***REDACTED***'}
    """
    result: dict[str, Any] = {}
    for key, value in data.items():
        if any(sensitive in str(key).lower() for sensitive in SENSITIVE_FIELDS):
            result[key] = REDACTED
        elif isinstance(value, dict):
            result[key] = redact_sensitive_fields(value)
        else:
            result[key] = value
    return result
