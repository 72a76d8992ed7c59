"""Redaction of secrets and contact details before logging.

Request payloads carry names, phone numbers and e-mail addresses; headers
carry the access token. Both pass through here before reaching a log line
or an error message.
"""

import re

# Substring patterns matched case-insensitively against dict keys
_DEFAULT_SENSITIVE_PATTERNS = frozenset({
    "token", "authorization", "secret", "password", "api_key",
    "email", "phone",
})

# Keys whose entire value is redacted regardless of content type
_CONTAINER_KEYS = frozenset({"headers", "credentials"})

_REDACTED = "***REDACTED***"


def _is_sensitive_key(key: str, sensitive_patterns: frozenset[str]) -> bool:
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in sensitive_patterns)


def redact_for_logging(
    obj: dict,
    sensitive_patterns: frozenset[str] = _DEFAULT_SENSITIVE_PATTERNS,
) -> dict:
    """Redact sensitive values from a payload for safe logging.

    Args:
        obj: Dict to redact (not mutated; a copy is returned).
        sensitive_patterns: Substring patterns whose matching keys' values
            are replaced. Matching is case-insensitive.

    Returns:
        New dict with sensitive values replaced by '***REDACTED***'.
        Nested dicts and lists of dicts are handled recursively.
    """
    result = {}
    for key, value in obj.items():
        if key.lower() in _CONTAINER_KEYS or _is_sensitive_key(key, sensitive_patterns):
            result[key] = _REDACTED
        elif isinstance(value, dict):
            result[key] = redact_for_logging(value, sensitive_patterns)
        elif isinstance(value, list):
            result[key] = [
                redact_for_logging(item, sensitive_patterns) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value
    return result


# Handles "Authorization: ShippoToken <token>", bare shippo_live_/shippo_test_
# tokens, and key=value pairs.
_SENSITIVE_VALUE_PATTERNS = re.compile(
    r"(?i)"
    r"(?:"
    r"Authorization\s*:\s*(?:ShippoToken|Bearer)\s+\S+"
    r"|"
    r"shippo_(?:live|test)_[0-9a-f]+"
    r"|"
    r"(?:token|access_token|password|secret)\s*[=:]\s*\S+"
    r")",
)


def sanitize_error_message(msg: str | None, max_length: int = 2000) -> str | None:
    """Redact token-looking substrings from a message and truncate it.

    Args:
        msg: Message to sanitize (None passes through).
        max_length: Maximum length of the sanitized message.

    Returns:
        Sanitized and truncated message, or None.
    """
    if msg is None:
        return None
    sanitized = _SENSITIVE_VALUE_PATTERNS.sub(_REDACTED, msg)
    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length - 3] + "..."
    return sanitized


def mask_token(token: str) -> str:
    """Show only the last four characters of an access token."""
    if len(token) > 4:
        return "***" + token[-4:]
    return "***"
