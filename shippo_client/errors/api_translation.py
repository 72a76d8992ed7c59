"""Shippo API error translation to client error codes.

Maps HTTP statuses and Shippo error bodies to the client's error code
system, providing user-friendly error messages with actionable
remediation steps.
"""

from shippo_client.errors.registry import get_error


# Map of HTTP status codes to client error codes
STATUS_ERROR_MAP: dict[int, str] = {
    400: "E-3003",
    401: "E-5001",
    403: "E-5001",
    404: "E-3004",
    409: "E-3003",
    422: "E-3003",
    429: "E-3002",
    500: "E-3005",
    502: "E-3001",
    503: "E-3001",
    504: "E-3001",
}

# Error messages that require pattern matching
API_MESSAGE_PATTERNS: dict[str, str] = {
    "invalid token": "E-5001",
    "authentication credentials": "E-5001",
    "not found": "E-3004",
    "throttled": "E-3002",
    "rate limit": "E-3002",
}


def translate_api_error(
    status_code: int | None,
    body: dict | None,
) -> tuple[str, str, str]:
    """Translate a failed Shippo response to a client error.

    Args:
        status_code: HTTP status of the response.
        body: Decoded JSON body, if the response had one.

    Returns:
        Tuple of (error_code, formatted_message, remediation).
    """
    api_message = extract_api_error(body or {})

    if status_code in STATUS_ERROR_MAP:
        error = get_error(STATUS_ERROR_MAP[status_code])
        if error:
            message = _format_message(
                error.message_template,
                api_message=api_message or f"HTTP {status_code}",
                reason=api_message or f"HTTP {status_code}",
            )
            return (error.code, message, error.remediation)

    if api_message:
        lowered = api_message.lower()
        for pattern, code in API_MESSAGE_PATTERNS.items():
            if pattern in lowered:
                error = get_error(code)
                if error:
                    message = _format_message(
                        error.message_template, api_message=api_message
                    )
                    return (error.code, message, error.remediation)

    error = get_error("E-3005")
    if error:
        message = _format_message(
            error.message_template,
            api_message=api_message or f"HTTP {status_code}",
        )
        return (error.code, message, error.remediation)

    return (
        "E-3005",
        f"Shippo error: {api_message or status_code or 'Unknown'}",
        "Contact support with this error message for assistance.",
    )


def _format_message(template: str, **kwargs: object) -> str:
    """Format a message template with context, ignoring missing keys.

    Args:
        template: Message template with {placeholder} syntax.
        **kwargs: Values to substitute into the template.

    Returns:
        Formatted message string.
    """
    try:
        return template.format(**kwargs)
    except KeyError:
        return template


def extract_api_error(body: dict) -> str | None:
    """Extract a readable error message from a Shippo error body.

    Shippo error bodies vary in structure. This handles common formats.

    Args:
        body: Decoded response body.

    Returns:
        Error message, or None if the body carries none.
    """
    # Format 1: {"detail": "Invalid token."}
    detail = body.get("detail")
    if isinstance(detail, str) and detail:
        return detail

    # Format 2: {"messages": [{"text": "..."}]} or {"messages": ["..."]}
    messages = body.get("messages")
    if isinstance(messages, list) and messages:
        texts = [
            m.get("text", "") if isinstance(m, dict) else str(m)
            for m in messages
        ]
        texts = [t for t in texts if t]
        if texts:
            return "; ".join(texts)

    # Format 3: field errors {"zip": ["This field is required."]}
    parts = []
    for key, value in body.items():
        if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
            parts.append(f"{key}: {' '.join(value)}")
        elif key == "__all__" and isinstance(value, str):
            parts.append(value)
    if parts:
        return "; ".join(parts)

    return None
