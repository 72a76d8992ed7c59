"""Typed domain exceptions for attribute validation.

Raised by the attribute accessor before any request leaves the process,
so a request built from invalid input is never sent.

Usage:
    try:
        payload = CreateParcel(params).to_dict()
    except MissingRequiredAttributeError as e:
        print(f"{e.key} is required")
"""

from typing import Any

from shippo_client.errors.registry import get_error


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidAttributeError(DomainError):
    """An attribute failed validation. Never retryable."""

    code = ""

    def __init__(self, key: str, **context: Any) -> None:
        error_def = get_error(self.code)
        message = error_def.message_template.format(key=key, **context)
        super().__init__(message)
        self.key = key
        self.message = message
        self.remediation = error_def.remediation


class MissingRequiredAttributeError(InvalidAttributeError):
    """A must-have attribute was absent."""

    code = "E-2001"

    def __init__(self, key: str) -> None:
        super().__init__(key)


class InvalidAttributeValueError(InvalidAttributeError):
    """Coercion or predicate validation failed for a present attribute."""

    code = "E-2002"

    def __init__(self, key: str, expected: str, got: Any) -> None:
        super().__init__(key, expected=expected, got=got)
        self.expected = expected
        self.got = got
