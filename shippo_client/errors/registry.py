"""Error code registry with E-XXXX format codes.

This module defines the error code system for the Shippo client, organizing
errors into categories:
- E-2xxx: Validation errors (caller input or response fields)
- E-3xxx: Shippo API errors
- E-4xxx: System/internal errors
- E-5xxx: Authentication errors

Each error includes a code, title, message template, and remediation steps.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """Categories for error codes."""

    VALIDATION = "validation"  # E-2xxx
    API = "api"  # E-3xxx
    SYSTEM = "system"  # E-4xxx
    AUTH = "auth"  # E-5xxx


@dataclass
class ErrorCode:
    """Definition of an error code with metadata.

    Attributes:
        code: Error code in E-XXXX format.
        category: Error category for grouping.
        title: Short title for display.
        message_template: Message with {placeholders} for context.
        remediation: Action user should take to resolve.
        is_retryable: Whether the operation can be retried without user action.
    """

    code: str
    category: ErrorCategory
    title: str
    message_template: str
    remediation: str
    is_retryable: bool = False


ERROR_REGISTRY: dict[str, ErrorCode] = {
    # Validation errors (E-2xxx)
    "E-2001": ErrorCode(
        code="E-2001",
        category=ErrorCategory.VALIDATION,
        title="Missing Required Attribute",
        message_template="Required attribute '{key}' is missing.",
        remediation="Add the missing attribute to the request parameters and retry.",
    ),
    "E-2002": ErrorCode(
        code="E-2002",
        category=ErrorCategory.VALIDATION,
        title="Invalid Attribute Value",
        message_template="Attribute '{key}' has invalid value {got!r}. Expected {expected}.",
        remediation="Correct the attribute value and retry.",
    ),
    "E-2003": ErrorCode(
        code="E-2003",
        category=ErrorCategory.VALIDATION,
        title="Invalid Parameters File",
        message_template="Could not read parameters from {path}: {reason}",
        remediation="Provide a JSON or YAML file containing a single mapping.",
    ),
    # API errors (E-3xxx)
    "E-3001": ErrorCode(
        code="E-3001",
        category=ErrorCategory.API,
        title="Shippo Service Unavailable",
        message_template="Shippo API is not responding: {reason}",
        remediation="Wait a few minutes and retry. Check status.goshippo.com if the issue persists.",
        is_retryable=True,
    ),
    "E-3002": ErrorCode(
        code="E-3002",
        category=ErrorCategory.API,
        title="Shippo Rate Limit Exceeded",
        message_template="Too many requests to the Shippo API. Rate limit exceeded.",
        remediation="Wait 60 seconds and retry.",
        is_retryable=True,
    ),
    "E-3003": ErrorCode(
        code="E-3003",
        category=ErrorCategory.API,
        title="Request Rejected",
        message_template="Shippo rejected the request: {api_message}",
        remediation="Check the request parameters against the Shippo API reference.",
    ),
    "E-3004": ErrorCode(
        code="E-3004",
        category=ErrorCategory.API,
        title="Object Not Found",
        message_template="Shippo could not find the requested object: {api_message}",
        remediation="Verify the object id and that it belongs to this account.",
    ),
    "E-3005": ErrorCode(
        code="E-3005",
        category=ErrorCategory.API,
        title="Shippo Unknown Error",
        message_template="Shippo returned an unexpected error: {api_message}",
        remediation="Retry later. Contact Shippo support with the error message if it persists.",
    ),
    # System errors (E-4xxx)
    "E-4001": ErrorCode(
        code="E-4001",
        category=ErrorCategory.SYSTEM,
        title="Malformed Response",
        message_template="Shippo returned a response that is not a JSON object: {reason}",
        remediation="Retry the request. Contact Shippo support if the issue persists.",
        is_retryable=True,
    ),
    # Auth errors (E-5xxx)
    "E-5001": ErrorCode(
        code="E-5001",
        category=ErrorCategory.AUTH,
        title="Shippo Authentication Failed",
        message_template="Failed to authenticate with the Shippo API.",
        remediation="Check the access token. Live and test tokens are not interchangeable.",
    ),
    "E-5002": ErrorCode(
        code="E-5002",
        category=ErrorCategory.AUTH,
        title="Missing Access Token",
        message_template="No Shippo access token configured.",
        remediation="Set api.access_token in shippo.yaml, pass --token, or export SHIPPO_PRIVATE_ACCESS_TOKEN.",
    ),
}


def get_error(code: str) -> ErrorCode | None:
    """Get error definition by code.

    Args:
        code: Error code in E-XXXX format.

    Returns:
        ErrorCode if found, None otherwise.
    """
    return ERROR_REGISTRY.get(code)


def get_errors_by_category(category: ErrorCategory) -> list[ErrorCode]:
    """Get all errors in a category.

    Args:
        category: The error category to filter by.

    Returns:
        List of ErrorCode objects in the specified category.
    """
    return [e for e in ERROR_REGISTRY.values() if e.category == category]
