"""Error formatting and grouping utilities.

This module provides:
- ShippoClientError exception class for client errors
- ShippoApiError for failed API calls
- Error formatting for user display
- Error grouping to combine duplicates across fields
"""

from dataclasses import dataclass, field

from shippo_client.errors.domain import InvalidAttributeError
from shippo_client.errors.registry import get_error


@dataclass
class ShippoClientError(Exception):
    """Client error with code, message, and context.

    Attributes:
        code: Error code in E-XXXX format.
        message: Human-readable error message.
        remediation: Action user should take to resolve.
        fields: Affected attribute names.
        is_retryable: Whether the operation can be retried without user action.
        details: Additional context dictionary.
    """

    code: str
    message: str
    remediation: str
    fields: list[str] = field(default_factory=list)
    is_retryable: bool = False
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code}: {self.message}"

    @classmethod
    def from_code(cls, code: str, **kwargs: object):
        """Create error from registry code with context substitution.

        Args:
            code: Error code in E-XXXX format.
            **kwargs: Context values for message template substitution.
                Special keys 'fields' and 'details' are used for the error
                fields rather than message substitution. Any other keyword
                matching a dataclass field (e.g. status_code) is passed
                through to the constructor.

        Returns:
            Error instance with formatted message.
        """
        fields = kwargs.pop("fields", [])
        if not isinstance(fields, list):
            fields = []
        details = kwargs.pop("details", {})
        if not isinstance(details, dict):
            details = {}
        reserved = ("code", "message", "remediation", "is_retryable")
        extra = {
            k: kwargs.pop(k) for k in list(kwargs)
            if k in cls.__dataclass_fields__ and k not in reserved
        }

        error_def = get_error(code)
        if not error_def:
            return cls(
                code=code,
                message=f"Unknown error: {code}",
                remediation="Contact support.",
                fields=fields,
                details=details,
                **extra,
            )

        message = error_def.message_template
        try:
            message = message.format(**kwargs)
        except KeyError:
            # Keep template if some placeholders are missing
            pass

        return cls(
            code=error_def.code,
            message=message,
            remediation=error_def.remediation,
            fields=fields,
            is_retryable=error_def.is_retryable,
            details=details,
            **extra,
        )

    @classmethod
    def from_attribute_error(cls, error: InvalidAttributeError) -> "ShippoClientError":
        """Wrap an attribute validation exception for display."""
        return cls(
            code=error.code,
            message=error.message,
            remediation=error.remediation,
            fields=[error.key],
        )


@dataclass
class ShippoApiError(ShippoClientError):
    """A call to the Shippo API failed.

    Attributes:
        status_code: HTTP status, or None when no response was received.
    """

    status_code: int | None = None


def format_error(
    error: ShippoClientError | InvalidAttributeError,
    include_remediation: bool = True,
) -> str:
    """Format error for display to user.

    Args:
        error: The error to format.
        include_remediation: Whether to include remediation steps.

    Returns:
        Multi-line formatted string suitable for user display.
    """
    if isinstance(error, InvalidAttributeError):
        error = ShippoClientError.from_attribute_error(error)

    lines = [f"{error.code}: {error.message}"]

    if len(error.fields) > 1:
        lines.append(f"  Attributes: {', '.join(error.fields)}")

    status_code = getattr(error, "status_code", None)
    if status_code is not None:
        lines.append(f"  HTTP status: {status_code}")

    if include_remediation:
        lines.append(f"  Action: {error.remediation}")

    return "\n".join(lines)


def group_errors(
    errors: list[ShippoClientError | InvalidAttributeError],
) -> list[ShippoClientError]:
    """Group errors by code and title, combining affected attributes.

    Example:
        3 missing-attribute errors for length, width and height
        -> 1 error with fields=["height", "length", "width"]

    Args:
        errors: Errors to group.

    Returns:
        List of grouped ShippoClientError objects with combined fields.
    """
    groups: dict[str, ShippoClientError] = {}

    for error in errors:
        if isinstance(error, InvalidAttributeError):
            error = ShippoClientError.from_attribute_error(error)

        # Attribute errors of one code share a message once grouped
        key = error.code if error.fields else f"{error.code}|{error.message}"

        if key in groups:
            groups[key].fields.extend(error.fields)
        else:
            groups[key] = ShippoClientError(
                code=error.code,
                message=error.message,
                remediation=error.remediation,
                fields=list(error.fields),
                is_retryable=error.is_retryable,
                details=error.details.copy(),
            )

    result = list(groups.values())
    for error in result:
        error.fields = sorted(set(error.fields))
        if len(error.fields) > 1:
            error_def = get_error(error.code)
            if error_def:
                error.message = f"{error_def.title} ({len(error.fields)} attributes)"

    return result


def format_error_summary(
    errors: list[ShippoClientError | InvalidAttributeError],
) -> str:
    """Format a list of errors for display, grouping duplicates.

    Args:
        errors: Errors to summarize.

    Returns:
        User-friendly summary suitable for terminal display.
    """
    if not errors:
        return "No errors."

    grouped = group_errors(errors)

    if len(grouped) == 1:
        return format_error(grouped[0])

    lines = [f"{len(grouped)} error type(s) found:\n"]
    for i, error in enumerate(grouped, 1):
        lines.append(f"{i}. {format_error(error)}")
        lines.append("")

    return "\n".join(lines)
