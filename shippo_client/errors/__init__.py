"""Error handling framework for the Shippo client.

This package provides:
- Error code registry with E-XXXX format codes
- Attribute validation exceptions
- Shippo API error translation to friendly messages
- Error formatting and grouping utilities

Error categories:
- E-2xxx: Validation errors
- E-3xxx: Shippo API errors
- E-4xxx: System/internal errors
- E-5xxx: Authentication errors
"""

from shippo_client.errors.registry import (
    ErrorCategory,
    ErrorCode,
    ERROR_REGISTRY,
    get_error,
    get_errors_by_category,
)
from shippo_client.errors.domain import (
    DomainError,
    InvalidAttributeError,
    InvalidAttributeValueError,
    MissingRequiredAttributeError,
)
from shippo_client.errors.api_translation import (
    STATUS_ERROR_MAP,
    extract_api_error,
    translate_api_error,
)
from shippo_client.errors.formatter import (
    ShippoApiError,
    ShippoClientError,
    format_error,
    format_error_summary,
    group_errors,
)

__all__ = [
    # Registry
    "ErrorCode",
    "ErrorCategory",
    "ERROR_REGISTRY",
    "get_error",
    "get_errors_by_category",
    # Validation
    "DomainError",
    "InvalidAttributeError",
    "MissingRequiredAttributeError",
    "InvalidAttributeValueError",
    # API translation
    "translate_api_error",
    "extract_api_error",
    "STATUS_ERROR_MAP",
    # Formatter
    "ShippoClientError",
    "ShippoApiError",
    "format_error",
    "group_errors",
    "format_error_summary",
]
