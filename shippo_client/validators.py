"""Reusable predicates for attribute coercion.

Each factory returns a plain ``value -> bool`` callable carrying a
``description`` used in validation error messages. Any other callable
works as a predicate too.
"""

from collections.abc import Callable
from typing import Any

Predicate = Callable[[Any], bool]


def _describe(predicate: Predicate, description: str) -> Predicate:
    predicate.description = description  # type: ignore[attr-defined]
    return predicate


def one_of(*choices: str) -> Predicate:
    """Accept only values in ``choices``.

    Args:
        *choices: Allowed values, compared exactly (case sensitive).

    Returns:
        Predicate for enum membership.
    """
    allowed = frozenset(choices)
    return _describe(
        lambda value: value in allowed,
        "one of " + ", ".join(choices),
    )


def max_length(limit: int) -> Predicate:
    """Accept strings of at most ``limit`` characters.

    Length counts characters, not encoded bytes, so multibyte text is
    measured the same way the API measures it.
    """
    return _describe(
        lambda value: len(value) <= limit,
        f"at most {limit} characters",
    )


def exact_length(length: int) -> Predicate:
    """Accept strings of exactly ``length`` characters."""
    return _describe(
        lambda value: len(value) == length,
        f"exactly {length} characters",
    )


def non_negative() -> Predicate:
    """Accept numbers greater than or equal to zero."""
    return _describe(lambda value: value >= 0, "a non-negative number")


def non_empty() -> Predicate:
    """Reject the empty string, which request payloads drop."""
    return _describe(lambda value: value != "", "a non-empty value")


def describe(predicate: Predicate | None, fallback: str) -> str:
    """Return the human-readable expectation for a predicate."""
    if predicate is None:
        return fallback
    return getattr(predicate, "description", f"a valid {fallback}")
