"""Exceptions raised by the number-to-words converters."""
from __future__ import annotations

from typing import Optional

INT64_MAX = 2 ** 63 - 1
INT64_MIN = -(2 ** 63)

# Anything at or above this magnitude is refused before any arithmetic.
MAX_SAFE_MAGNITUDE = INT64_MAX // 2


class NumWordsError(ValueError):
    """Base class for every conversion failure."""


class InvalidInput(NumWordsError):
    """Malformed or out-of-domain argument."""


class UnsupportedLanguage(InvalidInput):
    def __init__(self, code):
        self.code = code
        super().__init__(f"unsupported language: {code!r}")


class ValueTooLarge(NumWordsError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"value {value} is too large (magnitude must be below {MAX_SAFE_MAGNITUDE})"
        )


class ConversionError(NumWordsError):
    """Wraps a failure from a nested conversion with some context."""

    def __init__(self, context: str, cause: Optional[BaseException] = None):
        self.context = context
        self.cause = cause
        message = f"{context}: {cause}" if cause is not None else context
        super().__init__(message)


def check_integer(value) -> int:
    """Reject anything that is not a plain ``int`` (``bool`` included)."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"expected an integer, got {type(value).__name__}")
    return value


def check_magnitude(value: int) -> int:
    """Return ``abs(value)`` after the overflow guards shared by all converters.

    Any magnitude at or above ``MAX_SAFE_MAGNITUDE`` is ``ValueTooLarge``,
    including integers outside the signed 64-bit range. ``INT64_MIN`` itself
    is ``InvalidInput`` because its negation overflows.
    """

    check_integer(value)
    if value == INT64_MIN:
        raise InvalidInput(f"cannot negate {value} without overflow")
    magnitude = abs(value)
    if magnitude >= MAX_SAFE_MAGNITUDE:
        raise ValueTooLarge(value)
    return magnitude
