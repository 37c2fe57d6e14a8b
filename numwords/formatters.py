"""Ordinal, currency and decimal renderings built on top of ``number_to_text``."""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Tuple, Union

from numwords.errors import (
    MAX_SAFE_MAGNITUDE,
    ConversionError,
    InvalidInput,
    NumWordsError,
    ValueTooLarge,
    check_integer,
)
from numwords.num_words_en import MINUS, number_to_text

NumberLike = Union[int, float, str, Decimal]

_CENTS = Decimal("0.01")
logger = logging.getLogger(__name__)


def ordinal_suffix(number: int) -> str:
    """English ordinal suffix; 11, 12 and 13 always take ``th``."""

    n = abs(check_integer(number))
    if n % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def to_ordinal(number: int) -> str:
    """``21`` -> ``'Twenty One (21st)'``."""

    words = number_to_text(number)
    return f"{words} ({number}{ordinal_suffix(number)})"


def _to_decimal(value: NumberLike) -> Decimal:
    if isinstance(value, bool):
        raise InvalidInput("expected a number, got bool")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip().replace(",", ""))
        except InvalidOperation:
            raise InvalidInput(f"{value!r} is not a valid number") from None
    else:
        raise InvalidInput(f"expected a number, got {type(value).__name__}")
    if not number.is_finite():
        raise InvalidInput(f"{value!r} is not a finite number")
    return number


def _split_cents(value: NumberLike) -> Tuple[bool, int, int]:
    """Round half away from zero to cents and return ``(negative, whole, cents)``."""

    number = _to_decimal(value)
    if abs(number) >= MAX_SAFE_MAGNITUDE:
        raise ValueTooLarge(value)
    number = number.quantize(_CENTS, rounding=ROUND_HALF_UP)
    negative = number < 0
    number = abs(number)
    whole = int(number)
    cents = int((number - whole) * 100)
    return negative, whole, cents


def _words(number: int, part: str, value) -> str:
    try:
        return number_to_text(number)
    except ValueTooLarge:
        raise
    except NumWordsError as exc:
        logger.debug("failed to convert %s part of %r", part, value)
        raise ConversionError(f"cannot convert {part} part of {value}", exc) from exc


def _plural(count: int, unit: str) -> str:
    return unit if count == 1 else unit + "s"


def to_currency(value: NumberLike) -> str:
    """Describe an amount in dollars and cents.

    >>> to_currency(2.45)
    'Two Dollars and Forty Five Cents'
    """

    negative, dollars, cents = _split_cents(value)
    text = f"{_words(dollars, 'dollars', value)} {_plural(dollars, 'Dollar')}"
    if cents:
        text += f" and {_words(cents, 'cents', value)} {_plural(cents, 'Cent')}"
    return f"{MINUS} {text}" if negative else text


def decimal_to_text(value: NumberLike) -> str:
    """Read a number with two decimal places, e.g. ``3.14`` -> ``'Three point Fourteen'``.

    The fraction is read as a cardinal, so ``0.05`` and ``0.5`` read as
    ``Five`` and ``Fifty``.
    """

    negative, whole, fraction = _split_cents(value)
    text = f"{_words(whole, 'integer', value)} point {_words(fraction, 'fractional', value)}"
    return f"{MINUS} {text}" if negative else text
