"""Utilities for rendering English words for integers."""
from __future__ import annotations

from typing import List, Tuple

from numwords.errors import InvalidInput, check_magnitude


# The 10^3 tier is named "Million", 10^6 "Billion" and so on. Output of the
# converter is pinned to these names, do not shift them to short-scale.
SCALE_UNITS: Tuple[Tuple[int, str], ...] = (
    (1_000_000_000_000_000_000, "Sextillion"),
    (1_000_000_000_000_000, "Quintillion"),
    (1_000_000_000_000, "Quadrillion"),
    (1_000_000_000, "Trillion"),
    (1_000_000, "Billion"),
    (1_000, "Million"),
)

_UNITS = (
    "",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
)

_TENS = (
    "",
    "",
    "Twenty",
    "Thirty",
    "Forty",
    "Fifty",
    "Sixty",
    "Seventy",
    "Eighty",
    "Ninety",
)

ZERO = "Zero"
MINUS = "Minus"
HUNDRED = "Hundred"
AND = "and"


def render_small(n: int) -> List[str]:
    """Return the word tokens for ``0 <= n < 1000``.

    Hundreds are followed by ``"and"`` when a tens/units group comes after
    them; 11-19 are single words, never "ten" + digit. Zero renders as an
    empty list so callers can skip empty groups.
    """

    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInput(f"expected an integer, got {type(n).__name__}")
    if n < 0 or n >= 1000:
        raise InvalidInput(f"render_small expects 0 <= n < 1000, got {n}")

    words: List[str] = []
    if n >= 100:
        words.append(_UNITS[n // 100])
        words.append(HUNDRED)

    remainder = n % 100
    if remainder > 0:
        if words:
            words.append(AND)
        if remainder < 20:
            words.append(_UNITS[remainder])
        else:
            words.append(_TENS[remainder // 10])
            if remainder % 10:
                words.append(_UNITS[remainder % 10])
    return words


def _convert(number: int) -> List[str]:
    for divisor, unit in SCALE_UNITS:
        if number >= divisor:
            quotient, remainder = divmod(number, divisor)
            words = render_small(quotient)
            words.append(unit)
            if remainder:
                words.extend(_convert(remainder))
            return words
    return render_small(number)


def number_to_text(number: int) -> str:
    """Convert an integer to English words.

    >>> number_to_text(1234)
    'One Million Two Hundred and Thirty Four'
    """

    magnitude = check_magnitude(number)
    if number == 0:
        return ZERO

    words: List[str] = []
    if number < 0:
        words.append(MINUS)
    words.extend(_convert(magnitude))
    return " ".join(words)
