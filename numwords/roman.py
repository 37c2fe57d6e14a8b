"""Roman numeral rendering."""
from __future__ import annotations

from typing import List

from numwords.errors import InvalidInput, check_integer

MAX_ROMAN = 3999

_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def to_roman(number: int) -> str:
    """Return the Roman numeral for ``1 <= number <= 3999``."""

    check_integer(number)
    if number <= 0 or number > MAX_ROMAN:
        raise InvalidInput(f"roman numerals cover 1..{MAX_ROMAN}, got {number}")

    parts: List[str] = []
    remaining = number
    for value, numeral in _NUMERALS:
        while remaining >= value:
            parts.append(numeral)
            remaining -= value
    return "".join(parts)
