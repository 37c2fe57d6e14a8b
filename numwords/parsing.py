"""Parsing of user supplied numbers and dispatch to a single converter.

Shared by the command line and the HTTP API so both accept the same input.
"""
from __future__ import annotations

import re
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from numwords.errors import InvalidInput
from numwords.formatters import decimal_to_text, to_currency, to_ordinal
from numwords.num_words_en import number_to_text
from numwords.num_words_lang import number_to_text_lang
from numwords.roman import to_roman

Number = Union[int, Decimal]

_INT_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+)$")


class Mode(str, Enum):
    WORDS = "words"
    ORDINAL = "ordinal"
    CURRENCY = "currency"
    DECIMAL = "decimal"
    ROMAN = "roman"


def parse_number(text: str) -> Number:
    """Parse ``text`` into an ``int`` or, when it has a decimal point, a ``Decimal``.

    Thousands separators (``,`` and ``_``) are ignored.
    """

    if not isinstance(text, str):
        raise InvalidInput(f"expected text, got {type(text).__name__}")
    cleaned = text.strip().replace(",", "").replace("_", "")
    if _INT_RE.match(cleaned):
        return int(cleaned)
    if _DECIMAL_RE.match(cleaned):
        return Decimal(cleaned)
    raise InvalidInput(f"{text.strip()!r} is not a valid number")


def parse_mode(value: Optional[str]) -> Mode:
    if not value:
        return Mode.WORDS
    try:
        return Mode(value.strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in Mode)
        raise InvalidInput(f"unknown mode {value!r} (expected one of: {choices})") from None


def _as_int(value: Number, mode: Mode) -> int:
    if isinstance(value, Decimal):
        if value != value.to_integral_value():
            raise InvalidInput(f"{mode.value} mode needs a whole number, got {value}")
        return int(value)
    return value


def convert(value: Number, mode: Mode = Mode.WORDS, lang: Optional[str] = None) -> str:
    """Run exactly one converter for ``value`` according to ``mode`` and ``lang``."""

    mode = parse_mode(mode)
    if lang:
        if mode is not Mode.WORDS:
            raise InvalidInput(f"language output is only available in words mode, not {mode.value}")
        return number_to_text_lang(_as_int(value, mode), lang)

    if mode is Mode.CURRENCY:
        return to_currency(value)
    if mode is Mode.DECIMAL:
        return decimal_to_text(value)
    if mode is Mode.ORDINAL:
        return to_ordinal(_as_int(value, mode))
    if mode is Mode.ROMAN:
        return to_roman(_as_int(value, mode))
    if isinstance(value, Decimal) and value != value.to_integral_value():
        return decimal_to_text(value)
    return number_to_text(_as_int(value, mode))
