# -*- coding: utf-8 -*-
"""Word tables and converter for non-default output languages.

Each language is a plain ``LanguageWordTable`` plus at most two grammar
branches (how hundreds are spelled and how tens/units are ordered). The
branches are picked from small dispatch dicts keyed by ``Language``; there is
no class per language.

Only the thousands grouping is supported here. Larger values keep grouping by
thousands (``Mil Mil``), which is acceptable for the supported range of use.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from numwords.errors import UnsupportedLanguage, check_magnitude

logger = logging.getLogger(__name__)


class Language(str, Enum):
    ENGLISH = "en"
    SPANISH = "es"
    ARABIC = "ar"


@dataclass(frozen=True)
class LanguageWordTable:
    language: Language
    aliases: Tuple[str, ...]
    units: Tuple[str, ...]
    tens: Tuple[str, ...]
    hundred: str
    hundred_more: str
    thousand: str
    zero: str
    minus: str
    conjunction: str
    hundreds_suffix: str = ""
    two_hundred: Optional[str] = None
    hundreds_irregular: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if len(self.units) != 20:
            raise ValueError(f"{self.language.value}: units table needs 20 entries")
        if len(self.tens) != 10 or not all(self.tens[2:]):
            raise ValueError(f"{self.language.value}: tens table needs entries for 2-9")


ENGLISH = LanguageWordTable(
    language=Language.ENGLISH,
    aliases=("en", "eng", "english"),
    units=(
        "Zero", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
        "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
        "Seventeen", "Eighteen", "Nineteen",
    ),
    tens=("", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"),
    hundred="One Hundred",
    hundred_more="One Hundred",
    hundreds_suffix="Hundred",
    thousand="Thousand",
    zero="Zero",
    minus="Minus",
    conjunction="",
)

SPANISH = LanguageWordTable(
    language=Language.SPANISH,
    aliases=("es", "spa", "spanish", "español", "espanol"),
    units=(
        "Cero", "Uno", "Dos", "Tres", "Cuatro", "Cinco", "Seis", "Siete", "Ocho", "Nueve",
        "Diez", "Once", "Doce", "Trece", "Catorce", "Quince", "Dieciséis",
        "Diecisiete", "Dieciocho", "Diecinueve",
    ),
    tens=("", "", "Veinte", "Treinta", "Cuarenta", "Cincuenta", "Sesenta", "Setenta", "Ochenta", "Noventa"),
    hundred="Cien",
    hundred_more="Ciento",
    hundreds_suffix="cientos",
    hundreds_irregular=MappingProxyType({5: "Quinientos", 7: "Setecientos", 9: "Novecientos"}),
    thousand="Mil",
    zero="Cero",
    minus="Menos",
    conjunction="y",
)

ARABIC = LanguageWordTable(
    language=Language.ARABIC,
    aliases=("ar", "ara", "arabic", "العربية"),
    units=(
        "صفر", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة",
        "عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر", "خمسة عشر",
        "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
    ),
    tens=("", "", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون"),
    hundred="مائة",
    hundred_more="مائة",
    two_hundred="مائتان",
    hundreds_suffix="مائة",
    thousand="ألف",
    zero="صفر",
    minus="سالب",
    conjunction="و",
)

TABLES: Mapping[Language, LanguageWordTable] = MappingProxyType({
    Language.ENGLISH: ENGLISH,
    Language.SPANISH: SPANISH,
    Language.ARABIC: ARABIC,
})

_ALIASES: Mapping[str, Language] = MappingProxyType({
    alias.casefold(): table.language
    for table in TABLES.values()
    for alias in table.aliases
})


def get_language(code) -> LanguageWordTable:
    """Look up a word table by short code, ISO-3 code or name (case-insensitive)."""

    if isinstance(code, Language):
        return TABLES[code]
    if not isinstance(code, str) or not code.strip():
        raise UnsupportedLanguage(code)
    language = _ALIASES.get(code.strip().casefold())
    if language is None:
        logger.debug("rejected language code %r", code)
        raise UnsupportedLanguage(code)
    return TABLES[language]


def supported_languages() -> Dict[str, List[str]]:
    return {lang.value: list(table.aliases) for lang, table in TABLES.items()}


# --- hundreds --------------------------------------------------------------
def _hundreds_spaced(table: LanguageWordTable, digit: int, rest: int) -> str:
    if digit == 1:
        return table.hundred if rest == 0 else table.hundred_more
    return f"{table.units[digit]} {table.hundreds_suffix}"


def _hundreds_compound(table: LanguageWordTable, digit: int, rest: int) -> str:
    if digit == 1:
        return table.hundred if rest == 0 else table.hundred_more
    irregular = table.hundreds_irregular.get(digit)
    if irregular:
        return irregular
    return (table.units[digit].lower() + table.hundreds_suffix).capitalize()


def _hundreds_arabic(table: LanguageWordTable, digit: int, rest: int) -> str:
    if digit == 1:
        return table.hundred if rest == 0 else table.hundred_more
    if digit == 2 and table.two_hundred:
        return table.two_hundred
    stem = table.units[digit]
    if stem.endswith("ة"):
        stem = stem[:-1]
    return stem + table.hundreds_suffix


# --- tens and units --------------------------------------------------------
def _join(*parts: str) -> List[str]:
    return [p for p in parts if p]


def _tens_units_default(table: LanguageWordTable, n: int) -> List[str]:
    if n < 20:
        return [table.units[n]]
    tens, units = divmod(n, 10)
    if not units:
        return [table.tens[tens]]
    return _join(table.tens[tens], table.conjunction, table.units[units])


def _tens_units_arabic(table: LanguageWordTable, n: int) -> List[str]:
    if n < 20:
        return [table.units[n]]
    tens, units = divmod(n, 10)
    if not units:
        return [table.tens[tens]]
    return _join(table.units[units], table.conjunction, table.tens[tens])


_HUNDREDS: Dict[Language, Callable[[LanguageWordTable, int, int], str]] = {
    Language.ENGLISH: _hundreds_spaced,
    Language.SPANISH: _hundreds_compound,
    Language.ARABIC: _hundreds_arabic,
}

_TENS_UNITS: Dict[Language, Callable[[LanguageWordTable, int], List[str]]] = {
    Language.ENGLISH: _tens_units_default,
    Language.SPANISH: _tens_units_default,
    Language.ARABIC: _tens_units_arabic,
}

# Languages that link every group to the one before it with the conjunction.
_LINK_GROUPS = frozenset({Language.ARABIC})


def _convert(table: LanguageWordTable, number: int) -> List[str]:
    words: List[str] = []
    link = table.language in _LINK_GROUPS and bool(table.conjunction)

    if number >= 1000:
        thousands, number = divmod(number, 1000)
        if thousands > 1:
            words.extend(_convert(table, thousands))
        words.append(table.thousand)

    hundreds, rest = divmod(number, 100)
    if hundreds:
        if link and words:
            words.append(table.conjunction)
        words.append(_HUNDREDS[table.language](table, hundreds, rest))

    if rest:
        if link and words:
            words.append(table.conjunction)
        words.extend(_TENS_UNITS[table.language](table, rest))
    return words


def number_to_text_lang(number: int, lang) -> str:
    """Convert an integer to words in the language named by ``lang``.

    >>> number_to_text_lang(21, "es")
    'Veinte y Uno'
    """

    table = get_language(lang)
    magnitude = check_magnitude(number)
    if number == 0:
        return table.zero

    words: List[str] = []
    if number < 0:
        words.append(table.minus)
    words.extend(_convert(table, magnitude))
    return " ".join(words)
