"""Render numbers as words, ordinals, currency amounts and Roman numerals."""
from numwords.errors import (
    ConversionError,
    InvalidInput,
    NumWordsError,
    UnsupportedLanguage,
    ValueTooLarge,
)
from numwords.formatters import decimal_to_text, to_currency, to_ordinal
from numwords.num_words_en import number_to_text, render_small
from numwords.num_words_lang import get_language, number_to_text_lang, supported_languages
from numwords.parsing import Mode, convert, parse_number
from numwords.roman import to_roman

__all__ = [
    "ConversionError",
    "InvalidInput",
    "Mode",
    "NumWordsError",
    "UnsupportedLanguage",
    "ValueTooLarge",
    "convert",
    "decimal_to_text",
    "get_language",
    "number_to_text",
    "number_to_text_lang",
    "parse_number",
    "render_small",
    "supported_languages",
    "to_currency",
    "to_ordinal",
    "to_roman",
]
