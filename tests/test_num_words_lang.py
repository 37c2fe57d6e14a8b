# -*- coding: utf-8 -*-
import pytest

from numwords import InvalidInput, UnsupportedLanguage, ValueTooLarge, get_language, number_to_text_lang, supported_languages
from numwords.num_words_lang import ARABIC, SPANISH, TABLES, Language


@pytest.mark.parametrize("n, expected", [
    (0, "Cero"),
    (5, "Cinco"),
    (15, "Quince"),
    (21, "Veinte y Uno"),
    (30, "Treinta"),
    (99, "Noventa y Nueve"),
    (100, "Cien"),
    (101, "Ciento Uno"),
    (121, "Ciento Veinte y Uno"),
    (200, "Doscientos"),
    (300, "Trescientos"),
    (500, "Quinientos"),
    (700, "Setecientos"),
    (900, "Novecientos"),
    (1000, "Mil"),
    (1001, "Mil Uno"),
    (2021, "Dos Mil Veinte y Uno"),
    (-5, "Menos Cinco"),
])
def test_spanish(n, expected):
    assert number_to_text_lang(n, "es") == expected


@pytest.mark.parametrize("n, expected", [
    (0, "صفر"),
    (3, "ثلاثة"),
    (11, "أحد عشر"),
    (20, "عشرون"),
    (21, "واحد و عشرون"),
    (100, "مائة"),
    (200, "مائتان"),
    (300, "ثلاثمائة"),
    (121, "مائة و واحد و عشرون"),
    (1000, "ألف"),
    (1005, "ألف و خمسة"),
    (1100, "ألف و مائة"),
    (2000, "اثنان ألف"),
    (-3, "سالب ثلاثة"),
])
def test_arabic(n, expected):
    assert number_to_text_lang(n, "ar") == expected


@pytest.mark.parametrize("n, expected", [
    (21, "Twenty One"),
    (250, "Two Hundred Fifty"),
    (1000, "Thousand"),
    (1999, "Thousand Nine Hundred Ninety Nine"),
])
def test_english_table_has_no_conjunction(n, expected):
    assert number_to_text_lang(n, "en") == expected


@pytest.mark.parametrize("code", ["es", "ES", " spa ", "Spanish", "español", Language.SPANISH])
def test_spanish_aliases(code):
    assert get_language(code) is SPANISH


@pytest.mark.parametrize("code", ["ar", "ARA", "arabic", "العربية"])
def test_arabic_aliases(code):
    assert get_language(code) is ARABIC


@pytest.mark.parametrize("code", ["xx", "", "  ", None, 7, "fr"])
def test_unsupported_language(code):
    with pytest.raises(UnsupportedLanguage) as info:
        number_to_text_lang(21, code)
    assert isinstance(info.value, InvalidInput)
    assert info.value.code == code


def test_overflow_guard_matches_english():
    with pytest.raises(ValueTooLarge):
        number_to_text_lang(2 ** 62, "es")
    with pytest.raises(InvalidInput):
        number_to_text_lang(-(2 ** 63), "ar")


def test_tables_are_complete():
    for table in TABLES.values():
        assert len(table.units) == 20
        assert all(table.units)
        assert table.tens[:2] == ("", "")
        assert all(table.tens[2:])


def test_table_validation():
    with pytest.raises(ValueError):
        SPANISH.__class__(**{**SPANISH.__dict__, "units": SPANISH.units[:10]})


def test_supported_languages():
    langs = supported_languages()
    assert set(langs) == {"en", "es", "ar"}
    assert "spa" in langs["es"]
