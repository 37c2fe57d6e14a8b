import pytest

from numwords import InvalidInput, ValueTooLarge, number_to_text, render_small
from numwords.errors import INT64_MAX, INT64_MIN, MAX_SAFE_MAGNITUDE
from numwords.num_words_en import SCALE_UNITS

SMALL = [
    "Zero", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]


@pytest.mark.parametrize("n", range(20))
def test_units_and_teens(n):
    assert number_to_text(n) == SMALL[n]


@pytest.mark.parametrize("n, expected", [
    (20, "Twenty"),
    (42, "Forty Two"),
    (70, "Seventy"),
    (99, "Ninety Nine"),
    (100, "One Hundred"),
    (101, "One Hundred and One"),
    (110, "One Hundred and Ten"),
    (999, "Nine Hundred and Ninety Nine"),
])
def test_below_thousand(n, expected):
    assert number_to_text(n) == expected


@pytest.mark.parametrize("n, expected", [
    (1000, "One Million"),
    (1010, "One Million Ten"),
    (1_000_000, "One Billion"),
    (1_000_001, "One Billion One"),
    (2_000_000_000, "Two Trillion"),
    (1_234_567, "One Billion Two Hundred and Thirty Four Million Five Hundred and Sixty Seven"),
])
def test_scale_groups(n, expected):
    assert number_to_text(n) == expected


@pytest.mark.parametrize("n, expected", [
    (-1, "Minus One"),
    (-42, "Minus Forty Two"),
    (-1234, "Minus One Million Two Hundred and Thirty Four"),
])
def test_negative_numbers(n, expected):
    assert number_to_text(n) == expected


@pytest.mark.parametrize("n", [1, 19, 305, 72_000, 123_456_789])
def test_negative_is_minus_prefix(n):
    assert number_to_text(-n) == "Minus " + number_to_text(n)


def test_largest_supported_values():
    text = number_to_text(999_999_999_999_999_999)
    assert text.startswith("Nine Hundred and Ninety Nine Quintillion Nine Hundred")
    assert text.endswith("Million Nine Hundred and Ninety Nine")
    assert number_to_text(MAX_SAFE_MAGNITUDE - 1).startswith("Four Sextillion Six Hundred and Eleven Quintillion")


@pytest.mark.parametrize("n", [
    MAX_SAFE_MAGNITUDE, -MAX_SAFE_MAGNITUDE, 2 ** 62, INT64_MAX, INT64_MAX + 1, INT64_MIN - 1, 10 ** 30, -(10 ** 30),
])
def test_too_large(n):
    with pytest.raises(ValueTooLarge):
        number_to_text(n)


@pytest.mark.parametrize("n", [INT64_MIN, 2.5, "12", True, None])
def test_invalid_input(n):
    with pytest.raises(InvalidInput):
        number_to_text(n)


def test_scale_table_has_no_gaps():
    divisors = [d for d, _ in SCALE_UNITS]
    assert divisors == sorted(divisors, reverse=True)
    for bigger, smaller in zip(divisors, divisors[1:]):
        assert bigger == smaller * 1000
    assert divisors[-1] == 1000


def test_render_small():
    assert render_small(0) == []
    assert render_small(7) == ["Seven"]
    assert render_small(340) == ["Three", "Hundred", "and", "Forty"]
    assert render_small(512) == ["Five", "Hundred", "and", "Twelve"]


@pytest.mark.parametrize("n", [1000, 5000, -1])
def test_render_small_rejects_out_of_range(n):
    with pytest.raises(InvalidInput):
        render_small(n)


def test_same_input_same_output():
    assert number_to_text(987_654_321) == number_to_text(987_654_321)
