import pytest

from sigtalk.numbers import atoi


@pytest.mark.parametrize("text", ["0", "7", "42", "12345"])
def test_plain_digits(text):
    assert atoi(text) == int(text)


def test_none_gives_zero():
    assert atoi(None) == 0


def test_empty_gives_zero():
    assert atoi("") == 0


def test_leading_whitespace_is_skipped():
    assert atoi(" \t\n\v\f\r 99") == 99


def test_signs():
    assert atoi("-17") == -17
    assert atoi("+5") == 5


def test_double_sign_stops_parsing():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_stops_at_first_non_digit():
    assert atoi("  -17abc") == -17
    assert atoi("12 34") == 12


def test_non_numeric_gives_zero():
    assert atoi("abc") == 0


def test_minimum_value():
    assert atoi("-2147483648") == -2147483648


def test_overflow_wraps_like_signed_int():
    assert atoi("2147483648") == -2147483648


def test_result_stays_in_int32_range():
    for text in ["99999999999", "-99999999999", "4294967296123"]:
        value = atoi(text)
        assert -(2**31) <= value < 2**31