import pytest

from sigtalk.numbers import atoi, itoa

INT_MIN = -2147483648
INT_MAX = 2147483647


@pytest.mark.parametrize(
    "number", [0, 1, -1, 7, -9, 10, -10, 12345, -98765, INT_MAX, INT_MIN]
)
def test_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_int_min():
    assert itoa(INT_MIN) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("number", [5, -5, 123, -4567, INT_MAX])
def test_itoa_matches_decimal_form(number):
    text = itoa(number)
    assert text.lstrip("-").isdigit()
    assert text.startswith("-") == (number < 0)
    assert int(text) == number


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)
    with pytest.raises(OverflowError):
        itoa(INT_MIN - 1)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")
    with pytest.raises(TypeError):
        itoa(True)


@pytest.mark.parametrize("prefix", [" ", "\t", "\n", "\r", "\v", "\f", " \t\n "])
def test_atoi_skips_whitespace(prefix):
    assert atoi(prefix + "-2147483648") == INT_MIN
    assert atoi(prefix + "2147483647") == INT_MAX


def test_atoi_plus_sign():
    assert atoi("+2147483647") == atoi("2147483647")


def test_atoi_stops_at_non_digit():
    assert atoi("2147483647abc") == INT_MAX
    assert atoi("-2147483648 99") == INT_MIN


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("-") == 0
    assert atoi("+-1") == 0
    assert atoi("--1") == 0


def test_atoi_overflow_beyond_long():
    huge = "9" * 30
    assert atoi(huge) == -1
    assert atoi("-" + huge) == 0


def test_atoi_wraps_to_32_bits():
    assert atoi(str(INT_MAX + 1)) == INT_MIN
    assert atoi(str(2**32)) == 0


def test_atoi_agrees_with_itoa_for_pid_like_values():
    for number in (1, 42, 4242, 65535, 4194304):
        assert atoi(itoa(number)) == number
        assert atoi(" " + itoa(number) + "\n") == number