import io

import pytest

from sigtalk.printf import format, printf


def test_plain_text_passes_through():
    assert format("hello world") == "hello world"


def test_percent_literal():
    assert format("100%%") == "100%"


@pytest.mark.parametrize("number", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_decimal_round_trip(number):
    assert int(format("%d", number)) == number
    assert format("%i", number) == format("%d", number)


def test_int_minimum():
    assert format("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format("%d", 2**31) == "-2147483648"


@pytest.mark.parametrize("number", [0, 1, 255, 4096, 2**32 - 1])
def test_hex_round_trip(number):
    assert int(format("%x", number), 16) == number
    assert format("%X", number) == format("%x", number).upper()


def test_unsigned_wraps_negative():
    assert int(format("%u", -1)) == 2**32 - 1
    assert format("%u", 42) == str(42)


def test_hex_of_negative_is_32_bit():
    assert int(format("%x", -1), 16) == 2**32 - 1


def test_string_and_null():
    assert format("[%s]", "abc") == "[abc]"
    assert format("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert format("%c%c", "a", ord("b")) == "ab"


def test_pointer():
    assert format("%p", 0) == "(nil)"
    assert format("%p", None) == "(nil)"
    text = format("%p", 0xBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xBEEF


def test_unknown_conversion_is_dropped():
    assert format("a%qb") == "ab"


def test_trailing_percent_is_ignored():
    assert format("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format("%d", "nope")


def test_none_format_raises():
    with pytest.raises(TypeError):
        format(None)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s=%d%c", "x", -12, "\n", file=out)
    assert out.getvalue() == format("%s=%d%c", "x", -12, "\n")
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "hi")
    captured = capsys.readouterr()
    assert captured.out == "hi"
    assert count == 2