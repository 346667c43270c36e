"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

_WHITESPACE = " \t\r\n\v\f"
_LONG_MAX = 2**63 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits gives 0. If the
    magnitude exceeds the 64-bit signed maximum, a negative number gives 0
    and a positive one gives -1. Otherwise the result wraps to 32 bits.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]

    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
        if value > _LONG_MAX:
            return 0 if sign == -1 else -1
    return _to_int32(value * sign)


def itoa(number: int) -> str:
    """Render a 32-bit signed integer as decimal text."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, not {type(number).__name__}")
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    digits = []
    magnitude = abs(number)
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if not magnitude:
            break
    if number < 0:
        digits.append("-")
    return "".join(reversed(digits))