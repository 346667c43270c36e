"""ASCII character classification and case conversion.

Each function accepts either a one-character string or an integer
character code. Only the ASCII ranges are considered, whatever the locale.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(char: Char) -> int:
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    raise TypeError(f"expected a character or an integer code, not {type(char).__name__}")


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(char: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(char)
    return _is_upper_code(code) or _is_lower_code(code)


def is_digit(char: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: Char) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def is_print(char: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(char) <= 126


def _convert(char: Char, code: int) -> Char:
    return chr(code) if isinstance(char, str) else code


def to_upper(char: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(char)
    if _is_lower_code(code):
        return _convert(char, code - 32)
    return char


def to_lower(char: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(char)
    if _is_upper_code(code):
        return _convert(char, code + 32)
    return char