"""String helpers with C-string semantics.

Searches return an index into the text, or ``None`` when nothing is found.
Comparisons return the difference between the first pair of characters
(or bytes) that differ, or 0 when the compared ranges are equal.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _as_char(char: Char) -> str:
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(char, int):
        return chr(char)
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    raise TypeError(f"expected a character or an integer code, not {type(char).__name__}")


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _c_string(text: str) -> str:
    """The part of ``text`` before the first NUL, as a C string would see it."""
    return text.split(_NUL, 1)[0]


def split(text: str, separator: Char) -> list[str]:
    """Split ``text`` on runs of ``separator``, dropping empty words."""
    sep = _as_char(separator)
    if sep == _NUL:
        text = _c_string(text)
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    _check_count("start", start)
    _check_count("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle matches at 0. Returns ``None`` when there is no match
    lying wholly inside the searched range.
    """
    _check_count("length", length)
    if not needle:
        return 0
    if not length:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    The end of a string compares as a NUL character.
    """
    _check_count("n", n)
    pairs = zip_longest(_c_string(first)[:n], _c_string(second)[:n], fillvalue=_NUL)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two byte sequences."""
    _check_count("n", n)
    left, right = bytes(first), bytes(second)
    if n > len(left) or n > len(right):
        raise ValueError(f"cannot compare {n} bytes of sequences of length {len(left)} and {len(right)}")
    for a, b in zip(left[:n], right[:n]):
        if a != b:
            return a - b
    return 0


def strchr(text: str, char: Char) -> Optional[int]:
    """Index of the first ``char`` in ``text``; a NUL gives the text's end."""
    target = _as_char(char)
    text = _c_string(text)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: Char) -> Optional[int]:
    """Index of the last ``char`` in ``text``; a NUL gives the text's end."""
    target = _as_char(char)
    text = _c_string(text)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))