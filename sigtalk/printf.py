"""A small printf supporting the conversions c, s, d, i, p, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 2**32 if value > 2**31 - 1 else value


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, not {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, not {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "csdipuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _char(value)
    if conversion == "s":
        return _string(value)
    if conversion in "di":
        return str(_to_int32(_as_int(value, conversion)))
    if conversion == "p":
        return _pointer(value)
    if conversion == "u":
        return str(_as_int(value, conversion) & _UINT32_MASK)
    number = _as_int(value, conversion) & _UINT32_MASK
    return f"{number:x}" if conversion == "x" else f"{number:X}"


def format(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    Integer conversions wrap to 32 bits. An unknown conversion character is
    consumed and produces nothing; a lone ``%`` at the end is ignored.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    arguments = iter(args)
    pieces = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is not None:
            pieces.append(_convert(conversion, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)