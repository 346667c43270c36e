"""Bit-level encoding of characters carried by two user signals.

Every character travels as eight bits, most significant first. A 0 bit is
sent as SIGUSR1 and a 1 bit as SIGUSR2. The first bit is always 0, so only
7-bit ASCII codes can be sent.
"""

from __future__ import annotations

import signal
from dataclasses import dataclass, field
from typing import Optional, Union

Char = Union[str, int]

BITS_PER_CHAR = 8


def _code(char: Char) -> int:
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(char, int):
        code = char
    elif isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        code = ord(char)
    else:
        raise TypeError(f"expected a character or an integer code, not {type(char).__name__}")
    if not 0 <= code <= 127:
        raise ValueError(f"only 7-bit ASCII can be sent, got code {code}")
    return code


def _check_bit(bit: int) -> int:
    if isinstance(bit, bool):
        bit = int(bit)
    if bit not in (0, 1):
        raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
    return bit


def encode_char(char: Char) -> tuple[int, ...]:
    """The eight bits of an ASCII character, most significant first."""
    code = _code(char)
    return tuple((code >> shift) & 1 for shift in range(BITS_PER_CHAR - 1, -1, -1))


def encode_message(message: Union[str, bytes]) -> list[int]:
    """The bits of every character of ``message``, in sending order.

    The whole message is checked before any bit is produced, so a
    character that cannot be sent raises ``ValueError`` up front.
    """
    return [bit for char in message for bit in encode_char(char)]


def signal_for_bit(bit: int) -> signal.Signals:
    """The signal that carries ``bit``."""
    return signal.SIGUSR2 if _check_bit(bit) else signal.SIGUSR1


def bit_for_signal(signum: int) -> int:
    """The bit carried by signal ``signum``."""
    if signum == signal.SIGUSR1:
        return 0
    if signum == signal.SIGUSR2:
        return 1
    raise ValueError(f"signal {signum} carries no bit")


@dataclass
class BitDecoder:
    """Collects bits and yields a character code for every eight received."""

    _bits: list[int] = field(default_factory=list, repr=False)

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the completed code, or ``None`` until then."""
        self._bits.append(_check_bit(bit))
        if len(self._bits) < BITS_PER_CHAR:
            return None
        code = 0
        for received in self._bits:
            code = (code << 1) | received
        self._bits.clear()
        return code