"""Send a text message to a listening server, one signal per bit."""

from __future__ import annotations

import os
import sys
import time
from typing import Callable, Optional, Sequence, Union

from sigtalk.numbers import atoi
from sigtalk.protocol import encode_message, signal_for_bit

DEFAULT_DELAY = 150e-6


def send_message(
    pid: int,
    message: Union[str, bytes],
    delay: float = DEFAULT_DELAY,
    kill: Optional[Callable[[int, int], None]] = None,
) -> None:
    """Signal every bit of ``message`` to process ``pid``.

    ``delay`` seconds pass after each signal so the receiver can keep up.
    ``kill`` defaults to ``os.kill``.
    """
    if pid <= 0:
        raise ValueError(f"refusing to signal pid {pid}")
    send = os.kill if kill is None else kill
    for bit in encode_message(message):
        send(pid, signal_for_bit(bit))
        time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: ``client <pid> <message>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        return 1
    pid_text, message = args
    try:
        send_message(atoi(pid_text), message)
    except (OSError, ValueError) as error:
        print(f"client: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())