"""Receive characters sent one bit per signal and write them out."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import BinaryIO, Optional, Sequence

from sigtalk.printf import printf
from sigtalk.protocol import BitDecoder, bit_for_signal


class Server:
    """Decodes SIGUSR1/SIGUSR2 bits into bytes written to ``output``.

    ``output`` is a binary stream; standard output is used when it is None.
    """

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self._output = output
        self._decoder = BitDecoder()

    def _stream(self) -> BinaryIO:
        return sys.stdout.buffer if self._output is None else self._output

    def handle(self, signum: int, frame: Optional[FrameType]) -> None:
        """Signal handler: take one bit and write a byte when eight are in."""
        code = self._decoder.feed(bit_for_signal(signum))
        if code is not None:
            stream = self._stream()
            stream.write(bytes([code]))
            stream.flush()

    def install(self) -> None:
        """Register ``handle`` for both bit-carrying signals."""
        signal.signal(signal.SIGUSR1, self.handle)
        signal.signal(signal.SIGUSR2, self.handle)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print this process's id, then receive messages until interrupted."""
    printf("%d\n", os.getpid())
    sys.stdout.flush()
    try:
        Server().install()
    except (OSError, ValueError) as error:
        printf("sigaction failed")
        sys.stdout.flush()
        print(f"server: {error}", file=sys.stderr)
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())