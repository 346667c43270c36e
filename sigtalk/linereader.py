"""Read lines from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

BUFFER_SIZE = 9

Line = Union[str, bytes]


class LineReader:
    """Return one line at a time from ``stream``, newline included.

    The stream is read ``buffer_size`` units at a time; what follows a
    newline is kept for the next call. Text and binary streams both work.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Line] = None

    def _read_chunk(self) -> Line:
        try:
            return self._stream.read(self._buffer_size)
        except Exception:
            self._pending = None
            raise

    def readline(self) -> Optional[Line]:
        """The next line, or ``None`` once the stream is exhausted."""
        parts: list[Line] = []
        pending = self._pending
        while True:
            if pending:
                newline = b"\n" if isinstance(pending, bytes) else "\n"
                index = pending.find(newline)
                if index >= 0:
                    parts.append(pending[: index + 1])
                    self._pending = pending[index + 1:]
                    return parts[0][:0].join(parts)
                parts.append(pending)
            chunk = self._read_chunk()
            if not chunk:
                self._pending = None
                return parts[0][:0].join(parts) if parts else None
            pending = chunk

    def __iter__(self) -> Iterator[Line]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line