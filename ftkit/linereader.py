"""Line-by-line reading from a stream in fixed-size chunks.

Lines keep their trailing newline; the last line of a stream may lack one.
Both text streams (read returns ``str``) and binary streams (read returns
``bytes``) are supported.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42

_readers: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()


class LineReader(Generic[AnyStr]):
    """Read lines from *stream*, pulling at most *buffer_size* units per read.

    Data read beyond the end of a line is kept and handed out by later
    calls, so the stream should not be read by anything else meanwhile.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None

    def _fill(self) -> None:
        """Read chunks until the pending data holds a newline or input ends."""
        while self._pending is None or self._newline not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            self._pending = chunk if self._pending is None else self._pending + chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream has nothing more."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = pending.find(self._newline)
        if end < 0:
            line, rest = pending, pending[:0]
        else:
            line, rest = pending[: end + 1], pending[end + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def get_next_line(stream: IO[AnyStr]) -> AnyStr | None:
    """Return the next line of *stream*, remembering unread data per stream.

    Returns None once the stream is exhausted.
    """
    reader = _readers.get(stream)
    if reader is None:
        reader = LineReader(stream)
        _readers[stream] = reader
    return reader.read_line()