"""Line reader working through a bounded buffer.

Lines longer than the buffer are returned truncated and the rest of them is
skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, AnyStr, Iterator

DEFAULT_BUFFER_SIZE = 1024


@dataclass(frozen=True)
class LineResult:
    """One line read from a stream."""

    line: str
    eof: bool
    full_line: bool


class LineReader:
    """Read lines from a text or binary stream through a fixed-size buffer."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._size = buffer_size
        self._buffer = None
        self._skip_mode = False

    def _read(self, count: int):
        data = self._stream.read(count)
        if self._buffer is None:
            self._buffer = data[:0]
        return data

    def _newline(self):
        return b"\n" if isinstance(self._buffer, bytes) else "\n"

    def _eol_index(self) -> int:
        nul = b"\0" if isinstance(self._buffer, bytes) else "\0"
        return self._buffer.split(nul, 1)[0].find(self._newline())

    @staticmethod
    def _text(data) -> str:
        if isinstance(data, bytes):
            return data.decode("utf-8", errors="replace")
        return data

    def _skip_to_next_line(self) -> None:
        while True:
            self._buffer = self._read(self._size)
            if not self._buffer:
                return
            eol = self._eol_index()
            if eol >= 0:
                self._buffer = self._buffer[eol + 1:]
                return

    def next_line(self) -> LineResult:
        """Return the next line, truncated to the buffer size if too long."""
        if self._buffer is None:
            self._read(0)
        if self._skip_mode:
            self._skip_to_next_line()
            self._skip_mode = False
        can_load_more = len(self._buffer) < self._size
        eol = self._eol_index()
        if eol < 0 and can_load_more:
            data = self._read(self._size - len(self._buffer))
            if not data:
                return LineResult(self._text(self._buffer), eof=True, full_line=True)
            self._buffer += data
            eol = self._eol_index()
        if eol < 0:
            self._skip_mode = True
            return LineResult(self._text(self._buffer), eof=False, full_line=False)
        line = self._buffer[:eol]
        self._buffer = self._buffer[eol + 1:]
        return LineResult(self._text(line), eof=False, full_line=True)

    def __iter__(self) -> Iterator[LineResult]:
        """Yield lines up to and including the one that reaches end of file."""
        while True:
            result = self.next_line()
            yield result
            if result.eof:
                return