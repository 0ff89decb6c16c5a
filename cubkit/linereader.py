"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

__all__ = ["BUFFER_SIZE", "LineReader", "read_lines"]

BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, reading in fixed chunks.

    Lines come back without their newline.  The text after the last
    newline is returned as a final line (empty if the stream ends with a
    newline); ``eof`` is true right after that final line was returned.
    Reading again afterwards starts over from the stream.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self.eof = False

    def read_line(self) -> AnyStr:
        """Return the next line, or the remaining text at end of stream."""
        self.eof = False
        pending = self._pending
        while True:
            if pending:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)
                if index != -1:
                    self._pending = pending[index + 1:]
                    return pending[:index]
            chunk = self._stream.read(self._buffer_size)
            if chunk is None:
                self._pending = None
                raise BlockingIOError("stream has no data available")
            if not chunk:
                self._pending = None
                self.eof = True
                return pending if pending is not None else chunk
            pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            yield line
            if self.eof:
                return


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> list[AnyStr]:
    """Return every line of ``stream``, including the final segment."""
    return list(LineReader(stream, buffer_size))