"""Reading ``.ber`` map files.

A map file is a plain text grid, one row per line. Every line, including the
last, must have the same length counting its newline. That means the final
row has to end with a newline too. A map needs more than two rows.
"""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "MapError",
    "LineReader",
    "has_ber_extension",
    "read_lines",
    "load_map",
]

DEFAULT_BUFFER_SIZE = 10000
_MIN_ROWS = 3


class MapError(Exception):
    """Raised when a map file cannot be read or is not a usable grid."""


class LineReader(Generic[AnyStr]):
    """Split a stream into lines, reading it in chunks of ``buffer_size``.

    Each line keeps its trailing newline; the last line may lack one.
    Works with both text and binary streams.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _fill(self) -> None:
        """Read chunks until one holds a newline or the stream ends."""
        while True:
            chunk = self._stream.read(self._size)
            if not chunk:
                return
            if self._newline is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[assignment]
            self._pending = chunk if self._pending is None else self._pending + chunk
            if self._newline in chunk:
                return

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending or self._newline is None:
            self._pending = None
            return None
        end = pending.find(self._newline)
        if end == -1:
            self._pending = None
            return pending
        line, rest = pending[: end + 1], pending[end + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def has_ber_extension(path: str) -> bool:
    """Tell whether ``path`` names a ``.ber`` file."""
    return str(path).endswith(".ber")


def read_lines(path: str) -> list[str]:
    """Return the raw lines of the map file, newlines kept.

    Raises MapError when the file cannot be opened or its lines differ in
    length.
    """
    try:
        with open(path, "rb") as handle:
            raw = list(LineReader(handle))
    except OSError as exc:
        raise MapError("MAP NOT FOUND") from exc
    lines = [line.decode("latin-1") for line in raw]
    if lines:
        width = len(lines[0])
        if any(len(line) != width for line in lines[1:]):
            raise MapError("INVALID MAP: rows differ in length")
    return lines


def load_map(path: str) -> list[str]:
    """Load the map at ``path`` and return its rows without line endings."""
    lines = read_lines(path)
    if len(lines) < _MIN_ROWS:
        raise MapError("INVALID MAP: too few rows")
    return [line.removesuffix("\n") for line in lines]