"""Reading a source one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

BUFFER_SIZE = 42


class LineReader:
    """Returns successive lines, each with its trailing newline if present.

    ``source`` is either a file descriptor or an object with a
    ``read(size)`` method returning ``str`` or ``bytes``.
    """

    def __init__(self, source: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(source, int) and source < 0:
            raise ValueError("file descriptor must not be negative")
        self._source = source
        self._buffer_size = buffer_size
        self._stash: Any = None

    def _read_chunk(self) -> Any:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        chunk = self._source.read(self._buffer_size)
        return chunk if chunk is not None else b""

    def read_line(self) -> Any:
        """Return the next line, or None once the source is exhausted."""
        stash = self._stash
        while stash is None or (
            ("\n" if isinstance(stash, str) else b"\n") not in stash
        ):
            try:
                chunk = self._read_chunk()
            except OSError:
                self._stash = None
                raise
            stash = chunk if stash is None else stash + chunk
            if not chunk:
                break
        if not stash:
            self._stash = None
            return None
        index = stash.find("\n" if isinstance(stash, str) else b"\n")
        if index < 0:
            self._stash = None
            return stash
        self._stash = stash[index + 1:]
        return stash[:index + 1]

    def __iter__(self) -> Iterator[Any]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(source: Any, buffer_size: int = BUFFER_SIZE) -> Iterator[Any]:
    """Yield every line of ``source`` in order."""
    yield from LineReader(source, buffer_size)