"""Bit-level encoding of messages that travel one bit per signal.

Each byte is sent least significant bit first, and every message ends
with a NUL byte.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator

BITS_PER_BYTE = 8


def char_to_bits(byte: int) -> list[int]:
    """Return the eight bits of ``byte``, least significant first."""
    value = operator.index(byte)
    if not 0 <= value <= 0xFF:
        raise ValueError("byte must be in the range 0..255")
    return [(value >> position) & 1 for position in range(BITS_PER_BYTE)]


def encode_message(message: str | bytes) -> Iterator[int]:
    """Yield the bits of ``message`` followed by the bits of a NUL terminator.

    Text is encoded as UTF-8. Anything after an embedded NUL is not sent.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in data:
        yield from char_to_bits(byte)
    yield from char_to_bits(0)


class ByteDecoder:
    """Reassembles bytes from bits received least significant first."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the finished byte after every eighth bit."""
        if bit:
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte