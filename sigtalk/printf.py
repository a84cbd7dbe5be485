"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT32_MASK = 0xFFFFFFFF
_INT32_SPAN = 1 << 32
_INT32_HALF = 1 << 31
_POINTER_MASK = (1 << 64) - 1


def _as_int32(value: int) -> int:
    return (int(value) + _INT32_HALF) % _INT32_SPAN - _INT32_HALF


def _as_uint32(value: int) -> int:
    return int(value) & _UINT32_MASK


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    return str(value)


def _format_pointer(value: Any) -> str:
    if value is None:
        return NULL_POINTER
    address = int(value) & _POINTER_MASK
    if address == 0:
        return NULL_POINTER
    return f"0x{address:x}"


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": lambda value: str(_as_int32(value)),
    "i": lambda value: str(_as_int32(value)),
    "u": lambda value: str(_as_uint32(value)),
    "x": lambda value: f"{_as_uint32(value):x}",
    "X": lambda value: f"{_as_uint32(value):X}",
}


def _next_argument(arguments: Iterator[Any], spec: str) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_printf(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text.

    A '%' followed by an unknown character, or at the very end of the
    template, produces nothing and consumes the following character.
    """
    arguments = iter(args)
    pieces: list[str] = []
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_argument(arguments, spec)))
    return "".join(pieces)


def printf(template: str, *args: Any) -> int:
    """Write the expanded template to standard output; return characters written."""
    text = format_printf(template, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)