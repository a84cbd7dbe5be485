"""String helpers: integer parsing and formatting, splitting, trimming and searching."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_ULONG_SIGNED_MAX = 9223372036854775807
_INT32_SPAN = 1 << 32
_INT32_HALF = 1 << 31


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value + _INT32_HALF) % _INT32_SPAN - _INT32_HALF


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the classic atoi does.

    Leading whitespace is skipped and one optional sign is honoured.
    Parsing stops at the first non-digit; text without digits yields 0.
    A magnitude beyond the signed 64-bit maximum yields -1 for positive
    input and 0 for negative input. Otherwise the result is wrapped into
    the signed 32-bit range.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    magnitude = 0
    while pos < length and "0" <= text[pos] <= "9":
        magnitude = magnitude * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
        if magnitude > _ULONG_SIGNED_MAX:
            return -1 if sign == 1 else 0
    return _to_int32(magnitude * sign)


def itoa(number: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    return str(int(number))


def split(text: str, separator: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces.

    An empty separator means the text is not split at all.
    """
    if len(separator) > 1:
        raise ValueError("separator must be a single character")
    if not separator:
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` starting at the match, the whole
    haystack when ``needle`` is empty, or None when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if len(haystack) < len(needle):
        return None
    if not needle:
        return haystack
    if len(needle) > length:
        return None
    index = haystack.find(needle, 0, length)
    if index < 0:
        return None
    return haystack[index:]


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; return -1, 0 or 1."""
    if count < 0:
        raise ValueError("count must not be negative")
    left = first[:count]
    right = second[:count]
    return (left > right) - (left < right)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second