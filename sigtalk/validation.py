"""Checking the command-line arguments of the sending client."""

from __future__ import annotations

from itertools import takewhile

from .textutils import atoi

INT_MAX = 2147483647

USAGE = (
    "ERROR! Correct usage is: ./client <PID> <message>\n"
    "If spaces are used, message must be in quotation marks\n"
)

_WHITESPACE = " \t\n\v\f\r"


class UsageError(ValueError):
    """Raised when the client is started with unusable arguments."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_within_int_limits(text: str) -> bool:
    """Tell whether the leading integer in ``text`` fits a signed 32-bit int."""
    rest = text.lstrip(_WHITESPACE)
    negative = rest[:1] == "-"
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    digits = "".join(takewhile(_is_ascii_digit, rest))
    magnitude = int(digits) if digits else 0
    limit = INT_MAX + 1 if negative else INT_MAX
    return magnitude <= limit


def validate_pid(text: str) -> int:
    """Return the process id written in ``text``.

    Only ASCII digits are accepted and the value must fit a signed 32-bit
    int; otherwise UsageError is raised.
    """
    if not all(_is_ascii_digit(char) for char in text):
        raise UsageError()
    if not is_within_int_limits(text):
        raise UsageError()
    return atoi(text)


def parse_client_args(argv: list[str]) -> tuple[int, str]:
    """Return ``(pid, message)`` from the arguments after the program name."""
    if len(argv) != 2:
        raise UsageError()
    pid_text, message = argv
    return validate_pid(pid_text), message