"""Sending a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys

from .protocol import encode_message
from .validation import UsageError, parse_client_args

PID_LIMIT = 4194304


def _announce_delivery() -> None:
    sys.stdout.write("\nMessage sent\n")
    sys.stdout.flush()


def send_message(pid: int, message: str | bytes, bonus: bool = False) -> None:
    """Send ``message`` and its NUL terminator to ``pid``.

    A 1 bit is sent as SIGUSR1 and a 0 bit as SIGUSR2; each bit waits for
    a SIGUSR1 acknowledgement. In bonus mode a SIGUSR2 from the server is
    reported as the message having been delivered.
    """
    waited = {signal.SIGUSR1, signal.SIGUSR2} if bonus else {signal.SIGUSR1}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, waited)
    try:
        for bit in encode_message(message):
            os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
            while signal.sigwait(waited) != signal.SIGUSR1:
                _announce_delivery()
        if bonus and signal.SIGUSR2 in signal.sigpending():
            signal.sigwait({signal.SIGUSR2})
            _announce_delivery()
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _process_exists(pid: int) -> bool:
    try:
        os.kill(pid, 0)
    except OSError:
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Send the message given on the command line to the given process."""
    args = sys.argv[1:] if argv is None else list(argv)
    bonus = args[:1] == ["--bonus"]
    if bonus:
        args = args[1:]
    try:
        pid, message = parse_client_args(args)
    except UsageError as error:
        sys.stderr.write(str(error))
        return 1
    if pid > PID_LIMIT or not _process_exists(pid):
        sys.stderr.write("Error, process doesn't exist\n")
        return 1
    try:
        send_message(pid, os.fsencode(message), bonus)
    except OSError as error:
        sys.stderr.write(f"Error: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())