"""Receiving messages sent one bit per signal and writing them out."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from typing import BinaryIO

from .protocol import ByteDecoder


def _listened_signals() -> set[int]:
    return {signal.SIGUSR1, signal.SIGUSR2}


def _block_signals() -> None:
    signal.pthread_sigmask(signal.SIG_BLOCK, _listened_signals())


def _send(pid: int, signum: int) -> None:
    with contextlib.suppress(OSError):
        os.kill(pid, signum)


class Server:
    """Decodes SIGUSR1 as a 1 bit and SIGUSR2 as a 0 bit.

    Every received bit is acknowledged to its sender with SIGUSR1. In bonus
    mode the end of a message is reported and signalled with SIGUSR2, and
    bytes of any value are written; otherwise only bytes below 128 are.
    """

    def __init__(self, output: BinaryIO | None = None, bonus: bool = False) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.bonus = bonus
        self._decoder = ByteDecoder()

    def _write(self, data: bytes) -> None:
        self.output.write(data)
        self.output.flush()

    def _message_received(self, pid: int) -> None:
        self._write(f"\nMessage received from client PID: {pid}\n".encode())
        _send(pid, signal.SIGUSR2)

    def handle_bit(self, signum: int, sender_pid: int) -> int | None:
        """Take one bit from ``sender_pid``; return the byte it completes, if any."""
        byte = self._decoder.feed(1 if signum == signal.SIGUSR1 else 0)
        if byte is not None:
            if self.bonus:
                if byte == 0:
                    self._message_received(sender_pid)
                self._write(bytes([byte]))
            elif byte < 128:
                self._write(bytes([byte]))
        _send(sender_pid, signal.SIGUSR1)
        return byte

    def serve_forever(self) -> None:
        """Wait for signals and handle them until interrupted."""
        signals = _listened_signals()
        _block_signals()
        while True:
            info = signal.sigwaitinfo(signals)
            self.handle_bit(info.si_signo, info.si_pid)


def main(argv: list[str] | None = None) -> int:
    """Print this process id and write every message received."""
    args = sys.argv[1:] if argv is None else list(argv)
    bonus = "--bonus" in args
    if not (hasattr(signal, "sigwaitinfo") and hasattr(signal, "SIGUSR1")):
        sys.stderr.write("Error\n")
        return 1
    server = Server(bonus=bonus)
    try:
        _block_signals()
    except OSError:
        sys.stderr.write("Error\n")
        return 1
    server.output.write(f"PID: {os.getpid()}\n".encode())
    server.output.flush()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())