# sigtalk

sigtalk is a small message channel between two processes on the same POSIX
machine. It uses only signals. The client sends each byte of a message as
eight signals, least significant bit first: `SIGUSR1` for a 1 bit and
`SIGUSR2` for a 0 bit. After each bit, the client waits for the server to
acknowledge it with `SIGUSR1`. A NUL byte ends the message.

## Installation

```
pip install .
```

The server waits with `signal.sigwaitinfo`, which exists on Linux but not
on every POSIX system. Where it is missing, `sigtalk-server` prints `Error`
to standard error and exits with status 1.

## Usage

Start the server. It prints its process id and then waits for messages:

```
$ sigtalk-server
PID: 12345
```

In another terminal, send a message to that PID:

```
$ sigtalk-client 12345 "hello there"
```

The server writes each received byte to its standard output. In the
default mode it writes only bytes below 128. The terminating NUL is not
among them.

### Client checks and exit status

Before sending, the client checks its arguments. It needs exactly two of
them, a PID and a message. The PID must consist of ASCII digits only and
must fit in a signed 32-bit integer.

If the arguments are wrong, the client writes usage instructions to
standard error and exits with status 1. It also exits with status 1 and
reports `Error, process doesn't exist` in two cases: the PID is larger
than 4194304, or no process with that PID exists. If sending a signal
fails partway through, the client prints the error and exits with
status 1. On success it exits with status 0.

Text messages are sent as the bytes of the command-line argument. Anything
after an embedded NUL is not sent.

### Acknowledged mode

Both commands accept `--bonus`. The client takes it only as its first
argument.

```
$ sigtalk-server --bonus
$ sigtalk-client --bonus 12345 "hello there"
```

In this mode the server does three things differently:

- It writes bytes of every value.
- When a message's NUL byte arrives, it writes
  `Message received from client PID: <pid>`.
- It sends `SIGUSR2` to the client. The client then prints `Message sent`.

Stop the server with Ctrl-C.

## Library

The protocol can be used without sending any signals:

```python
from sigtalk.protocol import ByteDecoder, char_to_bits, encode_message

char_to_bits(ord("A"))           # [1, 0, 0, 0, 0, 0, 1, 0]
bits = list(encode_message("hi"))  # 8 bits per byte, then 8 bits of NUL
decoder = ByteDecoder()
received = [b for b in map(decoder.feed, bits) if b is not None]
# received == [104, 105, 0]
```

Other modules:

- `sigtalk.validation` checks client arguments.
  - `parse_client_args(argv)` returns `(pid, message)`.
  - `validate_pid(text)` checks a PID string.
  - `is_within_int_limits(text)` checks that a number fits in a signed
    32-bit integer.
  - Bad arguments raise `UsageError`, a `ValueError` whose message is the
    usage text.
- `sigtalk.server` has the server side.
  - `Server(output, bonus)` decodes bits and writes bytes to any binary
    stream.
  - `Server.handle_bit(signum, sender_pid)` handles one bit. It returns the
    completed byte, or `None` if the byte is not complete yet. It always
    acknowledges the sender with `SIGUSR1`.
  - `Server.serve_forever()` waits for signals and handles them.
- `sigtalk.client.send_message(pid, message, bonus)` sends a message and
  waits for each acknowledgement.
- `sigtalk.textutils` has string helpers: `atoi`, `itoa`, `split`,
  `strtrim`, `strnstr`, `strncmp`, `substr` and `strjoin`.
- `sigtalk.printf` has `format_printf` and `printf`.
  - They support `%c %s %p %d %i %u %x %X %%`.
  - A `None` string prints as `(null)`. A `None` or zero pointer prints as
    `(nil)`.
  - `printf` returns the number of characters it wrote.
- `sigtalk.lines` has `LineReader` and `read_lines`. They return lines,
  each with its newline, using a fixed-size read buffer (42 by default).
  The source can be a file descriptor or any object with a `read(size)`
  method that returns `str` or `bytes`.

## Limitations

- The server keeps one bit decoder for all senders. If two clients send at
  the same time, their bits get mixed together.
- Delivery rests entirely on signal acknowledgements. Nothing is stored,
  retried or checked for corruption.

## Tests

```
pip install ".[test]"
pytest
```