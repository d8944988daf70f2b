# minitalk

A small messenger for POSIX systems that works over signals. The server
prints its process id and then waits. The client sends it a text message one
bit at a time. `SIGUSR1` carries a 1 bit and `SIGUSR2` carries a 0 bit. Each
byte travels as 8 bits, most significant bit first, and a NUL byte ends the
message. Text is sent as UTF-8.

The server puts the bits back together into bytes. It writes each character
as soon as that character is complete, and it writes a newline when the NUL
byte arrives. Byte sequences that are not valid UTF-8 are shown as
replacement characters.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal:

```
minitalk-server
```

It prints its pid, for example `4242`, and runs until you stop it with Ctrl-C.
To send a message, run this from another terminal:

```
minitalk-client 4242 "hello there"
```

The server's terminal then shows `hello there`.

The client pauses for 0.5 ms after each signal so that the server can keep up.
It takes exactly two arguments, the pid and the message. With any other
number of arguments it prints a usage line and exits with status 0. If the pid
is not a positive number, or the process cannot be signalled, it prints an
error and exits with status 1. A message stops at its first NUL character.

## Library

- `minitalk.protocol` encodes text to bits and decodes bits back, with no
  signals involved:
  - `char_to_bits(c)` returns the 8 bits of a byte.
  - `message_to_bits(message)` yields the bits of a message followed by a NUL
    terminator.
  - `BitDecoder` has `feed(bit)`, which returns the completed byte after every
    eighth bit and `None` otherwise, and `reset()`.
- `minitalk.client` provides `send_char(pid, c, delay, kill)` and
  `send_message(pid, message, delay, kill)`. The `kill` argument takes a
  callable `(pid, signum)`, so the signals can go somewhere other than
  `os.kill`.
- `minitalk.server` provides `Server(file=None)`:
  - `handle_signal(signum, frame)` takes one bit.
  - `install()` routes both signals to the server.
  - `serve_forever()` installs the handlers and then waits.
- `minitalk.output` provides `format_string(fmt, *args)` and
  `printf(fmt, *args, file=None)`. They handle `%c %s %d %i %u %x %X %p %%`.
  Integers are treated as 32-bit C values, and `%s` of `None` prints
  `(null)`. An unknown conversion, a lone `%` or a missing argument raises
  `FormatError`. The module also has `put_char`, `put_str`, `put_endl` and
  `put_nbr`.
- `minitalk.chars` classifies and converts ASCII characters: `isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower` and `toupper`.
- `minitalk.strings` provides `strlen`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strlcpy` and `strlcat`. Positions are returned as indices, and
  `None` means the text was not found. `strlcpy` and `strlcat` return the new
  contents together with the length they tried to create.
- `minitalk.memory` works on bytes-like buffers with `memset`, `bzero`,
  `calloc`, `memchr`, `memcmp`, `memcpy` and `memmove(buf, dst_offset,
  src_offset, n)`. Lengths that run past a buffer raise `ValueError`.
- `minitalk.text` provides `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strjoin`, `strdup`, `strmapi` and `striteri`.

Example:

```python
from minitalk.protocol import BitDecoder, message_to_bits

decoder = BitDecoder()
received = [b for b in map(decoder.feed, message_to_bits("hi")) if b is not None]
# received == [104, 105, 0]
```

## Limitations

- The server sends no acknowledgement. The client cannot tell whether a
  message arrived; it only knows whether the signals could be sent.
- If signals arrive faster than the server handles them, bits can be lost.
- The commands need `SIGUSR1`, `SIGUSR2` and `signal.pause`, so they run only
  on POSIX systems.

## Tests

```
pip install ".[test]"
pytest
```