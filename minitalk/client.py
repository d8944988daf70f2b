"""Send a text message to a listening server, one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, Optional, Sequence

from minitalk.output import printf
from minitalk.protocol import ByteLike, Message, char_to_bits, message_to_bits
from minitalk.text import atoi

DEFAULT_DELAY = 0.0005
"""Pause after each signal, in seconds, so the receiver can keep up."""

KillFunc = Callable[[int, int], None]


def _signal_for(bit: int) -> int:
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def _send_bits(bits, pid: int, delay: float, kill: Optional[KillFunc]) -> None:
    send = kill if kill is not None else os.kill
    for bit in bits:
        send(pid, _signal_for(bit))
        if delay > 0:
            time.sleep(delay)


def send_char(
    pid: int,
    c: ByteLike,
    delay: float = DEFAULT_DELAY,
    kill: Optional[KillFunc] = None,
) -> None:
    """Send the eight bits of one byte to process ``pid``, most significant first.

    A 1 bit is sent as SIGUSR1, a 0 bit as SIGUSR2.
    """
    _send_bits(char_to_bits(c), pid, delay, kill)


def send_message(
    pid: int,
    message: Message,
    delay: float = DEFAULT_DELAY,
    kill: Optional[KillFunc] = None,
) -> None:
    """Send every byte of ``message`` and then a NUL terminator to ``pid``."""
    _send_bits(message_to_bits(message), pid, delay, kill)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``client <pid> <message>``."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else "client"
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("FAUX - utilise 2 arguments: %s <pid> <message>\n", program)
        return 0
    server_pid = atoi(args[0])
    if server_pid <= 0:
        print(f"{program}: invalid pid: {args[0]!r}", file=sys.stderr)
        return 1
    try:
        send_message(server_pid, args[1])
    except OSError as exc:
        print(f"{program}: cannot signal process {server_pid}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())