"""Receive messages sent one bit per signal and print them."""

from __future__ import annotations

import codecs
import os
import signal
import sys
from typing import Any, Optional, Sequence, TextIO

from minitalk.output import printf
from minitalk.protocol import BitDecoder


class Server:
    """Decode SIGUSR1 (bit 1) and SIGUSR2 (bit 0) into text on ``file``.

    Each completed byte is written as soon as it forms a character; a NUL
    byte ends the message and is written as a newline.
    """

    def __init__(self, file: Optional[TextIO] = None) -> None:
        self._file = file
        self._decoder = BitDecoder()
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def _stream(self) -> TextIO:
        return self._file if self._file is not None else sys.stdout

    def handle_signal(self, signum: int, frame: Any) -> None:
        """Take one bit from a received signal."""
        byte = self._decoder.feed(1 if signum == signal.SIGUSR1 else 0)
        if byte is None:
            return
        if byte == 0:
            text = self._text.decode(b"", final=True) + "\n"
            self._text.reset()
        else:
            text = self._text.decode(bytes([byte]))
        if text:
            self._stream.write(text)
            self._stream.flush()

    def install(self) -> None:
        """Route SIGUSR1 and SIGUSR2 to this server."""
        signal.signal(signal.SIGUSR1, self.handle_signal)
        signal.signal(signal.SIGUSR2, self.handle_signal)

    def serve_forever(self) -> None:
        """Install the handlers and wait for signals until interrupted."""
        self.install()
        while True:
            signal.pause()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: print this process id, then receive messages."""
    printf("%d\n", os.getpid())
    sys.stdout.flush()
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())