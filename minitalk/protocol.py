"""Bit-level encoding of messages sent as a sequence of two signals.

Each byte travels as eight bits, most significant first. A bit of 1 is sent
as the first user signal and a bit of 0 as the second. A message ends with a
NUL byte.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8

ByteLike = Union[int, bytes, str]
Message = Union[str, bytes, bytearray]


def _byte_value(c: ByteLike) -> int:
    if isinstance(c, bool):
        raise TypeError("expected a byte, got bool")
    if isinstance(c, int):
        value = c
    elif isinstance(c, (bytes, str)):
        if len(c) != 1:
            raise ValueError("expected a single byte or character")
        value = c[0] if isinstance(c, bytes) else ord(c)
    else:
        raise TypeError(f"expected a byte, got {type(c).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def char_to_bits(c: ByteLike) -> tuple[int, ...]:
    """Return the eight bits of a byte, most significant first."""
    value = _byte_value(c)
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE)))


def message_to_bits(message: Message) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of a NUL terminator.

    Text is encoded as UTF-8. The message ends at its first NUL byte.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in data:
        yield from char_to_bits(byte)
    yield from char_to_bits(0)


@dataclass
class BitDecoder:
    """Reassemble bytes from bits received most significant first."""

    _value: int = field(default=0, init=False)
    _count: int = field(default=0, init=False)

    def feed(self, bit: int) -> Optional[int]:
        """Take one bit; return the completed byte after every eighth bit."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        completed = self._value
        self.reset()
        return completed

    def reset(self) -> None:
        """Discard any partially received byte."""
        self._value = 0
        self._count = 0