"""Formatted output and writing of characters, strings and numbers.

``format_string`` understands the conversions ``%c``, ``%s``, ``%d``, ``%i``,
``%u``, ``%x``, ``%X``, ``%p`` and ``%%``. Integer conversions take their
argument as a 32-bit C ``int`` or ``unsigned int``, so out-of-range values
wrap around.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for an unknown conversion, a lone '%' or a missing argument."""


def _stream(file: Optional[TextIO]) -> TextIO:
    return file if file is not None else sys.stdout


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise FormatError(f"%{spec} expects an integer, got {type(value).__name__}")
    return int(value)


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _conv_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _conv_signed(value: Any) -> str:
    return str(_to_int32(_as_int(value, "d")))


def _conv_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _UINT32_MASK)


def _conv_hex_lower(value: Any) -> str:
    return format(_as_int(value, "x") & _UINT32_MASK, "x")


def _conv_hex_upper(value: Any) -> str:
    return format(_as_int(value, "X") & _UINT32_MASK, "X")


def _conv_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_str,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
    "p": _conv_pointer,
}


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument."""
    pieces: list[str] = []
    values: Iterator[Any] = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise FormatError(f"unknown conversion '%{spec}'")
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for '%{spec}'") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    _stream(file).write(text)
    return len(text)


def put_char(c: str, file: Optional[TextIO] = None) -> None:
    """Write the single character ``c``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("put_char expects a single character")
    _stream(file).write(c)


def put_str(s: str, file: Optional[TextIO] = None) -> None:
    """Write the string ``s``."""
    _stream(file).write(s)


def put_endl(s: str, file: Optional[TextIO] = None) -> None:
    """Write the string ``s`` followed by a newline."""
    _stream(file).write(s + "\n")


def put_nbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write the decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _stream(file).write(str(n))