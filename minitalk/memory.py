"""Byte-buffer operations: filling, searching, comparing and copying.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). Every length is checked against the buffers it covers, so
reading or writing past the end raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_span(buf: ReadableBuffer, offset: int, n: int, name: str) -> None:
    """Raise ValueError unless ``buf[offset:offset + n]`` lies within ``buf``."""
    if n < 0:
        raise ValueError("length must not be negative")
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative")
    if offset + n > len(buf):
        raise ValueError(
            f"{name}: span of {n} bytes at offset {offset} exceeds buffer of {len(buf)} bytes"
        )


def memset(buf: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Set the first ``length`` bytes of ``buf`` to ``value`` taken as an unsigned byte."""
    _check_span(buf, 0, length, "buf")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``nmemb`` items of ``size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    return bytearray(nmemb * size)


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_span(data, 0, n, "data")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: ReadableBuffer, s2: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or zero.
    """
    _check_span(s1, 0, n, "s1")
    _check_span(s2, 0, n, "s2")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dst: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``; return ``dst``."""
    _check_span(dst, 0, n, "dst")
    _check_span(src, 0, n, "src")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(
    buf: WritableBuffer, dst_offset: int, src_offset: int, n: int
) -> WritableBuffer:
    """Copy ``n`` bytes within ``buf`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the result is as if the source were copied
    aside first. Returns ``buf``.
    """
    _check_span(buf, dst_offset, n, "dst")
    _check_span(buf, src_offset, n, "src")
    buf[dst_offset : dst_offset + n] = bytes(buf[src_offset : src_offset + n])
    return buf