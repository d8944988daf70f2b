"""Searching, comparing and bounded copying of strings.

Positions are returned as indices rather than pointers; ``None`` means not
found. Searching for the NUL character finds the end of the string, as a
terminator would.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

NUL = "\0"


def _char(c: Union[int, str]) -> str:
    """Return ``c`` as a single character."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _size(n: int, name: str) -> int:
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    return n


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL returns ``len(s)``.
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL returns ``len(s)``.
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first differing characters, a shorter
    string counting as ending in NUL; zero when they agree.
    """
    _size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when absent.
    """
    _size(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters including the terminator.

    Returns the new buffer contents and the length of ``src``. With a
    ``dstsize`` of zero the buffer is left as ``dst``.
    """
    _size(dstsize, "dstsize")
    if dstsize == 0:
        return dst, len(src)
    return src[: dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the new buffer contents and the length the full result would
    have had: ``len(dst) + len(src)``, or ``dstsize + len(src)`` when
    ``dstsize`` does not exceed ``len(dst)``.
    """
    _size(dstsize, "dstsize")
    len_dst = len(dst)
    if dstsize > len_dst:
        wanted = len(src) + len_dst
    else:
        wanted = len(src) + dstsize
    room = max(0, dstsize - len_dst - 1)
    return dst + src[:room], wanted