"""Building new strings: number conversion, splitting, trimming and mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_SPACES = frozenset(" \n\t\v\f\r")


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character")
    return c


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. A string without digits gives 0.
    """
    rest = s.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on runs of ``sep``, dropping empty words."""
    _single_char(sep, "sep")
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return "".join(s)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` on each element of ``s`` and update it in place.

    When ``f`` returns a value, that value replaces the element; ``None``
    leaves it unchanged.
    """
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement