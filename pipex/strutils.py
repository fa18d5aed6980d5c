"""String helpers: number parsing and printing, splitting, trimming and slicing."""

from __future__ import annotations

import operator
from typing import Callable

__all__ = ["atoi", "itoa", "split", "trim", "substr", "join", "map_indexed"]

_WHITESPACE = " \n\t\v\f\r"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit; no digits at all yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(operator.index(n))


def _single_char(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between repeats."""
    return [word for word in text.split(_single_char(sep)) if word]


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    start = operator.index(start)
    length = operator.index(length)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("join expects two strings")
    return s1 + s2


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))