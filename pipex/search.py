"""Bounded comparison and search over strings and byte buffers.

String functions follow C-string rules: text is compared as UTF-8 bytes
and ends at the first NUL character. Positions are returned as indices,
with ``None`` when nothing is found.
"""

from __future__ import annotations

import operator
from itertools import islice, zip_longest
from typing import Optional, Union

Text = Union[str, bytes]

__all__ = ["strncmp", "strnstr", "strchr", "memchr", "memcmp"]


def _cstr(text: Text) -> bytes:
    """Return the bytes of ``text`` up to, not including, the first NUL."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return data.split(b"\0", 1)[0]


def _check_count(n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    return n


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` bytes of two strings.

    Returns 0 when they are equal over that span, otherwise the difference
    between the first pair of bytes that differ.
    """
    n = _check_count(n)
    for a, b in islice(zip_longest(_cstr(s1), _cstr(s2), fillvalue=0), n):
        if a != b:
            return a - b
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` units of ``haystack``.

    An empty needle matches at 0. Returns the index of the first match or None.
    """
    length = _check_count(length)
    nul = "\0" if isinstance(haystack, str) else b"\0"
    haystack = haystack.split(nul, 1)[0]
    needle = needle.split(nul, 1)[0]
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strchr(text: Text, ch: Union[str, int]) -> Optional[int]:
    """Return the index of the first ``ch`` in ``text``.

    Searching for NUL yields the index of the string's end. Returns None
    when the character does not occur.
    """
    if isinstance(text, str):
        target = ch if isinstance(ch, str) else chr(operator.index(ch))
        if len(target) != 1:
            raise ValueError(f"expected a single character, got {target!r}")
        nul: Text = "\0"
    else:
        target = ord(ch) if isinstance(ch, str) else operator.index(ch) & 0xFF
        nul = b"\0"
    body = text.split(nul, 1)[0]
    if target in ("\0", 0):
        return len(body)
    index = body.find(target)
    return None if index < 0 else index


def memchr(data: bytes, byte: int, n: int) -> Optional[int]:
    """Return the index of ``byte`` within the first ``n`` bytes of ``data``, or None."""
    n = _check_count(n)
    view = bytes(data)
    if n > len(view):
        raise ValueError(f"count {n} exceeds buffer length {len(view)}")
    index = view.find(operator.index(byte) & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns 0 when equal, otherwise the difference of the first differing bytes.
    """
    n = _check_count(n)
    left, right = bytes(a), bytes(b)
    if n > len(left) or n > len(right):
        raise ValueError(f"count {n} exceeds buffer length")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0