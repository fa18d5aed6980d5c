"""A small printf-style formatter and helpers that write to file descriptors.

Supported conversions: ``%s %d %i %u %x %X %p %c %%``. An unknown
conversion character is dropped without consuming an argument.
"""

from __future__ import annotations

import operator
import os
import sys
from typing import Any, Optional, TextIO, Union

__all__ = [
    "format",
    "printf",
    "put_char_fd",
    "put_str_fd",
    "put_endl_fd",
    "put_nbr_fd",
]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_CONVERSIONS = frozenset("sdiuxXpc")


def _signed32(value: Any) -> int:
    n = operator.index(value) & _MASK32
    return n - (1 << 32) if n >= (1 << 31) else n


def _unsigned32(value: Any) -> int:
    return operator.index(value) & _MASK32


def _render(spec: str, arg: Any) -> str:
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in ("d", "i"):
        return str(_signed32(arg))
    if spec == "u":
        return str(_unsigned32(arg))
    if spec == "x":
        return f"{_unsigned32(arg):x}"
    if spec == "X":
        return f"{_unsigned32(arg):X}"
    if spec == "p":
        address = 0 if arg is None else operator.index(arg) & _MASK64
        return "(nil)" if address == 0 else f"0x{address:x}"
    # spec == "c"
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(operator.index(arg) & 0xFF)


def format(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            try:
                arg = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for format {fmt!r}") from None
            pieces.append(_render(spec, arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: Union[str, int], fd: int) -> None:
    """Write one character to ``fd``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([operator.index(c) & 0xFF])
    _write_all(fd, data)


def put_str_fd(s: Optional[str], fd: int) -> None:
    """Write a string to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: Optional[str], fd: int) -> None:
    """Write a string followed by a newline to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, (s + "\n").encode("utf-8"))


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of an integer to ``fd``."""
    _write_all(fd, str(operator.index(n)).encode("ascii"))