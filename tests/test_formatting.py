import io
import os

import pytest

from pipex.formatting import (
    format,
    printf,
    put_char_fd,
    put_endl_fd,
    put_nbr_fd,
    put_str_fd,
)


def _capture_fd(write):
    read_end, write_end = os.pipe()
    try:
        write(write_end)
    finally:
        os.close(write_end)
    with os.fdopen(read_end, "rb") as reader:
        return reader.read()


def test_plain_text_passes_through():
    assert format("hello world") == "hello world"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_decimal_round_trip(n):
    assert int(format("%d", n)) == n
    assert format("%i", n) == format("%d", n)


def test_decimal_wraps_to_32_bits():
    assert int(format("%d", 2**31)) == -(2**31)


def test_unsigned_wraps_negative():
    assert int(format("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 48879, 2**32 - 1])
def test_hex_round_trip(n):
    lower = format("%x", n)
    upper = format("%X", n)
    assert int(lower, 16) == n
    assert lower == upper.lower()
    assert lower == lower.lower()


def test_pointer_null_and_value():
    assert format("%p", 0) == "(nil)"
    assert format("%p", None) == "(nil)"
    text = format("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_string_and_null_string():
    assert format("[%s]", "abc") == "[abc]"
    assert format("%s", None) == "(null)"


def test_char_from_str_and_code():
    assert format("%c", "Z") == "Z"
    assert format("%c", ord("q")) == "q"


def test_percent_literal_and_unknown_specifier():
    assert format("100%%") == "100%"
    assert format("a%qb", 5) == "ab"
    assert format("end%") == "end"


def test_mixed_conversions():
    assert format("%s=%d", "x", 3) == "x=3"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format("%d %d", 1)


def test_char_with_long_string_raises():
    with pytest.raises(ValueError):
        format("%c", "ab")


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("Path: %s\n", "/bin/ls", stream=stream)
    assert stream.getvalue() == "Path: /bin/ls\n"
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s|%%", "abc")
    out = capsys.readouterr().out
    assert out == "abc|%"
    assert count == len(out)


def test_put_char_fd():
    assert _capture_fd(lambda fd: put_char_fd("x", fd)) == b"x"
    assert _capture_fd(lambda fd: put_char_fd(ord("y"), fd)) == b"y"


def test_put_str_fd_and_none():
    assert _capture_fd(lambda fd: put_str_fd("text", fd)) == b"text"
    assert _capture_fd(lambda fd: put_str_fd(None, fd)) == b""


def test_put_endl_fd_and_none():
    assert _capture_fd(lambda fd: put_endl_fd("line", fd)) == b"line\n"
    assert _capture_fd(lambda fd: put_endl_fd(None, fd)) == b""


def test_put_nbr_fd_min_int():
    assert _capture_fd(lambda fd: put_nbr_fd(-2147483648, fd)) == b"-2147483648"


@pytest.mark.parametrize("n", [0, 9, 10, -1, 987654])
def test_put_nbr_fd_round_trip(n):
    assert int(_capture_fd(lambda fd: put_nbr_fd(n, fd))) == n