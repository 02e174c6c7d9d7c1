"""Writing characters, strings and numbers to a stream or file descriptor.

A stream is either an object with a ``write`` method accepting ``str`` or
an integer file descriptor, which receives the text encoded as UTF-8.
"""

from __future__ import annotations

import os
from typing import TextIO, Union

from atomsh.numbers import itoa

Stream = Union[TextIO, int]


def _emit(text: str, stream: Stream) -> None:
    if isinstance(stream, bool):
        raise TypeError("a stream must be a writable object or a file descriptor")
    if isinstance(stream, int):
        data = text.encode("utf-8")
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def putchar_fd(c: Union[str, int], stream: Stream) -> None:
    """Write one character, given as a one-character string or a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _emit(ch, stream)


def putstr_fd(text: str, stream: Stream) -> None:
    """Write ``text``."""
    if text is None:
        raise TypeError("putstr_fd needs a string")
    _emit(text, stream)


def putendl_fd(text: str, stream: Stream) -> None:
    """Write ``text`` followed by a newline."""
    if text is None:
        raise TypeError("putendl_fd needs a string")
    _emit(text + "\n", stream)


def putnbr_fd(n: int, stream: Stream) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _emit(itoa(n), stream)