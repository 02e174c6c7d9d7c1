"""Byte-buffer helpers working on the first ``n`` bytes of a buffer.

Writable buffers are ``bytearray`` objects or writable ``memoryview`` slices
of them; read-only arguments may be any bytes-like object. Searches return an
index, or ``None`` when nothing is found.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_span(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` truncated to a byte."""
    _check_span(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(
    dest: Optional[WritableBuffer], src: Optional[Buffer], n: int
) -> Optional[WritableBuffer]:
    """Copy ``n`` bytes from ``src`` to ``dest`` and return ``dest``.

    When both buffers are ``None`` there is nothing to copy and ``None`` is
    returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_span(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(
    dest: Optional[WritableBuffer], src: Optional[Buffer], n: int
) -> Optional[WritableBuffer]:
    """Copy ``n`` bytes from ``src`` to ``dest``; the regions may overlap."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memmove needs both a destination and a source")
    _check_span(n, dest, src)
    snapshot = bytes(src[:n])
    dest[:n] = snapshot
    return dest


def memchr(buf: Buffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes."""
    _check_span(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memrchr(buf: Buffer, value: int, n: int) -> Optional[int]:
    """Index of the last byte equal to ``value`` within the first ``n`` bytes."""
    _check_span(n, buf)
    index = bytes(buf[:n]).rfind(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_span(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0