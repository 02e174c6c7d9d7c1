"""String helpers with C-string conventions.

Text arguments are ``str`` (or bytes-like where a NUL-terminated buffer is
involved). Searches return an index into the text, or ``None`` when nothing
is found. A search for the NUL character finds the end of the text, where a
terminator would sit.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Normalise a one-character string or a character code to a string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def strlen(text: Text) -> int:
    """Length of ``text`` up to its first NUL, or its whole length."""
    if isinstance(text, str):
        end = text.find("\0")
    else:
        end = bytes(text).find(b"\0")
    return len(text) if end < 0 else end


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``; NUL finds the end of the text."""
    ch = _char(c)
    if ch == "\0":
        return strlen(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``; NUL finds the end of the text."""
    ch = _char(c)
    if ch == "\0":
        return strlen(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    i = 0
    for left, right in zip(a, b):
        if i >= n or left != right or left == "\0":
            break
        i += 1
    if i == n:
        return 0
    left_code = ord(a[i]) if i < len(a) else 0
    right_code = ord(b[i]) if i < len(b) else 0
    return left_code - right_code


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if not needle:
        return 0
    limit = min(length, len(haystack))
    for start in range(max(limit, 0)):
        if start + len(needle) <= length and haystack.startswith(needle, start):
            return start
    return None


def strlcpy(dest: bytearray, src: Text, size: int) -> int:
    """Copy ``src`` into ``dest`` holding at most ``size`` bytes with the NUL.

    Returns the length of ``src``, so a result of ``size`` or more means the
    copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer length {len(dest)}")
    source = bytes(src)[: strlen(src)]
    if size > 0:
        count = min(size - 1, len(source))
        dest[:count] = source[:count]
        dest[count] = 0
    return len(source)


def strlcat(dest: bytearray, src: Text, size: int) -> int:
    """Append ``src`` to the NUL-terminated text in ``dest`` within ``size`` bytes.

    Returns the length the full result would have had; when no terminator is
    found within ``size`` bytes, returns ``size`` plus the length of ``src``
    and leaves ``dest`` untouched.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer length {len(dest)}")
    source = bytes(src)[: strlen(src)]
    terminator = bytes(dest[:size]).find(b"\0")
    dest_len = size if terminator < 0 else terminator
    if dest_len == size:
        return len(source) + size
    count = min(size - dest_len - 1, len(source))
    dest[dest_len : dest_len + count] = source[:count]
    dest[dest_len + count] = 0
    return dest_len + len(source)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    if text is None:
        raise TypeError("strdup needs a string")
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if text is None:
        raise TypeError("substr needs a string")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    if a is None or b is None:
        raise TypeError("strjoin needs two strings")
    return a + b


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return text.strip(charset)


def split(text: str, sep: CharLike) -> List[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if text is None:
        raise TypeError("split needs a string")
    return [word for word in text.split(_char(sep)) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]) -> None:
    """Call ``func(index, chars)`` for every position so it may update ``chars[index]``."""
    for index in range(len(chars)):
        func(index, chars)