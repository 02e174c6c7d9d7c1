"""First pass over a command line: spacing around redirections and blanks.

The result of :func:`parse_line` is a line in which every redirection
operator stands alone between single spaces, with no leading, trailing or
repeated whitespace, ready to be split into tokens.
"""

from __future__ import annotations

from itertools import groupby

from atomsh.chars import isalpha

REDIRECTION_CHARS = "<>"
QUOTE_CHARS = "'\""
_WHITESPACE = " \t\n\v\f\r"


class UnclosedQuoteError(ValueError):
    """Raised when a line holds a quote that is never closed."""

    def __init__(self, message: str = "unclosed quotes") -> None:
        super().__init__(message)


def count_redir(text: str) -> int:
    """Number of ``<`` and ``>`` characters in ``text``."""
    return sum(1 for ch in text if ch in REDIRECTION_CHARS)


def add_redir_space(text: str) -> str:
    """Surround every ``<`` and ``>`` with one space on each side."""
    return "".join(f" {ch} " if ch in REDIRECTION_CHARS else ch for ch in text)


def is_space(char: str) -> bool:
    """True for a space or an ASCII control blank (tab through carriage return)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char in _WHITESPACE


def count_space(text: str) -> int:
    """Number of whitespace characters in ``text``."""
    return sum(1 for ch in text if is_space(ch))


def count_words(text: str) -> int:
    """Number of letters that end a word, i.e. are followed by a space or the end."""
    following = text[1:] + "\0"
    return sum(
        1 for ch, nxt in zip(text, following) if isalpha(ch) and nxt in (" ", "\0")
    )


def skip_space(text: str) -> int:
    """Index of the first non-whitespace character, or the length of ``text``."""
    for index, ch in enumerate(text):
        if not is_space(ch):
            return index
    return len(text)


def squeeze_spaces(text: str) -> str:
    """Drop leading and trailing whitespace and reduce inner runs to one space."""
    return " ".join("".join(run) for blank, run in groupby(text, key=is_space) if not blank)


def clear_input(text: str) -> str:
    """Return ``text`` with its whitespace normalised for tokenisation."""
    return squeeze_spaces(text[skip_space(text):])


def has_unclosed_quotes(text: str) -> bool:
    """True when the total number of single and double quotes is odd."""
    return sum(1 for ch in text if ch in QUOTE_CHARS) % 2 != 0


def parse_line(text: str) -> str:
    """Space out redirections and normalise whitespace.

    Raises :class:`UnclosedQuoteError` when the quotes do not pair up.
    """
    cleaned = clear_input(add_redir_space(text))
    if has_unclosed_quotes(cleaned):
        raise UnclosedQuoteError()
    return cleaned