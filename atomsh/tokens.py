"""Splitting a prepared command line into typed tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from atomsh.chars import isalnum
from atomsh.preprocess import QUOTE_CHARS, UnclosedQuoteError


class TokenType(Enum):
    """Kinds of token; the values are the names shown to the user."""

    REDIR_IN = "REDIR_IN"
    REDIR_OUT = "REDIR_OUT"
    PIPE = "PIPE"
    WORD = "MOT"


@dataclass(frozen=True)
class Token:
    """A piece of the command line and its kind, if it has a known one."""

    value: str
    type: Optional[TokenType]


def type_word(value: str) -> Optional[TokenType]:
    """A word holds at least one ASCII letter, digit or ``-``."""
    if any(isalnum(ch) or ch == "-" for ch in value):
        return TokenType.WORD
    return None


def type_pipe(value: str) -> Optional[TokenType]:
    """A pipe token ends with ``|``."""
    return TokenType.PIPE if value.endswith("|") else None


def type_redir(value: str) -> Optional[TokenType]:
    """A lone ``<`` or ``>`` is an input or output redirection."""
    if value == "<":
        return TokenType.REDIR_IN
    if value == ">":
        return TokenType.REDIR_OUT
    return None


def token_type(value: str) -> Optional[TokenType]:
    """Classify ``value`` as redirection, pipe or word, in that order."""
    for classify in (type_redir, type_pipe, type_word):
        kind = classify(value)
        if kind is not None:
            return kind
    return None


def has_mixed_quotes(text: str) -> bool:
    """True when a double quote directly touches a single quote anywhere."""
    return any(
        {a, b} == {'"', "'"} for a, b in zip(text, text[1:])
    )


def tokenize(text: str) -> List[Token]:
    """Split a prepared line on single spaces, keeping quoted runs whole.

    When the line holds touching double and single quotes, the first and
    last character of every token are dropped.
    """
    mixed = has_mixed_quotes(text)
    tokens: List[Token] = []
    start = 1 if mixed else 0
    length = len(text)
    i = 0
    while i < length:
        ch = text[i]
        if ch in QUOTE_CHARS:
            close = text.find(ch, i + 1)
            if close < 0:
                raise UnclosedQuoteError()
            i = close
        if i + 1 == length or text[i + 1] == " ":
            value = text[start:i] if mixed else text[start : i + 1]
            tokens.append(Token(value, token_type(value)))
            start = i + 2
        i += 1
    return tokens


def _type_name(token: Token) -> str:
    return "(null)" if token.type is None else token.type.value


def format_tokens(tokens: Iterable[Token]) -> str:
    """One ``value: ... | type: ...`` line per token."""
    return "".join(f"value: {t.value} | type: {_type_name(t)}\n" for t in tokens)


def format_types(tokens: Iterable[Token]) -> str:
    """The type names of the tokens, each followed by a space, then a newline."""
    return "".join(f"{_type_name(t)} " for t in tokens) + "\n"