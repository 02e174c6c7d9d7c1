"""The interactive read-parse-print loop of the shell.

Every line read is spaced around its redirections, cleaned of surplus
whitespace, split into tokens and reported. Tokens accumulate over the whole
session, so each report lists everything tokenised so far.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO

from atomsh.preprocess import (
    UnclosedQuoteError,
    add_redir_space,
    clear_input,
    has_unclosed_quotes,
)
from atomsh.strutil import strncmp
from atomsh.tokens import Token, format_tokens, format_types, tokenize

PROMPT = "ATOM$ "
EXIT_WORD = "exit"


def is_exit_command(line: Optional[str]) -> bool:
    """True for end of input or a line that is a prefix of ``exit``.

    The empty line counts too, as it is a prefix of every word.
    """
    if line is None:
        return True
    return strncmp(line, EXIT_WORD, len(line)) == 0


class Session:
    """State of one shell session: its output, tokens and history."""

    def __init__(self, out: TextIO) -> None:
        self.out = out
        self.tokens: List[Token] = []
        self.history: List[str] = []

    def handle(self, line: Optional[str]) -> bool:
        """Process one input line; return False once the session should end."""
        if is_exit_command(line):
            self.out.write(f"{EXIT_WORD}\n")
            return False
        assert line is not None
        spaced = add_redir_space(line)
        self.out.write(f"{spaced}\n")
        cleaned = clear_input(spaced)
        try:
            if has_unclosed_quotes(cleaned):
                raise UnclosedQuoteError()
            new_tokens = tokenize(cleaned)
        except UnclosedQuoteError as error:
            self.out.write(f"{error}\n")
            self.history.append(line)
            return True
        self.tokens.extend(new_tokens)
        self.out.write(format_tokens(self.tokens))
        self.out.write(format_types(self.tokens))
        self.history.append(line)
        return True


def run(lines: Iterable[str], out: TextIO) -> int:
    """Run a session over ``lines``; running out of lines ends it like ``exit``."""
    session = Session(out)
    for line in lines:
        if not session.handle(line):
            return 0
    session.handle(None)
    return 0


def _prompted_lines() -> Iterator[str]:
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        pass
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive shell on standard input and output."""
    return run(_prompted_lines(), sys.stdout)


if __name__ == "__main__":
    sys.exit(main())