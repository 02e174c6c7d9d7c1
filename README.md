# atomsh

`atomsh` is a small interactive shell front end. It reads command lines,
cleans them up and splits them into typed tokens. It prints the tokens and
does not run commands.

## Installation

```
pip install .
```

## Interactive use

```
atomsh
```

The prompt is `ATOM$ `. For each line you type, the shell does the following:

1. It echoes the line with a space added on each side of every `<` and `>`.
2. It removes leading and trailing whitespace and turns each inner run of
   whitespace into a single space.
3. If the line has an odd number of quote characters (`'` and `"` counted
   together), it prints `unclosed quotes` and goes on to the next line.
4. Otherwise it splits the line into tokens. It prints one line per token
   (`value: ... | type: ...`), then a line with the token types.

Tokens pile up across the session, so each report lists every token seen so
far.

The session ends on end of input (Ctrl-D). It also ends on any line that is a
prefix of `exit`, and that includes `exit` itself, `e`, `ex` and the empty
line. On the way out the shell prints `exit`.

## Library use

```python
from atomsh.preprocess import parse_line, UnclosedQuoteError
from atomsh.tokens import tokenize, format_tokens, format_types

line = parse_line("cat   file.txt>out | grep x")
tokens = tokenize(line)
print(format_tokens(tokens), end="")
print(format_types(tokens), end="")
```

`atomsh.preprocess`:

- `add_redir_space(text)` puts a space on each side of every `<` and `>`.
- `clear_input(text)` and `squeeze_spaces(text)` normalise whitespace.
- `has_unclosed_quotes(text)` checks whether the total count of quote
  characters is odd.
- `parse_line(text)` runs all of the above. It raises `UnclosedQuoteError` (a
  `ValueError`) when the quotes do not pair up.
- Small counters are also available: `count_redir`, `count_space`,
  `count_words`, `skip_space`, `is_space`.

`atomsh.tokens`:

- `tokenize(text)` splits a prepared line on single spaces and keeps quoted
  runs whole. It returns a list of frozen `Token(value, type)` objects. When a
  double quote directly touches a single quote somewhere in the line (see
  `has_mixed_quotes`), the first and last character of every token are
  dropped.
- `token_type(value)` applies `type_redir`, then `type_pipe`, then
  `type_word`, and returns the first match or `None`:
  - a lone `<` gives `TokenType.REDIR_IN`
  - a lone `>` gives `TokenType.REDIR_OUT`
  - a value ending in `|` gives `TokenType.PIPE`
  - a value with any ASCII letter, digit or `-` gives `TokenType.WORD`, which
    is shown as `MOT`
- `format_tokens(tokens)` and `format_types(tokens)` produce the report text.
  A token with no type is shown as `(null)`.

`atomsh.shell`:

- `Session(out)` keeps the accumulated `tokens` and the input `history`.
  `Session.handle(line)` processes one line and returns `False` once the
  session should end.
- `run(lines, out)` feeds an iterable of lines to a session. Running out of
  lines ends it the same way as `exit`.
- `is_exit_command(line)` applies the exit rule described above.
- `main()` is the entry point of the `atomsh` command.

## Helper modules

The package also holds some small text and data helpers:

| Module | Contents |
| --- | --- |
| `atomsh.chars` | `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper` |
| `atomsh.memory` | `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr`, `memrchr`, `memcmp` on byte buffers |
| `atomsh.strutil` | `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri` |
| `atomsh.numbers` | `atoi` and `itoa` for 32-bit signed integers |
| `atomsh.fdio` | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`, writing to a stream or a file descriptor |
| `atomsh.linkedlist` | a singly linked `Node` and `lstnew`, `lstadd_front`, `lstadd_back`, `lstsize`, `lstlast`, `lstdelone`, `lstclear`, `lstiter`, `lstmap` |

## What it does not do

`atomsh` is only a front end. It has no command execution, no pipelines, no
file redirection, no environment variable expansion and no built-in commands
apart from leaving the session. `<<` and `>>` are not recognised as
operators. Each of their characters becomes its own `<` or `>` token.

## Running the tests

```
pip install .[test]
pytest
```