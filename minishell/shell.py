"""Interactive prompt that tokenizes each line it reads."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .lexer import LexError, tokenize
from .tokens import TokenType, format_tokens

PROMPT = "░▒▓ minishell \n\033[1;44m❯\033[0m"
_EXIT_WORD = "exit"


def _is_exit(line: str) -> bool:
    # Any prefix of "exit", the empty line included, ends the session.
    return _EXIT_WORD.startswith(line)


def process_line(line: str) -> str:
    """Tokenize a line and return the report printed for it."""
    tokens = tokenize(line)
    trace = "".join(
        "pipe is being handled\n" for t in tokens if t.type is TokenType.PIPE
    )
    return f"{trace}{format_tokens(tokens)}\n\033[1;32mSuccess!\033[0m\n"


def repl(lines: Iterable[str], out: TextIO) -> int:
    """Process lines until an exit line or the end of input; return the status."""
    for line in lines:
        if _is_exit(line):
            return 0
        try:
            out.write(process_line(line))
        except LexError as exc:
            out.write(f"minishell: {exc}\n")
        out.write(f"{line}\n")
    return 0


def _read_lines(prompt: str) -> Iterator[str]:
    try:
        import readline  # noqa: F401  (enables line editing for input())
    except ImportError:
        pass
    while True:
        try:
            yield input(prompt)
        except EOFError:
            print()
            return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive shell."""
    parser = argparse.ArgumentParser(prog="minishell", description=__doc__)
    parser.parse_args(argv)
    return repl(_read_lines(PROMPT), sys.stdout)


if __name__ == "__main__":
    sys.exit(main())