"""Token kinds, the token record and the debug rendering of a token list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

_RED = "\033[1;31m"
_BLUE = "\033[1;34m"
_CYAN = "\033[1;36m"
_WHITE = "\033[1;37m"
_MAGENTA = "\033[1;35m"
_YELLOW = "\033[1;33m"
_RESET = "\033[0m"


class TokenType(IntEnum):
    """Kinds and categories of lexical tokens."""

    WORD = 0
    OP = 1
    DELIMITER = 2
    CMD = 3
    ARG = 4
    FILE = 5
    R_RED = 6
    L_RED = 7
    R_APP = 8
    L_APP = 9
    PIPE = 10
    S_QUOTE = 11
    D_QUOTE = 12
    O_PAR = 13
    C_PAR = 14
    AND = 15
    OR = 16
    EOF = 17


@dataclass(frozen=True)
class Token:
    """One lexical token; the end-of-input token has no value."""

    value: str | None
    type: TokenType
    category: TokenType
    index: int = 0


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as a coloured chain ending in NULL and the token count."""
    tokens = list(tokens)
    parts = []
    if not tokens:
        parts.append(f"{_RED}list is empty{_RESET}\n")
    for token in tokens:
        if token.value is None:
            parts.append(f"{_RED}0{_RESET}")
        else:
            parts.append(
                f'{_BLUE}{int(token.type)}{_RESET} : {_CYAN}"{token.value}"{_RESET}'
            )
        parts.append(f"{_WHITE} -> {_RESET}")
    parts.append(f"{_MAGENTA}NULL{_RESET}")
    parts.append(f"{_YELLOW} {len(tokens)}{_RESET}")
    return "".join(parts)