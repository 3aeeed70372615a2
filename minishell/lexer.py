"""Split a command line into shell tokens."""

from __future__ import annotations

import re

from .tokens import Token, TokenType

_SPACES = " \t\n\v\f\r"
_LIMITS = frozenset("<>|&()\"'")

_OPERATORS = {
    "&&": (TokenType.AND, TokenType.OP),
    "||": (TokenType.OR, TokenType.OP),
    ">>": (TokenType.R_APP, TokenType.OP),
    "<<": (TokenType.L_APP, TokenType.OP),
    "|": (TokenType.PIPE, TokenType.OP),
    ">": (TokenType.R_RED, TokenType.OP),
    "<": (TokenType.L_RED, TokenType.OP),
    "(": (TokenType.O_PAR, TokenType.DELIMITER),
    ")": (TokenType.C_PAR, TokenType.DELIMITER),
    "'": (TokenType.S_QUOTE, TokenType.DELIMITER),
    '"': (TokenType.D_QUOTE, TokenType.DELIMITER),
}

_TOKEN_RE = re.compile(
    r"[ \t\n\v\f\r]*"
    r"(?:(?P<op>&&|\|\||>>|<<|[|<>()'\"])"
    r"|(?P<word>[^ \t\n\v\f\r<>|&()'\"]+))?"
)


class LexError(ValueError):
    """Raised when a character cannot start any token."""

    def __init__(self, line: str, position: int) -> None:
        super().__init__(f"unexpected {line[position]!r} at position {position}")
        self.position = position


def is_space(c: str) -> bool:
    """True for a space or an ASCII control character from tab to carriage return."""
    return len(c) == 1 and c in _SPACES


def check_limit(c: str) -> bool:
    """True if the character ends a word."""
    return c in _LIMITS or is_space(c)


def _scan(line: str):
    pos = 0
    while pos < len(line):
        match = _TOKEN_RE.match(line, pos)
        pos = match.end()
        if match["op"]:
            kind, category = _OPERATORS[match["op"]]
            yield match["op"], kind, category
        elif match["word"]:
            yield match["word"], TokenType.WORD, TokenType.WORD
        elif pos < len(line):
            raise LexError(line, pos)
    if line:
        yield None, TokenType.EOF, TokenType.EOF


def tokenize(line: str) -> list[Token]:
    """Return the tokens of a line; a non-empty line ends with an EOF token."""
    line = line.partition("\0")[0]
    return [
        Token(value, kind, category, index)
        for index, (value, kind, category) in enumerate(_scan(line))
    ]