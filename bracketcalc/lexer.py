"""Turn calculator input text into a flat list of tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """The kinds of token the calculator understands."""

    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    OPEN = "("
    CLOSE = ")"
    NUMBER = "number"


@dataclass(frozen=True)
class Token:
    """A single token; ``value`` is set only for numbers."""

    kind: TokenKind
    value: float | None = None


class LexError(ValueError):
    """Raised when the input holds text that is not a valid token."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


_SYMBOLS = {kind.value: kind for kind in TokenKind if kind is not TokenKind.NUMBER}

_TOKEN_RE = re.compile(
    r"(?P<space>[ \t\n])|(?P<number>[0-9][0-9.]*)|(?P<symbol>[-+*/()])|(?P<other>.)",
    re.DOTALL,
)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, skipping spaces, tabs and newlines.

    Raises LexError on an unknown character or a malformed number.
    """
    tokens: list[Token] = []
    for match in _TOKEN_RE.finditer(text):
        kind = match.lastgroup
        lexeme = match.group()
        if kind == "space":
            continue
        if kind == "number":
            try:
                value = float(lexeme)
            except ValueError:
                raise LexError(
                    f"Invalid number '{lexeme}' at position {match.start()}",
                    match.start(),
                ) from None
            tokens.append(Token(TokenKind.NUMBER, value))
        elif kind == "symbol":
            tokens.append(Token(_SYMBOLS[lexeme]))
        else:
            raise LexError(
                f"Invalid character '{lexeme}' at position {match.start()}",
                match.start(),
            )
    return tokens