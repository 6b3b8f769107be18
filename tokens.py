"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small frozen `Token` dataclass that holds a token type and
its lexeme or integer value. Tokens are the atomic units produced by the
lexer and consumed by the parser.

Source positions (`line`, `column`) are carried for error reporting only and
do not take part in equality, so two lexes of the same text compare equal
token for token.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Dict, Optional, Union


class TokenType(Enum):
    # Grouping
    LPAREN = auto()
    RPAREN = auto()

    # Keywords
    ADD = auto()
    SUBTRACT = auto()

    # Literals
    INTEGER = auto()

    def __str__(self) -> str:
        return self.name


# Call name produced for each operator token.
OPERATOR_NAMES: Dict[TokenType, str] = {
    TokenType.ADD: "add",
    TokenType.SUBTRACT: "subtract",
}

KEYWORDS: Dict[str, TokenType] = {
    "add": TokenType.ADD,
    "subtract": TokenType.SUBTRACT,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[Union[str, int]] = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return str(self.value)

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATOR_NAMES
