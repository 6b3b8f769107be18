"""Errors raised by the lexer and parser.

Both stages fail fast: the first problem aborts the whole call and no
partial token list or tree is returned. All errors derive from the builtin
`SyntaxError` so callers can handle every front-end failure in one place.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from tokens import Token


class FrontendError(SyntaxError):
    pass


class UnknownKeyword(FrontendError):
    """An alphabetic run that is not a known keyword."""

    def __init__(self, keyword: str, line: int = 0, column: int = 0):
        self.keyword = keyword
        self.line = line
        self.column = column
        super().__init__(
            f"Lexical error at line {line}, column {column}: "
            f"unknown keyword '{keyword}'"
        )


class MalformedExpression(FrontendError):
    """The token sequence does not form a valid expression.

    `position` is the index of the token the parser was looking at (equal to
    the number of tokens when input ran out early).
    """

    def __init__(self, position: int, message: str, token: Optional[Token] = None):
        self.position = position
        self.token = token
        self.reason = message
        where = f"token {position}"
        if token is not None and token.line:
            where += f" (line {token.line}, column {token.column})"
        super().__init__(f"Malformed expression at {where}: {message}")
