"""
Lexer for the S-expression arithmetic language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`.
- It recognizes parentheses, the keywords `add` and `subtract`, and unsigned
    decimal integer literals. Whitespace is skipped.

Examples:
    Input:  "(add 2 (subtract 4 2))"
    Tokens: [LPAREN, ADD, INTEGER(2), LPAREN, SUBTRACT, INTEGER(4), ...]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- Words are maximal runs of `a-z` and must be keywords; anything else raises
    `UnknownKeyword` and aborts the scan.
- Characters that start no token (other punctuation including `+` and `-`,
    uppercase letters, non-ASCII text) are skipped without complaint.
"""

from __future__ import annotations
from typing import Iterator, List, Optional
from tokens import KEYWORDS, Token, TokenType
from errors import UnknownKeyword


def _is_digit(ch: Optional[str]) -> bool:
    # str.isdigit() also accepts characters such as '²' that int() rejects.
    return ch is not None and "0" <= ch <= "9"


def _is_word_char(ch: Optional[str]) -> bool:
    return ch is not None and "a" <= ch <= "z"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

        self.single_char_tokens = {
            "(": TokenType.LPAREN,
            ")": TokenType.RPAREN,
        }

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self) -> int:
        """Parse a multi-digit integer."""
        result = []
        while _is_digit(self.current_char):
            result.append(self.current_char)
            self.advance()
        return int("".join(result))

    def word(self) -> str:
        """Parse a run of lowercase letters."""
        result = []
        while _is_word_char(self.current_char):
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def get_next_token(self) -> Optional[Token]:
        """Return the next token, or None once the input is exhausted."""
        while self.current_char is not None:
            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            line, column = self.line, self.column

            token_type = self.single_char_tokens.get(self.current_char)
            if token_type is not None:
                lexeme = self.current_char
                self.advance()
                return Token(token_type, lexeme, line, column)

            if _is_digit(self.current_char):
                return Token(TokenType.INTEGER, self.integer(), line, column)

            if _is_word_char(self.current_char):
                text = self.word()
                token_type = KEYWORDS.get(text)
                if token_type is None:
                    raise UnknownKeyword(text, line, column)
                return Token(token_type, text, line, column)

            # Not part of the language: ignore it.
            self.advance()

        return None

    def iter_tokens(self) -> Iterator[Token]:
        """Yield tokens one at a time until the input is exhausted."""
        while True:
            token = self.get_next_token()
            if token is None:
                return
            yield token

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        return list(self.iter_tokens())


def tokenize(text: str) -> List[Token]:
    """Tokenize `text` into a list of tokens (raises `UnknownKeyword`)."""
    return Lexer(text).tokenize()
