"""
Parser for the S-expression arithmetic language.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser. A single
    method, `walk()`, dispatches on the current token and returns exactly one
    expression node, recursing for sub-expressions.
- The only mutable state is `self.pos`, an index into the token list. It is
    only ever incremented and every call to `walk()` consumes at least one
    token, so parsing always terminates.

Grammar:

    program := expr*
    expr    := INTEGER
             | '(' OP expr* ')'     call with any number of arguments
             | '(' expr ')'         grouping; produces no node of its own
             | OP expr              bare prefix call with one argument
    OP      := add | subtract

Examples:
    - `(add 2 (subtract 4 2))` -> CallExpression(add, [2, CallExpression(subtract, [4, 2])])
    - `subtract 7` -> CallExpression(subtract, [7])
    - `(5)` -> NumberLiteral(5)

Notes:
- Parsing is fail-fast. Running out of tokens, a `)` where an expression
    should start, or a group that is not closed raises `MalformedExpression`
    and no partial tree is returned. Input nested deeper than the
    interpreter's recursion limit is reported the same way.
"""

from __future__ import annotations
from typing import Iterable, List, Optional
from tokens import OPERATOR_NAMES, Token, TokenType
from ast_nodes import *
from errors import MalformedExpression


class Parser:
    def __init__(self, tokens: Iterable[Token]):
        # Accept a lazy token stream as well as a list; the cursor needs
        # random access for lookahead.
        self.tokens: List[Token] = list(tokens)
        self.pos = 0

    @property
    def current(self) -> Optional[Token]:
        return self.peek(0)

    def peek(self, offset: int = 1) -> Optional[Token]:
        """Return the token `offset` places ahead without consuming it."""
        index = self.pos + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current
        if token is None:
            raise self.error("unexpected end of input")
        self.pos += 1
        return token

    def expect(self, expected_type: TokenType, message: Optional[str] = None) -> Token:
        """Expect and consume token of given type."""
        token = self.current
        if token is not None and token.type == expected_type:
            self.pos += 1
            return token

        got = "end of input" if token is None else str(token.type)
        raise self.error(message or f"expected {expected_type}, got {got}")

    def error(self, message: str) -> MalformedExpression:
        return MalformedExpression(self.pos, message, self.current)

    def walk(self) -> ASTNode:
        """Parse one expression starting at the cursor."""
        token = self.current
        if token is None:
            raise self.error("unexpected end of input")

        match token.type:
            case TokenType.INTEGER:
                self.advance()
                return NumberLiteralNode(
                    value=token.value, line=token.line, column=token.column
                )

            case TokenType.ADD | TokenType.SUBTRACT:
                return self.parse_prefix_call()

            case TokenType.LPAREN:
                following = self.peek()
                if following is not None and following.is_operator:
                    return self.parse_call_expression()
                return self.parse_group()

            case TokenType.RPAREN:
                raise self.error("unexpected ')'")

            case _:
                raise self.error(f"unexpected token {token}")

    def parse_prefix_call(self) -> CallExpressionNode:
        """Parse `OP expr`: an operator without parentheses takes one argument."""
        op = self.advance()
        operand = self.walk()
        return CallExpressionNode(
            name=OPERATOR_NAMES[op.type],
            params=(operand,),
            line=op.line,
            column=op.column,
        )

    def parse_call_expression(self) -> CallExpressionNode:
        """Parse `( OP expr* )`."""
        open_paren = self.expect(TokenType.LPAREN)
        op = self.advance()

        params: List[ASTNode] = []
        while True:
            token = self.current
            if token is None:
                raise self.error(
                    f"unterminated argument list for '{OPERATOR_NAMES[op.type]}'"
                )
            if token.type == TokenType.RPAREN:
                self.advance()
                break
            params.append(self.walk())

        return CallExpressionNode(
            name=OPERATOR_NAMES[op.type],
            params=tuple(params),
            line=open_paren.line,
            column=open_paren.column,
        )

    def parse_group(self) -> ASTNode:
        """Parse `( expr )`; the parentheses only group."""
        self.expect(TokenType.LPAREN)
        inner = self.walk()
        self.expect(TokenType.RPAREN)
        return inner

    def parse_program(self) -> ProgramNode:
        """Parse expressions until the tokens are exhausted."""
        body: List[ASTNode] = []
        while not self.at_end():
            body.append(self.walk())
        return ProgramNode(body=tuple(body), line=1, column=1)

    def parse(self) -> ProgramNode:
        try:
            return self.parse_program()
        except RecursionError:
            raise self.error("expression nested too deeply") from None


def parse(tokens: Iterable[Token]) -> ProgramNode:
    """Parse a token sequence into a `ProgramNode` (raises `MalformedExpression`)."""
    return Parser(tokens).parse()
