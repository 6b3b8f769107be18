from lexer import Lexer
from parser import Parser
from ast_nodes import CallExpressionNode, NumberLiteralNode, ProgramNode


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_tokens(tokens):
    """Parse a list of tokens into an AST node."""
    return Parser(tokens).parse()


def parse_text(text: str):
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(text).tokenize()).parse()


def num(value: int) -> NumberLiteralNode:
    return NumberLiteralNode(value=value)


def call(name: str, *params) -> CallExpressionNode:
    return CallExpressionNode(name=name, params=params)


def program(*body) -> ProgramNode:
    return ProgramNode(body=body)
