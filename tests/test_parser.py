import pytest

from tests.utils import call, lex, num, parse_text, parse_tokens, program
from ast_nodes import CallExpressionNode, NodeType, NumberLiteralNode, ProgramNode
from errors import MalformedExpression
from lexer import Lexer
from parser import Parser, parse
from tokens import Token, TokenType


def test_parser_parses_demo_program(demo_source):
    ast = parse_text(demo_source)
    assert ast == program(
        call("add", num(2), call("subtract", num(4), num(2))),
    )
    assert ast.type == NodeType.PROGRAM


def test_single_number_literal():
    assert parse_text("  42 \n") == program(num(42))


def test_whitespace_only_input_is_an_empty_program():
    ast = parse_text("   \n\t")
    assert isinstance(ast, ProgramNode)
    assert ast.body == ()


def test_multiple_top_level_expressions():
    ast = parse_text("1 (add 2 3) 4")
    assert ast == program(num(1), call("add", num(2), num(3)), num(4))


def test_call_arity_is_variable():
    assert parse_text("(add)") == program(call("add"))
    assert parse_text("(add 1)") == program(call("add", num(1)))
    assert parse_text("(subtract 9 3 2 1)") == program(
        call("subtract", num(9), num(3), num(2), num(1))
    )


def test_bare_operator_takes_exactly_one_argument():
    ast = parse_text("subtract 7 8")
    assert ast == program(call("subtract", num(7)), num(8))


def test_bare_operator_nests():
    assert parse_text("add add 1") == program(call("add", call("add", num(1))))


def test_sign_characters_do_not_change_the_tree():
    assert parse_text("(add 2 -3)") == program(call("add", num(2), num(3)))
    assert parse_text("(add 1 2) -") == program(call("add", num(1), num(2)))


def test_symbol_spelling_is_not_an_operator():
    # `+` is skipped, so the group holds two numbers.
    with pytest.raises(MalformedExpression):
        parse_text("(+ 1 2)")


def test_parentheses_around_a_number_only_group():
    assert parse_text("(5)") == program(num(5))
    assert parse_text("((add 1 2))") == program(call("add", num(1), num(2)))


def test_missing_close_paren_is_malformed():
    with pytest.raises(MalformedExpression) as excinfo:
        parse_text("(add 1")
    # Input ran out: the cursor sits one past the last token.
    assert excinfo.value.position == 3
    assert excinfo.value.token is None


def test_unmatched_close_paren_is_malformed():
    with pytest.raises(MalformedExpression) as excinfo:
        parse_text("1 )")
    assert excinfo.value.position == 1
    assert excinfo.value.token.type == TokenType.RPAREN


def test_bare_operator_at_end_of_input_is_malformed():
    with pytest.raises(MalformedExpression):
        parse_text("add")


def test_empty_parentheses_are_malformed():
    with pytest.raises(MalformedExpression):
        parse_text("()")


def test_group_with_two_expressions_is_malformed():
    with pytest.raises(MalformedExpression) as excinfo:
        parse_text("(1 2)")
    assert excinfo.value.position == 2
    assert "expected RPAREN" in str(excinfo.value)


def test_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        parse_text("(subtract (add 1 2)")


def test_parser_accepts_lazy_token_stream(demo_source):
    stream = Lexer(demo_source).iter_tokens()
    assert parse(stream) == parse_text(demo_source)


def test_parser_works_on_hand_built_tokens():
    tokens = [
        Token(TokenType.LPAREN, "("),
        Token(TokenType.SUBTRACT, "subtract"),
        Token(TokenType.INTEGER, 4),
        Token(TokenType.INTEGER, 2),
        Token(TokenType.RPAREN, ")"),
    ]
    assert parse_tokens(tokens) == program(call("subtract", num(4), num(2)))


def test_cursor_only_moves_forward():
    parser = Parser(lex("(add 1 (subtract 2 3)) 4"))
    seen = []
    while not parser.at_end():
        before = parser.pos
        parser.walk()
        assert parser.pos > before
        seen.append(parser.pos)
    assert seen == [9, 10]


def test_nodes_record_source_position():
    ast = parse_text("1\n  (add 2 3)")
    add = ast.body[1]
    assert isinstance(add, CallExpressionNode)
    assert (add.line, add.column) == (2, 3)
    assert isinstance(add.params[0], NumberLiteralNode)
    assert add.params[0].column == 8


def test_deep_nesting_is_malformed_not_recursion_error():
    depth = 2000
    src = "(add " * depth + "1" + ")" * depth
    with pytest.raises(MalformedExpression) as excinfo:
        parse_text(src)
    assert "nested too deeply" in str(excinfo.value)
    assert excinfo.value.position > 0


def test_moderate_nesting_parses():
    depth = 50
    ast = parse_text("(subtract " * depth + "1" + ")" * depth)
    node = ast.body[0]
    for _ in range(depth):
        assert node.name == "subtract"
        node = node.params[0]
    assert node == num(1)
