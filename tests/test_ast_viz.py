"""Tests for ast_viz: ensure a Digraph is produced with one node per AST node."""

from tests.utils import parse_text
from ast_viz import render_ast_dot


def test_ast_viz_dot_source(demo_source):
    dot = render_ast_dot(parse_text(demo_source))
    src = dot.source
    # Program, add, 2, subtract, 4, 2
    for node_id in ("n0", "n1", "n2", "n3", "n4", "n5"):
        assert node_id in src
    assert "n6" not in src
    assert "subtract" in src
    assert "n1 -> n3" in src


def test_ast_viz_title():
    dot = render_ast_dot(parse_text("1"), title="one")
    assert "one" in dot.source
