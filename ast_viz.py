"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: every AST node becomes one graph node, numbered in pre-order
(`n0` is the root). Call expressions are drawn as boxes and number literals
as ellipses; edges run from a call to each argument and are labelled with
the argument index.
"""

from typing import Optional
from graphviz import Digraph
from ast_nodes import *


def _node_label(node: ASTNode) -> str:
    match node:
        case ProgramNode():
            return "Program"
        case CallExpressionNode(name=name):
            return f"CallExpression\\n{name}"
        case NumberLiteralNode(value=v):
            return f"NumberLiteral\\n{v}"
        case _:
            return type(node).__name__


def render_ast_dot(node: ASTNode, title: Optional[str] = None) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    if title:
        dot.attr(label=title, labelloc="t")

    counter = [0]

    def _emit(n: ASTNode) -> str:
        node_id = f"n{counter[0]}"
        counter[0] += 1
        shape = "ellipse" if isinstance(n, NumberLiteralNode) else "box"
        dot.node(node_id, _node_label(n), shape=shape)

        children = ()
        if isinstance(n, ProgramNode):
            children = n.body
        elif isinstance(n, CallExpressionNode):
            children = n.params
        for i, child in enumerate(children):
            child_id = _emit(child)
            dot.edge(node_id, child_id, label=str(i))
        return node_id

    _emit(node)
    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> str:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz). Returns the path of the rendered file."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
