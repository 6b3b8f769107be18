"""Convert tokens and AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node, and `tokens_to_json`
for the token stream. Each node is encoded with its `node_type` and its
fields; source positions are included so a dump can be traced back to the
input.
"""

from typing import Any, Dict, Iterable, List, Optional
from ast_nodes import *
from tokens import Token


def _position(node: ASTNode) -> Dict[str, int]:
    return {"line": node.line, "column": node.column}


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    if t == NodeType.NUMBER_LITERAL and isinstance(node, NumberLiteralNode):
        return {"node_type": "NumberLiteral", "value": node.value, **_position(node)}
    if t == NodeType.CALL_EXPRESSION and isinstance(node, CallExpressionNode):
        return {
            "node_type": "CallExpression",
            "name": node.name,
            "params": [ast_to_json(p) for p in node.params],
            **_position(node),
        }
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {
            "node_type": "Program",
            "body": [ast_to_json(e) for e in node.body],
        }

    raise TypeError(f"Cannot serialize {type(node).__name__}")


def tokens_to_json(tokens: Iterable[Token]) -> List[Dict[str, Any]]:
    return [
        {
            "type": t.type.name,
            "value": t.value,
            "line": t.line,
            "column": t.column,
        }
        for t in tokens
    ]
