"""AST node definitions for the S-expression arithmetic language.

This module defines the AST node dataclasses produced by the parser. The
`NodeType` enum identifies node kinds and is used by the pretty-printer,
JSON export and visualization to dispatch on `node.type`.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which records the node
    kind (`NodeType`) and the source `line`/`column` of the token that
    started the node. Positions are informational and do not take part in
    equality or repr.
- Nodes are frozen and hold their children in tuples, so a tree cannot be
    changed once the parser has built it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple


class NodeType(Enum):
    NUMBER_LITERAL = auto()
    CALL_EXPRESSION = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType
    line: int = field(default=0, compare=False, repr=False)
    column: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class NumberLiteralNode(ASTNode):
    type: NodeType = NodeType.NUMBER_LITERAL
    value: int = 0


@dataclass(frozen=True)
class CallExpressionNode(ASTNode):
    type: NodeType = NodeType.CALL_EXPRESSION
    name: str = ""
    params: Tuple[ASTNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    body: Tuple[ASTNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))
