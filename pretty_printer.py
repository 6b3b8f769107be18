"""Pretty-printer for tokens and the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders it back into source syntax. The tree printer is intended for
debugging and tests; the surface printer produces text that lexes and parses
back into an equal tree.

Examples:
    PrettyPrinter.print_ast(program_node)
    PrettyPrinter.print_surface(program_node)  # "(add 2 (subtract 4 2))"
"""

from __future__ import annotations
from typing import Iterable
from ast_nodes import *
from tokens import Token


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: Iterable[Token]) -> str:
        """Return a numbered listing of tokens, one per line."""
        lines = []
        for i, token in enumerate(tokens):
            lines.append(f"  {i:3}: {token}")
        return "\n".join(lines)

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case NumberLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}NumberLiteral({v})")

            case CallExpressionNode(name=name, params=params):
                lines.append(f"{indent_str}{prefix}CallExpression({name})")
                for i, param in enumerate(params):
                    lines.append(
                        PrettyPrinter.print_ast(param, indent + 4, f"param[{i}]: ")
                    )

            case ProgramNode(body=body):
                lines.append(f"{indent_str}{prefix}Program")
                for i, expr in enumerate(body):
                    lines.append(PrettyPrinter.print_ast(expr, indent + 4, f"expr[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return the source text for a node.

        Calls are always written in the parenthesized form, so a one-argument
        call parsed from `add 1` comes back as `(add 1)`; both parse to the
        same tree.
        """
        match node:
            case NumberLiteralNode(value=v):
                return str(v)
            case CallExpressionNode(name=name, params=params):
                parts = [name] + [PrettyPrinter.print_surface(p) for p in params]
                return "(" + " ".join(parts) + ")"
            case ProgramNode(body=body):
                return " ".join(PrettyPrinter.print_surface(e) for e in body)
            case _:
                raise TypeError(f"Cannot print {type(node).__name__} as source")
