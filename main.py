from __future__ import annotations
from typing import Iterable, Optional
import argparse
import json
import subprocess
from graphviz import ExecutableNotFound
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser
from errors import FrontendError
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json, tokens_to_json
from ast_viz import write_and_render

DEMO_INPUT = "(add 2 (subtract 4 2))"


def lex(text: str) -> list[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: Iterable[Token]) -> ProgramNode:
    """Parse tokens into AST."""
    parser = Parser(tokens)
    return parser.parse()


def process_program(
    text: str,
    *,
    print_tokens: bool = True,
    print_ast: bool = True,
    print_surface: bool = False,
    dump_json_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single program: lex, parse and print the requested stages.

    Returns True when the input lexed and parsed, False on a syntax error.
    """
    try:
        print(f"Input: {text}")
        tokens = lex(text)
        if print_tokens:
            print(f"\nTokens ({len(tokens)}):")
            if tokens:
                print(PrettyPrinter.print_tokens(tokens))

        ast = parse_tokens(tokens)
        if print_ast:
            print("\nAST:")
            print(PrettyPrinter.print_ast(ast))

        if print_surface:
            print("\nSurface:")
            print(PrettyPrinter.print_surface(ast))

    except FrontendError as e:
        print(f"Syntax Error: {e}")
        return False

    if dump_json_path:
        export = {"tokens": tokens_to_json(tokens), "ast": ast_to_json(ast)}
        try:
            with open(dump_json_path, "w", encoding="utf-8") as fh:
                json.dump(export, fh, indent=2)
            print(f"Wrote tokens+AST JSON to {dump_json_path}")
        except OSError as e:
            print(f"Failed to write JSON to {dump_json_path}: {e}")

    if viz_path:
        try:
            rendered = write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {rendered}")
        except (ExecutableNotFound, subprocess.CalledProcessError, OSError) as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return True


def interactive_mode(print_tokens: bool = True, print_ast: bool = True) -> None:
    """Run an interactive REPL reading one program per line from stdin."""
    print("\nInteractive Parser Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter expression: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nExiting...")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break
        if not text:
            continue

        process_program(text, print_tokens=print_tokens, print_ast=print_ast)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tokenize and parse an arithmetic S-expression program "
        "(runs a built-in example when no input is given)"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    group.add_argument(
        "--expr", "-e", dest="expr", help="Program text to process"
    )
    # printing/verbosity options
    parser.add_argument(
        "--no-tokens",
        dest="print_tokens",
        action="store_false",
        help="Do not print tokens",
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--surface",
        dest="print_surface",
        action="store_true",
        help="Print the AST rendered back as source text",
    )
    parser.add_argument(
        "--dump-json", dest="dump_json", help="Path to write tokens+AST JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
    elif args.expr is not None:
        text = args.expr
    else:
        text = DEMO_INPUT

    ok = process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        print_surface=args.print_surface,
        dump_json_path=args.dump_json,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    import sys

    sys.exit(main())
