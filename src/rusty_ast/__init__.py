"""
rusty-ast: Rust syntax trees as a text outline or a JSON document

Parses Rust with tree-sitter, maps every construct onto a small typed Node
Model, and renders it through one traversal into either backend. Constructs
without a dedicated shape are kept as ``Other`` nodes with their source
text, so nothing is dropped.

Quick Start:
    >>> from rusty_ast import parse, format_text, render_json
    >>> tree = parse("fn add(a: i32, b: i32) -> i32 { a + b }")
    >>> print(format_text(tree), end="")
    Function: add
      Parameters:
        Parameter: a - Type: i32
        Parameter: b - Type: i32
      Return type: i32
      Body:
        Expression statement:
          Binary expression: +
            Left:
              Identifier: a
            Right:
              Identifier: b
    >>> json_text = render_json(tree)

Command line:
    rusty-ast -f src/main.rs --format json
"""

import sys
from typing import Any, TextIO

from rusty_ast.classify import OTHER_OPERATOR, classify_file
from rusty_ast.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from rusty_ast.errors import ParseError, RustyAstError
from rusty_ast.location import SourceLocation
from rusty_ast.nodes import (
    Binary,
    BoolLiteral,
    Call,
    Enum,
    Expression,
    ExpressionStatement,
    Field,
    File,
    FloatLiteral,
    Function,
    Identifier,
    If,
    IntLiteral,
    Item,
    ItemStatement,
    Loop,
    Node,
    OtherExpression,
    OtherItem,
    OtherStatement,
    Parameter,
    Return,
    Statement,
    StringLiteral,
    Struct,
    Variant,
    VariableDeclaration,
    While,
)
from rusty_ast.parser import SyntaxTree, parse_rust_file, parse_rust_source
from rusty_ast.renderers import document as _document
from rusty_ast.renderers import text as _text
from rusty_ast.renderers.document import DocumentBuilder
from rusty_ast.renderers.protocol import RenderSink, Slot
from rusty_ast.renderers.text import TextRenderer
from rusty_ast.serialization import to_json
from rusty_ast.walker import Walker, walk

__version__ = "0.1.0"

parse = parse_rust_source
parse_file = parse_rust_file


def to_model(tree: SyntaxTree | File) -> File:
    """Return the Node Model for a parsed tree (a File is returned as is)."""
    if isinstance(tree, File):
        return tree
    return classify_file(tree)


def render_text(tree: SyntaxTree | File, out: TextIO | None = None) -> None:
    """Write the text outline of ``tree`` to ``out`` (stdout by default)."""
    _text.render_text(to_model(tree), out.write if out is not None else None)


def format_text(tree: SyntaxTree | File) -> str:
    """Return the text outline of ``tree``."""
    return _text.format_text(to_model(tree))


def print_ast(tree: SyntaxTree | File, out: TextIO | None = None) -> None:
    """Write the configured banner line, then the text outline."""
    stream = out if out is not None else sys.stdout
    stream.write(f"{get_render_config().banner}\n")
    render_text(tree, stream)


def build_document(tree: SyntaxTree | File) -> dict[str, Any]:
    """Return the JSON-ready document for ``tree``."""
    return _document.build_document(to_model(tree))


def render_json(tree: SyntaxTree | File, *, indent: int | None = None) -> str:
    """Return ``tree`` as JSON text. Never raises for a parsed tree."""
    return to_json(build_document(tree), indent=indent)


__all__ = [
    # Parsing
    "parse",
    "parse_file",
    "parse_rust_source",
    "parse_rust_file",
    "SyntaxTree",
    "classify_file",
    "to_model",
    # Rendering
    "render_text",
    "format_text",
    "print_ast",
    "build_document",
    "render_json",
    "to_json",
    "Walker",
    "walk",
    "RenderSink",
    "Slot",
    "TextRenderer",
    "DocumentBuilder",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "RustyAstError",
    "ParseError",
    # Node Model
    "Node",
    "File",
    "Item",
    "Statement",
    "Expression",
    "Function",
    "Parameter",
    "Struct",
    "Field",
    "Enum",
    "Variant",
    "OtherItem",
    "VariableDeclaration",
    "ExpressionStatement",
    "ItemStatement",
    "OtherStatement",
    "IntLiteral",
    "FloatLiteral",
    "StringLiteral",
    "BoolLiteral",
    "Binary",
    "Call",
    "Identifier",
    "If",
    "Loop",
    "While",
    "Return",
    "OtherExpression",
    "OTHER_OPERATOR",
    "SourceLocation",
    # Version
    "__version__",
]
