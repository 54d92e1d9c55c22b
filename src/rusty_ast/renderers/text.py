"""Text renderer: an indented, one-line-per-node outline.

Lines are written the moment the Walker reports them; nothing is buffered.
Indentation is the depth the Walker passes in, times the configured indent
width.

Example:
    >>> from rusty_ast import parse, to_model
    >>> print(format_text(to_model(parse("fn one() -> i32 { 1 }"))), end="")
    Function: one
      Return type: i32
      Body:
        Expression statement:
          Integer literal: 1
"""

import sys
from collections.abc import Callable

from rusty_ast.config import get_render_config
from rusty_ast.nodes import (
    Binary,
    BoolLiteral,
    Call,
    Enum,
    ExpressionStatement,
    Field,
    File,
    FloatLiteral,
    Function,
    Identifier,
    If,
    IntLiteral,
    ItemStatement,
    Loop,
    Node,
    OtherExpression,
    OtherItem,
    OtherStatement,
    Parameter,
    Return,
    StringLiteral,
    Struct,
    Variant,
    VariableDeclaration,
    While,
)
from rusty_ast.renderers.protocol import Slot
from rusty_ast.utils.text import one_line
from rusty_ast.walker import Walker


def node_label(node: Node) -> str:
    """Outline label for a node header line."""
    match node:
        case Function(name=name):
            return f"Function: {name}"
        case Parameter(name=name, type_info=type_info):
            return f"Parameter: {name} - Type: {type_info}"
        case Struct(name=name):
            return f"Struct: {name}"
        case Field(name=None, type_info=type_info):
            return f"Tuple field: {type_info}"
        case Field(name=name, type_info=type_info):
            return f"Field: {name} - Type: {type_info}"
        case Enum(name=name):
            return f"Enum: {name}"
        case Variant(name=name):
            return f"Variant: {name}"
        case OtherItem(description=description):
            return f"Other item: {one_line(description)}"
        case VariableDeclaration(name=name):
            return f"Variable declaration: {name}"
        case ExpressionStatement():
            return "Expression statement:"
        case ItemStatement():
            return "Item statement:"
        case OtherStatement(description=description):
            return f"Other statement: {one_line(description)}"
        case IntLiteral(value=value):
            return f"Integer literal: {value}"
        case FloatLiteral(value=value):
            return f"Float literal: {value}"
        case StringLiteral(value=value):
            return f'String literal: "{value}"'
        case BoolLiteral(value=value):
            return f"Boolean literal: {'true' if value else 'false'}"
        case Binary(operator=operator):
            return f"Binary expression: {operator}"
        case Call():
            return "Function call:"
        case Identifier(name=name):
            return f"Identifier: {name}"
        case If():
            return "If statement:"
        case Loop():
            return "Loop:"
        case While():
            return "While loop:"
        case Return():
            return "Return statement:"
        case OtherExpression(description=description):
            return f"Other expression: {one_line(description)}"
        case _:
            return f"{type(node).__name__}:"


class TextRenderer:
    """RenderSink that writes the outline line by line.

    Args:
        write: Callable receiving each finished line (with its newline).
            Defaults to ``sys.stdout.write``, looked up at write time.

    """

    __slots__ = ("_indent", "_write")

    def __init__(self, write: Callable[[str], object] | None = None) -> None:
        self._write = write
        self._indent = " " * get_render_config().indent_width

    def render(self, file: File) -> None:
        """Write the outline of every item in ``file``."""
        Walker(self).walk(file)

    def _line(self, depth: int, text: str) -> None:
        write = self._write or sys.stdout.write
        write(f"{self._indent * depth}{text}\n")

    # -- RenderSink ------------------------------------------------------------

    def enter_node(self, node: Node, depth: int) -> None:
        self._line(depth, node_label(node))

    def leave_node(self, node: Node, depth: int) -> None:
        pass

    def enter_slot(self, slot: Slot, depth: int) -> None:
        if slot.label is not None:
            self._line(depth, f"{slot.label}:")

    def leave_slot(self, slot: Slot, depth: int) -> None:
        pass

    def scalar(self, slot: Slot, value: str, depth: int) -> None:
        self._line(depth, f"{slot.label or slot.key}: {value}")


def render_text(file: File, write: Callable[[str], object] | None = None) -> None:
    """Write the outline of ``file`` through ``write`` (stdout by default)."""
    TextRenderer(write).render(file)


def format_text(file: File) -> str:
    """Return the outline of ``file`` as a single string."""
    parts: list[str] = []
    TextRenderer(parts.append).render(file)
    return "".join(parts)
