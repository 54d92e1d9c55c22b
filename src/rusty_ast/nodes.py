"""Node Model for rusty-ast.

The closed set of Rust syntax shapes the renderers understand. Every node
is a frozen dataclass with slots, so trees are immutable, cheap, and work
with ``match`` statements. Constructs outside the explicit vocabulary are
kept as ``OtherItem`` / ``OtherStatement`` / ``OtherExpression`` carrying
their exact source text.

Node Hierarchy:
Node (base)
├── File
├── Item
│   ├── Function      (Parameter)
│   ├── Struct        (Field)
│   ├── Enum          (Variant)
│   └── OtherItem
├── Statement
│   ├── VariableDeclaration
│   ├── ExpressionStatement
│   ├── ItemStatement
│   └── OtherStatement
└── Expression
    ├── IntLiteral, FloatLiteral, StringLiteral, BoolLiteral
    ├── Binary
    ├── Call
    ├── Identifier
    ├── If, Loop, While, Return
    └── OtherExpression

Each tagged node names its document discriminator in the ``tag`` class
attribute. ``Parameter``, ``Field`` and ``Variant`` are plain records
inside their parent and carry no tag.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from rusty_ast.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all Node Model objects."""

    tag: ClassVar[str | None] = None

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class File(Node):
    """A parsed compilation unit: its items in declaration order."""

    items: tuple[Item, ...]


# =============================================================================
# Items
# =============================================================================


@dataclass(frozen=True, slots=True)
class Parameter(Node):
    """Function parameter.

    A method receiver (``&self``, ``mut self``, ``self: Box<Self>``) is a
    parameter named ``self`` whose type text is the receiver as written.

    """

    name: str
    type_info: str


@dataclass(frozen=True, slots=True)
class Function(Node):
    """Function item.

    Rust: fn add(a: i32, b: i32) -> i32 { a + b }

    """

    tag: ClassVar[str | None] = "Function"

    name: str
    parameters: tuple[Parameter, ...]
    return_type: str | None
    body: tuple[Statement, ...]


@dataclass(frozen=True, slots=True)
class Field(Node):
    """Struct field. Tuple-struct fields have no name."""

    name: str | None
    type_info: str


@dataclass(frozen=True, slots=True)
class Struct(Node):
    """Struct item (named, tuple or unit).

    Rust: struct Point { x: f64, y: f64 }

    """

    tag: ClassVar[str | None] = "Struct"

    name: str
    fields: tuple[Field, ...]


@dataclass(frozen=True, slots=True)
class Variant(Node):
    """Enum variant. Payload data is not decomposed."""

    name: str


@dataclass(frozen=True, slots=True)
class Enum(Node):
    """Enum item.

    Rust: enum Direction { North, East, South, West }

    """

    tag: ClassVar[str | None] = "Enum"

    name: str
    variants: tuple[Variant, ...]


@dataclass(frozen=True, slots=True)
class OtherItem(Node):
    """Any item without a dedicated shape (impl, trait, mod, use, ...)."""

    tag: ClassVar[str | None] = "Other"

    description: str


# =============================================================================
# Statements
# =============================================================================


@dataclass(frozen=True, slots=True)
class VariableDeclaration(Node):
    """Local binding.

    Rust: let total = a + b;

    """

    tag: ClassVar[str | None] = "VariableDeclaration"

    name: str
    initializer: Expression | None = None


@dataclass(frozen=True, slots=True)
class ExpressionStatement(Node):
    """Expression in statement position, with or without a semicolon."""

    tag: ClassVar[str | None] = "Expression"

    expr: Expression


@dataclass(frozen=True, slots=True)
class ItemStatement(Node):
    """Item declared inside a block, e.g. a helper fn inside a fn body."""

    tag: ClassVar[str | None] = "Item"

    item: Item


@dataclass(frozen=True, slots=True)
class OtherStatement(Node):
    """Any statement without a dedicated shape (macro statements, ``;``)."""

    tag: ClassVar[str | None] = "Other"

    description: str


# =============================================================================
# Expressions
# =============================================================================


@dataclass(frozen=True, slots=True)
class IntLiteral(Node):
    """Integer literal as base-10 digits."""

    tag: ClassVar[str | None] = "IntLiteral"

    value: str


@dataclass(frozen=True, slots=True)
class FloatLiteral(Node):
    """Float literal digits without suffix."""

    tag: ClassVar[str | None] = "FloatLiteral"

    value: str


@dataclass(frozen=True, slots=True)
class StringLiteral(Node):
    """String literal, escapes resolved."""

    tag: ClassVar[str | None] = "StringLiteral"

    value: str


@dataclass(frozen=True, slots=True)
class BoolLiteral(Node):
    tag: ClassVar[str | None] = "BoolLiteral"

    value: bool


@dataclass(frozen=True, slots=True)
class Binary(Node):
    """Binary operation.

    ``operator`` is one of ``+ - * / == < <= != >= >`` or
    ``"other_operator"`` for everything else.

    """

    tag: ClassVar[str | None] = "Binary"

    operator: str
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class Call(Node):
    """Call expression: callee followed by arguments in order."""

    tag: ClassVar[str | None] = "Call"

    callee: Expression
    arguments: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class Identifier(Node):
    """Path expression, kept as its full textual path (``std::mem::swap``)."""

    tag: ClassVar[str | None] = "Identifier"

    name: str


@dataclass(frozen=True, slots=True)
class If(Node):
    """Conditional expression.

    Only an ``else <expr>`` tail is modeled: ``else if`` yields a nested If,
    and ``else { ... }`` yields the OtherExpression text of the block.

    """

    tag: ClassVar[str | None] = "If"

    condition: Expression
    then_branch: tuple[Statement, ...]
    else_branch: Expression | None = None


@dataclass(frozen=True, slots=True)
class Loop(Node):
    tag: ClassVar[str | None] = "Loop"

    body: tuple[Statement, ...]


@dataclass(frozen=True, slots=True)
class While(Node):
    tag: ClassVar[str | None] = "While"

    condition: Expression
    body: tuple[Statement, ...]


@dataclass(frozen=True, slots=True)
class Return(Node):
    tag: ClassVar[str | None] = "Return"

    value: Expression | None = None


@dataclass(frozen=True, slots=True)
class OtherExpression(Node):
    """Any expression without a dedicated shape (match, closures, ...)."""

    tag: ClassVar[str | None] = "Other"

    description: str


# PEP 695 type aliases for the three syntactic categories
type Item = Function | Struct | Enum | OtherItem

type Statement = VariableDeclaration | ExpressionStatement | ItemStatement | OtherStatement

type Expression = (
    IntLiteral
    | FloatLiteral
    | StringLiteral
    | BoolLiteral
    | Binary
    | Call
    | Identifier
    | If
    | Loop
    | While
    | Return
    | OtherExpression
)
