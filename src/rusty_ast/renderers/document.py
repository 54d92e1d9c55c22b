"""Document renderer: builds the JSON-ready document for a File.

The document mirrors the Node Model. Every tagged node becomes a dict with
its ``type`` discriminator first, followed by its payload in declaration
order. Empty collections and absent optional values are left out, and all
collections are tuples, so the finished document is never mutated again.

Example:
    >>> from rusty_ast import parse, to_model
    >>> builder = DocumentBuilder()
    >>> builder.build(to_model(parse("enum E { A, B }")))
    {'items': ({'type': 'Enum', 'name': 'E', 'variants': ({'name': 'A'}, {'name': 'B'})},)}

"""

from typing import Any

from rusty_ast.nodes import (
    Binary,
    BoolLiteral,
    Enum,
    Field,
    File,
    FloatLiteral,
    Function,
    Identifier,
    IntLiteral,
    Node,
    OtherExpression,
    OtherItem,
    OtherStatement,
    Parameter,
    StringLiteral,
    Struct,
    Variant,
    VariableDeclaration,
)
from rusty_ast.renderers.protocol import Slot
from rusty_ast.walker import Walker

type Record = dict[str, Any]


def node_payload(node: Node) -> Record:
    """The node's own fields, without any children."""
    record: Record = {} if node.tag is None else {"type": node.tag}
    match node:
        case Parameter(name=name, type_info=type_info):
            record["name"] = name
            record["type_info"] = type_info
        case Field(name=name, type_info=type_info):
            if name is not None:
                record["name"] = name
            record["type_info"] = type_info
        case (
            Function(name=name)
            | Struct(name=name)
            | Enum(name=name)
            | Variant(name=name)
            | VariableDeclaration(name=name)
            | Identifier(name=name)
        ):
            record["name"] = name
        case (
            OtherItem(description=text)
            | OtherStatement(description=text)
            | OtherExpression(description=text)
        ):
            record["description"] = text
        case (
            IntLiteral(value=value)
            | FloatLiteral(value=value)
            | StringLiteral(value=value)
            | BoolLiteral(value=value)
        ):
            record["value"] = value
        case Binary(operator=operator):
            record["operator"] = operator
    return record


class DocumentBuilder:
    """RenderSink that assembles the document.

    Keeps a stack of open node records and a stack of open slot
    collectors. A finished node goes to the innermost open slot, or to the
    root ``items`` when no slot is open.

    A builder produces one document; create a new one per traversal.

    """

    __slots__ = ("_collectors", "_items", "_records")

    def __init__(self) -> None:
        self._items: list[Record] = []
        self._records: list[Record] = []
        self._collectors: list[list[Record]] = []

    def build(self, file: File) -> Record:
        """Walk ``file`` and return its document."""
        Walker(self).walk(file)
        return self.document()

    def document(self) -> Record:
        """The document for everything walked so far."""
        return {"items": tuple(self._items)}

    # -- RenderSink ------------------------------------------------------------

    def enter_node(self, node: Node, depth: int) -> None:
        self._records.append(node_payload(node))

    def leave_node(self, node: Node, depth: int) -> None:
        record = self._records.pop()
        if self._collectors:
            self._collectors[-1].append(record)
        else:
            self._items.append(record)

    def enter_slot(self, slot: Slot, depth: int) -> None:
        self._collectors.append([])

    def leave_slot(self, slot: Slot, depth: int) -> None:
        children = self._collectors.pop()
        owner = self._records[-1]
        if not children:
            return
        owner[slot.key] = tuple(children) if slot.many else children[0]

    def scalar(self, slot: Slot, value: str, depth: int) -> None:
        self._records[-1][slot.key] = value


def build_document(file: File) -> Record:
    """Build the document for ``file``."""
    return DocumentBuilder().build(file)
