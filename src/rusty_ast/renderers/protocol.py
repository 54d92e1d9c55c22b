"""RenderSink protocol: the events a Walker sends to a renderer.

The Walker owns the recursion and the nesting depth; a sink only reacts to
events. Every ``enter_*`` call is followed by the matching ``leave_*`` call
with the same arguments, and children arrive strictly between them in
source order.

Example:
    from rusty_ast.renderers.protocol import RenderSink

    def outline(file: File, sink: RenderSink) -> None:
        Walker(sink).walk(file)

"""

from dataclasses import dataclass
from typing import Protocol

from rusty_ast.nodes import Node


@dataclass(frozen=True, slots=True)
class Slot:
    """A named child position of a node.

    Attributes:
        key: Document key the children are stored under
        label: Outline label, or None when the children sit directly under
            their parent without a label line
        many: True when the slot holds a sequence, False for a single value
        keep_empty: Report the slot even when it has no children, so the
            outline still shows its label

    """

    key: str
    label: str | None
    many: bool = False
    keep_empty: bool = False


# Child positions, in the order the Walker visits them
PARAMETERS = Slot("parameters", "Parameters", many=True)
RETURN_TYPE = Slot("return_type", "Return type")
BODY = Slot("body", "Body", many=True, keep_empty=True)
FIELDS = Slot("fields", "Fields", many=True)
VARIANTS = Slot("variants", "Variants", many=True)
INITIALIZER = Slot("initializer", "Initializer")
EXPR = Slot("expr", None)
ITEM = Slot("item", None)
LEFT = Slot("left", "Left")
RIGHT = Slot("right", "Right")
CALLEE = Slot("callee", "Function")
ARGUMENTS = Slot("arguments", "Arguments", many=True)
CONDITION = Slot("condition", "Condition")
THEN_BRANCH = Slot("then_branch", "Then branch", many=True)
ELSE_BRANCH = Slot("else_branch", "Else branch")
LOOP_BODY = Slot("body", None, many=True)
VALUE = Slot("value", None)


class RenderSink(Protocol):
    """Protocol for traversal backends.

    ``depth`` is the nesting level of the line the event corresponds to:
    a node's header sits at ``depth``, a labelled slot's label one level
    deeper, and the slot's children one level below the label.

    """

    def enter_node(self, node: Node, depth: int) -> None:
        """A node begins; its header belongs at ``depth``."""
        ...

    def leave_node(self, node: Node, depth: int) -> None:
        """The node and all of its children are done."""
        ...

    def enter_slot(self, slot: Slot, depth: int) -> None:
        """A non-empty child slot of the current node begins."""
        ...

    def leave_slot(self, slot: Slot, depth: int) -> None:
        """The slot's children are done."""
        ...

    def scalar(self, slot: Slot, value: str, depth: int) -> None:
        """A textual attribute of the current node, e.g. a return type."""
        ...
