"""Traversal Engine: depth-first, source-order walk of the Node Model.

One walk drives every backend. The Walker dispatches on node shape with a
``match`` statement, tells its RenderSink where each node, slot and scalar
begins and ends, and passes the nesting depth down by value, so no renderer
keeps its own indentation counter.

Example, counting identifiers:

    class IdentifierCounter:
        def __init__(self) -> None:
            self.count = 0

        def enter_node(self, node, depth):
            if isinstance(node, Identifier):
                self.count += 1

        def leave_node(self, node, depth): pass
        def enter_slot(self, slot, depth): pass
        def leave_slot(self, slot, depth): pass
        def scalar(self, slot, value, depth): pass

    counter = IdentifierCounter()
    walk(file, counter)

Thread Safety:
A Walker holds only its sink. Use one sink per traversal; the Node Model
itself is immutable and may be walked from any number of threads.

"""

from rusty_ast.nodes import (
    Binary,
    Call,
    Enum,
    ExpressionStatement,
    File,
    Function,
    If,
    ItemStatement,
    Loop,
    Node,
    Return,
    Struct,
    VariableDeclaration,
    While,
)
from rusty_ast.renderers.protocol import (
    ARGUMENTS,
    BODY,
    CALLEE,
    CONDITION,
    ELSE_BRANCH,
    EXPR,
    FIELDS,
    INITIALIZER,
    ITEM,
    LEFT,
    LOOP_BODY,
    PARAMETERS,
    RETURN_TYPE,
    RIGHT,
    THEN_BRANCH,
    VALUE,
    VARIANTS,
    RenderSink,
    Slot,
)


class Walker:
    """Walks a File and reports it to a RenderSink.

    Nodes are reported pre-order: a node's ``enter_node`` comes before
    anything inside it. Absent optional values and slots with no children
    are not reported, except slots marked ``keep_empty``.

    """

    __slots__ = ("_sink",)

    def __init__(self, sink: RenderSink) -> None:
        self._sink = sink

    def walk(self, file: File) -> None:
        """Visit every item of ``file`` in declaration order at depth 0."""
        for item in file.items:
            self.visit(item, 0)

    def visit(self, node: Node, depth: int = 0) -> None:
        """Report ``node`` and its subtree, starting at ``depth``."""
        self._sink.enter_node(node, depth)
        try:
            self._walk_children(node, depth)
        finally:
            self._sink.leave_node(node, depth)

    # -- Internal dispatch -----------------------------------------------------

    def _walk_children(self, node: Node, depth: int) -> None:
        match node:
            case Function(parameters=parameters, return_type=return_type, body=body):
                self._slot(PARAMETERS, parameters, depth)
                if return_type is not None:
                    self._sink.scalar(RETURN_TYPE, return_type, depth + 1)
                self._slot(BODY, body, depth)
            case Struct(fields=fields):
                self._slot(FIELDS, fields, depth)
            case Enum(variants=variants):
                self._slot(VARIANTS, variants, depth)
            case VariableDeclaration(initializer=initializer):
                self._optional(INITIALIZER, initializer, depth)
            case ExpressionStatement(expr=expr):
                self._optional(EXPR, expr, depth)
            case ItemStatement(item=item):
                self._optional(ITEM, item, depth)
            case Binary(left=left, right=right):
                self._optional(LEFT, left, depth)
                self._optional(RIGHT, right, depth)
            case Call(callee=callee, arguments=arguments):
                self._optional(CALLEE, callee, depth)
                self._slot(ARGUMENTS, arguments, depth)
            case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
                self._optional(CONDITION, condition, depth)
                self._slot(THEN_BRANCH, then_branch, depth)
                self._optional(ELSE_BRANCH, else_branch, depth)
            case Loop(body=body):
                self._slot(LOOP_BODY, body, depth)
            case While(condition=condition, body=body):
                self._optional(CONDITION, condition, depth)
                self._slot(BODY, body, depth)
            case Return(value=value):
                self._optional(VALUE, value, depth)
            case _:
                pass  # Leaves: parameters, fields, variants, literals, paths, Other

    def _slot(self, slot: Slot, children: tuple[Node, ...], depth: int) -> None:
        if not children and not slot.keep_empty:
            return
        slot_depth = depth + 1
        child_depth = slot_depth + 1 if slot.label is not None else slot_depth
        self._sink.enter_slot(slot, slot_depth)
        try:
            for child in children:
                self.visit(child, child_depth)
        finally:
            self._sink.leave_slot(slot, slot_depth)

    def _optional(self, slot: Slot, child: Node | None, depth: int) -> None:
        if child is not None:
            self._slot(slot, (child,), depth)


def walk(file: File, sink: RenderSink) -> None:
    """Walk ``file`` depth-first, reporting every node to ``sink``."""
    Walker(sink).walk(file)
