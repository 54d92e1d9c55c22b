"""Classification of the tree-sitter Rust tree into the Node Model.

Maps every concrete syntax node onto exactly one Node Model shape. Anything
without a dedicated shape becomes OtherItem / OtherStatement /
OtherExpression carrying its exact source text, so no construct is ever
dropped and classification never fails on a parsed tree.

Example:
    >>> from rusty_ast.parser import parse_rust_source
    >>> file = classify_file(parse_rust_source("enum E { A, B }"))
    >>> [v.name for v in file.items[0].variants]
    ['A', 'B']

Thread Safety:
Classifier holds only the (immutable) SyntaxTree. The result is a frozen
tree.

"""

from collections.abc import Iterator

from tree_sitter import Node as TSNode

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
from rusty_ast.parser import SyntaxTree
from rusty_ast.utils.literals import float_digits, has_float_suffix, int_digits, string_value
from rusty_ast.utils.logger import get_logger

logger = get_logger(__name__)

OTHER_OPERATOR = "other_operator"

# Operators rendered verbatim; every other operator renders as OTHER_OPERATOR.
NORMALIZED_OPERATORS = frozenset({"+", "-", "*", "/", "==", "<", "<=", "!=", ">=", ">"})

# Not syntax constructs of their own: comments, file-level attributes,
# shebang lines and block labels.
_SKIPPED_TYPES = frozenset({
    "line_comment",
    "block_comment",
    "inner_attribute_item",
    "shebang",
    "label",
})

# Declarations that are items when they appear in statement position.
_ITEM_TYPES = frozenset({
    "function_item",
    "function_signature_item",
    "struct_item",
    "union_item",
    "enum_item",
    "impl_item",
    "trait_item",
    "mod_item",
    "foreign_mod_item",
    "use_declaration",
    "extern_crate_declaration",
    "const_item",
    "static_item",
    "type_item",
    "associated_type",
    "macro_definition",
})

# Statement and expression levels classified before a subtree is kept as
# Other text. Keeps the recursive Walker and json encoder far from the
# interpreter recursion limit.
MAX_NESTING = 48

# Path-like expressions rendered as Identifier with their full text.
_PATH_TYPES = frozenset({
    "identifier",
    "scoped_identifier",
    "self",
    "super",
    "crate",
    "metavariable",
})


def normalize_operator(token: str) -> str:
    """Map an operator token to its rendered symbol."""
    return token if token in NORMALIZED_OPERATORS else OTHER_OPERATOR


class Classifier:
    """Build the Node Model for one SyntaxTree.

    Each ``_item`` / ``_statement`` / ``_expression`` method dispatches on
    the tree-sitter node type with a ``match`` whose default arm produces
    the corresponding Other shape.

    Statements and expressions nested more than ``MAX_NESTING`` levels
    deep are not decomposed: the subtree becomes an Other node holding its
    exact source text.

    """

    __slots__ = ("_depth", "_tree")

    def __init__(self, tree: SyntaxTree) -> None:
        self._tree = tree
        self._depth = 0

    def classify(self) -> File:
        root = self._tree.root
        items = tuple(self._item(node, start) for node, start in self._significant(root))
        return File(location=self._tree.location(root), items=items)

    # -- Helpers ---------------------------------------------------------------

    def _text(self, node: TSNode | None, start: TSNode | None = None) -> str:
        if node is None:
            return ""
        return self._tree.text(node, start)

    def _significant(self, parent: TSNode) -> Iterator[tuple[TSNode, TSNode]]:
        """Yield ``(node, start)`` for each construct under ``parent``.

        Outer attributes are folded into the construct that follows them:
        ``start`` is the first attribute, or the node itself when it has
        none.
        """
        start: TSNode | None = None
        for child in parent.named_children:
            if child.type in _SKIPPED_TYPES:
                continue
            if child.type == "attribute_item":
                if start is None:
                    start = child
                continue
            yield child, start or child
            start = None

    def _first_named(self, parent: TSNode) -> TSNode | None:
        for node, _start in self._significant(parent):
            return node
        return None

    def _too_deep(self, node: TSNode, start: TSNode | None = None) -> str:
        logger.debug("Nesting deeper than %d at %s; keeping source text", MAX_NESTING, self._tree.location(node))
        return self._text(node, start)

    def _binding_name(self, pattern: TSNode) -> str:
        """Name bound by a pattern: the identifier, else the pattern text."""
        if pattern.type in ("mut_pattern", "ref_pattern") and pattern.named_child_count:
            return self._binding_name(pattern.named_children[-1])
        return self._text(pattern)

    # -- Items -----------------------------------------------------------------

    def _item(self, node: TSNode, start: TSNode) -> Item:
        built: Item | None = None
        match node.type:
            case "function_item":
                built = self._function(node)
            case "struct_item":
                built = self._struct(node)
            case "enum_item":
                built = self._enum(node)
        if built is not None:
            return built
        return OtherItem(location=self._tree.location(node), description=self._text(node, start))

    def _function(self, node: TSNode) -> Function | None:
        name = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        if name is None or body is None:
            return None
        params = node.child_by_field_name("parameters")
        return_type = node.child_by_field_name("return_type")
        return Function(
            location=self._tree.location(node),
            name=self._text(name),
            parameters=self._parameters(params) if params is not None else (),
            return_type=self._text(return_type) if return_type is not None else None,
            body=self._block(body),
        )

    def _parameters(self, params: TSNode) -> tuple[Parameter, ...]:
        result: list[Parameter] = []
        for child, _start in self._significant(params):
            loc = self._tree.location(child)
            match child.type:
                case "self_parameter":
                    result.append(Parameter(location=loc, name="self", type_info=self._text(child)))
                case "parameter":
                    pattern = child.child_by_field_name("pattern")
                    if pattern is not None and pattern.type == "self":
                        # self: Box<Self> is a receiver written with an explicit type
                        result.append(Parameter(location=loc, name="self", type_info=self._text(child)))
                        continue
                    result.append(
                        Parameter(
                            location=loc,
                            name=self._binding_name(pattern) if pattern is not None else self._text(child),
                            type_info=self._text(child.child_by_field_name("type")),
                        )
                    )
                case _:
                    pass  # C variadics are not inputs
        return tuple(result)

    def _struct(self, node: TSNode) -> Struct | None:
        name = node.child_by_field_name("name")
        if name is None:
            return None
        body = node.child_by_field_name("body")
        fields: tuple[Field, ...] = ()
        if body is not None and body.type == "field_declaration_list":
            fields = tuple(
                Field(
                    location=self._tree.location(child),
                    name=self._text(child.child_by_field_name("name")),
                    type_info=self._text(child.child_by_field_name("type")),
                )
                for child, _start in self._significant(body)
                if child.type == "field_declaration"
            )
        elif body is not None:
            fields = tuple(
                Field(location=self._tree.location(ty), name=None, type_info=self._text(ty))
                for ty in body.children_by_field_name("type")
            )
        return Struct(location=self._tree.location(node), name=self._text(name), fields=fields)

    def _enum(self, node: TSNode) -> Enum | None:
        name = node.child_by_field_name("name")
        if name is None:
            return None
        body = node.child_by_field_name("body")
        variants: tuple[Variant, ...] = ()
        if body is not None:
            variants = tuple(
                Variant(
                    location=self._tree.location(child),
                    name=self._text(child.child_by_field_name("name")),
                )
                for child, _start in self._significant(body)
                if child.type == "enum_variant"
            )
        return Enum(location=self._tree.location(node), name=self._text(name), variants=variants)

    # -- Statements ------------------------------------------------------------

    def _block(self, block: TSNode | None) -> tuple[Statement, ...]:
        if block is None:
            return ()
        return tuple(self._statement(node, start) for node, start in self._significant(block))

    def _statement(self, node: TSNode, start: TSNode) -> Statement:
        if self._depth >= MAX_NESTING:
            return OtherStatement(location=self._tree.location(node), description=self._too_deep(node, start))
        self._depth += 1
        try:
            return self._classify_statement(node, start)
        finally:
            self._depth -= 1

    def _classify_statement(self, node: TSNode, start: TSNode) -> Statement:
        loc = self._tree.location(node)
        match node.type:
            case "let_declaration":
                pattern = node.child_by_field_name("pattern")
                value = node.child_by_field_name("value")
                return VariableDeclaration(
                    location=loc,
                    name=self._binding_name(pattern) if pattern is not None else "",
                    initializer=self._expression(value) if value is not None else None,
                )
            case "expression_statement":
                inner = self._first_named(node)
                if inner is not None and inner.type != "macro_invocation":
                    return ExpressionStatement(location=loc, expr=self._expression(inner))
            case "macro_invocation":
                following = node.next_sibling
                if following is None or following.type == "}":
                    # Tail position: the macro is the block's value
                    return ExpressionStatement(
                        location=loc,
                        expr=OtherExpression(location=loc, description=self._text(node)),
                    )
            case "empty_statement":
                pass
            case kind if kind in _ITEM_TYPES:
                return ItemStatement(location=loc, item=self._item(node, start))
            case _:
                # A block's tail expression sits directly in the block.
                return ExpressionStatement(location=loc, expr=self._expression(node))
        return OtherStatement(location=loc, description=self._text(node, start))

    # -- Expressions -----------------------------------------------------------

    def _expression(self, node: TSNode) -> Expression:
        if self._depth >= MAX_NESTING:
            return OtherExpression(location=self._tree.location(node), description=self._too_deep(node))
        self._depth += 1
        try:
            return self._classify_expression(node)
        finally:
            self._depth -= 1

    def _classify_expression(self, node: TSNode) -> Expression:
        built: Expression | None = None
        loc = self._tree.location(node)
        match node.type:
            case "integer_literal":
                text = self._text(node)
                if has_float_suffix(text):
                    built = FloatLiteral(location=loc, value=float_digits(text))
                else:
                    built = IntLiteral(location=loc, value=int_digits(text))
            case "float_literal":
                built = FloatLiteral(location=loc, value=float_digits(self._text(node)))
            case "string_literal" | "raw_string_literal":
                value = string_value(self._text(node))
                if value is not None:
                    built = StringLiteral(location=loc, value=value)
            case "boolean_literal":
                built = BoolLiteral(location=loc, value=self._text(node) == "true")
            case "binary_expression" | "compound_assignment_expr":
                built = self._binary(node)
            case "call_expression":
                built = self._call(node)
            case kind if kind in _PATH_TYPES:
                built = Identifier(location=loc, name=self._text(node))
            case "generic_function":
                # Turbofish on a path is a path; on a method (recv.m::<T>) it is not
                function = node.child_by_field_name("function")
                if function is not None and function.type in ("identifier", "scoped_identifier"):
                    built = Identifier(location=loc, name=self._text(node))
            case "if_expression":
                built = self._if(node)
            case "loop_expression":
                built = Loop(location=loc, body=self._block(node.child_by_field_name("body")))
            case "while_expression":
                condition = node.child_by_field_name("condition")
                if condition is not None:
                    built = While(
                        location=loc,
                        condition=self._expression(condition),
                        body=self._block(node.child_by_field_name("body")),
                    )
            case "return_expression":
                value = self._first_named(node)
                built = Return(
                    location=loc,
                    value=self._expression(value) if value is not None else None,
                )
        if built is not None:
            return built
        return OtherExpression(location=loc, description=self._text(node))

    def _binary(self, node: TSNode) -> Binary | None:
        left = node.child_by_field_name("left")
        operator = node.child_by_field_name("operator")
        right = node.child_by_field_name("right")
        if left is None or operator is None or right is None:
            return None
        return Binary(
            location=self._tree.location(node),
            operator=normalize_operator(operator.type),
            left=self._expression(left),
            right=self._expression(right),
        )

    def _call(self, node: TSNode) -> Call | None:
        function = node.child_by_field_name("function")
        if function is None:
            return None
        arguments = node.child_by_field_name("arguments")
        args: tuple[Expression, ...] = ()
        if arguments is not None:
            args = tuple(self._expression(arg) for arg, _start in self._significant(arguments))
        return Call(location=self._tree.location(node), callee=self._expression(function), arguments=args)

    def _if(self, node: TSNode) -> If | None:
        condition = node.child_by_field_name("condition")
        consequence = node.child_by_field_name("consequence")
        if condition is None or consequence is None:
            return None
        else_branch: Expression | None = None
        alternative = node.child_by_field_name("alternative")
        if alternative is not None:
            # else_clause wraps either a block (rendered as Other) or an if
            target = self._first_named(alternative)
            if target is not None:
                else_branch = self._expression(target)
        return If(
            location=self._tree.location(node),
            condition=self._expression(condition),
            then_branch=self._block(consequence),
            else_branch=else_branch,
        )


def classify_file(tree: SyntaxTree) -> File:
    """Classify a parsed tree into the Node Model.

    Args:
        tree: Successfully parsed Rust source

    Returns:
        File node with every top-level item in declaration order

    """
    return Classifier(tree).classify()
