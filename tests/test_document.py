"""Tests for the document builder and JSON output."""

import json

from hypothesis import given, settings
from hypothesis import strategies as st

from rusty_ast import build_document, parse, render_json, to_model
from rusty_ast.location import SourceLocation
from rusty_ast.nodes import (
    Binary,
    BoolLiteral,
    ExpressionStatement,
    Field,
    File,
    Function,
    Identifier,
    Parameter,
    Struct,
)
from rusty_ast.renderers.document import DocumentBuilder, node_payload

LOC = SourceLocation(lineno=1, col_offset=1)


def _json(source: str) -> dict:
    return json.loads(render_json(parse(source)))


class TestDocumentShape:
    def test_add_function(self) -> None:
        assert _json("fn add(a: i32, b: i32) -> i32 { a + b }") == {
            "items": [
                {
                    "type": "Function",
                    "name": "add",
                    "parameters": [
                        {"name": "a", "type_info": "i32"},
                        {"name": "b", "type_info": "i32"},
                    ],
                    "return_type": "i32",
                    "body": [
                        {
                            "type": "Expression",
                            "expr": {
                                "type": "Binary",
                                "operator": "+",
                                "left": {"type": "Identifier", "name": "a"},
                                "right": {"type": "Identifier", "name": "b"},
                            },
                        }
                    ],
                }
            ]
        }

    def test_type_key_comes_first(self) -> None:
        document = build_document(parse("fn add(a: i32, b: i32) -> i32 { a + b }"))
        function = document["items"][0]
        assert list(function) == ["type", "name", "parameters", "return_type", "body"]

    def test_enum_variant_order(self) -> None:
        document = _json("enum Direction { North, East, South, West }")
        (enum,) = document["items"]
        assert enum["type"] == "Enum"
        assert [v["name"] for v in enum["variants"]] == ["North", "East", "South", "West"]

    def test_tuple_fields_omit_name(self) -> None:
        (struct,) = _json("struct Pair(i32, String);")["items"]
        assert struct["fields"] == [{"type_info": "i32"}, {"type_info": "String"}]

    def test_named_fields(self) -> None:
        (struct,) = _json("struct P { x: f64 }")["items"]
        assert struct == {"type": "Struct", "name": "P", "fields": [{"name": "x", "type_info": "f64"}]}

    def test_empty_collections_omitted(self) -> None:
        (function,) = _json("fn main() {}")["items"]
        assert function == {"type": "Function", "name": "main"}

    def test_empty_while_body_omitted(self) -> None:
        (function,) = _json("fn f() { while go {} }")["items"]
        (statement,) = function["body"]
        assert statement["expr"] == {"type": "While", "condition": {"type": "Identifier", "name": "go"}}

    def test_unit_struct(self) -> None:
        assert _json("struct Unit;")["items"] == [{"type": "Struct", "name": "Unit"}]

    def test_absent_optionals_omitted(self) -> None:
        (function,) = _json("fn f() { let x; return; }")["items"]
        declaration, statement = function["body"]
        assert declaration == {"type": "VariableDeclaration", "name": "x"}
        assert statement == {"type": "Expression", "expr": {"type": "Return"}}

    def test_other_operator(self) -> None:
        (function,) = _json("fn f() { x += 1; }")["items"]
        assert function["body"][0]["expr"]["operator"] == "other_operator"

    def test_literal_values(self) -> None:
        (function,) = _json('fn f() { g(0x10, 2.5, "s", true); }')["items"]
        arguments = function["body"][0]["expr"]["arguments"]
        assert arguments == [
            {"type": "IntLiteral", "value": "16"},
            {"type": "FloatLiteral", "value": "2.5"},
            {"type": "StringLiteral", "value": "s"},
            {"type": "BoolLiteral", "value": True},
        ]

    def test_call_shape(self) -> None:
        (function,) = _json("fn f() { run(); }")["items"]
        assert function["body"][0]["expr"] == {
            "type": "Call",
            "callee": {"type": "Identifier", "name": "run"},
        }

    def test_if_shape(self) -> None:
        (function,) = _json("fn f() { if a { 1 } else if b { 2 } }")["items"]
        expr = function["body"][0]["expr"]
        assert expr["type"] == "If"
        assert expr["condition"] == {"type": "Identifier", "name": "a"}
        assert expr["then_branch"] == [{"type": "Expression", "expr": {"type": "IntLiteral", "value": "1"}}]
        assert expr["else_branch"]["type"] == "If"
        assert "else_branch" not in expr["else_branch"]

    def test_loop_and_while(self) -> None:
        (function,) = _json("fn f() { loop { } while x { y(); } }")["items"]
        loop, while_ = (s["expr"] for s in function["body"])
        assert loop == {"type": "Loop"}
        assert while_["type"] == "While"
        assert while_["condition"] == {"type": "Identifier", "name": "x"}
        assert len(while_["body"]) == 1

    def test_nested_item(self) -> None:
        (function,) = _json("fn outer() { struct Inner; }")["items"]
        assert function["body"] == [{"type": "Item", "item": {"type": "Struct", "name": "Inner"}}]

    def test_other_shapes_carry_source_text(self) -> None:
        document = _json("impl A {}\nfn f() { println!(\"x\"); match y { _ => () } }")
        impl, function = document["items"]
        assert impl == {"type": "Other", "description": "impl A {}"}
        statements = function["body"]
        assert statements[0]["type"] == "Other"
        assert statements[0]["description"].startswith('println!("x")')
        assert statements[-1]["expr"] == {"type": "Other", "description": "match y { _ => () }"}

    def test_receiver(self) -> None:
        (function,) = _json("fn f(self: Box<Self>) {}")["items"]
        assert function["parameters"] == [{"name": "self", "type_info": "self: Box<Self>"}]

    def test_empty_file(self) -> None:
        assert _json("") == {"items": []}
        assert build_document(parse("")) == {"items": ()}


class TestDocumentBuilder:
    def test_collections_are_tuples(self) -> None:
        document = build_document(parse("enum E { A, B }"))
        assert isinstance(document["items"], tuple)
        assert isinstance(document["items"][0]["variants"], tuple)

    def test_accepts_model(self) -> None:
        model = to_model(parse("struct A;"))
        assert DocumentBuilder().build(model) == {"items": ({"type": "Struct", "name": "A"},)}

    def test_hand_built_tree(self) -> None:
        function = Function(
            location=LOC,
            name="f",
            parameters=(Parameter(location=LOC, name="x", type_info="u8"),),
            return_type=None,
            body=(
                ExpressionStatement(
                    location=LOC,
                    expr=Binary(
                        location=LOC,
                        operator="==",
                        left=Identifier(location=LOC, name="x"),
                        right=BoolLiteral(location=LOC, value=False),
                    ),
                ),
            ),
        )
        document = DocumentBuilder().build(File(location=LOC, items=(function,)))
        assert document == {
            "items": (
                {
                    "type": "Function",
                    "name": "f",
                    "parameters": ({"name": "x", "type_info": "u8"},),
                    "body": (
                        {
                            "type": "Expression",
                            "expr": {
                                "type": "Binary",
                                "operator": "==",
                                "left": {"type": "Identifier", "name": "x"},
                                "right": {"type": "BoolLiteral", "value": False},
                            },
                        },
                    ),
                },
            )
        }

    def test_node_payload_excludes_children(self) -> None:
        struct = Struct(location=LOC, name="S", fields=(Field(location=LOC, name=None, type_info="u8"),))
        assert node_payload(struct) == {"type": "Struct", "name": "S"}
        assert node_payload(struct.fields[0]) == {"type_info": "u8"}

    def test_idempotent(self) -> None:
        tree = parse("fn f(a: u8) -> u8 { if a > 1 { a } else { 0 } }\nenum E { X, Y }")
        assert render_json(tree) == render_json(tree)


# Capitalized identifiers; Self is reserved
variant_names = st.from_regex(r"[A-Z][a-z]{0,6}", fullmatch=True).filter(lambda name: name != "Self")


class TestDocumentProperties:
    @given(st.lists(variant_names, min_size=1, max_size=8, unique=True))
    @settings(max_examples=30, deadline=None)
    def test_variant_names_round_trip_in_order(self, variants: list[str]) -> None:
        source = f"enum E {{ {', '.join(variants)} }}"
        (enum,) = _json(source)["items"]
        assert [v["name"] for v in enum["variants"]] == variants

    @given(st.lists(st.sampled_from(["i32", "u8", "String", "&str", "Vec<u8>"]), max_size=6))
    @settings(max_examples=30, deadline=None)
    def test_parameters_round_trip_in_order(self, types: list[str]) -> None:
        params = ", ".join(f"p{i}: {t}" for i, t in enumerate(types))
        (function,) = _json(f"fn f({params}) {{}}")["items"]
        expected = [{"name": f"p{i}", "type_info": t} for i, t in enumerate(types)]
        assert function.get("parameters", []) == expected

    @given(st.sampled_from(["+", "-", "*", "/", "==", "<", "<=", "!=", ">=", ">", "%", "&&", "||", "^"]))
    @settings(max_examples=30, deadline=None)
    def test_operator_normalization(self, op: str) -> None:
        (function,) = _json(f"fn f() {{ a {op} b }}")["items"]
        operator = function["body"][0]["expr"]["operator"]
        if op in ("+", "-", "*", "/", "==", "<", "<=", "!=", ">=", ">"):
            assert operator == op
        else:
            assert operator == "other_operator"
