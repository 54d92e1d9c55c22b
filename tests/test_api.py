"""Tests for the public rusty_ast API surface."""

import json
import subprocess
import sys

import pytest

import rusty_ast
from rusty_ast import (
    File,
    Function,
    ParseError,
    SyntaxTree,
    Walker,
    build_document,
    classify_file,
    format_text,
    parse,
    parse_file,
    parse_rust_file,
    parse_rust_source,
    render_json,
    to_model,
)


class TestExports:
    def test_all_names_resolve(self) -> None:
        for name in rusty_ast.__all__:
            assert hasattr(rusty_ast, name), name

    def test_version(self) -> None:
        assert rusty_ast.__version__ == "0.1.0"

    def test_parse_aliases(self) -> None:
        assert parse is parse_rust_source
        assert parse_file is parse_rust_file


class TestPipeline:
    SOURCE = "fn add(a: i32, b: i32) -> i32 { a + b }"

    def test_parse_then_classify(self) -> None:
        tree = parse(self.SOURCE)
        assert isinstance(tree, SyntaxTree)
        model = classify_file(tree)
        assert isinstance(model, File)
        assert isinstance(model.items[0], Function)

    def test_to_model_passes_model_through(self) -> None:
        model = to_model(parse(self.SOURCE))
        assert to_model(model) is model

    def test_tree_and_model_render_the_same(self) -> None:
        tree = parse(self.SOURCE)
        model = to_model(tree)
        assert format_text(tree) == format_text(model)
        assert render_json(tree) == render_json(model)
        assert build_document(tree) == build_document(model)

    def test_custom_sink(self) -> None:
        class NameCollector:
            def __init__(self) -> None:
                self.names: list[str] = []

            def enter_node(self, node, depth):  # type: ignore[no-untyped-def]
                if hasattr(node, "name") and node.name is not None:
                    self.names.append(node.name)

            def leave_node(self, node, depth):  # type: ignore[no-untyped-def]
                pass

            def enter_slot(self, slot, depth):  # type: ignore[no-untyped-def]
                pass

            def leave_slot(self, slot, depth):  # type: ignore[no-untyped-def]
                pass

            def scalar(self, slot, value, depth):  # type: ignore[no-untyped-def]
                pass

        collector = NameCollector()
        Walker(collector).walk(to_model(parse(self.SOURCE)))
        assert collector.names == ["add", "a", "b", "a", "b"]


class TestModuleEntryPoint:
    def test_python_dash_m(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "rusty_ast", "-c", "struct A;"],
            capture_output=True,
            text=True,
            check=False,
        )
        assert result.returncode == 0
        assert result.stdout == "AST for Rust code:\nStruct: A\n"


def _else_if_chain(arms: int) -> str:
    branches = " else ".join(f"if x == {n} {{ {n} }}" for n in range(arms))
    return f"fn f(x: i32) -> i32 {{ {branches} else {{ -1 }} }}"


def _descriptions(value) -> list[str]:  # type: ignore[no-untyped-def]
    """Every ``description`` in a loaded JSON document."""
    found: list[str] = []
    stack = [value]
    while stack:
        current = stack.pop()
        if isinstance(current, dict):
            if "description" in current:
                found.append(current["description"])
            stack.extend(current.values())
        elif isinstance(current, list):
            stack.extend(current)
    return found


class TestDeepNesting:
    @pytest.mark.parametrize(
        "source",
        [
            "fn f() -> i32 { " + " + ".join(["1"] * 1000) + " }",
            _else_if_chain(300),
        ],
        ids=["binary-chain", "else-if-chain"],
    )
    def test_renders_both_formats(self, source: str) -> None:
        tree = parse(source)
        text = format_text(tree)
        assert text.startswith("Function: f\n")
        assert "Other expression: " in text

        document = json.loads(render_json(tree))
        assert document != {}
        (function,) = document["items"]
        assert function["type"] == "Function"
        descriptions = _descriptions(document)
        assert descriptions
        assert all(d in source for d in descriptions)

    def test_deep_syntax_error_is_parse_error(self) -> None:
        source = "fn f() -> i32 { " + " + ".join(["1"] * 1000) + " + }"
        with pytest.raises(ParseError):
            parse(source)
