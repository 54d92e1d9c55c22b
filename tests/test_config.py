"""Tests for ContextVar-based render configuration.

Validates defaults, thread isolation and context manager behavior.
"""

from threading import Thread

import pytest

from rusty_ast import (
    RenderConfig,
    format_text,
    get_render_config,
    parse,
    render_config_context,
    reset_render_config,
    set_render_config,
)


class TestRenderConfigDataclass:
    """Test RenderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = RenderConfig()
        assert config.indent_width == 2
        assert config.json_indent == 2
        assert config.banner == "AST for Rust code:"

    def test_immutability(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.indent_width = 4  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = RenderConfig.from_dict({"indent_width": 4, "json_indent": None, "colour": True})
        assert config == RenderConfig(indent_width=4, json_indent=None)

    def test_from_empty_dict(self) -> None:
        assert RenderConfig.from_dict({}) == RenderConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_render_config()

    def test_default_config(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_get(self) -> None:
        set_render_config(RenderConfig(indent_width=3))
        assert get_render_config().indent_width == 3

    def test_reset(self) -> None:
        set_render_config(RenderConfig(indent_width=3))
        reset_render_config()
        assert get_render_config() == RenderConfig()

    def test_set_config_changes_rendering(self) -> None:
        set_render_config(RenderConfig(indent_width=1))
        assert format_text(parse("enum E { A }")) == "Enum: E\n Variants:\n  Variant: A\n"


class TestRenderConfigContext:
    """Test the render_config_context context manager."""

    def test_restores_previous_config(self) -> None:
        before = get_render_config()
        with render_config_context(RenderConfig(indent_width=8)):
            assert get_render_config().indent_width == 8
        assert get_render_config() == before

    def test_restores_on_exception(self) -> None:
        before = get_render_config()
        with pytest.raises(ValueError), render_config_context(RenderConfig(indent_width=8)):
            raise ValueError("boom")
        assert get_render_config() == before

    def test_nested_contexts(self) -> None:
        with render_config_context(RenderConfig(indent_width=4)):
            with render_config_context(RenderConfig(indent_width=6)):
                assert get_render_config().indent_width == 6
            assert get_render_config().indent_width == 4


class TestThreadIsolation:
    """Each thread sees its own configuration."""

    def test_threads_do_not_share_config(self) -> None:
        results: dict[str, str] = {}

        def worker(name: str, width: int) -> None:
            with render_config_context(RenderConfig(indent_width=width)):
                results[name] = format_text(parse("struct S { x: u8 }"))

        threads = [Thread(target=worker, args=(f"w{w}", w)) for w in (1, 2, 4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for width in (1, 2, 4):
            lines = results[f"w{width}"].splitlines()
            assert lines[1] == " " * width + "Fields:"
            assert lines[2] == " " * (2 * width) + "Field: x - Type: u8"

    def test_new_thread_sees_default(self) -> None:
        seen: list[RenderConfig] = []
        with render_config_context(RenderConfig(indent_width=7)):
            thread = Thread(target=lambda: seen.append(get_render_config()))
            thread.start()
            thread.join()
        assert seen == [RenderConfig()]
