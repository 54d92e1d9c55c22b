"""ContextVar-based render configuration for rusty-ast.

Renderers read the active RenderConfig when they are constructed. Config
lives in a ContextVar (PEP 567), so each thread or task sees its own value
and no locking is needed.

Usage:
    from rusty_ast.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(indent_width=4)):
        text = format_text(tree)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        indent_width: Spaces per nesting level in the text outline
        json_indent: Indentation of pretty-printed JSON (None for compact)
        banner: First line written by print_ast

    """

    indent_width: int = 2
    json_indent: int | None = 2
    banner: str = "AST for Rust code:"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> RenderConfig.from_dict({"indent_width": 4, "colour": True}).indent_width
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration for the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset the current context to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Use ``config`` inside the block, restoring the previous config after.

    The previous value is restored even if the block raises.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
