"""Traversal backends for rusty-ast.

Provides:
- TextRenderer: indented text outline, written line by line
- DocumentBuilder: nested, JSON-ready document
- RenderSink / Slot: the event protocol both implement
"""

from rusty_ast.renderers.document import DocumentBuilder, build_document, node_payload
from rusty_ast.renderers.protocol import RenderSink, Slot
from rusty_ast.renderers.text import TextRenderer, format_text, node_label, render_text

__all__ = [
    "DocumentBuilder",
    "RenderSink",
    "Slot",
    "TextRenderer",
    "build_document",
    "format_text",
    "node_label",
    "node_payload",
    "render_text",
]
