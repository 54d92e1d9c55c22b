"""Rust source parsing via tree-sitter.

Wraps the tree-sitter Rust grammar and hands back a SyntaxTree, or raises
ParseError when the source does not parse cleanly. tree-sitter always
produces a tree; a syntax error shows up as ERROR or MISSING nodes, and the
first one in document order becomes the reported position.

Example:
    >>> tree = parse_rust_source("fn main() {}")
    >>> tree.root.type
    'source_file'

Thread Safety:
A new tree_sitter.Parser is created per call. The compiled Language is
immutable and shared.

"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import tree_sitter_rust
from tree_sitter import Language, Node, Parser, Tree

from rusty_ast.errors import ParseError
from rusty_ast.location import SourceLocation
from rusty_ast.utils.logger import get_logger
from rusty_ast.utils.text import truncate

logger = get_logger(__name__)

RUST_LANGUAGE = Language(tree_sitter_rust.language())


@dataclass(frozen=True, slots=True)
class SyntaxTree:
    """A successfully parsed Rust compilation unit.

    Holds the concrete tree-sitter tree together with the exact source
    bytes it was parsed from, so any node can be turned back into its
    original text.

    """

    tree: Tree
    source: bytes
    source_file: str | None = None

    @property
    def root(self) -> Node:
        """The ``source_file`` node."""
        return self.tree.root_node

    def text(self, node: Node, start: Node | None = None) -> str:
        """Exact source text of ``node``.

        When ``start`` is given, the slice begins at ``start`` instead, which
        lets callers include leading attributes in an item's text.
        """
        begin = (start or node).start_byte
        return self.source[begin : node.end_byte].decode("utf-8", errors="replace")

    def location(self, node: Node) -> SourceLocation:
        """SourceLocation of ``node`` (1-indexed)."""
        start_row, start_col = node.start_point
        end_row, end_col = node.end_point
        return SourceLocation(
            lineno=start_row + 1,
            col_offset=start_col + 1,
            offset=node.start_byte,
            end_offset=node.end_byte,
            end_lineno=end_row + 1,
            end_col_offset=end_col + 1,
            source_file=self.source_file,
        )


def _first_error(node: Node) -> Node | None:
    """Depth-first search for the first ERROR or MISSING node.

    Uses an explicit stack: error subtrees can be as deep as the source
    nesting.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current
        stack.extend(reversed([c for c in current.children if c.has_error or c.is_missing]))
    return None


def _syntax_error(tree: SyntaxTree) -> ParseError:
    bad = _first_error(tree.root)
    if bad is None:
        return ParseError("syntax error", source_file=tree.source_file)

    if bad.is_missing:
        message = f"expected `{bad.type}`"
    else:
        snippet = tree.text(bad).strip()
        message = f"unexpected `{truncate(snippet)}`" if snippet else "unexpected end of input"

    row, col = bad.start_point
    return ParseError(message, lineno=row + 1, col_offset=col + 1, source_file=tree.source_file)


def parse_rust_source(source: str, *, source_file: str | None = None) -> SyntaxTree:
    """Parse Rust source code into a SyntaxTree.

    Args:
        source: Rust source text
        source_file: Optional path used in locations and error messages

    Returns:
        SyntaxTree for the whole compilation unit

    Raises:
        ParseError: If the source contains a syntax error

    """
    data = source.encode("utf-8")
    parser = Parser(RUST_LANGUAGE)
    syntax = SyntaxTree(tree=parser.parse(data), source=data, source_file=source_file)

    if syntax.root.has_error:
        error = _syntax_error(syntax)
        logger.debug("Rejected %s: %s", source_file or "<source>", error)
        raise error

    logger.debug(
        "Parsed %d bytes from %s (%d top-level nodes)",
        len(data),
        source_file or "<source>",
        syntax.root.named_child_count,
    )
    return syntax


def parse_rust_file(path: str | PathLike[str]) -> SyntaxTree:
    """Read a Rust file and parse it.

    Raises:
        OSError: If the file is missing or unreadable
        UnicodeDecodeError: If the file is not valid UTF-8
        ParseError: If the file contains a syntax error

    """
    file_path = Path(path)
    source = file_path.read_text(encoding="utf-8")
    return parse_rust_source(source, source_file=str(file_path))
