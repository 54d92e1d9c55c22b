"""Exception classes for rusty-ast.

Only the parser front end raises. Classification, traversal and both
renderers are total over the Node Model and never raise for a parsed tree.
"""

from __future__ import annotations


class RustyAstError(Exception):
    """Base exception for all rusty-ast errors."""

    pass


class ParseError(RustyAstError):
    """Rust source could not be parsed.

    Raised when the parser reports a syntax error. File read failures are
    not wrapped: they propagate as ``OSError`` so callers can tell the two
    apart.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
