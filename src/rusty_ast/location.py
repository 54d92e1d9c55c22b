"""Source location tracking for syntax nodes and parse errors.

Provides SourceLocation, attached to every Node Model object and carried by
ParseError so messages can point back into the Rust source.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a syntax construct in its source text.

    Line and column numbers are 1-indexed. Columns count bytes of the UTF-8
    encoded line, matching what the tree-sitter parser reports.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        offset: Absolute start byte offset in the source buffer
        end_offset: Absolute end byte offset in the source buffer
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5, source_file="src/lib.rs")
            >>> str(loc)
            'src/lib.rs:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "main.rs:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

