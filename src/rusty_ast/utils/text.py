"""Text helpers shared by the renderers."""

from __future__ import annotations


def one_line(text: str) -> str:
    """Collapse multi-line source text onto a single line.

    Each line is stripped of surrounding whitespace and the non-empty lines
    are joined with single spaces, so an ``impl`` block or a multi-line
    call still reads naturally inside a one-line-per-node outline.

    Examples:
        >>> one_line("impl P {\\n    fn f() {}\\n}")
        'impl P { fn f() {} }'
        >>> one_line("x")
        'x'
    """
    if "\n" not in text:
        return text.strip()
    return " ".join(stripped for line in text.splitlines() if (stripped := line.strip()))


def truncate(text: str, limit: int = 24) -> str:
    """Shorten text for error messages, marking the cut with an ellipsis."""
    first = text.splitlines()[0] if text else ""
    if len(first) <= limit and first == text:
        return first
    return first[:limit].rstrip() + "..."
