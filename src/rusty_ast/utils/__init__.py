"""Utility modules for rusty-ast.

Provides:
- literals: normalization of integer, float and string literal tokens
- text: one_line, truncate for rendering source text
- logger: get_logger for logging
"""

from rusty_ast.utils.literals import float_digits, has_float_suffix, int_digits, string_value
from rusty_ast.utils.logger import get_logger
from rusty_ast.utils.text import one_line, truncate

__all__ = [
    "float_digits",
    "get_logger",
    "has_float_suffix",
    "int_digits",
    "one_line",
    "string_value",
    "truncate",
]
