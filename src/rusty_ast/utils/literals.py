"""Normalization of Rust literal tokens.

Literal values are rendered the way rustc's token model reports them:
integers as base-10 digits without separators or type suffix, floats
without separators or suffix, strings with escapes resolved.

Example:
    >>> int_digits("0xff_u8")
    '255'
    >>> float_digits("1_000.5f64")
    '1000.5'
    >>> string_value('"a\\\\tb"')
    'a\\tb'
"""

from __future__ import annotations

import re

_INT_SUFFIXES = (
    "usize", "isize",
    "u128", "i128",
    "u16", "u32", "u64", "i16", "i32", "i64",
    "u8", "i8",
)
_FLOAT_SUFFIXES = ("f32", "f64")
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}

_ESCAPE = re.compile(
    r"\\(?:u\{([0-9a-fA-F_]{1,8})\}|x([0-9a-fA-F]{2})|\r?\n\s*|(.))",
    re.DOTALL,
)
_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "0": "\0",
    "'": "'",
    '"': '"',
}


def _strip_suffix(text: str, suffixes: tuple[str, ...]) -> str:
    for suffix in suffixes:
        if text.endswith(suffix) and len(text) > len(suffix):
            return text[: -len(suffix)]
    return text


def has_float_suffix(text: str) -> bool:
    """True for decimal integer tokens such as ``1f32`` that denote floats."""
    if text[:2].lower() in _RADIX_PREFIXES:
        return False
    return text.endswith(_FLOAT_SUFFIXES)


def int_digits(text: str) -> str:
    """Base-10 digits of an integer literal token."""
    digits = text.replace("_", "")
    radix = _RADIX_PREFIXES.get(digits[:2].lower())
    digits = _strip_suffix(digits, _INT_SUFFIXES)
    try:
        if radix is not None:
            return str(int(digits[2:], radix))
        return str(int(digits))
    except ValueError:
        return digits


def float_digits(text: str) -> str:
    """Digits of a float literal token, without separators or suffix."""
    return _strip_suffix(text.replace("_", ""), _FLOAT_SUFFIXES)


def _unescape(match: re.Match[str]) -> str:
    unicode, byte, simple = match.groups()
    try:
        if unicode is not None:
            return chr(int(unicode.replace("_", ""), 16))
        if byte is not None:
            return chr(int(byte, 16))
    except ValueError:
        return match.group(0)
    if simple is not None:
        return _SIMPLE_ESCAPES.get(simple, match.group(0))
    # Line continuation: the newline and leading whitespace vanish.
    return ""


def string_value(text: str) -> str | None:
    """Value of a string literal token, or None for byte and C strings.

    Raw strings are returned verbatim; regular strings have their escape
    sequences resolved.
    """
    if text.startswith(("b", "c")):
        return None
    if text.startswith("r"):
        body = text[1:]
        hashes = len(body) - len(body.lstrip("#"))
        return body[hashes + 1 : len(body) - hashes - 1]
    return _ESCAPE.sub(_unescape, text[1:-1])
