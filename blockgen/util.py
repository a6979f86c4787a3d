"""Shared utilities for templates."""

from __future__ import annotations

import re

_INT_LITERAL = re.compile(r"^-?[0-9]+$")


def escape_string(value: str) -> str:
    """Escape a string for use in a string literal (without quotes)."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
        .replace("\f", "\\f")
        .replace("\v", "\\v")
        .replace("\x00", "\\x00")
    )


def string_literal(value: str) -> str:
    return '"' + escape_string(value) + '"'


def is_int_literal(code: str) -> bool:
    """True for an optional minus sign followed by digits."""
    return _INT_LITERAL.match(code) is not None


def indent_lines(code: str, indent: str) -> str:
    """Prefix every non-empty line of code with indent."""
    return "\n".join(indent + line if line else line for line in code.split("\n"))


def parse_count(raw: str) -> int:
    """Non-negative count from a mutation attribute; 0 when malformed."""
    raw = raw.strip()
    if not is_int_literal(raw) or raw.startswith("-"):
        return 0
    try:
        return int(raw)
    except ValueError:
        return 0
