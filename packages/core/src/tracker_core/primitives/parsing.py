"""Strict number parsing for values that arrive as text.

``int()`` and ``float()`` accept surrounding whitespace and digit-group
underscores; tracker values must not, so the accepted shapes are spelled out.
"""

from __future__ import annotations

import re

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_int(text: str) -> int:
    """Parse a decimal integer with an optional sign.

    Raises:
        ValueError: *text* is not a plain decimal integer.
    """
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)


def is_float(text: str) -> bool:
    """Whether *text* (surrounding whitespace ignored) is a decimal number."""
    return _FLOAT_PATTERN.fullmatch(text.strip()) is not None


def parse_integer_id(text: str | None) -> int | None:
    """Parse a record id, ``None`` when *text* is missing or not an integer."""
    if text is None:
        return None
    try:
        return parse_int(text.strip())
    except ValueError:
        return None
