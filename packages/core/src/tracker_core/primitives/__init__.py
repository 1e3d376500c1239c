"""Primitives: exceptions, text parsing."""

from __future__ import annotations

from .exceptions import ConfigurationError, TrackerError
from .parsing import is_float, parse_int, parse_integer_id

__all__ = [
    "ConfigurationError",
    "TrackerError",
    "is_float",
    "parse_int",
    "parse_integer_id",
]
