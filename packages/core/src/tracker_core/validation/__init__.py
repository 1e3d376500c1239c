"""Validation findings: ErrorMessageCollector."""

from __future__ import annotations

from .collector import ErrorMessageCollector

__all__ = [
    "ErrorMessageCollector",
]
