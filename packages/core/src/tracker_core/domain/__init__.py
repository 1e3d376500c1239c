"""Domain: schema value objects."""

from __future__ import annotations

from .schema import CustomField, FieldFormat, Project, Tracker
from .value_object import ValueObject

__all__ = [
    "CustomField",
    "FieldFormat",
    "Project",
    "Tracker",
    "ValueObject",
]
