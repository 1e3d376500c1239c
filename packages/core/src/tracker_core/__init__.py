"""tracker-core — Foundation package for the tracker query/validation toolkit.

Schema value objects (pydantic), lookup ports, an in-memory schema adapter,
the exception root and the validation message collector.
"""

from __future__ import annotations

from .adapters.memory import InMemoryConfiguration
from .domain import CustomField, FieldFormat, Project, Tracker, ValueObject
from .ports import IConfiguration, ICustomFieldLookup, IProjectLookup
from .primitives import (
    ConfigurationError,
    TrackerError,
    is_float,
    parse_int,
    parse_integer_id,
)
from .validation import ErrorMessageCollector

__all__ = [
    "ConfigurationError",
    "CustomField",
    "ErrorMessageCollector",
    "FieldFormat",
    "IConfiguration",
    "ICustomFieldLookup",
    "IProjectLookup",
    "InMemoryConfiguration",
    "Project",
    "Tracker",
    "TrackerError",
    "ValueObject",
    "is_float",
    "parse_int",
    "parse_integer_id",
]
