"""Task attribute validation: built-in checks and custom field rules."""

from __future__ import annotations

from .attributes import CUSTOM_FIELD_KEY_PREFIX, IssueAttribute, TaskData
from .config import TaskValidationConfig
from .rules import first_violation
from .validator import TaskDataValidator

__all__ = [
    "CUSTOM_FIELD_KEY_PREFIX",
    "IssueAttribute",
    "TaskData",
    "TaskDataValidator",
    "TaskValidationConfig",
    "first_violation",
]
