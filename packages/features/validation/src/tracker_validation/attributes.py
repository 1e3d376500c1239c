"""Built-in task attributes and the attribute set handed in by an editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

CUSTOM_FIELD_KEY_PREFIX = "task.redmine.cf."


class IssueAttribute(Enum):
    """Built-in attributes of an issue: task key, label, required."""

    PROJECT = ("task.redmine.project", "Project", True)
    TRACKER = ("task.redmine.tracker", "Tracker", True)
    STATUS = ("task.common.status", "Status", True)
    # Status slot of an issue that was never saved.
    STATUS_CHG = ("task.redmine.status.new", "Status", False)
    PRIORITY = ("task.common.priority", "Priority", True)
    SUMMARY = ("task.common.summary", "Subject", True)
    DESCRIPTION = ("task.common.description", "Description", False)
    CATEGORY = ("task.redmine.category", "Category", False)
    VERSION = ("task.redmine.version", "Target version", False)
    ASSIGNED_TO = ("task.common.user.assigned", "Assignee", False)
    PARENT = ("task.redmine.parent", "Parent task", False)
    ESTIMATED = ("task.redmine.estimated", "Estimated time", False)
    DONE_RATIO = ("task.redmine.done_ratio", "Done", False)
    START_DATE = ("task.redmine.start_date", "Start date", False)
    DUE_DATE = ("task.common.date.due", "Due date", False)

    def __init__(self, task_key: str, label: str, required: bool) -> None:
        self.task_key = task_key
        self.label = label
        self.required = required


def default_values_factory() -> dict[str, str]:
    """Factory for mutable default dict in TaskData fields."""
    return {}


@dataclass
class TaskData:
    """Attribute values of one issue, keyed by attribute id.

    ``is_new`` marks an issue that has not been submitted yet.
    """

    values: dict[str, str] = field(default_factory=default_values_factory)
    is_new: bool = False

    def get(self, attribute_id: str) -> str | None:
        return self.values.get(attribute_id)

    def get_attribute(self, attribute: IssueAttribute) -> str | None:
        return self.values.get(attribute.task_key)

    def __contains__(self, attribute_id: object) -> bool:
        return attribute_id in self.values
