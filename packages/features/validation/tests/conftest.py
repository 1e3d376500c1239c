"""Shared fixtures for task validation tests."""

from __future__ import annotations

import pytest

from tracker_core.adapters.memory import InMemoryConfiguration
from tracker_validation.attributes import IssueAttribute, TaskData
from tracker_validation.validator import TaskDataValidator

PROJECT_ID = 1
BUG_TRACKER = 1
FEATURE_TRACKER = 2


@pytest.fixture
def configuration() -> InMemoryConfiguration:
    return InMemoryConfiguration.from_dict(
        {
            "custom_fields": [
                {"id": 1, "name": "Effort", "field_format": "float"},
                {"id": 2, "name": "Ticket", "field_format": "int", "is_required": True},
                {
                    "id": 3,
                    "name": "Code",
                    "field_format": "string",
                    "min_length": 2,
                    "max_length": 5,
                    "regexp": "[A-Z]+",
                },
                {"id": 4, "name": "Notes", "field_format": "text"},
            ],
            "projects": [
                {
                    "id": PROJECT_ID,
                    "name": "Alpha",
                    "tracker_ids": [BUG_TRACKER, FEATURE_TRACKER],
                    "custom_field_ids_by_tracker": {
                        BUG_TRACKER: [1, 2, 3],
                        FEATURE_TRACKER: [4],
                    },
                }
            ],
            "trackers": [
                {"id": BUG_TRACKER, "name": "Bug"},
                {"id": FEATURE_TRACKER, "name": "Feature"},
            ],
        }
    )


@pytest.fixture
def validator(configuration: InMemoryConfiguration) -> TaskDataValidator:
    return TaskDataValidator(configuration)


@pytest.fixture
def complete_task() -> TaskData:
    """A saved bug with every required attribute filled in."""
    return TaskData(
        values={
            IssueAttribute.PROJECT.task_key: str(PROJECT_ID),
            IssueAttribute.TRACKER.task_key: str(BUG_TRACKER),
            IssueAttribute.STATUS.task_key: "1",
            IssueAttribute.PRIORITY.task_key: "4",
            IssueAttribute.SUMMARY.task_key: "Crash on start",
            "task.redmine.cf.2": "17",
        }
    )
