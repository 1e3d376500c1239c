"""Tracker schema: custom fields, trackers and projects.

These are read-only descriptions of a tracker installation. They are owned by
the configuration collaborator and consumed by the query codec and the task
validator.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .value_object import ValueObject


class FieldFormat(str, Enum):
    """Storage format of a custom field, as named by the tracker."""

    STRING = "string"
    TEXT = "text"
    INT = "int"
    FLOAT = "float"
    LIST = "list"
    DATE = "date"
    BOOL = "bool"
    VERSION = "version"
    USER = "user"
    LINK = "link"

    @property
    def label(self) -> str:
        return _FORMAT_LABELS[self]


_FORMAT_LABELS: dict[FieldFormat, str] = {
    FieldFormat.STRING: "String",
    FieldFormat.TEXT: "Long text",
    FieldFormat.INT: "Integer",
    FieldFormat.FLOAT: "Float",
    FieldFormat.LIST: "List",
    FieldFormat.DATE: "Date",
    FieldFormat.BOOL: "Boolean",
    FieldFormat.VERSION: "Version",
    FieldFormat.USER: "User",
    FieldFormat.LINK: "Link",
}


class CustomField(ValueObject):
    """A project/tracker scoped attribute with its own constraints.

    ``min_length``/``max_length`` of ``0`` mean "no bound"; an empty or
    missing ``regexp`` means "no pattern".
    """

    id: int
    name: str
    field_format: FieldFormat = FieldFormat.STRING
    is_required: bool = False
    is_filter: bool = False
    min_length: int = Field(default=0, ge=0)
    max_length: int = Field(default=0, ge=0)
    regexp: str | None = None

    @property
    def label(self) -> str:
        return self.name


class Tracker(ValueObject):
    id: int
    name: str


class Project(ValueObject):
    """A project and the custom fields enabled per tracker."""

    id: int
    name: str
    identifier: str = ""
    tracker_ids: tuple[int, ...] = ()
    custom_field_ids_by_tracker: dict[int, tuple[int, ...]] = Field(
        default_factory=dict
    )

    def custom_field_ids_for_tracker(self, tracker_id: int) -> tuple[int, ...]:
        """Custom field ids applicable to issues of *tracker_id*, in order."""
        return self.custom_field_ids_by_tracker.get(tracker_id, ())
