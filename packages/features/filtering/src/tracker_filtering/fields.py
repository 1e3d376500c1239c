"""Field catalog: built-in query fields and custom-field-backed fields.

Every field carries a :class:`FieldDefinition` whose :class:`FieldKind` tag
selects the value-shape rules applied when a filter is encoded.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from tracker_core.domain.schema import FieldFormat

from .operators import (
    DATE_OPERATORS,
    LIST_OPERATORS,
    NUMBER_OPERATORS,
    OPTIONAL_LIST_OPERATORS,
    PAST_DATE_OPERATORS,
    STATUS_OPERATORS,
    TEXT_OPERATORS,
    CompareOperator,
)

if TYPE_CHECKING:
    from tracker_core.domain.schema import CustomField

CUSTOM_FIELD_PREFIX = "cf_"


class FieldKind(str, Enum):
    """Value-shape family of a field."""

    GENERIC = "generic"
    DATE = "date"
    BOOLEAN = "boolean"
    DONE_RATIO = "done_ratio"
    PROJECT = "project"


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """Kind and allowed operators of a queryable field."""

    kind: FieldKind
    operators: frozenset[CompareOperator]

    def contains_operator(self, operator: CompareOperator | None) -> bool:
        return operator is not None and operator in self.operators


# Definitions shared by custom fields of the same format.
LIST_TYPE = FieldDefinition(FieldKind.GENERIC, OPTIONAL_LIST_OPERATORS)
TEXT_TYPE = FieldDefinition(
    FieldKind.GENERIC, OPTIONAL_LIST_OPERATORS | TEXT_OPERATORS
)
NUMBER_TYPE = FieldDefinition(FieldKind.GENERIC, NUMBER_OPERATORS)
DATE_TYPE = FieldDefinition(
    FieldKind.DATE, DATE_OPERATORS | {CompareOperator.NONE, CompareOperator.ALL}
)
BOOLEAN_TYPE = FieldDefinition(FieldKind.BOOLEAN, OPTIONAL_LIST_OPERATORS)

_DEFINITION_BY_FORMAT: dict[FieldFormat, FieldDefinition] = {
    FieldFormat.STRING: TEXT_TYPE,
    FieldFormat.TEXT: TEXT_TYPE,
    FieldFormat.LINK: TEXT_TYPE,
    FieldFormat.INT: NUMBER_TYPE,
    FieldFormat.FLOAT: NUMBER_TYPE,
    FieldFormat.LIST: LIST_TYPE,
    FieldFormat.USER: LIST_TYPE,
    FieldFormat.VERSION: LIST_TYPE,
    FieldFormat.DATE: DATE_TYPE,
    FieldFormat.BOOL: BOOLEAN_TYPE,
}


@runtime_checkable
class IQueryField(Protocol):
    """Anything a filter can be bound to."""

    @property
    def query_value(self) -> str: ...


class QueryField(Enum):
    """Built-in issue fields."""

    STATUS = ("status_id", FieldKind.GENERIC, STATUS_OPERATORS)
    PROJECT = ("project_id", FieldKind.PROJECT, LIST_OPERATORS)
    TRACKER = ("tracker_id", FieldKind.GENERIC, LIST_OPERATORS)
    PRIORITY = ("priority_id", FieldKind.GENERIC, LIST_OPERATORS)
    ASSIGNED_TO = ("assigned_to_id", FieldKind.GENERIC, OPTIONAL_LIST_OPERATORS)
    AUTHOR = ("author_id", FieldKind.GENERIC, LIST_OPERATORS)
    CATEGORY = ("category_id", FieldKind.GENERIC, OPTIONAL_LIST_OPERATORS)
    FIXED_VERSION = ("fixed_version_id", FieldKind.GENERIC, OPTIONAL_LIST_OPERATORS)
    SUBJECT = ("subject", FieldKind.GENERIC, TEXT_OPERATORS)
    DONE_RATIO = (
        "done_ratio",
        FieldKind.DONE_RATIO,
        frozenset(
            {
                CompareOperator.IS,
                CompareOperator.GREATER_EQUAL,
                CompareOperator.LESS_EQUAL,
            }
        ),
    )
    CREATED_ON = ("created_on", FieldKind.DATE, PAST_DATE_OPERATORS)
    UPDATED_ON = ("updated_on", FieldKind.DATE, PAST_DATE_OPERATORS)
    START_DATE = ("start_date", FieldKind.DATE, DATE_OPERATORS)
    DUE_DATE = ("due_date", FieldKind.DATE, DATE_OPERATORS)

    def __init__(
        self,
        query_value: str,
        kind: FieldKind,
        operators: frozenset[CompareOperator],
    ) -> None:
        self.query_value = query_value
        self.definition = FieldDefinition(kind, frozenset(operators))

    @classmethod
    def from_query_value(cls, query_value: str | None) -> QueryField | None:
        if query_value is None:
            return None
        return _FIELD_BY_QUERY_VALUE.get(query_value)


_FIELD_BY_QUERY_VALUE: dict[str, QueryField] = {
    field.query_value: field for field in QueryField
}


def definition_for_custom_field(custom_field: CustomField) -> FieldDefinition | None:
    """Definition used to filter by *custom_field*; ``None`` if not filterable."""
    if not custom_field.is_filter:
        return None
    return _DEFINITION_BY_FORMAT.get(custom_field.field_format)


@dataclass(frozen=True, slots=True)
class CustomQueryField:
    """A query field backed by a custom field, identified by its id."""

    custom_field: CustomField
    definition: FieldDefinition
    prefix: str = CUSTOM_FIELD_PREFIX

    @property
    def id(self) -> int:
        return self.custom_field.id

    @property
    def query_value(self) -> str:
        return f"{self.prefix}{self.custom_field.id}"

    @classmethod
    def for_custom_field(
        cls, custom_field: CustomField, prefix: str = CUSTOM_FIELD_PREFIX
    ) -> CustomQueryField | None:
        definition = definition_for_custom_field(custom_field)
        if definition is None:
            return None
        return cls(custom_field, definition, prefix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomQueryField):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((CustomQueryField, self.id))
