"""Issue query filters and their wire format (``fields[]``, ``operators[..]``,
``values[..][]``)."""

from __future__ import annotations

from .config import QueryCodecConfig
from .exceptions import FilterError, InvalidFilterValueError
from .fields import (
    BOOLEAN_TYPE,
    CUSTOM_FIELD_PREFIX,
    DATE_TYPE,
    LIST_TYPE,
    NUMBER_TYPE,
    TEXT_TYPE,
    CustomQueryField,
    FieldDefinition,
    FieldKind,
    IQueryField,
    QueryField,
    definition_for_custom_field,
)
from .filter import QueryFilter
from .operators import CompareOperator
from .query import Query
from .query_string import QueryStringBuilder
from .schema import IQuerySchema, QuerySchema
from .syntax import WirePair, field_token, find_name, find_operator, find_value

__all__ = [
    "BOOLEAN_TYPE",
    "CUSTOM_FIELD_PREFIX",
    "CompareOperator",
    "CustomQueryField",
    "DATE_TYPE",
    "FieldDefinition",
    "FieldKind",
    "FilterError",
    "IQueryField",
    "IQuerySchema",
    "InvalidFilterValueError",
    "LIST_TYPE",
    "NUMBER_TYPE",
    "Query",
    "QueryCodecConfig",
    "QueryField",
    "QueryFilter",
    "QuerySchema",
    "QueryStringBuilder",
    "TEXT_TYPE",
    "WirePair",
    "definition_for_custom_field",
    "field_token",
    "find_name",
    "find_operator",
    "find_value",
]
