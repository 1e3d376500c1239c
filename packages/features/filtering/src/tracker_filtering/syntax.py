"""Wire pairs and the bracket-key shapes used by the query wire format.

A filter travels as ordered key/value pairs::

    fields[]=status_id
    operators[status_id]==
    values[status_id][]=1
    values[status_id][]=2

The helpers here only look at a single pair; correlating the pairs of one
filter is done by :meth:`tracker_filtering.query.Query.from_pairs`.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

from .fields import QueryField
from .operators import CompareOperator

if TYPE_CHECKING:
    from .schema import IQuerySchema

FIELDS_KEY = "fields[]"

_OPERATOR_KEY_PATTERN = re.compile(r"operators\[(\w+)\]")
_VALUES_KEY_PATTERN = re.compile(r"values\[(\w+)\]\[\]")


class WirePair(NamedTuple):
    """One ordered key/value unit of the wire format."""

    name: str
    value: str


def operator_key(field_token: str) -> str:
    return f"operators[{field_token}]"


def values_key(field_token: str) -> str:
    return f"values[{field_token}][]"


def find_operator(
    pair: WirePair, schema: IQuerySchema | None = None
) -> CompareOperator | None:
    """Operator declared by an ``operators[<token>]`` pair, else ``None``."""
    if _OPERATOR_KEY_PATTERN.fullmatch(pair.name) is None:
        return None
    if schema is not None:
        return schema.operator_by_token(pair.value)
    return CompareOperator.from_query_value(pair.value)


def find_value(pair: WirePair) -> str | None:
    """Raw value of a ``values[<token>][]`` pair, else ``None``."""
    if _VALUES_KEY_PATTERN.fullmatch(pair.name) is None:
        return None
    return pair.value


def find_name(pair: WirePair) -> str | None:
    """Field token inside an operator or values key, else ``None``."""
    for pattern in (_OPERATOR_KEY_PATTERN, _VALUES_KEY_PATTERN):
        match = pattern.fullmatch(pair.name)
        if match is not None:
            return match.group(1)
    return None


def field_token(pair: WirePair) -> str | None:
    """Token that ties *pair* to the filter it belongs to.

    ``fields[]`` pairs carry the token as their value, the project shorthand
    carries it as its name, operator and values pairs inside their key.
    """
    if pair.name == FIELDS_KEY:
        return pair.value
    if pair.name == QueryField.PROJECT.query_value:
        return pair.name
    return find_name(pair)
