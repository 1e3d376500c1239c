"""CompareOperator — the comparison operators a query filter can use."""

from __future__ import annotations

from enum import Enum


class CompareOperator(Enum):
    """Supported filter operators.

    Each member carries its wire token (``query_value``) and whether it is
    followed by values (``value_based``). Date operators take a number of
    days as their single value.
    """

    # Equality / list membership
    IS = ("=", True)
    IS_NOT = ("!", True)

    # Status shortcuts
    OPEN = ("o", False)
    CLOSED = ("c", False)

    # Presence
    NONE = ("!*", False)
    ALL = ("*", False)

    # Numeric comparison
    GREATER_EQUAL = (">=", True)
    LESS_EQUAL = ("<=", True)

    # Relative dates (future)
    IN_LESS_THAN = ("<t+", True)
    IN_MORE_THAN = (">t+", True)
    IN = ("t+", True)
    TODAY = ("t", False)
    THIS_WEEK = ("w", False)

    # Relative dates (past)
    LESS_THAN_AGO = (">t-", True)
    MORE_THAN_AGO = ("<t-", True)
    AGO = ("t-", True)

    # Text
    CONTAINS = ("~", True)
    CONTAINS_NOT = ("!~", True)

    def __init__(self, query_value: str, value_based: bool) -> None:
        self.query_value = query_value
        self.value_based = value_based

    @classmethod
    def from_query_value(cls, query_value: str | None) -> CompareOperator | None:
        """Return the operator with wire token *query_value*, if any."""
        if query_value is None:
            return None
        return _BY_QUERY_VALUE.get(query_value)


_BY_QUERY_VALUE: dict[str, CompareOperator] = {
    op.query_value: op for op in CompareOperator
}

LIST_OPERATORS = frozenset(
    {CompareOperator.IS, CompareOperator.IS_NOT}
)
OPTIONAL_LIST_OPERATORS = LIST_OPERATORS | {CompareOperator.NONE, CompareOperator.ALL}
STATUS_OPERATORS = frozenset(
    {
        CompareOperator.OPEN,
        CompareOperator.IS,
        CompareOperator.IS_NOT,
        CompareOperator.CLOSED,
        CompareOperator.ALL,
    }
)
TEXT_OPERATORS = frozenset(
    {CompareOperator.CONTAINS, CompareOperator.CONTAINS_NOT}
)
NUMBER_OPERATORS = frozenset(
    {
        CompareOperator.IS,
        CompareOperator.GREATER_EQUAL,
        CompareOperator.LESS_EQUAL,
        CompareOperator.NONE,
        CompareOperator.ALL,
    }
)
PAST_DATE_OPERATORS = frozenset(
    {
        CompareOperator.LESS_THAN_AGO,
        CompareOperator.MORE_THAN_AGO,
        CompareOperator.AGO,
        CompareOperator.TODAY,
        CompareOperator.THIS_WEEK,
    }
)
DATE_OPERATORS = PAST_DATE_OPERATORS | {
    CompareOperator.IN_LESS_THAN,
    CompareOperator.IN_MORE_THAN,
    CompareOperator.IN,
}
