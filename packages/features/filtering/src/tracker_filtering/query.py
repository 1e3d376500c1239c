"""Query — an ordered set of filters and its wire-pair codec."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .config import DEFAULT_CONFIG, QueryCodecConfig
from .fields import QueryField
from .filter import QueryFilter
from .query_string import QueryStringBuilder
from .syntax import FIELDS_KEY, WirePair, field_token, find_operator, find_value

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .fields import IQueryField
    from .schema import IQuerySchema

logger = logging.getLogger("tracker.filtering")


def default_pairs_factory() -> list[WirePair]:
    """Factory for mutable default list in _PairGroup fields."""
    return []


@dataclass
class _PairGroup:
    """Pairs sharing one field token, in encounter order."""

    declarations: list[WirePair] = field(default_factory=default_pairs_factory)
    operators: list[WirePair] = field(default_factory=default_pairs_factory)
    values: list[WirePair] = field(default_factory=default_pairs_factory)


class Query:
    """Issue query made of at most one filter per field.

    Usage::

        query = Query()
        status = QueryFilter(QueryField.STATUS)
        status.set_operator(CompareOperator.IS)
        status.add_value("1")
        query.add_filter(status)
        query.to_query_string()
        # 'fields%5B%5D=status_id&operators%5Bstatus_id%5D=%3D&...'
    """

    def __init__(self, filters: Iterable[QueryFilter] = ()) -> None:
        self._filters: dict[str, QueryFilter] = {}
        for query_filter in filters:
            self.add_filter(query_filter)

    def add_filter(self, query_filter: QueryFilter) -> None:
        """Add *query_filter*, replacing any filter on the same field.

        Raises:
            ValueError: the filter is not bound to a field.
        """
        if query_filter.query_field is None:
            raise ValueError("Cannot add a filter without a query field")
        self._filters[query_filter.query_field.query_value] = query_filter

    def get_filter(self, query_field: IQueryField | str) -> QueryFilter | None:
        token = query_field if isinstance(query_field, str) else query_field.query_value
        return self._filters.get(token)

    def remove_filter(self, query_field: IQueryField | str) -> QueryFilter | None:
        token = query_field if isinstance(query_field, str) else query_field.query_value
        return self._filters.pop(token, None)

    @property
    def filters(self) -> list[QueryFilter]:
        return list(self._filters.values())

    def __iter__(self) -> Iterator[QueryFilter]:
        return iter(list(self._filters.values()))

    def __len__(self) -> int:
        return len(self._filters)

    # ── Encoding ─────────────────────────────────────────────────

    def to_pairs(self) -> list[WirePair]:
        """Wire pairs of every encodable filter, in insertion order.

        Raises:
            InvalidFilterValueError: propagated from the first filter with a
                non-integer value where an integer is required.
        """
        pairs: list[WirePair] = []
        for query_filter in self._filters.values():
            query_filter.append_pairs(pairs)
        return pairs

    def to_query_string(self) -> str:
        return QueryStringBuilder().build(self.to_pairs())

    # ── Decoding ─────────────────────────────────────────────────

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[WirePair],
        schema: IQuerySchema,
        *,
        config: QueryCodecConfig | None = None,
    ) -> Query:
        """Rebuild a query from wire pairs.

        Pairs are grouped by their field token first, so an operator or values
        pair may appear anywhere relative to its ``fields[]`` pair. Groups
        whose field is unknown are dropped.
        """
        config = config or DEFAULT_CONFIG
        query = cls()
        for token, group in _group_pairs(pairs).items():
            query_filter = _assemble(group, schema, config)
            if query_filter is None:
                logger.debug("Dropping pairs for unresolved field %r", token)
                continue
            query.add_filter(query_filter)
        return query

    @classmethod
    def from_query_string(
        cls,
        query_string: str,
        schema: IQuerySchema,
        *,
        config: QueryCodecConfig | None = None,
    ) -> Query:
        pairs = QueryStringBuilder().parse(query_string)
        return cls.from_pairs(pairs, schema, config=config)

    @classmethod
    def from_url(
        cls,
        url: str,
        schema: IQuerySchema,
        *,
        config: QueryCodecConfig | None = None,
    ) -> Query:
        pairs = QueryStringBuilder().parse_url(url)
        return cls.from_pairs(pairs, schema, config=config)


def _group_pairs(pairs: Iterable[WirePair]) -> dict[str, _PairGroup]:
    groups: dict[str, _PairGroup] = {}
    for raw in pairs:
        pair = WirePair(*raw)
        token = field_token(pair)
        if token is None:
            logger.debug("Ignoring unrelated pair %r", pair.name)
            continue
        group = groups.setdefault(token, _PairGroup())
        if pair.name in (FIELDS_KEY, QueryField.PROJECT.query_value):
            group.declarations.append(pair)
        elif find_value(pair) is not None:
            group.values.append(pair)
        else:
            group.operators.append(pair)
    return groups


def _assemble(
    group: _PairGroup, schema: IQuerySchema, config: QueryCodecConfig
) -> QueryFilter | None:
    query_filter = None
    for declaration in group.declarations:
        query_filter = QueryFilter.from_pair(declaration, schema, config=config)
        if query_filter is not None:
            break
    if query_filter is None:
        return None

    if group.operators:
        query_filter.set_operator(find_operator(group.operators[0], schema))
    for pair in group.values:
        value = find_value(pair)
        if value is not None:
            query_filter.add_value(value)
    return query_filter
