"""QueryFilter — one (field, operator, values) constraint of an issue query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tracker_core.primitives.parsing import parse_int

from .config import DEFAULT_CONFIG, QueryCodecConfig
from .exceptions import InvalidFilterValueError
from .fields import CustomQueryField, FieldKind, QueryField
from .operators import CompareOperator
from .syntax import FIELDS_KEY, WirePair, operator_key, values_key

if TYPE_CHECKING:
    from tracker_core.domain.schema import CustomField

    from .fields import FieldDefinition, IQueryField
    from .schema import IQuerySchema

logger = logging.getLogger("tracker.filtering")

_DONE_RATIO_MAX = 100


class QueryFilter:
    """A single query constraint.

    The operator is always unset or one of the definition's operators, and
    values are only collected while a value-based operator is set. Filters
    that cannot be expressed on the wire (no operator, missing values,
    out-of-range numbers) are left out by :meth:`append_pairs` instead of
    failing.
    """

    def __init__(
        self,
        query_field: IQueryField | None,
        definition: FieldDefinition | None = None,
        *,
        config: QueryCodecConfig | None = None,
    ) -> None:
        if definition is None and isinstance(query_field, QueryField):
            definition = query_field.definition
        self._query_field = query_field
        self._definition = definition
        self._config = config or DEFAULT_CONFIG
        self._operator: CompareOperator | None = None
        if definition is not None and definition.contains_operator(CompareOperator.IS):
            self._operator = CompareOperator.IS
        self._values: list[str] = []

    @classmethod
    def for_custom_field(
        cls, custom_field: CustomField, *, config: QueryCodecConfig | None = None
    ) -> QueryFilter | None:
        """Filter bound to *custom_field*, ``None`` if it is not filterable."""
        config = config or DEFAULT_CONFIG
        query_field = CustomQueryField.for_custom_field(
            custom_field, config.custom_field_prefix
        )
        if query_field is None:
            return None
        return cls(query_field, query_field.definition, config=config)

    # ── Accessors ────────────────────────────────────────────────

    @property
    def query_field(self) -> IQueryField | None:
        return self._query_field

    @property
    def definition(self) -> FieldDefinition | None:
        return self._definition

    @property
    def operator(self) -> CompareOperator | None:
        return self._operator

    @property
    def values(self) -> tuple[str, ...]:
        return tuple(self._values)

    def __repr__(self) -> str:
        token = self._query_field.query_value if self._query_field else None
        op = self._operator.query_value if self._operator else None
        return f"QueryFilter(field={token!r}, operator={op!r}, values={self._values!r})"

    # ── Mutation ─────────────────────────────────────────────────

    def set_operator(self, operator: CompareOperator | None) -> None:
        """Set *operator*, or unset it when the field does not allow it.

        Values are cleared in every case.
        """
        if self._definition is not None and self._definition.contains_operator(
            operator
        ):
            self._operator = operator
        else:
            self._operator = None
        self._values.clear()

    def add_value(self, value: str) -> None:
        """Append *value*; ignored unless a value-based operator is set."""
        if self._operator is not None and self._operator.value_based:
            self._values.append(value)

    # ── Encoding ─────────────────────────────────────────────────

    def append_pairs(self, pairs: list[WirePair]) -> None:
        """Append this filter's wire pairs to *pairs*.

        Raises:
            InvalidFilterValueError: a date, boolean or done-ratio value is
                not an integer.
        """
        query_field, definition, operator = (
            self._query_field,
            self._definition,
            self._operator,
        )
        if (
            query_field is None
            or definition is None
            or operator is None
            or not definition.contains_operator(operator)
        ):
            logger.debug("Omitting incomplete filter %r", self)
            return

        token = query_field.query_value
        if operator.value_based and not self._has_valid_values(definition.kind, token):
            logger.debug("Omitting filter with missing or out-of-range values %r", self)
            return

        if (
            self._config.compact_project_filter
            and definition.kind is FieldKind.PROJECT
            and len(self._values) == 1
            and operator is CompareOperator.IS
        ):
            pairs.append(WirePair(token, self._values[0]))
            return

        pairs.append(WirePair(FIELDS_KEY, token))
        pairs.append(WirePair(operator_key(token), operator.query_value))
        if self._values:
            pairs.extend(WirePair(values_key(token), value) for value in self._values)
        else:
            pairs.append(WirePair(values_key(token), ""))

    def to_pairs(self) -> list[WirePair]:
        pairs: list[WirePair] = []
        self.append_pairs(pairs)
        return pairs

    def _has_valid_values(self, kind: FieldKind, token: str) -> bool:
        if not self._values:
            return False
        first = self._values[0]
        try:
            if kind is FieldKind.DATE:
                # A day count: exactly one non-negative integer.
                return len(self._values) == 1 and parse_int(first) >= 0
            if kind is FieldKind.BOOLEAN:
                return 0 <= parse_int(first) <= 1
            if kind is FieldKind.DONE_RATIO:
                return 0 <= parse_int(first) <= _DONE_RATIO_MAX
        except ValueError as exc:
            raise InvalidFilterValueError(first, token) from exc
        return True

    # ── Decoding ─────────────────────────────────────────────────

    @classmethod
    def from_pair(
        cls,
        pair: WirePair,
        schema: IQuerySchema,
        *,
        config: QueryCodecConfig | None = None,
    ) -> QueryFilter | None:
        """Start a filter from its field-declaring pair.

        Returns ``None`` for pairs that do not declare a field and for fields
        the schema does not know. Operator and values pairs are applied by the
        caller (see :meth:`tracker_filtering.query.Query.from_pairs`).
        """
        config = config or DEFAULT_CONFIG
        if pair.name == FIELDS_KEY:
            if pair.value.startswith(config.custom_field_prefix):
                return cls._from_custom_field_token(pair.value, schema, config)
            query_field = schema.builtin_field_by_token(pair.value)
            if query_field is None:
                logger.debug("Unknown query field %r", pair.value)
                return None
            return cls(query_field, config=config)

        if pair.name == QueryField.PROJECT.query_value:
            query_filter = cls(QueryField.PROJECT, config=config)
            query_filter.set_operator(CompareOperator.IS)
            query_filter.add_value(pair.value)
            return query_filter

        return None

    @classmethod
    def _from_custom_field_token(
        cls, token: str, schema: IQuerySchema, config: QueryCodecConfig
    ) -> QueryFilter | None:
        try:
            custom_field_id = parse_int(token[len(config.custom_field_prefix) :])
        except ValueError:
            logger.debug("Malformed custom field token %r", token)
            return None
        custom_field = schema.custom_field_by_id(custom_field_id)
        if custom_field is None:
            logger.debug("Unknown custom field %d", custom_field_id)
            return None
        query_filter = cls.for_custom_field(custom_field, config=config)
        if query_filter is None:
            logger.debug("Custom field %d is not filterable", custom_field_id)
        return query_filter
