"""Schema lookup used when decoding filters from wire pairs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .fields import QueryField
from .operators import CompareOperator

if TYPE_CHECKING:
    from tracker_core.domain.schema import CustomField
    from tracker_core.ports.configuration import ICustomFieldLookup


@runtime_checkable
class IQuerySchema(Protocol):
    """Resolves the tokens found on the wire."""

    def custom_field_by_id(self, custom_field_id: int) -> CustomField | None: ...

    def builtin_field_by_token(self, token: str) -> QueryField | None: ...

    def operator_by_token(self, token: str) -> CompareOperator | None: ...


class QuerySchema:
    """Default ``IQuerySchema``: built-in catalogs plus a custom field lookup.

    Usage::

        schema = QuerySchema(InMemoryConfiguration.from_dict(data))
        query = Query.from_pairs(pairs, schema)
    """

    def __init__(self, custom_fields: ICustomFieldLookup) -> None:
        self._custom_fields = custom_fields

    def custom_field_by_id(self, custom_field_id: int) -> CustomField | None:
        return self._custom_fields.custom_field_by_id(custom_field_id)

    def builtin_field_by_token(self, token: str) -> QueryField | None:
        return QueryField.from_query_value(token)

    def operator_by_token(self, token: str) -> CompareOperator | None:
        return CompareOperator.from_query_value(token)
