"""Tests for the operator and field catalogs."""

from __future__ import annotations

import pytest

from tracker_core.domain.schema import CustomField, FieldFormat
from tracker_filtering.fields import (
    BOOLEAN_TYPE,
    DATE_TYPE,
    LIST_TYPE,
    NUMBER_TYPE,
    TEXT_TYPE,
    CustomQueryField,
    FieldKind,
    QueryField,
    definition_for_custom_field,
)
from tracker_filtering.operators import CompareOperator


class TestCompareOperator:
    def test_lookup_by_wire_token(self) -> None:
        assert CompareOperator.from_query_value("=") is CompareOperator.IS
        assert CompareOperator.from_query_value("!*") is CompareOperator.NONE
        assert CompareOperator.from_query_value(">t-") is CompareOperator.LESS_THAN_AGO

    def test_unknown_token_is_none(self) -> None:
        assert CompareOperator.from_query_value("??") is None
        assert CompareOperator.from_query_value(None) is None

    def test_wire_tokens_are_unique(self) -> None:
        tokens = [op.query_value for op in CompareOperator]
        assert len(tokens) == len(set(tokens))

    @pytest.mark.parametrize(
        "operator",
        [
            CompareOperator.OPEN,
            CompareOperator.CLOSED,
            CompareOperator.NONE,
            CompareOperator.ALL,
            CompareOperator.TODAY,
            CompareOperator.THIS_WEEK,
        ],
    )
    def test_valueless_operators(self, operator: CompareOperator) -> None:
        assert not operator.value_based

    def test_value_based_operators(self) -> None:
        assert CompareOperator.IS.value_based
        assert CompareOperator.CONTAINS.value_based
        assert CompareOperator.AGO.value_based


class TestQueryField:
    def test_lookup_by_wire_token(self) -> None:
        assert QueryField.from_query_value("status_id") is QueryField.STATUS
        assert QueryField.from_query_value("nope") is None

    def test_kinds(self) -> None:
        assert QueryField.PROJECT.definition.kind is FieldKind.PROJECT
        assert QueryField.DONE_RATIO.definition.kind is FieldKind.DONE_RATIO
        assert QueryField.CREATED_ON.definition.kind is FieldKind.DATE
        assert QueryField.DUE_DATE.definition.kind is FieldKind.DATE
        assert QueryField.SUBJECT.definition.kind is FieldKind.GENERIC

    def test_allowed_operators(self) -> None:
        status = QueryField.STATUS.definition
        assert status.contains_operator(CompareOperator.OPEN)
        assert not status.contains_operator(CompareOperator.CONTAINS)
        assert not status.contains_operator(None)
        assert not QueryField.CREATED_ON.definition.contains_operator(
            CompareOperator.IN_MORE_THAN
        )
        assert QueryField.START_DATE.definition.contains_operator(
            CompareOperator.IN_MORE_THAN
        )


class TestCustomFieldDefinitions:
    @pytest.mark.parametrize(
        ("field_format", "expected"),
        [
            (FieldFormat.STRING, TEXT_TYPE),
            (FieldFormat.TEXT, TEXT_TYPE),
            (FieldFormat.INT, NUMBER_TYPE),
            (FieldFormat.FLOAT, NUMBER_TYPE),
            (FieldFormat.LIST, LIST_TYPE),
            (FieldFormat.USER, LIST_TYPE),
            (FieldFormat.DATE, DATE_TYPE),
            (FieldFormat.BOOL, BOOLEAN_TYPE),
        ],
    )
    def test_definition_follows_format(self, field_format: FieldFormat, expected) -> None:
        custom_field = CustomField(id=1, name="x", field_format=field_format, is_filter=True)
        assert definition_for_custom_field(custom_field) is expected

    def test_not_filterable_has_no_definition(self) -> None:
        custom_field = CustomField(id=1, name="x", is_filter=False)
        assert definition_for_custom_field(custom_field) is None
        assert CustomQueryField.for_custom_field(custom_field) is None

    def test_custom_query_field_token_and_identity(self) -> None:
        custom_field = CustomField(id=12, name="x", is_filter=True)
        query_field = CustomQueryField.for_custom_field(custom_field)

        assert query_field is not None
        assert query_field.query_value == "cf_12"
        assert query_field.id == 12
        renamed = CustomQueryField.for_custom_field(
            CustomField(id=12, name="renamed", is_filter=True)
        )
        assert query_field == renamed
        assert hash(query_field) == hash(renamed)
