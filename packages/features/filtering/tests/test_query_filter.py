"""Tests for QueryFilter mutation and encoding."""

from __future__ import annotations

import pytest

from tracker_core.domain.schema import CustomField, FieldFormat
from tracker_filtering.config import QueryCodecConfig
from tracker_filtering.exceptions import InvalidFilterValueError
from tracker_filtering.fields import QueryField
from tracker_filtering.filter import QueryFilter
from tracker_filtering.operators import CompareOperator
from tracker_filtering.syntax import WirePair


def _filter(field: QueryField, operator: CompareOperator, *values: str) -> QueryFilter:
    query_filter = QueryFilter(field)
    query_filter.set_operator(operator)
    for value in values:
        query_filter.add_value(value)
    return query_filter


def _custom(field_format: FieldFormat, operator: CompareOperator, *values: str) -> QueryFilter:
    custom_field = CustomField(id=5, name="cf", field_format=field_format, is_filter=True)
    query_filter = QueryFilter.for_custom_field(custom_field)
    assert query_filter is not None
    query_filter.set_operator(operator)
    for value in values:
        query_filter.add_value(value)
    return query_filter


class TestMutation:
    def test_default_operator_is_equality_when_allowed(self) -> None:
        assert QueryFilter(QueryField.STATUS).operator is CompareOperator.IS
        assert QueryFilter(QueryField.CREATED_ON).operator is None

    @pytest.mark.parametrize("field", list(QueryField))
    def test_disallowed_operator_unsets_and_clears(self, field: QueryField) -> None:
        allowed = field.definition.operators
        disallowed = [op for op in CompareOperator if op not in allowed]
        query_filter = QueryFilter(field)
        for operator in disallowed:
            query_filter.set_operator(next(iter(allowed)))
            query_filter.add_value("1")
            query_filter.set_operator(operator)
            assert query_filter.operator is None
            assert query_filter.values == ()

    def test_none_operator_unsets(self) -> None:
        query_filter = _filter(QueryField.STATUS, CompareOperator.IS, "1")
        query_filter.set_operator(None)
        assert query_filter.operator is None
        assert query_filter.values == ()

    def test_same_operator_still_clears_values(self) -> None:
        query_filter = _filter(QueryField.STATUS, CompareOperator.IS, "1", "2")
        query_filter.set_operator(CompareOperator.IS)
        assert query_filter.operator is CompareOperator.IS
        assert query_filter.values == ()

    def test_add_value_ignored_without_value_based_operator(self) -> None:
        query_filter = _filter(QueryField.STATUS, CompareOperator.OPEN, "1")
        assert query_filter.values == ()

        query_filter.set_operator(None)
        query_filter.add_value("1")
        assert query_filter.values == ()

    def test_values_keep_order(self) -> None:
        query_filter = _filter(QueryField.TRACKER, CompareOperator.IS, "3", "1", "2")
        assert query_filter.values == ("3", "1", "2")


class TestEncodeGates:
    def test_general_form(self) -> None:
        query_filter = _filter(QueryField.STATUS, CompareOperator.IS, "1", "2")
        assert query_filter.to_pairs() == [
            WirePair("fields[]", "status_id"),
            WirePair("operators[status_id]", "="),
            WirePair("values[status_id][]", "1"),
            WirePair("values[status_id][]", "2"),
        ]

    def test_valueless_operator_emits_single_empty_value(self) -> None:
        query_filter = _filter(QueryField.ASSIGNED_TO, CompareOperator.NONE)
        assert query_filter.to_pairs() == [
            WirePair("fields[]", "assigned_to_id"),
            WirePair("operators[assigned_to_id]", "!*"),
            WirePair("values[assigned_to_id][]", ""),
        ]

    def test_unset_operator_is_omitted(self) -> None:
        query_filter = _filter(QueryField.STATUS, CompareOperator.CONTAINS)
        assert query_filter.to_pairs() == []

    def test_value_based_without_values_is_omitted(self) -> None:
        assert _filter(QueryField.SUBJECT, CompareOperator.CONTAINS).to_pairs() == []

    def test_filter_without_field_is_omitted(self) -> None:
        assert QueryFilter(None).to_pairs() == []

    def test_append_pairs_extends_existing_list(self) -> None:
        pairs = [WirePair("set_filter", "1")]
        _filter(QueryField.SUBJECT, CompareOperator.CONTAINS, "crash").append_pairs(pairs)
        assert pairs[0] == WirePair("set_filter", "1")
        assert len(pairs) == 4


class TestDateKind:
    def test_single_non_negative_value_encodes(self) -> None:
        query_filter = _filter(QueryField.CREATED_ON, CompareOperator.LESS_THAN_AGO, "7")
        assert query_filter.to_pairs() == [
            WirePair("fields[]", "created_on"),
            WirePair("operators[created_on]", ">t-"),
            WirePair("values[created_on][]", "7"),
        ]

    def test_zero_encodes(self) -> None:
        assert _filter(QueryField.DUE_DATE, CompareOperator.IN, "0").to_pairs()

    def test_two_values_never_encode(self) -> None:
        query_filter = _filter(QueryField.DUE_DATE, CompareOperator.IN, "1", "2")
        assert query_filter.to_pairs() == []

    def test_two_values_skip_integer_check(self) -> None:
        query_filter = _filter(QueryField.DUE_DATE, CompareOperator.IN, "x", "y")
        assert query_filter.to_pairs() == []

    def test_negative_value_never_encodes(self) -> None:
        assert _filter(QueryField.DUE_DATE, CompareOperator.IN, "-1").to_pairs() == []

    def test_valueless_date_operator_encodes(self) -> None:
        pairs = _filter(QueryField.UPDATED_ON, CompareOperator.TODAY).to_pairs()
        assert pairs[1] == WirePair("operators[updated_on]", "t")

    def test_non_numeric_value_is_hard_error(self) -> None:
        query_filter = _filter(QueryField.START_DATE, CompareOperator.AGO, "soon")
        with pytest.raises(InvalidFilterValueError) as exc_info:
            query_filter.to_pairs()
        assert exc_info.value.value == "soon"
        assert exc_info.value.field_token == "start_date"
        assert exc_info.value.to_dict()["field"] == "start_date"

    def test_custom_date_field_uses_date_rules(self) -> None:
        assert _custom(FieldFormat.DATE, CompareOperator.AGO, "-3").to_pairs() == []
        assert _custom(FieldFormat.DATE, CompareOperator.AGO, "3").to_pairs()


class TestBooleanKind:
    @pytest.mark.parametrize("value", ["0", "1"])
    def test_zero_or_one_encodes(self, value: str) -> None:
        pairs = _custom(FieldFormat.BOOL, CompareOperator.IS, value).to_pairs()
        assert pairs == [
            WirePair("fields[]", "cf_5"),
            WirePair("operators[cf_5]", "="),
            WirePair("values[cf_5][]", value),
        ]

    @pytest.mark.parametrize("value", ["2", "-1"])
    def test_out_of_range_is_omitted(self, value: str) -> None:
        assert _custom(FieldFormat.BOOL, CompareOperator.IS, value).to_pairs() == []

    def test_non_numeric_value_is_hard_error(self) -> None:
        with pytest.raises(InvalidFilterValueError, match="cf_5"):
            _custom(FieldFormat.BOOL, CompareOperator.IS, "yes").to_pairs()


class TestDoneRatioKind:
    @pytest.mark.parametrize("value", ["0", "50", "100"])
    def test_in_range_encodes(self, value: str) -> None:
        assert _filter(QueryField.DONE_RATIO, CompareOperator.GREATER_EQUAL, value).to_pairs()

    @pytest.mark.parametrize("value", ["101", "-1"])
    def test_out_of_range_is_omitted(self, value: str) -> None:
        query_filter = _filter(QueryField.DONE_RATIO, CompareOperator.GREATER_EQUAL, value)
        assert query_filter.to_pairs() == []

    def test_non_numeric_value_is_hard_error(self) -> None:
        query_filter = _filter(QueryField.DONE_RATIO, CompareOperator.IS, "half")
        with pytest.raises(InvalidFilterValueError):
            query_filter.to_pairs()


class TestProjectKind:
    def test_single_equality_uses_compact_pair(self) -> None:
        query_filter = _filter(QueryField.PROJECT, CompareOperator.IS, "42")
        assert query_filter.to_pairs() == [WirePair("project_id", "42")]

    def test_two_values_use_general_form(self) -> None:
        query_filter = _filter(QueryField.PROJECT, CompareOperator.IS, "42", "43")
        assert query_filter.to_pairs() == [
            WirePair("fields[]", "project_id"),
            WirePair("operators[project_id]", "="),
            WirePair("values[project_id][]", "42"),
            WirePair("values[project_id][]", "43"),
        ]

    def test_other_operator_uses_general_form(self) -> None:
        query_filter = _filter(QueryField.PROJECT, CompareOperator.IS_NOT, "42")
        assert query_filter.to_pairs()[0] == WirePair("fields[]", "project_id")

    def test_compact_form_can_be_disabled(self) -> None:
        config = QueryCodecConfig(compact_project_filter=False)
        query_filter = QueryFilter(QueryField.PROJECT, config=config)
        query_filter.add_value("42")
        assert len(query_filter.to_pairs()) == 3


class TestGenericKind:
    def test_custom_number_field_is_not_range_checked(self) -> None:
        pairs = _custom(FieldFormat.INT, CompareOperator.GREATER_EQUAL, "abc").to_pairs()
        assert pairs[-1] == WirePair("values[cf_5][]", "abc")
