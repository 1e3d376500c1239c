"""Shared fixtures for filtering tests."""

from __future__ import annotations

import pytest

from tracker_core.adapters.memory import InMemoryConfiguration
from tracker_core.domain.schema import CustomField, FieldFormat
from tracker_filtering.schema import QuerySchema


@pytest.fixture
def configuration() -> InMemoryConfiguration:
    return InMemoryConfiguration(
        custom_fields=[
            CustomField(id=5, name="Reviewed", field_format=FieldFormat.BOOL, is_filter=True),
            CustomField(id=6, name="Released on", field_format=FieldFormat.DATE, is_filter=True),
            CustomField(id=7, name="Customer", field_format=FieldFormat.STRING, is_filter=True),
            CustomField(id=8, name="Internal note", field_format=FieldFormat.TEXT),
            CustomField(id=9, name="Effort", field_format=FieldFormat.INT, is_filter=True),
        ]
    )


@pytest.fixture
def schema(configuration: InMemoryConfiguration) -> QuerySchema:
    """Query schema over the test configuration."""
    return QuerySchema(configuration)
