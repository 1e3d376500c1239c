"""Filtering package exceptions."""

from __future__ import annotations

from typing import Any

from tracker_core.primitives.exceptions import TrackerError


class FilterError(TrackerError):
    """Base class for query filter errors."""


class InvalidFilterValueError(FilterError):
    """Raised when a filter value must be an integer but is not.

    Unlike out-of-range values, which only drop the filter, non-numeric text
    aborts encoding of the whole query.
    """

    def __init__(self, value: str, field_token: str) -> None:
        self.value = value
        self.field_token = field_token
        super().__init__(
            f"Invalid integer value {value!r} for query field {field_token!r}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_FILTER_VALUE",
            "message": str(self),
            "value": self.value,
            "field": self.field_token,
        }
