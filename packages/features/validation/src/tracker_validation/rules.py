"""Rule chain applied to the value of one custom field.

Rules run in a fixed order and the chain stops at the first message, so an
empty required field reports "is required" and nothing else.
"""

from __future__ import annotations

import functools
import logging
import re
from typing import TYPE_CHECKING

from tracker_core.domain.schema import FieldFormat
from tracker_core.primitives.parsing import is_float, parse_int

if TYPE_CHECKING:
    from collections.abc import Callable

    from tracker_core.domain.schema import CustomField

logger = logging.getLogger("tracker.validation")


def check_required(value: str, custom_field: CustomField) -> str | None:
    if custom_field.is_required and not value.strip():
        return f"{custom_field.label} is required"
    return None


def check_type(value: str, custom_field: CustomField) -> str | None:
    if not _matches_format(value, custom_field.field_format):
        return f"{custom_field.label} must be a {custom_field.field_format.label}"
    return None


def check_max_length(value: str, custom_field: CustomField) -> str | None:
    maximum = custom_field.max_length
    if maximum > 0 and len(value) > maximum:
        return f"{custom_field.label}: maximum length of {maximum} exceeded"
    return None


def check_min_length(value: str, custom_field: CustomField) -> str | None:
    minimum = custom_field.min_length
    if minimum > 0 and len(value) < minimum:
        return f"{custom_field.label}: minimum length of {minimum} below"
    return None


def check_pattern(value: str, custom_field: CustomField) -> str | None:
    if not custom_field.regexp:
        return None
    pattern = _compile(custom_field.regexp)
    if pattern is None:
        logger.warning(
            "Custom field %d has an invalid regexp %r; pattern check skipped",
            custom_field.id,
            custom_field.regexp,
        )
        return None
    if pattern.fullmatch(value) is None:
        return f"{custom_field.label}: doesn't match {custom_field.regexp}"
    return None


# Only consulted for non-empty values.
VALUE_RULES: tuple[Callable[[str, CustomField], str | None], ...] = (
    check_type,
    check_max_length,
    check_min_length,
    check_pattern,
)


def first_violation(value: str, custom_field: CustomField) -> str | None:
    """Message of the first rule *value* breaks, ``None`` if it passes all."""
    message = check_required(value, custom_field)
    if message is not None or not value:
        return message
    for rule in VALUE_RULES:
        message = rule(value, custom_field)
        if message is not None:
            return message
    return None


def _matches_format(value: str, field_format: FieldFormat) -> bool:
    if field_format is FieldFormat.FLOAT:
        return is_float(value)
    if field_format is FieldFormat.INT:
        try:
            parse_int(value)
        except ValueError:
            return False
    return True


@functools.lru_cache(maxsize=256)
def _compile(regexp: str) -> re.Pattern[str] | None:
    try:
        return re.compile(regexp)
    except re.error:
        return None
