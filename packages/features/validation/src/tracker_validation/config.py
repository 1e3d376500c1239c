"""TaskValidationConfig — knobs for the task data validator."""

from __future__ import annotations

from dataclasses import dataclass

from .attributes import CUSTOM_FIELD_KEY_PREFIX


@dataclass(frozen=True, slots=True)
class TaskValidationConfig:
    """Configuration for :class:`~tracker_validation.validator.TaskDataValidator`.

    Attributes:
        custom_field_key_prefix: Attribute id prefix of custom field values;
            the custom field id follows it.
        validate_custom_fields: Whether whole-task validation also runs the
            custom field rules. Single-attribute validation always does.
    """

    custom_field_key_prefix: str = CUSTOM_FIELD_KEY_PREFIX
    validate_custom_fields: bool = True


DEFAULT_CONFIG = TaskValidationConfig()
