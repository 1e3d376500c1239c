"""TaskDataValidator — checks task attribute values before they are submitted."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from tracker_core.primitives.parsing import is_float, parse_integer_id
from tracker_core.validation.collector import ErrorMessageCollector

from .attributes import IssueAttribute, TaskData
from .config import DEFAULT_CONFIG, TaskValidationConfig
from .rules import first_violation

if TYPE_CHECKING:
    from tracker_core.domain.schema import CustomField
    from tracker_core.ports.configuration import IConfiguration

logger = logging.getLogger("tracker.validation")

_TASK_ID_PATTERN = re.compile(r"\d*")


class TaskDataValidator:
    """Validates the attributes of one issue against the tracker schema.

    Findings never raise; each one becomes a message in the returned
    :class:`~tracker_core.validation.collector.ErrorMessageCollector`, keyed by
    attribute id.

    Usage::

        validator = TaskDataValidator(configuration)
        result = validator.validate_task_data(task)
        if result.has_errors():
            editor.show(result.get_first_error_message())
    """

    def __init__(
        self,
        configuration: IConfiguration,
        config: TaskValidationConfig | None = None,
    ) -> None:
        self._configuration = configuration
        self._config = config or DEFAULT_CONFIG

    # ── Entry points ─────────────────────────────────────────────

    def validate_task_data(self, task: TaskData) -> ErrorMessageCollector:
        """Run every check; all failing attributes are reported."""
        collector = ErrorMessageCollector()
        self.validate_required_attributes(task, collector)
        self.validate_estimated_hours(task, collector)
        if self._config.validate_custom_fields:
            self.validate_custom_attributes(task, collector)
        return collector

    def validate_task_attribute(
        self, task: TaskData, attribute_id: str
    ) -> ErrorMessageCollector:
        """Run the checks that belong to *attribute_id* only."""
        collector = ErrorMessageCollector()
        prefix = self._config.custom_field_key_prefix
        if attribute_id.startswith(prefix):
            custom_field_id = parse_integer_id(attribute_id[len(prefix) :])
            custom_field = (
                self._configuration.custom_field_by_id(custom_field_id)
                if custom_field_id is not None
                else None
            )
            if custom_field is not None:
                self.validate_custom_attribute(
                    attribute_id, task.get(attribute_id) or "", custom_field, collector
                )
        elif attribute_id == IssueAttribute.ESTIMATED.task_key:
            self.validate_estimated_hours(task, collector)
        elif attribute_id == IssueAttribute.PARENT.task_key:
            self.validate_parent_task(task, collector)
        return collector

    # ── Built-in attributes ──────────────────────────────────────

    def validate_required_attributes(
        self, task: TaskData, collector: ErrorMessageCollector
    ) -> None:
        for attribute in IssueAttribute:
            if not attribute.required:
                continue
            checked = attribute
            if attribute is IssueAttribute.STATUS and task.is_new:
                checked = IssueAttribute.STATUS_CHG
            value = task.get_attribute(checked)
            if value is None or not value.strip():
                collector.add(checked.task_key, f"{checked.label} is required")

    def validate_estimated_hours(
        self, task: TaskData, collector: ErrorMessageCollector
    ) -> None:
        attribute = IssueAttribute.ESTIMATED
        value = task.get_attribute(attribute)
        if value is not None and value.strip() and not is_float(value):
            collector.add(attribute.task_key, f"{attribute.label} must be a float")

    def validate_parent_task(
        self, task: TaskData, collector: ErrorMessageCollector
    ) -> None:
        attribute = IssueAttribute.PARENT
        value = task.get_attribute(attribute)
        if value is not None and _TASK_ID_PATTERN.fullmatch(value.strip()) is None:
            collector.add(
                attribute.task_key, f"{attribute.label} must be single Task ID"
            )

    # ── Custom fields ────────────────────────────────────────────

    def validate_custom_attributes(
        self, task: TaskData, collector: ErrorMessageCollector
    ) -> None:
        """Check every custom field the task's project enables for its tracker."""
        project_id = parse_integer_id(task.get_attribute(IssueAttribute.PROJECT))
        tracker_id = parse_integer_id(task.get_attribute(IssueAttribute.TRACKER))
        if project_id is None or tracker_id is None:
            logger.debug("Skipping custom fields: no project or tracker selected")
            return

        project = self._configuration.project_by_id(project_id)
        if project is None:
            logger.debug("Skipping custom fields: unknown project %d", project_id)
            return

        prefix = self._config.custom_field_key_prefix
        for custom_field_id in project.custom_field_ids_for_tracker(tracker_id):
            custom_field = self._configuration.custom_field_by_id(custom_field_id)
            attribute_id = f"{prefix}{custom_field_id}"
            value = task.get(attribute_id)
            if custom_field is not None and value is not None:
                self.validate_custom_attribute(
                    attribute_id, value, custom_field, collector
                )

    def validate_custom_attribute(
        self,
        attribute_id: str,
        value: str,
        custom_field: CustomField,
        collector: ErrorMessageCollector,
    ) -> None:
        message = first_violation(value, custom_field)
        if message is not None:
            collector.add(attribute_id, message)
