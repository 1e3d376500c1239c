"""InMemoryConfiguration — dict-backed schema handle."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from tracker_core.domain.schema import CustomField, Project, Tracker
from tracker_core.primitives.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger("tracker.core")


class InMemoryConfiguration:
    """In-memory implementation of ``IConfiguration``.

    Stores custom fields, projects and trackers in plain dicts keyed by id.
    """

    def __init__(
        self,
        *,
        custom_fields: Iterable[CustomField] = (),
        projects: Iterable[Project] = (),
        trackers: Iterable[Tracker] = (),
    ) -> None:
        self._custom_fields: dict[int, CustomField] = {
            cf.id: cf for cf in custom_fields
        }
        self._projects: dict[int, Project] = {p.id: p for p in projects}
        self._trackers: dict[int, Tracker] = {t.id: t for t in trackers}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InMemoryConfiguration:
        """Build from plain data (e.g. a decoded JSON document).

        Expected keys: ``custom_fields``, ``projects``, ``trackers``; each a
        list of objects. Missing keys mean "none".

        Raises:
            ConfigurationError: an entry does not describe a valid schema
                object. Errors are keyed by ``<section>.<index>.<field>``.
        """
        errors: dict[str, list[str]] = {}
        sections: dict[str, list[Any]] = {}
        for key, model in (
            ("custom_fields", CustomField),
            ("projects", Project),
            ("trackers", Tracker),
        ):
            parsed: list[Any] = []
            for index, raw in enumerate(data.get(key) or ()):
                try:
                    parsed.append(model.model_validate(raw))
                except PydanticValidationError as exc:
                    for error in exc.errors():
                        loc = ".".join(
                            str(p) for p in (key, index, *error.get("loc", ()))
                        )
                        errors.setdefault(loc, []).append(
                            error.get("msg", "validation error")
                        )
            sections[key] = parsed
        if errors:
            raise ConfigurationError(errors)

        config = cls(
            custom_fields=sections["custom_fields"],
            projects=sections["projects"],
            trackers=sections["trackers"],
        )
        logger.debug(
            "Loaded configuration: %d custom fields, %d projects, %d trackers",
            len(config._custom_fields),
            len(config._projects),
            len(config._trackers),
        )
        return config

    def custom_field_by_id(self, custom_field_id: int) -> CustomField | None:
        return self._custom_fields.get(custom_field_id)

    def project_by_id(self, project_id: int) -> Project | None:
        return self._projects.get(project_id)

    def tracker_by_id(self, tracker_id: int) -> Tracker | None:
        return self._trackers.get(tracker_id)

    @property
    def custom_fields(self) -> list[CustomField]:
        return list(self._custom_fields.values())
