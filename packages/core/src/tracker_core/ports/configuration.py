"""Schema lookup protocols consumed by the query codec and the validator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.schema import CustomField, Project, Tracker


@runtime_checkable
class ICustomFieldLookup(Protocol):
    """Resolves custom field descriptors by id."""

    def custom_field_by_id(self, custom_field_id: int) -> CustomField | None:
        """Return the custom field, or ``None`` when it is unknown."""
        ...


@runtime_checkable
class IProjectLookup(Protocol):
    """Resolves projects (and their per-tracker custom fields) by id."""

    def project_by_id(self, project_id: int) -> Project | None:
        """Return the project, or ``None`` when it is unknown."""
        ...


@runtime_checkable
class IConfiguration(ICustomFieldLookup, IProjectLookup, Protocol):
    """Read-only handle on a tracker installation's schema.

    Implementations must not change while a codec or validation call is
    running; callers pass the handle explicitly instead of relying on a
    process-wide configuration.
    """

    def tracker_by_id(self, tracker_id: int) -> Tracker | None: ...
