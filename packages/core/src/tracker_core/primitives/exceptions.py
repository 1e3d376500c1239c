"""Exception root for the tracker toolkit."""

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Root exception for the entire tracker toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ConfigurationError(TrackerError):
    """Raised when tracker schema data (custom fields, projects) is invalid.

    Carries structured errors: ``{location: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONFIGURATION_ERROR",
            "message": str(self),
            "errors": self.errors,
        }
