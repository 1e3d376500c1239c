"""ErrorMessageCollector — per-attribute validation messages."""

from __future__ import annotations

from dataclasses import dataclass, field


def default_messages_factory() -> dict[str, str]:
    """Factory for mutable default dict in ErrorMessageCollector fields."""
    return {}


@dataclass
class ErrorMessageCollector:
    """Collects validation messages keyed by attribute id.

    The first message ever added is kept apart so an editor can surface it
    without caring about dict ordering. A later message for the same
    attribute replaces the earlier one; it never replaces the first message.

    Usage::

        collector = ErrorMessageCollector()
        collector.add("task.common.summary", "Subject is required")
        if collector.has_errors():
            show(collector.get_first_error_message())
    """

    messages: dict[str, str] = field(default_factory=default_messages_factory)
    first_message: str | None = None

    def add(self, attribute_id: str, message: str) -> None:
        """Record *message* for *attribute_id*."""
        if self.first_message is None:
            self.first_message = message
        self.messages[attribute_id] = message

    def has_errors(self) -> bool:
        return bool(self.messages)

    @property
    def is_valid(self) -> bool:
        return not self.messages

    def get_first_error_message(self) -> str | None:
        return self.first_message

    def get_message(self, attribute_id: str) -> str | None:
        return self.messages.get(attribute_id)

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ErrorMessageCollector) -> ErrorMessageCollector:
        """Return a collector holding this one's messages, then *other*'s."""
        merged = ErrorMessageCollector(
            messages=dict(self.messages), first_message=self.first_message
        )
        for attribute_id, message in other.messages.items():
            merged.messages[attribute_id] = message
        if merged.first_message is None:
            merged.first_message = other.first_message
        return merged
