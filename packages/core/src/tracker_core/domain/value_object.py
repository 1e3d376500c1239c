"""Immutable Value Object base class."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for schema value objects.

    Value objects are immutable and defined by their attributes.
    Equality is structural (all fields compared).
    """

    model_config = ConfigDict(frozen=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, repr(sorted(self.model_dump().items()))))
