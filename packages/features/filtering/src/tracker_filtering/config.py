"""QueryCodecConfig — knobs for encoding and decoding query filters."""

from __future__ import annotations

from dataclasses import dataclass

from .fields import CUSTOM_FIELD_PREFIX


@dataclass(frozen=True, slots=True)
class QueryCodecConfig:
    """Configuration for the wire codec.

    Attributes:
        custom_field_prefix: Prefix of custom field tokens in ``fields[]``
            values (``cf_12``).
        compact_project_filter: Encode a single-valued ``project_id`` equality
            filter as the shorthand pair ``project_id=<id>``. When False the
            general three-pair form is always used. Decoding always accepts
            the shorthand.
    """

    custom_field_prefix: str = CUSTOM_FIELD_PREFIX
    compact_project_filter: bool = True


DEFAULT_CONFIG = QueryCodecConfig()
