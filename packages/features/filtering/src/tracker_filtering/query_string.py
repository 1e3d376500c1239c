"""QueryStringBuilder — wire pairs <-> URL query string."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import parse_qsl, urlencode, urlsplit

from .syntax import WirePair

if TYPE_CHECKING:
    from collections.abc import Iterable


class QueryStringBuilder:
    """Render wire pairs as a query string and read them back.

    Pair order is preserved both ways and blank values survive, since an
    empty ``values[<token>][]`` marks a filter without values.
    """

    def build(self, pairs: Iterable[WirePair]) -> str:
        """Produce query string (without the leading ``?``)."""
        return urlencode([(pair.name, pair.value) for pair in pairs])

    def parse(self, query_string: str) -> list[WirePair]:
        """Split *query_string* (leading ``?`` allowed) into wire pairs."""
        return [
            WirePair(name, value)
            for name, value in parse_qsl(
                query_string.lstrip("?"), keep_blank_values=True
            )
        ]

    def parse_url(self, url: str) -> list[WirePair]:
        """Wire pairs of the query part of a full URL."""
        return self.parse(urlsplit(url).query)
