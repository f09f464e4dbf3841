"""Parsing of URL query strings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

Value = Union[str, "list[str]"]


@dataclass
class QueryString:
    """Query parameters; a repeated key holds a list of its values in order."""

    data: dict[str, Value] = field(default_factory=dict)

    def get(self, key: str) -> Value | None:
        """Return the value (or list of values) for ``key``, or None."""
        return self.data.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)


def parse_query_string(text: str) -> QueryString:
    """Parse ``a=1&b=2&c`` style text; a key without ``=`` gets an empty value."""
    data: dict[str, Value] = {}
    for part in text.split("&"):
        key, _, value = part.partition("=")
        existing = data.get(key)
        if existing is None:
            data[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            data[key] = [existing, value]
    return QueryString(data)