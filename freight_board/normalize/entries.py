"""
Tagged union for normalized entries.

A normalized list field holds primitive scalars and plain keyed records.
``classify`` tags a raw entry once so consumers branch on the tag instead of
re-probing types.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Scalar:
    """A primitive leaf (string, number, boolean)."""

    value: Any

    @property
    def text(self) -> str:
        if isinstance(self.value, str):
            return self.value
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        return str(self.value)


@dataclass(frozen=True)
class RecordEntry:
    """A keyed record leaf."""

    fields: Mapping[str, Any]

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def has(self, key: str) -> bool:
        return key in self.fields


Entry = Union[Scalar, RecordEntry]


def classify(raw: Any) -> Entry:
    """Tag a raw normalized entry as Scalar or RecordEntry."""
    if isinstance(raw, (Scalar, RecordEntry)):
        return raw
    if isinstance(raw, Mapping):
        return RecordEntry(raw)
    return Scalar(raw)
