"""
Shape normalizer for list-valued freight fields.

Stored values drifted across schema versions: absent, bare scalars, plain
lists, singly or doubly wrapped lists, JSON strings of any of those (JSON
strings nested inside JSON lists too). ``normalize`` reduces all of them to
one flat list whose items are scalars or plain records.

Field-specific legacy shapes are handled by adapters registered per field
name; ``normalize`` itself is the fallback for everything else.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

import structlog

from freight_board.normalize.synonyms import SYNONYMS, Role

_UNDECODABLE = object()

logger = structlog.get_logger(component="shape_normalizer")


def _looks_encoded(value: str) -> bool:
    return value.startswith("[") or value.startswith("{")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _decode(value: str) -> Any:
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return _UNDECODABLE


def _flatten(items: Any) -> list[Any]:
    """Depth-first flatten with an explicit stack; splices nested and encoded lists."""
    out: list[Any] = []
    stack: list[Iterator[Any]] = [iter(items)]
    while stack:
        try:
            item = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue

        if isinstance(item, (list, tuple)):
            stack.append(iter(item))
        elif isinstance(item, str) and _looks_encoded(item):
            decoded = _decode(item)
            if decoded is _UNDECODABLE:
                out.append(item)
            elif isinstance(decoded, list):
                stack.append(iter(decoded))
            else:
                out.append(decoded)
        else:
            out.append(item)
    return out


def normalize(value: Any = None) -> list[Any]:
    """
    Flatten a stored list field into a list of entries.

    Never raises. Decode failures keep the original string as a leaf.

    Args:
        value: Raw stored value of any shape

    Returns:
        Flat list of scalars and records
    """
    if value is None:
        return []
    if isinstance(value, str):
        if not _looks_encoded(value):
            return [value]
        decoded = _decode(value)
        if decoded is _UNDECODABLE:
            return [value]
        # JSON starting with "[" or "{" decodes to a list or an object
        return _flatten(decoded) if isinstance(decoded, list) else [decoded]
    if isinstance(value, (list, tuple)):
        return _flatten(value)
    return [value]


@dataclass(frozen=True)
class FieldAdapter:
    """
    Maps one known legacy shape of a field to the canonical entry form.

    ``matches`` and ``adapt`` receive the already-flattened entries.
    """

    field: str
    name: str
    version: int
    matches: Callable[[list[Any]], bool]
    adapt: Callable[[list[Any]], list[Any]]


class AdapterRegistry:
    """Field-name keyed registry of shape adapters."""

    def __init__(self) -> None:
        self._adapters: dict[str, list[FieldAdapter]] = {}

    def register(self, adapter: FieldAdapter) -> FieldAdapter:
        """
        Register an adapter for its field.

        Adapters for the same field run in registration order; registering
        the same (name, version) twice replaces the earlier one.
        """
        adapters = self._adapters.setdefault(adapter.field, [])
        adapters[:] = [
            a for a in adapters if (a.name, a.version) != (adapter.name, adapter.version)
        ]
        adapters.append(adapter)
        return adapter

    def adapters_for(self, field: str) -> list[FieldAdapter]:
        return list(self._adapters.get(field, ()))

    def normalize_field(self, field: str, value: Any) -> list[Any]:
        """
        Normalize a stored field, then apply the adapters that recognize it.

        An adapter that fails is skipped; the entries it was given are kept.

        Args:
            field: Persisted field name (e.g. "paradas")
            value: Raw stored value

        Returns:
            Flat list of scalars and records
        """
        entries = normalize(value)
        for adapter in self._adapters.get(field, ()):
            try:
                if adapter.matches(entries):
                    entries = list(adapter.adapt(entries))
            except Exception as e:
                logger.debug(
                    "field_adapter_failed",
                    field=field,
                    adapter=adapter.name,
                    version=adapter.version,
                    error=str(e),
                )
        return entries


def _order_key(entry: Mapping[str, Any]) -> Optional[float]:
    for key in SYNONYMS[Role.ORDER]:
        value = entry.get(key)
        if isinstance(value, bool):
            continue
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                continue
    return None


def _stops_have_order(entries: list[Any]) -> bool:
    records = [e for e in entries if isinstance(e, Mapping)]
    return bool(records) and len(records) == len(entries) and all(
        _order_key(e) is not None for e in records
    )


def _sort_stops(entries: list[Any]) -> list[Any]:
    return sorted(entries, key=_order_key)


def _is_option_record(entry: Any) -> bool:
    return (
        isinstance(entry, Mapping)
        and "type" not in entry
        and isinstance(entry.get("label"), str)
        and "value" in entry
    )


def _has_option_records(entries: list[Any]) -> bool:
    return any(_is_option_record(e) for e in entries)


def _options_to_selections(entries: list[Any]) -> list[Any]:
    adapted = []
    for entry in entries:
        if _is_option_record(entry):
            entry = {"type": entry["label"], **{k: v for k, v in entry.items() if k != "label"}}
        adapted.append(entry)
    return adapted


default_registry = AdapterRegistry()

default_registry.register(
    FieldAdapter(
        field="paradas",
        name="stops-ordered",
        version=1,
        matches=_stops_have_order,
        adapt=_sort_stops,
    )
)

for _field in ("tipos_veiculos", "tipos_carrocerias"):
    default_registry.register(
        FieldAdapter(
            field=_field,
            name="selection-options",
            version=1,
            matches=_has_option_records,
            adapt=_options_to_selections,
        )
    )


def normalize_field(field: str, value: Any) -> list[Any]:
    """Normalize ``value`` stored under ``field`` using the default registry."""
    return default_registry.normalize_field(field, value)
