"""
Display extractor - human-readable label and subtitle for a normalized entry.

Both functions are pure and never raise.
"""

import json
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from freight_board.normalize.entries import RecordEntry, Scalar, classify
from freight_board.normalize.synonyms import SUBTITLE_FIELDS, SUBTITLE_LABELS, Role, lookup

RANGES_LABEL = "faixas"


def _first_string(fields: Mapping[str, Any], names: Sequence[str]) -> Optional[str]:
    for name in names:
        value = fields.get(name)
        if isinstance(value, str) and value:
            return value
    return None


def _stringify(fields: Mapping[str, Any]) -> str:
    try:
        return json.dumps(fields, ensure_ascii=False, default=str)
    except (TypeError, ValueError, RecursionError):
        return repr(fields)


def display_text(entry: Any, field_priority: Sequence[str] = (), *, selection: bool = False) -> str:
    """
    Resolve the display label of an entry.

    Resolution order for records:
    1. ``selected is True`` plus a ``type`` string returns ``type`` (only when
       ``selection`` is set, for vehicle/body picker entries)
    2. first field of ``field_priority`` holding a non-empty string
    3. first non-empty string value in the record's own key order
    4. ``"{vehicleType} ({n} faixas)"`` for nested price tables
    5. the record serialized as JSON

    Args:
        entry: Raw normalized entry or an already classified one
        field_priority: Ordered field names to try first
        selection: Enable the selected-type override

    Returns:
        Label text; scalars are returned verbatim
    """
    tagged = classify(entry)
    if isinstance(tagged, Scalar):
        return tagged.text

    fields = tagged.fields
    if selection and fields.get("selected") is True:
        selected_type = fields.get("type")
        if isinstance(selected_type, str) and selected_type:
            return selected_type

    text = _first_string(fields, field_priority)
    if text is not None:
        return text

    text = _first_string(fields, list(fields.keys()))
    if text is not None:
        return text

    vehicle_type = lookup(fields, Role.VEHICLE_TYPE)
    ranges = fields.get("ranges")
    if vehicle_type is not None and isinstance(ranges, list):
        return f"{vehicle_type} ({len(ranges)} {RANGES_LABEL})"

    return _stringify(fields)


def subtitle(entry: Any, subtitle_priority: Sequence[str] = SUBTITLE_FIELDS) -> str:
    """
    Resolve a secondary line for an entry, e.g. ``"Capacity: 12t"``.

    Numbers are accepted as values, booleans are not.

    Args:
        entry: Raw normalized entry or an already classified one
        subtitle_priority: Ordered field names to try

    Returns:
        ``"{Label}: {value}"`` or an empty string
    """
    tagged = classify(entry)
    if not isinstance(tagged, RecordEntry):
        return ""

    for name in subtitle_priority:
        value = tagged.get(name)
        if isinstance(value, bool) or value is None:
            continue
        if isinstance(value, str):
            if not value.strip():
                continue
        elif not isinstance(value, (int, float)):
            continue
        label = SUBTITLE_LABELS.get(name, name.replace("_", " ").title())
        return f"{label}: {value}"
    return ""
