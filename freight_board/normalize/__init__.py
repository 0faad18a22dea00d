"""
Freight attribute normalization.

- normalize / normalize_field: flatten stored list fields
- display_text / subtitle: label normalized entries
- Role / lookup: synonym tables for drifted field names
"""

from .entries import Entry, RecordEntry, Scalar, classify
from .extract import display_text, subtitle
from .shape import AdapterRegistry, FieldAdapter, default_registry, normalize, normalize_field
from .synonyms import Role, lookup, lookup_text

__all__ = [
    "AdapterRegistry",
    "Entry",
    "FieldAdapter",
    "RecordEntry",
    "Role",
    "Scalar",
    "classify",
    "default_registry",
    "display_text",
    "lookup",
    "lookup_text",
    "normalize",
    "normalize_field",
    "subtitle",
]
