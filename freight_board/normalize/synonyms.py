"""
Ordered synonym tables for freight record fields.

The same value was stored under different names over time (``cidade`` /
``city``, ``kmStart`` / ``km_start`` / ``km_inicio`` ...). Each semantic role
owns one ordered alias tuple and every reader goes through ``lookup``.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional


class Role(str, Enum):
    """Semantic role of a record field."""

    CITY = "city"
    STATE = "state"
    POSTAL_CODE = "postal_code"
    NEIGHBORHOOD = "neighborhood"
    ADDRESS = "address"
    VEHICLE_TYPE = "vehicle_type"
    KM_START = "km_start"
    KM_END = "km_end"
    PRICE = "price"
    CATEGORY = "category"
    ORDER = "order"
    TITLE = "title"
    DESCRIPTION = "description"
    RULE = "rule"
    OPERATION = "operation"


SYNONYMS: dict[Role, tuple[str, ...]] = {
    Role.CITY: ("cidade", "city"),
    Role.STATE: ("estado", "state", "uf"),
    Role.POSTAL_CODE: ("cep", "postal_code", "zip_code"),
    Role.NEIGHBORHOOD: ("bairro", "neighborhood"),
    Role.ADDRESS: ("endereco", "address"),
    Role.VEHICLE_TYPE: ("vehicleType", "vehicle_type", "tipo_veiculo"),
    Role.KM_START: ("kmStart", "km_start", "km_inicio"),
    Role.KM_END: ("kmEnd", "km_end", "km_fim"),
    Role.PRICE: ("price", "preco", "valor"),
    Role.CATEGORY: ("category", "categoria"),
    Role.ORDER: ("order", "ordem"),
    Role.TITLE: ("titulo", "title", "nome", "name", "label", "type"),
    Role.DESCRIPTION: ("descricao", "description"),
    Role.RULE: ("descricao", "texto", "rule", "label", "name", "nome"),
    Role.OPERATION: ("tipo_operacao", "tipoOperacao"),
}


def lookup(fields: Mapping[str, Any], role: Role, default: Any = None) -> Any:
    """
    Resolve a role against a record.

    Args:
        fields: Record to probe
        role: Semantic role to resolve
        default: Returned when no alias holds a value

    Returns:
        Value of the first alias that is neither None nor an empty string
    """
    for name in SYNONYMS[role]:
        value = fields.get(name)
        if value is None or value == "":
            continue
        return value
    return default


def lookup_text(fields: Mapping[str, Any], role: Role) -> Optional[str]:
    """Like ``lookup`` but only accepts non-empty strings or numbers, returned as text."""
    for name in SYNONYMS[role]:
        value = fields.get(name)
        if isinstance(value, bool):
            continue
        if isinstance(value, str) and value.strip():
            return value
        if isinstance(value, (int, float)):
            return str(value)
    return None


# Display priorities (field names, consulted in order)

GENERIC_PRIORITY: tuple[str, ...] = (
    "nome", "name", "tipo", "type", "descricao", "description",
    "label", "title", "categoria", "category", "modelo", "model",
)

DESTINATION_PRIORITY: tuple[str, ...] = (
    "cidade", "city", "name", "nome", "label", "estado", "state",
)

SELECTION_PRIORITY: tuple[str, ...] = (
    "type", "label", "value", "name", "nome", "tipo",
)

BENEFIT_PRIORITY: tuple[str, ...] = SYNONYMS[Role.TITLE] + ("value", "descricao", "description")

RULE_PRIORITY: tuple[str, ...] = SYNONYMS[Role.RULE] + ("value", "type")


# Subtitle fields and their labels, in priority order

SUBTITLE_LABELS: dict[str, str] = {
    "capacidade": "Capacity",
    "capacity": "Capacity",
    "peso": "Weight",
    "weight": "Weight",
    "tamanho": "Size",
    "size": "Size",
    "categoria": "Category",
    "category": "Category",
    "modelo": "Model",
    "model": "Model",
    "cep": "Postal Code",
    "postal_code": "Postal Code",
    "zip_code": "Postal Code",
    "bairro": "Neighborhood",
    "neighborhood": "Neighborhood",
    "endereco": "Address",
    "address": "Address",
}

SUBTITLE_FIELDS: tuple[str, ...] = tuple(SUBTITLE_LABELS)
