"""
Domain renderers - turn stored freight fields into display structures.

Each renderer normalizes its field, then labels every entry through the
display extractor with a field-specific synonym table:
- Destinations (legacy direct pair first, then the destinos list)
- Stops
- Vehicle / body selections
- Price tables (nested and flat shapes)
- Benefits and scheduling rules
- The whole freight (render_freight)
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel

from freight_board.core.config import DisplayConfig
from freight_board.data.models.freight import FreightStatus, FreightType
from freight_board.normalize.entries import RecordEntry, Scalar, classify
from freight_board.normalize.extract import display_text, subtitle
from freight_board.normalize.shape import normalize, normalize_field
from freight_board.normalize.synonyms import (
    BENEFIT_PRIORITY,
    DESTINATION_PRIORITY,
    GENERIC_PRIORITY,
    RULE_PRIORITY,
    SELECTION_PRIORITY,
    SYNONYMS,
    Role,
    lookup,
    lookup_text,
)
from freight_board.render.formatting import format_currency, format_date, format_number
from freight_board.render.views import DisplayItem, FreightView, PriceRow

RecordLike = Union[Mapping[str, Any], BaseModel]

_PLACE_DETAIL_ROLES = (Role.POSTAL_CODE, Role.NEIGHBORHOOD, Role.ADDRESS)


def _as_mapping(record: RecordLike) -> Mapping[str, Any]:
    if isinstance(record, BaseModel):
        return record.model_dump()
    return record


def _text(value: Any) -> Optional[str]:
    """Stored scalar as display text; None and empty strings give None."""
    if value is None or value == "":
        return None
    return str(value)


def _ranges_of(fields: Mapping[str, Any]) -> Optional[list[Any]]:
    """The nested ranges list of a price-table entry, or None for flat rows."""
    ranges = fields.get("ranges")
    if isinstance(ranges, str) and ranges.startswith("["):
        decoded = normalize(ranges)
        # an undecodable string comes back as itself
        return None if decoded == [ranges] else decoded
    if isinstance(ranges, (list, tuple)):
        return normalize(ranges)
    return None


def _render_place(entry: Any) -> DisplayItem:
    """Render a destination or stop entry as "city, state" plus address lines."""
    tagged = classify(entry)
    if isinstance(tagged, Scalar):
        return DisplayItem(text=tagged.text)

    city = lookup_text(tagged.fields, Role.CITY)
    state = lookup_text(tagged.fields, Role.STATE)
    if city and state:
        text = f"{city}, {state}"
    else:
        text = city or display_text(tagged, DESTINATION_PRIORITY)

    details = []
    for role in _PLACE_DETAIL_ROLES:
        line = subtitle(tagged, SYNONYMS[role])
        if line:
            details.append(line)
    return DisplayItem(text=text, details=details)


def render_destinations(
    record: RecordLike, primary_label: str = DisplayConfig().primary_destination_label
) -> list[DisplayItem]:
    """
    Render the destinations of a freight.

    The legacy direct pair (destino_cidade/destino_estado) is listed first
    when present; the destinos list follows. Both are shown, with no
    deduplication between them.

    Args:
        record: Freight record (mapping or model)
        primary_label: Annotation for the direct pair

    Returns:
        Ordered display items
    """
    fields = _as_mapping(record)
    items: list[DisplayItem] = []

    direct_city = fields.get("destino_cidade")
    if isinstance(direct_city, str) and direct_city.strip():
        direct_state = fields.get("destino_estado")
        text = f"{direct_city}, {direct_state}" if direct_state else direct_city
        items.append(DisplayItem(text=text, annotation=primary_label, primary=True))

    for entry in normalize_field("destinos", fields.get("destinos")):
        if entry is None:
            continue
        items.append(_render_place(entry))
    return items


def render_stops(record: RecordLike) -> list[DisplayItem]:
    """Render the stops (paradas) of a freight, in stop order when known."""
    fields = _as_mapping(record)
    items = []
    for entry in normalize_field("paradas", fields.get("paradas")):
        if entry is None:
            continue
        item = _render_place(entry)
        if isinstance(entry, Mapping):
            item.annotation = lookup_text(entry, Role.OPERATION)
        items.append(item)
    return items


def render_selections(value: Any, field: str = "tipos_veiculos") -> list[DisplayItem]:
    """
    Render vehicle or body selections.

    Records carrying a ``selected`` key are shown only when it is True;
    records without it predate the flag and are always shown.

    Args:
        value: Stored tipos_veiculos / tipos_carrocerias value
        field: Field name, used to pick shape adapters

    Returns:
        Display items with the category as annotation
    """
    items = []
    for entry in normalize_field(field, value):
        if entry is None:
            continue
        tagged = classify(entry)
        if isinstance(tagged, RecordEntry) and tagged.has("selected"):
            if tagged.get("selected") is not True:
                continue
        annotation = None
        if isinstance(tagged, RecordEntry):
            annotation = lookup_text(tagged.fields, Role.CATEGORY)
        items.append(
            DisplayItem(
                text=display_text(tagged, SELECTION_PRIORITY, selection=True),
                annotation=annotation,
            )
        )
    return items


def _price_row(fields: Mapping[str, Any], vehicle_type: Optional[str]) -> PriceRow:
    return PriceRow(
        vehicle_type=vehicle_type,
        km_start=lookup(fields, Role.KM_START),
        km_end=lookup(fields, Role.KM_END),
        price=lookup(fields, Role.PRICE),
    )


def render_price_tables(value: Any) -> list[PriceRow]:
    """
    Render price tables as rows.

    Entries with a ``ranges`` list (nested shape) give one row per range;
    entries without one (flat store rows) give exactly one row.

    Args:
        value: Stored tabelas_preco value or price-table store rows

    Returns:
        Price rows in stored order
    """
    rows: list[PriceRow] = []
    for entry in normalize_field("tabelas_preco", value):
        if entry is None:
            continue
        tagged = classify(entry)
        if isinstance(tagged, Scalar):
            rows.append(PriceRow(vehicle_type=tagged.text))
            continue

        vehicle_type = lookup_text(tagged.fields, Role.VEHICLE_TYPE)
        ranges = _ranges_of(tagged.fields)
        if ranges is not None:
            for price_range in ranges:
                if isinstance(price_range, Mapping):
                    rows.append(_price_row(price_range, vehicle_type))
        else:
            rows.append(_price_row(tagged.fields, vehicle_type))
    return rows


def render_benefits(value: Any) -> list[DisplayItem]:
    """Render benefits; benefit records may carry a description line."""
    items = []
    for entry in normalize_field("beneficios", value):
        if entry is None:
            continue
        tagged = classify(entry)
        text = display_text(tagged, BENEFIT_PRIORITY)
        details = []
        if isinstance(tagged, RecordEntry):
            description = lookup_text(tagged.fields, Role.DESCRIPTION)
            if description and description != text:
                details.append(description)
        items.append(DisplayItem(text=text, details=details))
    return items


def render_scheduling_rules(value: Any) -> list[DisplayItem]:
    """Render scheduling rules as plain lines."""
    return [
        DisplayItem(text=display_text(entry, RULE_PRIORITY))
        for entry in normalize_field("regras_agendamento", value)
        if entry is not None
    ]


def _label_for(enum_cls: Any, raw: Any) -> str:
    try:
        return enum_cls(raw).label
    except ValueError:
        return str(raw) if raw else ""


def _collaborator_line(collaborator: RecordLike) -> str:
    fields = _as_mapping(collaborator)
    line = display_text(fields, ("name", "nome"))
    if fields.get("sector"):
        line = f"{line} - {fields['sector']}"
    if fields.get("phone"):
        line = f"{line} ({fields['phone']})"
    return line


def _company_line(company: RecordLike) -> str:
    fields = _as_mapping(company)
    names = (_text(fields.get("company_name")), _text(fields.get("contact_name")))
    parts = [name for name in names if name]
    line = " - ".join(parts) or display_text(fields, GENERIC_PRIORITY)
    if fields.get("phone"):
        line = f"{line} ({fields['phone']})"
    return line


def render_freight(
    record: RecordLike,
    price_rows: Optional[Iterable[RecordLike]] = None,
    collaborators: Optional[Iterable[RecordLike]] = None,
    company: Optional[RecordLike] = None,
    display_config: Optional[DisplayConfig] = None,
) -> FreightView:
    """
    Render a whole freight record.

    Args:
        record: Freight record (mapping or FreightRecord)
        price_rows: Rows from the price-table store; replace the record's own
            tabelas_preco when given
        collaborators: Collaborator records to list as responsible
        company: Company record for the contact line
        display_config: Labels (defaults to DisplayConfig())

    Returns:
        FreightView with every section rendered
    """
    display_config = display_config or DisplayConfig()
    not_specified = display_config.not_specified_label
    fields = _as_mapping(record)

    origin = (_text(fields.get("origem_cidade")), _text(fields.get("origem_estado")))
    origin_parts = [part for part in origin if part]

    cargo = []
    if fields.get("tipo_mercadoria"):
        cargo.append(f"Merchandise: {fields['tipo_mercadoria']}")
    weight = format_number(fields.get("peso_carga"))
    if weight:
        cargo.append(f"Weight: {weight} kg")
    if fields.get("valor_carga") is not None:
        cargo.append(f"Value: {format_currency(fields['valor_carga'], empty=not_specified)}")

    requirements = []
    if fields.get("precisa_ajudante"):
        requirements.append("Helper required")
    if fields.get("precisa_rastreador"):
        requirements.append("Tracker required")
    if fields.get("precisa_seguro"):
        requirements.append("Insurance required")

    toll = None
    if fields.get("pedagio_pago_por"):
        toll = f"Toll paid by {fields['pedagio_pago_por']}"
        if fields.get("pedagio_direcao"):
            toll = f"{toll} ({fields['pedagio_direcao']})"

    if price_rows is not None:
        price_source: Any = [_as_mapping(row) for row in price_rows]
    else:
        price_source = fields.get("tabelas_preco")

    return FreightView(
        id=_text(fields.get("id")),
        code=_text(fields.get("codigo_agregamento")) or "Code not generated",
        type_label=_label_for(FreightType, fields.get("tipo_frete")) or not_specified,
        status_label=_label_for(FreightStatus, fields.get("status")) or not_specified,
        origin=", ".join(origin_parts) or not_specified,
        destinations=render_destinations(fields, display_config.primary_destination_label),
        stops=render_stops(fields),
        vehicles=render_selections(fields.get("tipos_veiculos"), "tipos_veiculos"),
        bodies=render_selections(fields.get("tipos_carrocerias"), "tipos_carrocerias"),
        price_rows=render_price_tables(price_source),
        benefits=render_benefits(fields.get("beneficios")),
        scheduling_rules=render_scheduling_rules(fields.get("regras_agendamento")),
        cargo=cargo,
        requirements=requirements,
        toll=toll,
        loading_time=_text(fields.get("horario_carregamento")),
        pickup_date=format_date(fields.get("data_coleta")),
        delivery_date=format_date(fields.get("data_entrega")),
        notes=_text(fields.get("observacoes")),
        collaborators=[_collaborator_line(c) for c in collaborators or ()],
        company_contact=_company_line(company) if company is not None else None,
    )
