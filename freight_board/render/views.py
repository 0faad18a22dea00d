"""
View models produced by the domain renderers.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from freight_board.render.formatting import format_currency, format_km_range


class DisplayItem(BaseModel):
    """One rendered entry: a label plus optional secondary lines."""

    text: str
    details: list[str] = Field(default_factory=list)
    annotation: Optional[str] = None
    primary: bool = False


class PriceRow(BaseModel):
    """One rendered price-table row."""

    vehicle_type: Optional[str] = None
    km_start: Any = None
    km_end: Any = None
    price: Any = None

    def describe(self, not_specified: str = "Not specified") -> str:
        """Single-line summary, e.g. ``Truck: 0 - 100 km · R$ 150,00``."""
        vehicle = self.vehicle_type or not_specified
        return (
            f"{vehicle}: {format_km_range(self.km_start, self.km_end)}"
            f" · {format_currency(self.price, empty=not_specified)}"
        )


class FreightView(BaseModel):
    """Fully rendered freight, ready for any presentation layer."""

    id: Optional[str] = None
    code: str
    type_label: str
    status_label: str
    origin: str
    destinations: list[DisplayItem] = Field(default_factory=list)
    stops: list[DisplayItem] = Field(default_factory=list)
    vehicles: list[DisplayItem] = Field(default_factory=list)
    bodies: list[DisplayItem] = Field(default_factory=list)
    price_rows: list[PriceRow] = Field(default_factory=list)
    benefits: list[DisplayItem] = Field(default_factory=list)
    scheduling_rules: list[DisplayItem] = Field(default_factory=list)
    cargo: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)
    toll: Optional[str] = None
    loading_time: Optional[str] = None
    pickup_date: Optional[str] = None
    delivery_date: Optional[str] = None
    notes: Optional[str] = None
    collaborators: list[str] = Field(default_factory=list)
    company_contact: Optional[str] = None
