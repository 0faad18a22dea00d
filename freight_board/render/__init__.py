"""
Presentation of normalized freight fields.
"""

from .renderers import (
    render_benefits,
    render_destinations,
    render_freight,
    render_price_tables,
    render_scheduling_rules,
    render_selections,
    render_stops,
)
from .views import DisplayItem, FreightView, PriceRow

__all__ = [
    "DisplayItem",
    "FreightView",
    "PriceRow",
    "render_benefits",
    "render_destinations",
    "render_freight",
    "render_price_tables",
    "render_scheduling_rules",
    "render_selections",
    "render_stops",
]
