"""
Pydantic data models for the freight board.

Core models:
- FreightRecord: Persisted freight posting
- FreightSubmission: Multi-destination form submission
- VehiclePriceTable / PriceTableRow: Pricing per vehicle and distance band
- Collaborator / Company: Display-only join records
"""

from .freight import (
    BodySelection,
    Collaborator,
    Company,
    CreatedFreight,
    Destination,
    FreightRecord,
    FreightStatus,
    FreightSubmission,
    FreightType,
    PriceRange,
    PriceTableRow,
    Stop,
    VehiclePriceTable,
    VehicleSelection,
)

__all__ = [
    "BodySelection",
    "Collaborator",
    "Company",
    "CreatedFreight",
    "Destination",
    "FreightRecord",
    "FreightStatus",
    "FreightSubmission",
    "FreightType",
    "PriceRange",
    "PriceTableRow",
    "Stop",
    "VehiclePriceTable",
    "VehicleSelection",
]
