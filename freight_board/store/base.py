"""
Record store interface shared by the fan-out writer and the readers.

Two tables are addressed:
- freights (one row per freight, assigns id and codigo_agregamento)
- price tables (flat rows keyed by freight id)
"""

import random
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional


def generate_freight_code(
    prefix: str = "FC", now: Optional[datetime] = None, rng: Optional[random.Random] = None
) -> str:
    """
    Generate a human-readable freight code, e.g. ``FC-250301-1430-0042``.

    Args:
        prefix: Code prefix
        now: Timestamp to encode (defaults to now)
        rng: Random source for the sequence part

    Returns:
        Code in the form PREFIX-YYMMDD-HHMM-NNNN
    """
    now = now or datetime.now()
    sequence = (rng or random).randint(0, 9999)
    return f"{prefix}-{now:%y%m%d}-{now:%H%M}-{sequence:04d}"


class FreightStore(ABC):
    """
    Abstract record store.

    Implementations raise on failure; callers get the error unchanged.
    """

    @abstractmethod
    def insert_freight(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Insert one freight row.

        Args:
            payload: Freight columns

        Returns:
            The stored row, including ``id`` and ``codigo_agregamento``
        """

    @abstractmethod
    def insert_price_rows(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Insert price-table rows as one batch; all or nothing."""

    @abstractmethod
    def get_freight(self, freight_id: str) -> Optional[dict[str, Any]]:
        """Fetch one freight row, or None when it does not exist."""

    @abstractmethod
    def list_freights(self) -> list[dict[str, Any]]:
        """Fetch every freight row."""

    @abstractmethod
    def list_price_rows(self, freight_id: str) -> list[dict[str, Any]]:
        """Fetch the price-table rows of one freight."""

    @abstractmethod
    def update_freight(self, freight_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        """Apply ``changes`` to one freight row and return the updated row."""

    @abstractmethod
    def delete_freight(self, freight_id: str) -> None:
        """Hard-delete one freight row."""

    @abstractmethod
    def delete_price_rows(self, freight_id: str) -> None:
        """Delete every price-table row of one freight."""
