"""
In-memory record store, used for local runs and tests.
"""

import copy
import random
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from freight_board.core.errors import FreightNotFoundError
from freight_board.store.base import FreightStore, generate_freight_code


class InMemoryFreightStore(FreightStore):
    """
    Dict-backed store.

    Rows are deep-copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self, code_prefix: str = "FC", seed: Optional[int] = None) -> None:
        self.code_prefix = code_prefix
        self.freights: dict[str, dict[str, Any]] = {}
        self.price_rows: list[dict[str, Any]] = []
        self._rng = random.Random(seed)

    def _new_code(self) -> str:
        taken = {row.get("codigo_agregamento") for row in self.freights.values()}
        while True:
            code = generate_freight_code(self.code_prefix, rng=self._rng)
            if code not in taken:
                return code

    def insert_freight(self, payload: dict[str, Any]) -> dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat()
        row = copy.deepcopy(payload)
        row["id"] = str(uuid.uuid4())
        row.setdefault("status", "pendente")
        row["codigo_agregamento"] = self._new_code()
        row["created_at"] = now
        row["updated_at"] = now
        self.freights[row["id"]] = row
        return copy.deepcopy(row)

    def insert_price_rows(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        stored = []
        for row in rows:
            if row.get("freight_id") not in self.freights:
                raise FreightNotFoundError(f"Freight not found: {row.get('freight_id')}")
            stored.append({"id": str(uuid.uuid4()), **copy.deepcopy(row)})
        self.price_rows.extend(stored)
        return copy.deepcopy(stored)

    def get_freight(self, freight_id: str) -> Optional[dict[str, Any]]:
        row = self.freights.get(freight_id)
        return copy.deepcopy(row) if row is not None else None

    def list_freights(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(row) for row in self.freights.values()]

    def list_price_rows(self, freight_id: str) -> list[dict[str, Any]]:
        return [copy.deepcopy(r) for r in self.price_rows if r.get("freight_id") == freight_id]

    def update_freight(self, freight_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        if freight_id not in self.freights:
            raise FreightNotFoundError(f"Freight not found: {freight_id}")
        self.freights[freight_id].update(copy.deepcopy(changes))
        return copy.deepcopy(self.freights[freight_id])

    def delete_freight(self, freight_id: str) -> None:
        self.freights.pop(freight_id, None)

    def delete_price_rows(self, freight_id: str) -> None:
        self.price_rows = [r for r in self.price_rows if r.get("freight_id") != freight_id]
