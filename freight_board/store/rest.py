"""
PostgREST (Supabase) record store over httpx.

Requests:
- POST   /rest/v1/{table}                 insert, Prefer: return=representation
- GET    /rest/v1/{table}?id=eq.{id}      fetch
- PATCH  /rest/v1/{table}?id=eq.{id}      update
- DELETE /rest/v1/{table}?id=eq.{id}      delete
"""

from typing import Any, Optional

import httpx
import structlog

from freight_board.core.config import StoreConfig
from freight_board.core.errors import FreightNotFoundError, StoreError
from freight_board.store.base import FreightStore


class PostgrestFreightStore(FreightStore):
    """
    Freight store backed by a PostgREST endpoint.

    The price-table column holding the freight id is configurable; rows are
    exchanged as ``freight_id`` on this side.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        store_config: Optional[StoreConfig] = None,
        client: Optional[httpx.Client] = None,
        logger: Optional[structlog.BoundLogger] = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            base_url: Project URL, e.g. https://xyz.supabase.co
            api_key: Service or anon key, sent as apikey and bearer token
            store_config: Table names and timeout (defaults to StoreConfig())
            client: Optional preconfigured httpx client (tests inject a mock transport)
            logger: Optional structured logger
        """
        self.config = store_config or StoreConfig()
        self.logger = logger or structlog.get_logger(component="postgrest_store")
        self._client = client or httpx.Client(timeout=self.config.timeout_seconds)
        self._base = f"{base_url.rstrip('/')}/rest/v1"
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def close(self) -> None:
        self._client.close()

    def _request(
        self,
        method: str,
        table: str,
        params: Optional[dict[str, str]] = None,
        json_body: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        headers = dict(self._headers)
        if prefer:
            headers["Prefer"] = prefer
        url = f"{self._base}/{table}"
        try:
            response = self._client.request(
                method, url, params=params, json=json_body, headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self.logger.error(
                "store_request_failed",
                method=method,
                table=table,
                status_code=e.response.status_code,
                error=e.response.text,
            )
            raise StoreError(
                f"{method} {table} failed: {e.response.status_code} {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            self.logger.error("store_request_failed", method=method, table=table, error=str(e))
            raise StoreError(f"{method} {table} failed: {e}") from e

        if not response.content:
            return None
        return response.json()

    def _price_row_out(self, row: dict[str, Any]) -> dict[str, Any]:
        out = dict(row)
        out[self.config.price_freight_column] = out.pop("freight_id")
        return out

    def _price_row_in(self, row: dict[str, Any]) -> dict[str, Any]:
        out = dict(row)
        if self.config.price_freight_column in out:
            out["freight_id"] = out.pop(self.config.price_freight_column)
        return out

    def insert_freight(self, payload: dict[str, Any]) -> dict[str, Any]:
        rows = self._request(
            "POST",
            self.config.freights_table,
            json_body=payload,
            prefer="return=representation",
        )
        if not rows:
            raise StoreError(f"Insert into {self.config.freights_table} returned no row")
        return rows[0]

    def insert_price_rows(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        if not rows:
            return []
        stored = self._request(
            "POST",
            self.config.price_table,
            json_body=[self._price_row_out(r) for r in rows],
            prefer="return=representation",
        )
        return [self._price_row_in(r) for r in stored or []]

    def get_freight(self, freight_id: str) -> Optional[dict[str, Any]]:
        rows = self._request(
            "GET", self.config.freights_table, params={"id": f"eq.{freight_id}", "select": "*"}
        )
        return rows[0] if rows else None

    def list_freights(self) -> list[dict[str, Any]]:
        return self._request("GET", self.config.freights_table, params={"select": "*"}) or []

    def list_price_rows(self, freight_id: str) -> list[dict[str, Any]]:
        rows = self._request(
            "GET",
            self.config.price_table,
            params={self.config.price_freight_column: f"eq.{freight_id}", "select": "*"},
        )
        return [self._price_row_in(r) for r in rows or []]

    def update_freight(self, freight_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        rows = self._request(
            "PATCH",
            self.config.freights_table,
            params={"id": f"eq.{freight_id}"},
            json_body=changes,
            prefer="return=representation",
        )
        if not rows:
            raise FreightNotFoundError(f"Freight not found: {freight_id}")
        return rows[0]

    def delete_freight(self, freight_id: str) -> None:
        self._request("DELETE", self.config.freights_table, params={"id": f"eq.{freight_id}"})

    def delete_price_rows(self, freight_id: str) -> None:
        self._request(
            "DELETE",
            self.config.price_table,
            params={self.config.price_freight_column: f"eq.{freight_id}"},
        )
