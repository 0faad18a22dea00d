import json
import random
from datetime import datetime

import httpx
import pytest

from freight_board.core.config import StoreConfig
from freight_board.core.errors import FreightNotFoundError, StoreError
from freight_board.store.base import generate_freight_code
from freight_board.store.rest import PostgrestFreightStore


def test_freight_code_format():
    code = generate_freight_code(
        "FC", now=datetime(2025, 3, 1, 14, 30), rng=random.Random(0)
    )
    prefix, day, clock, sequence = code.split("-")
    assert (prefix, day, clock) == ("FC", "250301", "1430")
    assert len(sequence) == 4 and sequence.isdigit()


class TestInMemoryStore:
    def test_insert_assigns_identity(self, store):
        row = store.insert_freight({"origem_cidade": "Santos"})
        assert row["id"]
        assert row["status"] == "pendente"
        assert row["codigo_agregamento"].startswith("FC-")
        assert row["created_at"] == row["updated_at"]

    def test_rows_are_copies(self, store):
        payload = {"destinos": [{"city": "Santos"}]}
        row = store.insert_freight(payload)
        payload["destinos"].append({"city": "Bertioga"})
        row["destinos"].clear()
        assert store.get_freight(row["id"])["destinos"] == [{"city": "Santos"}]

    def test_price_rows_batch_is_all_or_nothing(self, store):
        freight = store.insert_freight({})
        rows = [
            {"freight_id": freight["id"], "vehicle_type": "Truck"},
            {"freight_id": "missing", "vehicle_type": "Truck"},
        ]
        with pytest.raises(FreightNotFoundError):
            store.insert_price_rows(rows)
        assert store.price_rows == []

    def test_update_and_delete(self, store):
        freight = store.insert_freight({})
        store.insert_price_rows([{"freight_id": freight["id"], "vehicle_type": "Van"}])

        assert store.update_freight(freight["id"], {"status": "ativo"})["status"] == "ativo"
        store.delete_price_rows(freight["id"])
        store.delete_freight(freight["id"])
        assert store.list_freights() == []
        assert store.price_rows == []

    def test_update_missing_freight(self, store):
        with pytest.raises(FreightNotFoundError):
            store.update_freight("missing", {"status": "ativo"})


class RecordingTransport:
    """Mock PostgREST endpoint that records requests and replays canned responses."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)


def make_store(*responses, **config):
    transport = RecordingTransport(responses)
    store = PostgrestFreightStore(
        "https://example.supabase.co/",
        "secret",
        store_config=StoreConfig(**config),
        client=httpx.Client(transport=httpx.MockTransport(transport)),
    )
    return store, transport


def test_insert_freight_request():
    store, transport = make_store(
        httpx.Response(201, json=[{"id": "f1", "codigo_agregamento": "FC-250301-1430-0042"}])
    )

    row = store.insert_freight({"origem_cidade": "Santos"})

    assert row["id"] == "f1"
    (request,) = transport.requests
    assert request.method == "POST"
    assert str(request.url) == "https://example.supabase.co/rest/v1/fretes"
    assert request.headers["apikey"] == "secret"
    assert request.headers["Authorization"] == "Bearer secret"
    assert request.headers["Prefer"] == "return=representation"
    assert json.loads(request.content) == {"origem_cidade": "Santos"}


def test_price_rows_use_configured_column():
    store, transport = make_store(
        httpx.Response(201, json=[{"id": 1, "frete_id": "f1", "vehicle_type": "Truck"}]),
        httpx.Response(200, json=[{"id": 1, "frete_id": "f1", "vehicle_type": "Truck"}]),
    )

    stored = store.insert_price_rows([{"freight_id": "f1", "vehicle_type": "Truck"}])
    listed = store.list_price_rows("f1")

    assert stored == listed == [{"id": 1, "freight_id": "f1", "vehicle_type": "Truck"}]
    insert, select = transport.requests
    assert json.loads(insert.content) == [{"frete_id": "f1", "vehicle_type": "Truck"}]
    assert insert.url.path == "/rest/v1/freight_price_tables"
    assert select.url.params["frete_id"] == "eq.f1"


def test_empty_price_batch_skips_request():
    store, transport = make_store()
    assert store.insert_price_rows([]) == []
    assert transport.requests == []


def test_get_freight_missing_returns_none():
    store, transport = make_store(httpx.Response(200, json=[]))
    assert store.get_freight("f9") is None
    assert transport.requests[0].url.params["id"] == "eq.f9"


def test_update_without_rows_is_not_found():
    store, _ = make_store(httpx.Response(200, json=[]))
    with pytest.raises(FreightNotFoundError):
        store.update_freight("f9", {"status": "ativo"})


def test_delete_freight_request():
    store, transport = make_store(httpx.Response(204))
    store.delete_freight("f1")
    (request,) = transport.requests
    assert request.method == "DELETE"
    assert request.url.params["id"] == "eq.f1"


def test_http_error_becomes_store_error():
    store, _ = make_store(httpx.Response(409, text="duplicate key value"))

    with pytest.raises(StoreError) as exc_info:
        store.insert_freight({})

    assert exc_info.value.status_code == 409
    assert "duplicate key value" in str(exc_info.value)


def test_transport_error_becomes_store_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    store = PostgrestFreightStore(
        "https://example.supabase.co",
        "secret",
        client=httpx.Client(transport=httpx.MockTransport(refuse)),
    )
    with pytest.raises(StoreError) as exc_info:
        store.list_freights()
    assert exc_info.value.status_code is None


def test_insert_without_representation_fails():
    store, _ = make_store(httpx.Response(201, json=[]))
    with pytest.raises(StoreError):
        store.insert_freight({})
