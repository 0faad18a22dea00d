import pytest

from freight_board.core.errors import FreightNotFoundError, InvalidStatusTransition
from freight_board.data.models.freight import FreightStatus
from freight_board.services.lifecycle import delete_freight, transition_status


@pytest.fixture
def freight_id(store):
    freight = store.insert_freight({"origem_cidade": "São Paulo", "origem_estado": "SP"})
    store.insert_price_rows(
        [
            {
                "freight_id": freight["id"],
                "vehicle_type": "Truck",
                "km_start": "0",
                "km_end": "100",
                "price": "150",
            }
        ]
    )
    return freight["id"]


def test_forward_path(store, freight_id):
    for status in ("ativo", "aceito", "em_andamento", "concluido"):
        updated = transition_status(store, freight_id, status)
        assert updated["status"] == status
    assert store.get_freight(freight_id)["status"] == "concluido"


def test_accepts_enum_members(store, freight_id):
    updated = transition_status(store, freight_id, FreightStatus.ACTIVE)
    assert updated["status"] == "ativo"


def test_cancel_from_active(store, freight_id):
    transition_status(store, freight_id, "ativo")
    assert transition_status(store, freight_id, "cancelado")["status"] == "cancelado"


def test_skipping_a_step_is_rejected(store, freight_id):
    with pytest.raises(InvalidStatusTransition) as exc_info:
        transition_status(store, freight_id, "aceito")
    assert exc_info.value.current == "pendente"
    assert exc_info.value.requested == "aceito"
    assert store.get_freight(freight_id)["status"] == "pendente"


def test_terminal_status_is_final(store, freight_id):
    transition_status(store, freight_id, "cancelado")
    with pytest.raises(InvalidStatusTransition):
        transition_status(store, freight_id, "ativo")
    with pytest.raises(InvalidStatusTransition):
        transition_status(store, freight_id, "cancelado")


def test_updated_at_changes(store, freight_id):
    before = store.get_freight(freight_id)["updated_at"]
    after = transition_status(store, freight_id, "ativo")["updated_at"]
    assert after >= before


def test_unknown_status_value(store, freight_id):
    with pytest.raises(ValueError):
        transition_status(store, freight_id, "arquivado")


def test_unknown_freight(store):
    with pytest.raises(FreightNotFoundError):
        transition_status(store, "missing", "ativo")


def test_unknown_stored_status_cannot_move(store):
    freight = store.insert_freight({"status": "rascunho"})
    with pytest.raises(InvalidStatusTransition):
        transition_status(store, freight["id"], "ativo")


def test_delete_keeps_price_rows(store, freight_id):
    delete_freight(store, freight_id)

    assert store.get_freight(freight_id) is None
    assert len(store.list_price_rows(freight_id)) == 1


def test_delete_unknown_freight(store):
    with pytest.raises(FreightNotFoundError):
        delete_freight(store, "missing")
