from pathlib import Path
from typing import Any

import pytest

from freight_board.core.config import ConfigManager
from freight_board.store.memory import InMemoryFreightStore


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Empty config directory; ConfigManager falls back to defaults."""
    directory = tmp_path / "config"
    directory.mkdir()
    return directory


@pytest.fixture
def config_manager(config_dir: Path) -> ConfigManager:
    return ConfigManager(config_dir=config_dir)


@pytest.fixture
def store() -> InMemoryFreightStore:
    return InMemoryFreightStore(seed=7)


@pytest.fixture
def submission_data() -> dict[str, Any]:
    """Three destinations, two vehicle price tables with two ranges each."""
    return {
        "company_id": "company-1",
        "collaborator_ids": ["col-1", "col-2"],
        "origem_cidade": "São Paulo",
        "origem_estado": "SP",
        "destinos": [
            {"id": "d1", "city": "Campinas", "state": "SP"},
            {"id": "d2", "city": "Curitiba", "state": "PR"},
            {"id": "d3", "city": "Belo Horizonte", "state": "MG"},
        ],
        "tipo_mercadoria": "Eletrônicos",
        "tipos_veiculos": [
            {"id": "1", "type": "Carreta", "category": "heavy", "selected": True},
            {"id": "2", "type": "Truck", "category": "heavy", "selected": True},
            {"id": "5", "type": "VUC", "category": "light", "selected": False},
        ],
        "tipos_carrocerias": [
            {"id": "3", "type": "Baú", "category": "closed", "selected": True},
            {"id": "7", "type": "Prancha", "category": "open", "selected": False},
        ],
        "vehicle_price_tables": [
            {
                "vehicleType": "Carreta",
                "ranges": [
                    {"id": "r1", "kmStart": 0, "kmEnd": 100, "price": 900},
                    {"id": "r2", "kmStart": 101, "kmEnd": 300, "price": 1500},
                ],
            },
            {
                "vehicleType": "Truck",
                "ranges": [
                    {"id": "r3", "kmStart": 0, "kmEnd": 100, "price": 600},
                    {"id": "r4", "kmStart": 101, "kmEnd": 300, "price": 1100},
                ],
            },
        ],
        "regras_agendamento": ["Agendar com 24h de antecedência"],
        "beneficios": ["Vale refeição", "Pedágio pago"],
        "horario_carregamento": "08:00",
        "precisa_ajudante": True,
        "precisa_rastreador": False,
        "precisa_seguro": True,
        "pedagio_pago_por": "embarcador",
        "pedagio_direcao": "ida",
        "observacoes": "",
    }
