"""
Freight data models - postings, submissions and price tables.

List-valued freight fields (destinos, paradas, tipos_veiculos, ...) are kept
as ``Any``: their stored shape drifted across schema versions and is only
trusted after it goes through the normalizer.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class FreightType(str, Enum):
    """Type of freight posting."""

    AGGREGATION = "agregamento"
    FULL_LOAD = "frete_completo"
    RETURN_LOAD = "frete_de_retorno"
    GENERIC = "comum"

    @classmethod
    def _missing_(cls, value: object) -> Optional["FreightType"]:
        # Full loads were written as "completo" by the first submission form
        if value == "completo":
            return cls.FULL_LOAD
        return None

    @property
    def label(self) -> str:
        """Human-readable label."""
        return _FREIGHT_TYPE_LABELS[self]


_FREIGHT_TYPE_LABELS = {
    FreightType.AGGREGATION: "Aggregation",
    FreightType.FULL_LOAD: "Full Load",
    FreightType.RETURN_LOAD: "Return Load",
    FreightType.GENERIC: "Generic Freight",
}


class FreightStatus(str, Enum):
    """Freight lifecycle status."""

    PENDING = "pendente"
    ACTIVE = "ativo"
    ACCEPTED = "aceito"
    IN_PROGRESS = "em_andamento"
    COMPLETED = "concluido"
    CANCELLED = "cancelado"

    @property
    def is_terminal(self) -> bool:
        """Completed and cancelled freights accept no further transitions."""
        return self in (FreightStatus.COMPLETED, FreightStatus.CANCELLED)

    @property
    def label(self) -> str:
        """Human-readable label."""
        return _STATUS_LABELS[self]

    def can_transition_to(self, target: "FreightStatus") -> bool:
        """
        Check whether moving to ``target`` is allowed.

        The forward path is pendente -> ativo -> aceito -> em_andamento ->
        concluido; cancelado is reachable from any non-terminal status.

        Args:
            target: Requested status

        Returns:
            True if the transition is allowed
        """
        if self.is_terminal:
            return False
        if target is FreightStatus.CANCELLED:
            return True
        return _NEXT_STATUS.get(self) is target


_NEXT_STATUS = {
    FreightStatus.PENDING: FreightStatus.ACTIVE,
    FreightStatus.ACTIVE: FreightStatus.ACCEPTED,
    FreightStatus.ACCEPTED: FreightStatus.IN_PROGRESS,
    FreightStatus.IN_PROGRESS: FreightStatus.COMPLETED,
}

_STATUS_LABELS = {
    FreightStatus.PENDING: "Pending",
    FreightStatus.ACTIVE: "Active",
    FreightStatus.ACCEPTED: "Accepted",
    FreightStatus.IN_PROGRESS: "In Progress",
    FreightStatus.COMPLETED: "Completed",
    FreightStatus.CANCELLED: "Cancelled",
}


class Destination(BaseModel):
    """One delivery destination of a submission."""

    id: Optional[str] = None
    city: str
    state: str
    cep: Optional[str] = None
    bairro: Optional[str] = None
    endereco: Optional[str] = None

    def __str__(self) -> str:
        """String representation."""
        return f"{self.city}, {self.state}"


class Stop(BaseModel):
    """Intermediate stop (parada) on the route."""

    id: Optional[str] = None
    city: str
    state: str
    order: int = 0
    tipo_operacao: str = Field("ambos", description="carga, descarga or ambos")
    tempo_estimado: Optional[str] = None
    tempo_permanencia: Optional[int] = Field(None, description="Minutes on site")
    observacoes: Optional[str] = None


class VehicleSelection(BaseModel):
    """Vehicle type toggle from the submission picker."""

    id: Optional[str] = None
    type: str
    category: Optional[str] = Field(None, description="heavy, medium or light")
    selected: bool = False


class BodySelection(BaseModel):
    """Body (carroceria) type toggle from the submission picker."""

    id: Optional[str] = None
    type: str
    category: Optional[str] = Field(None, description="open, closed or special")
    selected: bool = False


class PriceRange(BaseModel):
    """Distance band and its price within a vehicle price table."""

    id: Optional[str] = None
    km_start: Decimal = Field(..., alias="kmStart", ge=0)
    km_end: Decimal = Field(..., alias="kmEnd", ge=0)
    price: Decimal = Field(..., ge=0)

    class Config:
        """Pydantic configuration."""

        populate_by_name = True


class VehiclePriceTable(BaseModel):
    """Price table for one vehicle type (nested shape)."""

    vehicle_type: str = Field(..., alias="vehicleType")
    ranges: list[PriceRange] = Field(default_factory=list)

    class Config:
        """Pydantic configuration."""

        populate_by_name = True


class PriceTableRow(BaseModel):
    """Flat row persisted in the price-table store, keyed by freight id."""

    freight_id: str
    vehicle_type: str
    km_start: Decimal
    km_end: Decimal
    price: Decimal


class Collaborator(BaseModel):
    """Company collaborator responsible for a freight (display only)."""

    id: str
    name: str
    sector: str
    phone: str
    email: Optional[str] = None


class Company(BaseModel):
    """Company owning a freight (display only)."""

    company_name: str
    contact_name: Optional[str] = None
    phone: Optional[str] = None


class FreightRecord(BaseModel):
    """
    Represents a persisted freight posting.

    Mirrors the store row; list fields are left untyped on purpose.
    """

    # Identification
    id: str
    codigo_agregamento: Optional[str] = Field(None, description="Human-readable freight code")
    tipo_frete: str = Field(FreightType.GENERIC.value, description="Freight type tag")
    status: str = Field(FreightStatus.PENDING.value, description="Lifecycle status")

    # Route
    origem_cidade: Optional[str] = None
    origem_estado: Optional[str] = None
    destinos: Any = None
    destino_cidade: Optional[str] = Field(None, description="Legacy direct destination city")
    destino_estado: Optional[str] = Field(None, description="Legacy direct destination state")
    paradas: Any = None
    data_coleta: Optional[str] = Field(None, description="Pickup date (ISO 8601)")
    data_entrega: Optional[str] = Field(None, description="Delivery date (ISO 8601)")

    # Cargo
    tipo_mercadoria: Optional[str] = None
    peso_carga: Optional[Decimal] = None
    valor_carga: Optional[Decimal] = None

    # Vehicles and pricing
    tipos_veiculos: Any = None
    tipos_carrocerias: Any = None
    tabelas_preco: Any = None

    # Extras
    beneficios: Any = None
    regras_agendamento: Any = None
    horario_carregamento: Optional[str] = None
    precisa_ajudante: bool = False
    precisa_rastreador: bool = False
    precisa_seguro: bool = False
    pedagio_pago_por: Optional[str] = None
    pedagio_direcao: Optional[str] = None
    observacoes: Optional[str] = None

    # Ownership
    company_id: Optional[str] = None
    collaborator_ids: Optional[list[str]] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        """Pydantic configuration."""

        extra = "allow"

    @property
    def freight_type(self) -> Optional[FreightType]:
        """Parsed type tag, or None for unknown tags."""
        try:
            return FreightType(self.tipo_frete)
        except ValueError:
            return None

    @property
    def freight_status(self) -> Optional[FreightStatus]:
        """Parsed status, or None for unknown values."""
        try:
            return FreightStatus(self.status)
        except ValueError:
            return None


class FreightSubmission(BaseModel):
    """
    One multi-destination freight form submission.

    The fan-out writer creates one freight per destination from it.
    """

    company_id: Optional[str] = None
    collaborator_ids: list[str] = Field(default_factory=list)
    tipo_frete: FreightType = FreightType.FULL_LOAD

    origem_cidade: str
    origem_estado: str
    destinos: list[Destination] = Field(default_factory=list)
    paradas: list[Stop] = Field(default_factory=list)
    data_coleta: Optional[date] = None
    data_entrega: Optional[date] = None

    tipo_mercadoria: str = ""
    peso_carga: Optional[Decimal] = None
    valor_carga: Optional[Decimal] = None

    tipos_veiculos: list[VehicleSelection] = Field(default_factory=list)
    tipos_carrocerias: list[BodySelection] = Field(default_factory=list)
    vehicle_price_tables: list[VehiclePriceTable] = Field(default_factory=list)

    regras_agendamento: list[str] = Field(default_factory=list)
    beneficios: list[str] = Field(default_factory=list)
    horario_carregamento: Optional[str] = None

    precisa_ajudante: bool = False
    precisa_rastreador: bool = False
    precisa_seguro: bool = False
    pedagio_pago_por: Optional[str] = None
    pedagio_direcao: Optional[str] = None
    observacoes: Optional[str] = None

    def base_payload(self) -> dict[str, Any]:
        """
        Build the attributes shared by every freight of this submission.

        Only selected vehicle and body entries are persisted; empty optional
        text fields are stored as None.

        Returns:
            Store payload without ``destinos``
        """
        payload: dict[str, Any] = {
            "company_id": self.company_id,
            "collaborator_ids": list(self.collaborator_ids),
            "origem_cidade": self.origem_cidade,
            "origem_estado": self.origem_estado,
            "data_coleta": _json_date(self.data_coleta),
            "data_entrega": _json_date(self.data_entrega),
            "tipo_mercadoria": self.tipo_mercadoria,
            "peso_carga": _json_number(self.peso_carga),
            "valor_carga": _json_number(self.valor_carga),
            "tipos_veiculos": [
                v.model_dump(exclude_none=True) for v in self.tipos_veiculos if v.selected
            ],
            "tipos_carrocerias": [
                b.model_dump(exclude_none=True) for b in self.tipos_carrocerias if b.selected
            ],
            "regras_agendamento": list(self.regras_agendamento),
            "beneficios": list(self.beneficios),
            "horario_carregamento": self.horario_carregamento or None,
            "precisa_ajudante": self.precisa_ajudante,
            "precisa_rastreador": self.precisa_rastreador,
            "precisa_seguro": self.precisa_seguro,
            "pedagio_pago_por": self.pedagio_pago_por or None,
            "pedagio_direcao": self.pedagio_direcao or None,
            "observacoes": self.observacoes or None,
            "tipo_frete": self.tipo_frete.value,
        }
        if self.paradas:
            payload["paradas"] = [p.model_dump(exclude_none=True) for p in self.paradas]
        return payload


class CreatedFreight(BaseModel):
    """Summary of one freight created by the fan-out writer."""

    id: str
    codigo_agregamento: str = "N/A"
    destino_cidade: str
    destino_estado: str


def _json_number(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


def _json_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None
