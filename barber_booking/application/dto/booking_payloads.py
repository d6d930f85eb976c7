from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from barber_booking.domain.entities.reservation import ReservationRequest
from barber_booking.domain.entities.service import Service


class ServiceDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    name: str = Field(alias="nombre")
    duration_minutes: int = Field(default=0, alias="duracion")
    price: Decimal = Field(default=Decimal("0"), alias="precio")

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def _empty_duration(cls, value: Any) -> Any:
        return 0 if value is None else value

    def to_entity(self) -> Service:
        return Service(
            id=self.id,
            name=self.name,
            duration_minutes=self.duration_minutes,
            price=self.price,
        )


class SlotListDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    horarios: list[str] = Field(default_factory=list)

    @field_validator("horarios", mode="before")
    @classmethod
    def _non_list_is_empty(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [str(item) for item in value]


class ReservationBodyDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(serialization_alias="nombre")
    phone: str = Field(serialization_alias="telefono")
    service_id: int = Field(serialization_alias="servicio")
    date: str = Field(serialization_alias="fecha")
    time: str = Field(serialization_alias="hora")

    @classmethod
    def from_request(cls, request: ReservationRequest) -> "ReservationBodyDTO":
        return cls(
            name=request.name,
            phone=request.phone,
            service_id=request.service_id,
            date=request.date,
            time=request.time,
        )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ReservationEchoDTO(BaseModel):
    model_config = ConfigDict(extra="allow")

    fecha: str | None = None
    hora: str | None = None


class ReservationResponseDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    reserva: ReservationEchoDTO | None = None


class ErrorResponseDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    error: str | None = None
