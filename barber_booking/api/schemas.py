from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ServiceSchema(BaseModel):
    id: int
    nombre: str
    duracion: int
    precio: float


class SlotListSchema(BaseModel):
    horarios: list[str] = Field(default_factory=list)


class ReservationInSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="nombre", min_length=2)
    phone: str = Field(alias="telefono", pattern=r"^\+54\s\d{2}\s\d{4}-\d{4}$")
    service_id: int = Field(alias="servicio")
    date: str = Field(alias="fecha", pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: str = Field(alias="hora")


class ReservationOutSchema(BaseModel):
    id: int
    nombre: str
    telefono: str
    servicio: int
    fecha: str
    hora: str


class ReservationCreatedSchema(BaseModel):
    reserva: ReservationOutSchema
