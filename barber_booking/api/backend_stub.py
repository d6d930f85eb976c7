"""
In-memory stand-in for the booking backend, for local development.

Serves the same three endpoints the form consumes. One chair: a slot taken
for a date is taken for every service.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from barber_booking.api.schemas import (
    ReservationCreatedSchema,
    ReservationInSchema,
    ReservationOutSchema,
    ServiceSchema,
    SlotListSchema,
)
from barber_booking.application.utils.fallback_services import FALLBACK_SERVICES
from barber_booking.application.utils.time_slots import display_time, generate_base_slots
from barber_booking.domain.entities.service import Service

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


class ReservationBook:
    def __init__(self, services: tuple[Service, ...] = FALLBACK_SERVICES) -> None:
        self._services = {service.id: service for service in services}
        self._reservations: list[ReservationOutSchema] = []

    @property
    def services(self) -> list[Service]:
        return list(self._services.values())

    def has_service(self, service_id: int) -> bool:
        return service_id in self._services

    def taken(self, date: str) -> set[str]:
        return {r.hora for r in self._reservations if r.fecha == date}

    def free_slots(self, date: str) -> list[str]:
        taken = self.taken(date)
        return [slot for slot in generate_base_slots() if slot not in taken]

    def reserve(self, data: ReservationInSchema) -> ReservationOutSchema:
        reservation = ReservationOutSchema(
            id=len(self._reservations) + 1,
            nombre=data.name.strip(),
            telefono=data.phone,
            servicio=data.service_id,
            fecha=data.date,
            hora=display_time(data.time),
        )
        self._reservations.append(reservation)
        return reservation


def _book(request: Request) -> ReservationBook:
    return request.app.state.reservation_book


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/servicios", response_model=list[ServiceSchema])
def list_services(request: Request) -> list[ServiceSchema]:
    return [
        ServiceSchema(id=s.id, nombre=s.name, duracion=s.duration_minutes, precio=float(s.price))
        for s in _book(request).services
    ]


@router.get("/horarios", response_model=SlotListSchema)
def list_slots(
    request: Request,
    servicio_id: int = Query(..., alias="servicioId"),
    fecha: str = Query(..., pattern=r"^\d{4}-\d{2}-\d{2}$"),
):
    book = _book(request)
    if not book.has_service(servicio_id):
        return _error(404, "Servicio inexistente")
    return SlotListSchema(horarios=book.free_slots(fecha))


@router.post("/reservas", status_code=201, response_model=ReservationCreatedSchema)
def create_reservation(request: Request, data: ReservationInSchema):
    book = _book(request)
    if not book.has_service(data.service_id):
        return _error(404, "Servicio inexistente")
    hora = display_time(data.time)
    if hora not in generate_base_slots():
        return _error(400, "Horario fuera del rango de atención")
    if hora in book.taken(data.date):
        logger.info("Slot already taken", extra={"date": data.date, "time": hora})
        return _error(409, "El horario ya fue reservado")

    reservation = book.reserve(data)
    logger.info("Reservation stored", extra={"service_id": data.service_id, "date": data.date, "time": hora})
    return ReservationCreatedSchema(reserva=reservation)
