from __future__ import annotations

import logging

from barber_booking.application.dto.api_result import ApiResult
from barber_booking.application.dto.booking_payloads import ReservationEchoDTO
from barber_booking.application.ports.booking_api import BookingApiPort
from barber_booking.domain.entities.reservation import ReservationRequest
from barber_booking.domain.entities.service import Service

OFFLINE_ERROR = "booking backend disabled (offline mode)"


class OfflineBookingApi(BookingApiPort):
    """Port that never reaches a backend, so the controller always uses fallback data."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def list_services(self) -> ApiResult[list[Service]]:
        return ApiResult.failure(OFFLINE_ERROR)

    async def list_slots(self, service_id: int, date: str) -> ApiResult[list[str]]:
        return ApiResult.failure(OFFLINE_ERROR)

    async def create_reservation(self, request: ReservationRequest) -> ApiResult[ReservationEchoDTO]:
        self._logger.info("Offline reservation not sent", extra={"date": request.date, "time": request.time})
        return ApiResult.failure(OFFLINE_ERROR)
