from __future__ import annotations

from abc import ABC, abstractmethod

from barber_booking.application.dto.api_result import ApiResult
from barber_booking.application.dto.booking_payloads import ReservationEchoDTO
from barber_booking.domain.entities.reservation import ReservationRequest
from barber_booking.domain.entities.service import Service


class BookingApiPort(ABC):
    @abstractmethod
    async def list_services(self) -> ApiResult[list[Service]]:
        """List bookable services."""
        raise NotImplementedError

    @abstractmethod
    async def list_slots(self, service_id: int, date: str) -> ApiResult[list[str]]:
        """List raw available slots for a service on a YYYY-MM-DD date."""
        raise NotImplementedError

    @abstractmethod
    async def create_reservation(self, request: ReservationRequest) -> ApiResult[ReservationEchoDTO]:
        """Create a reservation. The value echoes the stored date/time when the backend sends it."""
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release transport resources."""
        return None
