from __future__ import annotations

import asyncio
from datetime import datetime

import pytest

from barber_booking.application.dto.api_result import ApiResult
from barber_booking.application.dto.booking_payloads import ReservationEchoDTO
from barber_booking.application.ports.booking_api import BookingApiPort
from barber_booking.domain.entities.reservation import ReservationRequest
from barber_booking.domain.entities.service import Service

FIXED_NOW = datetime(2025, 6, 15, 9, 45)


class FakeBookingApi(BookingApiPort):
    """Scriptable port: canned results, optional per-date gates, call log."""

    def __init__(self) -> None:
        self.services_result: ApiResult[list[Service]] = ApiResult.failure("down")
        self.slots_by_date: dict[str, list[str]] = {}
        self.slots_down = True
        self.reservation_result: ApiResult[ReservationEchoDTO] = ApiResult.failure("down")
        self.gates: dict[str, asyncio.Event] = {}
        self.slot_calls: list[tuple[int, str]] = []
        self.reservations: list[ReservationRequest] = []
        self.closed = False

    async def list_services(self) -> ApiResult[list[Service]]:
        return self.services_result

    async def list_slots(self, service_id: int, date: str) -> ApiResult[list[str]]:
        self.slot_calls.append((service_id, date))
        gate = self.gates.get(date)
        if gate is not None:
            await gate.wait()
        if self.slots_down:
            return ApiResult.failure("down")
        return ApiResult.success(list(self.slots_by_date.get(date, [])))

    async def create_reservation(self, request: ReservationRequest) -> ApiResult[ReservationEchoDTO]:
        self.reservations.append(request)
        return self.reservation_result

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def fake_api() -> FakeBookingApi:
    return FakeBookingApi()
