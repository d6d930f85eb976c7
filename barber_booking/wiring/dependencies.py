from datetime import datetime
from typing import Callable

from barber_booking.application.ports.booking_api import BookingApiPort
from barber_booking.application.use_cases.booking_controller import BookingController
from barber_booking.core.config import settings
from barber_booking.infrastructure.api.http_booking_api import HttpBookingApi
from barber_booking.infrastructure.api.offline_booking_api import OfflineBookingApi


def get_booking_api() -> BookingApiPort:
    if settings.BOOKING_OFFLINE:
        return OfflineBookingApi()
    return HttpBookingApi(
        base_url=settings.BOOKING_API_BASE_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


def get_booking_controller(
    api: BookingApiPort | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> BookingController:
    return BookingController(
        api=api or get_booking_api(),
        poll_interval_seconds=settings.SLOTS_POLL_INTERVAL_SECONDS,
        booking_year=settings.BOOKING_YEAR,
        clock=clock,
    )
