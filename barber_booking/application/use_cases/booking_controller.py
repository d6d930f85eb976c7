from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Awaitable, Callable, TypeVar

from barber_booking.application.dto.api_result import ApiResult
from barber_booking.application.dto.booking_payloads import ReservationEchoDTO
from barber_booking.application.ports.booking_api import BookingApiPort
from barber_booking.application.use_cases.slot_poller import SlotPoller
from barber_booking.application.utils.availability import filter_available_slots
from barber_booking.application.utils.date_range import allowed_date_range, clamp_date, format_date_input
from barber_booking.application.utils.fallback_services import FALLBACK_SERVICES
from barber_booking.application.utils.phone import format_phone_ar, is_valid_phone_ar
from barber_booking.application.utils.time_slots import display_time, generate_base_slots
from barber_booking.domain.entities.booking_form_state import BookingFormState, FormMessage
from barber_booking.domain.entities.local_blocks import LocalBlockSet
from barber_booking.domain.entities.reservation import ReservationConfirmation, ReservationRequest
from barber_booking.domain.entities.service import Service

T = TypeVar("T")

EMPTY_SLOTS_MESSAGE = "No hay horarios disponibles para la fecha seleccionada."


class BookingController:
    """State and behaviour of the booking form.

    All mutation happens on the event loop that drives the controller. Slot
    fetches are tagged with the selection generation and an issue number so a
    response for an old service/date pair, or one overtaken by a newer fetch,
    is dropped instead of replacing the list.
    """

    def __init__(
        self,
        api: BookingApiPort,
        poll_interval_seconds: float = 15.0,
        booking_year: int = 2025,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._api = api
        self._year = booking_year
        self._clock = clock
        self._poller = SlotPoller(poll_interval_seconds, self._poll_slots)
        self._background: set[asyncio.Task[None]] = set()
        self._generation = 0
        self._issued = 0
        self._applied = 0
        self._logger = logging.getLogger(__name__)

        self.blocks = LocalBlockSet()
        self.state = BookingFormState(date=self.min_date)

    # Date bounds

    @property
    def today(self) -> str:
        return format_date_input(self._clock())

    @property
    def min_date(self) -> str:
        return allowed_date_range(self.today, self._year)[0]

    @property
    def max_date(self) -> str:
        return allowed_date_range(self.today, self._year)[1]

    # Read helpers for whatever renders the form

    @property
    def selected_service(self) -> Service | None:
        return next((s for s in self.state.services if s.id == self.state.service_id), None)

    def service_options(self) -> list[tuple[int, str]]:
        return [(service.id, service.label) for service in self.state.services]

    @property
    def selected_time_label(self) -> str:
        return display_time(self.state.time)

    @property
    def empty_slots_message(self) -> str:
        if self.state.slots_loading or self.state.slots:
            return ""
        return EMPTY_SLOTS_MESSAGE

    @property
    def polling(self) -> bool:
        return self._poller.running

    # Services, dates, slots

    async def load_services(self) -> None:
        self.state.services_loading = True
        try:
            result = await self._api.list_services()
        finally:
            self.state.services_loading = False

        services, _ = self._with_fallback(result, lambda: list(FALLBACK_SERVICES), "services")
        self.state.services = services
        if services:
            await self.select_service(services[0].id)

    async def select_service(self, service_id: int | str | None) -> None:
        parsed = _parse_service_id(service_id)
        if parsed == self.state.service_id:
            return
        self.state.service_id = parsed
        await self._selection_changed()

    async def select_date(self, candidate: str | None) -> None:
        clamped = clamp_date(candidate, self.today, self._year)
        if clamped == self.state.date:
            return
        self.state.date = clamped
        await self._selection_changed()

    async def load_slots(self) -> None:
        service_id, date = self.state.service_id, self.state.date
        if service_id is None or not date:
            self.state.slots = []
            self.state.slots_loading = False
            return

        self.state.slots_loading = True
        self.state.time = ""
        generation, issued = self._issue()
        try:
            result = await self._api.list_slots(service_id, date)
        finally:
            if generation == self._generation:
                self.state.slots_loading = False

        raw, _ = self._with_fallback(result, generate_base_slots, "slots")
        self._apply_slots(raw, date, generation, issued)

    def select_time(self, slot: str) -> bool:
        match = next((s for s in self.state.slots if s == slot or display_time(s) == slot), None)
        self.state.time = match or ""
        return match is not None

    # Contact fields

    def set_name(self, name: str) -> None:
        self.state.name = name

    def set_phone(self, text: str) -> None:
        self.state.phone = format_phone_ar(text)

    def blur_phone(self) -> None:
        self.state.phone = format_phone_ar(self.state.phone)

    # Submission

    def validate(self) -> str:
        if self.state.service_id is None:
            return "Selecciona un servicio"
        if not self.state.date:
            return "Selecciona una fecha válida"
        if not self.state.time:
            return "Selecciona un horario disponible"
        if len(self.state.name.strip()) < 2:
            return "Ingresa un nombre válido"
        if not is_valid_phone_ar(self.state.phone):
            return "Teléfono inválido. Ej: +54 11 1234-5678"
        return ""

    async def submit(self) -> ReservationConfirmation | None:
        self.state.message = FormMessage()
        error = self.validate()
        if error:
            self.state.message = FormMessage(kind="error", text=error)
            return None

        chosen_time, date = self.state.time, self.state.date
        request = ReservationRequest(
            name=self.state.name,
            phone=self.state.phone,
            service_id=int(self.state.service_id),
            date=date,
            time=chosen_time,
        )

        self.state.submitting = True
        try:
            result = await self._api.create_reservation(request)
        finally:
            self.state.submitting = False

        # Backend failures still end in a confirmation, marked as simulated.
        echo, simulated = self._with_fallback(
            result,
            lambda: ReservationEchoDTO(fecha=date, hora=chosen_time),
            "reservation",
        )
        confirmation = ReservationConfirmation(
            date=echo.fecha or date,
            time=echo.hora or chosen_time,
            simulated=simulated,
        )
        self._reservation_succeeded(chosen_time, date, confirmation)
        return confirmation

    # Lifecycle

    async def settle(self) -> None:
        """Wait for background slot refreshes started by a reservation."""
        if self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)

    async def close(self) -> None:
        self._poller.cancel()
        for task in list(self._background):
            task.cancel()
        await self.settle()
        await self._api.aclose()

    # Internals

    def _with_fallback(self, result: ApiResult[T], fallback: Callable[[], T], what: str) -> tuple[T, bool]:
        """Unwrap a port result, substituting local data on any failure.

        Returns the value and whether the fallback was used.
        """
        if result.ok and result.value is not None:
            return result.value, False
        self._logger.warning(
            "Backend unavailable, using local %s",
            what,
            extra={"service_id": self.state.service_id, "date": self.state.date, "error": result.error},
        )
        return fallback(), True

    async def _selection_changed(self) -> None:
        self._generation += 1
        self._poller.cancel()
        await self.load_slots()
        if self.state.service_id is not None and self.state.date:
            self._poller.restart()

    def _issue(self) -> tuple[int, int]:
        self._issued += 1
        return self._generation, self._issued

    def _apply_slots(self, raw: list[str], date: str, generation: int, issued: int) -> bool:
        if generation != self._generation or issued <= self._applied:
            self._logger.debug("Discarding stale slot list", extra={"date": date})
            return False
        self._applied = issued
        self.state.slots = filter_available_slots(raw, date, self.blocks, self._clock())
        return True

    async def _refresh_slots(self) -> None:
        service_id, date = self.state.service_id, self.state.date
        if service_id is None or not date:
            return
        generation, issued = self._issue()
        result = await self._api.list_slots(service_id, date)
        if not result.ok or result.value is None:
            self._logger.debug("Slot refresh failed", extra={"date": date, "error": result.error})
            return
        self._apply_slots(result.value, date, generation, issued)

    async def _poll_slots(self) -> None:
        await self._refresh_slots()

    async def _background_refresh(self) -> None:
        try:
            await self._refresh_slots()
        except Exception as e:
            self._logger.debug("Background slot refresh failed", extra={"error": str(e)})

    def _spawn(self, coro: Awaitable[None]) -> None:
        task = asyncio.ensure_future(coro)
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    def _reservation_succeeded(self, chosen_time: str, date: str, confirmation: ReservationConfirmation) -> None:
        self.state.message = FormMessage(kind="ok", text=confirmation.message)
        self.state.slots = [slot for slot in self.state.slots if slot != chosen_time]
        self.blocks.add(date, chosen_time)
        self.state.time = ""
        self.state.name = ""
        self.state.phone = ""
        self._logger.info(
            "Reservation confirmed",
            extra={
                "service_id": self.state.service_id,
                "date": confirmation.date,
                "time": confirmation.time,
                "simulated": confirmation.simulated,
            },
        )
        self._spawn(self._background_refresh())


def _parse_service_id(value: int | str | None) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
