from __future__ import annotations

from dataclasses import dataclass, field

from barber_booking.domain.entities.service import Service


@dataclass(frozen=True)
class FormMessage:
    kind: str = ""  # "", "ok", "error"
    text: str = ""


@dataclass
class BookingFormState:
    services: list[Service] = field(default_factory=list)
    services_loading: bool = False
    service_id: int | None = None

    date: str = ""  # YYYY-MM-DD
    slots: list[str] = field(default_factory=list)
    slots_loading: bool = False
    time: str = ""

    name: str = ""
    phone: str = ""
    submitting: bool = False
    message: FormMessage = field(default_factory=FormMessage)
