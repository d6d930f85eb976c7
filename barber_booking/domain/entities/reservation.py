from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReservationRequest:
    name: str
    phone: str  # "+54 XX XXXX-XXXX"
    service_id: int
    date: str  # YYYY-MM-DD
    time: str  # HH:MM[:SS]


@dataclass(frozen=True)
class ReservationConfirmation:
    date: str
    time: str
    simulated: bool = False

    @property
    def message(self) -> str:
        suffix = " (simulada)" if self.simulated else ""
        return f"Reserva confirmada{suffix}: {self.date} {self.time}"
