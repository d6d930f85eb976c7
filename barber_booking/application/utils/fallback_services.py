from __future__ import annotations

from decimal import Decimal

from barber_booking.domain.entities.service import Service

FALLBACK_SERVICES: tuple[Service, ...] = (
    Service(id=4, name="Corte", duration_minutes=30, price=Decimal("1500.0")),
    Service(id=5, name="Corte y Barba", duration_minutes=45, price=Decimal("2500.0")),
    Service(id=6, name="Afeitado", duration_minutes=30, price=Decimal("1800.0")),
)
