from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Service:
    id: int
    name: str
    duration_minutes: int
    price: Decimal

    @property
    def label(self) -> str:
        if self.duration_minutes:
            return f"{self.name} ({self.duration_minutes} min)"
        return self.name
