from __future__ import annotations

from datetime import datetime
from typing import Any

from barber_booking.application.utils.date_range import format_date_input
from barber_booking.application.utils.time_slots import END_MIN, START_MIN, minutes_from_time_str
from barber_booking.domain.entities.local_blocks import LocalBlockSet


def within_business_hours(slots: list[str]) -> list[str]:
    in_range: list[str] = []
    for slot in slots:
        minutes = minutes_from_time_str(slot)
        if START_MIN <= minutes <= END_MIN:
            in_range.append(slot)
    return in_range


def drop_blocked(slots: list[str], date: str, blocks: LocalBlockSet) -> list[str]:
    if not blocks.blocked(date):
        return slots
    return [slot for slot in slots if not blocks.is_blocked(date, slot)]


def drop_past(slots: list[str], date: str, now: datetime) -> list[str]:
    if date != format_date_input(now):
        return slots
    now_min = now.hour * 60 + now.minute
    return [slot for slot in slots if minutes_from_time_str(slot) > now_min]


def filter_available_slots(raw: Any, date: str, blocks: LocalBlockSet, now: datetime) -> list[str]:
    """Narrow a raw slot list to what can be offered for `date` right now.

    Order matters: business-hours range, then this session's reservations,
    then (only for today) slots that already started.
    """
    if not isinstance(raw, list):
        return []
    slots = within_business_hours(raw)
    slots = drop_blocked(slots, date, blocks)
    return drop_past(slots, date, now)
