from __future__ import annotations

import re

START_MIN = 9 * 60 + 30  # 09:30
END_MIN = 20 * 60 + 30  # 20:30
STEP_MIN = 30

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(part: str) -> int | None:
    match = _LEADING_INT.match(part)
    return int(match.group(1)) if match else None


def minutes_from_time_str(text: str | None) -> int:
    """Minutes since midnight for "HH:MM[:SS]", or -1 when it cannot be read.

    Each field is read from its leading digits, so "09:3x" is 09:03.
    """
    if not text:
        return -1
    parts = str(text)[:5].split(":")
    if len(parts) < 2:
        return -1
    hours = _leading_int(parts[0])
    minutes = _leading_int(parts[1])
    if hours is None or minutes is None:
        return -1
    return hours * 60 + minutes


def time_str_from_minutes(total: int) -> str:
    return f"{total // 60:02d}:{total % 60:02d}"


def generate_base_slots() -> list[str]:
    slots: list[str] = []
    current = START_MIN
    while current <= END_MIN:
        slots.append(time_str_from_minutes(current))
        current += STEP_MIN
    return slots


def display_time(slot: str | None) -> str:
    return (slot or "")[:5]
