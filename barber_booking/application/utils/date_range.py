from __future__ import annotations

from datetime import date, datetime


def format_date_input(value: date | datetime) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def allowed_date_range(today: str, year: int) -> tuple[str, str]:
    """Return the (min, max) bookable dates as YYYY-MM-DD strings.

    The minimum is today or the first day of the booking year, whichever is
    later, and never goes past the last day of that year.
    """
    start = f"{year:04d}-01-01"
    end = f"{year:04d}-12-31"
    if today < start:
        return start, end
    if today > end:
        return end, end
    return today, end


def clamp_date(candidate: str | None, today: str, year: int) -> str:
    """Snap a YYYY-MM-DD string into the bookable range.

    Strings compare lexicographically because the format is fixed-width.
    """
    min_allowed, max_allowed = allowed_date_range(today, year)
    if not candidate:
        return min_allowed
    if candidate < min_allowed:
        return min_allowed
    if candidate > max_allowed:
        return max_allowed
    return candidate
