from __future__ import annotations


class LocalBlockSet:
    """Slots reserved during this session, keyed by date.

    Entries are only ever added; the set lives as long as the controller.
    """

    def __init__(self) -> None:
        self._by_date: dict[str, set[str]] = {}

    def add(self, date: str, time: str) -> None:
        self._by_date.setdefault(date, set()).add(time)

    def blocked(self, date: str) -> frozenset[str]:
        return frozenset(self._by_date.get(date, ()))

    def is_blocked(self, date: str, time: str) -> bool:
        return time in self._by_date.get(date, ())
