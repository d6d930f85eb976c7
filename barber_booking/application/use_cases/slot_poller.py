from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable


class SlotPoller:
    """Runs `on_tick` every `interval_seconds` on a single cancellable task.

    Cancelling the task also cancels a tick that is still awaiting the network,
    so a superseded cycle never reaches the point where it applies its result.
    """

    def __init__(self, interval_seconds: float, on_tick: Callable[[], Awaitable[None]]) -> None:
        self._interval = interval_seconds
        self._on_tick = on_tick
        self._task: asyncio.Task[None] | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def restart(self) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run())

    def cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self._on_tick()
            except Exception as e:
                self._logger.warning("Slot poll tick failed", extra={"error": str(e)})
