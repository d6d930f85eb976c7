"""
Tests for the cancellable periodic slot poll.
"""

from __future__ import annotations

import asyncio

from barber_booking.application.use_cases.slot_poller import SlotPoller


def test_poller_ticks_until_cancelled():
    """Test that the poller ticks repeatedly and stops when cancelled."""
    async def scenario():
        ticks: list[int] = []

        async def tick():
            ticks.append(1)

        poller = SlotPoller(0.01, tick)
        poller.restart()
        await asyncio.sleep(0.08)
        assert poller.running
        poller.cancel()
        seen = len(ticks)
        await asyncio.sleep(0.05)
        return seen, len(ticks), poller.running

    seen, after, running = asyncio.run(scenario())

    assert seen >= 2
    assert after == seen
    assert running is False


def test_failing_tick_does_not_stop_polling():
    """Test that an exception in one tick does not end polling."""
    async def scenario():
        calls: list[int] = []

        async def tick():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("boom")

        poller = SlotPoller(0.01, tick)
        poller.restart()
        await asyncio.sleep(0.08)
        poller.cancel()
        return len(calls)

    assert asyncio.run(scenario()) >= 2


def test_restart_cancels_in_flight_tick():
    """Test that restarting cancels a tick still waiting on the network."""
    async def scenario():
        started = asyncio.Event()
        cancelled: list[bool] = []

        async def hanging_tick():
            started.set()
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                cancelled.append(True)
                raise

        poller = SlotPoller(0.01, hanging_tick)
        poller.restart()
        await asyncio.wait_for(started.wait(), timeout=1)
        poller.restart()
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        poller.cancel()
        return cancelled

    assert asyncio.run(scenario()) == [True]
