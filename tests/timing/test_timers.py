from __future__ import annotations

import asyncio

from fnflow.timing import TimerSlot, wait


def run_async(coro):
    return asyncio.run(coro)


def test_wait_resolves_after_delay():
    async def scenario() -> None:
        loop = asyncio.get_running_loop()
        started = loop.time()
        assert await wait(0.02) is None
        assert loop.time() - started >= 0.015

    run_async(scenario())


def test_wait_handler_receives_cancellable_handle():
    async def scenario() -> None:
        handles: list[asyncio.TimerHandle] = []
        future = wait(0.02, handles.append)

        assert len(handles) == 1
        handles[0].cancel()
        await asyncio.sleep(0.05)
        assert not future.done()

    run_async(scenario())


def test_timer_slot_keeps_a_single_pending_handle():
    async def scenario() -> None:
        fired: list[str] = []
        slot = TimerSlot(0.02)

        slot.schedule(lambda: fired.append("first"))
        slot.schedule(lambda: fired.append("second"))
        assert slot.pending is True

        await asyncio.sleep(0.06)
        assert fired == ["second"]
        assert slot.pending is False

    run_async(scenario())


def test_timer_slot_cancel_reports_whether_pending():
    async def scenario() -> None:
        fired: list[str] = []
        slot = TimerSlot(0.02)

        slot.schedule(lambda: fired.append("x"))
        assert slot.cancel() is True
        assert slot.cancel() is False

        await asyncio.sleep(0.04)
        assert fired == []

    run_async(scenario())
