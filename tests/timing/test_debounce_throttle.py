from __future__ import annotations

import asyncio

import pytest

from fnflow import debounce, noop, throttle


def run_async(coro):
    return asyncio.run(coro)


def test_trailing_debounce_runs_once_with_last_arguments():
    async def scenario() -> None:
        calls: list[int] = []
        debounced = debounce(calls.append, 0.05)

        assert debounced(1) is None
        debounced(2)
        debounced(3)
        assert calls == []

        await asyncio.sleep(0.12)
        assert calls == [3]
        assert debounced.pending is False

    run_async(scenario())


def test_trailing_debounce_keeps_resetting_while_calls_arrive():
    async def scenario() -> None:
        calls: list[int] = []
        debounced = debounce(calls.append, 0.05)

        for value in range(5):
            debounced(value)
            await asyncio.sleep(0.01)
        assert calls == []

        await asyncio.sleep(0.12)
        assert calls == [4]

    run_async(scenario())


def test_immediate_debounce_runs_leading_call_synchronously():
    async def scenario() -> None:
        calls: list[int] = []

        def record(value: int) -> int:
            calls.append(value)
            return value * 10

        debounced = debounce(record, 0.05, immediate=True)

        assert debounced(1) == 10
        assert debounced(2) is None
        assert debounced(3) is None
        assert calls == [1]

        await asyncio.sleep(0.12)
        assert calls == [1]

        assert debounced(4) == 40
        assert calls == [1, 4]

    run_async(scenario())


def test_debounce_cancel_is_idempotent():
    async def scenario() -> None:
        calls: list[int] = []
        debounced = debounce(calls.append, 0.03)

        debounced(1)
        assert debounced.pending is True
        debounced.cancel()
        debounced.cancel()
        assert debounced.pending is False

        await asyncio.sleep(0.08)
        assert calls == []

        debounced(2)
        await asyncio.sleep(0.08)
        assert calls == [2]

    run_async(scenario())


def test_debounce_flush_runs_pending_call_now():
    async def scenario() -> None:
        calls: list[int] = []

        def record(value: int) -> str:
            calls.append(value)
            return f"ran:{value}"

        debounced = debounce(record, 0.05)
        assert debounced.flush() is None

        debounced(1)
        debounced(2)
        assert debounced.flush() == "ran:2"
        assert calls == [2]
        assert debounced.pending is False

        await asyncio.sleep(0.1)
        assert calls == [2]

    run_async(scenario())


def test_debounce_preserves_wrapped_metadata():
    def handler() -> None:
        """Handle things."""

    debounced = debounce(handler, 0.01)
    assert debounced.__name__ == "handler"
    assert debounced.__doc__ == "Handle things."
    assert debounced.delay_s == 0.01


def test_debounce_requires_running_loop():
    debounced = debounce(noop, 0.01)
    with pytest.raises(RuntimeError):
        debounced()


def test_negative_delay_is_rejected():
    with pytest.raises(ValueError):
        debounce(noop, -1)


def test_trailing_throttle_replays_first_call_of_window():
    async def scenario() -> None:
        calls: list[int] = []
        throttled = throttle(calls.append, 0.05)

        throttled(1)
        throttled(2)
        throttled(3)
        assert calls == []

        await asyncio.sleep(0.12)
        assert calls == [1]

    run_async(scenario())


def test_throttle_drops_calls_without_resetting_window():
    async def scenario() -> None:
        calls: list[int] = []
        throttled = throttle(calls.append, 0.1)

        throttled(1)
        await asyncio.sleep(0.08)
        assert throttled(2) is None
        await asyncio.sleep(0.06)
        assert calls == [1]
        assert throttled.pending is False

    run_async(scenario())


def test_immediate_throttle_runs_leading_call_once_per_window():
    async def scenario() -> None:
        calls: list[int] = []

        def record(value: int) -> int:
            calls.append(value)
            return value

        throttled = throttle(record, 0.05, immediate=True)

        assert throttled(1) == 1
        assert throttled(2) is None
        assert throttled(3) is None
        assert calls == [1]

        await asyncio.sleep(0.1)
        assert calls == [1]

        assert throttled(4) == 4
        assert calls == [1, 4]

    run_async(scenario())


def test_throttle_cancel_twice_is_noop():
    async def scenario() -> None:
        calls: list[int] = []
        throttled = throttle(calls.append, 0.03)

        throttled(1)
        throttled.cancel()
        throttled.cancel()
        await asyncio.sleep(0.06)
        assert calls == []

        throttled(2)
        assert throttled.flush() is None
        assert calls == [2]

    run_async(scenario())
