"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Timing-control primitives for asyncio code.

Quick start::

    from fnflow.timing import concurrent_n, debounce_promise, timeout, wait

    search = debounce_promise(fetch_suggestions, 0.25)
    results = await timeout(search("py"), 2.0)

    run = concurrent_n(2)(load_a, load_b, load_c)
    a, b, c = await run(session)
"""

from .coalesce import DebouncedCoroutine, debounce_promise
from .compose import queue
from .concurrency import ConcurrentRunner, concurrent_n
from .debounce import Debouncer, Throttler, debounce, throttle
from .promises import (
    Deferred,
    Reflection,
    always_resolve,
    as_future,
    call_as_future,
    chain_future,
    deferred,
    reflect,
    settle_from,
)
from .race import timeout
from .timers import TimerSlot, wait

__all__ = [
    "wait",
    "TimerSlot",
    "debounce",
    "throttle",
    "Debouncer",
    "Throttler",
    "debounce_promise",
    "DebouncedCoroutine",
    "concurrent_n",
    "ConcurrentRunner",
    "timeout",
    "queue",
    "always_resolve",
    "deferred",
    "Deferred",
    "reflect",
    "Reflection",
    "as_future",
    "call_as_future",
    "chain_future",
    "settle_from",
]
