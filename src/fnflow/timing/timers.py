"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Timer primitives on top of the running asyncio loop.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

from ..config import resolve_delay
from ..fns import noop


def _resolve_later(future: asyncio.Future[None]) -> None:
    if not future.done():
        future.set_result(None)


def wait(
    delay_s: float | None = None,
    handler: Callable[[asyncio.TimerHandle], Any] = noop,
) -> asyncio.Future[None]:
    """
    Return a future that resolves to ``None`` after `delay_s` seconds.

    `handler` receives the underlying ``asyncio.TimerHandle``. Cancelling
    that handle leaves the future pending forever.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[None] = loop.create_future()
    handle = loop.call_later(resolve_delay(delay_s), _resolve_later, future)
    handler(handle)
    return future


class TimerSlot:
    """Holds at most one pending timer handle for a controller."""

    def __init__(self, delay_s: float) -> None:
        self.delay_s = delay_s
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, callback: Callable[[], Any]) -> asyncio.TimerHandle:
        """Replace any pending timer with one that runs `callback` after the delay."""
        self.cancel()
        loop = asyncio.get_running_loop()
        handle = loop.call_later(self.delay_s, self._fire, callback)
        self._handle = handle
        return handle

    def cancel(self) -> bool:
        """Cancel the pending timer. Returns whether one was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        return True

    def _fire(self, callback: Callable[[], Any]) -> None:
        self._handle = None
        callback()
