"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Debounce for functions whose results are awaited.

Every caller gets a future. Callers that land in the same window share one
invocation of the wrapped function and receive the same outcome.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from functools import update_wrapper
from typing import Any

from ..config import resolve_delay
from .promises import call_as_future, chain_future
from .timers import TimerSlot

logger = logging.getLogger("fnflow.timing.coalesce")


class DebouncedCoroutine:
    """
    Coalesce bursts of calls into one invocation whose outcome fans out.

    In trailing mode the wrapped function runs when the window elapses,
    with the arguments of the last call, and its outcome settles every
    waiter queued in that window. In immediate mode the first call of a
    window runs the function at once; later calls in the window settle
    with that same leading outcome when the window closes.
    """

    def __init__(self, fn: Callable[..., Any], delay_s: float | None, immediate: bool) -> None:
        update_wrapper(self, fn, updated=())
        self._fn = fn
        self._immediate = immediate
        self._slot = TimerSlot(resolve_delay(delay_s))
        self._waiters: list[asyncio.Future[Any]] = []
        self._last_call: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._leading: asyncio.Future[Any] | None = None

    @property
    def pending(self) -> bool:
        return self._slot.pending

    @property
    def waiting(self) -> int:
        """Number of callers queued for the current window."""
        return len(self._waiters)

    def __call__(self, *args: Any, **kwargs: Any) -> asyncio.Future[Any]:
        loop = asyncio.get_running_loop()
        caller: asyncio.Future[Any] = loop.create_future()

        if self._immediate and not self._slot.pending:
            self._leading = call_as_future(self._fn, *args, **kwargs)
            chain_future(caller, self._leading)
        else:
            self._waiters.append(caller)
            self._last_call = (args, kwargs)

        self._slot.schedule(self._close)
        return caller

    def flush(self) -> asyncio.Future[Any] | None:
        """Close the open window now. Returns the batch outcome, or ``None`` when idle."""
        if not self._slot.cancel():
            return None
        return self._close()

    def cancel(self) -> None:
        """Drop the pending window; queued callers are cancelled."""
        self._slot.cancel()
        waiters, self._waiters = self._waiters, []
        self._last_call = None
        self._leading = None
        for waiter in waiters:
            waiter.cancel()
        if waiters:
            logger.debug("cancelled %d queued caller(s)", len(waiters))

    def _close(self) -> asyncio.Future[Any]:
        waiters, self._waiters = self._waiters, []
        call, self._last_call = self._last_call, None

        if self._immediate and self._leading is not None:
            outcome = self._leading
        else:
            args, kwargs = call if call is not None else ((), {})
            outcome = call_as_future(self._fn, *args, **kwargs)
        self._leading = None

        logger.debug("window closed, settling %d queued caller(s)", len(waiters))
        for waiter in waiters:
            chain_future(waiter, outcome)
        return outcome


def debounce_promise(
    fn: Callable[..., Any], delay_s: float | None = None, immediate: bool = False
) -> DebouncedCoroutine:
    return DebouncedCoroutine(fn, delay_s, immediate)
