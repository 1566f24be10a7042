"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Debounce and throttle wrappers for synchronous callbacks.

Both wrappers keep a single `TimerSlot`, so at most one timer is alive per
instance. They must be called from inside a running event loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import update_wrapper
from typing import Any

from ..config import resolve_delay
from .timers import TimerSlot

logger = logging.getLogger("fnflow.timing.debounce")

_Call = tuple[tuple[Any, ...], dict[str, Any]]


class _RateLimited:
    def __init__(self, fn: Callable[..., Any], delay_s: float | None, immediate: bool) -> None:
        self._fn = fn
        self._immediate = immediate
        self._slot = TimerSlot(resolve_delay(delay_s))
        self._trailing: _Call | None = None
        update_wrapper(self, fn, updated=())

    @property
    def delay_s(self) -> float:
        return self._slot.delay_s

    @property
    def immediate(self) -> bool:
        return self._immediate

    @property
    def pending(self) -> bool:
        """Whether a window is currently open."""
        return self._slot.pending

    def cancel(self) -> None:
        """Drop the pending timer and any trailing call. Safe to call repeatedly."""
        if self._slot.cancel():
            logger.debug("%s cancelled", self._name)
        self._trailing = None

    def flush(self) -> Any:
        """Close the open window now, running the trailing call if there is one."""
        if not self._slot.cancel():
            return None
        return self._close()

    @property
    def _name(self) -> str:
        return getattr(self._fn, "__qualname__", repr(self._fn))

    def _open(self) -> None:
        self._slot.schedule(self._close)

    def _close(self) -> Any:
        call, self._trailing = self._trailing, None
        if call is None:
            logger.debug("%s window closed", self._name)
            return None
        args, kwargs = call
        logger.debug("%s window closed, running trailing call", self._name)
        return self._fn(*args, **kwargs)


class Debouncer(_RateLimited):
    """
    Run `fn` once per burst of calls.

    Every call restarts the window. In trailing mode `fn` receives the
    arguments of the last call once the window elapses quietly; in
    immediate mode the first call of a burst runs `fn` synchronously.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        result = None
        if self._immediate:
            if not self._slot.pending:
                result = self._fn(*args, **kwargs)
        else:
            self._trailing = (args, kwargs)
        self._open()
        return result


class Throttler(_RateLimited):
    """
    Run `fn` at most once per window.

    Calls made while a window is open are dropped. In trailing mode the
    first call of the window is replayed when it closes.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self._slot.pending:
            return None
        result = None
        if self._immediate:
            result = self._fn(*args, **kwargs)
        else:
            self._trailing = (args, kwargs)
        self._open()
        return result


def debounce(
    fn: Callable[..., Any], delay_s: float | None = None, immediate: bool = False
) -> Debouncer:
    return Debouncer(fn, delay_s, immediate)


def throttle(
    fn: Callable[..., Any], delay_s: float | None = None, immediate: bool = False
) -> Throttler:
    return Throttler(fn, delay_s, immediate)
