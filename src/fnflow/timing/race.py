"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Deadline racing for awaitables.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ..config import get_config, resolve_delay
from ..errors import DeadlineExceededError
from .promises import as_future

logger = logging.getLogger("fnflow.timing.race")


def _consume_late_outcome(future: asyncio.Future[Any]) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.debug("raced awaitable failed unobserved: %r", exc)


async def _race(operation: asyncio.Future[Any], delay_s: float, message: str) -> Any:
    try:
        done, _ = await asyncio.wait({operation}, timeout=delay_s)
    except asyncio.CancelledError:
        operation.add_done_callback(_consume_late_outcome)
        raise
    if operation in done:
        return operation.result()
    operation.add_done_callback(_consume_late_outcome)
    raise DeadlineExceededError(message, delay_s=delay_s)


def timeout(
    awaitable: Any, delay_s: float | None, message: str | None = None
) -> asyncio.Task[Any]:
    """
    Settle like `awaitable` unless `delay_s` elapses first.

    On expiry the returned task raises `DeadlineExceededError` with `message`
    (the configured timeout message by default). The raced awaitable is not
    cancelled and is left to finish on its own.
    """
    operation = as_future(awaitable)
    resolved_message = message if message is not None else get_config().timeout_message
    return asyncio.ensure_future(_race(operation, resolve_delay(delay_s), resolved_message))
