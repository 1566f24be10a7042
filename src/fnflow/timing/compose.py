"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Sequential composition of sync and async steps.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable
from typing import Any

from .promises import call_as_future


async def _chain(seed: asyncio.Future[Any], steps: tuple[Callable[[Any], Any], ...]) -> Any:
    value = await seed
    for step in steps:
        value = step(value)
        if inspect.isawaitable(value):
            value = await value
    return value


def queue(first: Callable[..., Any], *rest: Callable[[Any], Any]) -> Callable[..., asyncio.Task[Any]]:
    """
    Chain `first` and `rest` so each step receives the previous resolved value.

    `first` runs synchronously when the chain is called; the remaining steps
    run in order inside the returned task, awaiting any awaitable results.
    """

    def run(*args: Any, **kwargs: Any) -> asyncio.Task[Any]:
        seed = call_as_future(first, *args, **kwargs)
        return asyncio.ensure_future(_chain(seed, rest))

    return run
