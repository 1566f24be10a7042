"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Run a fixed set of tasks with bounded concurrency and ordered results.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterator
from typing import Any

from pydantic import BaseModel, Field

from .promises import call_as_future

logger = logging.getLogger("fnflow.timing.concurrency")


class _ConcurrencyArgs(BaseModel):
    limit: int = Field(ge=1)


class _Run:
    """
    State of one runner invocation: task cursor and results.

    In-flight tasks are bounded by the number of lanes pulling from the cursor.
    """

    def __init__(self, tasks: tuple[Callable[..., Any], ...], args: tuple[Any, ...]) -> None:
        self.tasks = tasks
        self.args = args
        self.results: list[Any] = [None] * len(tasks)
        self.failed = False
        self._cursor: Iterator[tuple[int, Callable[..., Any]]] = iter(enumerate(tasks))

    def next_task(self) -> tuple[int, Callable[..., Any]] | None:
        if self.failed:
            return None
        return next(self._cursor, None)

    async def lane(self) -> None:
        while True:
            item = self.next_task()
            if item is None:
                return
            index, task = item
            try:
                self.results[index] = await call_as_future(task, *self.args)
            except BaseException:
                self.failed = True
                logger.debug("task %d failed; no further tasks will start", index)
                raise


class ConcurrentRunner:
    """Callable that fans identical arguments out to `tasks`, `limit` at a time."""

    def __init__(self, limit: int, tasks: tuple[Callable[..., Any], ...]) -> None:
        self.limit = limit
        self.tasks = tasks

    def __call__(self, *args: Any) -> asyncio.Task[list[Any]]:
        return asyncio.ensure_future(self._run(args))

    async def _run(self, args: tuple[Any, ...]) -> list[Any]:
        state = _Run(self.tasks, args)
        lanes = [
            asyncio.ensure_future(state.lane())
            for _ in range(min(self.limit, len(self.tasks)))
        ]
        if lanes:
            await asyncio.gather(*lanes)
        return state.results


def concurrent_n(limit: int) -> Callable[..., ConcurrentRunner]:
    """
    Build a runner factory with at most `limit` tasks in flight.

    ``concurrent_n(2)(t1, t2, t3)(x)`` calls every task with ``x`` and
    resolves to ``[t1(x), t2(x), t3(x)]`` in task order. The first failure
    rejects the whole run; tasks already started keep running unobserved.
    """
    checked = _ConcurrencyArgs(limit=limit).limit

    def bind(*tasks: Callable[..., Any]) -> ConcurrentRunner:
        return ConcurrentRunner(checked, tasks)

    return bind
