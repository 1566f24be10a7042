"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Future helpers shared by the timing controllers.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Generator
from dataclasses import dataclass
from typing import Any

from ..fns import noop


def as_future(value: Any) -> asyncio.Future[Any]:
    """Normalize a plain value or awaitable into a future on the running loop."""
    if inspect.isawaitable(value):
        return asyncio.ensure_future(value)
    future = asyncio.get_running_loop().create_future()
    future.set_result(value)
    return future


def call_as_future(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> asyncio.Future[Any]:
    """
    Invoke `fn` and return its outcome as a future.

    A synchronous raise becomes a rejected future instead of propagating.
    """
    try:
        result = fn(*args, **kwargs)
    except Exception as exc:
        future = asyncio.get_running_loop().create_future()
        future.set_exception(exc)
        return future
    return as_future(result)


def settle_from(target: asyncio.Future[Any], source: asyncio.Future[Any]) -> None:
    """Copy the outcome of the done `source` into `target` unless it is already done."""
    if target.done():
        if not source.cancelled():
            source.exception()
        return
    if source.cancelled():
        target.cancel()
        return
    exc = source.exception()
    if exc is not None:
        target.set_exception(exc)
    else:
        target.set_result(source.result())


def chain_future(target: asyncio.Future[Any], source: asyncio.Future[Any]) -> None:
    """Settle `target` with `source`'s outcome once `source` is done."""
    source.add_done_callback(lambda done: settle_from(target, done))


def always_resolve(value: Any = None) -> Callable[..., asyncio.Future[Any]]:
    """Return a factory of futures already resolved to `value`."""

    def resolved(*_args: Any, **_kwargs: Any) -> asyncio.Future[Any]:
        return as_future(value)

    return resolved


class Deferred:
    """
    A future with its settle functions exposed.

    Awaiting the deferred awaits its future.
    """

    def __init__(
        self, fn: Callable[[Callable[[Any], None], Callable[[BaseException], None]], Any] = noop
    ) -> None:
        self.future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        fn(self.resolve, self.reject)

    def resolve(self, value: Any = None) -> None:
        if not self.future.done():
            self.future.set_result(value)

    def reject(self, error: BaseException) -> None:
        if not self.future.done():
            self.future.set_exception(error)

    def done(self) -> bool:
        return self.future.done()

    def __await__(self) -> Generator[Any, None, Any]:
        return self.future.__await__()


def deferred(
    fn: Callable[[Callable[[Any], None], Callable[[BaseException], None]], Any] = noop,
) -> Deferred:
    return Deferred(fn)


@dataclass(frozen=True, slots=True)
class Reflection:
    """Settled outcome of an awaitable, captured without raising."""

    success: bool
    result: Any = None
    error: BaseException | None = None


async def _reflect(awaitable: Awaitable[Any]) -> Reflection:
    try:
        result = await awaitable
    except Exception as exc:
        return Reflection(success=False, error=exc)
    return Reflection(success=True, result=result)


def reflect(awaitable: Any) -> asyncio.Task[Reflection]:
    """Return a task that resolves to a `Reflection` and never rejects."""
    return asyncio.ensure_future(_reflect(as_future(awaitable)))
