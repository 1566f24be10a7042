"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Small function combinators: constants, composition, currying, once.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from functools import reduce, update_wrapper
from typing import Any


def always(value: Any = None) -> Callable[..., Any]:
    """Return a function that ignores its arguments and returns `value`."""

    def constant(*_args: Any, **_kwargs: Any) -> Any:
        return value

    return constant


T = always(True)
F = always(False)
noop = always()


def identity(value: Any) -> Any:
    return value


def _compose_two(outer: Callable[..., Any], inner: Callable[..., Any]) -> Callable[..., Any]:
    def composed(*args: Any, **kwargs: Any) -> Any:
        return outer(inner(*args, **kwargs))

    return composed


def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """
    Right-to-left composition.

    ``compose(a, b, c)(x)`` is ``a(b(c(x)))``.
    """
    if not fns:
        return identity
    return reduce(_compose_two, fns)


def pipe(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """
    Left-to-right composition.

    ``pipe(a, b, c)(x)`` is ``c(b(a(x)))``.
    """
    if not fns:
        return identity
    return reduce(_compose_two, reversed(fns))


class _Curried:
    """Accumulates positional arguments until `arity` of them are buffered."""

    def __init__(
        self, arity: int, fn: Callable[..., Any], args: tuple[Any, ...] = ()
    ) -> None:
        self._arity = arity
        self._fn = fn
        self._args = args
        update_wrapper(self, fn, updated=())

    @property
    def arity(self) -> int:
        return self._arity

    def __call__(self, *args: Any) -> Any:
        buffered = self._args + args
        if len(buffered) >= self._arity:
            return self._fn(*buffered)
        return _Curried(self._arity, self._fn, buffered)

    def __repr__(self) -> str:
        return (
            f"<curried {getattr(self._fn, '__qualname__', self._fn)!s} "
            f"{len(self._args)}/{self._arity}>"
        )


def curry_n(arity: int, fn: Callable[..., Any], *args: Any) -> Any:
    """
    Curry `fn` so it runs once at least `arity` positional args are supplied.

    Extra arguments beyond `arity` are passed through on the final call.
    """
    return _Curried(arity, fn)(*args) if args else _Curried(arity, fn)


def _required_positional_count(fn: Callable[..., Any]) -> int:
    count = 0
    for param in inspect.signature(fn).parameters.values():
        if param.kind not in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            continue
        if param.default is inspect.Parameter.empty:
            count += 1
    return count


def curry(fn: Callable[..., Any], *args: Any, arity: int | None = None) -> Any:
    """
    Curry `fn` on its required positional parameters.

    The arity is read once from the signature unless passed explicitly.
    """
    resolved = _required_positional_count(fn) if arity is None else arity
    return curry_n(resolved, fn, *args)


def once(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Run `fn` on the first call only; later calls return the first result."""
    called = False
    result: Any = None

    def wrapper(*args: Any, **kwargs: Any) -> Any:
        nonlocal called, result
        if not called:
            called = True
            result = fn(*args, **kwargs)
        return result

    return update_wrapper(wrapper, fn)
