"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Dict helpers: merge, reduce/map/filter over items, flattening and path lookup.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .checks import is_list, is_plain_dict
from .fns import curry_n, identity
from .sequences import to_list


def to_dict(items: Any, fn: Callable[[Any], Mapping[Any, Any]] = identity) -> dict[Any, Any]:
    """Merge the mappings produced by `fn` for each item, later keys winning."""
    out: dict[Any, Any] = {}
    for item in to_list(items):
        out.update(fn(item))
    return out


def _reduce_dict(
    fn: Callable[[Any, Any, Any, int, Mapping[Any, Any]], Any],
    obj: Mapping[Any, Any],
    target: Any = None,
) -> Any:
    acc = {} if target is None else target
    for index, (key, value) in enumerate(obj.items()):
        acc = fn(acc, key, value, index, obj)
    return acc


def _map_dict(
    fn: Callable[[Any, Any, int, Mapping[Any, Any]], tuple[Any, Any]],
    obj: Mapping[Any, Any],
) -> dict[Any, Any]:
    def step(acc: dict[Any, Any], key: Any, value: Any, index: int, src: Any) -> dict[Any, Any]:
        next_key, next_value = fn(key, value, index, src)
        acc[next_key] = next_value
        return acc

    return _reduce_dict(step, obj, {})


def _filter_dict(fn: Callable[[Any, Any], bool], obj: Mapping[Any, Any]) -> dict[Any, Any]:
    return {key: value for key, value in obj.items() if fn(key, value)}


reduce_dict = curry_n(2, _reduce_dict)
map_dict = curry_n(2, _map_dict)
filter_dict = curry_n(2, _filter_dict)


def is_plain_dict_or_list(value: Any) -> bool:
    return is_plain_dict(value) or is_list(value)


def _items(value: Any) -> list[tuple[Any, Any]]:
    if is_list(value):
        return [(str(index), item) for index, item in enumerate(value)]
    return list(value.items())


def flatten_dict(
    obj: Any,
    joiner: str = ".",
    travel_inside: Callable[[Any], bool] = is_plain_dict_or_list,
) -> dict[str, Any]:
    """
    Flatten nested containers into a single-level dict keyed by joined paths.

    Lists contribute their indexes as path segments. Containers that
    `travel_inside` rejects are kept as leaf values.
    """
    out: dict[str, Any] = {}
    for key, value in _items(obj):
        if travel_inside(value):
            for sub_key, sub_value in flatten_dict(value, joiner, travel_inside).items():
                out[joiner.join((str(key), str(sub_key)))] = sub_value
        else:
            out[str(key)] = value
    return out


def _as_index(key: str) -> int | None:
    try:
        index = int(key)
    except ValueError:
        return None
    return index if index >= 0 else None


def _step(current: Any, key: str) -> Any:
    if current is None:
        return None
    if isinstance(current, Mapping):
        if key in current:
            return current[key]
        index = _as_index(key)
        return current.get(index) if index is not None else None
    if isinstance(current, Sequence) and not isinstance(current, str):
        index = _as_index(key)
        if index is None or index >= len(current):
            return None
        return current[index]
    return getattr(current, key, None)


def path(str_path: str = "", *paths: str) -> Callable[[Any], Any]:
    """
    Build a getter for a dotted path.

    ``path("a.b", "c")(obj)`` walks ``obj["a"]["b"]["c"]``. Sequences are
    indexed by non-negative integer segments, mappings fall back to integer
    keys and other objects are read by attribute. A missing
    link yields ``None``.
    """
    keys = [segment for segment in str_path.split(".") if segment] + list(paths)

    def getter(obj: Any) -> Any:
        current = obj
        for key in keys:
            current = _step(current, key)
        return current

    return getter


def fallback_to(*values: Any) -> Any:
    """Return the first value that is not ``None``."""
    for value in values:
        if value is not None:
            return value
    return None
