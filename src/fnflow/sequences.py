"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

List helpers.
"""

from __future__ import annotations

from typing import Any

from .checks import is_list


def to_list(value: Any) -> list[Any]:
    """Wrap `value` into a list; ``None`` gives ``[]`` and lists/tuples are copied."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def flatten(items: list[Any]) -> list[Any]:
    """Deep-flatten nested lists. Tuples and other iterables are kept as items."""
    out: list[Any] = []
    for item in items:
        if is_list(item):
            out.extend(flatten(item))
        else:
            out.append(item)
    return out
