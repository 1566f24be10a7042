"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Type and shape predicates.
"""

from __future__ import annotations

import inspect
import math
from collections.abc import Mapping, Sequence, Set, Sized
from numbers import Real
from typing import Any

from .fns import curry_n


def _is_instance(kind: type | tuple[type, ...] | None, value: Any) -> bool:
    if kind is None or value is None:
        return False
    return isinstance(value, kind)


is_instance = curry_n(2, _is_instance)


def is_fn(value: Any) -> bool:
    return callable(value)


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_num(value: Any) -> bool:
    """True for real numbers other than bools and NaN."""
    return isinstance(value, Real) and not isinstance(value, bool) and not is_nan(value)


def is_str(value: Any) -> bool:
    return isinstance(value, str)


def is_list(value: Any) -> bool:
    return isinstance(value, list)


def is_nil(value: Any) -> bool:
    return value is None


def is_awaitable(value: Any) -> bool:
    return inspect.isawaitable(value)


def is_plain_dict(value: Any) -> bool:
    """True only for exact ``dict`` instances, not subclasses."""
    return type(value) is dict


def is_empty_dict(value: Any) -> bool:
    """True for empty mappings, sets and non-string sequences."""
    if isinstance(value, (Mapping, Set)) or (
        isinstance(value, Sequence) and not isinstance(value, (str, bytes))
    ):
        return len(value) == 0
    return False


def is_empty(value: Any) -> bool:
    """
    True for ``None``, ``""`` and empty containers.

    Numbers and other non-sized values are never empty.
    """
    if value is None or value == "":
        return True
    if isinstance(value, Sized) and not isinstance(value, str):
        return len(value) == 0
    return False
