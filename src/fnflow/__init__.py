"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Small functional helpers for Python: function combinators, predicates,
list and dict utilities, and asyncio timing controls (debounce, throttle,
bounded fan-out, deadlines, sequential chains).
"""

from .checks import (
    is_awaitable,
    is_bool,
    is_empty,
    is_empty_dict,
    is_fn,
    is_instance,
    is_list,
    is_nan,
    is_nil,
    is_num,
    is_plain_dict,
    is_str,
)
from .config import FnflowConfig, configure, get_config, load_config, reset_config
from .errors import DeadlineExceededError, FnflowError
from .fns import F, T, always, compose, curry, curry_n, identity, noop, once, pipe
from .mappings import (
    fallback_to,
    filter_dict,
    flatten_dict,
    map_dict,
    path,
    reduce_dict,
    to_dict,
)
from .sequences import flatten, to_list
from .timing import (
    DebouncedCoroutine,
    Debouncer,
    Deferred,
    Reflection,
    Throttler,
    always_resolve,
    concurrent_n,
    debounce,
    debounce_promise,
    deferred,
    queue,
    reflect,
    throttle,
    timeout,
    wait,
)

__all__ = [
    "always",
    "T",
    "F",
    "noop",
    "identity",
    "compose",
    "pipe",
    "curry",
    "curry_n",
    "once",
    "is_instance",
    "is_fn",
    "is_bool",
    "is_nan",
    "is_num",
    "is_str",
    "is_list",
    "is_nil",
    "is_awaitable",
    "is_empty",
    "is_empty_dict",
    "is_plain_dict",
    "to_list",
    "flatten",
    "to_dict",
    "reduce_dict",
    "map_dict",
    "filter_dict",
    "flatten_dict",
    "path",
    "fallback_to",
    "wait",
    "debounce",
    "throttle",
    "Debouncer",
    "Throttler",
    "debounce_promise",
    "DebouncedCoroutine",
    "concurrent_n",
    "timeout",
    "queue",
    "always_resolve",
    "deferred",
    "Deferred",
    "reflect",
    "Reflection",
    "FnflowError",
    "DeadlineExceededError",
    "FnflowConfig",
    "load_config",
    "get_config",
    "configure",
    "reset_config",
]
