"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Environment-driven defaults for the timing helpers.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TIMEOUT_MESSAGE = "Timeout error"


class FnflowConfig(BaseModel):
    """
    Library-wide defaults.

    Attributes:
        default_delay_s: Delay used when a timing helper gets ``delay_s=None``.
        timeout_message: Message for deadline errors when none is passed.
    """

    model_config = ConfigDict(frozen=True)

    default_delay_s: float = Field(default=0.0, ge=0)
    timeout_message: str = Field(default=DEFAULT_TIMEOUT_MESSAGE, min_length=1)


class _DelayArgs(BaseModel):
    delay_s: float = Field(ge=0)


def _env_first(*names: str, default: str | None = None) -> str | None:
    """
    Return the first non-empty environment variable in `names`.

    Args:
        *names: Environment variable names to check in order.
        default: Value returned if no non-empty variable is found.
    """
    for name in names:
        raw = os.getenv(name)
        if raw is None:
            continue
        value = raw.strip()
        if value:
            return value
    return default


def load_config() -> FnflowConfig:
    """Build a config from `FNFLOW_*` environment variables."""
    values: dict[str, Any] = {}
    delay = _env_first("FNFLOW_DEFAULT_DELAY_S")
    if delay is not None:
        values["default_delay_s"] = delay
    message = _env_first("FNFLOW_TIMEOUT_MESSAGE")
    if message is not None:
        values["timeout_message"] = message
    return FnflowConfig(**values)


_config: FnflowConfig | None = None


def get_config() -> FnflowConfig:
    """Return the process config, loading it from the environment on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def configure(**overrides: Any) -> FnflowConfig:
    """Install a config built from the current one plus `overrides`."""
    global _config
    base = get_config().model_dump()
    base.update(overrides)
    _config = FnflowConfig(**base)
    return _config


def reset_config() -> None:
    """Drop the cached config so the next lookup re-reads the environment."""
    global _config
    _config = None


def resolve_delay(delay_s: float | None) -> float:
    """Validate a delay argument, substituting the configured default for ``None``."""
    if delay_s is None:
        return get_config().default_delay_s
    return _DelayArgs(delay_s=delay_s).delay_s
