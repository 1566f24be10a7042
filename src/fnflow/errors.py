"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Exceptions raised by fnflow itself.

User callback errors are never wrapped; they propagate unchanged.
"""

from __future__ import annotations


class FnflowError(Exception):
    """Base class for errors raised by the library."""


class DeadlineExceededError(FnflowError, TimeoutError):
    """Raised when a raced awaitable does not settle before its deadline."""

    def __init__(self, message: str, *, delay_s: float | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.delay_s = delay_s
