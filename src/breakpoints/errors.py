"""Exception hierarchy for breakpoint classification and value resolution."""

from __future__ import annotations

__all__ = [
    "BreakpointError",
    "InvalidBreakpointError",
    "BreakpointContextError",
]


class BreakpointError(Exception):
    """Base class for all breakpoint errors."""


class InvalidBreakpointError(BreakpointError, ValueError):
    """Raised when a range, condition or metric is rejected at construction."""


class BreakpointContextError(BreakpointError, RuntimeError):
    """Raised when resolution is attempted without a classification context."""
