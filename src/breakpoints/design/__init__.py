"""Breakpoint design package.

Pure (Qt-free) breakpoint ranges, width classification, platform-aware set
selection, state snapshots and conditional value resolution.
"""

from .breakpoint import BreakpointRange, BreakpointSet, EMPTY_RANGE, classify_width  # noqa: F401
from .breakpoint_config import BreakpointConfig  # noqa: F401
from .platform import (  # noqa: F401
    TargetPlatform,
    Orientation,
    DEFAULT_LANDSCAPE_PLATFORMS,
    select_active_set,
)
from .state import ScreenMetrics, BreakpointState, compute_state  # noqa: F401
from .conditions import Equals, Between, LargerThan, SmallerThan, Condition  # noqa: F401
from .resolver import resolve, resolve_value, resolve_visibility, BreakpointContext  # noqa: F401
from .debug import describe_breakpoints  # noqa: F401

__all__ = [
    "BreakpointRange",
    "BreakpointSet",
    "EMPTY_RANGE",
    "classify_width",
    "BreakpointConfig",
    "TargetPlatform",
    "Orientation",
    "DEFAULT_LANDSCAPE_PLATFORMS",
    "select_active_set",
    "ScreenMetrics",
    "BreakpointState",
    "compute_state",
    "Equals",
    "Between",
    "LargerThan",
    "SmallerThan",
    "Condition",
    "resolve",
    "resolve_value",
    "resolve_visibility",
    "BreakpointContext",
    "describe_breakpoints",
]
