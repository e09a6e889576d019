"""Screen metrics and the immutable breakpoint state snapshot.

``BreakpointState`` is recomputed and replaced wholesale on every metrics
change. Its query methods define the bound semantics shared with condition
resolution (``resolver.resolve`` delegates to them), so a boolean query and a
resolved value can never disagree:

 - ``equals(N)``:             active range name == N
 - ``larger_than(N)``:        width >  N.end
 - ``larger_or_equal_to(N)``: width >= N.start
 - ``smaller_than(N)``:       width <  N.start
 - ``smaller_or_equal_to(N)``: width <= N.end
 - ``between(A, B)``:         A.start <= width <= B.end

Names missing from the active set never match.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..config import settings
from ..errors import InvalidBreakpointError
from .breakpoint import EMPTY_RANGE, BreakpointRange, BreakpointSet
from .breakpoint_config import BreakpointConfig
from .platform import (
    Orientation,
    TargetPlatform,
    is_landscape_platform,
    orientation_for,
    select_active_set,
)

__all__ = ["ScreenMetrics", "BreakpointState", "compute_state"]


@dataclass(frozen=True)
class ScreenMetrics:
    """Window size in logical units as reported by the host."""

    width: float
    height: float

    def __post_init__(self) -> None:
        for label, value in (("width", self.width), ("height", self.height)):
            if math.isnan(value) or value < 0:
                raise InvalidBreakpointError(f"Screen {label} must be non-negative, got {value}")

    @property
    def orientation(self) -> Orientation:
        return orientation_for(self.width, self.height)


@dataclass(frozen=True, eq=False)
class BreakpointState:
    """Immutable classification snapshot.

    Equality (and hash) covers ``screen_width``, ``screen_height`` and
    ``active_range`` only.
    """

    screen_width: float = 0
    screen_height: float = 0
    active_range: BreakpointRange = EMPTY_RANGE
    active_set: BreakpointSet = BreakpointSet()
    orientation: Orientation = Orientation.PORTRAIT
    platform: Optional[TargetPlatform] = None
    landscape_platform: bool = False

    @property
    def is_landscape(self) -> bool:
        """True when rotated to landscape on a landscape-eligible platform."""
        return self.orientation is Orientation.LANDSCAPE and self.landscape_platform

    # ------------------------------------------------------------------
    # Device type shortcuts
    # ------------------------------------------------------------------
    @property
    def is_mobile(self) -> bool:
        return self.active_range.name == settings.MOBILE

    @property
    def is_phone(self) -> bool:
        return self.active_range.name == settings.PHONE

    @property
    def is_tablet(self) -> bool:
        return self.active_range.name == settings.TABLET

    @property
    def is_desktop(self) -> bool:
        return self.active_range.name == settings.DESKTOP

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------
    def equals(self, name: str) -> bool:
        return self.active_range.name == name

    def larger_than(self, name: str) -> bool:
        bp = self.active_set.find(name)
        return bp is not None and self.screen_width > bp.end

    def larger_or_equal_to(self, name: str) -> bool:
        bp = self.active_set.find(name)
        return bp is not None and self.screen_width >= bp.start

    def smaller_than(self, name: str) -> bool:
        bp = self.active_set.find(name)
        return bp is not None and self.screen_width < bp.start

    def smaller_or_equal_to(self, name: str) -> bool:
        bp = self.active_set.find(name)
        return bp is not None and self.screen_width <= bp.end

    def between(self, name: str, other: str) -> bool:
        lower = self.active_set.find(name)
        upper = self.active_set.find(other)
        if lower is None or upper is None:
            return False
        return lower.start <= self.screen_width <= upper.end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BreakpointState):
            return NotImplemented
        return (
            self.screen_width == other.screen_width
            and self.screen_height == other.screen_height
            and self.active_range == other.active_range
        )

    def __hash__(self) -> int:
        return hash((self.screen_width, self.screen_height, self.active_range))

    def __repr__(self) -> str:
        return (
            f"BreakpointState(breakpoint={self.active_range!r}, width={self.screen_width}, "
            f"height={self.screen_height}, orientation={self.orientation.value})"
        )


def compute_state(
    metrics: ScreenMetrics,
    config: BreakpointConfig,
    platform: Optional[TargetPlatform],
) -> BreakpointState:
    """Pure recompute: pick the active set, classify and build a snapshot."""
    orientation = metrics.orientation
    if config.use_shortest_side:
        screen_width = min(metrics.width, metrics.height)
        screen_height = max(metrics.width, metrics.height)
    else:
        screen_width, screen_height = metrics.width, metrics.height
    active_set = select_active_set(
        config.breakpoints,
        config.landscape_breakpoints,
        orientation,
        platform,
        config.landscape_platforms,
    )
    return BreakpointState(
        screen_width=screen_width,
        screen_height=screen_height,
        active_range=active_set.classify(screen_width),
        active_set=active_set,
        orientation=orientation,
        platform=platform,
        landscape_platform=is_landscape_platform(platform, config.landscape_platforms),
    )
