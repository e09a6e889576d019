"""Per-instance breakpoint configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from ..config import settings
from .breakpoint import BreakpointRange, BreakpointSet
from .platform import DEFAULT_LANDSCAPE_PLATFORMS, TargetPlatform

__all__ = ["BreakpointConfig"]


@dataclass(frozen=True)
class BreakpointConfig:
    """Breakpoint sets and classification options.

    Attributes
    ----------
    breakpoints: BreakpointSet
        Primary set, used in portrait and on non-landscape platforms.
    landscape_breakpoints: BreakpointSet | None
        Optional set used when a landscape-eligible device is rotated.
    landscape_platforms: frozenset[TargetPlatform]
        Platforms allowed to switch to ``landscape_breakpoints``.
    use_shortest_side: bool
        Classify on ``min(width, height)`` instead of the window width.
    debug_log: bool
        Log a ruler of each set when a controller is created.
    """

    breakpoints: BreakpointSet
    landscape_breakpoints: Optional[BreakpointSet] = None
    landscape_platforms: FrozenSet[TargetPlatform] = field(
        default=DEFAULT_LANDSCAPE_PLATFORMS
    )
    use_shortest_side: bool = False
    debug_log: bool = settings.DEBUG_LOG

    def __post_init__(self) -> None:
        # Frozen: normalise through object.__setattr__
        object.__setattr__(self, "breakpoints", BreakpointSet.coerce(self.breakpoints))
        if self.landscape_breakpoints is not None:
            object.__setattr__(
                self, "landscape_breakpoints", BreakpointSet.coerce(self.landscape_breakpoints)
            )
        object.__setattr__(
            self,
            "landscape_platforms",
            frozenset(TargetPlatform(p) for p in self.landscape_platforms),
        )

    @classmethod
    def create(
        cls,
        breakpoints: Iterable[BreakpointRange],
        landscape_breakpoints: Optional[Iterable[BreakpointRange]] = None,
        landscape_platforms: Optional[Iterable[TargetPlatform]] = None,
        *,
        use_shortest_side: bool = False,
        debug_log: bool = settings.DEBUG_LOG,
    ) -> "BreakpointConfig":
        if landscape_platforms is None:
            landscape_platforms = DEFAULT_LANDSCAPE_PLATFORMS
        return cls(
            breakpoints=breakpoints,  # type: ignore[arg-type]
            landscape_breakpoints=landscape_breakpoints,  # type: ignore[arg-type]
            landscape_platforms=landscape_platforms,  # type: ignore[arg-type]
            use_shortest_side=use_shortest_side,
            debug_log=debug_log,
        )
