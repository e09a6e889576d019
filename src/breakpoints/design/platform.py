"""Target platforms and active breakpoint set selection.

A desktop window resized to be wider than tall must not switch to the
rotation-specific (landscape) breakpoints meant for handheld devices, so the
landscape set is only honoured on an allow-list of platforms.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, Optional

from ..config import settings
from .breakpoint import BreakpointSet

__all__ = [
    "TargetPlatform",
    "Orientation",
    "DEFAULT_LANDSCAPE_PLATFORMS",
    "orientation_for",
    "is_landscape_platform",
    "select_active_set",
]


class TargetPlatform(str, Enum):
    ANDROID = "android"
    FUCHSIA = "fuchsia"
    IOS = "ios"
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    WEB = "web"


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


DEFAULT_LANDSCAPE_PLATFORMS: FrozenSet[TargetPlatform] = frozenset(
    TargetPlatform(p) for p in settings.DEFAULT_LANDSCAPE_PLATFORMS
)


def orientation_for(width: float, height: float) -> Orientation:
    # Square windows count as portrait
    return Orientation.LANDSCAPE if width > height else Orientation.PORTRAIT


def is_landscape_platform(
    platform: Optional[TargetPlatform],
    allowed: Optional[Iterable[TargetPlatform]] = None,
) -> bool:
    allowed_set = DEFAULT_LANDSCAPE_PLATFORMS if allowed is None else frozenset(allowed)
    return platform in allowed_set


def select_active_set(
    primary: BreakpointSet,
    landscape: Optional[BreakpointSet],
    orientation: Orientation,
    platform: Optional[TargetPlatform],
    allowed_landscape_platforms: Optional[Iterable[TargetPlatform]] = None,
) -> BreakpointSet:
    """Choose the breakpoint set used for classification.

    The landscape set wins only when it was supplied, the orientation is
    landscape and the platform is in ``allowed_landscape_platforms``
    (defaults to iOS, Android and Fuchsia). Otherwise the primary set is used.
    """
    if (
        landscape is not None
        and orientation is Orientation.LANDSCAPE
        and is_landscape_platform(platform, allowed_landscape_platforms)
    ):
        return landscape
    return primary
