"""Textual ruler of breakpoint ranges for debug logging."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from .breakpoint import BreakpointRange

__all__ = ["describe_breakpoints", "log_breakpoints"]

log = logging.getLogger(__name__)

_SEP = " ----- "


def _fmt(value: float) -> str:
    if value == math.inf:
        return "∞"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def describe_breakpoints(ranges: Optional[Iterable[BreakpointRange]]) -> str:
    """Render ranges sorted by start, e.g. ``| 0 ----- (MOBILE) ----- 450 |``."""
    items = sorted(ranges or (), key=lambda r: r.start)
    if not items:
        return "| Empty |"
    parts = []
    for bp in items:
        segment = _fmt(bp.start) + _SEP
        if bp.name is not None:
            segment += f"({bp.name}){_SEP}"
        segment += _fmt(bp.end)
        parts.append(segment)
    return "| " + _SEP.join(parts) + " |"


def log_breakpoints(label: str, ranges: Optional[Iterable[BreakpointRange]]) -> str:
    text = describe_breakpoints(ranges)
    log.debug("**%s** %s", label, text)
    return text
