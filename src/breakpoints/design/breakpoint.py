"""Breakpoint ranges and width classification.

A breakpoint is a closed interval of logical screen widths, optionally named
(e.g. ``MOBILE``) and optionally carrying an opaque payload. A
``BreakpointSet`` keeps its ranges sorted ascending by ``start`` so that
classification is deterministic even when ranges overlap.

Classification Rules
--------------------
 - Both bounds are inclusive: ``[0, 450]`` contains 450, ``[451, 800]`` starts at 451.
 - The first range (sorted by ``start``) containing the width wins, so for
   overlapping ranges the one with the smaller ``start`` is chosen.
 - Widths falling into a gap classify as ``EMPTY_RANGE`` (0, 0, no name).
 - ``end`` may be ``math.inf`` for an open-ended top tier.

Pure-Python, no Qt dependency for straightforward testing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from ..errors import InvalidBreakpointError

__all__ = [
    "BreakpointRange",
    "BreakpointSet",
    "EMPTY_RANGE",
    "classify_width",
]

_UNSET: Any = object()


@dataclass(frozen=True)
class BreakpointRange:
    """Named closed interval of screen widths.

    Attributes
    ----------
    start: float
        Inclusive lower bound (>= 0).
    end: float
        Inclusive upper bound (``math.inf`` for an open-ended tier).
    name: str | None
        Semantic identifier such as ``MOBILE`` or ``TABLET``.
    data: Any
        Opaque payload; ignored for equality and hashing.
    """

    start: float
    end: float
    name: Optional[str] = None
    data: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if math.isnan(self.start) or math.isnan(self.end):
            raise InvalidBreakpointError(f"Breakpoint bounds must be numbers: {self!r}")
        if self.start < 0:
            raise InvalidBreakpointError(f"Breakpoint start must be non-negative: {self!r}")
        if self.start > self.end:
            raise InvalidBreakpointError(
                f"Breakpoint start {self.start} is greater than end {self.end} ({self.name})"
            )

    def contains(self, width: float) -> bool:
        return self.start <= width <= self.end

    def copy_with(
        self,
        *,
        start: Optional[float] = None,
        end: Optional[float] = None,
        name: Optional[str] = None,
        data: Any = _UNSET,
    ) -> "BreakpointRange":
        return BreakpointRange(
            start=self.start if start is None else start,
            end=self.end if end is None else end,
            name=self.name if name is None else name,
            data=self.data if data is _UNSET else data,
        )

    def __repr__(self) -> str:
        return f"BreakpointRange(start={self.start}, end={self.end}, name={self.name!r})"


# Placeholder returned when no configured range contains the width
EMPTY_RANGE = BreakpointRange(start=0, end=0)


class BreakpointSet:
    """Immutable, start-sorted collection of ``BreakpointRange``.

    Overlapping ranges are tolerated; duplicated names are allowed and
    ``find`` returns the first in sorted order.
    """

    __slots__ = ("_ranges",)

    def __init__(self, ranges: Iterable[BreakpointRange] = ()) -> None:
        items = list(ranges)
        for item in items:
            if not isinstance(item, BreakpointRange):
                raise InvalidBreakpointError(f"Expected BreakpointRange, got {type(item)!r}")
        # sorted() is stable: equal starts keep their declaration order
        self._ranges: Tuple[BreakpointRange, ...] = tuple(sorted(items, key=lambda r: r.start))

    @classmethod
    def coerce(cls, value: "BreakpointSet | Iterable[BreakpointRange]") -> "BreakpointSet":
        if isinstance(value, BreakpointSet):
            return value
        return cls(value)

    @property
    def ranges(self) -> Tuple[BreakpointRange, ...]:
        return self._ranges

    def find(self, name: str) -> Optional[BreakpointRange]:
        for bp in self._ranges:
            if bp.name == name:
                return bp
        return None

    def names(self) -> List[str]:
        return [bp.name for bp in self._ranges if bp.name is not None]

    def classify(self, width: float) -> BreakpointRange:
        return classify_width(width, self._ranges)

    def __iter__(self) -> Iterator[BreakpointRange]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __bool__(self) -> bool:
        return bool(self._ranges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BreakpointSet):
            return NotImplemented
        return self._ranges == other._ranges

    def __hash__(self) -> int:
        return hash(self._ranges)

    def __repr__(self) -> str:
        return f"BreakpointSet({list(self._ranges)!r})"


def classify_width(width: float, sorted_ranges: Iterable[BreakpointRange]) -> BreakpointRange:
    """Return the first range (in the given order) containing ``width``.

    ``sorted_ranges`` must already be sorted ascending by ``start``; use
    ``BreakpointSet.classify`` when that is not guaranteed. Returns
    ``EMPTY_RANGE`` when nothing matches.
    """
    for bp in sorted_ranges:
        if bp.contains(width):
            return bp
    return EMPTY_RANGE
