"""Conditional values keyed off the active breakpoint.

Four disjoint condition kinds, each pairing a predicate with a value and an
optional landscape override:

 - ``Equals(name)``                      active range is ``name``
 - ``Between(start, end)``               ``start <= width <= end``
 - ``LargerThan(name= | breakpoint=)``   width above the named range / number
 - ``SmallerThan(name= | breakpoint=)``  width below the named range / number

``LargerThan`` and ``SmallerThan`` take exactly one of ``name`` or
``breakpoint``. ``landscape_value`` falls back to ``value`` when omitted.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from ..errors import InvalidBreakpointError

__all__ = [
    "Equals",
    "Between",
    "LargerThan",
    "SmallerThan",
    "Condition",
    "with_value",
]

T = TypeVar("T")


class _ConditionBase(Generic[T]):
    value: Optional[T]
    landscape_value: Optional[T]

    def select(self, landscape: bool) -> Optional[T]:
        if landscape and self.landscape_value is not None:
            return self.landscape_value
        return self.value

    @property
    def uses_name(self) -> bool:
        return getattr(self, "name", None) is not None


@dataclass(frozen=True)
class Equals(_ConditionBase[T]):
    name: str
    value: Optional[T] = None
    landscape_value: Optional[T] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidBreakpointError("Equals condition requires a breakpoint name")


@dataclass(frozen=True)
class Between(_ConditionBase[T]):
    start: float
    end: float
    value: Optional[T] = None
    landscape_value: Optional[T] = None

    def __post_init__(self) -> None:
        if math.isnan(self.start) or math.isnan(self.end):
            raise InvalidBreakpointError(
                f"Between condition bounds must be numbers: {self.start}, {self.end}"
            )
        if self.start > self.end:
            raise InvalidBreakpointError(
                f"Between condition start {self.start} is greater than end {self.end}"
            )


def _check_bound(kind: str, name: Optional[str], breakpoint: Optional[float]) -> None:
    if (name is None) == (breakpoint is None):
        raise InvalidBreakpointError(f"{kind} condition requires exactly one of name or breakpoint")


@dataclass(frozen=True)
class LargerThan(_ConditionBase[T]):
    name: Optional[str] = None
    breakpoint: Optional[float] = None
    value: Optional[T] = None
    landscape_value: Optional[T] = None

    def __post_init__(self) -> None:
        _check_bound("LargerThan", self.name, self.breakpoint)


@dataclass(frozen=True)
class SmallerThan(_ConditionBase[T]):
    name: Optional[str] = None
    breakpoint: Optional[float] = None
    value: Optional[T] = None
    landscape_value: Optional[T] = None

    def __post_init__(self) -> None:
        _check_bound("SmallerThan", self.name, self.breakpoint)


Condition = Union[Equals[T], Between[T], LargerThan[T], SmallerThan[T]]


def with_value(condition: Condition, value: T) -> Condition:
    """Copy ``condition`` replacing both its value and landscape value."""
    return dataclasses.replace(condition, value=value, landscape_value=value)
