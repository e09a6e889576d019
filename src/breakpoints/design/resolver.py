"""Priority-based resolution of conditional values.

Conditions are scanned in reverse declaration order: the last declared
condition is tried first and the first structural match wins. A matched
condition yields its ``landscape_value`` when the state is landscape on a
landscape-eligible platform, otherwise its ``value``. No match (or a matched
value of ``None``) yields the caller's default.

``resolve`` is pure and works on an explicit ``BreakpointState``.
``resolve_value`` and ``resolve_visibility`` take a context object exposing
``.state`` (normally a ``BreakpointController``) and fail loudly when that
context is missing, rather than silently returning the default.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, TypeVar

from ..errors import BreakpointContextError
from .conditions import Between, Condition, Equals, LargerThan, SmallerThan, with_value
from .state import BreakpointState

__all__ = [
    "BreakpointContext",
    "matches",
    "find_active_condition",
    "resolve",
    "resolve_value",
    "resolve_visibility",
]

T = TypeVar("T")


class BreakpointContext(Protocol):
    @property
    def state(self) -> Optional[BreakpointState]: ...  # pragma: no cover - structural


def matches(condition: Condition, state: BreakpointState) -> bool:
    if isinstance(condition, Equals):
        return state.equals(condition.name)
    if isinstance(condition, Between):
        return condition.start <= state.screen_width <= condition.end
    if isinstance(condition, SmallerThan):
        if condition.name is not None:
            return state.smaller_than(condition.name)
        return state.screen_width < condition.breakpoint
    if isinstance(condition, LargerThan):
        if condition.name is not None:
            return state.larger_than(condition.name)
        return state.screen_width > condition.breakpoint
    raise TypeError(f"Unsupported condition type: {type(condition)!r}")


def find_active_condition(
    conditions: Sequence[Condition], state: BreakpointState
) -> Optional[Condition]:
    for condition in reversed(conditions):
        if matches(condition, state):
            return condition
    return None


def resolve(conditions: Sequence[Condition[T]], state: BreakpointState, default: T) -> T:
    active = find_active_condition(conditions, state)
    if active is None:
        return default
    value = active.select(state.is_landscape)
    return default if value is None else value


def _require_state(
    context: Optional[BreakpointContext], conditions: Sequence[Condition]
) -> BreakpointState:
    state = None if context is None else context.state
    if state is not None:
        return state
    named = [c for c in conditions if c.uses_name]
    if named:
        raise BreakpointContextError(
            f"Conditional value references breakpoint {named[0].name!r} but no breakpoint "
            "context is available. Create a BreakpointController and report screen "
            "metrics before resolving values."
        )
    raise BreakpointContextError(
        "Conditional value resolution requires a breakpoint context with a current state."
    )


def resolve_value(
    context: Optional[BreakpointContext],
    conditions: Sequence[Condition[T]],
    default: T,
) -> T:
    """Resolve ``conditions`` against the context's current state.

    Raises
    ------
    BreakpointContextError
        If conditions are given but the context is missing or has no state yet.
    """
    if not conditions:
        return default
    return resolve(conditions, _require_state(context, conditions), default)


def resolve_visibility(
    context: Optional[BreakpointContext],
    visible: bool = True,
    visible_conditions: Sequence[Condition] = (),
    hidden_conditions: Sequence[Condition] = (),
) -> bool:
    """Resolve a show/hide flag.

    Hidden conditions are appended after visible ones and therefore win when
    both match.
    """
    conditions = [with_value(c, True) for c in visible_conditions]
    conditions.extend(with_value(c, False) for c in hidden_conditions)
    return resolve_value(context, conditions, visible)
