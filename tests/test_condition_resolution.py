"""Tests for conditional value resolution."""

import pytest

from breakpoints.config.settings import DESKTOP, MOBILE, TABLET
from breakpoints.design.breakpoint import BreakpointRange
from breakpoints.design.breakpoint_config import BreakpointConfig
from breakpoints.design.conditions import Between, Equals, LargerThan, SmallerThan, with_value
from breakpoints.design.platform import TargetPlatform
from breakpoints.design.resolver import (
    find_active_condition,
    resolve,
    resolve_value,
    resolve_visibility,
)
from breakpoints.design.state import ScreenMetrics, compute_state
from breakpoints.errors import BreakpointContextError, InvalidBreakpointError
from breakpoints.services.breakpoint_controller import BreakpointController

RANGES = [
    BreakpointRange(0, 900, MOBILE),
    BreakpointRange(901, 1400, TABLET),
    BreakpointRange(1401, 2400, DESKTOP),
]


def _state(width, height=2000, platform=None):
    config = BreakpointConfig.create(RANGES)
    return compute_state(ScreenMetrics(width, height), config, platform)


def test_last_declared_wins():
    state = _state(400)
    conditions = [Equals(MOBILE, value=8), Equals(MOBILE, value=16)]
    assert resolve(conditions, state, 0) == 16


def test_later_match_of_other_kind_wins():
    state = _state(400)
    conditions = [Between(0, 500, value="between"), Equals(MOBILE, value="equals")]
    assert resolve(conditions, state, "default") == "equals"
    assert resolve(list(reversed(conditions)), state, "default") == "between"


def test_non_matching_later_conditions_skipped():
    state = _state(1000)
    conditions = [Equals(TABLET, value=2), Equals(MOBILE, value=1)]
    assert resolve(conditions, state, 0) == 2


def test_landscape_override_on_mobile_platform():
    condition = Equals(MOBILE, value=8, landscape_value=12)
    assert resolve([condition], _state(800, 400, TargetPlatform.IOS), 0) == 12
    assert resolve([condition], _state(400, 800, TargetPlatform.IOS), 0) == 8
    assert resolve([condition], _state(800, 400, TargetPlatform.WINDOWS), 0) == 8


def test_landscape_value_defaults_to_value():
    assert resolve([Equals(MOBILE, value=8)], _state(800, 400, TargetPlatform.ANDROID), 0) == 8


def test_between_inclusive():
    conditions = [Between(500, 1000, value="in")]
    assert resolve(conditions, _state(500), "out") == "in"
    assert resolve(conditions, _state(1000), "out") == "in"
    assert resolve(conditions, _state(1001), "out") == "out"


def test_numeric_bounds_are_strict():
    assert resolve([LargerThan(breakpoint=450, value=True)], _state(450), False) is False
    assert resolve([LargerThan(breakpoint=450, value=True)], _state(451), False) is True
    assert resolve([SmallerThan(breakpoint=451, value=True)], _state(450), False) is True
    assert resolve([SmallerThan(breakpoint=450, value=True)], _state(450), False) is False


def test_named_bounds():
    assert resolve([LargerThan(name=MOBILE, value=1)], _state(901), 0) == 1
    assert resolve([LargerThan(name=MOBILE, value=1)], _state(900), 0) == 0
    assert resolve([SmallerThan(name=DESKTOP, value=1)], _state(1400), 0) == 1
    assert resolve([SmallerThan(name=DESKTOP, value=1)], _state(1401), 0) == 0


def test_unknown_names_fall_through_to_default():
    conditions = [
        Equals("WATCH", value="a"),
        SmallerThan(name="WATCH", value="b"),
        LargerThan(name="WATCH", value="c"),
    ]
    for width in (0, 450, 3000):
        assert resolve(conditions, _state(width), "default") == "default"


def test_none_value_falls_back_to_default():
    assert resolve([Equals(MOBILE)], _state(100), 5) == 5


def test_resolve_is_idempotent():
    state = _state(1000)
    conditions = [SmallerThan(name=DESKTOP, value=[1]), Equals(TABLET, value=[2])]
    first = resolve(conditions, state, None)
    assert resolve(conditions, state, None) == first == [2]


def test_find_active_condition():
    state = _state(1000)
    winner = Equals(TABLET, value=2)
    assert find_active_condition([Equals(MOBILE, value=1), winner], state) is winner
    assert find_active_condition([], state) is None


@pytest.mark.parametrize(
    "factory",
    [
        lambda: LargerThan(value=1),
        lambda: SmallerThan(value=1),
        lambda: LargerThan(name=MOBILE, breakpoint=400, value=1),
        lambda: Between(10, 5, value=1),
        lambda: Between(float("nan"), 5, value=1),
        lambda: Between(0, float("nan"), value=1),
        lambda: Equals("", value=1),
    ],
)
def test_invalid_conditions_rejected(factory):
    with pytest.raises(InvalidBreakpointError):
        factory()


def test_with_value_replaces_both_values():
    copy = with_value(Equals(MOBILE, value=1, landscape_value=2), 9)
    assert copy.value == 9 and copy.landscape_value == 9
    assert copy.name == MOBILE


def test_resolve_value_requires_context():
    with pytest.raises(BreakpointContextError, match="MOBILE"):
        resolve_value(None, [Equals(MOBILE, value=1)], 0)
    with pytest.raises(BreakpointContextError):
        resolve_value(None, [Between(0, 10, value=1)], 0)


def test_resolve_value_requires_published_state():
    ctrl = BreakpointController(BreakpointConfig.create(RANGES))
    with pytest.raises(BreakpointContextError):
        resolve_value(ctrl, [LargerThan(name=MOBILE, value=1)], 0)


def test_resolve_value_without_conditions_returns_default():
    assert resolve_value(None, [], "default") == "default"


def test_resolve_value_with_controller():
    ctrl = BreakpointController(BreakpointConfig.create(RANGES), platform=TargetPlatform.ANDROID)
    ctrl.update_metrics(1000, 600)
    conditions = [Equals(TABLET, value="tablet", landscape_value="tablet-landscape")]
    assert resolve_value(ctrl, conditions, "none") == "tablet-landscape"
    ctrl.update_metrics(600, 1000)
    assert resolve_value(ctrl, conditions, "none") == "none"


def test_resolve_visibility():
    ctrl = BreakpointController(BreakpointConfig.create(RANGES))
    ctrl.update_metrics(400, 800)
    assert resolve_visibility(ctrl) is True
    assert resolve_visibility(ctrl, hidden_conditions=[Equals(MOBILE)]) is False
    assert resolve_visibility(ctrl, visible=False, visible_conditions=[Equals(MOBILE)]) is True
    # Hidden conditions win over visible ones
    assert (
        resolve_visibility(
            ctrl,
            visible_conditions=[SmallerThan(name=TABLET)],
            hidden_conditions=[Equals(MOBILE)],
        )
        is False
    )
    assert resolve_visibility(ctrl, visible=False, hidden_conditions=[Equals(TABLET)]) is False
