from breakpoints.design.breakpoint import BreakpointRange
from breakpoints.design.debug import describe_breakpoints


def test_empty():
    assert describe_breakpoints([]) == "| Empty |"
    assert describe_breakpoints(None) == "| Empty |"


def test_named_ranges_sorted(device_ranges):
    text = describe_breakpoints(list(reversed(device_ranges)))
    assert text == (
        "| 0 ----- (MOBILE) ----- 450 ----- 451 ----- (TABLET) ----- 800 ----- "
        "801 ----- (DESKTOP) ----- 1920 ----- 1921 ----- (4K) ----- ∞ |"
    )


def test_unnamed_fractional():
    assert describe_breakpoints([BreakpointRange(0, 10.5)]) == "| 0 ----- 10.5 |"
