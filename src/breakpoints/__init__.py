"""Screen breakpoint classification and conditional value resolution."""

from .config.settings import MOBILE, TABLET, PHONE, DESKTOP  # noqa: F401
from .errors import BreakpointError, InvalidBreakpointError, BreakpointContextError  # noqa: F401
from .design import (  # noqa: F401
    BreakpointRange,
    BreakpointSet,
    BreakpointConfig,
    BreakpointState,
    ScreenMetrics,
    TargetPlatform,
    Orientation,
    Equals,
    Between,
    LargerThan,
    SmallerThan,
    classify_width,
    resolve,
    resolve_value,
    resolve_visibility,
    describe_breakpoints,
)
from .services import BreakpointController, EventBus, BreakpointEvent  # noqa: F401

__version__ = "0.1.0"
