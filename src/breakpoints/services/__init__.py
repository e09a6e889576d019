"""Service layer exports.

Responsibilities:
 - Dependency/service locator (`services`)
 - EventBus publish/subscribe core
 - BreakpointController (metrics subscription and snapshot publication)

The PyQt6 adapter lives in `qt_metrics_source` and is imported explicitly so
that the rest of the package stays usable headless.
"""

from .service_locator import services, ServiceLocator  # noqa: F401
from .event_bus import EventBus, BreakpointEvent  # noqa: F401
from .breakpoint_controller import BreakpointController, get_breakpoint_controller  # noqa: F401

__all__ = [
    "services",
    "ServiceLocator",
    "EventBus",
    "BreakpointEvent",
    "BreakpointController",
    "get_breakpoint_controller",
]
