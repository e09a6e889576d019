"""Global configuration and constants for breakpoint classification."""

from __future__ import annotations

import os
from typing import Final

# Canonical device-type breakpoint names
MOBILE: Final = "MOBILE"
TABLET: Final = "TABLET"
PHONE: Final = "PHONE"
DESKTOP: Final = "DESKTOP"

# Platforms on which a physically rotated device switches to the landscape set
DEFAULT_LANDSCAPE_PLATFORMS: Final = ("ios", "android", "fuchsia")

DEBUG_LOG: Final = os.environ.get("BREAKPOINTS_DEBUG_LOG", "").lower() in ("1", "true", "yes")

# Service locator keys
CONTROLLER_SERVICE_KEY: Final = "breakpoint_controller"
EVENT_BUS_SERVICE_KEY: Final = "event_bus"
