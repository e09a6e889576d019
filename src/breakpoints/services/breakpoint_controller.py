"""Breakpoint controller: metrics in, immutable state snapshots out.

The host reports window metrics through ``update_metrics``; the controller
selects the active breakpoint set, classifies the width, replaces its
``state`` wholesale and publishes ``BreakpointEvent.BREAKPOINT_CHANGED`` with
the new snapshot on its ``EventBus``.

Design:
 - Recompute is memoised on (width, height, platform); repeated reports of
   the same metrics are ignored.
 - The snapshot is swapped before subscribers are notified, so readers never
   observe a half-updated state.
 - A subscriber that reports metrics (or changes the platform) while a
   publish is in progress does not recurse: the request is queued and applied
   after the current publish completes. Only the latest queued request is kept.
 - The controller satisfies ``design.resolver.BreakpointContext`` and is the
   object passed explicitly to ``resolve_value``.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..config import settings
from ..design.breakpoint_config import BreakpointConfig
from ..design.debug import log_breakpoints
from ..design.platform import TargetPlatform
from ..design.state import BreakpointState, ScreenMetrics, compute_state
from ..errors import BreakpointContextError
from .event_bus import BreakpointEvent, EventBus, EventHandler, Subscription
from .service_locator import ServiceNotFoundError, services

__all__ = ["BreakpointController", "get_breakpoint_controller"]

log = logging.getLogger(__name__)

_MemoKey = Tuple[float, float, Optional[TargetPlatform]]


class BreakpointController:
    def __init__(
        self,
        config: BreakpointConfig,
        platform: Optional[TargetPlatform] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self._config = config
        self._platform = platform
        self._bus = bus if bus is not None else EventBus()
        self._state: Optional[BreakpointState] = None
        self._metrics: Optional[ScreenMetrics] = None
        self._memo: Optional[_MemoKey] = None
        self._publishing = False
        self._pending: Optional[ScreenMetrics] = None
        if config.debug_log:
            if config.landscape_breakpoints is not None:
                log_breakpoints("PORTRAIT", config.breakpoints)
                log_breakpoints("LANDSCAPE", config.landscape_breakpoints)
            else:
                log_breakpoints("BREAKPOINTS", config.breakpoints)

    # Accessors ----------------------------------------------------------------
    @property
    def state(self) -> Optional[BreakpointState]:
        return self._state

    @property
    def config(self) -> BreakpointConfig:
        return self._config

    @property
    def platform(self) -> Optional[TargetPlatform]:
        return self._platform

    @property
    def bus(self) -> EventBus:
        return self._bus

    # Subscription ---------------------------------------------------------------
    def subscribe(self, handler: EventHandler, *, once: bool = False) -> Subscription:
        return self._bus.subscribe(BreakpointEvent.BREAKPOINT_CHANGED, handler, once=once)

    def unsubscribe(self, sub: Subscription) -> None:
        self._bus.unsubscribe(sub)

    # Inputs ----------------------------------------------------------------------
    def update_metrics(self, width: float, height: float) -> Optional[BreakpointState]:
        """Report new window metrics; returns the current snapshot."""
        self._submit(ScreenMetrics(width, height))
        return self._state

    def set_platform(self, platform: Optional[TargetPlatform]) -> None:
        if platform == self._platform:
            return
        log.debug("Platform changed %s -> %s", self._platform, platform)
        self._platform = platform
        self._bus.publish(BreakpointEvent.PLATFORM_CHANGED, platform)
        if self._metrics is not None:
            self._submit(self._metrics)

    # Internal --------------------------------------------------------------------
    def _submit(self, metrics: ScreenMetrics) -> None:
        if self._publishing:
            log.debug("Deferring metrics %s until current publish completes", metrics)
            self._pending = metrics
            return
        self._apply(metrics)
        while self._pending is not None:
            pending, self._pending = self._pending, None
            self._apply(pending)

    def _apply(self, metrics: ScreenMetrics) -> None:
        key = (metrics.width, metrics.height, self._platform)
        if key == self._memo and self._state is not None:
            return
        self._memo = key
        self._metrics = metrics
        previous = self._state
        current = compute_state(metrics, self._config, self._platform)
        self._state = current
        if not _changed(previous, current):
            return
        log.debug("Breakpoint state %r", current)
        self._publishing = True
        try:
            self._bus.publish(BreakpointEvent.BREAKPOINT_CHANGED, current)
        finally:
            self._publishing = False


def _changed(previous: Optional[BreakpointState], current: BreakpointState) -> bool:
    if previous is None or previous != current:
        return True
    return (
        previous.is_landscape != current.is_landscape
        or previous.active_set != current.active_set
    )


def get_breakpoint_controller(
    config: Optional[BreakpointConfig] = None,
    platform: Optional[TargetPlatform] = None,
) -> BreakpointController:
    """Return the registered controller, creating it from ``config`` if needed.

    A given ``platform`` is applied to the controller, whether existing or new.
    Raises ``BreakpointContextError`` when no controller is registered and no
    config is supplied.
    """
    try:
        ctrl = services.get_typed(settings.CONTROLLER_SERVICE_KEY, BreakpointController)
    except ServiceNotFoundError:
        if config is None:
            raise BreakpointContextError(
                "No breakpoint controller registered; supply a BreakpointConfig to create one."
            ) from None
        try:
            bus = services.get_typed(settings.EVENT_BUS_SERVICE_KEY, EventBus)
        except ServiceNotFoundError:
            bus = EventBus()
            services.register(settings.EVENT_BUS_SERVICE_KEY, bus)
        ctrl = BreakpointController(config, platform=platform, bus=bus)
        services.register(settings.CONTROLLER_SERVICE_KEY, ctrl)
        return ctrl
    if platform is not None:
        ctrl.set_platform(platform)
    return ctrl
