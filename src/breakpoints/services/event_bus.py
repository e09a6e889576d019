"""EventBus for breakpoint state publication.

Synchronous publish/subscribe used by ``BreakpointController`` to hand each
new ``BreakpointState`` snapshot to consumers.

Goals:
 - Decouple the metrics producer from state consumers
 - Minimal, testable surface (no Qt dependency)
 - Error isolation: one failing subscriber doesn't break the publish cycle
   or propagate back into the host's resize handling
 - One-shot (once) subscriptions and unsubscribe handles
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "BreakpointEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]

log = logging.getLogger(__name__)


class BreakpointEvent(str, Enum):
    BREAKPOINT_CHANGED = "breakpoint_changed"
    PLATFORM_CHANGED = "platform_changed"


@dataclass
class Event:
    name: str  # BreakpointEvent value or custom string
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: str | BreakpointEvent) -> str:
    return name.value if isinstance(name, BreakpointEvent) else name


class EventBus:
    """Synchronous event dispatcher.

    Handlers are invoked while the lock is NOT held (copy-first strategy) so
    they can subscribe or unsubscribe from inside a handler. Handler failures
    are logged and recorded in ``errors``.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, Exception]] = []

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------
    def subscribe(
        self, name: str | BreakpointEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        sub = Subscription(event=_key(name), handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket:
                self._subs[sub.event] = [s for s in bucket if s is not sub]
                if not self._subs[sub.event]:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------
    def publish(self, name: str | BreakpointEvent, payload: Any = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        for sub in subs:
            if not sub.active:
                continue
            if sub.once:
                self.unsubscribe(sub)
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate subscriber failures
                log.warning("Handler for event '%s' failed: %s", key, exc, exc_info=True)
                with self._lock:
                    self._errors.append((evt, exc))
        return evt

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def subscriber_count(self, name: str | BreakpointEvent) -> int:
        with self._lock:
            return len(self._subs.get(_key(name), ()))

    @property
    def errors(self) -> list[tuple[Event, Exception]]:
        with self._lock:
            return list(self._errors)
