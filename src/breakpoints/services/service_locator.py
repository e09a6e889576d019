"""Registry for the shared breakpoint controller and its event bus.

Host integration code (e.g. the Qt metrics adapter set up at startup) finds
the application-wide ``BreakpointController`` through
``get_breakpoint_controller`` without threading references through every
constructor. Value resolution itself never consults the registry; callers
pass their context explicitly.

Lookups are typed: ``get_typed`` fails loudly on a missing key or a value of
the wrong type, so a misregistered controller surfaces at the lookup site.
"""

from __future__ import annotations

from threading import RLock
from typing import Any, Dict, Type, TypeVar

T = TypeVar("T")

__all__ = ["ServiceLocator", "services", "ServiceAlreadyRegisteredError", "ServiceNotFoundError"]


class ServiceAlreadyRegisteredError(RuntimeError):
    """Raised when attempting to register an existing key without allow_override."""


class ServiceNotFoundError(KeyError):
    """Raised when a requested service key is not present."""


class ServiceLocator:
    """Thread-safe key to singleton registry."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._services: Dict[str, Any] = {}

    def register(self, key: str, value: Any, *, allow_override: bool = False) -> None:
        with self._lock:
            if key in self._services and not allow_override:
                raise ServiceAlreadyRegisteredError(f"Service '{key}' already registered")
            self._services[key] = value

    def get_typed(self, key: str, expected_type: Type[T]) -> T:
        with self._lock:
            if key not in self._services:
                raise ServiceNotFoundError(key)
            value = self._services[key]
        if not isinstance(value, expected_type):
            raise TypeError(
                f"Service '{key}' expected type {expected_type!r} but got {type(value)!r}"
            )
        return value

    def try_get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._services.get(key, default)

    def clear(self) -> None:
        with self._lock:
            self._services.clear()


services = ServiceLocator()
