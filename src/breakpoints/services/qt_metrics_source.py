"""Qt host adapter feeding widget metrics into a ``BreakpointController``.

Responsibilities:
 - Install an event filter on a top-level ``QWidget`` and forward every
   ``QEvent.Type.Resize`` as ``controller.update_metrics(width, height)``.
 - Push the widget's current size immediately on ``attach`` so consumers have
   a state before the first resize.
 - Map the running Qt platform (``QSysInfo``) to ``TargetPlatform`` and apply
   it on ``attach`` unless the controller already has an explicit platform.

The event filter never consumes events (always returns False).
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import QEvent, QObject, QSysInfo
from PyQt6.QtWidgets import QWidget

from ..design.platform import TargetPlatform
from .breakpoint_controller import BreakpointController

__all__ = ["QtMetricsSource", "detect_platform"]

log = logging.getLogger(__name__)

_PRODUCT_PLATFORMS = {
    "android": TargetPlatform.ANDROID,
    "ios": TargetPlatform.IOS,
    "macos": TargetPlatform.MACOS,
    "osx": TargetPlatform.MACOS,
    "windows": TargetPlatform.WINDOWS,
    "wasm": TargetPlatform.WEB,
}

_KERNEL_PLATFORMS = {
    "linux": TargetPlatform.LINUX,
    "darwin": TargetPlatform.MACOS,
    "winnt": TargetPlatform.WINDOWS,
}


def detect_platform(
    product_type: Optional[str] = None, kernel_type: Optional[str] = None
) -> Optional[TargetPlatform]:
    """Return the ``TargetPlatform`` for the running (or given) Qt platform."""
    product = (product_type if product_type is not None else QSysInfo.productType()).lower()
    if product in _PRODUCT_PLATFORMS:
        return _PRODUCT_PLATFORMS[product]
    kernel = (kernel_type if kernel_type is not None else QSysInfo.kernelType()).lower()
    # Linux distributions report their own product type (debian, ubuntu, ...)
    return _KERNEL_PLATFORMS.get(kernel)


class QtMetricsSource(QObject):
    def __init__(self, controller: BreakpointController, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._controller = controller
        self._widget: Optional[QWidget] = None

    @property
    def controller(self) -> BreakpointController:
        return self._controller

    def attach(self, widget: QWidget) -> None:
        if self._widget is widget:
            return
        self.detach()
        if self._controller.platform is None:
            self._controller.set_platform(detect_platform())
        widget.installEventFilter(self)
        self._widget = widget
        self._controller.update_metrics(widget.width(), widget.height())

    def detach(self) -> None:
        if self._widget is not None:
            self._widget.removeEventFilter(self)
            self._widget = None

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt API
        if watched is self._widget and event.type() == QEvent.Type.Resize:
            size = event.size()  # type: ignore[attr-defined]
            try:
                self._controller.update_metrics(size.width(), size.height())
            except Exception:  # noqa: BLE001 - must not propagate into the Qt event loop
                log.exception("Failed to apply resize metrics %sx%s", size.width(), size.height())
        return False
