# Shared fixtures. Qt runs on the offscreen platform so the adapter tests work
# headless; pure design tests never touch Qt.

import os
import sys

import pytest

from breakpoints.design.breakpoint import BreakpointRange
from breakpoints.services.service_locator import services

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    return widgets.QApplication.instance() or widgets.QApplication(sys.argv)


@pytest.fixture(autouse=True)
def _clean_services():
    services.clear()
    yield
    services.clear()


@pytest.fixture
def device_ranges():
    return [
        BreakpointRange(0, 450, "MOBILE"),
        BreakpointRange(451, 800, "TABLET"),
        BreakpointRange(801, 1920, "DESKTOP"),
        BreakpointRange(1921, float("inf"), "4K"),
    ]
