"""Pytest configuration and fixtures for the swimming fish tests."""

import os

import pytest

# Qt tests must never need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from swimmingfish.controller.composer import FrameComposer
from swimmingfish.model.body_plan import BodyPlan
from swimmingfish.model.paint import PaintState
from swimmingfish.view.surface import RecordingSurface


@pytest.fixture
def plan():
    """Body plan of the reference fish (head radius 50)."""
    return BodyPlan.from_head_radius(50.0)


@pytest.fixture
def paint():
    return PaintState()


@pytest.fixture
def composer(plan, paint):
    return FrameComposer(plan, paint)


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for every Qt-dependent test."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
