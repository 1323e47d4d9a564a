"""
Fish Widget
===========
Hosts the animated fish inside a Qt layout.

Why is this file needed?
------------------------
1. Lifecycle: It owns the frame clock and starts/stops it with the widget's
   visibility, so hidden widgets do not keep ticking.
2. Host setters: Alpha and colour filter changes replace the immutable paint
   state and schedule a repaint.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional

from PySide6.QtCore import QSize
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from swimmingfish.controller.composer import FrameComposer
from swimmingfish.model.body_plan import BodyPlan
from swimmingfish.model.paint import ColorFilter, PaintState
from swimmingfish.view.frame_clock import QtFrameClock
from swimmingfish.view.qt_surface import QPainterSurface

logger = logging.getLogger(__name__)


class Opacity(IntEnum):
    OPAQUE = 0
    TRANSPARENT = 1
    TRANSLUCENT = 2


class FishWidget(QWidget):
    def __init__(
        self,
        plan: BodyPlan | None = None,
        paint: PaintState | None = None,
        clock: QtFrameClock | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.composer = FrameComposer(plan, paint)
        self.clock = clock or QtFrameClock(parent=self)
        self.clock.tick.connect(self._on_tick)
        self._phase = 0.0

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def phase(self) -> float:
        return self._phase

    def set_alpha(self, alpha: int) -> None:
        """Set the alpha of head, fins and tail (0-255). The torso keeps its own."""
        self.composer.paint = self.composer.paint.with_alpha(alpha)
        self.update()

    def set_color_filter(self, color_filter: Optional[ColorFilter]) -> None:
        """Set or clear (``None``) the colour filter applied to every fill."""
        self.composer.paint = self.composer.paint.with_color_filter(color_filter)
        self.update()

    def opacity(self) -> Opacity:
        return Opacity.TRANSLUCENT

    def sizeHint(self) -> QSize:
        plan = self.composer.plan
        return QSize(plan.intrinsic_width(), plan.intrinsic_height())

    def minimumSizeHint(self) -> QSize:
        return self.sizeHint()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self.clock.start()

    def hideEvent(self, event) -> None:
        self.clock.stop()
        super().hideEvent(event)

    def closeEvent(self, event) -> None:
        self.clock.stop()
        super().closeEvent(event)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            # Keep the intrinsic box centred when the widget is larger
            size = self.composer.plan.intrinsic_size
            painter.translate((self.width() - size) / 2.0, (self.height() - size) / 2.0)
            self.composer.render_frame(QPainterSurface(painter), self._phase)
        finally:
            painter.end()

    def _on_tick(self, phase: float) -> None:
        self._phase = phase
        self.update()
