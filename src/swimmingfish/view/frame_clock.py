"""
Frame Clock
===========
Drives a ``PhaseDriver`` from the Qt event loop.

A repeating ``QTimer`` fires roughly once per display frame; each tick
measures the elapsed wall-clock time with ``QElapsedTimer`` and converts it into
a phase. Ticks run on the GUI thread, so paint state needs no locking here.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QElapsedTimer, QObject, QTimer, Signal

from swimmingfish import config
from swimmingfish.controller.phase_driver import PhaseDriver

logger = logging.getLogger(__name__)


class QtFrameClock(QObject):
    tick = Signal(float)  # new phase in degrees

    def __init__(
        self,
        driver: PhaseDriver | None = None,
        interval_ms: int = config.FRAME_INTERVAL_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.driver = driver or PhaseDriver()
        self._elapsed = QElapsedTimer()

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    def start(self) -> None:
        """Start (or restart) the sweep from phase 0."""
        self.driver.reset()
        self.driver.start()
        self._elapsed.start()
        self._timer.start()
        logger.info(f"Frame clock started ({self._timer.interval()} ms interval).")

    def stop(self) -> None:
        if not self._timer.isActive():
            return
        self._timer.stop()
        self.driver.stop()
        logger.info("Frame clock stopped.")

    def is_active(self) -> bool:
        return self._timer.isActive()

    def _on_timeout(self) -> None:
        phase = self.driver.advance(float(self._elapsed.elapsed()))
        self.tick.emit(phase)
