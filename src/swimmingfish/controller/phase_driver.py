"""
Phase Driver
============
Owns the only time-dependent value of the animation: the phase angle that
sweeps linearly from 0 to 360 degrees over a fixed duration and then restarts.

Why is this file needed?
------------------------
1. Decoupling: The phase is a pure function of elapsed time, so any scheduler
   (a Qt timer, a render loop, a test) can drive it.
2. Notification: Listeners registered on the driver are the host's
   "redraw needed" hook.

Classes:
    PhaseDriver: Stateful wrapper around ``phase_at`` with listeners.
"""
from __future__ import annotations

import logging
import math
import threading
from typing import Callable

from swimmingfish import config

logger = logging.getLogger(__name__)

FULL_TURN = 360.0

PhaseListener = Callable[[float], None]


def phase_at(elapsed_ms: float, duration_ms: float = config.ANIMATION_DURATION_MS) -> float:
    """
    Phase in degrees after ``elapsed_ms`` of a restarting linear 0-360 sweep.

    Args:
        elapsed_ms: Time since the animation started.
        duration_ms: Length of one sweep.

    Returns:
        A value in [0, 360). Whole multiples of the duration map to 0.

    Raises:
        ValueError: If ``elapsed_ms`` is negative or ``duration_ms`` is not positive.
    """
    if duration_ms <= 0.0 or not math.isfinite(duration_ms):
        raise ValueError(f"Duration must be a finite positive number, got {duration_ms}.")
    if elapsed_ms < 0.0 or not math.isfinite(elapsed_ms):
        raise ValueError(f"Elapsed time must be a finite non-negative number, got {elapsed_ms}.")

    fraction = math.fmod(elapsed_ms, duration_ms) / duration_ms
    phase = fraction * FULL_TURN
    # fraction can round up to exactly 1.0 just below a period boundary
    if phase >= FULL_TURN:
        phase = 0.0
    return phase


class PhaseDriver:
    """Current animation phase, advanced from elapsed wall-clock time."""

    def __init__(self, duration_ms: float = config.ANIMATION_DURATION_MS) -> None:
        if duration_ms <= 0.0 or not math.isfinite(duration_ms):
            raise ValueError(f"Duration must be a finite positive number, got {duration_ms}.")
        self.duration_ms = duration_ms
        self._phase = 0.0
        self._running = False
        self._listeners: list[PhaseListener] = []
        self._lock = threading.Lock()

    @property
    def phase(self) -> float:
        with self._lock:
            return self._phase

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._running = True
        logger.debug(f"Phase driver started ({self.duration_ms:g} ms period).")

    def stop(self) -> None:
        self._running = False
        logger.debug("Phase driver stopped.")

    def reset(self) -> None:
        with self._lock:
            self._phase = 0.0

    def add_listener(self, listener: PhaseListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: PhaseListener) -> None:
        self._listeners.remove(listener)

    def advance(self, elapsed_ms: float) -> float:
        """
        Set the phase for ``elapsed_ms`` since start and notify listeners.

        A stopped driver ignores the tick and returns its current phase.
        """
        if not self._running:
            return self.phase

        phase = phase_at(elapsed_ms, self.duration_ms)
        with self._lock:
            self._phase = phase

        # Listeners run outside the lock so they may read ``phase`` freely
        for listener in list(self._listeners):
            listener(phase)
        return phase
