"""
Configuration & Global Constants
================================
This module serves as the central registry for the fish's tunable constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (alphas, colours, durations)
   scattered throughout the geometry and view code.
2. Deployment: A few values can be overridden through environment variables
   (read once, at import) without touching the code.

Exports:
    DEFAULT_HEAD_RADIUS (float): Head radius every other proportion derives from.
    FISH_COLOR (tuple): RGB fill colour of the fish.
    OTHER_ALPHA (int): Alpha of the head, fins and tail.
    BODY_ALPHA (int): Alpha of the torso silhouette.
    ANIMATION_DURATION_MS (float): Length of one 0-360 phase sweep.
    FRAME_INTERVAL_MS (int): Timer interval of the frame clock.
"""
import logging
import os

logger = logging.getLogger(__name__)

ENV_PREFIX = "SWIMMINGFISH_"


def _env_float(name: str, default: float) -> float:
    """Read a positive float override from the environment."""
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {ENV_PREFIX + name}={raw!r}: not a number.")
        return default
    if not value > 0.0:
        logger.warning(f"Ignoring {ENV_PREFIX + name}={raw!r}: must be positive.")
        return default
    return value


def _env_int(name: str, default: int) -> int:
    """Read a positive integer override from the environment."""
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {ENV_PREFIX + name}={raw!r}: not an integer.")
        return default
    if value <= 0:
        logger.warning(f"Ignoring {ENV_PREFIX + name}={raw!r}: must be positive.")
        return default
    return value


# Geometry
DEFAULT_HEAD_RADIUS: float = _env_float("HEAD_RADIUS", 50.0)

# Paint
FISH_COLOR: tuple[int, int, int] = (244, 92, 71)
OTHER_ALPHA: int = 110  # head, fins, tail
BODY_ALPHA: int = 160  # torso silhouette only
BACKGROUND_COLOR: tuple[int, int, int, int] = (255, 255, 255, 255)

# Animation
ANIMATION_DURATION_MS: float = _env_float("DURATION_MS", 2000.0)
FRAME_INTERVAL_MS: int = _env_int("FRAME_INTERVAL_MS", 16)

# Export
DEFAULT_EXPORT_FRAMES: int = 60

VISIBLE_APP_NAME = "Swimming Fish"
