from __future__ import annotations

import math

from swimmingfish.model.geometry_primitives import Point


def project(anchor: Point, distance: float, angle_degrees: float) -> Point:
    """
    Find the point ``distance`` away from ``anchor`` in the direction ``angle_degrees``.

    Angles are measured counter-clockwise from the +x axis as seen on screen.
    Because screen y grows downward the vertical offset is
    ``distance * sin(angle - 180)``, i.e. 90 degrees points up.

    Args:
        anchor: Starting point.
        distance: Length of the offset.
        angle_degrees: Direction of the offset in degrees; not normalised.

    Returns:
        The projected point.
    """
    dx = distance * math.cos(math.radians(angle_degrees))
    dy = distance * math.sin(math.radians(angle_degrees - 180.0))
    return Point(anchor.x + dx, anchor.y + dy)
