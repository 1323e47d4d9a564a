"""
Body proportions of the fish.

All lengths derive from a single head radius. The ratios are fixed; scaling the
fish means building a new plan from a different radius.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from swimmingfish import config
from swimmingfish.model.geometry_primitives import Point

# Ratios relative to the head radius unless noted otherwise
BODY_LENGTH_RATIO = 3.2
FIND_FINS_LENGTH_RATIO = 0.9
FINS_LENGTH_RATIO = 1.3
BIG_CIRCLE_RATIO = 0.7
MIDDLE_CIRCLE_RATIO = 0.6  # of the big circle
SMALL_CIRCLE_RATIO = 0.4  # of the middle circle
FIND_TRIANGLE_RATIO = 2.7  # of the middle circle
INTRINSIC_SIZE_RATIO = 8.38
CENTER_OF_MASS_RATIO = 4.18


def _truncate(value: float) -> int:
    # 8.38 * r may land a hair below the whole number it represents
    return math.floor(value + 1e-9)


@dataclass(frozen=True)
class BodyPlan:
    head_radius: float
    body_length: float
    find_fins_length: float
    fins_length: float
    big_circle_radius: float
    middle_circle_radius: float
    small_circle_radius: float
    find_middle_circle_length: float
    find_small_circle_length: float
    find_triangle_length: float
    intrinsic_size: float
    center_of_mass: Point = field(compare=False)

    @classmethod
    def from_head_radius(cls, head_radius: float = config.DEFAULT_HEAD_RADIUS) -> BodyPlan:
        """
        Derive every proportion of the fish from its head radius.

        Raises:
            ValueError: If ``head_radius`` is not a finite positive number.
        """
        if not math.isfinite(head_radius) or head_radius <= 0.0:
            raise ValueError(f"Head radius must be a finite positive number, got {head_radius}.")

        big = head_radius * BIG_CIRCLE_RATIO
        middle = big * MIDDLE_CIRCLE_RATIO
        small = middle * SMALL_CIRCLE_RATIO
        return cls(
            head_radius=head_radius,
            body_length=head_radius * BODY_LENGTH_RATIO,
            find_fins_length=head_radius * FIND_FINS_LENGTH_RATIO,
            fins_length=head_radius * FINS_LENGTH_RATIO,
            big_circle_radius=big,
            middle_circle_radius=middle,
            small_circle_radius=small,
            find_middle_circle_length=big + middle,
            find_small_circle_length=middle * (SMALL_CIRCLE_RATIO + FIND_TRIANGLE_RATIO),
            find_triangle_length=middle * FIND_TRIANGLE_RATIO,
            intrinsic_size=head_radius * INTRINSIC_SIZE_RATIO,
            center_of_mass=Point(head_radius * CENTER_OF_MASS_RATIO, head_radius * CENTER_OF_MASS_RATIO),
        )

    def intrinsic_width(self) -> int:
        """Layout width in whole pixels (truncated)."""
        return _truncate(self.intrinsic_size)

    def intrinsic_height(self) -> int:
        return _truncate(self.intrinsic_size)
