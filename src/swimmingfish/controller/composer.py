"""
Frame Composer
==============
Per-frame orchestration of the fish drawing.

Why is this file needed?
------------------------
1. Layering: The draw order is part of the look. Later shapes occlude earlier
   ones, and the torso is drawn last, at a higher alpha, over the roots of the
   fins and the tail.
2. Determinism: A frame is a pure function of the phase, the body plan and
   the paint state. ``compose_frame`` returns the commands; ``render_frame``
   only forwards them to a surface.

Classes:
    FrameAnchors: The anchor chain of one frame.
    FrameComposer: Builds and issues the draw commands.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from swimmingfish.controller.builders import (
    build_body, build_fin, build_tapered_segment, build_triangle,
)
from swimmingfish.model.body_plan import BodyPlan
from swimmingfish.model.geometry_primitives import Point
from swimmingfish.model.geometry_utils import project
from swimmingfish.model.paint import PaintState
from swimmingfish.model.shapes import DrawCommand, FillCircle, FillPath, ShapeKind

if TYPE_CHECKING:
    from swimmingfish.view.surface import RenderSurface

logger = logging.getLogger(__name__)

BASE_ANGLE = 90.0  # head points up
HEAD_WAG_AMPLITUDE = 10.0
FIN_ANCHOR_ANGLE = 110.0
TAIL_SPEED = 2.0  # tail wags twice per head oscillation
SEGMENT_WAG_AMPLITUDE = 30.0
TAIL_TIP_WAG_AMPLITUDE = 50.0
INNER_LOBE_CENTER_INSET = 10.0
INNER_LOBE_EDGE_INSET = 20.0


class InvalidSurfaceError(TypeError):
    """Raised when the host hands over a missing or malformed rendering surface."""


@dataclass(frozen=True)
class FrameAnchors:
    """Anchor chain of a single frame, from the head back to the tail."""
    main_angle: float
    head: Point
    right_fin: Point
    left_fin: Point
    body_bottom: Point
    middle_circle_center: Point
    small_circle_center: Point


def _wag(phase: float, speed: float, amplitude: float) -> float:
    return math.sin(math.radians(phase * speed)) * amplitude


def check_surface(surface: object) -> None:
    if surface is None:
        raise InvalidSurfaceError("No rendering surface supplied.")
    for method in ("fill_circle", "fill_path"):
        if not callable(getattr(surface, method, None)):
            raise InvalidSurfaceError(
                f"{type(surface).__name__} is not a rendering surface: missing '{method}'."
            )


class FrameComposer:
    """Turns a phase angle into the ordered draw commands of one frame."""

    def __init__(self, plan: BodyPlan | None = None, paint: PaintState | None = None) -> None:
        self.plan = plan or BodyPlan.from_head_radius()
        self.paint = paint or PaintState()

    @staticmethod
    def main_angle(phase: float) -> float:
        return BASE_ANGLE + _wag(phase, 1.0, HEAD_WAG_AMPLITUDE)

    def anchors(self, phase: float) -> FrameAnchors:
        plan = self.plan
        fish_angle = self.main_angle(phase)
        head = project(plan.center_of_mass, plan.body_length / 2.0, fish_angle)
        body_bottom = project(head, plan.body_length, fish_angle - 180.0)

        segment_angle = fish_angle + _wag(phase, TAIL_SPEED, SEGMENT_WAG_AMPLITUDE)
        tip_angle = fish_angle + _wag(phase, TAIL_SPEED, TAIL_TIP_WAG_AMPLITUDE)
        middle = project(body_bottom, plan.find_middle_circle_length, segment_angle - 180.0)
        small = project(middle, plan.find_small_circle_length, tip_angle - 180.0)

        return FrameAnchors(
            main_angle=fish_angle,
            head=head,
            right_fin=project(head, plan.find_fins_length, fish_angle - FIN_ANCHOR_ANGLE),
            left_fin=project(head, plan.find_fins_length, fish_angle + FIN_ANCHOR_ANGLE),
            body_bottom=body_bottom,
            middle_circle_center=middle,
            small_circle_center=small,
        )

    def compose_frame(self, phase: float) -> list[DrawCommand]:
        """
        Build every draw command of the frame at ``phase``, in draw order.

        Args:
            phase: Animation phase in degrees.

        Returns:
            Head, right fin, left fin, tail segment 1, tail segment 2, outer and
            inner lobe, torso.
        """
        plan = self.plan
        other = self.paint.appendage_paint()
        anchors = self.anchors(phase)
        head = anchors.head
        fish_angle = anchors.main_angle
        segment_angle = fish_angle + _wag(phase, TAIL_SPEED, SEGMENT_WAG_AMPLITUDE)
        tip_angle = fish_angle + _wag(phase, TAIL_SPEED, TAIL_TIP_WAG_AMPLITUDE)

        commands: list[DrawCommand] = []
        commands.append(FillCircle(ShapeKind.HEAD, head, plan.head_radius, other))

        commands.append(build_fin(anchors.right_fin, fish_angle, True, plan.fins_length, other))
        commands.append(build_fin(anchors.left_fin, fish_angle, False, plan.fins_length, other))

        body_bottom = anchors.body_bottom
        segment, middle_center = build_tapered_segment(
            body_bottom, plan.big_circle_radius, plan.middle_circle_radius,
            plan.find_middle_circle_length, segment_angle, True, other,
        )
        commands.extend(segment)
        segment, _ = build_tapered_segment(
            middle_center, plan.middle_circle_radius, plan.small_circle_radius,
            plan.find_small_circle_length, tip_angle, False, other,
        )
        commands.extend(segment)

        commands.append(build_triangle(
            middle_center, plan.find_triangle_length, plan.big_circle_radius, tip_angle, other,
        ))
        commands.append(build_triangle(
            middle_center,
            plan.find_triangle_length - INNER_LOBE_CENTER_INSET,
            plan.big_circle_radius - INNER_LOBE_EDGE_INSET,
            tip_angle,
            other,
        ))

        commands.append(build_body(head, body_bottom, fish_angle, plan, self.paint.body_paint()))
        return commands

    def render_frame(self, surface: RenderSurface, phase: float) -> list[DrawCommand]:
        """
        Draw the frame at ``phase`` onto ``surface``.

        Raises:
            InvalidSurfaceError: If ``surface`` is missing or lacks the fill methods.
        """
        check_surface(surface)
        commands = self.compose_frame(phase)
        for command in commands:
            if isinstance(command, FillCircle):
                surface.fill_circle(command.center, command.radius, command.paint)
            elif isinstance(command, FillPath):
                surface.fill_path(command.path, command.paint)
        logger.debug(f"Rendered frame at phase {phase:.2f} ({len(commands)} draw calls).")
        return commands
