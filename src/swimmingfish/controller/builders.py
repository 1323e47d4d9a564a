"""
Shape builders for the individual parts of the fish.

Each builder is a pure function: it takes anchor points and angles, projects the
remaining corner/control points with ``project`` and returns fresh draw
commands. Nothing here touches a rendering surface.
"""
from __future__ import annotations

from swimmingfish.model.body_plan import BodyPlan
from swimmingfish.model.geometry_primitives import Path, Point
from swimmingfish.model.geometry_utils import project
from swimmingfish.model.paint import ResolvedPaint
from swimmingfish.model.shapes import DrawCommand, FillCircle, FillPath, ShapeKind

FIN_CONTROL_ANGLE = 115.0
FIN_CONTROL_LENGTH_RATIO = 1.8
BODY_CONTROL_ANGLE = 130.0
BODY_CONTROL_LENGTH_RATIO = 0.56


def build_tapered_segment(
    bottom_center: Point,
    big_radius: float,
    small_radius: float,
    search_length: float,
    angle: float,
    has_big_circle: bool,
    paint: ResolvedPaint,
) -> tuple[list[DrawCommand], Point]:
    """
    Build one tail segment: a trapezoid joining a big circle to a smaller one.

    The trapezoid corners always use both radii, even when the big circle itself
    is not drawn (the second segment reuses the first one's small circle).

    Args:
        bottom_center: Centre of the big circle.
        big_radius: Radius of the big circle.
        small_radius: Radius of the small circle.
        search_length: Distance between the two centres.
        angle: Wag-perturbed heading of the segment in degrees.
        has_big_circle: Whether to emit the big circle.
        paint: Fill paint for every emitted shape.

    Returns:
        The emitted commands (big circle if any, small circle, trapezoid) and the
        centre of the small circle, where the next segment is anchored.
    """
    upper_center = project(bottom_center, search_length, angle - 180.0)

    bottom_left = project(bottom_center, big_radius, angle + 90.0)
    bottom_right = project(bottom_center, big_radius, angle - 90.0)
    upper_left = project(upper_center, small_radius, angle + 90.0)
    upper_right = project(upper_center, small_radius, angle - 90.0)

    commands: list[DrawCommand] = []
    if has_big_circle:
        commands.append(FillCircle(ShapeKind.SEGMENT_CIRCLE, bottom_center, big_radius, paint))
    commands.append(FillCircle(ShapeKind.SEGMENT_CIRCLE, upper_center, small_radius, paint))

    trapezoid = (
        Path.starting_at(bottom_left)
        .line_to(upper_left)
        .line_to(upper_right)
        .line_to(bottom_right)
    )
    commands.append(FillPath(ShapeKind.SEGMENT, trapezoid, paint))
    return commands, upper_center


def build_fin(
    start: Point,
    heading: float,
    is_right: bool,
    fins_length: float,
    paint: ResolvedPaint,
) -> FillPath:
    """A single quadratic blob; the curve bulges outward on the given side."""
    control_angle = heading - FIN_CONTROL_ANGLE if is_right else heading + FIN_CONTROL_ANGLE
    control = project(start, FIN_CONTROL_LENGTH_RATIO * fins_length, control_angle)
    end = project(start, fins_length, heading - 180.0)

    return FillPath(ShapeKind.FIN, Path.starting_at(start).quad_to(control, end), paint)


def build_triangle(
    start: Point,
    find_center_length: float,
    find_edge_length: float,
    angle: float,
    paint: ResolvedPaint,
) -> FillPath:
    """Tail lobe: apex at ``start``, base centred ``find_center_length`` behind it."""
    center = project(start, find_center_length, angle - 180.0)
    left = project(center, find_edge_length, angle + 90.0)
    right = project(center, find_edge_length, angle - 90.0)

    return FillPath(ShapeKind.LOBE, Path.starting_at(start).line_to(left).line_to(right), paint)


def build_body(
    head: Point,
    body_bottom: Point,
    heading: float,
    plan: BodyPlan,
    paint: ResolvedPaint,
) -> FillPath:
    """
    Torso silhouette between the head and the tail root.

    The flanks are two independent quadratic curves whose control points set how
    plump the fish looks; the bottom edge is straight and the top edge is closed
    by the fill.
    """
    top_left = project(head, plan.head_radius, heading + 90.0)
    top_right = project(head, plan.head_radius, heading - 90.0)
    bottom_left = project(body_bottom, plan.big_circle_radius, heading + 90.0)
    bottom_right = project(body_bottom, plan.big_circle_radius, heading - 90.0)

    control_length = plan.body_length * BODY_CONTROL_LENGTH_RATIO
    control_left = project(head, control_length, heading + BODY_CONTROL_ANGLE)
    control_right = project(head, control_length, heading - BODY_CONTROL_ANGLE)

    silhouette = (
        Path.starting_at(top_left)
        .quad_to(control_left, bottom_left)
        .line_to(bottom_right)
        .quad_to(control_right, top_right)
    )
    return FillPath(ShapeKind.BODY, silhouette, paint)
