"""Tests for per-frame composition and the draw-order contract."""

import numpy as np
import pytest

from swimmingfish.controller.composer import FrameComposer, InvalidSurfaceError
from swimmingfish.model.geometry_utils import project
from swimmingfish.model.shapes import FillCircle, FillPath, ShapeKind

EXPECTED_ORDER = [
    ShapeKind.HEAD,
    ShapeKind.FIN, ShapeKind.FIN,
    ShapeKind.SEGMENT_CIRCLE, ShapeKind.SEGMENT_CIRCLE, ShapeKind.SEGMENT,
    ShapeKind.SEGMENT_CIRCLE, ShapeKind.SEGMENT,
    ShapeKind.LOBE, ShapeKind.LOBE,
    ShapeKind.BODY,
]

PHASES = [0.0, 37.5, 90.0, 180.0, 271.25, 359.999]


class TestMainAngle:
    def test_zero_phase_points_straight_up(self):
        assert FrameComposer.main_angle(0.0) == 90.0

    def test_head_oscillates_ten_degrees(self):
        assert FrameComposer.main_angle(90.0) == pytest.approx(100.0)
        assert FrameComposer.main_angle(270.0) == pytest.approx(80.0)


class TestAnchors:
    def test_head_at_zero_phase(self, composer, plan):
        anchors = composer.anchors(0.0)
        assert anchors.head == project(plan.center_of_mass, 80.0, 90.0)
        assert anchors.head.y == pytest.approx(129.0)

    def test_body_bottom_opposite_head(self, composer, plan):
        anchors = composer.anchors(45.0)
        assert anchors.head.distance_to(anchors.body_bottom) == pytest.approx(plan.body_length)

    def test_tail_chain_distances(self, composer, plan):
        anchors = composer.anchors(123.0)
        assert anchors.body_bottom.distance_to(anchors.middle_circle_center) == pytest.approx(
            plan.find_middle_circle_length)
        assert anchors.middle_circle_center.distance_to(anchors.small_circle_center) == pytest.approx(
            plan.find_small_circle_length)

    def test_fins_are_mirrored_at_rest(self, composer):
        anchors = composer.anchors(0.0)
        assert anchors.right_fin.y == pytest.approx(anchors.left_fin.y)
        assert anchors.right_fin.x - anchors.head.x == pytest.approx(anchors.head.x - anchors.left_fin.x)


class TestComposeFrame:
    @pytest.mark.parametrize("phase", PHASES)
    def test_fixed_draw_order(self, composer, phase):
        kinds = [c.kind for c in composer.compose_frame(phase)]
        assert kinds == EXPECTED_ORDER

    @pytest.mark.parametrize("phase", PHASES)
    def test_eight_logical_shapes(self, composer, phase):
        commands = composer.compose_frame(phase)
        logical = [c for c in commands if c.kind != ShapeKind.SEGMENT_CIRCLE]
        assert len(logical) == 8
        assert sum(isinstance(c, FillCircle) for c in commands) == 4
        assert sum(isinstance(c, FillPath) for c in commands) == 7

    def test_idempotent(self, composer):
        assert composer.compose_frame(211.3) == composer.compose_frame(211.3)

    def test_body_alpha_only_on_body(self, composer):
        commands = composer.compose_frame(15.0)
        assert commands[-1].paint.alpha == 160
        assert all(c.paint.alpha == 110 for c in commands[:-1])

    def test_host_alpha_does_not_change_body(self, plan, paint):
        commands = FrameComposer(plan, paint.with_alpha(40)).compose_frame(15.0)
        assert commands[-1].paint.alpha == 160
        assert all(c.paint.alpha == 40 for c in commands[:-1])

    def test_lobes_anchor_at_middle_circle(self, composer):
        anchors = composer.anchors(300.0)
        lobes = [c for c in composer.compose_frame(300.0) if c.kind == ShapeKind.LOBE]
        assert all(lobe.path.ops[0].point == anchors.middle_circle_center for lobe in lobes)

    def test_inner_lobe_is_smaller(self, composer):
        outer, inner = [c for c in composer.compose_frame(0.0) if c.kind == ShapeKind.LOBE]
        outer_base = outer.path.vertices()[1:]
        inner_base = inner.path.vertices()[1:]
        assert np.linalg.norm(outer_base[0] - outer_base[1]) == pytest.approx(70.0)
        assert np.linalg.norm(inner_base[0] - inner_base[1]) == pytest.approx(30.0)

    def test_fits_intrinsic_box(self, composer, plan):
        size = plan.intrinsic_size
        for phase in np.linspace(0.0, 360.0, 73, endpoint=False):
            for command in composer.compose_frame(float(phase)):
                (xmin, ymin), (xmax, ymax) = command.bounds()
                assert xmin >= 0.0 and ymin >= 0.0
                assert xmax <= size and ymax <= size


class TestRenderFrame:
    def test_issues_commands_in_order(self, composer, recording_surface):
        commands = composer.render_frame(recording_surface, 90.0)
        assert recording_surface.kinds() == [
            "circle" if isinstance(c, FillCircle) else "path" for c in commands
        ]
        assert recording_surface.calls[0][1] == (commands[0].center, commands[0].radius, commands[0].paint)

    def test_repeated_render_is_bit_identical(self, composer, recording_surface):
        composer.render_frame(recording_surface, 42.0)
        first = list(recording_surface.calls)
        recording_surface.clear()
        composer.render_frame(recording_surface, 42.0)
        assert recording_surface.calls == first

    def test_rejects_missing_surface(self, composer):
        with pytest.raises(InvalidSurfaceError):
            composer.render_frame(None, 0.0)

    def test_rejects_malformed_surface(self, composer):
        with pytest.raises(InvalidSurfaceError):
            composer.render_frame(object(), 0.0)

    def test_invalid_surface_is_a_type_error(self, composer):
        with pytest.raises(TypeError):
            composer.render_frame("canvas", 0.0)
