"""
Tests for the affine matrix engine (utils.transform_math).

Covers:
- Elementary matrices (translation, scale, rotation, rotation about a point)
- Composition order fidelity
- Point application and bounding boxes under transform
- The composed TransformState matrix and its rotation pivot
- Transform tuple/string ordering and round-trip
- Matrix validation and immutability
"""
import math

import numpy as np
import pytest

from models.transform import Vec2, Rect, TransformState, TransformConfig
from utils.transform_math import (
    identity_matrix, translation_matrix, scale_matrix, rotation_matrix,
    rotation_about_point, compose, state_matrix, apply_to_point,
    bounding_box_of, transformed_center, angle_between, as_affine,
    to_transform_string, matrix_to_svg_transform, parse_transform_string,
)


def assert_point_close(actual, expected):
    assert actual.x == pytest.approx(expected.x, abs=1e-9)
    assert actual.y == pytest.approx(expected.y, abs=1e-9)


def assert_rect_close(actual, expected):
    assert actual.x == pytest.approx(expected.x, abs=1e-9)
    assert actual.y == pytest.approx(expected.y, abs=1e-9)
    assert actual.width == pytest.approx(expected.width, abs=1e-9)
    assert actual.height == pytest.approx(expected.height, abs=1e-9)


# ══════════════════════════════════════════════════════════════════════════
# Elementary matrices
# ══════════════════════════════════════════════════════════════════════════

class TestElementaryMatrices:

    def test_translation_layout(self):
        m = translation_matrix(Vec2(3, -4))
        assert m.tolist() == [[1, 0, 3], [0, 1, -4], [0, 0, 1]]

    def test_scale_layout(self):
        m = scale_matrix(Vec2(2, 0.5))
        assert m.tolist() == [[2, 0, 0], [0, 0.5, 0], [0, 0, 1]]

    def test_rotation_layout(self):
        m = rotation_matrix(math.pi / 2)
        np.testing.assert_allclose(m, [[0, -1, 0], [1, 0, 0], [0, 0, 1]], atol=1e-12)

    def test_positive_angle_is_counter_clockwise_in_math_frame(self):
        """(1, 0) rotated by +90 degrees lands on (0, 1): clockwise on a Y-down screen."""
        p = apply_to_point(rotation_matrix(math.pi / 2), Vec2(1, 0))
        assert_point_close(p, Vec2(0, 1))

    def test_rotation_about_point_keeps_center_fixed(self):
        center = Vec2(5, 5)
        m = rotation_about_point(1.234, center)
        assert_point_close(apply_to_point(m, center), center)

    def test_rotation_about_point_moves_corner(self):
        m = rotation_about_point(math.pi, Vec2(5, 5))
        assert_point_close(apply_to_point(m, Vec2(0, 0)), Vec2(10, 10))

    def test_identity_application(self):
        for p in (Vec2(0, 0), Vec2(-3.5, 7), Vec2(1e6, -1e-6)):
            assert apply_to_point(identity_matrix(), p) == p


# ══════════════════════════════════════════════════════════════════════════
# Composition
# ══════════════════════════════════════════════════════════════════════════

class TestCompose:

    def test_order_fidelity(self):
        m1 = translation_matrix(Vec2(7, -2))
        m2 = rotation_matrix(0.7)
        m3 = scale_matrix(Vec2(3, 0.25))
        p = Vec2(1.5, -4)

        composed = apply_to_point(compose(m1, m2, m3), p)
        nested = apply_to_point(m1, apply_to_point(m2, apply_to_point(m3, p)))
        assert_point_close(composed, nested)

    def test_not_commutative(self):
        t = translation_matrix(Vec2(10, 0))
        s = scale_matrix(Vec2(2, 2))
        p = Vec2(1, 1)
        assert apply_to_point(compose(t, s), p) == Vec2(12, 2)
        assert apply_to_point(compose(s, t), p) == Vec2(22, 2)

    def test_empty_compose_is_identity(self):
        assert np.array_equal(compose(), np.eye(3))

    def test_compose_keeps_bottom_row(self):
        m = compose(translation_matrix(Vec2(1, 2)), rotation_matrix(2.0), scale_matrix(Vec2(3, 4)))
        assert m[2].tolist() == [0, 0, 1]


# ══════════════════════════════════════════════════════════════════════════
# Bounding boxes
# ══════════════════════════════════════════════════════════════════════════

class TestBoundingBox:

    def test_identity_bbox_is_rect(self):
        rect = Rect(2, 3, 10, 20)
        assert bounding_box_of(rect, identity_matrix()) == rect

    def test_quarter_turn_about_origin(self):
        bbox = bounding_box_of(Rect(0, 0, 10, 20), rotation_matrix(math.pi / 2))
        assert_rect_close(bbox, Rect(-20, 0, 20, 10))

    def test_eighth_turn_uses_all_four_corners(self):
        """At 45 degrees the diagonal corners alone would give a zero-width box."""
        m = rotation_about_point(math.pi / 4, Vec2(5, 5))
        bbox = bounding_box_of(Rect(0, 0, 10, 10), m)
        diagonal = 10 * math.sqrt(2)
        assert_rect_close(bbox, Rect(5 - diagonal / 2, 5 - diagonal / 2, diagonal, diagonal))

    @pytest.mark.parametrize("theta", [0.0, 0.3, math.pi / 3, 2.5, -1.1])
    def test_square_rotation_is_periodic(self, theta):
        square = Rect(0, 0, 10, 10)
        center = Vec2(5, 5)
        first = bounding_box_of(square, rotation_about_point(theta, center))
        wrapped = bounding_box_of(square, rotation_about_point(theta + 2 * math.pi, center))
        assert_rect_close(first, wrapped)


# ══════════════════════════════════════════════════════════════════════════
# TransformState matrix
# ══════════════════════════════════════════════════════════════════════════

class TestStateMatrix:

    def test_identity_state_scenario(self, identity_state, config):
        m = state_matrix(identity_state, config)
        np.testing.assert_allclose(m, np.eye(3), atol=1e-12)
        assert_rect_close(bounding_box_of(config.canonical_rect, m), Rect(0, 0, 10, 10))

    def test_translation_only(self, config):
        state = TransformState(translation=Vec2(10, 20))
        bbox = bounding_box_of(config.canonical_rect, state_matrix(state, config))
        assert_rect_close(bbox, Rect(10, 20, 10, 10))

    def test_scale_happens_in_local_space(self, config):
        state = TransformState(translation=Vec2(10, 10), scale=Vec2(2, 3))
        bbox = bounding_box_of(config.canonical_rect, state_matrix(state, config))
        assert_rect_close(bbox, Rect(10, 10, 20, 30))

    def test_rotation_pivot_is_scaled_center(self, config):
        """Rotating the scaled 20x10 shape by 90 degrees pivots about (10, 5), not (5, 5)."""
        state = TransformState(rotation=math.pi / 2, scale=Vec2(2, 1))
        bbox = bounding_box_of(config.canonical_rect, state_matrix(state, config))
        assert_rect_close(bbox, Rect(5, -5, 10, 20))

    def test_transformed_center_follows_translation_and_scale(self, config):
        state = TransformState(translation=Vec2(10, 20), rotation=0.9, scale=Vec2(2, 4))
        assert_point_close(transformed_center(state, config), Vec2(20, 40))

    def test_custom_canonical_geometry(self):
        config = TransformConfig(canonical_width=4, canonical_height=2)
        state = TransformState(rotation=math.pi)
        bbox = bounding_box_of(config.canonical_rect, state_matrix(state, config))
        assert_rect_close(bbox, Rect(0, 0, 4, 2))


# ══════════════════════════════════════════════════════════════════════════
# Angles
# ══════════════════════════════════════════════════════════════════════════

class TestAngleBetween:

    def test_straight_up_on_screen(self):
        assert angle_between(Vec2(5, 5), Vec2(5, 0)) == -math.pi / 2

    def test_right(self):
        assert angle_between(Vec2(5, 5), Vec2(9, 5)) == 0.0

    def test_left(self):
        assert angle_between(Vec2(5, 5), Vec2(0, 5)) == math.pi


# ══════════════════════════════════════════════════════════════════════════
# Transform tuple / string form
# ══════════════════════════════════════════════════════════════════════════

class TestTransformString:

    def test_column_major_ordering(self):
        m = as_affine([[1, 2, 3], [4, 5, 6], [0, 0, 1]])
        assert to_transform_string(m) == (1, 4, 2, 5, 3, 6)

    def test_svg_string_body(self):
        assert matrix_to_svg_transform(translation_matrix(Vec2(10, 20))) == "1.0 0.0 0.0 1.0 10.0 20.0"

    def test_round_trip_is_exact(self):
        m = state_matrix(TransformState(Vec2(1 / 3, 2 / 7), 0.123456789, Vec2(1.1, 0.9)))
        parsed = parse_transform_string(matrix_to_svg_transform(m))
        assert to_transform_string(parsed) == to_transform_string(m)

    def test_parse_matrix_function_with_commas(self):
        m = parse_transform_string("matrix(1, 0, 0, 1, 10, 20)")
        assert m.tolist() == [[1, 0, 10], [0, 1, 20], [0, 0, 1]]

    @pytest.mark.parametrize("text", ["", "1 2 3", "1 2 3 4 5 6 7", "a b c d e f"])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            parse_transform_string(text)


# ══════════════════════════════════════════════════════════════════════════
# Validation and immutability
# ══════════════════════════════════════════════════════════════════════════

class TestMatrixInvariants:

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError, match="3x3"):
            as_affine([[1, 0], [0, 1]])

    def test_rejects_bad_bottom_row(self):
        with pytest.raises(ValueError, match="bottom row"):
            compose([[1, 0, 0], [0, 1, 0], [0, 1, 1]])

    @pytest.mark.parametrize("value", [float('nan'), float('inf'), -float('inf')])
    def test_rejects_non_finite_entries(self, value):
        with pytest.raises(ValueError, match="finite"):
            as_affine([[1, 0, value], [0, 1, 0], [0, 0, 1]])

    def test_rotation_about_non_finite_pivot_raises_clearly(self):
        with pytest.raises(ValueError, match="finite"):
            rotation_about_point(0.0, Vec2(float('nan'), 5))

    def test_non_finite_state_has_no_matrix(self):
        with pytest.raises(ValueError, match="finite"):
            state_matrix(TransformState(scale=Vec2(float('nan'), 1)))

    def test_compose_result_keeps_affine_bottom_row(self):
        m = compose(rotation_about_point(0.3, Vec2(5, 5)), scale_matrix(Vec2(2, 3)))
        assert m[2].tolist() == [0.0, 0.0, 1.0]

    def test_parse_rejects_non_finite_numbers(self):
        with pytest.raises(ValueError, match="finite"):
            parse_transform_string("1 0 0 1 nan 0")

    def test_returned_matrices_are_read_only(self):
        m = translation_matrix(Vec2(1, 1))
        with pytest.raises(ValueError):
            m[0, 2] = 5.0

    def test_compose_result_is_read_only(self):
        m = compose(scale_matrix(Vec2(2, 2)))
        assert not m.flags.writeable
