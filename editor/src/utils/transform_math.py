"""
Affine Transform Widget - Transform Math Utilities

This module provides the affine matrix engine used by the drag controller
and the presenters: building translation/rotation/scale matrices, composing
them, applying them to points and deriving bounding boxes.

Matrices are 3x3 numpy float arrays with a fixed bottom row [0, 0, 1].
Every matrix returned here is read-only and finite; every matrix accepted
here is validated. These pure math functions carry no UI dependencies.
"""

import math
import re
from functools import reduce

import numpy as np

from models.transform import Vec2, Rect, DEFAULT_CONFIG

_AFFINE_BOTTOM_ROW = np.array([0.0, 0.0, 1.0])
_NUMBER_SPLIT = re.compile(r'[\s,]+')


def _freeze(matrix):
    """Mark a freshly built matrix read-only and hand it back."""
    matrix.setflags(write=False)
    return matrix


def as_affine(matrix):
    """Validate a 3x3 affine matrix and return it as a read-only float array.

    Raises:
        ValueError: If the shape is not 3x3, an entry is NaN or infinite, or the
            bottom row is not [0, 0, 1]
    """
    array = np.array(matrix, dtype=float)
    if array.shape != (3, 3):
        raise ValueError(f"Affine matrix must be 3x3, got shape {array.shape}")
    if not np.isfinite(array).all():
        raise ValueError(f"Affine matrix entries must be finite, got {array.tolist()}")
    if not np.array_equal(array[2], _AFFINE_BOTTOM_ROW):
        raise ValueError(f"Affine matrix bottom row must be [0, 0, 1], got {array[2].tolist()}")
    return _freeze(array)


def identity_matrix():
    return _freeze(np.eye(3))


def translation_matrix(t):
    """Build [[1, 0, tx], [0, 1, ty], [0, 0, 1]]."""
    return as_affine([
        [1.0, 0.0, t.x],
        [0.0, 1.0, t.y],
        [0.0, 0.0, 1.0],
    ])


def scale_matrix(s):
    """Build [[sx, 0, 0], [0, sy, 0], [0, 0, 1]]."""
    return as_affine([
        [s.x, 0.0, 0.0],
        [0.0, s.y, 0.0],
        [0.0, 0.0, 1.0],
    ])


def rotation_matrix(angle):
    """Build a rotation about the origin.

    Positive angles are counter-clockwise in a right-handed frame, which
    shows up clockwise on screen since the viewport is Y-down.

    Args:
        angle: Rotation in radians
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return as_affine([
        [cos_a, -sin_a, 0.0],
        [sin_a, cos_a, 0.0],
        [0.0, 0.0, 1.0],
    ])


def rotation_about_point(angle, center):
    """Rotate by angle (radians) about center: T(center) . R(angle) . T(-center)."""
    return compose(
        translation_matrix(center),
        rotation_matrix(angle),
        translation_matrix(Vec2(-center.x, -center.y)),
    )


def compose(*matrices):
    """Multiply matrices in the given left-to-right order.

    compose(A, B, C) applied to p equals A applied to (B applied to (C applied to p)).
    Composition is not commutative. With no arguments the identity is returned.
    """
    validated = [as_affine(m) for m in matrices]
    return as_affine(reduce(np.matmul, validated, np.eye(3)))


def state_matrix(state, config=None):
    """Compose the full transform for a TransformState.

    Translate(translation) . RotateAboutCenter(rotation) . Scale(scale), with
    the rotation pivot at the canonical rect's center *after* scaling, so
    scaling happens in local space, rotation about the scaled shape's own
    center, and translation last in world space.

    Args:
        state: TransformState
        config: TransformConfig supplying the canonical rect size

    Returns:
        Read-only 3x3 matrix
    """
    config = config or DEFAULT_CONFIG
    pivot = Vec2(
        config.canonical_width * state.scale.x / 2.0,
        config.canonical_height * state.scale.y / 2.0,
    )
    return compose(
        translation_matrix(state.translation),
        rotation_about_point(state.rotation, pivot),
        scale_matrix(state.scale),
    )


def apply_to_point(matrix, point):
    """Apply an affine matrix to a point, dropping the homogeneous coordinate."""
    m = as_affine(matrix)
    x, y, _ = m @ np.array([point.x, point.y, 1.0])
    return Vec2(float(x), float(y))


def bounding_box_of(rect, matrix):
    """Calculate the axis-aligned bounding box of a rect under a matrix.

    All four corners are transformed; with rotation the two diagonal corners
    alone do not bound the shape.

    Args:
        rect: Rect in the matrix's source space
        matrix: 3x3 affine matrix

    Returns:
        Rect spanning [min(x), max(x)] x [min(y), max(y)] of the transformed corners
    """
    m = as_affine(matrix)
    corners = np.array([[c.x, c.y, 1.0] for c in rect.corners()])
    transformed = corners @ m.T
    min_x, min_y = transformed[:, :2].min(axis=0)
    max_x, max_y = transformed[:, :2].max(axis=0)
    return Rect.from_bounds(float(min_x), float(min_y), float(max_x), float(max_y))


def transformed_center(state, config=None):
    """Return the canonical rect's center after the state's transform is applied."""
    config = config or DEFAULT_CONFIG
    return apply_to_point(state_matrix(state, config), config.canonical_rect.center)


def angle_between(point_a, point_b):
    """Return the angle of the vector from point_a to point_b, in radians."""
    return math.atan2(point_b.y - point_a.y, point_b.x - point_a.x)


def to_transform_string(matrix):
    """Flatten a matrix into the (a, b, c, d, e, f) tuple vector graphics expect.

    Ordering is column-major: (m00, m10, m01, m11, m02, m12). The same tuple
    feeds an SVG matrix(...) attribute and QTransform(m11, m12, m21, m22, dx, dy).
    """
    m = as_affine(matrix)
    return (
        float(m[0, 0]), float(m[1, 0]),
        float(m[0, 1]), float(m[1, 1]),
        float(m[0, 2]), float(m[1, 2]),
    )


def matrix_to_svg_transform(matrix):
    """Format a matrix as the space-separated 'a b c d e f' attribute body.

    repr() keeps every float exact, so parse_transform_string round-trips.
    """
    return ' '.join(repr(v) for v in to_transform_string(matrix))


def parse_transform_string(text):
    """Parse 'a b c d e f' (or 'matrix(a, b, c, d, e, f)') back into a matrix.

    Raises:
        ValueError: If the text does not hold exactly six numbers, or any of
            them is NaN or infinite
    """
    body = text.strip()
    if body.startswith('matrix(') and body.endswith(')'):
        body = body[len('matrix('):-1]
    parts = [p for p in _NUMBER_SPLIT.split(body.strip()) if p]
    if len(parts) != 6:
        raise ValueError(f"Transform string must hold 6 numbers, got {len(parts)}: {text!r}")
    a, b, c, d, e, f = (float(p) for p in parts)
    return as_affine([
        [a, c, e],
        [b, d, f],
        [0.0, 0.0, 1.0],
    ])
