"""Transform data structures for coordinate and state representation."""
from dataclasses import dataclass, field, replace

from constants import (
    VIEWPORT_WIDTH, VIEWPORT_HEIGHT,
    CANONICAL_RECT_WIDTH, CANONICAL_RECT_HEIGHT,
    TRANSFORM_HANDLE_SIZE, TRANSFORM_ROTATION_HANDLE_OFFSET,
)


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y coordinate pair across different spaces:
    - Device pixels (top-left origin, Y-down)
    - Normalized viewport units (0-100 by default, Y-down)

    The space is always implied by context; convert explicitly through
    utils.coordinate_transforms before mixing the two.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


# A location is just a vector in whichever space the caller is working in
Point = Vec2


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box, positioned by its top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_bounds(cls, min_x, min_y, max_x, max_y):
        """Build a rect spanning [min_x, max_x] x [min_y, max_y]."""
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    def corners(self):
        """Return the four corners: top-left, top-right, bottom-right, bottom-left."""
        right = self.x + self.width
        bottom = self.y + self.height
        return (
            Vec2(self.x, self.y),
            Vec2(right, self.y),
            Vec2(right, bottom),
            Vec2(self.x, bottom),
        )

    @property
    def center(self):
        """Midpoint of the box."""
        return Vec2(self.x + self.width / 2.0, self.y + self.height / 2.0)


@dataclass(frozen=True)
class TransformState:
    """Transform state: translation, rotation and scale.

    The rendered transform is always
    Translate(translation) . RotateAboutCenter(rotation) . Scale(scale)
    applied to the canonical rectangle. Rotation is in radians.

    Instances are immutable; use the with_* helpers to derive edited copies.
    """
    translation: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    rotation: float = 0.0
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))

    def with_translation(self, translation):
        return replace(self, translation=translation)

    def with_rotation(self, rotation):
        return replace(self, rotation=rotation)

    def with_scale(self, scale):
        return replace(self, scale=scale)


@dataclass(frozen=True)
class TransformConfig:
    """Geometry configuration shared by the mapper, math and controller.

    Defaults mirror constants.py so a bare TransformConfig() reproduces the
    stock 100x100 viewport with a 10x10 canonical rectangle.
    """
    viewport_width: float = VIEWPORT_WIDTH
    viewport_height: float = VIEWPORT_HEIGHT
    canonical_width: float = CANONICAL_RECT_WIDTH
    canonical_height: float = CANONICAL_RECT_HEIGHT
    handle_size: float = TRANSFORM_HANDLE_SIZE
    rotation_handle_offset: float = TRANSFORM_ROTATION_HANDLE_OFFSET

    @property
    def canonical_rect(self):
        """The fixed, untransformed shape (origin at (0, 0))."""
        return Rect(0.0, 0.0, self.canonical_width, self.canonical_height)

    @property
    def viewport_rect(self):
        """The normalized viewport every pointer position is mapped into."""
        return Rect(0.0, 0.0, self.viewport_width, self.viewport_height)


DEFAULT_CONFIG = TransformConfig()
