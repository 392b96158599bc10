"""Transform widget handle system - ABC-based handle architecture.

Each handle type is a class that knows:
- How to test if a pointer position hits it
- Where it sits relative to the shape's bounding box (normalized coordinates)
- Which drag context a press on it starts
- How a pointer move during that drag recomputes the TransformState

Handles never draw themselves; presenters read their rects from
handle_layout() and paint them however they like.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from constants import HANDLE_SCALE, HANDLE_ROTATE, HANDLE_BODY
from models.transform import Vec2, Rect, DEFAULT_CONFIG
from utils.hit_test import is_hit
from utils.transform_math import state_matrix, bounding_box_of, transformed_center, angle_between
from .drag_context import Translating, Rotating, Scaling, OP_TRANSLATE, OP_ROTATE, OP_SCALE


@dataclass(frozen=True)
class HandleLayout:
    """Hit regions for one frame, all in the same coordinate space.

    A None entry means the element is not laid out (yet) and never hits.
    """
    body: Optional[Rect] = None
    scale_handle: Optional[Rect] = None
    rotation_handle: Optional[Rect] = None

    def rect_for(self, handle_name):
        return {
            HANDLE_BODY: self.body,
            HANDLE_SCALE: self.scale_handle,
            HANDLE_ROTATE: self.rotation_handle,
        }[handle_name]


def _square_around(center, size):
    half = size / 2.0
    return Rect(center.x - half, center.y - half, size, size)


class Handle(ABC):
    """Abstract base class for transform handles."""

    name = None
    operation = None

    def hit_test(self, point, rect) -> bool:
        """Test if a normalized point hits this handle's rect.

        Args:
            point: Pointer position in normalized coordinates
            rect: This handle's current rect in normalized coordinates (or None)

        Returns:
            bool: True if pointer hits this handle
        """
        return is_hit(rect, point)

    @abstractmethod
    def get_rect(self, bbox, config):
        """Default placement of this handle.

        Args:
            bbox: Axis-aligned bounding box of the transformed shape
            config: TransformConfig with handle sizing

        Returns:
            Rect in normalized coordinates
        """
        pass

    @abstractmethod
    def begin(self, state, pointer, config):
        """Capture the reference data a drag on this handle needs.

        Returns:
            DragContext for the new session
        """
        pass

    @abstractmethod
    def drag(self, context, state, pointer, config):
        """Recompute the edited property from the pointer position.

        Args:
            context: DragContext returned by begin()
            state: Current TransformState
            pointer: Pointer position in normalized coordinates
            config: TransformConfig

        Returns:
            TransformState: New state with only this handle's property changed
        """
        pass


class ScaleHandle(Handle):
    """Scale handle - square on the bottom-right corner of the bounding box."""

    name = HANDLE_SCALE
    operation = OP_SCALE

    def get_rect(self, bbox, config):
        corner = Vec2(bbox.x + bbox.width, bbox.y + bbox.height)
        return _square_around(corner, config.handle_size)

    def begin(self, state, pointer, config):
        return Scaling(reference_point=pointer)

    def drag(self, context, state, pointer, config):
        """Absolute ratio of displacement from the press point, per axis."""
        ref = context.reference_point
        return state.with_scale(Vec2(
            1.0 + (pointer.x - ref.x) / config.canonical_width,
            1.0 + (pointer.y - ref.y) / config.canonical_height,
        ))


class RotationHandle(Handle):
    """Rotation handle - square above the middle of the bounding box's top edge.

    When that spot would leave the top of the viewport (the shape sits at
    the origin by default) the handle flips below the bottom edge instead,
    so it always stays reachable.
    """

    name = HANDLE_ROTATE
    operation = OP_ROTATE

    def get_rect(self, bbox, config):
        center_x = bbox.x + bbox.width / 2.0
        above = _square_around(Vec2(center_x, bbox.y - config.rotation_handle_offset), config.handle_size)
        if above.y >= config.viewport_rect.y:
            return above
        below = Vec2(center_x, bbox.y + bbox.height + config.rotation_handle_offset)
        return _square_around(below, config.handle_size)

    def begin(self, state, pointer, config):
        return Rotating(pivot=transformed_center(state, config))

    def drag(self, context, state, pointer, config):
        """Absolute angle from pivot to pointer; rotation does not accumulate."""
        return state.with_rotation(angle_between(context.pivot, pointer))


class BodyHandle(Handle):
    """Shape body - the full bounding box of the transformed shape, for translation."""

    name = HANDLE_BODY
    operation = OP_TRANSLATE

    def get_rect(self, bbox, config):
        return bbox

    def begin(self, state, pointer, config):
        t = state.translation
        return Translating(drag_offset=Vec2(t.x - pointer.x, t.y - pointer.y))

    def drag(self, context, state, pointer, config):
        offset = context.drag_offset
        return state.with_translation(Vec2(pointer.x + offset.x, pointer.y + offset.y))


HANDLES = {
    HANDLE_SCALE: ScaleHandle(),
    HANDLE_ROTATE: RotationHandle(),
    HANDLE_BODY: BodyHandle(),
}


def shape_bounds(state, config=None):
    """Axis-aligned bounding box of the canonical rect under the state's transform."""
    config = config or DEFAULT_CONFIG
    return bounding_box_of(config.canonical_rect, state_matrix(state, config))


def handle_layout(state, config=None):
    """Build the default normalized HandleLayout for a state.

    Presenters map this to device space, draw it, and hand it back with
    pointer events so hit testing sees what the user sees.
    """
    config = config or DEFAULT_CONFIG
    bbox = shape_bounds(state, config)
    return HandleLayout(
        body=HANDLES[HANDLE_BODY].get_rect(bbox, config),
        scale_handle=HANDLES[HANDLE_SCALE].get_rect(bbox, config),
        rotation_handle=HANDLES[HANDLE_ROTATE].get_rect(bbox, config),
    )
