"""Drag interaction controller - pointer events in, TransformState out.

A small state machine (Idle, Translating, Rotating, Scaling) that decides
which property a gesture edits from where the pointer went down, then
recomputes that property on every move. The controller holds no state of
its own: every operation is (state, context, event) -> (state, context).
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from constants import HANDLE_CHECK_ORDER
from models.transform import DEFAULT_CONFIG
from utils.coordinate_transforms import to_normalized, rect_to_normalized
from .drag_context import IDLE
from .handles import HANDLES, HandleLayout

POINTER_DOWN = 'down'
POINTER_MOVE = 'move'
POINTER_UP = 'up'


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event as delivered by the host, in device space.

    Attributes:
        kind: 'down', 'move' or 'up'
        position: Vec2 pointer position in container pixels
        container_size: Vec2 or (width, height) of the container in pixels
        layout: HandleLayout of device-pixel rects for body and handles
    """
    kind: str
    position: Any = None
    container_size: Any = None
    layout: HandleLayout = field(default_factory=HandleLayout)


class DragInteractionController:
    """Stateless controller mapping pointer events to TransformState updates."""

    def __init__(self, config=None, check_order=HANDLE_CHECK_ORDER):
        self.config = config or DEFAULT_CONFIG
        self.check_order = tuple(check_order)
        self._logger = logging.getLogger('DragInteractionController')

    def normalize_layout(self, layout, container_size):
        """Map a device-pixel HandleLayout into normalized coordinates."""
        def convert(rect):
            return None if rect is None else rect_to_normalized(rect, container_size, self.config)
        return HandleLayout(
            body=convert(layout.body),
            scale_handle=convert(layout.scale_handle),
            rotation_handle=convert(layout.rotation_handle),
        )

    def get_handle_at_pos(self, point, layout):
        """Find which handle (if any) is at a normalized position.

        Handles are checked in priority order (scale, rotation, body by
        default); the first hit wins.

        Returns:
            Handle name or None
        """
        for handle_name in self.check_order:
            if HANDLES[handle_name].hit_test(point, layout.rect_for(handle_name)):
                return handle_name
        return None

    def pointer_down(self, state, context, event):
        """Start a drag session if the pointer hits the shape or a handle.

        Returns:
            (state, context): state is never modified by a press
        """
        if context.is_active:
            self._logger.debug("Ignoring pointer-down during live %s drag", context.operation)
            return state, context

        pointer = to_normalized(event.position, event.container_size, self.config)
        layout = self.normalize_layout(event.layout, event.container_size)
        handle_name = self.get_handle_at_pos(pointer, layout)
        if handle_name is None:
            return state, IDLE

        new_context = HANDLES[handle_name].begin(state, pointer, self.config)
        self._logger.debug("Pointer-down at %s started %s", pointer, new_context)
        return state, new_context

    def pointer_move(self, state, context, event):
        """Recompute the active property from the pointer; no-op while idle."""
        if not context.is_active:
            return state, context

        pointer = to_normalized(event.position, event.container_size, self.config)
        handle = self._handle_for(context)
        return handle.drag(context, state, pointer, self.config), context

    def pointer_up(self, state, context, event=None):
        """End any live session; the state keeps its last value."""
        if context.is_active:
            self._logger.debug("Pointer-up ended %s drag", context.operation)
        return state, IDLE

    def handle_event(self, state, context, event):
        """Dispatch an event to pointer_down/pointer_move/pointer_up by kind.

        Raises:
            ValueError: If event.kind is not a known pointer event kind
        """
        if event.kind == POINTER_DOWN:
            return self.pointer_down(state, context, event)
        if event.kind == POINTER_MOVE:
            return self.pointer_move(state, context, event)
        if event.kind == POINTER_UP:
            return self.pointer_up(state, context, event)
        raise ValueError(f"Unknown pointer event kind: {event.kind!r}")

    @staticmethod
    def _handle_for(context):
        for handle in HANDLES.values():
            if handle.operation == context.operation:
                return handle
        raise ValueError(f"No handle drives operation {context.operation!r}")
