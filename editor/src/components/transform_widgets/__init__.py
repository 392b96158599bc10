"""
Affine Transform Widget - Transform Widget Components

This package contains the interaction core behind the transform widget:
- handles.py: ABC-based handle classes (ScaleHandle, RotationHandle, BodyHandle)
- drag_context.py: Tagged drag state (Idle, Translating, Rotating, Scaling)
- controller.py: Stateless pointer-event state machine
- session.py: TransformState owner with serialized writes
"""

from .handles import (
    Handle, ScaleHandle, RotationHandle, BodyHandle,
    HandleLayout, HANDLES, handle_layout, shape_bounds
)
from .drag_context import DragContext, Idle, Translating, Rotating, Scaling, IDLE
from .controller import DragInteractionController, PointerEvent, POINTER_DOWN, POINTER_MOVE, POINTER_UP
from .session import TransformSession

__all__ = [
    'Handle', 'ScaleHandle', 'RotationHandle', 'BodyHandle',
    'HandleLayout', 'HANDLES', 'handle_layout', 'shape_bounds',
    'DragContext', 'Idle', 'Translating', 'Rotating', 'Scaling', 'IDLE',
    'DragInteractionController', 'PointerEvent', 'POINTER_DOWN', 'POINTER_MOVE', 'POINTER_UP',
    'TransformSession',
]
