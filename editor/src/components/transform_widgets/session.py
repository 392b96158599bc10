"""Transform session - owner of the TransformState and the live drag context.

The session is the single source of truth a presenter renders from. State
and drag context are swapped together under one lock, so a reader on
another thread never sees a half-applied gesture.
"""

import logging
import threading

from models.transform import TransformState, DEFAULT_CONFIG
from utils.transform_math import state_matrix
from .controller import DragInteractionController, PointerEvent, POINTER_DOWN, POINTER_MOVE, POINTER_UP
from .drag_context import IDLE


class TransformSession:
    """Holds one widget's TransformState and drives it through the controller."""

    def __init__(self, config=None, state=None, controller=None):
        self.config = config or DEFAULT_CONFIG
        self.controller = controller or DragInteractionController(self.config)
        self._state = state or TransformState()
        self._context = IDLE
        self._lock = threading.RLock()
        self._logger = logging.getLogger('TransformSession')

    # ========================================
    # Read access
    # ========================================

    @property
    def state(self):
        with self._lock:
            return self._state

    @property
    def context(self):
        with self._lock:
            return self._context

    @property
    def is_dragging(self):
        return self.context.is_active

    def snapshot(self):
        """Return (state, context) read atomically."""
        with self._lock:
            return self._state, self._context

    def matrix(self):
        """Composed transform matrix for the current state."""
        return state_matrix(self.state, self.config)

    # ========================================
    # Writes
    # ========================================

    def dispatch(self, event):
        """Feed one pointer event through the controller.

        Returns:
            TransformState after the event
        """
        with self._lock:
            state, context = self.controller.handle_event(self._state, self._context, event)
            if state != self._state:
                self._logger.debug("%s -> %s", event.kind, state)
            self._state, self._context = state, context
            return state

    def pointer_down(self, position, container_size, layout):
        return self.dispatch(PointerEvent(POINTER_DOWN, position, container_size, layout))

    def pointer_move(self, position, container_size):
        return self.dispatch(PointerEvent(POINTER_MOVE, position, container_size))

    def pointer_up(self):
        return self.dispatch(PointerEvent(POINTER_UP))

    def set_state(self, state):
        """Replace the state outright; any live drag session is ended."""
        with self._lock:
            self._state = state
            self._context = IDLE

    def reset(self):
        self.set_state(TransformState())
