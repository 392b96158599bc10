"""Drag context dataclasses for the transform widget.

One tagged variant per drag state replaces a bag of nullable fields:
Idle, Translating, Rotating and Scaling. Exactly one is live at a time.
"""

from dataclasses import dataclass

from models.transform import Vec2

OP_IDLE = 'idle'
OP_TRANSLATE = 'translate'
OP_ROTATE = 'rotate'
OP_SCALE = 'scale'


@dataclass(frozen=True)
class DragContext:
    """Base class for drag state; `operation` names the edited property."""
    operation = OP_IDLE

    @property
    def is_active(self):
        return self.operation != OP_IDLE


@dataclass(frozen=True)
class Idle(DragContext):
    """No pointer gesture in progress."""


@dataclass(frozen=True)
class Translating(DragContext):
    """Body drag; drag_offset = translation - pointer at press time."""
    drag_offset: Vec2
    operation = OP_TRANSLATE


@dataclass(frozen=True)
class Rotating(DragContext):
    """Rotation handle drag; pivot is the transformed shape center at press time."""
    pivot: Vec2
    operation = OP_ROTATE


@dataclass(frozen=True)
class Scaling(DragContext):
    """Scale handle drag; reference_point is the pointer at press time and never moves."""
    reference_point: Vec2
    operation = OP_SCALE


IDLE = Idle()
