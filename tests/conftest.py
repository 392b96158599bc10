"""
Shared fixtures for Affine Transform Widget tests.

Provides reusable configs, transform states, hit layouts and controllers.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widget tests run without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Geometry helpers ────────────────────────────────────────────────────

# Container whose pixels line up 1:1 with the 100x100 normalized viewport
IDENTITY_CONTAINER = (100, 100)


@pytest.fixture
def config():
    """Stock 100x100 viewport / 10x10 canonical rect config"""
    from models.transform import TransformConfig
    return TransformConfig()


@pytest.fixture
def identity_state():
    """Untransformed state: no translation, no rotation, unit scale"""
    from models.transform import TransformState
    return TransformState()


@pytest.fixture
def controller(config):
    from components.transform_widgets import DragInteractionController
    return DragInteractionController(config)


@pytest.fixture
def body_only_layout():
    """Layout with just the untransformed body laid out (handles not mounted)"""
    from models.transform import Rect
    from components.transform_widgets import HandleLayout
    return HandleLayout(body=Rect(0, 0, 10, 10))


@pytest.fixture
def full_layout():
    """Body plus handles placed away from the body, in 1:1 device pixels"""
    from models.transform import Rect
    from components.transform_widgets import HandleLayout
    return HandleLayout(
        body=Rect(0, 0, 10, 10),
        scale_handle=Rect(20, 20, 4, 4),
        rotation_handle=Rect(40, 40, 4, 4),
    )


def make_event(kind, x=None, y=None, layout=None, container=IDENTITY_CONTAINER):
    """Build a PointerEvent in device pixels"""
    from models.transform import Vec2
    from components.transform_widgets import PointerEvent, HandleLayout
    position = None if x is None else Vec2(x, y)
    return PointerEvent(kind, position, container, layout or HandleLayout())
