"""
Affine Transform Widget - Constants and Configuration

This module contains all constant values used throughout the widget:
- Normalized viewport dimensions
- Canonical rectangle geometry
- Transform handle sizing
- Presenter colors

All sizes are in normalized viewport units unless noted otherwise.
"""

# ======================================================================
# NORMALIZED VIEWPORT
# ======================================================================
# Fixed logical coordinate space all interaction math operates in,
# independent of the on-screen pixel size of the container.
VIEWPORT_WIDTH = 100.0
VIEWPORT_HEIGHT = 100.0

# ======================================================================
# CANONICAL RECTANGLE
# ======================================================================
# Untransformed shape every translation/rotation/scale is relative to.
# Origin is the top-left corner at (0, 0).
CANONICAL_RECT_WIDTH = 10.0
CANONICAL_RECT_HEIGHT = 10.0

# ======================================================================
# TRANSFORM WIDGET CONSTANTS
# ======================================================================
TRANSFORM_HANDLE_SIZE = 3.0               # Side length of a square handle
TRANSFORM_ROTATION_HANDLE_OFFSET = 5.0    # Distance above the bbox top edge

# Handle names, listed in hit-test priority order
HANDLE_SCALE = 'scale'
HANDLE_ROTATE = 'rotate'
HANDLE_BODY = 'body'
HANDLE_CHECK_ORDER = (HANDLE_SCALE, HANDLE_ROTATE, HANDLE_BODY)

# ======================================================================
# PRESENTER COLORS
# ======================================================================
# RGBA tuples used by the Qt presenter
SHAPE_FILL_COLOR = (90, 141, 191, 255)
BBOX_OUTLINE_COLOR = (90, 141, 191, 200)
HANDLE_FILL_COLOR = (90, 141, 191, 255)
HANDLE_OUTLINE_COLOR = (255, 255, 255, 255)
BACKGROUND_COLOR = (53, 53, 53, 255)

# SVG presenter fill
SVG_SHAPE_FILL = '#5a8dbf'
