"""SVG presenter - renders a TransformState as vector markup.

Mirrors what the Qt presenter paints for the shape itself: the canonical
rectangle inside a viewBox the size of the normalized viewport, carried
through the composed matrix as a matrix(a b c d e f) transform attribute.
"""

from constants import SVG_SHAPE_FILL
from models.transform import DEFAULT_CONFIG
from utils.transform_math import state_matrix, matrix_to_svg_transform


def _fmt(value):
    """Format a dimension without a trailing .0 for whole numbers."""
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def render_rect_element(state, config=None, fill=SVG_SHAPE_FILL):
    """Render the transformed canonical rect as a single <rect> element.

    Args:
        state: TransformState to render
        config: TransformConfig supplying the canonical rect size
        fill: Fill color for the shape

    Returns:
        str: <rect .../> markup
    """
    config = config or DEFAULT_CONFIG
    transform = matrix_to_svg_transform(state_matrix(state, config))
    return (
        f'<rect width="{_fmt(config.canonical_width)}" height="{_fmt(config.canonical_height)}" '
        f'fill="{fill}" transform="matrix({transform})"/>'
    )


def render_svg(state, config=None, fill=SVG_SHAPE_FILL):
    """Render a complete standalone SVG document for a TransformState."""
    config = config or DEFAULT_CONFIG
    view_box = f"0 0 {_fmt(config.viewport_width)} {_fmt(config.viewport_height)}"
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{view_box}">'
        f'{render_rect_element(state, config, fill)}'
        '</svg>'
    )
