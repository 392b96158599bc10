"""UI components for the Affine Transform Widget

This package contains the Qt presenter and the interaction core it drives:
- transform_widgets: handles, drag contexts, controller and session

Direct imports for convenience:
"""

from .transform_widget import TransformWidget

__all__ = [
    'TransformWidget',
]
