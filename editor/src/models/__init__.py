"""
Affine Transform Widget - Data Models

This module contains the value types shared by the transform engine,
the drag controller and the presenters.

Public API: Import Vec2, Point, Rect, TransformState, TransformConfig from models.transform
"""

from .transform import Vec2, Point, Rect, TransformState, TransformConfig, DEFAULT_CONFIG

__all__ = ['Vec2', 'Point', 'Rect', 'TransformState', 'TransformConfig', 'DEFAULT_CONFIG']
