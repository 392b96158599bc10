"""Coordinate transformation utilities for the transform widget.

Provides conversion between the two coordinate systems in play:
- Device space (container pixels, top-left origin, Y-down)
- Normalized viewport space (fixed W x H units, top-left origin, Y-down)

Containers are assumed axis-aligned, so each axis scales independently.
"""
import math
import logging

from models.transform import Vec2, Rect, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class DegenerateContainerError(ValueError):
	"""Raised when the container has zero (or non-finite) width or height.

	Mapping through such a container would produce inf/NaN coordinates.
	"""


def _container_dimensions(container_size):
	"""Unpack and validate a container size (Vec2 or (width, height) tuple).

	Returns:
		(width, height) as floats

	Raises:
		DegenerateContainerError: If either dimension is zero or not finite
	"""
	width, height = container_size
	width = float(width)
	height = float(height)
	if width == 0.0 or height == 0.0 or not (math.isfinite(width) and math.isfinite(height)):
		logger.debug("Rejecting degenerate container %sx%s", width, height)
		raise DegenerateContainerError(f"Container size must be non-zero and finite, got {width}x{height}")
	return width, height


def to_normalized(device_point, container_size, config=None):
	"""Convert a device pixel position to normalized viewport coordinates.

	Args:
		device_point: Vec2 in container pixels
		container_size: Vec2 or (width, height) of the container in pixels
		config: TransformConfig supplying the viewport size (default 100x100)

	Returns:
		Vec2 in normalized viewport units

	Raises:
		DegenerateContainerError: If the container has zero width or height
	"""
	config = config or DEFAULT_CONFIG
	width, height = _container_dimensions(container_size)
	return Vec2(
		config.viewport_width * device_point.x / width,
		config.viewport_height * device_point.y / height,
	)


def rect_to_normalized(device_rect, container_size, config=None):
	"""Convert a device pixel rect to normalized viewport coordinates.

	The origin is mapped as a point; width/height are scaled by the same
	per-axis factors as coordinates.

	Args:
		device_rect: Rect in container pixels
		container_size: Vec2 or (width, height) of the container in pixels
		config: TransformConfig supplying the viewport size

	Returns:
		Rect in normalized viewport units
	"""
	origin = to_normalized(Vec2(device_rect.x, device_rect.y), container_size, config)
	extent = to_normalized(Vec2(device_rect.width, device_rect.height), container_size, config)
	return Rect(origin.x, origin.y, extent.x, extent.y)


def to_device(normalized_point, container_size, config=None):
	"""Convert normalized viewport coordinates back to device pixels.

	Inverse of to_normalized.

	Args:
		normalized_point: Vec2 in normalized viewport units
		container_size: Vec2 or (width, height) of the container in pixels
		config: TransformConfig supplying the viewport size

	Returns:
		Vec2 in container pixels
	"""
	config = config or DEFAULT_CONFIG
	width, height = _container_dimensions(container_size)
	return Vec2(
		normalized_point.x * width / config.viewport_width,
		normalized_point.y * height / config.viewport_height,
	)


def normalized_rect_to_device(rect, container_size, config=None):
	"""Convert a normalized rect to device pixels (inverse of rect_to_normalized)."""
	origin = to_device(Vec2(rect.x, rect.y), container_size, config)
	extent = to_device(Vec2(rect.width, rect.height), container_size, config)
	return Rect(origin.x, origin.y, extent.x, extent.y)
