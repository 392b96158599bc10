"""
Transform Widget - Interactive transform controls for a single shape

Provides a draggable transform widget with:
- Shape body for translation
- Scale handle on the bounding box's bottom-right corner
- Rotation handle above the bounding box
- Visual bounding box overlay

All interaction math lives in components.transform_widgets; this widget
only converts Qt events into pointer events and paints the result.
"""

import math
import logging

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QRectF, pyqtSignal
from PyQt5.QtGui import QPainter, QPen, QBrush, QColor, QTransform

from constants import (
	HANDLE_SCALE, HANDLE_ROTATE, HANDLE_BODY,
	SHAPE_FILL_COLOR, BBOX_OUTLINE_COLOR, HANDLE_FILL_COLOR,
	HANDLE_OUTLINE_COLOR, BACKGROUND_COLOR
)
from models.transform import Vec2, TransformState, DEFAULT_CONFIG
from utils.coordinate_transforms import to_normalized, normalized_rect_to_device, DegenerateContainerError
from utils.transform_math import to_transform_string
from components.transform_widgets import TransformSession, HandleLayout, handle_layout


class TransformWidget(QWidget):
	"""Interactive transform widget for manipulating one shape's transform"""

	# Signals
	transformChanged = pyqtSignal(float, float, float, float, float)  # tx, ty, rotation, scale_x, scale_y
	transformEnded = pyqtSignal()  # Emitted when a drag ends

	# Cursor per hovered handle
	HANDLE_CURSORS = {
		HANDLE_SCALE: Qt.SizeFDiagCursor,
		HANDLE_ROTATE: Qt.CrossCursor,
		HANDLE_BODY: Qt.SizeAllCursor,
	}

	def __init__(self, parent=None, config=None, session=None):
		super().__init__(parent)
		self.setMouseTracking(True)

		self.config = config or DEFAULT_CONFIG
		self.session = session or TransformSession(self.config)
		self._logger = logging.getLogger('TransformWidget')

	# ========================================
	# State access
	# ========================================

	@property
	def transform_state(self):
		return self.session.state

	def set_transform(self, state):
		"""Replace the transform state (ends any live drag) and repaint"""
		self.session.set_state(state)
		self._emit_changed(state)
		self.update()

	def reset_transform(self):
		self.set_transform(TransformState())

	def _emit_changed(self, state):
		self.transformChanged.emit(
			state.translation.x, state.translation.y, state.rotation,
			state.scale.x, state.scale.y
		)

	# ========================================
	# Geometry
	# ========================================

	def _container_size(self):
		return Vec2(self.width(), self.height())

	def device_layout(self):
		"""Current handle rects in widget pixels.

		Raises:
			DegenerateContainerError: If the widget has zero width or height
		"""
		normalized = handle_layout(self.session.state, self.config)
		size = self._container_size()
		return HandleLayout(
			body=normalized_rect_to_device(normalized.body, size, self.config),
			scale_handle=normalized_rect_to_device(normalized.scale_handle, size, self.config),
			rotation_handle=normalized_rect_to_device(normalized.rotation_handle, size, self.config),
		)

	def _view_transform(self):
		"""Normalized viewport -> widget pixels"""
		return QTransform.fromScale(
			self.width() / self.config.viewport_width,
			self.height() / self.config.viewport_height
		)

	@staticmethod
	def _is_paintable(state):
		values = (state.translation.x, state.translation.y, state.rotation, state.scale.x, state.scale.y)
		return all(math.isfinite(v) for v in values)

	def handle_at(self, pos):
		"""Name of the handle under a widget-pixel QPoint, or None"""
		if not self._is_paintable(self.session.state):
			return None  # Nothing drawn, nothing to hover
		try:
			pointer = to_normalized(Vec2(pos.x(), pos.y()), self._container_size(), self.config)
		except DegenerateContainerError:
			return None
		layout = handle_layout(self.session.state, self.config)
		return self.session.controller.get_handle_at_pos(pointer, layout)

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		"""Draw the shape, its bounding box and both handles"""
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.fillRect(self.rect(), QColor(*BACKGROUND_COLOR))

		state = self.session.state
		if self.width() == 0 or self.height() == 0 or not self._is_paintable(state):
			painter.end()
			return  # Skip painting with invalid values

		# Shape: canonical rect through the composed matrix, then into widget pixels
		a, b, c, d, e, f = to_transform_string(self.session.matrix())
		painter.setTransform(QTransform(a, b, c, d, e, f) * self._view_transform())
		painter.setPen(Qt.NoPen)
		painter.setBrush(QBrush(QColor(*SHAPE_FILL_COLOR)))
		canonical = self.config.canonical_rect
		painter.drawRect(QRectF(canonical.x, canonical.y, canonical.width, canonical.height))
		painter.resetTransform()

		layout = self.device_layout()

		# Axis-aligned bounding box
		painter.setPen(QPen(QColor(*BBOX_OUTLINE_COLOR), 1, Qt.DashLine))
		painter.setBrush(Qt.NoBrush)
		painter.drawRect(self._qrect(layout.body))

		# Handles
		painter.setPen(QPen(QColor(*HANDLE_OUTLINE_COLOR), 1))
		painter.setBrush(QBrush(QColor(*HANDLE_FILL_COLOR)))
		painter.drawRect(self._qrect(layout.scale_handle))
		painter.drawEllipse(self._qrect(layout.rotation_handle))
		painter.end()

	@staticmethod
	def _qrect(rect):
		return QRectF(rect.x, rect.y, rect.width, rect.height)

	# ========================================
	# Mouse events
	# ========================================

	def mousePressEvent(self, event):
		"""Handle mouse press"""
		if event.button() != Qt.LeftButton:
			super().mousePressEvent(event)
			return

		if not self._is_paintable(self.session.state):
			self._logger.warning("Ignoring press on non-finite transform: %s", self.session.state)
			event.ignore()
			return

		try:
			self.session.pointer_down(Vec2(event.pos().x(), event.pos().y()), self._container_size(), self.device_layout())
		except DegenerateContainerError as e:
			self._logger.warning("Ignoring press on zero-sized widget: %s", e)
			event.ignore()
			return

		if self.session.is_dragging:
			event.accept()
		else:
			event.ignore()

	def mouseMoveEvent(self, event):
		"""Handle mouse move"""
		if not self.session.is_dragging:
			# Update cursor based on hovered handle
			handle = self.handle_at(event.pos())
			self.setCursor(self.HANDLE_CURSORS.get(handle, Qt.ArrowCursor))
			super().mouseMoveEvent(event)
			return

		try:
			state = self.session.pointer_move(Vec2(event.pos().x(), event.pos().y()), self._container_size())
		except DegenerateContainerError as e:
			self._logger.warning("Ignoring move on zero-sized widget: %s", e)
			event.ignore()
			return

		self._emit_changed(state)
		self.update()
		event.accept()

	def mouseReleaseEvent(self, event):
		"""Handle mouse release - ends the drag wherever the pointer is"""
		if event.button() != Qt.LeftButton or not self.session.is_dragging:
			super().mouseReleaseEvent(event)
			return

		self.session.pointer_up()
		self.transformEnded.emit()
		self.update()
		event.accept()
