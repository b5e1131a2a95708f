from __future__ import annotations

import logging

from PySide6.QtCore import QRectF, QSize, Signal
from PySide6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from pythagorastree.config import BACKGROUND_COLOR, DEFAULT_PARAMETERS, STROKE_COLOR
from pythagorastree.model.tree import TreeParameters, rectangle_count, render

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------------
# QPainter adapter
# -------------------------------------------------------------------------------

class PainterSurface:
    """
    Canvas-style path commands on top of an active QPainter.

    `set_size` repaints the whole area with the background colour, which is
    what clears the previous tree.
    """
    def __init__(self, painter: QPainter, background: str = BACKGROUND_COLOR, stroke: str = STROKE_COLOR) -> None:
        self._painter = painter
        self._background = QColor(background)
        self._pen = QPen(QColor(stroke))
        self._pen.setWidthF(1.0)
        self._path = QPainterPath()

    def set_size(self, width: float, height: float) -> None:
        self._painter.fillRect(QRectF(0.0, 0.0, width, height), self._background)

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._path.lineTo(x, y)

    def stroke(self) -> None:
        self._painter.strokePath(self._path, self._pen)

    def close_path(self) -> None:
        self._path.closeSubpath()

# -------------------------------------------------------------------------------
# Preview widget
# -------------------------------------------------------------------------------

class TreePreview(QWidget):
    """
    The drawing surface of the tree.

    The tree is rebuilt on every paint from the current parameters and the
    current widget size, so container resizes take effect immediately.
    """
    rendered = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._parameters: TreeParameters = DEFAULT_PARAMETERS
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(200, 200)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def parameters(self) -> TreeParameters:
        return self._parameters

    def set_parameters(self, parameters: TreeParameters) -> None:
        """Draw the tree for new parameters."""
        self._parameters = parameters
        self.refresh()

    def refresh(self) -> None:
        """Re-render for the current widget size."""
        self.update()

    def render_to_image(self, width: int | None = None, height: int | None = None) -> QImage:
        """
        Paint the current tree into an off-screen image.

        Args:
            width: Image width, defaults to the widget width.
            height: Image height, defaults to the widget height.
        """
        width = self.width() if width is None else width
        height = self.height() if height is None else height
        image = QImage(max(1, width), max(1, height), QImage.Format.Format_ARGB32)
        image.fill(QColor(BACKGROUND_COLOR))
        painter = QPainter(image)
        try:
            render(self._parameters, PainterSurface(painter), width, height)
        finally:
            painter.end()
        return image

    # ------------------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------------------

    def sizeHint(self) -> QSize:
        return QSize(800, 600)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self.refresh()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            render(self._parameters, PainterSurface(painter), self.width(), self.height())
        finally:
            painter.end()
        self.rendered.emit(rectangle_count(self._parameters.depth))
