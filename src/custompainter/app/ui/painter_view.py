from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget, QSizePolicy

from custompainter.painter.canvas import QPainterCanvas

if TYPE_CHECKING:
    from custompainter.painter.renderer import Renderable

logger = logging.getLogger(__name__)


class PainterView(QWidget):
    """
    Hosts a Renderable and asks it to draw on every paint event.

    The renderable's intrinsic size is reported as the size hint. Layouts are
    free to give the view a different size; the renderable gets whatever
    size the view actually has at paint time.
    """
    def __init__(
        self,
        renderable: Renderable,
        parent: QWidget | None = None,
        *,
        background: str | None = None,
        expanding: bool = False
    ) -> None:
        super().__init__(parent)
        self.renderable = renderable
        self.background: QColor | None = QColor(background) if background else None
        self._expanding = expanding

        if expanding:
            self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        else:
            self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Preferred)

    def sizeHint(self) -> QSize:
        size = self.renderable.intrinsic_size
        return QSize(round(size.width), round(size.height))

    def minimumSizeHint(self) -> QSize:
        if self._expanding:
            return QSize(0, 0)
        return self.sizeHint()

    def paintEvent(self, event: QPaintEvent) -> None:
        w, h = self.width(), self.height()
        logger.debug(f"Paint event for {type(self.renderable).__name__} at {w}x{h}")

        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            if self.background is not None:
                painter.fillRect(self.rect(), self.background)
            self.renderable.render(QPainterCanvas(painter, w, h), w, h)
        finally:
            painter.end()
