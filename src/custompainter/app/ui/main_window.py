"""
The demo screen: the same cross-circle painter shown in two slots.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QFrame

from custompainter.config import (
    VISIBLE_APP_NAME, SLOT_SIZE, CONTAINER_PADDING, CONTAINER_COLOR, CANVAS_BACKGROUND
)
from custompainter.app.ui.painter_view import PainterView
from custompainter.painter.renderer import CrossCirclePainter


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(400, 500)

        # One painter per slot, kept for the lifetime of the window
        self.painter = CrossCirclePainter()
        self.painter2 = CrossCirclePainter()

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        # ---- Slot 1: fixed size ----
        self.fixed_view = PainterView(self.painter, central)
        self.fixed_view.setFixedSize(SLOT_SIZE, SLOT_SIZE)
        v.addWidget(self.fixed_view, 0, Qt.AlignmentFlag.AlignLeft)

        # ---- Slot 2: gray frame, padding, yellow background ----
        self.container = QFrame(central)
        self.container.setAutoFillBackground(True)
        pal = self.container.palette()
        pal.setColor(QPalette.ColorRole.Window, QColor(CONTAINER_COLOR))
        self.container.setPalette(pal)

        inner = QVBoxLayout(self.container)
        inner.setContentsMargins(CONTAINER_PADDING, CONTAINER_PADDING, CONTAINER_PADDING, CONTAINER_PADDING)
        self.padded_view = PainterView(
            self.painter2, self.container, background=CANVAS_BACKGROUND, expanding=True
        )
        inner.addWidget(self.padded_view)
        v.addWidget(self.container, 1)

        self.setCentralWidget(central)

    def views(self) -> list[PainterView]:
        return [self.fixed_view, self.padded_view]
