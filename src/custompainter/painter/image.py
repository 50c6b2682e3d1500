"""
Offscreen rendering of a Renderable into a QImage.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QImage, QPainter

from custompainter.painter.canvas import QPainterCanvas

if TYPE_CHECKING:
    import numpy.typing as npt
    from custompainter.painter.renderer import Renderable


def render_to_image(
    renderable: Renderable,
    width: int,
    height: int,
    background: str | None = None
) -> QImage:
    """
    Render into a new ARGB32 (premultiplied) image of the given pixel size.

    Args:
        renderable: The painter to draw.
        width: Image width in pixels.
        height: Image height in pixels.
        background: Optional fill color; transparent if omitted.

    Returns:
        The rendered image.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")

    image = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(QColor(background) if background else QColor(Qt.GlobalColor.transparent))

    painter = QPainter(image)
    try:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        renderable.render(QPainterCanvas(painter, width, height), width, height)
    finally:
        painter.end()

    return image


def image_to_array(image: QImage) -> npt.NDArray[np.uint8]:
    """
    Copy image pixels into an (H, W, 4) uint8 array.

    Channel order is B, G, R, A (ARGB32 as laid out in memory on little-endian).
    """
    img = image.convertToFormat(QImage.Format.Format_ARGB32)
    h, w = img.height(), img.width()
    buf = np.frombuffer(img.constBits(), dtype=np.uint8, count=img.sizeInBytes())
    rows = buf.reshape(h, img.bytesPerLine())
    return rows[:, : w * 4].reshape(h, w, 4).copy()
