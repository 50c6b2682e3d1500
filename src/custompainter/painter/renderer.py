"""
Cross-circle painter: a filled circle with an "X" drawn over it.
"""
from __future__ import annotations

import logging
from typing import Protocol

from custompainter.model.geometry import CrossCircleGeometry, Size
from custompainter.painter.canvas import Canvas

logger = logging.getLogger(__name__)

CIRCLE_COLOR = "#0000FF"
CROSS_COLOR = "#FF0000"
STROKE_WIDTH = 5.0

# Size hint for layouts; the drawing itself follows the draw-time size.
INTRINSIC_SIZE = Size(100.0, 100.0)


class Renderable(Protocol):
    """Something a host surface can ask to draw itself."""
    intrinsic_size: Size

    def render(self, canvas: Canvas, width: float, height: float) -> None: ...


class CrossCirclePainter:
    """
    Paints a circle inscribed in the drawable area, then a red "X" on top.

    Width and height must be positive. They are not validated.
    """
    intrinsic_size: Size = INTRINSIC_SIZE

    def render(self, canvas: Canvas, width: float, height: float) -> None:
        geom = CrossCircleGeometry.for_size(Size(width, height))
        logger.debug(f"Rendering cross-circle at {width}x{height} (radius {geom.radius})")

        # Circle
        canvas.fill_circle(geom.center, geom.radius, CIRCLE_COLOR)

        # Cross
        for start, end in geom.lines:
            canvas.draw_line(start, end, CROSS_COLOR, STROKE_WIDTH)
