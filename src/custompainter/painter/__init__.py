"""Drawing routines and the surfaces they draw on."""

from custompainter.painter.canvas import Canvas, CircleCommand, LineCommand, QPainterCanvas, RecordingCanvas
from custompainter.painter.renderer import CrossCirclePainter, Renderable

__all__ = [
    "Canvas",
    "CircleCommand",
    "LineCommand",
    "QPainterCanvas",
    "RecordingCanvas",
    "CrossCirclePainter",
    "Renderable",
]
