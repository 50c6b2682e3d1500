"""
Drawing surfaces
================
A `Canvas` is whatever the painter draws on. It knows its size and offers two
primitives: fill a circle and stroke a line segment.

Two implementations are provided:
    QPainterCanvas: draws through a live QPainter (widgets, images).
    RecordingCanvas: keeps the issued commands as plain values.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Union

from PySide6.QtCore import QLineF, QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen

from custompainter.model.geometry import Offset


class Canvas(Protocol):
    width: float
    height: float

    def fill_circle(self, center: Offset, radius: float, color: str) -> None: ...

    def draw_line(self, start: Offset, end: Offset, color: str, stroke_width: float) -> None: ...


# -------------------------------------------------------------------------------
# Recorded draw commands
# -------------------------------------------------------------------------------

@dataclass(frozen=True)
class CircleCommand:
    center: Offset
    radius: float
    color: str


@dataclass(frozen=True)
class LineCommand:
    start: Offset
    end: Offset
    color: str
    stroke_width: float

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


DrawCommand = Union[CircleCommand, LineCommand]


@dataclass
class RecordingCanvas:
    """Canvas that draws nothing and remembers every command it was given."""
    width: float
    height: float
    commands: list[DrawCommand] = field(default_factory=list)

    def fill_circle(self, center: Offset, radius: float, color: str) -> None:
        self.commands.append(CircleCommand(center=center, radius=radius, color=color))

    def draw_line(self, start: Offset, end: Offset, color: str, stroke_width: float) -> None:
        self.commands.append(LineCommand(start=start, end=end, color=color, stroke_width=stroke_width))

    def circles(self) -> list[CircleCommand]:
        return [c for c in self.commands if isinstance(c, CircleCommand)]

    def lines(self) -> list[LineCommand]:
        return [c for c in self.commands if isinstance(c, LineCommand)]


# -------------------------------------------------------------------------------
# Qt surface
# -------------------------------------------------------------------------------

class QPainterCanvas:
    """
    Adapts an active QPainter to the Canvas interface.

    The painter must already be begun on a paint device. Pen and brush are
    saved and restored around each primitive, so the caller's painter state
    is left as it was.
    """
    def __init__(self, painter: QPainter, width: float, height: float) -> None:
        self.painter = painter
        self.width = width
        self.height = height

    def fill_circle(self, center: Offset, radius: float, color: str) -> None:
        p = self.painter
        p.save()
        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(QBrush(QColor(color)))
        p.drawEllipse(QPointF(center.x, center.y), radius, radius)
        p.restore()

    def draw_line(self, start: Offset, end: Offset, color: str, stroke_width: float) -> None:
        p = self.painter
        p.save()
        pen = QPen(QColor(color))
        pen.setWidthF(stroke_width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        p.setPen(pen)
        p.setBrush(Qt.BrushStyle.NoBrush)
        p.drawLine(QLineF(start.x, start.y, end.x, end.y))
        p.restore()
