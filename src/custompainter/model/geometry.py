"""
Geometric Primitives for 2D Drawing.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Offset:
    """A point (or displacement) in the canvas coordinate system."""
    x: float
    y: float

    def __add__(self, other: Offset) -> Offset:
        return Offset(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Offset) -> Offset:
        return Offset(self.x - other.x, self.y - other.y)

    def distance_to(self, other: Offset) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class Size:
    """Width and height of a drawable area."""
    width: float
    height: float

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)

    @property
    def center(self) -> Offset:
        return Offset(self.width / 2, self.height / 2)


Segment = tuple[Offset, Offset]


@dataclass(frozen=True)
class CrossCircleGeometry:
    """
    Everything needed to draw a circle with an "X" over it.

    The circle is inscribed in the drawable area. The cross spans a square of
    side `min_dimension / 2` centred on the circle.
    """
    center: Offset
    radius: float
    lines: tuple[Segment, Segment]

    @classmethod
    def for_size(cls, size: Size) -> CrossCircleGeometry:
        center = size.center
        arm = size.min_dimension / 4

        # Falling diagonal first, then the rising one
        falling = (Offset(center.x - arm, center.y - arm), Offset(center.x + arm, center.y + arm))
        rising = (Offset(center.x - arm, center.y + arm), Offset(center.x + arm, center.y - arm))

        return cls(center=center, radius=size.min_dimension / 2, lines=(falling, rising))

    def cross_bounds(self) -> tuple[float, float, float, float]:
        """Bounding box of the cross as (x_min, y_min, x_max, y_max)."""
        pts = np.array([p.to_array() for line in self.lines for p in line])
        x_min, y_min = pts.min(axis=0)
        x_max, y_max = pts.max(axis=0)
        return float(x_min), float(y_min), float(x_max), float(y_max)

    def circle_bounds(self) -> tuple[float, float, float, float]:
        """Bounding box of the circle as (x_min, y_min, x_max, y_max)."""
        c, r = self.center, self.radius
        return c.x - r, c.y - r, c.x + r, c.y + r
