"""Custom painter demo: a circle with a cross, drawn with QPainter."""

__version__ = "0.1.0"
