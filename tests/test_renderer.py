import pytest

from custompainter.model.geometry import Offset, Size
from custompainter.painter.canvas import CircleCommand, LineCommand, RecordingCanvas
from custompainter.painter.renderer import (
    CIRCLE_COLOR, CROSS_COLOR, STROKE_WIDTH, INTRINSIC_SIZE, CrossCirclePainter
)


def _render(width, height):
    canvas = RecordingCanvas(width, height)
    CrossCirclePainter().render(canvas, width, height)
    return canvas


def test_square_surface():
    canvas = _render(100, 100)

    assert canvas.commands == [
        CircleCommand(center=Offset(50, 50), radius=50, color=CIRCLE_COLOR),
        LineCommand(start=Offset(25, 25), end=Offset(75, 75), color=CROSS_COLOR, stroke_width=STROKE_WIDTH),
        LineCommand(start=Offset(25, 75), end=Offset(75, 25), color=CROSS_COLOR, stroke_width=STROKE_WIDTH),
    ]


def test_wide_surface_uses_shorter_side():
    canvas = _render(200, 100)

    (circle,) = canvas.circles()
    assert circle.radius == 50
    assert circle.center == Offset(100, 50)

    line1, line2 = canvas.lines()
    assert (line1.start, line1.end) == (Offset(75, 25), Offset(125, 75))
    assert (line2.start, line2.end) == (Offset(75, 75), Offset(125, 25))


def test_circle_drawn_before_cross():
    canvas = _render(64, 48)
    assert [type(c) for c in canvas.commands] == [CircleCommand, LineCommand, LineCommand]


def test_fixed_colors_and_stroke():
    canvas = _render(300, 120)

    assert CIRCLE_COLOR == "#0000FF"
    assert CROSS_COLOR == "#FF0000"
    assert STROKE_WIDTH == 5.0
    assert all(line.color == CROSS_COLOR and line.stroke_width == 5.0 for line in canvas.lines())
    assert canvas.circles()[0].color == CIRCLE_COLOR


def test_line_length():
    canvas = _render(100, 100)
    for line in canvas.lines():
        assert line.length == pytest.approx(50 * 2 ** 0.5)


def test_render_is_repeatable_on_independent_canvases():
    painter = CrossCirclePainter()
    first = RecordingCanvas(123, 77)
    second = RecordingCanvas(123, 77)

    painter.render(first, 123, 77)
    painter.render(second, 123, 77)

    assert first.commands == second.commands
    assert first.commands is not second.commands


def test_intrinsic_size_is_a_hint_only():
    painter = CrossCirclePainter()
    assert painter.intrinsic_size == INTRINSIC_SIZE == Size(100, 100)

    canvas = RecordingCanvas(400, 400)
    painter.render(canvas, 400, 400)
    assert canvas.circles()[0].radius == 200


def test_canvas_errors_propagate():
    class BrokenCanvas(RecordingCanvas):
        def fill_circle(self, center, radius, color):
            raise RuntimeError("surface lost")

    with pytest.raises(RuntimeError, match="surface lost"):
        CrossCirclePainter().render(BrokenCanvas(10, 10), 10, 10)
