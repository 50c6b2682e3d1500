import math

import numpy as np
import pytest

from custompainter.model.geometry import CrossCircleGeometry, Offset, Size


SIZES = [(100, 100), (200, 100), (100, 250), (37.5, 12.25), (1, 1)]


@pytest.mark.parametrize("width,height", SIZES)
def test_circle_is_inscribed(width, height):
    geom = CrossCircleGeometry.for_size(Size(width, height))

    assert geom.radius == pytest.approx(min(width, height) / 2)
    assert geom.center == Offset(width / 2, height / 2)


@pytest.mark.parametrize("width,height", SIZES)
def test_cross_is_symmetric_about_center(width, height):
    geom = CrossCircleGeometry.for_size(Size(width, height))
    c = geom.center.to_array()

    for start, end in geom.lines:
        np.testing.assert_allclose((start.to_array() + end.to_array()) / 2, c)

    expected = min(width, height) / 2 * math.sqrt(2)
    for start, end in geom.lines:
        assert start.distance_to(end) == pytest.approx(expected)


@pytest.mark.parametrize("width,height", SIZES)
def test_lines_intersect_at_center(width, height):
    geom = CrossCircleGeometry.for_size(Size(width, height))
    (a0, a1), (b0, b1) = geom.lines

    # Solve a0 + t (a1 - a0) == b0 + s (b1 - b0)
    da = (a1 - a0).to_array()
    db = (b1 - b0).to_array()
    t, s = np.linalg.solve(np.column_stack((da, -db)), (b0 - a0).to_array())
    hit = a0.to_array() + t * da

    np.testing.assert_allclose(hit, geom.center.to_array())
    assert t == pytest.approx(0.5)
    assert s == pytest.approx(0.5)


@pytest.mark.parametrize("width,height", SIZES)
def test_cross_bounds_are_half_of_circle_bounds(width, height):
    geom = CrossCircleGeometry.for_size(Size(width, height))
    cx0, cy0, cx1, cy1 = geom.circle_bounds()
    x0, y0, x1, y1 = geom.cross_bounds()

    assert cx0 <= x0 and cy0 <= y0 and x1 <= cx1 and y1 <= cy1
    assert (x1 - x0) == pytest.approx((cx1 - cx0) / 2)
    assert (y1 - y0) == pytest.approx((cy1 - cy0) / 2)
    assert ((x0 + x1) / 2, (y0 + y1) / 2) == pytest.approx((geom.center.x, geom.center.y))


def test_size_properties():
    size = Size(200, 80)
    assert size.min_dimension == 80
    assert size.center == Offset(100, 40)


def test_offset_arithmetic():
    assert Offset(1, 2) + Offset(3, 4) == Offset(4, 6)
    assert Offset(5, 5) - Offset(2, 1) == Offset(3, 4)
    assert Offset(0, 0).distance_to(Offset(3, 4)) == pytest.approx(5.0)
