"""Tests for triangle area and point containment."""

import logging

import mpmath as mpm
import pytest

from gridmath.points import LineLengthPoint as P
from gridmath.triangle import NOT_A_TRIANGLE, point_in_triangle, triangle_area


def shoelace(a, b, c):
    return abs(mpm.mpf(b.x - a.x) * (c.y - a.y) - mpm.mpf(c.x - a.x) * (b.y - a.y)) / 2


class TestTriangleArea:
    def test_right_triangle(self):
        assert triangle_area(P(0, 0), P(4, 0), P(0, 3)) == pytest.approx(6.0)

    @pytest.mark.parametrize("a,b,c", [
        (P(0, 0), P(4, 0), P(0, 4)),
        (P(-3, 2), P(5, 7), P(1, -6)),
        (P(10, 10), P(11, 13), P(17, 12)),
    ])
    def test_matches_shoelace(self, a, b, c):
        assert triangle_area(a, b, c) == pytest.approx(float(shoelace(a, b, c)), abs=1e-9)

    def test_duplicate_vertex(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gridmath"):
            assert triangle_area(P(0, 0), P(0, 0), P(0, 3)) == NOT_A_TRIANGLE == -1
        assert "duplicate coordinates" in caplog.text

    def test_shared_axis(self):
        assert triangle_area(P(2, 0), P(2, 5), P(2, 9)) == -1
        assert triangle_area(P(0, 4), P(5, 4), P(-3, 4)) == -1

    def test_slanted_line(self):
        assert triangle_area(P(0, 0), P(1, 1), P(3, 3)) == pytest.approx(0.0, abs=1e-6)


class TestPointInTriangle:
    A, B, C = P(0, 0), P(4, 0), P(0, 4)

    def test_inside(self):
        assert point_in_triangle(self.A, self.B, self.C, P(1, 1), 6)
        assert point_in_triangle(self.A, self.B, self.C, P(1, 2), 9)

    def test_precision_limit(self):
        # Heron error on the sub-triangle areas is below 1e-12 here
        assert point_in_triangle(self.A, self.B, self.C, P(1, 1), 12)
        assert not point_in_triangle(self.A, self.B, self.C, P(1, 1), 15)

    def test_outside(self):
        assert not point_in_triangle(self.A, self.B, self.C, P(5, 5), 6)
        assert not point_in_triangle(self.A, self.B, self.C, P(-1, 1), 6)

    def test_degenerate_sub_triangle(self, caplog):
        # a vertex or an axis-aligned edge point collapses a sub-triangle
        with caplog.at_level(logging.WARNING, logger="gridmath"):
            assert not point_in_triangle(self.A, self.B, self.C, P(0, 0), 6)
            assert not point_in_triangle(self.A, self.B, self.C, P(2, 0), 6)
        assert "point_in_triangle" in caplog.text

    def test_degenerate_triangle(self):
        assert not point_in_triangle(P(0, 0), P(0, 5), P(0, 9), P(1, 1), 6)
