"""Tests for polyline simplification and geometry helpers."""

import math
import random

import pytest

from handscript.core.geometry import point_to_line_distance, round_half_up
from handscript.core.simplify import simplify_contour, simplify_polyline
from handscript.core.tracer import ContourTracer
from handscript.domain import Contour, InkMask, Point, WindingDirection


def pts(*coords: tuple[int, int]) -> list[Point]:
    return [Point(x, y) for x, y in coords]


class TestGeometry:
    """Tests for geometry helpers."""

    def test_round_half_up(self) -> None:
        """Halves round toward positive infinity."""
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-2.5) == -2
        assert round_half_up(2.4) == 2

    def test_distance_to_line(self) -> None:
        """Distance is measured to the infinite line."""
        assert point_to_line_distance(Point(5, 3), Point(0, 0), Point(10, 0)) == pytest.approx(3.0)
        # beyond the segment end, still measured to the line
        assert point_to_line_distance(Point(20, 4), Point(0, 0), Point(10, 0)) == pytest.approx(4.0)

    def test_distance_to_degenerate_line(self) -> None:
        """A zero-length line measures direct distance."""
        assert point_to_line_distance(Point(3, 4), Point(0, 0), Point(0, 0)) == pytest.approx(5.0)


class TestSimplifyPolyline:
    """Tests for simplify_polyline()."""

    def test_short_input_unchanged(self) -> None:
        """Fewer than three points are returned as-is."""
        line = pts((0, 0), (5, 5))
        assert simplify_polyline(line, 2.0) == line

    def test_collinear_points_collapse(self) -> None:
        """Points on a straight line reduce to the endpoints."""
        line = pts((0, 0), (1, 0), (2, 0), (3, 0), (4, 0))
        assert simplify_polyline(line, 0.5) == pts((0, 0), (4, 0))

    def test_zero_tolerance_keeps_everything(self) -> None:
        """A non-positive tolerance returns the full input."""
        line = pts((0, 0), (1, 0), (2, 0), (3, 1))
        assert simplify_polyline(line, 0) == line
        assert simplify_polyline(line, -1.0) == line

    def test_corner_is_kept(self) -> None:
        """A point farther than the tolerance survives."""
        line = pts((0, 0), (5, 0), (5, 5))
        assert simplify_polyline(line, 1.0) == line

    def test_deviation_equal_to_tolerance_is_dropped(self) -> None:
        """Only deviations strictly above the tolerance are kept."""
        line = pts((0, 0), (5, 2), (10, 0))
        assert simplify_polyline(line, 2.0) == pts((0, 0), (10, 0))

    def test_input_not_modified(self) -> None:
        """The input list is left untouched."""
        line = pts((0, 0), (1, 0), (2, 0))
        simplify_polyline(line, 1.0)
        assert line == pts((0, 0), (1, 0), (2, 0))

    def test_subset_in_order_with_endpoints(self) -> None:
        """Output is an ordered subset of the input keeping both ends."""
        rng = random.Random(7)
        line = [Point(i, rng.randint(-10, 10)) for i in range(200)]

        result = simplify_polyline(line, 3.0)

        assert result[0] == line[0]
        assert result[-1] == line[-1]
        assert len(result) <= len(line)
        positions = [line.index(p) for p in result]
        assert positions == sorted(positions)

    def test_dropped_points_within_tolerance(self) -> None:
        """Every dropped point lies within tolerance of its retained span."""
        line = [Point(i, round(8 * math.sin(i / 6))) for i in range(120)]
        tolerance = 1.5

        result = simplify_polyline(line, tolerance)
        kept = [line.index(p) for p in result]

        for first, last in zip(kept, kept[1:]):
            for i in range(first + 1, last):
                dist = point_to_line_distance(line[i], line[first], line[last])
                assert dist <= tolerance

    def test_long_polyline(self) -> None:
        """Very long inputs do not exhaust the call stack."""
        line = [Point(i, (i * i) // 50000) for i in range(20000)]
        result = simplify_polyline(line, 0.5)

        assert result[0] == line[0]
        assert result[-1] == line[-1]


class TestSimplifyContour:
    """Tests for simplify_contour()."""

    def test_traced_square_reduces_to_corners(self) -> None:
        """A traced 4x4 square keeps only its corners."""
        rows = ["." * 10] * 3 + ["...####..."] * 4 + ["." * 10] * 3
        traced = ContourTracer().trace(InkMask.from_rows(rows))[0]

        simplified = simplify_contour(traced, 2.0)

        assert simplified.points == pts((3, 3), (6, 3), (6, 6), (3, 6), (3, 3))
        assert simplified.direction == traced.direction

    def test_direction_preserved(self) -> None:
        """The winding tag carries over unchanged."""
        contour = Contour(
            points=pts((0, 0), (1, 0), (2, 0), (2, 2), (0, 2), (0, 0)),
            direction=WindingDirection.CLOCKWISE,
        )
        assert simplify_contour(contour, 0.5).direction == WindingDirection.CLOCKWISE
