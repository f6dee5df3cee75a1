"""Tests for boundary tracing."""

from handscript.core.tracer import ContourTracer
from handscript.domain import InkMask, Point, WindingDirection


def square_mask(size: int, x0: int, y0: int, side: int) -> InkMask:
    """A size x size mask holding one solid square."""
    rows = []
    for y in range(size):
        rows.append(
            "".join(
                "#" if x0 <= x < x0 + side and y0 <= y < y0 + side else "."
                for x in range(size)
            )
        )
    return InkMask.from_rows(rows)


class TestContourTracer:
    """Tests for ContourTracer."""

    def test_empty_mask(self) -> None:
        """A blank mask yields no contours."""
        mask = InkMask.from_rows(["....", "...."])
        assert ContourTracer().trace(mask) == []

    def test_isolated_pixel_is_discarded(self) -> None:
        """A single pixel has no neighbor to step to."""
        mask = InkMask.from_rows(["...", ".#.", "..."])
        assert ContourTracer().trace(mask) == []

    def test_short_trace_is_discarded(self) -> None:
        """Two pixels close after two points, below the minimum."""
        mask = InkMask.from_rows(["....", ".##.", "...."])
        assert ContourTracer().trace(mask) == []

    def test_square_outline(self) -> None:
        """A solid square traces its boundary once, clockwise on screen."""
        contours = ContourTracer().trace(square_mask(10, 3, 3, 4))

        assert len(contours) == 1
        contour = contours[0]

        assert contour.is_closed()
        assert len(contour) == 13
        assert contour.points[0] == Point(3, 3)
        assert contour.points[1] == Point(4, 3)
        assert contour.direction == WindingDirection.CLOCKWISE

        boundary = {
            Point(x, y)
            for x in range(3, 7)
            for y in range(3, 7)
            if x in (3, 6) or y in (3, 6)
        }
        assert set(contour.points) == boundary

    def test_square_on_canvas_edge(self) -> None:
        """Ink touching the mask border traces like any other region."""
        contours = ContourTracer().trace(square_mask(6, 0, 0, 4))

        assert len(contours) == 1
        assert contours[0].bounding_box() == (0, 0, 3, 3)

    def test_separate_regions_in_scan_order(self) -> None:
        """Each region yields its own contour, upper-left region first."""
        rows = [
            "..........",
            ".####.....",
            ".####.....",
            ".####.....",
            ".####.....",
            "..........",
            ".....####.",
            ".....####.",
            ".....####.",
            ".....####.",
        ]
        contours = ContourTracer().trace(InkMask.from_rows(rows))

        assert len(contours) == 2
        assert contours[0].points[0] == Point(1, 1)
        assert contours[1].points[0] == Point(5, 6)

    def test_ring_traces_both_boundaries(self) -> None:
        """A ring yields an outer and an inner contour of opposite winding."""
        rows = []
        for y in range(10):
            row = ""
            for x in range(10):
                outer = 1 <= x <= 8 and 1 <= y <= 8
                hole = 3 <= x <= 6 and 3 <= y <= 6
                row += "#" if outer and not hole else "."
            rows.append(row)

        contours = ContourTracer().trace(InkMask.from_rows(rows))

        assert len(contours) == 2
        outer, inner = contours
        assert outer.points[0] == Point(1, 1)
        assert len(outer) == 29
        assert inner.points[0] == Point(3, 2)
        assert len(inner) == 17
        assert outer.direction == WindingDirection.CLOCKWISE
        assert inner.direction == WindingDirection.COUNTER_CLOCKWISE

    def test_min_points_is_configurable(self) -> None:
        """Traces shorter than min_points are discarded."""
        mask = square_mask(10, 3, 3, 4)
        assert ContourTracer(min_points=20).trace(mask) == []

    def test_diagonal_stroke(self) -> None:
        """A two-pixel wide diagonal traces into a single closed contour."""
        rows = [
            "##....",
            "###...",
            ".###..",
            "..###.",
            "...##.",
            "......",
        ]
        contours = ContourTracer().trace(InkMask.from_rows(rows))

        assert len(contours) == 1
        assert contours[0].is_closed()
