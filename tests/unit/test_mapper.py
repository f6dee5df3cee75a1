"""Tests for pixel to font-unit mapping and metrics estimation."""

import pytest

from handscript.core.mapper import CoordinateMapper
from handscript.core.metrics import estimate_advance_width, estimate_metrics
from handscript.domain import Contour, GlyphOutline, InkMask, Point, WindingDirection


def mask_with_ink_at(size: int, columns: list[int], row: int = 0) -> InkMask:
    cells = bytearray(size * size)
    for x in columns:
        cells[row * size + x] = 1
    return InkMask(width=size, height=size, cells=bytes(cells))


class TestCoordinateMapper:
    """Tests for CoordinateMapper."""

    def test_defaults(self) -> None:
        """A 300 px canvas maps onto a 1000 unit em with the baseline at 80%."""
        mapper = CoordinateMapper()
        assert mapper.scale == pytest.approx(1000 / 300)
        assert mapper.baseline == pytest.approx(240.0)

    def test_baseline_maps_to_zero(self) -> None:
        """Points on the baseline row land on y=0."""
        assert CoordinateMapper().to_font(Point(0, 240)) == Point(0, 0)

    def test_canvas_corners(self) -> None:
        """The top-right corner maps to the ascender at full em width."""
        assert CoordinateMapper().to_font(Point(300, 0)) == Point(1000, 800)
        assert CoordinateMapper().to_font(Point(0, 300)) == Point(0, -200)

    def test_y_axis_flipped(self) -> None:
        """Higher pixel rows end up lower in font space."""
        mapper = CoordinateMapper()
        assert mapper.to_font(Point(150, 100)).y > mapper.to_font(Point(150, 200)).y

    def test_rounds_half_up(self) -> None:
        """Scaled halves round up rather than to even."""
        mapper = CoordinateMapper(canvas_size=4, units_per_em=10)
        assert mapper.to_font(Point(1, 0)).x == 3

    def test_to_pixel_inverts_to_font(self) -> None:
        """Mapping back lands within one pixel of the original."""
        mapper = CoordinateMapper()
        original = Point(123, 77)
        font = mapper.to_font(original)
        x, y = mapper.to_pixel(font.x, font.y)

        assert x == pytest.approx(123, abs=1)
        assert y == pytest.approx(77, abs=1)

    def test_closing_point_dropped(self) -> None:
        """A repeated closing point is not carried into font space."""
        contour = Contour(points=[Point(3, 3), Point(6, 3), Point(6, 6), Point(3, 6), Point(3, 3)])
        mapped = CoordinateMapper().map_contour(contour)

        assert mapped is not None
        assert len(mapped) == 4
        assert not mapped.is_closed()

    def test_short_contour_dropped(self) -> None:
        """Contours with fewer than three distinct points are dropped."""
        contour = Contour(points=[Point(0, 0), Point(5, 5), Point(0, 0)])
        assert CoordinateMapper().map_contour(contour) is None

    def test_outer_contour_is_clockwise_in_font_space(self) -> None:
        """A screen-clockwise trace stays clockwise once y is flipped."""
        contour = Contour(points=[Point(3, 3), Point(6, 3), Point(6, 6), Point(3, 6), Point(3, 3)])
        contour.direction = contour.classify_direction(y_down=True)

        mapped = CoordinateMapper().map_contour(contour)

        assert contour.direction == WindingDirection.CLOCKWISE
        assert mapped is not None
        assert mapped.direction == WindingDirection.CLOCKWISE

    def test_map_contours_skips_degenerate(self) -> None:
        """Dropped contours leave no trace in the outline."""
        good = Contour(points=[Point(3, 3), Point(6, 3), Point(6, 6), Point(3, 6), Point(3, 3)])
        bad = Contour(points=[Point(1, 1), Point(1, 1)])

        outline = CoordinateMapper().map_contours([bad, good])

        assert len(outline.contours) == 1


class TestMetrics:
    """Tests for advance width and side bearing estimation."""

    def test_empty_mask_gets_floor(self) -> None:
        """A glyph without ink gets the minimum advance."""
        mask = InkMask(width=300, height=300, cells=bytes(300 * 300))
        assert estimate_advance_width(mask, 1000 / 300) == 100

    def test_advance_from_rightmost_column(self) -> None:
        """Advance is the rightmost ink column plus margin, scaled."""
        mask = mask_with_ink_at(300, [40, 150])
        # (150 + 20) * 1000 / 300 = 566.67
        assert estimate_advance_width(mask, 1000 / 300) == 567

    def test_advance_floor_for_narrow_glyph(self) -> None:
        """Ink close to the left edge is clamped to the minimum."""
        mask = mask_with_ink_at(300, [5])
        assert estimate_advance_width(mask, 1000 / 300) == 100

    def test_custom_margin_and_floor(self) -> None:
        """Margin and floor are configurable."""
        mask = mask_with_ink_at(10, [4])
        assert estimate_advance_width(mask, 10.0, right_margin=0, min_advance=10) == 40
        assert estimate_advance_width(mask, 10.0, right_margin=0, min_advance=50) == 50

    def test_left_side_bearing_from_outline(self) -> None:
        """The left side bearing is the outline's minimum x."""
        mask = mask_with_ink_at(300, [150])
        outline = GlyphOutline(
            contours=[Contour(points=[Point(120, 0), Point(200, 0), Point(200, 300)])]
        )
        metrics = estimate_metrics(mask, outline, 1000 / 300)

        assert metrics.left_side_bearing == 120
        assert metrics.advance_width == 567

    def test_empty_outline_has_zero_bearing(self) -> None:
        """Empty outlines report a zero left side bearing."""
        mask = InkMask(width=3, height=3, cells=bytes(9))
        metrics = estimate_metrics(mask, GlyphOutline(), 1.0)

        assert metrics.left_side_bearing == 0
        assert metrics.advance_width == 100
