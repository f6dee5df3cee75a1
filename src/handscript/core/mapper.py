"""Mapping of pixel-space contours into font units."""

from handscript.core.geometry import round_half_up
from handscript.domain import Contour, GlyphOutline, Point


class CoordinateMapper:
    """Maps simplified pixel contours onto the font's em square.

    Pixel space has its origin at the top-left corner with y growing
    downward. Font space has its origin on the baseline with y growing
    upward. The canvas is scaled uniformly so its height spans one em.

    Example:
        mapper = CoordinateMapper(canvas_size=300, units_per_em=1000)
        outline = mapper.map_contours(simplified)
    """

    def __init__(
        self,
        canvas_size: int = 300,
        units_per_em: int = 1000,
        baseline_ratio: float = 0.8,
        min_points: int = 3,
    ) -> None:
        """Initialize the mapper.

        Args:
            canvas_size: Width and height of the square canvas in pixels
            units_per_em: Design units per em
            baseline_ratio: Baseline position as a fraction of canvas height
                from the top
            min_points: Contours with fewer points are dropped
        """
        self.canvas_size = canvas_size
        self.units_per_em = units_per_em
        self.scale = units_per_em / canvas_size
        self.baseline = baseline_ratio * canvas_size
        self.min_points = min_points

    def to_font(self, point: Point) -> Point:
        """Map a pixel coordinate to font units."""
        return Point(
            round_half_up(point.x * self.scale),
            round_half_up((self.baseline - point.y) * self.scale),
        )

    def to_pixel(self, x: float, y: float) -> tuple[float, float]:
        """Map a font-unit coordinate back to (fractional) pixel space."""
        return (x / self.scale, self.baseline - y / self.scale)

    def map_contour(self, contour: Contour) -> Contour | None:
        """Map one simplified contour.

        A repeated closing point is dropped; the outline path closes
        implicitly back to its first point.

        Args:
            contour: Simplified pixel-space contour

        Returns:
            Font-space contour, or None if it cannot enclose any area
        """
        points = contour.points
        if contour.is_closed():
            points = points[:-1]
        if len(points) < self.min_points:
            return None

        mapped = Contour(points=[self.to_font(p) for p in points])
        mapped.direction = mapped.classify_direction()
        return mapped

    def map_contours(self, contours: list[Contour]) -> GlyphOutline:
        """Map every simplified contour of a glyph.

        Args:
            contours: Simplified pixel-space contours

        Returns:
            GlyphOutline in font units
        """
        outline = GlyphOutline()
        for contour in contours:
            mapped = self.map_contour(contour)
            if mapped is not None:
                outline.contours.append(mapped)
        return outline
