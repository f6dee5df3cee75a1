"""Boundary tracing of ink regions.

Finds every ink region in an InkMask and follows its boundary with Moore
neighborhood tracing, producing one closed pixel-space Contour per region.
"""

from handscript.domain import Contour, InkMask, Point

# Moore neighborhood offsets, clockwise from east in y-down pixel space
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0),    # 0 E
    (1, 1),    # 1 SE
    (0, 1),    # 2 S
    (-1, 1),   # 3 SW
    (-1, 0),   # 4 W
    (-1, -1),  # 5 NW
    (0, -1),   # 6 N
    (1, -1),   # 7 NE
)

INITIAL_DIRECTION = 6
# Search restarts 135 degrees counter-clockwise of the last step
BACKTRACK_OFFSET = 5


class ContourTracer:
    """Traces the boundaries of connected ink regions.

    The mask is scanned in row-major order. Each boundary pixel not yet
    visited by an earlier trace starts a new trace. Traces that do not
    return to their start pixel, or that have fewer than
    ``min_points`` points, are discarded.

    Outer boundaries and boundaries of enclosed background are not told
    apart; every contour is tagged with its pixel-space winding only.

    Example:
        tracer = ContourTracer()
        contours = tracer.trace(mask)
    """

    def __init__(self, min_points: int = 4) -> None:
        """Initialize the tracer.

        Args:
            min_points: Minimum number of points a trace must have
        """
        self.min_points = min_points

    def trace(self, mask: InkMask) -> list[Contour]:
        """Trace all boundaries in the mask.

        Args:
            mask: The ink mask to trace

        Returns:
            Closed contours in scan order; each repeats its first point last
        """
        visited: set[tuple[int, int]] = set()
        contours: list[Contour] = []

        for y in range(mask.height):
            for x in range(mask.width):
                if (x, y) in visited or not mask.is_boundary(x, y):
                    continue

                points, closed = self._follow(mask, x, y, visited)

                if not closed or len(points) < self.min_points:
                    continue

                points.append(points[0])
                contour = Contour(points=points)
                contour.direction = contour.classify_direction(y_down=True)
                contours.append(contour)

        return contours

    def _follow(
        self,
        mask: InkMask,
        start_x: int,
        start_y: int,
        visited: set[tuple[int, int]],
    ) -> tuple[list[Point], bool]:
        """Follow one boundary from a start pixel.

        Every pixel stepped on is added to ``visited``.

        Returns:
            Tuple of (points in trace order, whether the trace closed)
        """
        x, y = start_x, start_y
        last = INITIAL_DIRECTION
        max_steps = mask.width * mask.height
        points: list[Point] = []

        for _ in range(max_steps):
            visited.add((x, y))
            points.append(Point(x, y))

            step = self._next_direction(mask, x, y, last)
            if step is None:
                return points, False

            last = step
            dx, dy = DIRECTIONS[step]
            x += dx
            y += dy

            if x == start_x and y == start_y:
                return points, True

        return points, False

    @staticmethod
    def _next_direction(mask: InkMask, x: int, y: int, last: int) -> int | None:
        """Find the first ink neighbor clockwise from the backtrack direction.

        Returns:
            Direction index of the next step, or None if (x, y) is isolated
        """
        first = (last + BACKTRACK_OFFSET) % 8
        for i in range(8):
            direction = (first + i) % 8
            dx, dy = DIRECTIONS[direction]
            if mask.is_ink(x + dx, y + dy):
                return direction
        return None
