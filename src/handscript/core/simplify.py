"""Polygon simplification by maximum perpendicular deviation (RDP)."""

from handscript.core.geometry import point_to_line_distance
from handscript.domain import Contour, Point


def simplify_polyline(points: list[Point], tolerance: float) -> list[Point]:
    """Simplify a polyline with the Ramer-Douglas-Peucker algorithm.

    A span is collapsed to its two endpoints when no interior point lies
    farther than ``tolerance`` from the line through them; otherwise it is
    split at the farthest point and both halves are processed. Spans are
    kept on an explicit stack, so long traces cannot exhaust the call stack.

    Args:
        points: Polyline to simplify
        tolerance: Maximum allowed deviation of a dropped point. A value of
            zero or less keeps every point.

    Returns:
        The retained points in their original order. The first and last
        input points are always retained, and the result is never longer
        than the input.

    Examples:
        >>> line = [Point(0, 0), Point(1, 0), Point(2, 0)]
        >>> simplify_polyline(line, 1.0)
        [Point(x=0, y=0), Point(x=2, y=0)]
    """
    if len(points) < 3 or tolerance <= 0:
        return list(points)

    keep = [False] * len(points)
    keep[0] = True
    keep[-1] = True

    stack = [(0, len(points) - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue

        max_dist = 0.0
        max_idx = first
        for i in range(first + 1, last):
            dist = point_to_line_distance(points[i], points[first], points[last])
            if dist > max_dist:
                max_dist = dist
                max_idx = i

        if max_dist > tolerance:
            keep[max_idx] = True
            stack.append((max_idx, last))
            stack.append((first, max_idx))

    return [point for point, kept in zip(points, keep) if kept]


def simplify_contour(contour: Contour, tolerance: float) -> Contour:
    """Simplify a traced contour, keeping its winding tag.

    Args:
        contour: Contour to simplify
        tolerance: Maximum allowed deviation in the contour's units

    Returns:
        A new Contour holding a subset of the original points
    """
    return Contour(
        points=simplify_polyline(contour.points, tolerance),
        direction=contour.direction,
    )
