"""Geometric helpers shared by the simplifier, mapper and metrics.

All functions are pure, stateless, and designed for use in worker processes.
"""

import math

from handscript.domain import Point


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding toward +infinity.

    Python's round() rounds halves to even, which would make 0.5 and 1.5
    pixel offsets land on the same font unit.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)


def point_to_line_distance(point: Point, start: Point, end: Point) -> float:
    """Perpendicular distance from a point to the line through start and end.

    The line is unbounded, so points beyond either endpoint are measured
    against its extension. When start and end coincide the direct distance
    to start is returned.

    Args:
        point: The point to measure
        start: First point on the line
        end: Second point on the line

    Returns:
        Distance in the points' units

    Examples:
        >>> point_to_line_distance(Point(1, 1), Point(0, 0), Point(2, 0))
        1.0
        >>> point_to_line_distance(Point(3, 4), Point(0, 0), Point(0, 0))
        5.0
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(point.x - start.x, point.y - start.y)

    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    proj_x = start.x + t * dx
    proj_y = start.y + t * dy
    return math.hypot(point.x - proj_x, point.y - proj_y)
