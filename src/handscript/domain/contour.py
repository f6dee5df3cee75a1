"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout handscript:
- Point: A 2D integer point (pixel or font unit)
- Contour: An ordered polygon traced from a bitmap or mapped into font units
- WindingDirection: Enum for contour winding direction
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class WindingDirection(Enum):
    """Contour winding direction.

    The direction is always relative to the coordinate system the contour
    lives in. Pixel space is y-down, font space is y-up, so mapping a contour
    from one to the other flips its direction.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point on the integer grid.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate (pixel column or font units)
        y: Y coordinate (pixel row or font units)
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


@dataclass
class Contour:
    """An ordered polygon.

    Traced contours repeat their first point at the end to mark closure.
    Outline contours in font units omit the repeated point, the closing
    segment is implied.

    Attributes:
        points: List of points forming the contour
        direction: Winding direction (None until calculated)
    """

    points: list[Point]
    direction: WindingDirection | None = field(default=None)
    _cached_area: float | None = field(default=None, repr=False, init=False)
    _cached_bbox: tuple[int, int, int, int] | None = field(
        default=None, repr=False, init=False
    )

    def __len__(self) -> int:
        return len(self.points)

    def is_closed(self) -> bool:
        """Check whether the first and last point coincide.

        Returns:
            True for contours of at least two points ending where they start
        """
        return len(self.points) >= 2 and self.points[0] == self.points[-1]

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction in a y-up system:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        A repeated closing point contributes nothing, so traced and mapped
        contours can share this method. Result is cached for efficiency.

        Returns:
            Signed area of the contour
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    def classify_direction(self, y_down: bool = False) -> WindingDirection | None:
        """Derive the winding direction from the signed area.

        Args:
            y_down: True when the contour is in pixel space (y grows downward)

        Returns:
            Winding direction, or None for contours enclosing no area
        """
        area = self.signed_area()
        if area == 0:
            return None
        if y_down:
            area = -area
        if area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Calculate bounding box of the contour.

        Result is cached for efficiency.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if self._cached_bbox is not None:
            return self._cached_bbox

        if not self.points:
            self._cached_bbox = (0, 0, 0, 0)
            return self._cached_bbox

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]

        self._cached_bbox = (min(xs), min(ys), max(xs), max(ys))
        return self._cached_bbox

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the contour
        """
        return {
            "points": [p.to_tuple() for p in self.points],
            "direction": self.direction.value if self.direction else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a contour

        Returns:
            Contour instance
        """
        points = [Point(x, y) for x, y in data["points"]]
        direction = (
            WindingDirection(data["direction"])
            if data["direction"] is not None
            else None
        )
        return cls(points=points, direction=direction)
