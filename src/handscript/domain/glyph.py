"""Glyph representation and metadata.

This module defines the glyph domain models: a glyph's outline in font
units, its horizontal metrics, the record that ties both to a character,
and the font-level metadata the font writer needs.
"""

from dataclasses import dataclass, field
from typing import Any

from handscript.domain.contour import Contour


@dataclass
class GlyphOutline:
    """A glyph's shape as a set of closed polygons in font units.

    Attributes:
        contours: Closed contours; the closing segment back to the first
            point is implied and the first point is not repeated
    """

    contours: list[Contour] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if the outline has no contours.

        Returns:
            True if there is nothing to draw, False otherwise
        """
        return len(self.contours) == 0

    def bounding_box(self) -> tuple[int, int, int, int] | None:
        """Calculate the union bounding box of all contours.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y), or None for empty outlines
        """
        if self.is_empty():
            return None
        boxes = [contour.bounding_box() for contour in self.contours]
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"contours": [c.to_dict() for c in self.contours]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphOutline":
        """Deserialize from dictionary."""
        return cls(contours=[Contour.from_dict(c) for c in data["contours"]])


@dataclass(frozen=True)
class GlyphMetrics:
    """Horizontal metrics of a glyph.

    Attributes:
        advance_width: Horizontal advance width in font units
        left_side_bearing: Left side bearing in font units
    """

    advance_width: int
    left_side_bearing: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"advance_width": self.advance_width, "lsb": self.left_side_bearing}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphMetrics":
        """Deserialize from dictionary."""
        return cls(advance_width=data["advance_width"], left_side_bearing=data["lsb"])


@dataclass(frozen=True)
class GlyphRecord:
    """Everything the font writer needs to know about one glyph.

    Attributes:
        name: Glyph name (e.g., "A", "period", "uni0033")
        codepoint: Unicode code point (None for unencoded glyphs like .notdef)
        outline: Outline in font units
        metrics: Horizontal metrics
    """

    name: str
    codepoint: int | None
    outline: GlyphOutline
    metrics: GlyphMetrics

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the record
        """
        return {
            "name": self.name,
            "codepoint": self.codepoint,
            "outline": self.outline.to_dict(),
            "metrics": self.metrics.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphRecord":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a record

        Returns:
            GlyphRecord instance
        """
        return cls(
            name=data["name"],
            codepoint=data["codepoint"],
            outline=GlyphOutline.from_dict(data["outline"]),
            metrics=GlyphMetrics.from_dict(data["metrics"]),
        )


@dataclass(frozen=True)
class FontMetadata:
    """Font-level naming and vertical metrics.

    Attributes:
        family_name: Family name (e.g., "Handscript")
        style_name: Style name (e.g., "Regular")
        units_per_em: Design units per em
        ascender: Ascender in font units
        descender: Descender in font units (negative)
        version: Version string without the "Version " prefix
    """

    family_name: str = "Handscript"
    style_name: str = "Regular"
    units_per_em: int = 1000
    ascender: int = 800
    descender: int = -200
    version: str = "1.0"

    @property
    def full_name(self) -> str:
        return f"{self.family_name} {self.style_name}"

    @property
    def postscript_name(self) -> str:
        return f"{self.family_name}-{self.style_name}".replace(" ", "")
