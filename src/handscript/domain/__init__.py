"""Domain models for handscript.

This module contains the domain models representing drawings, ink masks,
contours and glyph records. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of fonttools and Pillow implementation details

Key classes:
- GlyphImage: Raw per-character pixel buffer
- InkMask: Binary ink/background grid
- Point: A 2D integer point
- Contour: An ordered polygon
- GlyphOutline: Closed contours in font units
- GlyphMetrics: Advance width and side bearing
- GlyphRecord: Name, code point, outline and metrics of one glyph
- FontMetadata: Font-level naming and vertical metrics
"""

from handscript.domain.contour import Contour, Point, WindingDirection
from handscript.domain.glyph import FontMetadata, GlyphMetrics, GlyphOutline, GlyphRecord
from handscript.domain.raster import GlyphImage, InkMask

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Raster types
    "GlyphImage",
    "InkMask",
    # Geometry
    "Point",
    "Contour",
    # Glyph types
    "GlyphOutline",
    "GlyphMetrics",
    "GlyphRecord",
    "FontMetadata",
]
