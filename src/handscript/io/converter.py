"""Converters from domain outlines to fonttools glyphs."""

from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib.tables._g_l_y_f import Glyph as TTGlyph

from handscript.domain import GlyphOutline


def outline_to_truetype(outline: GlyphOutline) -> TTGlyph:
    """Draw a polygonal outline into a TrueType glyph.

    Each contour becomes one closed path: a moveTo to its first point,
    lineTo through the rest, then closePath.

    Args:
        outline: Outline in font units

    Returns:
        fonttools glyf table glyph
    """
    pen = TTGlyphPen(None)

    for contour in outline.contours:
        if not contour.points:
            continue

        first_point = contour.points[0]
        pen.moveTo((first_point.x, first_point.y))
        for point in contour.points[1:]:
            pen.lineTo((point.x, point.y))
        pen.closePath()

    return pen.glyph()
