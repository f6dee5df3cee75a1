"""Advance width estimation from the ink bounding box."""

from handscript.core.geometry import round_half_up
from handscript.domain import GlyphMetrics, GlyphOutline, InkMask


def estimate_advance_width(
    mask: InkMask,
    scale: float,
    right_margin: int = 20,
    min_advance: int = 100,
) -> int:
    """Estimate the advance width of a drawn glyph.

    The advance runs from the canvas's left edge to the rightmost ink
    column plus a fixed margin, scaled to font units. A glyph without ink
    gets the floor value.

    Args:
        mask: The glyph's ink mask
        scale: Font units per pixel
        right_margin: Spacing in pixels added after the rightmost ink column
        min_advance: Floor in font units

    Returns:
        Advance width in font units, never below ``min_advance``
    """
    columns = mask.ink_columns()
    if columns is None:
        return min_advance

    _, max_x = columns
    return max(round_half_up((max_x + right_margin) * scale), min_advance)


def estimate_metrics(
    mask: InkMask,
    outline: GlyphOutline,
    scale: float,
    right_margin: int = 20,
    min_advance: int = 100,
) -> GlyphMetrics:
    """Compute horizontal metrics for a glyph.

    The left side bearing is the outline's minimum x, or 0 when the
    outline is empty.
    """
    bbox = outline.bounding_box()
    return GlyphMetrics(
        advance_width=estimate_advance_width(mask, scale, right_margin, min_advance),
        left_side_bearing=bbox[0] if bbox is not None else 0,
    )
