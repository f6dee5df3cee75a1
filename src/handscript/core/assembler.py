"""Assembly of glyph records from ink masks.

The GlyphRecordAssembler runs the per-character vector pipeline
(trace, simplify, map, measure) and wraps the result with the glyph's
identity. It also provides the two records every font carries regardless
of what was drawn: ``.notdef`` and ``space``.
"""

from collections.abc import Mapping

import structlog

from handscript.config import HandscriptSettings
from handscript.core.mapper import CoordinateMapper
from handscript.core.metrics import estimate_metrics
from handscript.core.naming import glyph_name
from handscript.core.simplify import simplify_contour
from handscript.core.tracer import ContourTracer
from handscript.domain import GlyphMetrics, GlyphOutline, GlyphRecord, InkMask

logger = structlog.get_logger(__name__)

NOTDEF_NAME = ".notdef"
SPACE_NAME = "space"
SPACE_CODEPOINT = 0x20


class GlyphRecordAssembler:
    """Turns ink masks into glyph records.

    Stateless apart from its configuration, so one instance can serve any
    number of glyphs and worker processes can build their own.

    Example:
        assembler = GlyphRecordAssembler(settings)
        records = assembler.assemble({"A": mask_a, "b": mask_b})
    """

    def __init__(self, settings: HandscriptSettings | None = None) -> None:
        """Initialize the assembler.

        Args:
            settings: Handscript settings (defaults if None)
        """
        self.settings = settings or HandscriptSettings()
        self.tracer = ContourTracer(min_points=self.settings.tracing.min_contour_points)
        self.mapper = CoordinateMapper(
            canvas_size=self.settings.canvas.size,
            units_per_em=self.settings.font.units_per_em,
            baseline_ratio=self.settings.canvas.baseline_ratio,
            min_points=self.settings.tracing.min_outline_points,
        )

    def build_outline(self, mask: InkMask) -> GlyphOutline:
        """Trace, simplify and map one mask into a font-unit outline."""
        tolerance = self.settings.tracing.simplify_tolerance
        traced = self.tracer.trace(mask)
        simplified = [simplify_contour(contour, tolerance) for contour in traced]
        return self.mapper.map_contours(simplified)

    def assemble_glyph(self, character: str, mask: InkMask) -> GlyphRecord:
        """Build the record for one drawn character.

        Args:
            character: The character (one code point)
            mask: Its ink mask

        Returns:
            GlyphRecord with canonical name, outline and metrics

        Raises:
            ValueError: If ``character`` is not exactly one code point
        """
        name = glyph_name(character)
        outline = self.build_outline(mask)
        metrics = estimate_metrics(
            mask,
            outline,
            scale=self.mapper.scale,
            right_margin=self.settings.metrics.right_margin,
            min_advance=self.settings.metrics.min_advance_width,
        )
        return GlyphRecord(
            name=name,
            codepoint=ord(character),
            outline=outline,
            metrics=metrics,
        )

    def notdef_record(self) -> GlyphRecord:
        """The empty ``.notdef`` glyph, half an em wide."""
        upm = self.settings.font.units_per_em
        return GlyphRecord(
            name=NOTDEF_NAME,
            codepoint=None,
            outline=GlyphOutline(),
            metrics=GlyphMetrics(
                advance_width=round(upm * self.settings.metrics.notdef_advance_ratio)
            ),
        )

    def space_record(self) -> GlyphRecord:
        """The empty ``space`` glyph bound to U+0020."""
        upm = self.settings.font.units_per_em
        return GlyphRecord(
            name=SPACE_NAME,
            codepoint=SPACE_CODEPOINT,
            outline=GlyphOutline(),
            metrics=GlyphMetrics(
                advance_width=round(upm * self.settings.metrics.space_advance_ratio)
            ),
        )

    def collect(self, records: Mapping[str, GlyphRecord]) -> list[GlyphRecord]:
        """Order per-character records into the final record list.

        ``.notdef`` and ``space`` come first, followed by the drawn glyphs in
        the mapping's iteration order. A drawn space is dropped in favour of
        the fixed space record.

        Args:
            records: Per-character records keyed by character

        Returns:
            The complete, ordered record list
        """
        result = [self.notdef_record(), self.space_record()]
        for character, record in records.items():
            if record.codepoint == SPACE_CODEPOINT:
                logger.warning("Ignoring drawn space glyph", character=character)
                continue
            result.append(record)
        return result

    def assemble(self, masks: Mapping[str, InkMask]) -> list[GlyphRecord]:
        """Build all records for a character map.

        Args:
            masks: Ink masks keyed by character; read, never modified

        Returns:
            The complete, ordered record list, always including ``.notdef``
            and ``space``
        """
        return self.collect(
            {character: self.assemble_glyph(character, mask) for character, mask in masks.items()}
        )
