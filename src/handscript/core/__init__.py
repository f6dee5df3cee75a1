"""Core processing algorithms for handscript.

This module contains the raster-to-vector pipeline:

- Pixel classification (color samples to ink mask)
- Boundary tracing (Moore neighborhood following)
- Polygon simplification (Ramer-Douglas-Peucker)
- Coordinate mapping (pixels to font units)
- Metrics estimation (advance width from ink extent)
- Record assembly (canonical names, .notdef and space)

All services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- classify_pixels: Threshold a pixel buffer into an InkMask
- simplify_polyline: RDP simplification of a point sequence
- estimate_advance_width: Advance width from the rightmost ink column
- glyph_name: Canonical glyph name of a character

Key classes:
- ContourTracer: Traces ink boundaries into closed contours
- CoordinateMapper: Maps pixel contours into font units
- GlyphRecordAssembler: Builds glyph records from ink masks
- FontProcessor: Orchestrates a parallel font build
"""

from handscript.core.assembler import GlyphRecordAssembler
from handscript.core.classifier import classify_image, classify_pixels
from handscript.core.mapper import CoordinateMapper
from handscript.core.metrics import estimate_advance_width, estimate_metrics
from handscript.core.naming import (
    SUPPORTED_CHARACTERS,
    CharacterClass,
    character_for_name,
    classify_character,
    glyph_name,
)
from handscript.core.processor import FontProcessor, process_character
from handscript.core.simplify import simplify_contour, simplify_polyline
from handscript.core.tracer import ContourTracer

__all__ = [
    # Pipeline classes
    "ContourTracer",
    "CoordinateMapper",
    "FontProcessor",
    "GlyphRecordAssembler",
    # Pipeline functions
    "classify_image",
    "classify_pixels",
    "estimate_advance_width",
    "estimate_metrics",
    "process_character",
    "simplify_contour",
    "simplify_polyline",
    # Naming
    "SUPPORTED_CHARACTERS",
    "CharacterClass",
    "character_for_name",
    "classify_character",
    "glyph_name",
]
