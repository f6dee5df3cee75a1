"""I/O layer for handscript.

This module reads glyph drawings with Pillow and writes fonts with
fonttools. It provides a clean abstraction layer between those libraries
and the domain models.

Key responsibilities:
- Load per-character PNG drawings into GlyphImages
- Convert glyph outlines to TrueType glyphs
- Assemble and serialize fonts from glyph records

Key classes:
- GlyphImageReader: Load a directory of drawings
- FontWriter: Build and save fonts
"""

from handscript.io.reader import GlyphImageReader, load_glyph_image
from handscript.io.writer import FontWriter

__all__ = [
    "FontWriter",
    "GlyphImageReader",
    "load_glyph_image",
]
