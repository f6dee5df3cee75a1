"""Handscript - Turn hand-drawn glyph bitmaps into a TrueType font.

Handscript takes one fixed-size raster drawing per character, traces the ink
boundaries into polygonal outlines and assembles them into a font file.

Example:
    $ handscript drawings/ -o MyHand.ttf

This will read drawings/A.png, drawings/period.png, ... and write MyHand.ttf.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
