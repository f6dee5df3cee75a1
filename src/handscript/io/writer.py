"""Font writer assembling glyph records into a TrueType font.

This module provides the FontWriter class, which hands glyph records and
font metadata to fonttools' FontBuilder and serializes the result.
"""

from datetime import datetime
from io import BytesIO
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.ttLib import TTFont

from handscript.domain import FontMetadata, GlyphRecord
from handscript.exceptions import AssemblyError, FontSaveError
from handscript.io.converter import outline_to_truetype

# Font timestamp epoch: January 1, 1904 (Mac epoch)
_FONT_EPOCH = datetime(1904, 1, 1)


def _font_timestamp(dt: datetime) -> int:
    """Convert datetime to font timestamp (seconds since 1904-01-01)."""
    return int((dt - _FONT_EPOCH).total_seconds())


def validate_records(records: list[GlyphRecord]) -> None:
    """Check that records can share one font.

    Raises:
        AssemblyError: If names or code points collide, or .notdef is not first
    """
    if not records or records[0].name != ".notdef":
        raise AssemblyError("the first glyph must be .notdef")

    names: set[str] = set()
    codepoints: set[int] = set()
    for record in records:
        if record.name in names:
            raise AssemblyError(f"duplicate glyph name '{record.name}'")
        names.add(record.name)
        if record.codepoint is not None:
            if record.codepoint in codepoints:
                raise AssemblyError(
                    f"code point U+{record.codepoint:04X} mapped twice"
                )
            codepoints.add(record.codepoint)


class FontWriter:
    """Builds and writes TrueType fonts from glyph records.

    Example:
        writer = FontWriter(FontMetadata(family_name="My Hand"))
        writer.save(records, Path("MyHand.ttf"))
    """

    def __init__(self, metadata: FontMetadata | None = None) -> None:
        """Initialize the font writer.

        Args:
            metadata: Font-level naming and vertical metrics
        """
        self.metadata = metadata or FontMetadata()

    def _validate_names(self) -> None:
        family = self.metadata.family_name.strip()
        if not family:
            raise AssemblyError("family name is empty")
        ps_name = self.metadata.postscript_name
        if not ps_name.isascii() or not ps_name.isprintable() or len(ps_name) > 63:
            raise AssemblyError(
                f"family and style must form a printable ASCII PostScript name "
                f"of at most 63 characters, got '{ps_name}'"
            )

    def build(self, records: list[GlyphRecord]) -> TTFont:
        """Assemble the records into a TrueType font.

        Args:
            records: Ordered glyph records, starting with .notdef

        Returns:
            fonttools TTFont ready to be saved

        Raises:
            AssemblyError: If the records or metadata cannot form a font
        """
        self._validate_names()
        validate_records(records)

        meta = self.metadata
        try:
            fb = FontBuilder(meta.units_per_em, isTTF=True)
            fb.setupGlyphOrder([record.name for record in records])
            fb.setupCharacterMap(
                {r.codepoint: r.name for r in records if r.codepoint is not None}
            )
            fb.setupGlyf({r.name: outline_to_truetype(r.outline) for r in records})
            fb.setupHorizontalMetrics(
                {
                    r.name: (r.metrics.advance_width, r.metrics.left_side_bearing)
                    for r in records
                }
            )

            now = _font_timestamp(datetime.now())
            fb.setupHead(unitsPerEm=meta.units_per_em, created=now, modified=now)
            fb.setupHorizontalHeader(ascent=meta.ascender, descent=meta.descender)
            fb.setupMaxp()
            fb.setupOS2(
                sTypoAscender=meta.ascender,
                sTypoDescender=meta.descender,
                sTypoLineGap=0,
                usWinAscent=meta.ascender,
                usWinDescent=abs(meta.descender),
            )
            fb.setupPost()
            fb.setupNameTable(
                {
                    "familyName": meta.family_name,
                    "styleName": meta.style_name,
                    "uniqueFontIdentifier": f"{meta.version};{meta.postscript_name}",
                    "fullName": meta.full_name,
                    "version": f"Version {meta.version}",
                    "psName": meta.postscript_name,
                }
            )
        except Exception as e:
            raise AssemblyError(str(e)) from e

        return fb.font

    def to_bytes(self, records: list[GlyphRecord]) -> bytes:
        """Assemble and serialize the font.

        Raises:
            AssemblyError: If assembly or binary encoding fails
        """
        font = self.build(records)
        buffer = BytesIO()
        try:
            font.save(buffer)
        except Exception as e:
            raise AssemblyError(str(e)) from e
        finally:
            font.close()
        return buffer.getvalue()

    def save(self, records: list[GlyphRecord], output_path: Path) -> Path:
        """Assemble the font and write it to disk.

        The font is fully serialized before the file is opened, so a failed
        build leaves no partial file behind.

        Returns:
            The path written

        Raises:
            AssemblyError: If assembly or binary encoding fails
            FontSaveError: If the file cannot be written
        """
        data = self.to_bytes(records)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(data)
        except OSError as e:
            raise FontSaveError(str(output_path), str(e)) from e
        return output_path

    @staticmethod
    def default_output_path(metadata: FontMetadata, directory: Path | None = None) -> Path:
        """Generate the default output path ``<family>.ttf``.

        Spaces are dropped so "My Hand" becomes MyHand.ttf.
        """
        stem = metadata.family_name.replace(" ", "") or "Handscript"
        return (directory or Path.cwd()) / f"{stem}.ttf"
