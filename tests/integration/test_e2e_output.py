"""End-to-end tests from drawing pixels to a font file."""

from io import BytesIO
from pathlib import Path

import pytest
from fontTools.ttLib import TTFont
from PIL import Image, ImageDraw

from handscript.config import HandscriptSettings
from handscript.core import (
    CoordinateMapper,
    GlyphRecordAssembler,
    classify_image,
)
from handscript.core.naming import SUPPORTED_CHARACTERS, glyph_name
from handscript.domain import GlyphImage, InkMask
from handscript.io import FontWriter, GlyphImageReader

CANVAS = 300
BACKGROUND = (250, 248, 244, 255)
INK = (26, 26, 26, 255)


def drawing_with_square(character: str, x0: int, y0: int, side: int) -> GlyphImage:
    pixels = bytearray(bytes(BACKGROUND) * (CANVAS * CANVAS))
    for y in range(y0, y0 + side):
        for x in range(x0, x0 + side):
            offset = (y * CANVAS + x) * 4
            pixels[offset:offset + 4] = bytes(INK)
    return GlyphImage(character=character, width=CANVAS, height=CANVAS, pixels=bytes(pixels))


@pytest.fixture
def assembler() -> GlyphRecordAssembler:
    return GlyphRecordAssembler(HandscriptSettings())


class TestPipeline:
    """Pixels through classifier, tracer, simplifier, mapper and metrics."""

    def test_small_blob_near_center(self, assembler: GlyphRecordAssembler):
        """A 4 px blob yields one contour between baseline and ascender."""
        mask = classify_image(drawing_with_square("o", 148, 148, 4), canvas_size=CANVAS)
        record = assembler.assemble_glyph("o", mask)

        assert len(record.outline.contours) == 1
        contour = record.outline.contours[0]
        assert len(contour) >= 3
        assert contour.signed_area() != 0

        assert record.metrics.advance_width > 100
        for point in contour.points:
            assert 0 < point.y < 800

    def test_empty_map_builds(self, assembler: GlyphRecordAssembler):
        """No drawings still yields a valid two-glyph font."""
        records = assembler.assemble({})
        assert [r.name for r in records] == [".notdef", "space"]

        font = TTFont(BytesIO(FontWriter().to_bytes(records)))
        assert font.getGlyphOrder() == [".notdef", "space"]

    def test_blank_drawing_is_a_blank_glyph(self, assembler: GlyphRecordAssembler):
        """A drawing without ink becomes an empty glyph at the floor advance."""
        image = GlyphImage(
            character="x",
            width=CANVAS,
            height=CANVAS,
            pixels=bytes(BACKGROUND) * (CANVAS * CANVAS),
        )
        record = assembler.assemble_glyph("x", classify_image(image))

        assert record.outline.is_empty()
        assert record.metrics.advance_width == 100

    @pytest.mark.parametrize("side", [8, 20, 60])
    def test_square_bounding_box_survives(self, assembler: GlyphRecordAssembler, side: int):
        """A centered square maps back onto its pixel bounding box."""
        x0 = y0 = (CANVAS - side) // 2
        mask = classify_image(drawing_with_square("n", x0, y0, side))
        record = assembler.assemble_glyph("n", mask)

        assert len(record.outline.contours) == 1
        min_x, min_y, max_x, max_y = record.outline.bounding_box()

        mapper = CoordinateMapper()
        left, bottom = mapper.to_pixel(min_x, min_y)
        right, top = mapper.to_pixel(max_x, max_y)
        tolerance = HandscriptSettings().tracing.simplify_tolerance

        assert left == pytest.approx(x0, abs=tolerance)
        assert right == pytest.approx(x0 + side - 1, abs=tolerance)
        assert top == pytest.approx(y0, abs=tolerance)
        assert bottom == pytest.approx(y0 + side - 1, abs=tolerance)

    def test_every_traced_contour_is_closed(self):
        """Tracer output is always closed before simplification."""
        rows = [
            "............",
            ".###....#...",
            ".###...###..",
            ".###....#...",
            "............",
            "..######....",
            "..#....#..#.",
            "..######....",
        ]
        assembler = GlyphRecordAssembler()
        for contour in assembler.tracer.trace(InkMask.from_rows(rows)):
            assert contour.is_closed()


class TestFontBuild:
    """Full builds from PNG files to TrueType."""

    def test_directory_to_font(self, tmp_path: Path):
        """Every supported character drawn on disk ends up in the font."""
        drawings = tmp_path / "drawings"
        drawings.mkdir()
        characters = "Hi!7"
        for i, character in enumerate(characters):
            image = Image.new("RGBA", (CANVAS, CANVAS), (0, 0, 0, 0))
            left = 60 + 10 * i
            ImageDraw.Draw(image).rectangle((left, 80, left + 40, 239), fill=INK)
            image.save(drawings / f"{glyph_name(character)}.png")

        images = GlyphImageReader(drawings).load()
        assembler = GlyphRecordAssembler()
        records = assembler.assemble(
            {c: classify_image(image, canvas_size=CANVAS) for c, image in images.items()}
        )

        output = tmp_path / "Hand.ttf"
        FontWriter(HandscriptSettings().font.to_metadata()).save(records, output)

        font = TTFont(output)
        cmap = font.getBestCmap()
        assert font.getGlyphOrder()[:2] == [".notdef", "space"]
        for character in characters:
            name = glyph_name(character)
            assert cmap[ord(character)] == name
            assert font["glyf"][name].numberOfContours == 1
            # bottom row 239 lies one pixel above the baseline
            assert font["glyf"][name].yMin == 3
        font.close()

    def test_supported_set_names_fit_one_font(self, assembler: GlyphRecordAssembler):
        """All supported characters can share one font."""
        blank = InkMask(width=CANVAS, height=CANVAS, cells=bytes(CANVAS * CANVAS))
        records = assembler.assemble({c: blank for c in SUPPORTED_CHARACTERS})

        font = TTFont(BytesIO(FontWriter().to_bytes(records)))

        assert len(font.getGlyphOrder()) == len(SUPPORTED_CHARACTERS) + 2
        assert len(font.getBestCmap()) == len(SUPPORTED_CHARACTERS) + 1
