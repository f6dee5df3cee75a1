"""Reader for glyph drawings stored as image files.

This module provides the GlyphImageReader class for loading a directory of
per-character PNG drawings into GlyphImage domain models.
"""

from collections.abc import Iterator
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from handscript.core.naming import character_for_name
from handscript.domain import GlyphImage
from handscript.exceptions import ImageLoadError

# Canvas background of the drawing surface
BACKGROUND_RGBA = (250, 248, 244, 255)

IMAGE_SUFFIXES = frozenset({".png"})


def load_glyph_image(path: Path, character: str) -> GlyphImage:
    """Load one drawing as an RGBA GlyphImage.

    The image is composited over the canvas background, so transparent
    pixels read as background rather than black.

    Args:
        path: Path to the image file
        character: Character the drawing represents

    Returns:
        GlyphImage with the file's own dimensions

    Raises:
        ImageLoadError: If the file cannot be read as an image
    """
    try:
        with Image.open(path) as source:
            rgba = source.convert("RGBA")
    except (OSError, UnidentifiedImageError) as e:
        raise ImageLoadError(str(path), str(e)) from e

    background = Image.new("RGBA", rgba.size, BACKGROUND_RGBA)
    flattened = Image.alpha_composite(background, rgba)

    return GlyphImage(
        character=character,
        width=flattened.width,
        height=flattened.height,
        pixels=flattened.tobytes(),
        channels=4,
    )


class GlyphImageReader:
    """Loads a directory of per-character drawings.

    Each drawing is a PNG file named after its character, either the
    character itself (``A.png``) or its glyph name (``period.png``,
    ``uni0061.png``). Files whose name does not identify a character are
    skipped.

    Example:
        reader = GlyphImageReader(Path("drawings"))
        images = reader.load()
        for character, image in images.items():
            print(character, image.width, image.height)
    """

    def __init__(self, directory: Path) -> None:
        """Initialize the reader.

        Args:
            directory: Directory holding the drawings
        """
        self._directory = directory
        self._skipped: list[Path] = []

    @property
    def skipped(self) -> list[Path]:
        """Files ignored by the last scan because their name is not a character."""
        return list(self._skipped)

    def iter_paths(self) -> Iterator[tuple[str, Path]]:
        """Yield (character, path) for every drawing in name order.

        Raises:
            ImageLoadError: If the directory does not exist
        """
        if not self._directory.is_dir():
            raise ImageLoadError(str(self._directory), "not a directory")

        self._skipped = []
        for path in sorted(self._directory.iterdir()):
            if not path.is_file() or path.suffix.lower() not in IMAGE_SUFFIXES:
                continue
            character = character_for_name(path.stem)
            if character is None:
                self._skipped.append(path)
                continue
            yield character, path

    def load(self) -> dict[str, GlyphImage]:
        """Load every drawing in the directory.

        When two files resolve to the same character the later one in name
        order wins.

        Returns:
            GlyphImages keyed by character, in file name order

        Raises:
            ImageLoadError: If the directory or any drawing cannot be read
        """
        images: dict[str, GlyphImage] = {}
        for character, path in self.iter_paths():
            images[character] = load_glyph_image(path, character)
        return images
