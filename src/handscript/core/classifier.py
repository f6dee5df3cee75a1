"""Pixel classification: raw color samples to a binary ink mask."""

from collections.abc import Sequence

from handscript.domain import GlyphImage, InkMask
from handscript.exceptions import InputShapeError

DEFAULT_INK_THRESHOLD = 160


def classify_pixels(
    pixels: bytes | Sequence[int],
    width: int,
    height: int,
    threshold: int = DEFAULT_INK_THRESHOLD,
    channels: int = 4,
    character: str = "?",
) -> InkMask:
    """Threshold a pixel buffer into an InkMask.

    A pixel is ink when the mean of its color channels is below
    ``threshold``. With 3 or 4 channels the first three (RGB) are averaged
    and alpha is ignored; with 1 channel the value is used directly.

    Args:
        pixels: Row-major samples, ``channels`` per pixel
        width: Width in pixels
        height: Height in pixels
        threshold: Luminance threshold on a 0-255 scale
        channels: Samples per pixel (1, 3 or 4)
        character: Character being classified, for error reporting

    Returns:
        InkMask with the same dimensions

    Raises:
        InputShapeError: If the buffer length does not match the dimensions
        ValueError: If the channel count is not supported
    """
    if channels not in (1, 3, 4):
        raise ValueError(f"Unsupported channel count: {channels}")

    expected = width * height * channels
    if len(pixels) != expected:
        raise InputShapeError(character, expected, len(pixels))

    cells = bytearray(width * height)
    if channels == 1:
        for i, value in enumerate(pixels):
            if value < threshold:
                cells[i] = 1
    else:
        # Compare channel sums against 3 * threshold to stay in integers
        limit = threshold * 3
        for i in range(width * height):
            offset = i * channels
            if pixels[offset] + pixels[offset + 1] + pixels[offset + 2] < limit:
                cells[i] = 1

    return InkMask(width=width, height=height, cells=bytes(cells))


def classify_image(
    image: GlyphImage,
    threshold: int = DEFAULT_INK_THRESHOLD,
    canvas_size: int | None = None,
) -> InkMask:
    """Classify a GlyphImage into an InkMask.

    Args:
        image: The drawing to classify
        threshold: Luminance threshold on a 0-255 scale
        canvas_size: Required width and height, if the session fixes one

    Raises:
        InputShapeError: If the image buffer does not match its dimensions,
            or the image is not canvas_size pixels square
    """
    if canvas_size is not None and (image.width, image.height) != (canvas_size, canvas_size):
        raise InputShapeError(
            image.character,
            canvas_size * canvas_size * image.channels,
            len(image.pixels),
        )
    return classify_pixels(
        image.pixels,
        image.width,
        image.height,
        threshold=threshold,
        channels=image.channels,
        character=image.character,
    )
