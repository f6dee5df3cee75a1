"""Raster types: raw glyph drawings and classified ink masks."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GlyphImage:
    """A raw drawing of one character as delivered by the drawing surface.

    Attributes:
        character: The character the drawing represents (one code point)
        width: Width in pixels
        height: Height in pixels
        pixels: Row-major pixel samples, ``channels`` bytes per pixel
        channels: 4 for RGBA, 3 for RGB, 1 for luminance
    """

    character: str
    width: int
    height: int
    pixels: bytes
    channels: int = 4

    @property
    def expected_length(self) -> int:
        """Buffer length implied by the declared dimensions."""
        return self.width * self.height * self.channels

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "character": self.character,
            "width": self.width,
            "height": self.height,
            "pixels": self.pixels,
            "channels": self.channels,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphImage":
        """Deserialize from dictionary."""
        return cls(
            character=data["character"],
            width=data["width"],
            height=data["height"],
            pixels=bytes(data["pixels"]),
            channels=data.get("channels", 4),
        )


@dataclass(frozen=True)
class InkMask:
    """A binary ink/background grid.

    Cells are stored row-major, one byte per pixel (1 = ink). Coordinates
    outside the grid always read as background.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        cells: ``width * height`` bytes of 0 or 1
    """

    width: int
    height: int
    cells: bytes

    def __post_init__(self) -> None:
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"InkMask of {self.width}x{self.height} needs "
                f"{self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_rows(cls, rows: list[str], ink: str = "#") -> "InkMask":
        """Build a mask from text rows, ``ink`` marking ink pixels."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        cells = bytes(1 if ch == ink else 0 for row in rows for ch in row)
        return cls(width=width, height=height, cells=cells)

    def is_ink(self, x: int, y: int) -> bool:
        """Check whether (x, y) is an ink pixel."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return False
        return self.cells[y * self.width + x] == 1

    def is_boundary(self, x: int, y: int) -> bool:
        """Check whether (x, y) is ink with a 4-adjacent background pixel."""
        if not self.is_ink(x, y):
            return False
        return (
            not self.is_ink(x - 1, y)
            or not self.is_ink(x + 1, y)
            or not self.is_ink(x, y - 1)
            or not self.is_ink(x, y + 1)
        )

    def ink_count(self) -> int:
        """Number of ink pixels."""
        return self.cells.count(1)

    def is_empty(self) -> bool:
        """Check whether the mask holds no ink at all."""
        return 1 not in self.cells

    def iter_ink(self) -> Iterator[tuple[int, int]]:
        """Yield (x, y) for every ink pixel in row-major order."""
        width = self.width
        for index, value in enumerate(self.cells):
            if value:
                yield index % width, index // width

    def ink_columns(self) -> tuple[int, int] | None:
        """Return (min_x, max_x) over all ink pixels, None if there is none."""
        min_x: int | None = None
        max_x: int | None = None
        for y in range(self.height):
            row = self.cells[y * self.width:(y + 1) * self.width]
            first = row.find(1)
            if first < 0:
                continue
            last = row.rfind(1)
            if min_x is None or first < min_x:
                min_x = first
            if max_x is None or last > max_x:
                max_x = last
        if min_x is None or max_x is None:
            return None
        return (min_x, max_x)
