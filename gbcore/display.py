"""Display configuration, the monochrome palette and a small paletted image."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)

MONOCHROME_PALETTE: tuple[Color, ...] = (
    WHITE,
    (170, 170, 170, 255),
    (85, 85, 85, 255),
    BLACK,
)


@dataclass
class DisplayConfig:
    """Title and, for text displays, the size in pixels."""

    title: str = ""
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Rectangle:
    """A half-open pixel rectangle; the corners are normalised on creation."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def __post_init__(self) -> None:
        if self.min_x > self.max_x:
            lo, hi = self.max_x, self.min_x
            object.__setattr__(self, "min_x", lo)
            object.__setattr__(self, "max_x", hi)
        if self.min_y > self.max_y:
            lo, hi = self.max_y, self.min_y
            object.__setattr__(self, "min_y", lo)
            object.__setattr__(self, "max_y", hi)

    def width(self) -> int:
        return self.max_x - self.min_x

    def height(self) -> int:
        return self.max_y - self.min_y

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y


def _rgba(color: Sequence[int]) -> Color:
    if len(color) == 3:
        return (color[0], color[1], color[2], 255)
    if len(color) == 4:
        return (color[0], color[1], color[2], color[3])
    raise ValueError(f"a colour needs 3 or 4 components, got {len(color)}")


def closest_index(palette: Sequence[Sequence[int]], color: Sequence[int]) -> int:
    """Index of the palette entry nearest to ``color``; ties go to the first."""
    if not palette:
        raise ValueError("palette is empty")
    target = _rgba(color)
    best_index = 0
    best_distance: int | None = None
    for index, entry in enumerate(palette):
        candidate = _rgba(entry)
        if candidate == target:
            return index
        distance = sum((a - b) ** 2 for a, b in zip(candidate, target))
        if best_distance is None or distance < best_distance:
            best_index, best_distance = index, distance
    return best_index


class PalettedImage:
    """An image storing one palette index per pixel, row by row."""

    def __init__(self, rect: Rectangle, palette: Sequence[Sequence[int]]) -> None:
        self.rect = rect
        self.palette: tuple[Color, ...] = tuple(_rgba(c) for c in palette)
        self.stride = rect.width()
        self.pix = bytearray(rect.width() * rect.height())

    def pix_offset(self, x: int, y: int) -> int:
        """Offset into ``pix`` of the pixel at (``x``, ``y``)."""
        return (y - self.rect.min_y) * self.stride + (x - self.rect.min_x)

    def set(self, x: int, y: int, color: Sequence[int]) -> None:
        """Set a pixel to the nearest palette colour; outside pixels are ignored."""
        if not self.rect.contains(x, y):
            return
        self.pix[self.pix_offset(x, y)] = closest_index(self.palette, color)

    def color_index_at(self, x: int, y: int) -> int:
        """Palette index at (``x``, ``y``), or 0 outside the image."""
        if not self.rect.contains(x, y):
            return 0
        return self.pix[self.pix_offset(x, y)]

    def at(self, x: int, y: int) -> Color:
        """Colour at (``x``, ``y``); outside the image this is the first entry."""
        if not self.palette:
            raise ValueError("palette is empty")
        return self.palette[self.color_index_at(x, y)]