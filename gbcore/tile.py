"""8x8 two-bit-per-pixel tiles."""

from __future__ import annotations

from typing import Protocol

TILE_SIZE = 8
TILE_BYTES = 16


class Drawable(Protocol):
    """Anything that yields a flat row-major list of colour indices."""

    def pixels(self) -> list[int]: ...


class Tile:
    """A decoded tile: 64 colour indices in row-major order."""

    __slots__ = ("_pixels",)

    def __init__(self, data: bytes) -> None:
        if len(data) != TILE_BYTES:
            raise ValueError(f"a tile needs {TILE_BYTES} bytes, got {len(data)}")
        self._pixels = tuple(
            ((first >> (7 - col)) & 1) | (((second >> (7 - col)) & 1) << 1)
            for first, second in zip(data[0::2], data[1::2])
            for col in range(TILE_SIZE)
        )

    def pixels(self) -> list[int]:
        """Return a copy of the tile's colour indices."""
        return list(self._pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self._pixels == other._pixels

    def __hash__(self) -> int:
        return hash(self._pixels)

    def __repr__(self) -> str:
        return f"Tile(pixels={list(self._pixels)!r})"