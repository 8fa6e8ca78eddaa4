"""A single object-attribute entry."""

from __future__ import annotations

from typing import Callable

from gbcore.tile import TILE_SIZE
from gbcore.vram import VRAM

SPRITE_BYTES = 4
_Y_OFFSET = 16
_X_OFFSET = 8


class Sprite:
    """A sprite decoded from its four OAM bytes."""

    def __init__(self, vram: VRAM, data: bytes, enable_8x16: Callable[[], bool]) -> None:
        if len(data) != SPRITE_BYTES:
            raise ValueError(f"a sprite needs {SPRITE_BYTES} bytes, got {len(data)}")
        self._vram = vram
        self._enable_8x16 = enable_8x16
        self._y = 0
        self._x = 0
        self._tile = 0
        self.priority = False
        self.flip_y = False
        self.flip_x = False
        self.use_bank1 = False
        self.dmg_palette = 0
        self.cgb_palette = 0
        for addr, byte in enumerate(data):
            self.write(addr, byte)

    def read(self, addr: int) -> int:
        if addr == 0:
            return self._y
        if addr == 1:
            return self._x
        if addr == 2:
            return self._tile
        if addr == 3:
            value = 0
            if self.priority:
                value |= 1 << 7
            if self.flip_y:
                value |= 1 << 6
            if self.flip_x:
                value |= 1 << 5
            if self.use_bank1:
                value |= 1 << 3
            value |= (self.dmg_palette & 0b1) << 4
            value |= self.cgb_palette & 0b111
            return value
        raise IndexError(f"invalid sprite address {addr}")

    def write(self, addr: int, data: int) -> None:
        if addr == 0:
            self._y = data
        elif addr == 1:
            self._x = data
        elif addr == 2:
            self._tile = data
        elif addr == 3:
            self.priority = bool(data & (1 << 7))
            self.flip_y = bool(data & (1 << 6))
            self.flip_x = bool(data & (1 << 5))
            self.dmg_palette = (data & (1 << 4)) >> 4
            self.use_bank1 = bool(data & (1 << 3))
            self.cgb_palette = data & 0b111
        else:
            raise IndexError(f"invalid sprite address {addr}")

    def _tile_pixels(self, index: int) -> list[int]:
        tile = self._vram.get_tile(index)
        if tile is None:
            return [0] * (TILE_SIZE * TILE_SIZE)
        return tile.pixels()

    def pixels(self) -> list[int]:
        """Colour indices of the sprite: 8x8, or 8x16 in tall-sprite mode."""
        if self._enable_8x16():
            return self._tile_pixels(self._tile & 0xFE) + self._tile_pixels(self._tile | 0x01)
        return self._tile_pixels(self._tile)

    def y(self) -> int:
        """Screen Y coordinate."""
        return (self._y - _Y_OFFSET) & 0xFF

    def x(self) -> int:
        """Screen X coordinate."""
        return (self._x - _X_OFFSET) & 0xFF