"""Video RAM: tile data, the two tile maps and a decoded tile cache."""

from __future__ import annotations

from enum import Enum

from gbcore.tile import TILE_BYTES, Tile

TILE_DATA_SIZE = 0x1800
TILE_MAP_SIZE = 0x400
TILE_COUNT = TILE_DATA_SIZE // TILE_BYTES
TILE_MAP_WIDTH = 32

_MAP0_START = 0x1800
_MAP1_START = 0x1C00
_END = 0x2000


class TileAddressingMode(Enum):
    """How a tile map entry is turned into a tile index."""

    MODE_8000 = False
    MODE_8800 = True


class TileMapMode(Enum):
    """Which of the two tile maps is used."""

    MAP_0 = False
    MAP_1 = True


class VRAM:
    """The 8 KiB video memory area at 0x8000-0x9FFF."""

    def __init__(self) -> None:
        self.tile_data = bytearray(TILE_DATA_SIZE)
        self.tile_map0 = bytearray(TILE_MAP_SIZE)
        self.tile_map1 = bytearray(TILE_MAP_SIZE)
        self.tiles: list[Tile | None] = [None] * TILE_COUNT

    def read(self, addr: int) -> int:
        if 0 <= addr < _MAP0_START:
            return self.tile_data[addr]
        if _MAP0_START <= addr < _MAP1_START:
            return self.tile_map0[addr - _MAP0_START]
        if _MAP1_START <= addr < _END:
            return self.tile_map1[addr - _MAP1_START]
        raise IndexError(f"invalid VRAM address {addr:#06x}")

    def write(self, addr: int, data: int) -> None:
        if 0 <= addr < _MAP0_START:
            self.tile_data[addr] = data
            index = addr // TILE_BYTES
            start = index * TILE_BYTES
            self.tiles[index] = Tile(bytes(self.tile_data[start:start + TILE_BYTES]))
        elif _MAP0_START <= addr < _MAP1_START:
            self.tile_map0[addr - _MAP0_START] = data
        elif _MAP1_START <= addr < _END:
            self.tile_map1[addr - _MAP1_START] = data
        else:
            raise IndexError(f"invalid VRAM address {addr:#06x}")

    def _tile_map(self, map_mode: TileMapMode | bool) -> bytearray:
        return self.tile_map1 if TileMapMode(map_mode) is TileMapMode.MAP_1 else self.tile_map0

    def get_mapped_tile(
        self,
        tile_y: int,
        tile_x: int,
        map_mode: TileMapMode | bool,
        addressing_mode: TileAddressingMode | bool,
    ) -> Tile | None:
        """Return the tile shown at tile coordinates (``tile_y``, ``tile_x``)."""
        tile_number = self._tile_map(map_mode)[tile_y * TILE_MAP_WIDTH + tile_x]
        if TileAddressingMode(addressing_mode) is TileAddressingMode.MODE_8000:
            effective = tile_number
        else:
            signed = tile_number - 0x100 if tile_number >= 0x80 else tile_number
            effective = signed + 128
        return self.get_tile(effective)

    def get_tile(self, index: int) -> Tile | None:
        """Return the decoded tile at ``index``, or None if never written."""
        if not 0 <= index < TILE_COUNT:
            raise IndexError(f"tile index {index} out of range")
        return self.tiles[index]

    def get_tile_map_value(self, map_mode: TileMapMode | bool, index: int) -> int:
        """Return the raw tile number stored in the selected tile map."""
        return self._tile_map(map_mode)[index]