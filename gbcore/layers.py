"""Background and window layers and the pixel blitters they share."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from gbcore.display import MONOCHROME_PALETTE, PalettedImage, Rectangle
from gbcore.registers import Registers
from gbcore.tile import TILE_SIZE
from gbcore.vram import VRAM, TileAddressingMode, TileMapMode

_MAP_TILES = 32
_WINDOW_X_OFFSET = 7


class Layer(Protocol):
    """Something that renders itself into a paletted image."""

    def image(self) -> PalettedImage: ...


def _blit(
    dst: PalettedImage,
    pixels: Sequence[int],
    start_y: int,
    start_x: int,
    height: int,
    transparent: int | None,
) -> None:
    bounds = dst.rect
    width = TILE_SIZE
    if len(pixels) < width * height:
        raise ValueError(f"expected {width * height} pixels, got {len(pixels)}")
    for row in range(height):
        dest_y = start_y + row
        if not bounds.min_y <= dest_y < bounds.max_y:
            continue
        for col, pix in enumerate(pixels[row * width:(row + 1) * width]):
            dest_x = start_x + col
            if not bounds.min_x <= dest_x < bounds.max_x:
                continue
            if transparent is not None and pix == transparent:
                continue
            dst.pix[dst.pix_offset(dest_x, dest_y)] = pix


def draw_tile(dst: PalettedImage, pixels: Sequence[int], start_y: int, start_x: int) -> None:
    """Copy an opaque 8x8 block into ``dst``, clipping at its edges."""
    _blit(dst, pixels, start_y, start_x, TILE_SIZE, None)


def draw_sprite(
    dst: PalettedImage,
    pixels: Sequence[int],
    start_y: int,
    start_x: int,
    double_height: bool,
    transparent: int,
) -> None:
    """Copy an 8x8 or 8x16 block, skipping pixels equal to ``transparent``."""
    height = TILE_SIZE * 2 if double_height else TILE_SIZE
    _blit(dst, pixels, start_y, start_x, height, transparent)


def _addressing_mode(registers: Registers) -> TileAddressingMode:
    if registers.lcd_control.use_8000_method:
        return TileAddressingMode.MODE_8000
    return TileAddressingMode.MODE_8800


class BackgroundLayer:
    """Renders the scrolled background tile map."""

    def __init__(self, vram: VRAM, registers: Registers, bounds: Rectangle) -> None:
        self._vram = vram
        self._registers = registers
        self._bounds = bounds

    def image(self) -> PalettedImage:
        img = PalettedImage(self._bounds, MONOCHROME_PALETTE)
        regs = self._registers
        addressing = _addressing_mode(regs)
        map_mode = TileMapMode(regs.lcd_control.background_use_second_tile_map)

        cols = self._bounds.width() // TILE_SIZE + 1
        rows = self._bounds.height() // TILE_SIZE + 1
        scroll_x = regs.scroll_x
        scroll_y = regs.scroll_y
        start_tile_x = scroll_x // TILE_SIZE
        start_tile_y = scroll_y // TILE_SIZE

        for row in range(rows):
            for col in range(cols):
                tile_x = (start_tile_x + col) % _MAP_TILES
                tile_y = (start_tile_y + row) % _MAP_TILES
                tile = self._vram.get_mapped_tile(tile_y, tile_x, map_mode, addressing)
                if tile is None:
                    continue
                dest_x = col * TILE_SIZE - scroll_x % TILE_SIZE
                dest_y = row * TILE_SIZE - scroll_y % TILE_SIZE
                pixels = [regs.tile_palette.match(p) for p in tile.pixels()]
                draw_tile(img, pixels, dest_y, dest_x)
        return img


class WindowLayer:
    """Renders the window tile map at the window position."""

    def __init__(self, vram: VRAM, registers: Registers, bounds: Rectangle) -> None:
        self._vram = vram
        self._registers = registers
        self._bounds = bounds

    def image(self) -> PalettedImage:
        img = PalettedImage(self._bounds, MONOCHROME_PALETTE)
        regs = self._registers
        addressing = _addressing_mode(regs)
        map_mode = TileMapMode(regs.lcd_control.window_use_second_tile_map)

        win_y = regs.window_y
        win_x = regs.window_x - _WINDOW_X_OFFSET
        cols = self._bounds.width() // TILE_SIZE + 1
        rows = self._bounds.height() // TILE_SIZE + 1

        for row in range(rows):
            for col in range(cols):
                tile = self._vram.get_mapped_tile(row & 0xFF, col & 0xFF, map_mode, addressing)
                if tile is None:
                    continue
                dest_x = col * TILE_SIZE + win_x
                dest_y = row * TILE_SIZE + win_y
                if dest_x >= self._bounds.max_x or dest_y >= self._bounds.max_y:
                    continue
                pixels = [regs.tile_palette.match(p) for p in tile.pixels()]
                draw_tile(img, pixels, dest_y, dest_x)
        return img