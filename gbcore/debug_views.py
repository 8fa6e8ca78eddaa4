"""Debug viewers that draw VRAM tile maps and tile data as grid images."""

from __future__ import annotations

from collections.abc import Sequence

from gbcore.display import BLACK, WHITE, DisplayConfig, PalettedImage, Rectangle, closest_index
from gbcore.font import GLYPH_SIZE, Glyph, glyph_for
from gbcore.tile import TILE_SIZE
from gbcore.vram import VRAM, TileMapMode

CELL_SIZE = TILE_SIZE + 1

TILEMAP_COLS = 32
TILEMAP_ROWS = 32
TILEMAP_WIDTH = TILEMAP_COLS * CELL_SIZE + 1
TILEMAP_HEIGHT = TILEMAP_ROWS * CELL_SIZE + 1

TILES_COLS = 16
TILES_ROWS = 24
TILES_WIDTH = TILES_COLS * CELL_SIZE + 1
TILES_HEIGHT = TILES_ROWS * CELL_SIZE + 1

# A 4-pixel glyph sits vertically centred in an 8-pixel cell.
_GLYPH_Y_OFFSET = (TILE_SIZE - GLYPH_SIZE) // 2


def _draw_grid(img: PalettedImage, cols: int, rows: int, width: int, height: int) -> None:
    """Draw black lines on every cell boundary, including the far edges."""
    black = closest_index(img.palette, BLACK)
    for row in range(rows + 1):
        y = row * CELL_SIZE
        for x in range(width):
            img.pix[img.pix_offset(x, y)] = black
    for col in range(cols + 1):
        x = col * CELL_SIZE
        for y in range(height):
            img.pix[img.pix_offset(x, y)] = black


def _draw_glyph(img: PalettedImage, glyph: Glyph, x0: int, y0: int, ink: int, paper: int) -> None:
    for dy, row in enumerate(glyph.pixels):
        for dx, bit in enumerate(row):
            img.pix[img.pix_offset(x0 + dx, y0 + dy)] = ink if bit == 1 else paper


class TilemapViewer:
    """Shows the first tile map as a grid of two-digit hex tile numbers."""

    def __init__(self, vram: VRAM, palette: Sequence[Sequence[int]]) -> None:
        self._vram = vram
        self._palette = palette
        self._img: PalettedImage | None = None
        self._config = DisplayConfig(title="Tilemap Viewer")

    def clock(self) -> None:
        """Redraw the image from the current tile map contents."""
        img = PalettedImage(Rectangle(0, 0, TILEMAP_WIDTH, TILEMAP_HEIGHT), self._palette)
        ink = closest_index(img.palette, BLACK)
        paper = closest_index(img.palette, WHITE)

        for tile_y in range(TILEMAP_ROWS):
            for tile_x in range(TILEMAP_COLS):
                number = self._vram.get_tile_map_value(
                    TileMapMode.MAP_0, tile_y * TILEMAP_COLS + tile_x
                )
                hi_digit, lo_digit = f"{number:02X}"
                offset_x = tile_x * CELL_SIZE + 1
                offset_y = tile_y * CELL_SIZE + 1 + _GLYPH_Y_OFFSET
                _draw_glyph(img, glyph_for(hi_digit), offset_x, offset_y, ink, paper)
                _draw_glyph(
                    img, glyph_for(lo_digit), offset_x + GLYPH_SIZE, offset_y, ink, paper
                )

        _draw_grid(img, TILEMAP_COLS, TILEMAP_ROWS, TILEMAP_WIDTH, TILEMAP_HEIGHT)
        self._img = img

    def image(self) -> PalettedImage | None:
        """The last rendered image, or None before the first clock."""
        return self._img

    def config(self) -> DisplayConfig:
        return self._config


class TileViewer:
    """Shows all 384 decoded tiles of the tile data area in a 16x24 grid."""

    def __init__(self, vram: VRAM, palette: Sequence[Sequence[int]]) -> None:
        self._vram = vram
        self._palette = palette
        self._img: PalettedImage | None = None
        self._config = DisplayConfig(title="Tile Viewer")

    def clock(self) -> None:
        """Redraw the image from the current tile data."""
        img = PalettedImage(Rectangle(0, 0, TILES_WIDTH, TILES_HEIGHT), self._palette)
        # Colour index -> image palette index for the colour it names.
        lookup = [closest_index(img.palette, entry) for entry in img.palette]

        for tile_y in range(TILES_ROWS):
            for tile_x in range(TILES_COLS):
                tile = self._vram.get_tile(tile_y * TILES_COLS + tile_x)
                if tile is None:
                    continue
                offset_x = tile_x * CELL_SIZE + 1
                offset_y = tile_y * CELL_SIZE + 1
                for i, color_index in enumerate(tile.pixels()):
                    y, x = divmod(i, TILE_SIZE)
                    img.pix[img.pix_offset(offset_x + x, offset_y + y)] = lookup[color_index]

        _draw_grid(img, TILES_COLS, TILES_ROWS, TILES_WIDTH, TILES_HEIGHT)
        self._img = img

    def image(self) -> PalettedImage | None:
        """The last rendered image, or None before the first clock."""
        return self._img

    def config(self) -> DisplayConfig:
        return self._config