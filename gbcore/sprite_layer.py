"""The object (sprite) layer."""

from __future__ import annotations

from collections.abc import Sequence

from gbcore.display import MONOCHROME_PALETTE, PalettedImage, Rectangle
from gbcore.layers import draw_sprite
from gbcore.oam import OAM, SPRITE_COUNT
from gbcore.registers import Registers
from gbcore.tile import TILE_SIZE
from gbcore.vram import VRAM

_TRANSPARENT = 0


def transform_pixels(
    pixels: Sequence[int], width: int, height: int, flip_x: bool, flip_y: bool
) -> list[int]:
    """Return a row-major block mirrored horizontally and/or vertically."""
    if len(pixels) != width * height:
        raise ValueError(f"expected {width * height} pixels, got {len(pixels)}")
    rows = [list(pixels[r * width:(r + 1) * width]) for r in range(height)]
    if flip_y:
        rows.reverse()
    if flip_x:
        rows = [row[::-1] for row in rows]
    return [p for row in rows for p in row]


class SpriteLayer:
    """Renders all forty OAM sprites with transparency for colour 0."""

    def __init__(self, oam: OAM, vram: VRAM, registers: Registers, bounds: Rectangle) -> None:
        self._oam = oam
        self._vram = vram
        self._registers = registers
        self._bounds = bounds

    def image(self) -> PalettedImage:
        img = PalettedImage(self._bounds, MONOCHROME_PALETTE)
        regs = self._registers
        use_8x16 = regs.lcd_control.sprites_8x16
        height = TILE_SIZE * 2 if use_8x16 else TILE_SIZE

        for index in range(SPRITE_COUNT):
            sprite = self._oam.read_sprite(index)
            pos_x = sprite.x()
            pos_y = sprite.y()
            if pos_x >= self._bounds.width() or pos_y >= self._bounds.height():
                continue

            pixels = sprite.pixels()
            if sprite.flip_x or sprite.flip_y:
                pixels = transform_pixels(
                    pixels, TILE_SIZE, height, sprite.flip_x, sprite.flip_y
                )

            palette = regs.object_palettes[sprite.dmg_palette]
            pixels = [palette.match(p) for p in pixels]
            draw_sprite(img, pixels, pos_y, pos_x, use_8x16, _TRANSPARENT)
        return img