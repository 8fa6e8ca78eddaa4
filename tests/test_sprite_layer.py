import pytest

from gbcore.display import Rectangle
from gbcore.memory import Bus
from gbcore.oam import OAM
from gbcore.registers import Registers
from gbcore.sprite_layer import SpriteLayer, transform_pixels
from gbcore.tile import Tile
from gbcore.vram import VRAM

LINES = bytes([0x3C, 0x7E, 0x42, 0x42, 0x42, 0x42, 0x42, 0x42,
               0x7E, 0x5E, 0x7E, 0x0A, 0x7C, 0x56, 0x38, 0x7C])
TILE = Tile(LINES).pixels()
OTHER_BYTES = bytes(range(16))
OTHER = Tile(OTHER_BYTES).pixels()
SCREEN = Rectangle(0, 0, 160, 144)


def _write_tile(vram, index, data):
    for offset, byte in enumerate(data):
        vram.write(index * 16 + offset, byte)


def _system():
    regs = Registers(Bus())
    regs.object_palettes[0].set([0, 1, 2, 3])
    vram = VRAM()
    oam = OAM(vram, lambda: regs.lcd_control.sprites_8x16)
    layer = SpriteLayer(oam, vram, regs, SCREEN)
    return regs, vram, oam, layer


def _place(oam, index, screen_y, screen_x, tile, attrs=0):
    base = index * 4
    oam.write(base, screen_y + 16)
    oam.write(base + 1, screen_x + 8)
    oam.write(base + 2, tile)
    oam.write(base + 3, attrs)


def _region(img, top, left, height):
    return [img.color_index_at(left + x, top + y) for y in range(height) for x in range(8)]


def test_transform_without_flip_is_identity():
    pixels = list(range(16))
    assert transform_pixels(pixels, 4, 4, False, False) == pixels


@pytest.mark.parametrize("flip_x,flip_y", [(True, False), (False, True), (True, True)])
def test_transform_twice_round_trips(flip_x, flip_y):
    pixels = list(range(32))
    once = transform_pixels(pixels, 8, 4, flip_x, flip_y)
    assert once != pixels
    assert transform_pixels(once, 8, 4, flip_x, flip_y) == pixels


def test_transform_flip_x_reverses_rows():
    pixels = list(range(16))
    flipped = transform_pixels(pixels, 4, 4, True, False)
    for row in range(4):
        assert flipped[row * 4:(row + 1) * 4] == pixels[row * 4:(row + 1) * 4][::-1]


def test_transform_flip_y_reverses_row_order():
    pixels = list(range(16))
    flipped = transform_pixels(pixels, 4, 4, False, True)
    for row in range(4):
        assert flipped[row * 4:(row + 1) * 4] == pixels[(3 - row) * 4:(4 - row) * 4]


def test_transform_wrong_length_raises():
    with pytest.raises(ValueError):
        transform_pixels([0] * 10, 8, 8, True, False)


def test_sprite_drawn_at_position():
    regs, vram, oam, layer = _system()
    _write_tile(vram, 1, LINES)
    _place(oam, 0, 10, 20, 1)
    img = layer.image()
    assert _region(img, 10, 20, 8) == TILE
    assert sum(img.pix) == sum(TILE)


def test_sprite_flip_x():
    regs, vram, oam, layer = _system()
    _write_tile(vram, 1, LINES)
    _place(oam, 0, 10, 20, 1, attrs=0x20)
    img = layer.image()
    assert _region(img, 10, 20, 8) == transform_pixels(TILE, 8, 8, True, False)


def test_sprite_flip_y():
    regs, vram, oam, layer = _system()
    _write_tile(vram, 1, LINES)
    _place(oam, 0, 30, 40, 1, attrs=0x40)
    img = layer.image()
    assert _region(img, 30, 40, 8) == transform_pixels(TILE, 8, 8, False, True)


def test_sprite_uses_second_palette():
    regs, vram, oam, layer = _system()
    regs.object_palettes[1].set([0, 3, 3, 3])
    _write_tile(vram, 1, LINES)
    _place(oam, 0, 10, 20, 1, attrs=0x10)
    img = layer.image()
    assert _region(img, 10, 20, 8) == [3 if p else 0 for p in TILE]


def test_sprite_off_screen_is_skipped():
    regs, vram, oam, layer = _system()
    _write_tile(vram, 1, LINES)
    _place(oam, 0, 10, 160, 1)
    _place(oam, 1, 144, 10, 1)
    img = layer.image()
    assert set(img.pix) == {0}


def test_sprite_tall_mode_draws_two_tiles():
    regs, vram, oam, layer = _system()
    regs.lcd_control.sprites_8x16 = True
    _write_tile(vram, 2, LINES)
    _write_tile(vram, 3, OTHER_BYTES)
    _place(oam, 0, 50, 60, 3)
    img = layer.image()
    assert _region(img, 50, 60, 16) == TILE + OTHER


def test_transparent_pixels_keep_earlier_sprite():
    regs, vram, oam, layer = _system()
    _write_tile(vram, 1, LINES)
    _write_tile(vram, 2, bytes([0xFF, 0xFF] * 8))
    _place(oam, 0, 10, 20, 2)
    _place(oam, 1, 10, 20, 1)
    img = layer.image()
    solid = Tile(bytes([0xFF, 0xFF] * 8)).pixels()
    expected = [top if top else below for top, below in zip(TILE, solid)]
    assert _region(img, 10, 20, 8) == expected