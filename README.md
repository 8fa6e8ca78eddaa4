# gbcore

`gbcore` models parts of the original (DMG) Game Boy hardware in plain Python. It has no dependencies outside the standard library.

## What is in it

- `gbcore.memory`: `Bus` maps inclusive address ranges to devices. It has `read`, `write`, `read16` and `write16`. `Memory` is a plain byte block. `format_range` and `print_range` give a coloured hex dump. `DMG_BOOT` holds the 256-byte boot ROM image.
- `gbcore.tile`: `Tile` decodes 16 bytes into 64 two-bit colour indices.
- `gbcore.vram`: `VRAM` covers tile data and the two tile maps, and keeps a cache of decoded tiles. It has `get_tile`, `get_mapped_tile` and `get_tile_map_value`. The enums `TileMapMode` and `TileAddressingMode` go with it.
- `gbcore.sprite` and `gbcore.oam`: `Sprite` decodes the four attribute bytes. `OAM` is the 160-byte table with `read_sprite`.
- `gbcore.interrupt`: `Interrupt` and `InterruptFlags` registers.
- `gbcore.joypad`: `JoyPad` with the `Button` enum, `set_button`, `get_button` and `reset_buttons`.
- `gbcore.lcd`: the `LCDControl` and `LCDStatus` registers, and the `PPUState` enum.
- `gbcore.palette`: the `Palette` register, with `match`, `set` and `reset`.
- `gbcore.serial`: `SerialTransfer`. A transfer finishes at once through a connected `SerialDevice`.
- `gbcore.timer`: `Timer` with `TimerControl` and the `Increment` enum, clocked by `m_rising_edge` and `m_falling_edge`.
- `gbcore.registers`: `Registers` is the I/O block at offsets from `0xFF00`. Writing offset `0x46` copies 160 bytes from `page << 8` to `0xFE00` over the bus (OAM DMA).
- `gbcore.display`: `DisplayConfig`, `Rectangle`, `PalettedImage`, `closest_index` and `MONOCHROME_PALETTE`.
- `gbcore.font`: a 4x4 hex-digit font (`Glyph`, `glyph_for`).
- `gbcore.layers`: `BackgroundLayer`, `WindowLayer`, and the blitters `draw_tile` and `draw_sprite`.
- `gbcore.sprite_layer`: `SpriteLayer` and `transform_pixels`.
- `gbcore.debug_views`: `TileViewer` draws all 384 tiles in a 16x24 grid. `TilemapViewer` draws the tile numbers of the first tile map as hex digits. Call `clock()` to render, then `image()` to get the result.

## Installation

```
pip install .
```

Add the test extra to run the tests:

```
pip install ".[test]"
pytest
```

## Example

Wire up a bus, write some tile data and read it back:

```python
from gbcore.memory import Bus, Memory
from gbcore.vram import VRAM, TileMapMode, TileAddressingMode

bus = Bus()
vram = VRAM()
bus.add_device(0x8000, 0x9FFF, vram)
bus.add_device(0xC000, 0xDFFF, Memory(bytearray(0x2000)))

for offset, byte in enumerate([0x3C, 0x7E, 0x42, 0x42]):
    bus.write(0x8000 + offset, byte)

tile = vram.get_mapped_tile(0, 0, TileMapMode.MAP_0, TileAddressingMode.MODE_8000)
print(tile.pixels()[:8])
```

Drive the timer by hand:

```python
from gbcore.interrupt import Interrupt
from gbcore.timer import Timer, Increment

irq = Interrupt()
timer = Timer(irq)
timer.control.enabled = True
timer.control.speed = Increment.M4
timer.counter = 0xFF
timer.modulo = 0x23

for _ in range(5):
    timer.m_rising_edge()
    timer.m_falling_edge()

assert timer.counter == 0x23 and irq.timer
```

## Errors

- `Bus.read` raises `LookupError` for an address that no device covers. `Bus.write` to such an address is ignored.
- Out-of-range offsets on registers, VRAM, OAM and `Memory` raise `IndexError`.
- Invalid palette colour values raise `ValueError`.

## What it does not do

This package has no CPU, no pixel-processing unit timing, and no cartridge or memory-bank controller support. It has no main loop or clock that drives the parts together, no screen or terminal front end, and no command to run. It provides the memory, register and rendering building blocks only. You drive them yourself, as in the examples above.