"""The I/O register block at 0xFF00-0xFF7F."""

from __future__ import annotations

from gbcore.interrupt import Interrupt
from gbcore.joypad import JoyPad
from gbcore.lcd import LCDControl, LCDStatus
from gbcore.memory import Device
from gbcore.palette import Palette
from gbcore.serial import SerialTransfer
from gbcore.timer import Timer

_AUDIO = frozenset(
    (0x10, 0x11, 0x12, 0x13, 0x14, 0x16, 0x17, 0x18, 0x19, 0x1A, 0x1B,
     0x1C, 0x1D, 0x1E, 0x20, 0x21, 0x22, 0x23, 0x24, 0x25, 0x26)
)
_WAVE = range(0x30, 0x3F)
_SERIAL = range(0x01, 0x03)
_TIMER = range(0x04, 0x08)
_GBC_PALETTE = range(0x68, 0x6C)
_VRAM_DMA = range(0x51, 0x56)

_DMA_LENGTH = 0xA0
_OAM_START = 0xFE00


class Registers:
    """I/O registers addressed by offset from 0xFF00."""

    def __init__(self, bus: Device, interrupt: Interrupt | None = None) -> None:
        self._bus = bus
        self.interrupt_flag = interrupt if interrupt is not None else Interrupt()
        self.joypad = JoyPad(self.interrupt_flag)
        self.serial = SerialTransfer(self.interrupt_flag)
        self.timer = Timer(self.interrupt_flag)
        self.audio = 0
        self.wave_pattern = 0
        self.lcd_control = LCDControl()
        self.lcd_status = LCDStatus()
        self.scroll_y = 0
        self.scroll_x = 0
        self.ly = 0
        self.ly_compare = 0
        self.dma = 0
        self.tile_palette = Palette()
        self.object_palettes = [Palette(), Palette()]
        self.window_y = 0
        self.window_x = 0
        self.vram_bank1 = False
        self.disable_boot_rom = False
        self.vram_dma = bytearray(len(_VRAM_DMA))
        self.gbc_palette_data = bytearray(8)
        self.wram_bank1 = False

    def read(self, addr: int) -> int:
        if addr == 0x00:
            return self.joypad.read(0)
        if addr in _SERIAL:
            return self.serial.read(addr - _SERIAL.start)
        if addr in _TIMER:
            return self.timer.read(addr - _TIMER.start)
        if addr == 0x0F:
            return self.interrupt_flag.read(0)
        if addr in _AUDIO:
            return (self.audio >> (8 * (addr - 0x10))) & 0xFF
        if addr in _WAVE:
            return (self.wave_pattern >> (4 * (addr - _WAVE.start))) & 0xFF
        if addr in _GBC_PALETTE:
            return self.gbc_palette_data[addr - _GBC_PALETTE.start]
        if addr in _VRAM_DMA:
            return self.vram_dma[addr - _VRAM_DMA.start]
        simple = {
            0x40: lambda: self.lcd_control.read(0),
            0x41: lambda: self.lcd_status.read(0),
            0x42: lambda: self.scroll_y,
            0x43: lambda: self.scroll_x,
            0x44: lambda: self.ly,
            0x45: lambda: self.ly_compare,
            0x46: lambda: self.dma,
            0x47: lambda: self.tile_palette.read(0),
            0x48: lambda: self.object_palettes[0].read(0),
            0x49: lambda: self.object_palettes[1].read(0),
            0x4A: lambda: self.window_y,
            0x4B: lambda: self.window_x,
            0x4F: lambda: int(self.vram_bank1),
            0x50: lambda: int(self.disable_boot_rom),
            0x70: lambda: int(self.wram_bank1),
        }
        getter = simple.get(addr)
        return getter() if getter is not None else 0

    def write(self, addr: int, value: int) -> None:
        if addr == 0x00:
            self.joypad.write(0, value)
        elif addr in _SERIAL:
            self.serial.write(addr - _SERIAL.start, value)
        elif addr in _TIMER:
            self.timer.write(addr - _TIMER.start, value)
        elif addr == 0x0F:
            self.interrupt_flag.write(0, value)
        elif addr in _AUDIO:
            self.audio = (self.audio | (value << (8 * (addr - 0x10)))) & 0xFFFF_FFFF
        elif addr in _WAVE:
            self.wave_pattern = (
                self.wave_pattern | (value << (4 * (addr - _WAVE.start)))
            ) & 0xFFFF
        elif addr in _GBC_PALETTE:
            self.gbc_palette_data[addr - _GBC_PALETTE.start] = value
        elif addr in _VRAM_DMA:
            self.vram_dma[addr - _VRAM_DMA.start] = value
        elif addr == 0x40:
            self.lcd_control.write(0, value)
        elif addr == 0x41:
            self.lcd_status.write(0, value)
        elif addr == 0x42:
            self.scroll_y = value
        elif addr == 0x43:
            self.scroll_x = value
        elif addr == 0x44:
            pass  # LY is read-only
        elif addr == 0x45:
            self.ly_compare = value
        elif addr == 0x46:
            self.dma = value
            self._run_dma(value)
        elif addr == 0x47:
            self.tile_palette.write(0, value)
        elif addr == 0x48:
            self.object_palettes[0].write(0, value)
        elif addr == 0x49:
            self.object_palettes[1].write(0, value)
        elif addr == 0x4A:
            self.window_y = value
        elif addr == 0x4B:
            self.window_x = value
        elif addr == 0x4F:
            self.vram_bank1 = value > 0
        elif addr == 0x50:
            self.disable_boot_rom = value > 0
        elif addr == 0x70:
            self.wram_bank1 = value > 0

    def _run_dma(self, page: int) -> None:
        source = page << 8
        for offset in range(_DMA_LENGTH):
            self._bus.write(_OAM_START + offset, self._bus.read(source + offset))