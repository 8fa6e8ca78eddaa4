"""LCD control (LCDC) and LCD status (STAT) registers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class PPUState(IntEnum):
    HBLANK = 0
    VBLANK = 1
    OAM_SCAN = 2
    DRAWING = 3


def _check(addr: int) -> None:
    if addr != 0:
        raise IndexError(f"invalid LCD register address {addr:#06x}")


@dataclass
class LCDControl:
    """The LCDC register, one field per bit from bit 7 down to bit 0."""

    enable_lcd: bool = False
    window_use_second_tile_map: bool = False
    enable_window: bool = False
    use_8000_method: bool = False
    background_use_second_tile_map: bool = False
    sprites_8x16: bool = False
    enable_sprites: bool = False
    enable_background_and_window: bool = False

    def _bits(self) -> tuple[bool, ...]:
        return (
            self.enable_background_and_window,
            self.enable_sprites,
            self.sprites_8x16,
            self.background_use_second_tile_map,
            self.use_8000_method,
            self.enable_window,
            self.window_use_second_tile_map,
            self.enable_lcd,
        )

    def read(self, addr: int) -> int:
        _check(addr)
        return sum(1 << bit for bit, on in enumerate(self._bits()) if on)

    def write(self, addr: int, value: int) -> None:
        _check(addr)
        self.enable_lcd = bool(value & (1 << 7))
        self.window_use_second_tile_map = bool(value & (1 << 6))
        self.enable_window = bool(value & (1 << 5))
        self.use_8000_method = bool(value & (1 << 4))
        self.background_use_second_tile_map = bool(value & (1 << 3))
        self.sprites_8x16 = bool(value & (1 << 2))
        self.enable_sprites = bool(value & (1 << 1))
        self.enable_background_and_window = bool(value & (1 << 0))


@dataclass
class LCDStatus:
    """The STAT register: interrupt selects, LYC match and PPU mode."""

    lyc_interrupt: bool = False
    mode2_interrupt: bool = False
    mode1_interrupt: bool = False
    mode0_interrupt: bool = False
    lyc_match: bool = False
    ppu_mode: PPUState = PPUState.HBLANK

    def read(self, addr: int) -> int:
        _check(addr)
        value = 0
        if self.lyc_interrupt:
            value |= 1 << 6
        if self.mode2_interrupt:
            value |= 1 << 5
        if self.mode1_interrupt:
            value |= 1 << 4
        if self.mode0_interrupt:
            value |= 1 << 3
        if self.lyc_match:
            value |= 1 << 2
        return value | int(self.ppu_mode)

    def write(self, addr: int, value: int) -> None:
        _check(addr)
        self.lyc_interrupt = bool(value & (1 << 6))
        self.mode2_interrupt = bool(value & (1 << 5))
        self.mode1_interrupt = bool(value & (1 << 4))
        self.mode0_interrupt = bool(value & (1 << 3))
        self.lyc_match = bool(value & (1 << 2))
        self.ppu_mode = PPUState(value & 0x3)