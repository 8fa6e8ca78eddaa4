"""Interrupt enable and interrupt flag registers."""

from __future__ import annotations

from dataclasses import dataclass

_VBLANK = 1 << 0
_LCD = 1 << 1
_TIMER = 1 << 2
_SERIAL = 1 << 3
_JOYPAD = 1 << 4


def _pack(vblank: bool, lcd: bool, timer: bool, serial: bool, joypad: bool) -> int:
    value = 0
    if vblank:
        value |= _VBLANK
    if lcd:
        value |= _LCD
    if timer:
        value |= _TIMER
    if serial:
        value |= _SERIAL
    if joypad:
        value |= _JOYPAD
    return value


@dataclass
class Interrupt:
    """A one-byte interrupt register (IE or IF) split into its five sources."""

    joypad: bool = False
    serial: bool = False
    timer: bool = False
    lcd: bool = False
    vblank: bool = False

    @staticmethod
    def _check(addr: int) -> None:
        if addr != 0:
            raise IndexError(f"invalid interrupt register address {addr:#06x}")

    def read(self, addr: int) -> int:
        self._check(addr)
        return _pack(self.vblank, self.lcd, self.timer, self.serial, self.joypad)

    def write(self, addr: int, data: int) -> None:
        self._check(addr)
        self.joypad = bool(data & _JOYPAD)
        self.serial = bool(data & _SERIAL)
        self.timer = bool(data & _TIMER)
        self.lcd = bool(data & _LCD)
        self.vblank = bool(data & _VBLANK)


@dataclass
class InterruptFlags:
    """Interrupt flag bits that accept any address offset."""

    vblank: bool = False
    lcd: bool = False
    timer: bool = False
    serial: bool = False
    joypad: bool = False

    def read(self, addr: int) -> int:
        return _pack(self.vblank, self.lcd, self.timer, self.serial, self.joypad)

    def write(self, addr: int, value: int) -> None:
        self.vblank = bool(value & _VBLANK)
        self.lcd = bool(value & _LCD)
        self.timer = bool(value & _TIMER)
        self.serial = bool(value & _SERIAL)
        self.joypad = bool(value & _JOYPAD)