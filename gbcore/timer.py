"""Divider and timer registers (DIV, TIMA, TMA, TAC)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from gbcore.interrupt import Interrupt


class Increment(IntEnum):
    """TIMA increment period, in M-cycles."""

    M256 = 0
    M4 = 1
    M16 = 2
    M64 = 3


_PERIODS = {
    Increment.M256: 256,
    Increment.M4: 4,
    Increment.M16: 16,
    Increment.M64: 64,
}


def _check(addr: int) -> None:
    if addr != 0:
        raise IndexError(f"invalid timer control address {addr:#06x}")


@dataclass
class TimerControl:
    """The TAC register: enable bit and increment speed."""

    speed: Increment = Increment.M256
    enabled: bool = False

    def read(self, addr: int) -> int:
        _check(addr)
        value = int(self.speed)
        if self.enabled:
            value |= 1 << 2
        return value

    def write(self, addr: int, value: int) -> None:
        _check(addr)
        self.enabled = bool(value & (1 << 2))
        self.speed = Increment(value & 0x3)


@dataclass
class Timer:
    """DIV at offset 0, TIMA at 1, TMA at 2 and TAC at 3, clocked per M-cycle edge."""

    interrupt: Interrupt | None = None
    divider: int = 0
    counter: int = 0
    modulo: int = 0
    control: TimerControl = field(default_factory=TimerControl)
    _pending_overflow: bool = field(default=False, repr=False)
    _enable_write_cancel: bool = field(default=False, repr=False)

    def read(self, addr: int) -> int:
        if addr == 0:
            return (self.divider >> 8) & 0xFF
        if addr == 1:
            return self.counter
        if addr == 2:
            return self.modulo
        if addr == 3:
            return self.control.read(0)
        raise IndexError(f"invalid timer address {addr:#06x}")

    def write(self, addr: int, value: int) -> None:
        if addr == 0:
            self.divider = 0
        elif addr == 1:
            self.counter = value
        elif addr == 2:
            self.modulo = value
        elif addr == 3:
            self.control.write(0, value)
        else:
            raise IndexError(f"invalid timer address {addr:#06x}")

    def m_rising_edge(self) -> None:
        """Close the cancellation window and reload TIMA if an overflow is pending."""
        self._enable_write_cancel = False
        if self._pending_overflow:
            self.counter = self.modulo
            if self.interrupt is not None:
                self.interrupt.timer = True
            self._pending_overflow = False

    def m_falling_edge(self) -> None:
        """Advance DIV and, when enabled, TIMA; an overflow leaves TIMA at zero."""
        old_div = self.divider
        self.divider = (self.divider + 1) & 0xFFFF

        if not self.control.enabled:
            return

        period = _PERIODS[Increment(self.control.speed)]
        increase = ((self.divider // period) - (old_div // period)) & 0xFFFF
        if increase == 0:
            return
        new_value = self.counter + increase
        if new_value > 0xFF:
            self.counter = 0
            self._pending_overflow = True
            self._enable_write_cancel = True
        else:
            self.counter = new_value