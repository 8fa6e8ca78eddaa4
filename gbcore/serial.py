"""Serial transfer registers (SB and SC)."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

from gbcore.interrupt import Interrupt

_ENABLE_BIT = 0x80
_MASTER_BIT = 0x01


class TransferRate(IntEnum):
    NORMAL = 0  # 8192 Hz


class SerialDevice(Protocol):
    """Something at the other end of the link cable."""

    def transfer(self, data: int) -> int: ...


class SerialTransfer:
    """SB at offset 0 and SC at offset 1; transfers complete instantly."""

    def __init__(self, interrupt: Interrupt | None = None) -> None:
        self.data = 0
        self.enable_transfer = False
        self.transfer_rate = int(TransferRate.NORMAL)
        self.master = False
        self._connected: SerialDevice | None = None
        self._interrupt = interrupt

    def read(self, addr: int) -> int:
        if addr == 0:
            return self.data
        if addr == 1:
            value = 0
            if self.enable_transfer:
                value |= _ENABLE_BIT
            if self.master:
                value |= _MASTER_BIT
            return value
        raise IndexError(f"invalid serial transfer register {addr:#06x}")

    def write(self, addr: int, val: int) -> None:
        if addr == 0:
            self.data = val
        elif addr == 1:
            self.enable_transfer = bool(val & _ENABLE_BIT)
            self.transfer_rate = val & 0x1
            self.master = bool(val & _MASTER_BIT)
            if self.enable_transfer:
                self._transfer()
        else:
            raise IndexError(f"invalid serial transfer register {addr:#06x}")

    def connect(self, device: SerialDevice | None) -> None:
        self._connected = device

    def _transfer(self) -> None:
        if self._connected is None:
            self.data = 0x00
        else:
            self.data = self._connected.transfer(self.data)
        self.enable_transfer = False
        if self._interrupt is not None:
            self._interrupt.serial = True