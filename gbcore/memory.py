"""Address bus, plain RAM devices and the DMG boot ROM image."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

_GREY = "\033[90m"
_RESET = "\033[0m"


class Device(Protocol):
    """Anything that can be mapped onto the bus."""

    def read(self, addr: int) -> int: ...

    def write(self, addr: int, data: int) -> None: ...


@dataclass(frozen=True)
class _Mapping:
    start: int
    end: int
    device: Device

    def covers(self, addr: int) -> bool:
        return self.start <= addr <= self.end


class Bus:
    """Routes 16-bit addresses to the devices mapped onto them."""

    def __init__(self) -> None:
        self._mappings: list[_Mapping] = []

    def add_device(self, start: int, end: int, device: Device) -> None:
        """Map ``device`` onto the inclusive range ``start``..``end``."""
        self._mappings.append(_Mapping(start, end, device))

    def _find(self, addr: int) -> _Mapping | None:
        return next((m for m in self._mappings if m.covers(addr)), None)

    def read(self, addr: int) -> int:
        """Read a byte; raises LookupError when no device covers ``addr``."""
        mapping = self._find(addr)
        if mapping is None:
            raise LookupError(f"no device found for address {addr:#06x}")
        return mapping.device.read(addr - mapping.start)

    def read16(self, addr: int) -> tuple[int, int]:
        """Read a little-endian word, returned as ``(high, low)``."""
        low = self.read(addr)
        high = self.read((addr + 1) & 0xFFFF)
        return high, low

    def write(self, addr: int, data: int) -> None:
        """Write a byte; writes to unmapped addresses are ignored."""
        mapping = self._find(addr)
        if mapping is not None:
            mapping.device.write(addr - mapping.start, data)

    def write16(self, addr: int, data: int) -> None:
        """Write a word in little-endian order."""
        self.write(addr, data & 0xFF)
        self.write((addr + 1) & 0xFFFF, (data >> 8) & 0xFF)


@dataclass
class Memory:
    """A plain block of readable and writable bytes."""

    buffer: bytearray

    def __post_init__(self) -> None:
        if not isinstance(self.buffer, bytearray):
            self.buffer = bytearray(self.buffer)

    def _check(self, addr: int) -> None:
        if not 0 <= addr < len(self.buffer):
            raise IndexError(f"address {addr:#06x} out of range")

    def read(self, addr: int) -> int:
        self._check(addr)
        return self.buffer[addr]

    def write(self, addr: int, data: int) -> None:
        self._check(addr)
        self.buffer[addr] = data


def _dump_lines(device: Device, start: int, end: int):
    yield "\nREL    FIXED   " + "".join(f"{i:02X} " for i in range(16)) + "\n"
    for addr in range(start, end + 1):
        try:
            data = device.read(addr)
        except (LookupError, ValueError):
            data = 0x00

        offset = addr - start
        if offset % 16 == 0:
            yield f"{_GREY}0d{offset:04d}{_RESET} 0x{addr:04X}: "

        yield f"{_GREY}{data:02X} {_RESET}" if data == 0 else f"{data:02X} "

        if (offset + 1) % 16 == 0:
            yield "\n"
    yield "\n"


def format_range(device: Device, start: int, end: int) -> str:
    """Render a hex dump of ``device`` between ``start`` and ``end`` inclusive."""
    if start > end:
        raise ValueError("start address must be less than or equal to end address")
    return "".join(_dump_lines(device, start, end))


def print_range(device: Device, start: int, end: int) -> None:
    """Print a hex dump of ``device`` between ``start`` and ``end`` inclusive."""
    print(format_range(device, start, end), end="")


DMG_BOOT = bytes.fromhex(
    "31feffaf21ff9f32cb7c20fb2126ff0e"
    "113e8032e20c3ef3e2323e77773efce0"
    "471104012110801acd9500cd9600137b"
    "fe3420f311d80006081a1322230520f9"
    "3e19ea1099212f990e0c3d2808320d20"
    "f92e0f18f3673e6457e0423e91e04004"
    "1e020e0cf044fe9020fa0d20f71d20f2"
    "0e13247c1e83fe6228061ec1fe642006"
    "7be20c3e87e2f04290e0421520d20520"
    "4f162018cb4f0604c5cb1117c1cb1117"
    "0520f522232223c9ceed6666cc0d000b"
    "03730083000c000d0008111f8889000e"
    "dccc6ee6ddddd999bbbb67636e0eeccc"
    "dddc999fbbb9333e3c42b9a5b9a5423c"
    "21040111a8001a13be20fe237dfe3420"
    "f506197886230520fb8620fe3e01e050"
)