"""Monochrome palette registers (BGP, OBP0, OBP1)."""

from __future__ import annotations

from collections.abc import Iterable

_MAX_SHADE = 3
_ENTRIES = 4


class Palette:
    """Four two-bit shades, looked up by colour index."""

    def __init__(self) -> None:
        self.colors = [0] * _ENTRIES

    @staticmethod
    def _check(addr: int) -> None:
        if addr != 0:
            raise IndexError(f"invalid palette address {addr:#06x}")

    def write(self, addr: int, data: int) -> None:
        self._check(addr)
        self.colors = [(data >> (2 * i)) & 0x3 for i in range(_ENTRIES)]

    def read(self, addr: int) -> int:
        self._check(addr)
        return sum(shade << (2 * i) for i, shade in enumerate(self.colors))

    def reset(self) -> None:
        self.colors = [0] * _ENTRIES

    def set(self, values: Iterable[int]) -> None:
        """Set all four shades; each must be between 0 and 3."""
        shades = list(values)
        if len(shades) != _ENTRIES:
            raise ValueError(f"a palette needs {_ENTRIES} shades, got {len(shades)}")
        if any(not 0 <= shade <= _MAX_SHADE for shade in shades):
            raise ValueError("invalid color value")
        self.colors = shades

    def match(self, val: int) -> int:
        """Return the shade assigned to colour index ``val``."""
        if not 0 <= val <= _MAX_SHADE:
            raise ValueError("invalid color value")
        return self.colors[val]