"""Object attribute memory: forty sprites of four bytes each."""

from __future__ import annotations

from typing import Callable

from gbcore.sprite import SPRITE_BYTES, Sprite
from gbcore.vram import VRAM

SPRITE_COUNT = 40
OAM_SIZE = SPRITE_COUNT * SPRITE_BYTES


class OAM:
    """The 160-byte OAM area with a decoded sprite per entry."""

    def __init__(self, vram: VRAM, enable_8x16: Callable[[], bool]) -> None:
        self._vram = vram
        self._enable_8x16 = enable_8x16
        self._buffer = bytearray(OAM_SIZE)
        self.sprites = [
            Sprite(vram, bytes(SPRITE_BYTES), enable_8x16) for _ in range(SPRITE_COUNT)
        ]

    @staticmethod
    def _check(addr: int) -> None:
        if not 0 <= addr < OAM_SIZE:
            raise IndexError(f"invalid OAM address {addr:#06x}")

    def read(self, addr: int) -> int:
        self._check(addr)
        return self._buffer[addr]

    def write(self, addr: int, data: int) -> None:
        self._check(addr)
        self._buffer[addr] = data
        index = addr // SPRITE_BYTES
        self.sprites[index] = self.read_sprite(index)

    def read_sprite(self, index: int) -> Sprite:
        """Decode a fresh sprite from the bytes of entry ``index``."""
        if not 0 <= index < SPRITE_COUNT:
            raise IndexError(f"sprite index {index} out of range")
        start = index * SPRITE_BYTES
        data = bytes(self._buffer[start:start + SPRITE_BYTES])
        return Sprite(self._vram, data, self._enable_8x16)