"""A 4x4 pixel font covering the hexadecimal digits."""

from __future__ import annotations

from dataclasses import dataclass

GLYPH_SIZE = 4


@dataclass(frozen=True)
class Glyph:
    """Four rows of four pixels; 1 means ink."""

    pixels: tuple[tuple[int, ...], ...]


def _glyph(*rows: str) -> Glyph:
    return Glyph(tuple(tuple(int(c) for c in row) for row in rows))


CHAR_MAP: dict[str, Glyph] = {
    "1": _glyph("0010", "0110", "0010", "0010"),
    "2": _glyph("1110", "0010", "0100", "1111"),
    "3": _glyph("1110", "0110", "0010", "1110"),
    "4": _glyph("1010", "1010", "1110", "0010"),
    "5": _glyph("1110", "1000", "0110", "1100"),
    "6": _glyph("1110", "1000", "1110", "1110"),
    "7": _glyph("1110", "0010", "0010", "0010"),
    "8": _glyph("1110", "1010", "1110", "1110"),
    "9": _glyph("1110", "1010", "1110", "0010"),
    "0": _glyph("1110", "1010", "1010", "1110"),
    "A": _glyph("0100", "1010", "1110", "1010"),
    "B": _glyph("1000", "1100", "1010", "1100"),
    "C": _glyph("0110", "1000", "1000", "0110"),
    "D": _glyph("0010", "1110", "1010", "1110"),
    "E": _glyph("1110", "1100", "1000", "1110"),
    "F": _glyph("1110", "1100", "1000", "1000"),
}


def glyph_for(char: str) -> Glyph:
    """Return the glyph for ``char``; raises KeyError if the font lacks it."""
    try:
        return CHAR_MAP[char]
    except KeyError:
        raise KeyError(f"no glyph for {char!r}") from None