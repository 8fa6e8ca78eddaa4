import pytest

from gbcore.font import GLYPH_SIZE, Glyph, glyph_for

HEX_DIGITS = "0123456789ABCDEF"


def test_one_matches_font_definition():
    assert glyph_for("1").pixels == (
        (0, 0, 1, 0),
        (0, 1, 1, 0),
        (0, 0, 1, 0),
        (0, 0, 1, 0),
    )


def test_f_matches_font_definition():
    assert glyph_for("F").pixels == (
        (1, 1, 1, 0),
        (1, 1, 0, 0),
        (1, 0, 0, 0),
        (1, 0, 0, 0),
    )


@pytest.mark.parametrize("char", HEX_DIGITS)
def test_every_hex_digit_is_square_and_binary(char):
    glyph = glyph_for(char)
    assert len(glyph.pixels) == GLYPH_SIZE
    assert all(len(row) == GLYPH_SIZE for row in glyph.pixels)
    assert {p for row in glyph.pixels for p in row} <= {0, 1}


def test_hex_digits_are_distinct():
    glyphs = {glyph_for(c) for c in HEX_DIGITS}
    assert len(glyphs) == len(HEX_DIGITS)


@pytest.mark.parametrize("char", ["G", "a", " ", "x"])
def test_unknown_character_raises(char):
    with pytest.raises(KeyError):
        glyph_for(char)


def test_glyph_equality_by_pixels():
    assert glyph_for("7") == Glyph(glyph_for("7").pixels)