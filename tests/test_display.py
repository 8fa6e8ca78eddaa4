import pytest

from gbcore.display import (
    BLACK,
    MONOCHROME_PALETTE,
    WHITE,
    DisplayConfig,
    PalettedImage,
    Rectangle,
    closest_index,
)


def test_rectangle_dimensions():
    rect = Rectangle(0, 0, 160, 144)
    assert rect.width() == 160
    assert rect.height() == 144


def test_rectangle_normalises_corners():
    rect = Rectangle(30, 40, 10, 5)
    assert (rect.min_x, rect.min_y, rect.max_x, rect.max_y) == (10, 5, 30, 40)
    assert rect.width() == 20
    assert rect.height() == 35


def test_new_image_is_all_first_index():
    img = PalettedImage(Rectangle(0, 0, 12, 7), MONOCHROME_PALETTE)
    assert len(img.pix) == 12 * 7
    assert set(img.pix) == {0}


def test_pix_offset_steps():
    img = PalettedImage(Rectangle(0, 0, 12, 7), MONOCHROME_PALETTE)
    assert img.pix_offset(0, 0) == 0
    assert img.pix_offset(4, 3) + 1 == img.pix_offset(5, 3)
    assert img.pix_offset(4, 4) - img.pix_offset(4, 3) == img.rect.width()


def test_pix_offset_with_shifted_origin():
    img = PalettedImage(Rectangle(10, 20, 30, 40), MONOCHROME_PALETTE)
    assert img.pix_offset(10, 20) == 0
    assert img.pix_offset(29, 39) == len(img.pix) - 1


@pytest.mark.parametrize("index", range(4))
def test_set_and_read_back_palette_colours(index):
    img = PalettedImage(Rectangle(0, 0, 8, 8), MONOCHROME_PALETTE)
    img.set(3, 5, MONOCHROME_PALETTE[index])
    assert img.color_index_at(3, 5) == index
    assert img.at(3, 5) == MONOCHROME_PALETTE[index]


def test_black_and_white_map_to_ends_of_palette():
    assert closest_index(MONOCHROME_PALETTE, WHITE) == 0
    assert closest_index(MONOCHROME_PALETTE, BLACK) == len(MONOCHROME_PALETTE) - 1


def test_closest_index_picks_nearest_entry():
    assert closest_index(MONOCHROME_PALETTE, (168, 171, 169, 255)) == 1
    assert closest_index(MONOCHROME_PALETTE, (90, 80, 85)) == 2


def test_closest_index_empty_palette_raises():
    with pytest.raises(ValueError):
        closest_index([], WHITE)


def test_set_outside_is_ignored():
    img = PalettedImage(Rectangle(0, 0, 4, 4), MONOCHROME_PALETTE)
    img.set(4, 0, BLACK)
    img.set(-1, 2, BLACK)
    assert set(img.pix) == {0}


def test_at_outside_returns_first_colour():
    img = PalettedImage(Rectangle(0, 0, 4, 4), MONOCHROME_PALETTE)
    img.pix[:] = bytes([3]) * len(img.pix)
    assert img.at(100, 100) == MONOCHROME_PALETTE[0]
    assert img.color_index_at(-5, 0) == 0


def test_display_config_fields():
    config = DisplayConfig(title="Tile Viewer")
    assert config.title == "Tile Viewer"
    assert (config.width, config.height) == (0, 0)