import pytest

from solong.colornames import lookup_color
from solong.colors import PixelFormat, text_to_rgb


def _mask(shift, bits):
    return ((1 << bits) - 1) << shift


@pytest.mark.parametrize(
    "depth,masks",
    [
        (24, (0xFF0000, 0x00FF00, 0x0000FF)),
        (16, (0xF800, 0x07E0, 0x001F)),
        (15, (0x7C00, 0x03E0, 0x001F)),
    ],
)
def test_from_masks_reconstructs_masks(depth, masks):
    fmt = PixelFormat.from_masks(depth, *masks)
    assert fmt.depth == depth
    assert _mask(fmt.red_shift, fmt.red_bits) == masks[0]
    assert _mask(fmt.green_shift, fmt.green_bits) == masks[1]
    assert _mask(fmt.blue_shift, fmt.blue_bits) == masks[2]


def test_zero_mask_is_rejected():
    with pytest.raises(ValueError):
        PixelFormat.from_masks(16, 0, 0x07E0, 0x001F)


def test_deep_visual_keeps_color():
    fmt = PixelFormat.from_masks(24, 0xFF0000, 0xFF00, 0xFF)
    assert fmt.good_color(0xFF99FF) == 0xFF99FF
    assert fmt.good_color(0x00FFFF) == 0x00FFFF


def test_shallow_visual_channels_fill_their_masks():
    fmt = PixelFormat.from_masks(16, 0xF800, 0x07E0, 0x001F)
    assert fmt.good_color(0xFF0000) == 0xF800
    assert fmt.good_color(0x00FF00) == 0x07E0
    assert fmt.good_color(0x0000FF) == 0x001F
    assert fmt.good_color(0xFFFFFF) == 0xF800 | 0x07E0 | 0x001F
    assert fmt.good_color(0) == 0


def test_shallow_visual_stays_within_masks():
    fmt = PixelFormat.from_masks(15, 0x7C00, 0x03E0, 0x001F)
    full = 0x7C00 | 0x03E0 | 0x001F
    for color in (0x123456, 0xABCDEF, 0x808080, 0x010101):
        assert fmt.good_color(color) & ~full == 0


def test_hex_spec():
    assert text_to_rgb("#FF0000", None) == 0xFF0000
    assert text_to_rgb("#00ff00", "ignored") == 0x00FF00


def test_hex_spec_without_digits_is_zero():
    assert text_to_rgb("#zz", None) == 0


def test_named_colors_match_table():
    assert text_to_rgb("red", None) == lookup_color("red")
    assert text_to_rgb("RoyalBlue", None) == lookup_color("royalblue")


def test_two_word_name():
    assert text_to_rgb("light", "grey") == lookup_color("light grey")


def test_none_is_transparent():
    assert text_to_rgb("None", None) == -1


def test_unknown_name_is_zero():
    assert text_to_rgb("notacolour", None) == 0