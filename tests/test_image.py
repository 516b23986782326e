import pytest

from solong.image import Image

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("w,h", [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_new_image_addressing(w, h):
    img = Image(w, h)
    data, bpp, size_line, endian = img.data_address()
    assert bpp == 32
    assert size_line >= w * bpp // 8
    assert len(data) >= size_line * h
    assert endian == 0
    assert not any(data)


@pytest.mark.parametrize("w,h,kind", [(IM1_SX, IM1_SY, 1), (IM3_SX, IM3_SY, 2)])
def test_color_map_round_trip(w, h, kind):
    img = Image(w, h)
    for y in range(h):
        for x in range(w):
            img.put_pixel(x, y, _color_map(x, y, w, h, kind))
    for y in range(0, h, 7):
        for x in range(0, w, 5):
            assert img.get_pixel(x, y) == _color_map(x, y, w, h, kind)


def test_little_endian_byte_layout():
    img = Image(2, 1)
    img.put_pixel(1, 0, 0x11223344)
    data, _, _, _ = img.data_address()
    assert bytes(data[4:8]) == bytes([0x44, 0x33, 0x22, 0x11])
    assert bytes(data[0:4]) == bytes(4)


def test_big_endian_byte_layout():
    img = Image(2, 1, endian=1)
    img.put_pixel(0, 0, 0x11223344)
    data, _, _, endian = img.data_address()
    assert endian == 1
    assert bytes(data[0:4]) == bytes([0x11, 0x22, 0x33, 0x44])


def test_rows_are_separated_by_size_line():
    img = Image(3, 2)
    img.put_pixel(0, 1, 0xFF)
    data, _, size_line, _ = img.data_address()
    assert data[size_line] == 0xFF
    assert img.get_pixel(0, 0) == 0


def test_transparent_marker_is_truncated_to_pixel():
    img = Image(1, 1, bits_per_pixel=24)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == (1 << 24) - 1


def test_pixel_out_of_range():
    img = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        img.put_pixel(IM1_SX, 0, 0)
    with pytest.raises(IndexError):
        img.get_pixel(0, -1)


@pytest.mark.parametrize("args", [(0, 5), (5, 0), (5, 5, 12), (5, 5, 32, 2)])
def test_invalid_image_parameters(args):
    with pytest.raises(ValueError):
        Image(*args)