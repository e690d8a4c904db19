import pytest

from cubekit.image import Image


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("size,kind", [(42, 1), (242, 1), (242, 2)])
@pytest.mark.parametrize("big_endian", [False, True])
def test_fill_and_read_back(size, kind, big_endian):
    img = Image(size, size, big_endian)
    assert img.bits_per_pixel == 32
    assert img.size_line == size * 4
    assert len(img.data) == img.size_line * size
    for y in range(size):
        for x in range(size):
            img.set_pixel(x, y, _color_map(x, y, size, size, kind))
    for y in range(0, size, 7):
        for x in range(0, size, 5):
            assert img.get_pixel(x, y) == _color_map(x, y, size, size, kind)


def test_new_image_is_black():
    img = Image(42, 42, False)
    assert img.get_pixel(41, 41) == 0
    assert not any(img.data)


def test_little_endian_byte_layout():
    img = Image(2, 1, False)
    img.set_pixel(1, 0, 0x11223344)
    assert img.endian == 0
    assert bytes(img.data[4:8]) == b"\x44\x33\x22\x11"


def test_big_endian_byte_layout():
    img = Image(2, 2, True)
    img.set_pixel(0, 1, 0x11223344)
    assert img.endian == 1
    assert bytes(img.data[img.size_line : img.size_line + 4]) == b"\x11\x22\x33\x44"


def test_negative_colour_masked_to_pixel_width():
    img = Image(1, 1)
    img.set_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_range_pixel(x, y):
    img = Image(3, 2)
    with pytest.raises(IndexError):
        img.set_pixel(x, y, 0)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 3)])
def test_bad_size(w, h):
    with pytest.raises(ValueError):
        Image(w, h)