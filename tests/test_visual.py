import pytest

from cubekit.visual import channel_shifts, good_color


def test_shifts_for_24_bit_masks():
    assert channel_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_shifts_for_rgb565_masks():
    assert channel_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        channel_shifts(0xFF0000, 0, 0xFF)


@pytest.mark.parametrize("color", [0x000000, 0x123456, 0xFFFFFF, 0xFF99FF])
def test_deep_visual_keeps_colour(color):
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(color, 24, shifts) == color
    assert good_color(color, 32, shifts) == color


@pytest.mark.parametrize("color", [0x000000, 0x123456, 0xFFFFFF, 0x00FFFF])
def test_full_width_layout_round_trips(color):
    shifts = channel_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    assert good_color(color, 16, shifts) == color


def test_rgb565_white_and_black():
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert good_color(0x000000, 16, shifts) == 0


def test_rgb565_fits_in_masks():
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFF0000, 16, shifts) & ~0xF800 == 0
    assert good_color(0x00FF00, 16, shifts) & ~0x07E0 == 0
    assert good_color(0x0000FF, 16, shifts) & ~0x001F == 0