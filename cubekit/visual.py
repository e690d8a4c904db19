"""Pixel value conversion for TrueColor visuals of any depth."""

from __future__ import annotations

Shifts = tuple[int, int, int, int, int, int]


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (offset of lowest set bit, width of the contiguous run of ones)."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    offset = (mask & -mask).bit_length() - 1
    mask >>= offset
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return offset, width


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Derive (red shift, red bits, green shift, green bits, blue shift, blue bits).

    Each mask is the visual's channel mask; a zero mask is rejected.
    """
    red = _mask_layout(red_mask)
    green = _mask_layout(green_mask)
    blue = _mask_layout(blue_mask)
    return (*red, *green, *blue)


def good_color(color: int, depth: int, shifts: Shifts) -> int:
    """Convert 0xRRGGBB into the pixel value of a visual.

    Visuals of depth 24 and more take the colour unchanged; shallower ones
    get each channel scaled down to its bit width and moved to its offset.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )