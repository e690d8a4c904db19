"""Parsing of "R,G,B" colour components into 0xRRGGBB values."""

from __future__ import annotations

from collections.abc import Sequence

_DIGITS = frozenset("0123456789")


def is_not_color(parts: Sequence[str]) -> bool:
    """Tell whether any component is not a plain decimal number.

    A component is rejected when it is empty, has a leading zero, or holds
    anything other than ASCII digits.
    """
    for part in parts:
        if not part or (part[0] == "0" and len(part) > 1):
            return True
        if not set(part) <= _DIGITS:
            return True
    return False


def parse_rgb(parts: Sequence[str]) -> int:
    """Combine three decimal components into 0xRRGGBB.

    Raises ValueError unless there are exactly three valid components, each
    at most 255.
    """
    if len(parts) != 3:
        raise ValueError(f"expected 3 colour components, got {len(parts)}")
    if is_not_color(parts):
        raise ValueError(f"invalid colour components: {list(parts)!r}")
    red, green, blue = (int(part) for part in parts)
    if max(red, green, blue) > 255:
        raise ValueError(f"colour component above 255: {list(parts)!r}")
    return (red << 16) + (green << 8) + blue