"""Reading XPM pictures into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .colors import lookup_color
from .image import Image
from .wordtab import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63
_ATOI = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn an XPM colour spec into 0xRRGGBB.

    "#hex" is read as hexadecimal; otherwise the name (joined to end with a
    space when end is given) is looked up, giving 0 when unknown and -1
    for "none".
    """
    if name.startswith("#"):
        match = _HEX.match(name[1:])
        digits = match.group(2)
        value = int(digits, 16) if digits else 0
        return _to_int32(-value if match.group(1) == "-" else value)
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    color = lookup_color(name)
    return 0 if color is None else color


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping the text length.

    A line comment is blanked together with the newline that ends it.
    """
    size = len(text)
    while (begin := find_unquoted(text, "/*", size)) != -1:
        end = find(text[begin + 2 :], "*/", size - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", size)) != -1:
        end = find(text[begin + 2 :], "\n", size - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def _blank(text: str, start: int, count: int) -> str:
    stop = min(start + count, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each successive pair of double quotes."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"XPM data ends before the {what}")
    return line


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"bad XPM header: {line!r}")
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        spec_at = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if spec_at >= len(words):
        raise XpmError(f"colour line without colour: {line!r}")
    end = words[spec_at + 1] if spec_at + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[spec_at], end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: header, colour lines, then pixel rows.

    With one or two characters per pixel a later colour definition replaces
    an earlier one of the same key; with more the first one wins. Pixels of
    unknown keys are black, transparent ones become 0xFF000000.
    """
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(rows, "header"))
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _read_color(_next_line(rows, "colour table end"), cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)
    image = Image(width, height)
    for y in range(height):
        line = _next_line(rows, "last pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short: {line!r}")
        for x in range(width):
            color = palette.get(line[x * cpp : (x + 1) * cpp], 0)
            image.set_pixel(x, y, _TRANSPARENT if color == -1 else color)
    return image


def xpm_from_data(data: Iterable[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(data)


def xpm_from_file(path: str | PathLike[str]) -> Image:
    """Read an XPM file; errors opening it propagate as OSError."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))