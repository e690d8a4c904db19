# cubekit

Building blocks for a grid-based raycasting game: reading `.cub` scene files
line by line, checking that a map is closed and holds exactly one player,
parsing floor and ceiling colours, setting up the player's view, and loading
XPM textures into pixel buffers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `cubekit.lines`: `iter_lines` yields the lines of a text stream split on
  `"\n"` only, each with its newline kept. `read_lines` and `count_lines` do
  the same for a file path; a file that cannot be opened raises `OSError`.
  `copy_line(line, keep_newline)` cuts a line at a NUL and, unless
  `keep_newline` is true, at its first newline.
- `cubekit.rgb`: `parse_rgb(["220", "100", "0"])` returns the packed
  `0xRRGGBB` integer. It raises `ValueError` unless there are exactly three
  components, each a plain decimal number without a leading zero and at most
  255. `is_not_color` reports whether any component is malformed.
- `cubekit.map_check`: `check_map(grid)` raises `MapError` when the map has an
  empty row or a character other than `1 0 N S E W`, space, tab or newline,
  when its floor is not closed by walls, or when it does not hold exactly one
  player. The steps it uses (`has_abnormalities`, `not_closed`, `not_solo`,
  `extreme_line_open`, `middle_line_open`, `check_borders`, `check_inside`,
  `invalid`) are public too. `check_file(path)` returns the path as text if
  it ends in `.cub` and raises `MapError` otherwise.
- `cubekit.player`: `Direction` (`NORTH`, `SOUTH`, `EAST`, `WEST`, valued
  `"N"`, `"S"`, `"E"`, `"W"`), the `Player` dataclass with position,
  direction and camera plane, and the `KeyState` dataclass of held keys
  (`w`, `a`, `s`, `d`, `left`, `right`). `Player.facing(direction, x, y)`
  takes a `Direction` or its letter and sets a unit direction vector and a
  camera plane of length 0.66.
- `cubekit.xpm`: `xpm_from_file` and `xpm_from_data` decode XPM images into an
  `Image` and raise `XpmError` (a `ValueError`) for malformed input.
  `strip_comments`, `quoted_lines`, `parse_xpm` and `text_to_rgb` are the
  steps of that pipeline. Transparent pixels (`None`) are stored as
  `0xFF000000`; pixels whose key has no colour are black.
- `cubekit.image`: `Image(width, height, big_endian=False)` is a zero-filled
  32-bit pixel buffer with `set_pixel`, `get_pixel`, `data`, `size_line` and
  `endian`.
- `cubekit.colors`: `lookup_color` resolves X11 colour names such as
  `"dark orange"` regardless of ASCII case, returning `-1` for `"none"` and
  `None` for unknown names.
- `cubekit.visual`: `channel_shifts` derives channel offsets and widths from
  red, green and blue masks; `good_color` packs a `0xRRGGBB` colour for a
  visual of less than 24 bits of depth and passes it through unchanged
  otherwise.
- `cubekit.wordtab`: `split_words`, `find` and `find_unquoted` are the small
  text helpers the XPM reader relies on.

## Example

```python
from cubekit.map_check import MapError, check_map
from cubekit.player import Player
from cubekit.rgb import parse_rgb

grid = ["111\n", "1N1\n", "111"]
try:
    check_map(grid)
except MapError as exc:
    print(exc)
else:
    player = Player.facing("N", 1, 1)
    print(player.dir_x, player.dir_y)   # 0.0 -1.0

floor = parse_rgb("220,100,0".split(","))  # 0xDC6400
```

## What it does not do

cubekit is a library of parts. It opens no window, draws nothing, runs no
raycasting or game loop, handles no keyboard input and installs no command.
It also does not parse a whole `.cub` file into textures, colours and map;
the pieces above check and convert each part once you have split the file.