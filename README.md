# solong

This package provides building blocks for a small tile-based game. The player
walks a walled map, picks up every coin and then reaches the exit. The package
checks maps, reads XPM sprites into in-memory pixel images and converts
colours. It depends only on the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Maps: `solong.gamemap`

A map is a text file with the `.ber` extension. It uses these symbols:

- `1` wall
- `0` floor
- `C` coin
- `P` player start
- `E` exit

A valid map meets all of these rules:

- It is a rectangle at least 5 columns wide and 3 rows high.
- Walls close it on every side.
- It has exactly one `P`, exactly one `E` and at least one `C`.
- The player can reach every coin and the exit.

`read_map` returns a grid, which is a list of rows. Each row is a list of
one-character strings, indexed as `grid[y][x]`. Positions and sizes are
`Point(x, y)` values.

```python
from solong.gamemap import (
    MapError, read_map, find_map_size, check_symbols, check_counts,
    find_player, mark_reachable_coins, all_coins_reachable,
    exit_reachable, walls_closed,
)

grid = read_map("maps/level1.ber")       # MapError if unreadable or not .ber
size = find_map_size(grid)               # Point(0, 0) if not a large enough rectangle
check_symbols(grid)                      # MapError on any symbol outside 1, 0, P, E, C
check_counts(grid)                       # MapError unless one P, one E, at least one C
if not walls_closed(grid, size):
    raise MapError("Map is not closed by walls")

start = find_player(grid)
coins_grid = [list(row) for row in grid]
mark_reachable_coins(coins_grid, size, start.y, start.x)
exit_grid = [list(row) for row in grid]
ok = all_coins_reachable(coins_grid) and exit_reachable(exit_grid, size, start.y, start.x)
```

`mark_reachable_coins` and `exit_reachable` change the grid they are given in
place, so give each one its own copy:

- `mark_reachable_coins` flood-fills from the start. Walls and the exit block
  it. Each coin it reaches becomes `c` and each other cell it reaches becomes
  `V`.
- `all_coins_reachable` returns true when no `C` is left.
- `exit_reachable` marks the cells it explores with `V`.

Other helpers in this module:

- `has_map_extension(path)` tests for the `.ber` ending.
- `count_lines(path)` counts lines, including an unterminated last one. It
  raises `MapError` if the file cannot be opened.
- `count_coins(grid)` counts `C` cells.

## Images: `solong.image`

`Image(width, height, bits_per_pixel=32, endian=0)` is a packed pixel buffer.
Each row is padded to 32 bits. Use `endian=0` for little-endian pixels and
`endian=1` for big-endian pixels. These members read and write pixels:

- `put_pixel(x, y, color)` stores the low bytes of the colour.
- `get_pixel(x, y)` reads a pixel back. Both raise `IndexError` outside the
  image.
- `data_address()` returns an `ImageData` tuple: `data`, `bits_per_pixel`,
  `size_line` and `endian`.

## XPM sprites: `solong.xpm`

```python
from solong.xpm import xpm_file_to_image, XpmError

img = xpm_file_to_image("sprites/wall.xpm")
print(img.width, img.height)
print(hex(img.get_pixel(0, 0)))
```

Three functions read XPM data:

- `xpm_file_to_image(path)` reads an XPM file.
- `xpm_text_to_image(text)` parses XPM source that is already in memory.
- `xpm_to_image(lines)` takes the quoted strings directly: the header, then
  the colour lines, then the pixel rows.

`strip_comments(text)` blanks out C-style comments that are not inside quotes.

Colours can be written as `#rrggbb` or as X11 colour names. The name `None`
gives the pixel `0xFF000000`, and an unknown name gives `0`. Malformed data or
an unreadable file raises `XpmError`, which is a `ValueError`.

## Colours: `solong.colornames` and `solong.colors`

```python
from solong.colornames import lookup_color
from solong.colors import PixelFormat, text_to_rgb

lookup_color("LightSkyBlue")              # 0x87cefa; case-insensitive, KeyError if unknown
lookup_color("none")                      # -1
text_to_rgb("#ff8000", None)              # 0xff8000
text_to_rgb("light", "sky")               # "light sky" -> 0x87cefa; unknown names give 0
fmt = PixelFormat.from_masks(16, 0xF800, 0x07E0, 0x001F)
fmt.good_color(0xFFFFFF)                  # 0xffff
```

For depths of 24 and above, `PixelFormat.good_color` returns the colour
unchanged.

## Text helpers: `solong.textscan`

`solong.textscan` holds the text-scanning helpers used by the XPM reader:

- `find(text, needle, limit)` finds a substring.
- `find_unquoted(text, needle, limit)` finds a substring outside double
  quotes.
- `split_words(text)` splits on spaces and tabs.

Both finders return -1 when there is no match, or when the needle is longer
than `limit`.

## What this package does not do

This package does not:

- open a window
- draw images to the screen
- read the keyboard
- run a game loop

It also has no command-line program. It covers map checking, sprite decoding
into memory and colour conversion only. Showing the game and moving the
player are left to the application that uses it.