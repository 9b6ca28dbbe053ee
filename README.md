# filsdefer

A small wireframe viewer for `.fdf` height maps. It reads a grid of
altitudes, rotates and projects it isometrically, draws the mesh with
Bresenham lines and lets you change the view from the keyboard.

## Installation

```
pip install .
```

The test suite needs the `test` extra (`pip install ".[test]"`).

## Map format

A map path must end in `.fdf` and be between 4 and 255 bytes long. Each line
holds one row of integer altitudes separated by spaces. The first line fixes
the width; every other line must have the same number of values, or the map
is rejected as not rectangular.

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Each value is read as a leading integer (optional sign, then digits), so
anything after the number in a token, such as a `,0xFF0000` colour suffix, is
ignored.

## Usage

```
fdf path/to/map.fdf
```

The map is shown in a 1000 × 1000 window. Each point is joined to the next
point in its row by a green line and to the point below it in the next row by
a red line. The view is redrawn after each key is released.

| Key           | Effect                          |
|---------------|---------------------------------|
| `-` / `=`     | decrease / increase height scale by 0.1 |
| Left / Right  | rotate around the Z axis by 0.1 rad     |
| `w` / `s`     | rotate around the X axis by 0.1 rad     |
| `a` / `d`     | rotate around the Y axis by 0.1 rad     |
| Escape        | quit with exit status 1                 |
| close button  | quit with exit status 0                 |

A wrong number of arguments, a bad path, an unreadable file or a
non-rectangular map prints an error on standard error and exits with status 1.

## Library use

```python
from filsdefer.mapfile import parse_map
from filsdefer.render import Image, draw_map

heightmap = parse_map("maps/pyramid.fdf")
image = Image()
draw_map(image, heightmap)
print(image.get_pixel(500, 500))
```

- `filsdefer.mapfile`: `check_format`, `parse_map`, `read_map` (builds a
  `HeightMap` from any iterable of lines), `line_width`, and the `Point`,
  `HeightMap` and `MapError` types.
- `filsdefer.render`: `Image` (a pixel buffer with `put_pixel`, `get_pixel`,
  `clear`), `project` (screen position of one point), `draw_line` and
  `draw_map`.
- `filsdefer.events`: `handle_key` applies a `Key` to a height map and returns
  an `Action` (`REDRAW` or `QUIT`).
- `filsdefer.app`: `run_window` and the `main` command entry point.
- `filsdefer.reader`: `LineReader` and `read_lines`, reading lines through a
  fixed-size read buffer from text or binary streams.
- Small helpers: `filsdefer.chars` (character classes, `atoi`, `itoa`),
  `filsdefer.strings` (C-style string operations on Python text),
  `filsdefer.memory` (byte-buffer operations), `filsdefer.output` (writing
  characters, text and numbers to a stream) and `filsdefer.linkedlist`
  (`Node` and `LinkedList`).

## What it does not do

Colours given in a map file are not used; every edge is drawn in the fixed
green or red. There is no zoom, panning or projection switch, and drawing is
done in pure Python, so very large maps redraw slowly.