"""Isometric projection of a height map and wireframe drawing into an image."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from filsdefer.mapfile import HeightMap

WIN_W = 1000
WIN_H = 1000
SCALE = 20.0
ISO_ANGLE = 0.523599
BACKGROUND = 0x000000
RIGHT_COLOR = 0x00FF00
DOWN_COLOR = 0xFF0000


@dataclass
class Image:
    """A frame of 32-bit pixels, stored row by row."""

    width: int = WIN_W
    height: int = WIN_H
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        self.pixels = [BACKGROUND] * (self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Colour of one pixel; raises IndexError outside the image."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) lies outside the image")
        return self.pixels[y * self.width + x]

    def clear(self) -> None:
        """Fill the whole image with the background colour."""
        self.pixels[:] = [BACKGROUND] * len(self.pixels)


def project(heightmap: HeightMap, x: int, y: int, z: int) -> tuple[int, int]:
    """Rotate a grid point by the map's angles and project it isometrically to the screen."""
    zd = z * heightmap.z_scale

    cos_x, sin_x = math.cos(heightmap.rot_x), math.sin(heightmap.rot_x)
    y1 = y * cos_x - zd * sin_x
    z1 = y * sin_x + zd * cos_x

    cos_y, sin_y = math.cos(heightmap.rot_y), math.sin(heightmap.rot_y)
    x2 = x * cos_y + z1 * sin_y
    z2 = -x * sin_y + z1 * cos_y

    cos_z, sin_z = math.cos(heightmap.rot_z), math.sin(heightmap.rot_z)
    x3 = x2 * cos_z - y1 * sin_z
    y3 = x2 * sin_z + y1 * cos_z

    iso_x = (x3 - y3) * math.cos(ISO_ANGLE)
    iso_y = -z2 + (x3 + y3) * math.sin(ISO_ANGLE)

    return int(iso_x * SCALE + WIN_W // 2), int(iso_y * SCALE + WIN_H // 2)


def draw_line(
    image: Image, start: tuple[int, int], end: tuple[int, int], color: int
) -> None:
    """Draw a straight line with Bresenham's algorithm, both ends included."""
    x, y = start
    end_x, end_y = end
    dx = abs(end_x - x)
    dy = abs(end_y - y)
    step_x = 1 if x < end_x else -1
    step_y = 1 if y < end_y else -1
    delta = dx - dy
    while (x, y) != (end_x, end_y):
        image.put_pixel(x, y, color)
        doubled = 2 * delta
        if doubled > -dy:
            delta -= dy
            x += step_x
        if doubled < dx:
            delta += dx
            y += step_y
    image.put_pixel(end_x, end_y, color)


def draw_map(image: Image, heightmap: HeightMap) -> None:
    """Draw the wireframe: each point joined to its right and lower neighbours."""
    projected = [
        [project(heightmap, point.x, point.y, point.z) for point in row]
        for row in heightmap.points[: heightmap.height]
    ]
    for i, row in enumerate(projected):
        for j, screen_point in enumerate(row[: heightmap.width]):
            if j + 1 < heightmap.width:
                draw_line(image, screen_point, row[j + 1], RIGHT_COLOR)
            if i + 1 < heightmap.height:
                draw_line(image, screen_point, projected[i + 1][j], DOWN_COLOR)