"""Loading of .fdf height maps: a grid of whitespace-separated altitudes."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from filsdefer.chars import atoi
from filsdefer.reader import LineReader
from filsdefer.strings import split

MAX_PATH_LENGTH = 255
MIN_PATH_LENGTH = 4
EXTENSION = b".fdf"
DEFAULT_COLOR = 0xFF0000
_READ_SIZE = 4096


class MapError(Exception):
    """A map path or map file that cannot be used."""


@dataclass(frozen=True)
class Point:
    """One grid point: column, row, altitude and colour."""

    x: int
    y: int
    z: int
    color: int = DEFAULT_COLOR


@dataclass
class HeightMap:
    """A rectangular grid of points together with its view settings."""

    width: int = 0
    height: int = 0
    points: list[list[Point]] = field(default_factory=list)
    z_scale: float = 1.0
    rot_x: float = 0.0
    rot_y: float = 0.0
    rot_z: float = 0.0


def line_width(line: str) -> int:
    """Number of tokens in ``line``, separated by spaces or newlines."""
    width = 0
    in_token = False
    for char in line:
        if char in " \n":
            in_token = False
        elif not in_token:
            in_token = True
            width += 1
    return width


def check_format(filepath: str | os.PathLike[str]) -> str:
    """Return ``filepath`` as text if it names a .fdf file of acceptable length.

    Raises MapError when the path is too long, too short or lacks the
    .fdf extension.
    """
    path = os.fspath(filepath)
    raw = os.fsencode(path)
    if len(raw) > MAX_PATH_LENGTH:
        raise MapError("Filepath too large")
    if len(raw) < MIN_PATH_LENGTH:
        raise MapError("Filepath too short")
    if not raw.endswith(EXTENSION):
        raise MapError("file is not in .fdf format")
    return path


def read_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from text lines.

    The first line fixes the width; every other line must have as many
    tokens or MapError is raised.
    """
    rows = list(lines)
    heightmap = HeightMap()
    for row in rows:
        width = line_width(row)
        if heightmap.height == 0:
            heightmap.width = width
        elif width != heightmap.width:
            raise MapError("Map is not rectangular")
        heightmap.height += 1

    for y, row in enumerate(rows):
        tokens = split(row, " ")
        if len(tokens) < heightmap.width:
            raise MapError(f"row {y} has too few values")
        heightmap.points.append(
            [Point(x, y, atoi(token)) for x, token in enumerate(tokens[: heightmap.width])]
        )
    return heightmap


def parse_map(filepath: str | os.PathLike[str]) -> HeightMap:
    """Read the map file at ``filepath``; raises MapError if it cannot be opened or used."""
    try:
        with open(filepath, encoding="utf-8", errors="replace", newline="") as stream:
            lines = list(LineReader(stream, _READ_SIZE))
    except OSError as error:
        raise MapError(f"Cannot open file: {error.strerror or error}") from error
    return read_map(lines)