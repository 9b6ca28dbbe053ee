"""Keyboard handling: keys change the view settings of a height map."""

from __future__ import annotations

import enum

from filsdefer.mapfile import HeightMap

STEP = 0.1


class Key(enum.IntEnum):
    """Key symbols understood by the viewer."""

    ESCAPE = 0xFF1B
    MINUS = 0x2D
    EQUAL = 0x3D
    LEFT = 0xFF51
    RIGHT = 0xFF53
    W = 0x77
    S = 0x73
    A = 0x61
    D = 0x64


class Action(enum.Enum):
    """What the viewer must do after a key."""

    REDRAW = enum.auto()
    QUIT = enum.auto()


_ADJUSTMENTS: dict[Key, tuple[str, float]] = {
    Key.MINUS: ("z_scale", -STEP),
    Key.EQUAL: ("z_scale", STEP),
    Key.LEFT: ("rot_z", -STEP),
    Key.RIGHT: ("rot_z", STEP),
    Key.W: ("rot_x", STEP),
    Key.S: ("rot_x", -STEP),
    Key.A: ("rot_y", STEP),
    Key.D: ("rot_y", -STEP),
}


def handle_key(heightmap: HeightMap, keycode: int) -> Action:
    """Apply the key to the map's view settings and say what to do next.

    Escape asks to quit; any other key, known or not, asks for a redraw.
    """
    try:
        key = Key(keycode)
    except ValueError:
        return Action.REDRAW
    if key is Key.ESCAPE:
        return Action.QUIT
    attribute, delta = _ADJUSTMENTS[key]
    setattr(heightmap, attribute, getattr(heightmap, attribute) + delta)
    return Action.REDRAW