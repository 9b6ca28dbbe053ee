"""The viewer window and its command-line entry point."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Sequence

import pygame

from filsdefer.events import Action, Key, handle_key
from filsdefer.mapfile import HeightMap, MapError, check_format, parse_map
from filsdefer.render import WIN_H, WIN_W, Image, draw_map

TITLE = "Fils de Fer"
USAGE = "Usage: fdf <valid file in .fdf format>"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_MINUS: Key.MINUS,
    pygame.K_EQUALS: Key.EQUAL,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
}

_EXPOSE_EVENTS = {pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED}


def _keysym(pygame_key: int) -> Key | None:
    return _PYGAME_KEYS.get(pygame_key)


def _rgba_bytes(pixels: Sequence[int]) -> bytes:
    data = array("I", (((pixel & 0xFFFFFF) << 8) | 0xFF for pixel in pixels))
    if sys.byteorder == "little":
        data.byteswap()
    return data.tobytes()


def _redraw(screen: pygame.Surface, image: Image, heightmap: HeightMap) -> None:
    image.clear()
    draw_map(image, heightmap)
    buffer = _rgba_bytes(image.pixels)
    surface = pygame.image.frombuffer(buffer, (image.width, image.height), "RGBA")
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run_window(heightmap: HeightMap) -> int:
    """Show the map in a window until it is closed; return the exit status."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption(TITLE)
        image = Image()
        _redraw(screen, image, heightmap)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return EXIT_SUCCESS
            if event.type == pygame.KEYUP:
                key = _keysym(event.key)
                action = handle_key(heightmap, key if key is not None else 0)
                if action is Action.QUIT:
                    return EXIT_FAILURE
                _redraw(screen, image, heightmap)
            elif event.type in _EXPOSE_EVENTS:
                _redraw(screen, image, heightmap)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and show it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return EXIT_FAILURE
    try:
        path = check_format(args[0])
    except MapError as error:
        print(f"Error: {error}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return EXIT_FAILURE
    try:
        heightmap = parse_map(path)
    except MapError as error:
        print(f"Error: {error}", file=sys.stderr)
        return EXIT_FAILURE
    try:
        return run_window(heightmap)
    except pygame.error as error:
        print(f"Error: failed initializing library: {error}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())