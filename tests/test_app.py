import pygame
import pytest

from filsdefer.app import USAGE, _keysym, _rgba_bytes, main
from filsdefer.events import Key


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert USAGE in capsys.readouterr().err


def test_too_many_arguments(capsys):
    assert main(["a.fdf", "b.fdf"]) == 1
    assert USAGE in capsys.readouterr().err


def test_wrong_extension(capsys):
    assert main(["map.txt"]) == 1
    err = capsys.readouterr().err
    assert "not in .fdf format" in err
    assert USAGE in err


def test_path_too_short(capsys):
    assert main(["fdf"]) == 1
    assert "Filepath too short" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 1
    assert "Cannot open file" in capsys.readouterr().err


def test_non_rectangular_map(tmp_path, capsys):
    path = tmp_path / "bad.fdf"
    path.write_text("0 0 0\n0 0\n")
    assert main([str(path)]) == 1
    assert "Map is not rectangular" in capsys.readouterr().err


@pytest.mark.parametrize(
    "pygame_key, expected",
    [
        (pygame.K_ESCAPE, Key.ESCAPE),
        (pygame.K_MINUS, Key.MINUS),
        (pygame.K_EQUALS, Key.EQUAL),
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_RIGHT, Key.RIGHT),
        (pygame.K_w, Key.W),
        (pygame.K_d, Key.D),
    ],
)
def test_keysym_mapping(pygame_key, expected):
    assert _keysym(pygame_key) is expected


def test_unmapped_key():
    assert _keysym(pygame.K_SPACE) is None


def test_rgba_bytes_layout():
    data = _rgba_bytes([0xFF0000, 0x00FF00])
    assert data == b"\xff\x00\x00\xff\x00\xff\x00\xff"