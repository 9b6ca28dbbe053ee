"""Wireframe viewer for .fdf height maps, with the text and buffer helpers it uses."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "chars",
    "events",
    "linkedlist",
    "mapfile",
    "memory",
    "output",
    "reader",
    "render",
    "strings",
]