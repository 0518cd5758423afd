"""Reading a scene description: header elements followed by the map."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator

from .config import (
    Color,
    CubError,
    LineKind,
    SceneElements,
    check_extension,
    classify_line,
)
from .mapgrid import MapGrid, Player, validate_map

SCENE_EXTENSION = ".cub"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


@dataclass
class Scene:
    """A fully validated scene, ready to be rendered."""

    elements: SceneElements
    grid: MapGrid
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    @property
    def player(self) -> Player:
        return self.grid.player


def _chomp(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return parts


def read_scene(lines: Iterable[str]) -> Scene:
    """Parse and validate the lines of a scene description."""
    elements = SceneElements()
    stream: Iterator[str] = (_chomp(line) for line in lines)
    rows: list[str] = []
    for line in stream:
        if classify_line(line, elements) is LineKind.MAP_START:
            rows.append(line)
            break
    elements.load_images()
    for line in stream:
        if not line:
            raise CubError("Empty line in map.")
        rows.append(line)
    if not rows:
        raise CubError("Map is not initialized.")
    elements.validate_counts()
    elements.check_files()
    grid = validate_map(rows)
    return Scene(elements, grid)


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and validate a scene file, which must end in .cub."""
    filename = os.fspath(path)
    if not check_extension(filename, SCENE_EXTENSION):
        raise CubError("Invalid file extension. Expected .cub file.")
    try:
        with open(filename, encoding="utf-8", errors="surrogateescape",
                  newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise CubError(f"Error opening file: {exc.strerror}") from exc
    return read_scene(_split_lines(text))


def describe(scene: Scene | None) -> str:
    """Return a human-readable summary of a scene."""
    if scene is None:
        return "Cub3D structure is NULL.\n"
    player = scene.player
    lines = [
        "Cub3D Configuration:",
        f"Resolution: {scene.width}x{scene.height}",
        f"Player Position: ({player.x:.6f}, {player.y:.6f})",
        f"Player Direction: {player.angle:.6f}",
        "Map:",
        *scene.grid.rows(),
        "Textures:",
    ]
    for element in scene.elements:
        color = element.color or Color(0, 0, 0)
        path = element.path if element.path is not None else "(null)"
        lines.append(
            f"Name: {element.name}, Path: {path}, "
            f"RGB: ({color.red}, {color.green}, {color.blue})"
        )
    return "\n".join(lines) + "\n"