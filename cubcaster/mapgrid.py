"""Map grid validation: player placement, characters and closed borders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .config import CubError

PLAYER_ANGLES = {
    "N": 3 * (math.pi / 2),
    "S": math.pi / 2,
    "E": 0.0,
    "W": math.pi,
}
MAP_CHARS = frozenset("10 NSEW")
_ELEMENT_CHARS = frozenset("1NSEW")


@dataclass(frozen=True)
class Player:
    """Starting position (cell centre) and view angle of the player."""

    x: float
    y: float
    angle: float


class MapGrid:
    """A validated map; rows are numbered from 1."""

    def __init__(self, rows: Iterable[str], player: Player) -> None:
        self._rows = tuple(rows)
        self.player = player

    def rows(self) -> list[str]:
        return list(self._rows)

    def char_at(self, x: int, y: int) -> str:
        """Return the cell at column x of row y; outside the map is wall."""
        if not 1 <= y <= len(self._rows):
            return "1"
        row = self._rows[y - 1]
        if not 0 <= x < len(row):
            return "1"
        return row[x]


def border_line(line: str) -> bool:
    """Tell whether the inner part of a line holds only 1, 0 and spaces."""
    return all(char in "10 " for char in line[1:-1])


def element_exist(line: str, index: int) -> bool:
    """Tell whether a wall or player lies at or left of index."""
    if not 0 <= index < len(line):
        return False
    return any(char in _ELEMENT_CHARS for char in line[:index + 1])


def fill_spaces(rows: Iterable[str]) -> list[str]:
    """Turn every space that has a wall or player to its left into a wall."""
    filled = []
    for row in rows:
        chars = [
            "1" if char == " " and element_exist(row, index - 1) else char
            for index, char in enumerate(row)
        ]
        filled.append("".join(chars))
    return filled


def is_invalid_border_char(c: str) -> bool:
    return c not in ("1", " ")


def _at(line: str, index: int) -> str:
    return line[index] if 0 <= index < len(line) else ""


def check_surrounding(rows: list[str], row: int, index: int) -> bool:
    """Tell whether the cell at rows[row][index] is enclosed on all sides."""
    if index <= 0 or not 0 <= row < len(rows):
        return False
    current = rows[row]
    if _at(current, index - 1) == " " or _at(current, index + 1) in (" ", ""):
        return False
    for neighbour in (row - 1, row + 1):
        if not 0 <= neighbour < len(rows):
            return False
        line = rows[neighbour]
        if any(_at(line, i) in (" ", "") for i in (index - 1, index, index + 1)):
            return False
    return True


def validate_border(rows: list[str]) -> None:
    """Require the map to be closed by walls."""
    if not rows:
        raise CubError("Map is not initialized.")
    for number, line in enumerate(rows, start=1):
        for index, char in enumerate(line):
            if not is_invalid_border_char(char):
                continue
            if number == 1 or not check_surrounding(rows, number - 1, index):
                raise CubError(
                    f"Invalid border at row {number}, column {index + 1}."
                )


def check_invalid_characters(rows: Iterable[str]) -> None:
    for line in rows:
        for char in line:
            if char not in MAP_CHARS:
                raise CubError(f"Invalid character '{char}' in map.")


def find_player(rows: Iterable[str]) -> Player:
    """Locate the single player start in the map."""
    found = [
        Player(index + 0.5, number + 0.5, PLAYER_ANGLES[char])
        for number, line in enumerate(rows, start=1)
        for index, char in enumerate(line)
        if char in PLAYER_ANGLES
    ]
    if len(found) != 1:
        raise CubError("Invalid player count in map.")
    return found[0]


def validate_map(rows: Iterable[str]) -> MapGrid:
    """Validate raw map rows and return the resulting grid."""
    rows = list(rows)
    if not rows:
        raise CubError("Map is not initialized.")
    player = find_player(rows)
    check_invalid_characters(rows)
    filled = fill_spaces(rows)
    validate_border(filled)
    return MapGrid(filled, player)