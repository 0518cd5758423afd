"""Scene header elements: wall textures and floor/ceiling colours."""

from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass
from typing import Iterator

from PIL import Image

WALL_NAMES = ("NO", "SO", "WE", "EA")
COLOR_NAMES = ("F", "C")
_TRIM_CHARS = " \t\n\r"
_ATOI_SPACES = " \t\n\v\f\r"


class CubError(Exception):
    """Raised when a scene description is invalid."""


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour."""

    red: int
    green: int
    blue: int

    def rgba(self) -> int:
        """Pack the colour as a 32-bit RGBA value with full alpha."""
        return (self.red << 24) | (self.green << 16) | (self.blue << 8) | 0xFF


@dataclass(frozen=True)
class Texture:
    """A decoded image with 4 bytes (RGBA) per pixel."""

    width: int
    height: int
    pixels: bytes

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y) packed as 32-bit RGBA."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        offset = (y * self.width + x) * 4
        red, green, blue, alpha = self.pixels[offset:offset + 4]
        return (red << 24) | (green << 16) | (blue << 8) | alpha


def load_texture(path: str) -> Texture:
    """Load an image file into an RGBA texture."""
    try:
        with Image.open(path) as image:
            rgba = image.convert("RGBA")
            return Texture(rgba.width, rgba.height, rgba.tobytes())
    except (OSError, ValueError) as exc:
        raise CubError(f"Invalid texture: {path}") from exc


@dataclass
class Element:
    """One header line of a scene: a wall texture or a floor/ceiling colour."""

    name: str
    path: str | None = None
    color: Color | None = None
    texture: Texture | None = None

    @property
    def is_color(self) -> bool:
        return self.name in COLOR_NAMES


class LineKind(enum.Enum):
    """What a header line turned out to be."""

    EMPTY = "empty"
    ELEMENT = "element"
    MAP_START = "map_start"


class SceneElements:
    """The set of header elements read from a scene file."""

    def __init__(self) -> None:
        self._items: list[Element] = []

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, element: Element) -> None:
        """Add an element; wall textures go first, colours last."""
        if element.name in WALL_NAMES:
            self._items.insert(0, element)
        else:
            self._items.append(element)

    def get(self, name: str) -> Element | None:
        """Return the first element with the given name, if any."""
        return next((item for item in self._items if item.name == name), None)

    def validate_counts(self) -> None:
        """Require each wall texture once and two colour definitions."""
        counts = Counter(item.name for item in self._items)
        colors = sum(counts[name] for name in COLOR_NAMES)
        if any(counts[name] != 1 for name in WALL_NAMES) or colors != 2:
            raise CubError("Missing or duplicate texture definitions.")

    def check_files(self) -> list[str]:
        """Check that every texture file can be opened; return their paths."""
        checked = []
        for item in self._items:
            if item.is_color or not item.path:
                continue
            try:
                with open(item.path, "rb"):
                    pass
            except OSError as exc:
                raise CubError(f"Could not open texture file: {item.path}") from exc
            checked.append(item.path)
        return checked

    def load_images(self) -> None:
        """Decode the image of every wall texture."""
        for item in self._items:
            if not item.is_color:
                if not item.path:
                    raise CubError("Invalid texture or malloc failed")
                item.texture = load_texture(item.path)


def _atoi(text: str) -> int:
    rest = text.lstrip(_ATOI_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def parse_color(value: str) -> Color:
    """Parse an "R,G,B" colour with each component in 0-255."""
    parts = [part for part in value.split(",") if part]
    if len(parts) != 3:
        raise CubError("the RGB number should be 3 numbers")
    red, green, blue = (_atoi(part) for part in parts)
    if not all(0 <= component <= 255 for component in (red, green, blue)):
        raise CubError("RGB number should be between 0-255")
    return Color(red, green, blue)


def classify_line(line: str, elements: SceneElements) -> LineKind:
    """Interpret one header line, adding any element it defines."""
    from .mapgrid import border_line

    trimmed = line.strip(_TRIM_CHARS)
    if not trimmed:
        return LineKind.EMPTY
    tokens = [token for token in trimmed.split(" ") if token]
    head = tokens[0]
    if head in WALL_NAMES or head in COLOR_NAMES:
        if len(tokens) != 2:
            raise CubError("multiple or no texture path")
        if head in WALL_NAMES:
            elements.add(Element(head, tokens[1]))
        else:
            elements.add(Element(head, tokens[1], parse_color(tokens[1])))
        return LineKind.ELEMENT
    if not border_line(line):
        raise CubError("Invalid Texture")
    return LineKind.MAP_START


def check_extension(filename: str, extension: str) -> bool:
    """Tell whether filename ends with extension."""
    return len(filename) >= len(extension) and filename.endswith(extension)