"""Camera movement, DDA ray casting and column rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import CubError, Texture
from .mapgrid import MapGrid, Player
from .parser import Scene

WALL = "1"
PLANE_SCALE = 0.66
MOVE_SPEED = 0.1
ROT_SPEED = 0.05
_FAR = 1e30


@dataclass
class Camera:
    """Player position, view direction and camera plane."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float

    @classmethod
    def from_player(cls, player: Player) -> "Camera":
        dir_x = math.cos(player.angle)
        dir_y = math.sin(player.angle)
        return cls(player.x, player.y, dir_x, dir_y,
                   -dir_y * PLANE_SCALE, dir_x * PLANE_SCALE)

    def move(self, new_x: float, new_y: float, grid: MapGrid) -> None:
        """Move towards (new_x, new_y), sliding along walls axis by axis."""
        if grid.char_at(int(new_x), int(self.y)) != WALL:
            self.x = new_x
        if grid.char_at(int(self.x), int(new_y)) != WALL:
            self.y = new_y

    def forward(self, grid: MapGrid) -> None:
        self.move(self.x + self.dir_x * MOVE_SPEED,
                  self.y + self.dir_y * MOVE_SPEED, grid)

    def backward(self, grid: MapGrid) -> None:
        self.move(self.x - self.dir_x * MOVE_SPEED,
                  self.y - self.dir_y * MOVE_SPEED, grid)

    def strafe_left(self, grid: MapGrid) -> None:
        self.move(self.x + self.dir_y * MOVE_SPEED,
                  self.y - self.dir_x * MOVE_SPEED, grid)

    def strafe_right(self, grid: MapGrid) -> None:
        self.move(self.x - self.dir_y * MOVE_SPEED,
                  self.y + self.dir_x * MOVE_SPEED, grid)

    def rotate(self, angle: float) -> None:
        """Rotate direction and camera plane by angle radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )


@dataclass(frozen=True)
class RayHit:
    """Where the ray of one screen column met a wall, and how to draw it."""

    column: int
    map_x: int
    map_y: int
    side: int
    ray_dir_x: float
    ray_dir_y: float
    perp_wall_dist: float
    line_height: int
    draw_start: int
    draw_end: int


class Frame:
    """An RGBA pixel buffer."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid frame size {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height * 4)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return (y * self.width + x) * 4

    def put(self, x: int, y: int, color: int) -> None:
        offset = self._offset(x, y)
        self._pixels[offset:offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, "big")

    def get(self, x: int, y: int) -> int:
        offset = self._offset(x, y)
        return int.from_bytes(self._pixels[offset:offset + 4], "big")

    def clear(self) -> None:
        self._pixels[:] = bytes(len(self._pixels))

    def to_bytes(self) -> bytes:
        return bytes(self._pixels)


def _delta(component: float) -> float:
    return _FAR if component == 0 else abs(1 / component)


def cast_ray(grid: MapGrid, camera: Camera, column: int, width: int,
             height: int) -> RayHit:
    """Cast the ray of one screen column and find the wall it hits."""
    camera_x = 2 * column / width - 1
    ray_dir_x = camera.dir_x + camera.plane_x * camera_x
    ray_dir_y = camera.dir_y + camera.plane_y * camera_x
    map_x, map_y = int(camera.x), int(camera.y)
    delta_x, delta_y = _delta(ray_dir_x), _delta(ray_dir_y)
    if ray_dir_x < 0:
        step_x, side_x = -1, (camera.x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - camera.x) * delta_x
    if ray_dir_y < 0:
        step_y, side_y = -1, (camera.y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - camera.y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if grid.char_at(map_x, map_y) == WALL:
            break

    if side == 0:
        perp = (map_x - camera.x + (1 - step_x) // 2) / ray_dir_x
    else:
        perp = (map_y - camera.y + (1 - step_y) // 2) / ray_dir_y
    line_height = int(height / perp) if perp > 0 else height
    draw_start = max(-(line_height // 2) + height // 2, 0)
    draw_end = line_height // 2 + height // 2
    if draw_end >= height:
        draw_end = height - 1
    return RayHit(column, map_x, map_y, side, ray_dir_x, ray_dir_y, perp,
                  line_height, draw_start, draw_end)


def wall_texture_name(hit: RayHit) -> str:
    """Name of the wall texture used for the face a ray hit."""
    if hit.side == 0:
        return "EA" if hit.ray_dir_x < 0 else "WE"
    return "SO" if hit.ray_dir_y < 0 else "NO"


def _texture(scene: Scene, name: str) -> Texture:
    element = scene.elements.get(name)
    if element is None or element.texture is None:
        raise CubError(f"Texture not loaded: {name}")
    return element.texture


def _color(scene: Scene, name: str) -> int:
    element = scene.elements.get(name)
    if element is None or element.color is None:
        raise CubError(f"Missing colour: {name}")
    return element.color.rgba()


def _draw_wall(frame: Frame, hit: RayHit, texture: Texture,
               camera: Camera) -> None:
    if hit.side == 0:
        wall_x = camera.y + hit.perp_wall_dist * hit.ray_dir_y
    else:
        wall_x = camera.x + hit.perp_wall_dist * hit.ray_dir_x
    wall_x -= math.floor(wall_x)
    if hit.line_height <= 0:
        return
    tex_x = min(int(texture.width * wall_x), texture.width - 1)
    step = texture.height / hit.line_height
    tex_pos = (hit.draw_start - frame.height // 2 + hit.line_height // 2) * step
    for y in range(hit.draw_start, hit.draw_end):
        tex_y = int(tex_pos) & (texture.height - 1)
        tex_pos += step
        frame.put(hit.column, y, texture.pixel(tex_x, tex_y))


def _draw_floor_and_ceiling(frame: Frame, hit: RayHit, ceiling: int,
                            floor_color: int) -> None:
    for y in range(frame.height):
        if y < hit.draw_start:
            frame.put(hit.column, y, ceiling)
        elif y >= hit.draw_end:
            frame.put(hit.column, y, floor_color)


def render(scene: Scene, camera: Camera, frame: Frame) -> None:
    """Draw the view from camera into frame."""
    ceiling = _color(scene, "C")
    floor_color = _color(scene, "F")
    frame.clear()
    for column in range(frame.width):
        hit = cast_ray(scene.grid, camera, column, frame.width, frame.height)
        _draw_wall(frame, hit, _texture(scene, wall_texture_name(hit)), camera)
        _draw_floor_and_ceiling(frame, hit, ceiling, floor_color)