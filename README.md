# cubcaster

cubcaster reads a `.cub` scene file and checks that it is valid. It then opens
a pygame window that shows a textured first-person view of the map. Walls are
found by DDA raycasting over the map grid, and each screen column is drawn from
one ray.

## Installing

```
pip install .
```

To install the test dependencies as well, use `pip install .[test]`.

## Running

```
cubcaster path/to/scene.cub
```

The command takes exactly one argument, and that argument must end in `.cub`.
With any other number of arguments it prints `Usage: cubcaster <map_file>` to
standard error and exits with status 1. If the scene is not valid, it prints
`Error: ...` to standard error and exits with status 1.

For a valid scene, the command first prints a summary of the scene to standard
output: resolution, player position and direction, the map, and the elements.
It then opens an 800×600 window and redraws it at up to 60 frames per second
until you close the window or press Escape.

### Controls

| Key            | Action              |
|----------------|---------------------|
| W / S          | move forward / back |
| A / D          | strafe left / right |
| Left / Right   | turn                |
| Escape         | quit                |

Walls block movement one axis at a time, so the player slides along a wall
rather than stopping dead.

## Scene format

A scene file has two parts. The element lines come first, then the map.

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 100,100,100
C 190,189,200

111111
100001
10N001
111111
```

- `NO`, `SO`, `WE` and `EA` each name a wall texture image. Any format Pillow can open will work. Texture heights should be a power of two, because rows are sampled with a bit mask.
- `F` and `C` set the floor and ceiling colours as `R,G,B`. Each component must be in the range 0–255.
- Each element line holds exactly two words, the name and its value. Blank lines between elements are ignored.
- Each wall texture must appear exactly once, and there must be two colour lines.
- The first line that is not an element starts the map. Apart from its first and last character, that line may hold only `1`, `0` and spaces.
- The map uses `1` for wall, `0` for floor and a space for void. It must hold exactly one player start, written `N`, `S`, `E` or `W`. The letter sets the direction the player faces.
- A space that has a wall or the player anywhere to its left on the same row is treated as wall.
- The map must be closed. The first row may hold only walls and void. Every other cell that is not a wall must have no void and no map edge next to it, diagonals included.
- A blank line inside the map is an error.

## Library use

```python
from cubcaster.parser import load_scene, describe
from cubcaster.raycast import Camera, Frame, render

scene = load_scene("maps/example.cub")
print(describe(scene))

camera = Camera.from_player(scene.player)
camera.forward(scene.grid)
camera.rotate(0.05)

frame = Frame(scene.width, scene.height)
render(scene, camera, frame)
rgba = frame.to_bytes()
```

- `cubcaster.parser.load_scene(path)` returns a `Scene` and raises `cubcaster.config.CubError` when the scene is invalid. `read_scene(lines)` does the same for lines already in memory, and `describe(scene)` returns the text summary that the command prints.
- `cubcaster.mapgrid.validate_map(rows)` checks the map rows alone and returns a `MapGrid`. `MapGrid.char_at(x, y)` treats anything outside the map as wall.
- `cubcaster.config.parse_color("R,G,B")` returns a `Color`, and `Color.rgba()` packs it into a 32-bit RGBA value.
- `cubcaster.raycast.Camera` holds the position, direction and camera plane. It provides `move`, `forward`, `backward`, `strafe_left`, `strafe_right` and `rotate`.
- `cast_ray(grid, camera, column, width, height)` returns a `RayHit` for one column. `wall_texture_name(hit)` tells which wall texture that column uses.
- `render(scene, camera, frame)` fills a `Frame` with the current view. `Frame.get(x, y)` reads one pixel, and `Frame.to_bytes()` returns all pixels as RGBA bytes.
- `cubcaster.app.run(scene)` shows a scene in a window and returns the final camera.

## What it does not do

- Rendering always uses the scene's fixed 800×600 frame. You can resize the window, but the picture is not rescaled to fit.
- There is no minimap, no sprites or doors, and no mouse look. Movement and turning use the keyboard only.