"""Command line entry point and interactive window."""

from __future__ import annotations

import sys
from typing import Mapping, Sequence

import pygame

from .config import CubError
from .mapgrid import MapGrid
from .parser import Scene, describe, load_scene
from .raycast import ROT_SPEED, Camera, Frame, render

PROGRAM = "cubcaster"
TITLE = "cubcaster"
FPS = 60


def _apply_keys(pressed: Mapping[int, bool], camera: Camera,
                grid: MapGrid) -> bool:
    """Act on the keys held down; return False when the user asked to quit."""
    if pressed[pygame.K_ESCAPE]:
        return False
    if pressed[pygame.K_w]:
        camera.forward(grid)
    if pressed[pygame.K_s]:
        camera.backward(grid)
    if pressed[pygame.K_a]:
        camera.strafe_left(grid)
    if pressed[pygame.K_d]:
        camera.strafe_right(grid)
    if pressed[pygame.K_RIGHT]:
        camera.rotate(ROT_SPEED)
    if pressed[pygame.K_LEFT]:
        camera.rotate(-ROT_SPEED)
    return True


def run(scene: Scene) -> Camera:
    """Show the scene in a window until it is closed; return the final camera."""
    camera = Camera.from_player(scene.player)
    pygame.init()
    try:
        screen = pygame.display.set_mode((scene.width, scene.height),
                                         pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        frame = Frame(scene.width, scene.height)
        clock = pygame.time.Clock()
        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            if not _apply_keys(pygame.key.get_pressed(), camera, scene.grid):
                break
            render(scene, camera, frame)
            image = pygame.image.frombuffer(
                frame.to_bytes(), (frame.width, frame.height), "RGBA"
            )
            screen.blit(image, (0, 0))
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return camera


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene file named on the command line and display it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {PROGRAM} <map_file>", file=sys.stderr)
        return 1
    try:
        scene = load_scene(args[0])
    except CubError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(describe(scene))
    run(scene)
    return 0


if __name__ == "__main__":
    sys.exit(main())