"""The game command: load a map and its wall textures, then play."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

from .context import Action, Key, KeyData, Mlx
from .errors import MlxError
from .image import Image
from .movement import handle_key
from .render import render_frame
from .world import SCREEN_HEIGHT, SCREEN_WIDTH, Game, Walls, read_map_file
from .xpm42 import load_xpm42

TEXTURE_FILES = {
    "north": "textures/bluestone.xpm42",
    "south": "textures/eagle.xpm42",
    "west": "textures/mossy.xpm42",
    "east": "textures/redbrick.xpm42",
}


def load_walls(base_dir: str | os.PathLike[str] = ".") -> Walls:
    """Load the four wall textures found under base_dir; raise MlxError on failure."""
    base = Path(base_dir)
    textures = {
        side: load_xpm42(base / relative).texture
        for side, relative in TEXTURE_FILES.items()
    }
    return Walls(**textures)


def _run_window(mlx: Mlx, image: Image) -> None:
    import pygame

    pygame.init()
    try:
        flags = pygame.RESIZABLE if mlx.resizable else 0
        screen = pygame.display.set_mode((mlx.width, mlx.height), flags)
        pygame.display.set_caption(mlx.title)
        pygame.key.set_repeat(300, 30)
        keymap = {
            pygame.K_w: Key.W,
            pygame.K_a: Key.A,
            pygame.K_s: Key.S,
            pygame.K_d: Key.D,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_UP: Key.UP,
            pygame.K_DOWN: Key.DOWN,
            pygame.K_ESCAPE: Key.ESCAPE,
            pygame.K_SPACE: Key.SPACE,
            pygame.K_RETURN: Key.ENTER,
        }
        while not mlx.should_close():
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    mlx.request_close()
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    key = keymap.get(event.key)
                    if key is not None:
                        action = (
                            Action.PRESS
                            if event.type == pygame.KEYDOWN
                            else Action.RELEASE
                        )
                        mlx.send_key(key, action)
            if mlx.should_close():
                break
            mlx.run_frame()
            surface = pygame.image.frombuffer(
                bytes(image.pixels), (image.width, image.height), "RGBA"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named in argv; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: raycub <map_file>", file=sys.stderr)
        return 1

    try:
        lines = read_map_file(args[0])
    except (OSError, ValueError) as exc:
        print(f"Error opening the file: {exc}", file=sys.stderr)
        print("Error: could not read the map from the file.", file=sys.stderr)
        return 1

    try:
        game = Game.from_lines(lines)
    except ValueError as exc:
        print(f"Error: could not initialise the map: {exc}", file=sys.stderr)
        return 1

    mlx = Mlx(SCREEN_WIDTH, SCREEN_HEIGHT, "Cub3D", True)
    try:
        image = mlx.new_image(SCREEN_WIDTH, SCREEN_HEIGHT)
        try:
            game.walls = load_walls()
        except MlxError:
            print("Error: texture not found", file=sys.stderr)
            return 1

        def on_frame() -> None:
            render_frame(game, image)

        def on_key(data: KeyData) -> None:
            if not handle_key(game, data.key):
                mlx.close_window()

        mlx.loop_hook(on_frame)
        mlx.key_hook(on_key)
        mlx.image_to_window(image, 0, 0)
        _run_window(mlx, image)
    finally:
        mlx.terminate()
    return 0