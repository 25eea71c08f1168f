"""Player movement and turning with wall collision."""

from __future__ import annotations

import math

from .context import Key
from .world import MOVE_SPEED, PLAYER_RADIUS, ROT_SPEED, Game


def _step_y(game: Game, dy: float) -> None:
    y = game.pos_y + dy
    if (
        game.is_free(game.pos_x, y + PLAYER_RADIUS)
        and game.is_free(game.pos_x, y - PLAYER_RADIUS)
        and game.is_free(game.pos_x + PLAYER_RADIUS, y)
        and game.is_free(game.pos_x - PLAYER_RADIUS, y)
    ):
        game.pos_y += dy


def _step_x(game: Game, dx: float) -> None:
    x = game.pos_x + dx
    if (
        game.is_free(x + PLAYER_RADIUS, game.pos_y)
        and game.is_free(x - PLAYER_RADIUS, game.pos_y)
        and game.is_free(x, game.pos_y + PLAYER_RADIUS)
        and game.is_free(x, game.pos_y - PLAYER_RADIUS)
    ):
        game.pos_x += dx


def move_forward(game: Game, speed: float) -> None:
    """Move along the view direction, one axis at a time."""
    _step_y(game, game.dir_y * speed)
    _step_x(game, game.dir_x * speed)


def move_backward(game: Game, speed: float) -> None:
    """Move against the view direction, one axis at a time."""
    _step_y(game, -game.dir_y * speed)
    _step_x(game, -game.dir_x * speed)


def move_left(game: Game, speed: float) -> None:
    """Strafe against the camera plane."""
    _step_x(game, -game.plane_x * speed)
    _step_y(game, -game.plane_y * speed)


def move_right(game: Game, speed: float) -> None:
    """Strafe along the camera plane."""
    _step_x(game, game.plane_x * speed)
    _step_y(game, game.plane_y * speed)


def _rotate(game: Game, angle: float) -> None:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    old_dir_x, old_plane_x = game.dir_x, game.plane_x
    game.dir_x = game.dir_x * cos_a - game.dir_y * sin_a
    game.dir_y = old_dir_x * sin_a + game.dir_y * cos_a
    game.plane_x = game.plane_x * cos_a - game.plane_y * sin_a
    game.plane_y = old_plane_x * sin_a + game.plane_y * cos_a


def turn_left(game: Game, rot_speed: float) -> None:
    """Rotate the view counter-clockwise on screen."""
    _rotate(game, -rot_speed)


def turn_right(game: Game, rot_speed: float) -> None:
    """Rotate the view clockwise on screen."""
    _rotate(game, rot_speed)


def handle_key(game: Game, key: int) -> bool:
    """Apply the effect of key; return False when the game should quit."""
    if key == Key.ESCAPE:
        return False
    if key == Key.W:
        move_forward(game, MOVE_SPEED)
    if key == Key.S:
        move_backward(game, MOVE_SPEED)
    if key == Key.A:
        move_left(game, MOVE_SPEED)
    if key == Key.D:
        move_right(game, MOVE_SPEED)
    if key == Key.LEFT:
        turn_left(game, ROT_SPEED)
    if key == Key.RIGHT:
        turn_right(game, ROT_SPEED)
    return True


__all__ = [
    "move_forward",
    "move_backward",
    "move_left",
    "move_right",
    "turn_left",
    "turn_right",
    "handle_key",
]