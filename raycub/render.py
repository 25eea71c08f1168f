"""Ray casting: turning the game world into a textured frame."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .image import Image, Texture
from .world import Game

CLEAR_COLOR = 0x000000FF
CEILING_COLOR = 0x87CEEBFF
FLOOR_COLOR = 0x228B22FF

_INT_MAX = 0x7FFFFFFF


@dataclass
class Ray:
    """One ray cast through a screen column and where it hit a wall."""

    camera_x: float
    ray_dir_x: float
    ray_dir_y: float
    map_x: int
    map_y: int
    side_dist_x: float
    side_dist_y: float
    step_x: int
    step_y: int
    delta_dist_x: float
    delta_dist_y: float
    perp_wall_dist: float = 0.0
    side: int = 0
    hit: bool = False


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1.0 / value)


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _line_height(screen_height: int, perp_wall_dist: float) -> int:
    if math.isnan(perp_wall_dist):
        return 0
    if perp_wall_dist == 0:
        return _INT_MAX
    height = screen_height / perp_wall_dist
    if math.isinf(height):
        return _INT_MAX if height > 0 else -_INT_MAX
    return max(-_INT_MAX, min(_INT_MAX, int(height)))


def clear_image(image: Image, color: int) -> None:
    """Paint the whole image with one colour."""
    image.fill(color)


def draw_line(image: Image, x: int, start: int, end: int, color: int) -> None:
    """Paint column x from row start up to, not including, row end."""
    for y in range(start, end):
        image.put_pixel(x, y, color)


def cast_ray(game: Game, x: int, screen_width: int) -> Ray:
    """Cast the ray for screen column x and step through the map until a wall."""
    camera_x = 2 * x / float(screen_width) - 1
    ray_dir_x = game.dir_x + game.plane_x * camera_x
    ray_dir_y = game.dir_y + game.plane_y * camera_x
    map_x, map_y = int(game.pos_x), int(game.pos_y)
    delta_x = _inverse_abs(ray_dir_x)
    delta_y = _inverse_abs(ray_dir_y)

    if ray_dir_x < 0:
        step_x, side_x = -1, (game.pos_x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - game.pos_x) * delta_x
    if ray_dir_y < 0:
        step_y, side_y = -1, (game.pos_y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - game.pos_y) * delta_y

    ray = Ray(
        camera_x=camera_x,
        ray_dir_x=ray_dir_x,
        ray_dir_y=ray_dir_y,
        map_x=map_x,
        map_y=map_y,
        side_dist_x=side_x,
        side_dist_y=side_y,
        step_x=step_x,
        step_y=step_y,
        delta_dist_x=delta_x,
        delta_dist_y=delta_y,
    )

    while not ray.hit:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
        cell = game.cell(ray.map_x, ray.map_y)
        # Leaving the map counts as striking a wall.
        if cell == "" or cell > "0":
            ray.hit = True

    if ray.side == 0:
        ray.perp_wall_dist = _divide(
            ray.map_x - game.pos_x + (1 - ray.step_x) // 2, ray.ray_dir_x
        )
    else:
        ray.perp_wall_dist = _divide(
            ray.map_y - game.pos_y + (1 - ray.step_y) // 2, ray.ray_dir_y
        )
    return ray


def wall_texture(game: Game, ray: Ray) -> Texture | None:
    """Pick the wall texture for the side of the wall the ray struck."""
    if ray.side == 0 and ray.ray_dir_x > 0:
        return game.walls.east
    if ray.side == 0 and ray.ray_dir_x < 0:
        return game.walls.west
    if ray.side == 1 and ray.ray_dir_y > 0:
        return game.walls.south
    return game.walls.north


def wall_x(game: Game, ray: Ray) -> float:
    """Return the world coordinate along the wall where the ray hit it."""
    if ray.side == 0:
        return game.pos_y + ray.perp_wall_dist * ray.ray_dir_y
    return game.pos_x + ray.perp_wall_dist * ray.ray_dir_x


def draw_wall_column(
    game: Game,
    image: Image,
    ray: Ray,
    x: int,
    line_height: int,
    draw_start: int,
    draw_end: int,
) -> None:
    """Paint the textured wall slice for column x."""
    texture = wall_texture(game, ray)
    if texture is None:
        raise ValueError("no texture loaded for this wall side")
    game.texture = texture
    hit = wall_x(game, ray)
    hit -= math.floor(hit)
    tex_x = int(hit * float(texture.width))
    if (ray.side == 0 and ray.ray_dir_x > 0) or (ray.side == 1 and ray.ray_dir_y < 0):
        tex_x = texture.width - tex_x - 1
    for y in range(draw_start, draw_end):
        d = y * 256 - image.height * 128 + line_height * 128
        tex_y = _trunc_div(_trunc_div(d * texture.height, line_height), 256)
        game.color = texture.get_pixel(tex_x, tex_y)
        image.put_pixel(x, y, game.color)


def render_frame(game: Game, image: Image) -> None:
    """Draw sky, floor and textured walls for every column of image."""
    width, height = image.width, image.height
    clear_image(image, CLEAR_COLOR)
    for x in range(width):
        draw_line(image, x, 0, height // 2, CEILING_COLOR)
        draw_line(image, x, height // 2, height, FLOOR_COLOR)
        ray = cast_ray(game, x, width)
        line_height = _line_height(height, ray.perp_wall_dist)
        draw_start = max(_trunc_div(-line_height, 2) + height // 2, 0)
        draw_end = _trunc_div(line_height, 2) + height // 2
        if draw_end >= height:
            draw_end = height - 1
        draw_wall_column(game, image, ray, x, line_height, draw_start, draw_end)