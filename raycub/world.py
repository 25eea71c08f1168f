"""The game world: map loading, player start and camera set-up."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from .image import Texture

MAP_WIDTH = 10
MAP_HEIGHT = 10
SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1280
MOVE_SPEED = 0.1
ROT_SPEED = 0.03
PLAYER_RADIUS = 0.2

START_MARKERS = frozenset("NSEW")

# Direction vector and camera plane for each starting orientation.
_ORIENTATIONS: dict[str, tuple[tuple[float, float], tuple[float, float]]] = {
    "N": ((0.0, -1.0), (0.66, 0.0)),
    "S": ((0.0, 1.0), (-0.66, 0.0)),
    "E": ((1.0, 0.0), (0.0, 0.66)),
    "W": ((-1.0, 0.0), (0.0, -0.66)),
}


def read_map_file(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file and return its lines without line endings."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def initialize_map(
    lines: Iterable[str],
) -> tuple[list[str], tuple[float, float, str] | None]:
    """Copy the map, replacing the player marker with empty floor.

    Returns the rows and the player start as (x, y, orientation), or None
    when the map has no marker. When several markers appear, the last wins.
    """
    rows: list[str] = []
    start: tuple[float, float, str] | None = None
    for i, line in enumerate(lines):
        chars = list(line)
        for j, char in enumerate(chars):
            if char in START_MARKERS:
                start = (j + 0.5, i + 0.5, char)
                chars[j] = "0"
        rows.append("".join(chars))
    return rows, start


@dataclass
class Walls:
    """The four wall textures, one for each compass side."""

    north: Texture | None = None
    south: Texture | None = None
    west: Texture | None = None
    east: Texture | None = None


@dataclass
class Game:
    """Player position, camera and the map the player moves through."""

    world_map: list[str]
    pos_x: float
    pos_y: float
    initial_orientation: str
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    walls: Walls = field(default_factory=Walls)
    texture: Texture | None = None
    color: int = 0

    @property
    def map_height(self) -> int:
        """Number of rows in the map."""
        return len(self.world_map)

    @property
    def map_width(self) -> int:
        """Length of the first map row."""
        return len(self.world_map[0]) if self.world_map else 0

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Game:
        """Build a game from map lines; raise ValueError if unusable."""
        raw = [line.rstrip("\n") for line in lines]
        if not raw:
            raise ValueError("map is empty")
        rows, start = initialize_map(raw)
        if start is None:
            raise ValueError("map has no player start position")
        x, y, orientation = start
        game = cls(world_map=rows, pos_x=x, pos_y=y, initial_orientation=orientation)
        game.set_initial_orientation()
        return game

    def set_initial_orientation(self) -> None:
        """Point the camera according to the starting orientation."""
        vectors = _ORIENTATIONS.get(self.initial_orientation)
        if vectors is None:
            return
        (self.dir_x, self.dir_y), (self.plane_x, self.plane_y) = vectors

    def cell(self, x: float, y: float) -> str:
        """Return the map character at (x, y), or '' outside the map."""
        column, row = int(x), int(y)
        if row < 0 or row >= len(self.world_map):
            return ""
        line = self.world_map[row]
        if column < 0 or column >= len(line):
            return ""
        return line[column]

    def is_free(self, x: float, y: float) -> bool:
        """Return True if the cell holding (x, y) is empty floor."""
        return self.cell(x, y) == "0"