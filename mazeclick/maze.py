"""Random maze generation and the map actor that holds a maze."""

from __future__ import annotations

import logging
import random
from os import PathLike
from typing import Optional, Union

from .drawable import DrawableActor
from .vector import Vector2

__all__ = ["generate_maze", "Map"]

WALL = "#"
FLOOR = " "
DEFAULT_MAP_PATH = "Map/MapData.txt"

_log = logging.getLogger(__name__)

# Eight directions, two cells at a time.
_CARVE_DIRECTIONS = (
    (0, -2), (0, 2), (-2, 0), (2, 0),
    (-2, -2), (-2, 2), (2, -2), (2, 2),
)


def generate_maze(width: int, height: int, rng: Optional[random.Random] = None) -> list[list[str]]:
    """Carve a maze by depth-first search; rows are indexed maze[y][x].

    Walls are '#', open cells are ' '. Carving starts at a random odd
    position and never opens the outer border.
    """
    if width < 2 or height < 2:
        raise ValueError("maze must be at least 2 by 2")
    rng = rng if rng is not None else random.Random()

    grid = [[WALL] * width for _ in range(height)]
    start_x = rng.randrange(width // 2) * 2 + 1
    start_y = rng.randrange(height // 2) * 2 + 1
    grid[start_y][start_x] = FLOOR

    stack = [(start_x, start_y)]
    while stack:
        x, y = stack.pop()
        directions = list(_CARVE_DIRECTIONS)
        rng.shuffle(directions)
        for dx, dy in directions:
            nx, ny = x + dx, y + dy
            if 0 < nx < width - 1 and 0 < ny < height - 1 and grid[ny][nx] == WALL:
                grid[y + dy // 2][x + dx // 2] = FLOOR
                grid[ny][nx] = FLOOR
                stack.append((nx, ny))
    return grid


class Map(DrawableActor):
    """The game world's maze, generated on creation and saved to a text file."""

    def __init__(
        self,
        world_width: int,
        world_height: int,
        rng: Optional[random.Random] = None,
        path: Union[str, PathLike, None] = DEFAULT_MAP_PATH,
    ) -> None:
        super().__init__()
        self.world_size = Vector2(world_width, world_height)
        self.rng = rng if rng is not None else random.Random()
        self.maze: list[list[str]] = []
        self.generate()
        if path is not None:
            try:
                self.save(path)
            except OSError as error:
                # The maze is still usable without its saved copy.
                _log.warning("could not save map to %s: %s", path, error)

    def generate(self) -> None:
        """Replace the maze with a freshly generated one."""
        self.maze = generate_maze(self.world_size.x, self.world_size.y, self.rng)

    def save(self, path: Union[str, PathLike]) -> None:
        """Write the maze as text, one line per outer index of maze."""
        if not self.maze:
            raise ValueError("cannot save an empty maze")
        with open(path, "w", encoding="ascii", newline="\n") as file:
            for x in range(self.world_size.x):
                line = "".join(self.maze[x][y] for y in range(self.world_size.y))
                file.write(line + "\n")