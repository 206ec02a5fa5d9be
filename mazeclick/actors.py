"""The actors of the click-to-path demo: walls, route marks, start, player, camera."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .astar import WALL, AStar
from .core import Color, Key
from .drawable import DrawableActor
from .engine import Engine
from .vector import Vector2

if TYPE_CHECKING:
    from .game_level import GameLevel

__all__ = ["Wall", "AstarRoute", "Start", "Player", "Camera"]

_log = logging.getLogger(__name__)


class Wall(DrawableActor):
    """A maze wall cell."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__("#", Color.RED)
        self.world_position = Vector2(x, y)


class AstarRoute(DrawableActor):
    """A mark on one cell of the path found between player and goal."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__("*", Color.GREEN)
        self.world_position = Vector2(x, y)


class Start(DrawableActor):
    """The path's goal marker, placed a little off the world's centre."""

    def __init__(self, level: GameLevel) -> None:
        super().__init__("e", Color.WHITE)
        self.level = level
        size = level.world_size
        self.world_position = Vector2(size.x // 2 + 5, size.y // 2 + 5)


class Player(DrawableActor):
    """The player; clicks move it or the goal and compute a new route.

    A right click moves the player to the clicked cell, a left click
    moves the goal there. Clicks on walls or outside the maze are ignored.
    """

    def __init__(self, level: GameLevel) -> None:
        super().__init__("p", Color.BLUE)
        self.level = level
        size = level.world_size
        self.world_position = Vector2(size.x // 2, size.y // 2)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        engine = Engine.get()

        if engine.get_key_down(Key.ESCAPE):
            engine.quit_game()

        if engine.get_key_down(Key.RBUTTON):
            self.level.is_space = False
            target = self._click_target(self.world_position)
            if target is None:
                return
            self.level.delete_astar_route()
            self.world_position = target
            self.level.flag_is_player_button = True
            self._find_route()

        if engine.get_key_down(Key.LBUTTON):
            self.level.is_space = False
            target = self._click_target(self.level.end_position)
            if target is None:
                return
            self.level.delete_astar_route()
            self.level.end_position = target
            self.level.flag_is_player_button = False
            self._find_route()

    def _click_target(self, anchor: Vector2) -> Optional[Vector2]:
        """World cell under the mouse, or None if it is a wall or off the maze."""
        top_left = self.level.camera_top_left
        anchor_screen = anchor - top_left
        offset = Engine.get().mouse_position - anchor_screen
        target = anchor + offset

        maze = self.level.map.maze
        if not (0 <= target.x < len(maze) and 0 <= target.y < len(maze[target.x])):
            return None
        if maze[target.x][target.y] == WALL:
            return None
        return target

    def _find_route(self) -> None:
        level = self.level
        level.astar_path = AStar(level.player_position, level.end_position).find_path(
            level.map.maze
        )
        if level.astar_path:
            level.add_astar_route_actors(level.astar_path)
            _log.debug("route found with %d steps", len(level.astar_path))
        else:
            _log.debug("no route found")


class Camera(DrawableActor):
    """The invisible point the view is centred on, moved by the arrow keys.

    Tab jumps between the player and the goal; while the player walks its
    route the camera follows it.
    """

    def __init__(self, level: GameLevel) -> None:
        super().__init__()
        self.level = level
        self.toggle = False
        size = level.world_size
        self.world_position = Vector2(size.x // 2, size.y // 2)

    def draw(self) -> None:
        """The camera has no image."""

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        engine = Engine.get()
        size = self.level.world_size

        x, y = self.world_position
        if self.level.is_space:
            x, y = self.level.player_position

        if engine.get_key(Key.LEFT):
            x = max(x - 1, 0)
        elif engine.get_key(Key.RIGHT):
            x += 1
            if x >= size.x:
                x = size.x - 1

        if engine.get_key(Key.UP):
            y = max(y - 1, 0)
        elif engine.get_key(Key.DOWN):
            y += 1
            if y >= size.y:
                y = size.y - 1

        if engine.get_key_down(Key.TAB):
            if self.toggle:
                x, y = self.level.player_position
                self.toggle = False
            else:
                x, y = self.level.end_position
                self.toggle = True

        self.world_position = Vector2(x, y)