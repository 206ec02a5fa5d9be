"""The demo level: a maze world viewed through a scrolling camera."""

from __future__ import annotations

import logging
import random
from os import PathLike
from typing import Iterable, Optional, Union

from .actors import AstarRoute, Camera, Player, Start, Wall
from .astar import Node
from .core import Color, Key
from .drawable import DrawableActor
from .engine import Engine
from .level import Level
from .maze import DEFAULT_MAP_PATH, WALL, Map
from .vector import Vector2

__all__ = ["GameLevel"]

MOVE_INTERVAL = 0.3

_log = logging.getLogger(__name__)


class GameLevel(Level):
    """Holds the maze, the player, the goal, the camera and the found route.

    Space starts or stops the player walking the route, one cell every
    MOVE_INTERVAL seconds.
    """

    def __init__(
        self,
        world_width: int = 200,
        world_height: int = 200,
        rng: Optional[random.Random] = None,
        map_path: Union[str, PathLike, None] = DEFAULT_MAP_PATH,
    ) -> None:
        super().__init__()
        self._screen_size = Engine.get().screen_size
        self._world_size = Vector2(world_width, world_height)
        self.current_camera_world_pos = Vector2()
        self.screen_top_left = Vector2()

        self.astar_path: list[Node] = []
        self.astar_route: Optional[AstarRoute] = None
        self.flag_is_player_button = False
        self.is_space = False
        self._move_timer = 0.0

        self.map = Map(world_width, world_height, rng, map_path)
        self.add_map_actors()

        self.end = Start(self)
        self.add_actor(self.end)

        self.player = Player(self)
        self.add_actor(self.player)

        self.camera = Camera(self)
        self.add_actor(self.camera)

    @property
    def world_size(self) -> Vector2:
        """Size of the whole maze."""
        return self._world_size

    @property
    def screen_size(self) -> Vector2:
        """Size of the part of the world visible at once."""
        return self._screen_size

    @property
    def camera_top_left(self) -> Vector2:
        """World position shown at the screen's top-left corner."""
        return self.screen_top_left

    @property
    def player_position(self) -> Vector2:
        """The player's world position."""
        return self.player.world_position

    @player_position.setter
    def player_position(self, position: Vector2) -> None:
        self.player.world_position = position

    @property
    def end_position(self) -> Vector2:
        """The goal's world position."""
        return self.end.world_position

    @end_position.setter
    def end_position(self, position: Vector2) -> None:
        self.end.world_position = position

    def draw(self) -> None:
        """Draw the actors inside the camera's view at their screen positions."""
        self.current_camera_world_pos = self.camera.world_position
        screen = self._screen_size
        world = self._world_size

        x = self.current_camera_world_pos.x - screen.x // 2
        y = self.current_camera_world_pos.y - screen.y // 2
        if x < 0:
            x = 0
        if x > world.x - screen.x:
            x = world.x - screen.x
        if y < 0:
            y = 0
        if y > world.y - screen.y:
            y = world.y - screen.y
        top_left = self.screen_top_left = Vector2(x, y)

        for actor in self.actors:
            if not isinstance(actor, DrawableActor) or not actor.is_active:
                continue
            world_pos = actor.world_position
            if (
                top_left.x <= world_pos.x < top_left.x + screen.x
                and top_left.y <= world_pos.y < top_left.y + screen.y
            ):
                actor.position = world_pos - top_left
                actor.draw()

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        engine = Engine.get()

        if engine.get_key_down(Key.SPACE):
            self.is_space = not self.is_space

        if self.is_space and self.astar_path:
            self._move_timer += delta_time
            if self._move_timer >= MOVE_INTERVAL:
                step = self.astar_path[0].position
                self.player.world_position = step
                for actor in self.actors:
                    if isinstance(actor, AstarRoute) and actor.world_position == step:
                        actor.destroy()
                del self.astar_path[0]
                self._move_timer = 0.0

        self.end.update(delta_time)
        self.player.update(delta_time)

    def add_map_actors(self) -> None:
        """Queue a Wall for every wall cell of the maze."""
        maze = self.map.maze
        for ix in range(self._world_size.y):
            for jx in range(self._world_size.x):
                if maze[ix][jx] == WALL:
                    self.add_actor(Wall(ix, jx))

    def delete_astar_route(self) -> None:
        """Mark every route actor in the level for removal."""
        for actor in self.actors:
            if isinstance(actor, AstarRoute):
                actor.destroy()

    def add_astar_route_actors(self, path: Iterable[Node]) -> None:
        """Queue route marks for the path, skipping the player's and goal's cells."""
        for node in path:
            position = node.position
            if position in (self.player.world_position, self.end.world_position):
                continue
            self.astar_route = AstarRoute(position.x, position.y)
            self.add_actor(self.astar_route)

    def draw_bound(self) -> None:
        """Outline the screen with '*'."""
        engine = Engine.get()
        width, height = self._screen_size
        for ix in range(width):
            for jx in range(height):
                if ix in (0, width - 1) or jx in (0, height - 1):
                    engine.draw_text(Vector2(ix, jx), "*", Color.RED)