import io
import random

import pytest

from mazeclick.actors import AstarRoute, Camera, Player, Start, Wall
from mazeclick.astar import AStar
from mazeclick.core import Color, Key
from mazeclick.engine import Engine, KeyEvent, MouseEvent
from mazeclick.game_level import GameLevel
from mazeclick.vector import Vector2

WORLD = 21


def open_maze(size, walls=()):
    maze = [[" "] * size for _ in range(size)]
    for x, y in walls:
        maze[x][y] = "#"
    return maze


@pytest.fixture
def engine():
    return Engine(10, 8, io.StringIO())


@pytest.fixture
def level(engine):
    game = GameLevel(WORLD, WORLD, random.Random(3), None)
    game.map.maze = open_maze(WORLD)
    return game


def test_wall_and_route_images():
    wall = Wall(3, 4)
    route = AstarRoute(5, 6)
    assert (wall.image, wall.color, wall.world_position) == ("#", Color.RED, Vector2(3, 4))
    assert (route.image, route.color, route.world_position) == ("*", Color.GREEN, Vector2(5, 6))


def test_start_is_offset_from_player(level):
    start = Start(level)
    player = Player(level)
    assert start.image == "e"
    assert start.world_position - player.world_position == Vector2(5, 5)


def test_player_starts_at_world_centre(engine):
    game = GameLevel(20, 20, random.Random(1), None)
    player = Player(game)
    assert player.image == "p"
    assert player.world_position.x * 2 == game.world_size.x
    assert player.world_position.y * 2 == game.world_size.y


def test_right_click_moves_player_and_finds_route(engine, level):
    engine.process_event(MouseEvent(Vector2(3, 2), right_button=True))
    level.player.update(0.0)

    assert level.player_position == Vector2(3, 2)
    assert level.flag_is_player_button is True
    path = level.astar_path
    assert path[0].position == level.player_position
    assert path[-1].position == level.end_position
    routes = [a for a in level.pending_actors if isinstance(a, AstarRoute)]
    assert len(routes) == len(path) - 2


def test_right_click_on_wall_is_ignored(engine, level):
    level.map.maze = open_maze(WORLD, walls=[(3, 2)])
    before = level.player_position
    engine.process_event(MouseEvent(Vector2(3, 2), right_button=True))
    level.player.update(0.0)
    assert level.player_position == before
    assert level.astar_path == []


def test_click_outside_maze_is_ignored(engine, level):
    before = level.end_position
    engine.process_event(MouseEvent(Vector2(WORLD + 4, 1), left_button=True))
    level.player.update(0.0)
    assert level.end_position == before


def test_left_click_moves_goal(engine, level):
    level.flag_is_player_button = True
    engine.process_event(MouseEvent(Vector2(1, 1), left_button=True))
    level.player.update(0.0)
    assert level.end_position == Vector2(1, 1)
    assert level.flag_is_player_button is False
    expected = AStar(level.player_position, Vector2(1, 1)).find_path(level.map.maze)
    assert [n.position for n in level.astar_path] == [n.position for n in expected]


def test_click_clears_walk_mode(engine, level):
    level.is_space = True
    engine.process_event(MouseEvent(Vector2(2, 2), left_button=True))
    level.player.update(0.0)
    assert level.is_space is False


def test_escape_quits(engine, level):
    engine.process_event(KeyEvent(Key.ESCAPE, True))
    level.player.update(0.0)
    assert engine.quit is True


def test_camera_left_stops_at_zero(engine, level):
    camera = Camera(level)
    camera.world_position = Vector2(0, 5)
    engine.process_event(KeyEvent(Key.LEFT, True))
    camera.update(0.0)
    assert camera.world_position == Vector2(0, 5)


def test_camera_right_stops_at_world_edge(engine, level):
    camera = Camera(level)
    camera.world_position = Vector2(WORLD - 1, 5)
    engine.process_event(KeyEvent(Key.RIGHT, True))
    camera.update(0.0)
    assert camera.world_position == Vector2(WORLD - 1, 5)


def test_camera_moves_up_and_down(engine, level):
    camera = Camera(level)
    camera.world_position = Vector2(4, 4)
    engine.process_event(KeyEvent(Key.UP, True))
    camera.update(0.0)
    assert camera.world_position == Vector2(4, 3)
    engine.process_event(KeyEvent(Key.UP, False))
    engine.process_event(KeyEvent(Key.DOWN, True))
    camera.update(0.0)
    camera.update(0.0)
    assert camera.world_position == Vector2(4, 5)


def test_camera_tab_toggles_between_goal_and_player(engine, level):
    camera = Camera(level)
    engine.process_event(KeyEvent(Key.TAB, True))
    camera.update(0.0)
    assert camera.world_position == level.end_position
    engine.save_previous_key_states()
    engine.process_event(KeyEvent(Key.TAB, False))
    engine.save_previous_key_states()
    engine.process_event(KeyEvent(Key.TAB, True))
    camera.update(0.0)
    assert camera.world_position == level.player_position


def test_camera_follows_player_while_walking(engine, level):
    camera = Camera(level)
    level.player_position = Vector2(2, 7)
    level.is_space = True
    camera.update(0.0)
    assert camera.world_position == Vector2(2, 7)


def test_camera_draws_nothing(engine, level):
    camera = Camera(level)
    engine.clear()
    camera.draw()
    assert engine.frame_text().replace("\n", "").strip() == ""