# mazeclick

A small terminal game built on a tiny frame-based engine. It generates a
random maze and puts a player (`p`) and a goal (`e`) in it. You use the
mouse to move them, and an A* search finds a route between them. The route
is drawn as `*` marks. You can then make the player walk along it one cell
at a time.

The package also contains the engine pieces the game is built from. These
are actors, levels, a frame timer, a character screen buffer, integer and
float vector types, a 4×4 matrix and a transform. You can use them on their
own.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The package has no third-party dependencies. The game needs the standard
library's `curses` module, which is available on POSIX systems.

## Playing

```
mazeclick
```

By default the world is 200×200 cells and the view shows 40×25 of them. The
view follows the camera and stops at the edges of the world. Each new maze is
written to `Map/MapData.txt`. If that file cannot be written, a warning is
logged and the game carries on.

| Input               | Effect                                                         |
|---------------------|----------------------------------------------------------------|
| Right mouse button  | Move the player to the clicked cell and search for a route     |
| Left mouse button   | Move the goal to the clicked cell and search for a route       |
| Space               | Start or stop walking the player along the route (one cell every 0.3 s) |
| Arrow keys          | Move the camera one cell per key press                         |
| Tab                 | Jump the camera back and forth between the goal and the player |
| Esc                 | Quit                                                           |

Clicks work like this:

- A click on a wall (`#`) or outside the maze is ignored.
- A click also stops the player from walking.
- While the player walks, the camera follows it.

The search moves in eight directions. A straight step costs 1 and a diagonal
step costs 1.414.

### Options

| Option                       | Default            | Meaning                       |
|------------------------------|--------------------|-------------------------------|
| `--width`, `--height`        | 200, 200           | maze size (at least 2 by 2)   |
| `--screen-width`, `--screen-height` | 40, 25      | view size                     |
| `--fps`                      | 60                 | target frame rate             |
| `--seed`                     | random             | seed for the maze generator   |
| `--map-path`                 | `Map/MapData.txt`  | where the maze is saved       |
| `--no-save`                  |                    | do not save the maze          |

## Using the pieces

```python
import random

from mazeclick.astar import AStar
from mazeclick.maze import generate_maze
from mazeclick.vector import Vector2

maze = generate_maze(41, 41, random.Random(7))   # rows of '#' and ' '
path = AStar(Vector2(1, 1), Vector2(39, 39)).find_path(maze)
print([node.position for node in path])
```

`generate_maze` returns a list of rows, indexed `maze[y][x]`. `AStar`
indexes the grid as `maze[x][y]`, so the two agree when the maze is square.
`find_path` returns the nodes from start to goal. If the goal cannot be
reached, it returns an empty list.

### Game and maze

- `mazeclick.maze.Map` generates a maze when it is created, and can save it
  with `save(path)`.
- `mazeclick.game_level.GameLevel` is the game itself. It holds the maze,
  the walls, the player, the goal, the camera and the route.
- `mazeclick.actors` contains the actor classes `Wall`, `AstarRoute`,
  `Start`, `Player` and `Camera`.

### Engine

- `mazeclick.engine.Engine(width, height, stream, input_source)` runs the
  frame loop with `run()`.
  - It reads input from a callable that returns a `KeyEvent`, a
    `MouseEvent` or `None`. Events can also be fed in directly with
    `process_event`.
  - Key and mouse-button state is available through `get_key`,
    `get_key_down` and `get_key_up`, using the codes in `mazeclick.core.Key`.
  - The most recently created engine is returned by `Engine.get()`.
  - `frame_text()` gives the composed frame as plain text.
- `mazeclick.screen.ScreenBuffer` writes a frame of `Character` cells to a
  text stream as ANSI-coloured text.
- `mazeclick.level.Level` holds actors. Actors added during a frame join the
  level, and destroyed actors leave it, when
  `process_added_and_destroyed_actors()` runs.
- `mazeclick.actor.Actor` and `mazeclick.drawable.DrawableActor` are the base
  classes for level objects. `DrawableActor.intersects` checks whether two
  images on the same row overlap.
- `mazeclick.timer.Timer` accumulates time with `update` and reports
  `is_time_out`.
- `mazeclick.core` has `Color`, `CursorType`, `Key`, `random_int` and
  `random_percent`.

### Math

- `mazeclick.fvector` has the float vectors `Vector2f` and `Vector3`, a
  `Vertex` (position, colour, texture coordinate), and the functions `dot`
  and `lerp`. `lerp` clamps `t` to [0, 1].
- `mazeclick.matrix.Matrix4` is an immutable row-major 4×4 matrix. It
  provides `translation`, `rotation` (Euler angles in degrees, applied X,
  then Y, then Z), `scale`, `transposed` and `to_bytes`. Vectors are row
  vectors, so you write `vector * matrix`.
- `mazeclick.transform.Transform` combines scale, rotation and translation
  into a matrix. `matrix()` returns it transposed, and `to_bytes()` packs it
  as sixteen little-endian 32-bit floats.

## What it does not do

There is no graphics window and no GPU rendering. Meshes, shaders and
textures are not included. `Vertex`, `Matrix4` and `Transform` only compute
values and pack them into bytes.

`Matrix4.perspective` always returns the identity matrix.

The game runs only in a terminal that `curses` supports.