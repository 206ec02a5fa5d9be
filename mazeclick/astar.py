"""A* path finding over a character grid with eight-way movement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from .vector import Vector2

__all__ = ["Node", "AStar"]

WALL = "#"


@dataclass(frozen=True)
class _Direction:
    x: int
    y: int
    cost: float


_DIRECTIONS = (
    _Direction(0, 1, 1.0),
    _Direction(0, -1, 1.0),
    _Direction(1, 0, 1.0),
    _Direction(-1, 0, 1.0),
    _Direction(1, 1, 1.414),
    _Direction(1, -1, 1.414),
    _Direction(-1, 1, 1.414),
    _Direction(-1, -1, 1.414),
)


class Node:
    """A search node: a grid position, its parent and its path costs.

    Nodes compare equal when their positions are equal.
    """

    def __init__(self, position: Vector2 = Vector2(), parent: Optional[Node] = None) -> None:
        self.position = position
        self.parent = parent
        self.g_cost = 0.0
        self.h_cost = 0.0
        self.f_cost = 0.0

    def __sub__(self, other: Node) -> Vector2:
        if not isinstance(other, Node):
            return NotImplemented
        return self.position - other.position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.position == other.position

    def __hash__(self) -> int:
        return hash(self.position)

    def __repr__(self) -> str:
        return f"Node({self.position.x}, {self.position.y}, g={self.g_cost:.3f})"


class AStar:
    """Finds a path between two positions on a grid indexed as maze[x][y].

    Cells holding '#' are walls. Diagonal moves cost 1.414, straight
    moves cost 1; the heuristic is the straight-line distance.
    """

    def __init__(self, start: Vector2, goal: Vector2) -> None:
        self.start = start
        self.goal = goal
        self._open: list[Node] = []
        self._closed: list[Node] = []
        self._goal_node = Node(goal)

    def find_path(self, maze: Sequence[Sequence[str]]) -> list[Node]:
        """Return the nodes from start to goal, or an empty list if unreachable."""
        self._goal_node = Node(self.goal)
        self._open = [Node(self.start)]
        self._closed = []

        while self._open:
            current = min(self._open, key=lambda node: node.f_cost)

            if current == self._goal_node:
                return self._construct_path(current)

            self._open.remove(current)

            if current in self._closed:
                continue
            self._closed.append(current)

            for direction in _DIRECTIONS:
                new_x = current.position.x + direction.x
                new_y = current.position.y + direction.y

                if not self._is_in_range(new_x, new_y, maze):
                    continue
                if maze[new_x][new_y] == WALL:
                    continue

                g_cost = current.g_cost + direction.cost
                if self._has_visited(new_x, new_y, g_cost):
                    continue

                neighbor = Node(Vector2(new_x, new_y), current)
                neighbor.g_cost = g_cost
                neighbor.h_cost = self._heuristic(neighbor, self._goal_node)
                neighbor.f_cost = neighbor.g_cost + neighbor.h_cost

                existing = next((node for node in self._open if node == neighbor), None)
                if (
                    existing is None
                    or neighbor.g_cost < existing.g_cost
                    or neighbor.f_cost < existing.f_cost
                ):
                    self._open.append(neighbor)

        return []

    @staticmethod
    def _construct_path(goal_node: Node) -> list[Node]:
        path = []
        node: Optional[Node] = goal_node
        while node is not None:
            path.append(node)
            node = node.parent
        path.reverse()
        return path

    @staticmethod
    def _heuristic(node: Node, goal: Node) -> float:
        diff = node - goal
        return math.hypot(diff.x, diff.y)

    @staticmethod
    def _is_in_range(x: int, y: int, maze: Sequence[Sequence[str]]) -> bool:
        return 0 <= x < len(maze[0]) and 0 <= y < len(maze)

    def _has_visited(self, x: int, y: int, g_cost: float) -> bool:
        """True if a node at (x, y) already has a cost no worse than g_cost.

        Nodes at (x, y) with a higher cost are dropped so the cheaper
        route can replace them.
        """
        position = Vector2(x, y)
        for nodes in (self._open, self._closed):
            same = [node for node in nodes if node.position == position]
            if any(g_cost >= node.g_cost for node in same):
                return True
            if same:
                nodes[:] = [node for node in nodes if node.position != position]
        return False