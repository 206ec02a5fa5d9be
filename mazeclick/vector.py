"""Integer two-dimensional vector used for grid and screen positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

__all__ = ["Vector2"]


@dataclass(frozen=True)
class Vector2:
    """An immutable integer 2D vector; components are truncated to int."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y