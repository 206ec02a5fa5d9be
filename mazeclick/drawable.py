"""Actors that draw a short text image into the engine's frame."""

from __future__ import annotations

from .actor import Actor
from .core import Color
from .engine import Engine
from .vector import Vector2

__all__ = ["DrawableActor"]


class DrawableActor(Actor):
    """An actor with a text image, a colour and a world position.

    position is where it appears on screen; world_position is where it is
    in the game world.
    """

    def __init__(self, image: str = "", color: Color = Color.WHITE) -> None:
        super().__init__()
        self.image = image
        self.color = color
        self.world_position = Vector2()

    @property
    def width(self) -> int:
        """Width of the image in characters."""
        return len(self.image)

    def draw(self) -> None:
        """Write the image at the screen position."""
        super().draw()
        Engine.get().draw_text(self.position, self.image, self.color)

    def intersects(self, other: DrawableActor) -> bool:
        """True if both images share a row and their spans overlap or touch."""
        low = self.position.x
        high = self.position.x + self.width
        other_low = other.position.x
        other_high = other.position.x + other.width
        if other_low > high or other_high < low:
            return False
        return self.position.y == other.position.y