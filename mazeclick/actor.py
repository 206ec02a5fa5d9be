"""Base object placed in a level."""

from __future__ import annotations

from .vector import Vector2

__all__ = ["Actor"]


class Actor:
    """A level object with a screen position and a lifetime state."""

    def __init__(self) -> None:
        self.position = Vector2()
        self.active = True
        self.expired = False

    def update(self, delta_time: float) -> None:
        """Advance the actor by one frame; the base actor does nothing."""

    def draw(self) -> None:
        """Draw the actor; the base actor draws nothing."""

    @property
    def is_active(self) -> bool:
        """True while the actor is enabled and not marked for removal."""
        return self.active and not self.expired

    def destroy(self) -> None:
        """Mark the actor for removal at the end of the frame."""
        self.expired = True