"""A level holding actors, with deferred addition and removal."""

from __future__ import annotations

from .actor import Actor

__all__ = ["Level"]


class Level:
    """A collection of actors updated and drawn every frame.

    New actors are queued and only join the level, and expired actors only
    leave it, when process_added_and_destroyed_actors runs.
    """

    def __init__(self) -> None:
        self.actors: list[Actor] = []
        self._add_requested: list[Actor] = []

    def add_actor(self, actor: Actor) -> None:
        """Queue an actor to join the level at the end of the frame."""
        self._add_requested.append(actor)

    @property
    def pending_actors(self) -> tuple[Actor, ...]:
        """Actors queued but not yet added."""
        return tuple(self._add_requested)

    def process_added_and_destroyed_actors(self) -> None:
        """Drop expired actors, then add the queued ones in order."""
        self.actors = [actor for actor in self.actors if not actor.expired]
        if self._add_requested:
            self.actors.extend(self._add_requested)
            self._add_requested.clear()

    def update(self, delta_time: float) -> None:
        """Update every active actor."""
        for actor in self.actors:
            if actor.is_active:
                actor.update(delta_time)

    def draw(self) -> None:
        """Draw every active actor."""
        for actor in self.actors:
            if actor.is_active:
                actor.draw()