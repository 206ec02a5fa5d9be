"""A simple countdown timer advanced by frame time."""

from __future__ import annotations

__all__ = ["Timer"]


class Timer:
    """Accumulates elapsed time and reports when a set time is reached."""

    def __init__(self, set_time: float) -> None:
        self.set_time = set_time
        self.elapsed_time = 0.0

    def update(self, delta_time: float) -> None:
        """Advance the timer by delta_time seconds."""
        self.elapsed_time += delta_time

    def reset(self) -> None:
        """Start counting again from zero."""
        self.elapsed_time = 0.0

    @property
    def is_time_out(self) -> bool:
        """True once the elapsed time has reached the set time."""
        return self.elapsed_time >= self.set_time