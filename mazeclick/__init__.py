"""Terminal maze game with A* pathfinding, a small frame-based engine and vector/matrix math."""

__version__ = "0.1.0"