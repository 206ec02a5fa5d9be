"""Position, rotation and scale combined into a world matrix."""

from __future__ import annotations

from dataclasses import dataclass

from .fvector import Vector3
from .matrix import Matrix4

__all__ = ["Transform"]


@dataclass
class Transform:
    """An object's placement: scale, then rotation (degrees), then translation."""

    position: Vector3 = Vector3.ZERO
    rotation: Vector3 = Vector3.ZERO
    scale: Vector3 = Vector3.ONE

    def matrix(self) -> Matrix4:
        """The world matrix, transposed into column-vector layout for shaders."""
        world = (
            Matrix4.scale(self.scale)
            * Matrix4.rotation(self.rotation)
            * Matrix4.translation(self.position)
        )
        return world.transposed()

    def to_bytes(self) -> bytes:
        """Contents of the transform's constant buffer."""
        return self.matrix().to_bytes()