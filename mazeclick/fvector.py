"""Floating-point 2D and 3D vectors and the mesh vertex built from them."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, TypeVar, Union

__all__ = ["Vector2f", "Vector3", "Vertex", "dot", "lerp"]

Scalar = Union[int, float]
_V = TypeVar("_V", "Vector2f", "Vector3")


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Vector2f:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    STRIDE: ClassVar[int] = 8
    ZERO: ClassVar["Vector2f"]
    ONE: ClassVar["Vector2f"]
    RIGHT: ClassVar["Vector2f"]
    UP: ClassVar["Vector2f"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: Scalar) -> Vector2f:
        if not _is_scalar(scale):
            return NotImplemented
        return Vector2f(self.x * scale, self.y * scale)

    def __rmul__(self, scale: Scalar) -> Vector2f:
        return self.__mul__(scale)

    def __truediv__(self, scale: Scalar) -> Vector2f:
        if not _is_scalar(scale):
            return NotImplemented
        if scale == 0:
            raise ZeroDivisionError("cannot divide a vector by zero")
        return Vector2f(self.x / scale, self.y / scale)

    def __neg__(self) -> Vector2f:
        return Vector2f(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x:f},{self.y:f})"

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2f:
        """The vector scaled to unit length; a zero vector raises ZeroDivisionError."""
        length = self.length()
        return Vector2f(self.x / length, self.y / length)

    def to_bytes(self) -> bytes:
        """Little-endian 32-bit floats, x then y."""
        return struct.pack("<2f", self.x, self.y)


Vector2f.ZERO = Vector2f(0.0, 0.0)
Vector2f.ONE = Vector2f(1.0, 1.0)
Vector2f.RIGHT = Vector2f(1.0, 0.0)
Vector2f.UP = Vector2f(0.0, 1.0)


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    STRIDE: ClassVar[int] = 12
    ZERO: ClassVar["Vector3"]
    ONE: ClassVar["Vector3"]
    RIGHT: ClassVar["Vector3"]
    UP: ClassVar["Vector3"]
    FORWARD: ClassVar["Vector3"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: Scalar) -> Vector3:
        if not _is_scalar(scale):
            return NotImplemented
        return Vector3(self.x * scale, self.y * scale, self.z * scale)

    def __rmul__(self, scale: Scalar) -> Vector3:
        return self.__mul__(scale)

    def __truediv__(self, scale: Scalar) -> Vector3:
        if not _is_scalar(scale):
            return NotImplemented
        if scale == 0:
            raise ZeroDivisionError("cannot divide a vector by zero")
        return Vector3(self.x / scale, self.y / scale, self.z / scale)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"({self.x:f},{self.y:f},{self.z:f})"

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """The vector scaled to unit length; a zero vector raises ZeroDivisionError."""
        length = self.length()
        return Vector3(self.x / length, self.y / length, self.z / length)

    def cross(self, other: Vector3) -> Vector3:
        """Cross product self x other."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def to_bytes(self) -> bytes:
        """Little-endian 32-bit floats, x, y then z."""
        return struct.pack("<3f", self.x, self.y, self.z)


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
Vector3.RIGHT = Vector3(1.0, 0.0, 0.0)
Vector3.UP = Vector3(0.0, 1.0, 0.0)
Vector3.FORWARD = Vector3(0.0, 0.0, 1.0)


def dot(left: _V, right: _V) -> float:
    """Dot product of two vectors of the same kind."""
    if type(left) is not type(right):
        raise TypeError("dot product needs two vectors of the same kind")
    return sum(a * b for a, b in zip(left, right))


def lerp(start: _V, end: _V, t: float) -> _V:
    """Linear interpolation (1 - t) * start + t * end, with t clamped to [0, 1]."""
    if type(start) is not type(end):
        raise TypeError("lerp needs two vectors of the same kind")
    t = min(max(t, 0.0), 1.0)
    return (1.0 - t) * start + t * end


@dataclass
class Vertex:
    """A mesh vertex: position, colour and texture coordinate."""

    position: Vector3 = field(default=Vector3.ZERO)
    color: Vector3 = field(default=Vector3.ZERO)
    tex_coord: Vector2f = field(default=Vector2f.ZERO)

    STRIDE: ClassVar[int] = Vector3.STRIDE * 2 + Vector2f.STRIDE

    def to_bytes(self) -> bytes:
        """Packed vertex: position, colour, then texture coordinate."""
        return self.position.to_bytes() + self.color.to_bytes() + self.tex_coord.to_bytes()