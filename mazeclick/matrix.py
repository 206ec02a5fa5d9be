"""Row-major 4x4 matrices for scale, rotation and translation."""

from __future__ import annotations

import math
import struct
from typing import ClassVar, Iterable, Optional, Tuple, Union

from .fvector import Vector3

__all__ = ["Matrix4"]

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

Scalar = Union[int, float]


def _components(
    x: Union[Vector3, Scalar], y: Optional[Scalar], z: Optional[Scalar]
) -> Tuple[float, float, float]:
    if isinstance(x, Vector3):
        if y is not None or z is not None:
            raise TypeError("give either a Vector3 or three numbers")
        return x.x, x.y, x.z
    if y is None or z is None:
        raise TypeError("give either a Vector3 or three numbers")
    return float(x), float(y), float(z)


class Matrix4:
    """An immutable 4x4 matrix stored row by row.

    Vectors are row vectors: vector * matrix transforms them, so a
    transform built as scale * rotation * translation applies in that order.
    """

    STRIDE: ClassVar[int] = 64
    DEGREE_TO_RADIAN: ClassVar[float] = 3.141592 / 180.0
    RADIAN_TO_DEGREE: ClassVar[float] = 180.0 / 3.141592
    IDENTITY: ClassVar["Matrix4"]

    __slots__ = ("_elements",)

    def __init__(self, elements: Optional[Iterable[Scalar]] = None) -> None:
        if elements is None:
            values = _IDENTITY
        else:
            values = tuple(float(value) for value in elements)
            if len(values) != 16:
                raise ValueError(f"a 4x4 matrix needs 16 elements, got {len(values)}")
        self._elements: Tuple[float, ...] = values

    @property
    def elements(self) -> Tuple[float, ...]:
        """The 16 elements, row by row."""
        return self._elements

    @property
    def rows(self) -> Tuple[Tuple[float, ...], ...]:
        """The four rows."""
        e = self._elements
        return tuple(e[start:start + 4] for start in range(0, 16, 4))

    @classmethod
    def translation(
        cls, x: Union[Vector3, Scalar], y: Optional[Scalar] = None, z: Optional[Scalar] = None
    ) -> Matrix4:
        """Translation by (x, y, z), or by a Vector3."""
        x, y, z = _components(x, y, z)
        return cls((
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            x, y, z, 1.0,
        ))

    @classmethod
    def rotation(
        cls, x: Union[Vector3, Scalar], y: Optional[Scalar] = None, z: Optional[Scalar] = None
    ) -> Matrix4:
        """Rotation by Euler angles in degrees, about X, then Y, then Z."""
        x, y, z = _components(x, y, z)
        return cls.rotation_x(x) * cls.rotation_y(y) * cls.rotation_z(z)

    @classmethod
    def rotation_x(cls, angle: float) -> Matrix4:
        """Rotation about the X axis by angle degrees."""
        c = math.cos(angle * cls.DEGREE_TO_RADIAN)
        s = math.sin(angle * cls.DEGREE_TO_RADIAN)
        return cls((
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def rotation_y(cls, angle: float) -> Matrix4:
        """Rotation about the Y axis by angle degrees."""
        c = math.cos(angle * cls.DEGREE_TO_RADIAN)
        s = math.sin(angle * cls.DEGREE_TO_RADIAN)
        return cls((
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def rotation_z(cls, angle: float) -> Matrix4:
        """Rotation about the Z axis by angle degrees."""
        c = math.cos(angle * cls.DEGREE_TO_RADIAN)
        s = math.sin(angle * cls.DEGREE_TO_RADIAN)
        return cls((
            c, s, 0.0, 0.0,
            -s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def scale(
        cls, x: Union[Vector3, Scalar], y: Optional[Scalar] = None, z: Optional[Scalar] = None
    ) -> Matrix4:
        """Scale by (x, y, z), or by a Vector3."""
        x, y, z = _components(x, y, z)
        return cls((
            x, 0.0, 0.0, 0.0,
            0.0, y, 0.0, 0.0,
            0.0, 0.0, z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def perspective(
        cls, field_of_view: float, width: float, height: float, z_near: float, z_far: float
    ) -> Matrix4:
        """Projection matrix; currently always the identity."""
        return cls()

    def transposed(self) -> Matrix4:
        """The matrix with rows and columns swapped."""
        return Matrix4(value for column in zip(*self.rows) for value in column)

    def _transform(self, vector: Vector3) -> Vector3:
        e = self._elements
        return Vector3(
            e[0] * vector.x + e[4] * vector.y + e[8] * vector.z,
            e[1] * vector.x + e[5] * vector.y + e[9] * vector.z,
            e[2] * vector.x + e[6] * vector.y + e[10] * vector.z,
        )

    def __mul__(self, other: Union[Matrix4, Vector3]) -> Union[Matrix4, Vector3]:
        if isinstance(other, Vector3):
            return self._transform(other)
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = tuple(zip(*other.rows))
        return Matrix4(
            sum(a * b for a, b in zip(row, column))
            for row in self.rows
            for column in columns
        )

    def __rmul__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._transform(other)

    def __getitem__(self, index: Union[int, Tuple[int, int]]) -> float:
        if isinstance(index, tuple):
            row, column = index
            if not (0 <= row < 4 and 0 <= column < 4):
                raise IndexError("matrix index out of range")
            return self._elements[row * 4 + column]
        return self._elements[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f"Matrix4({list(self._elements)!r})"

    def to_bytes(self) -> bytes:
        """The elements as little-endian 32-bit floats, row by row."""
        return struct.pack("<16f", *self._elements)


Matrix4.IDENTITY = Matrix4()