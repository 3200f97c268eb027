"""2x2 and 3x3 row-major matrices for 2D transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

from ethrl.maths.vector2 import Vector2
from ethrl.maths.vector3 import Vector3


def _scale_pair(scale: Union[Vector2, float]) -> Tuple[float, float]:
    if isinstance(scale, Vector2):
        return scale.x, scale.y
    return float(scale), float(scale)


@dataclass(frozen=True)
class Matrix2x2:
    """A 2x2 matrix stored as two row vectors."""

    row0: Vector2 = field(default_factory=Vector2)
    row1: Vector2 = field(default_factory=Vector2)

    @property
    def rows(self) -> Tuple[Vector2, Vector2]:
        return self.row0, self.row1

    def __getitem__(self, index: int) -> Vector2:
        if index not in (0, 1):
            raise IndexError(f"Matrix2x2 row out of range: {index}")
        return self.rows[index]

    def __iter__(self) -> Iterator[Vector2]:
        return iter(self.rows)

    def __mul__(self, other: object):
        if isinstance(other, Vector2):
            return Vector2(
                other.x * self.row0.x + other.y * self.row0.y,
                other.x * self.row1.x + other.y * self.row1.y,
            )
        if isinstance(other, Matrix2x2):
            columns = list(zip(*other.rows))
            return Matrix2x2(
                *(Vector2(*(sum(a * b for a, b in zip(row, col)) for col in columns)) for row in self.rows)
            )
        return NotImplemented

    @classmethod
    def identity(cls) -> Matrix2x2:
        return cls(Vector2(1, 0), Vector2(0, 1))

    @classmethod
    def zero(cls) -> Matrix2x2:
        return cls(Vector2(0, 0), Vector2(0, 0))

    @classmethod
    def create_scale(cls, scale: Union[Vector2, float]) -> Matrix2x2:
        """Uniform scale from a number, non-uniform from a Vector2."""
        sx, sy = _scale_pair(scale)
        return cls(Vector2(sx, 0.0), Vector2(0.0, sy))

    @classmethod
    def create_rotation(cls, radians: float) -> Matrix2x2:
        cos, sin = math.cos(radians), math.sin(radians)
        return cls(Vector2(cos, -sin), Vector2(sin, cos))


@dataclass(frozen=True)
class Matrix3x3:
    """A 3x3 affine matrix stored as three row vectors; defaults to all zeros."""

    row0: Vector3 = field(default_factory=Vector3)
    row1: Vector3 = field(default_factory=Vector3)
    row2: Vector3 = field(default_factory=Vector3)

    @property
    def rows(self) -> Tuple[Vector3, Vector3, Vector3]:
        return self.row0, self.row1, self.row2

    def __getitem__(self, index: int) -> Vector3:
        if index not in (0, 1, 2):
            raise IndexError(f"Matrix3x3 row out of range: {index}")
        return self.rows[index]

    def __iter__(self) -> Iterator[Vector3]:
        return iter(self.rows)

    def __mul__(self, other: object):
        if isinstance(other, Vector2):
            return Vector2(
                other.x * self.row0.x + other.y * self.row0.y + self.row0.z,
                other.x * self.row1.x + other.y * self.row1.y + self.row1.z,
            )
        if isinstance(other, Matrix3x3):
            columns = list(zip(*other.rows))
            return Matrix3x3(
                *(Vector3(*(sum(a * b for a, b in zip(row, col)) for col in columns)) for row in self.rows)
            )
        return NotImplemented

    @classmethod
    def identity(cls) -> Matrix3x3:
        return cls(Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1))

    @classmethod
    def zero(cls) -> Matrix3x3:
        return cls(Vector3(), Vector3(), Vector3())

    @classmethod
    def create_scale(cls, scale: Union[Vector2, float]) -> Matrix3x3:
        """Uniform scale from a number, non-uniform from a Vector2."""
        sx, sy = _scale_pair(scale)
        return cls(Vector3(sx, 0, 0), Vector3(0, sy, 0), Vector3(0, 0, 1))

    @classmethod
    def create_rotation(cls, radians: float) -> Matrix3x3:
        cos, sin = math.cos(radians), math.sin(radians)
        return cls(Vector3(cos, -sin, 0.0), Vector3(sin, cos, 0.0), Vector3(0.0, 0.0, 1.0))

    @classmethod
    def create_translation(cls, translation: Vector2) -> Matrix3x3:
        return cls(Vector3(1, 0, translation.x), Vector3(0, 1, translation.y), Vector3(0, 0, 1))

    def get_translation(self) -> Vector2:
        return Vector2(self.row0.z, self.row1.z)

    def get_rotation(self) -> float:
        return math.atan2(self.row1.x, self.row0.x)

    def get_scale(self) -> Vector2:
        x_axis = Vector2(self.row0.x, self.row0.y)
        y_axis = Vector2(self.row1.x, self.row1.y)
        return Vector2(x_axis.length(), y_axis.length())