"""Three-dimensional vector, used mainly as a matrix row."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

Operand = Union["Vector3", int, float]


def _triple(value: object) -> Optional[Tuple[float, float, float]]:
    if isinstance(value, Vector3):
        return value.x, value.y, value.z
    if isinstance(value, (int, float)):
        scalar = float(value)
        return scalar, scalar, scalar
    return None


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector; arithmetic works with vectors or scalars."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError(f"Vector3 index out of range: {index}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Operand) -> Vector3:
        t = _triple(other)
        if t is None:
            return NotImplemented
        return Vector3(self.x + t[0], self.y + t[1], self.z + t[2])

    def __sub__(self, other: Operand) -> Vector3:
        t = _triple(other)
        if t is None:
            return NotImplemented
        return Vector3(self.x - t[0], self.y - t[1], self.z - t[2])

    def __mul__(self, other: Operand) -> Vector3:
        t = _triple(other)
        if t is None:
            return NotImplemented
        return Vector3(self.x * t[0], self.y * t[1], self.z * t[2])

    def __rmul__(self, other: Operand) -> Vector3:
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> Vector3:
        t = _triple(other)
        if t is None:
            return NotImplemented
        return Vector3(self.x / t[0], self.y / t[1], self.z / t[2])

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_squared(self, other: Vector3) -> float:
        return (self - other).length_squared()

    def distance(self, other: Vector3) -> float:
        return (self - other).length()

    def normalized(self) -> Vector3:
        """Unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length == 0:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / length, self.y / length, self.z / length)