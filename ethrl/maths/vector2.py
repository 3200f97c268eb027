"""Two-dimensional vector used for positions, sizes and directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Tuple, Union

Operand = Union["Vector2", int, float]


def _pair(value: object) -> Optional[Tuple[float, float]]:
    if isinstance(value, Vector2):
        return value.x, value.y
    if isinstance(value, (int, float)):
        return float(value), float(value)
    return None


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector; arithmetic works with vectors or scalars."""

    x: float = 0.0
    y: float = 0.0

    ONE: ClassVar[Vector2]
    ZERO: ClassVar[Vector2]
    UP: ClassVar[Vector2]
    DOWN: ClassVar[Vector2]
    LEFT: ClassVar[Vector2]
    RIGHT: ClassVar[Vector2]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Vector2 index out of range: {index}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Operand) -> Vector2:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2(self.x + pair[0], self.y + pair[1])

    def __sub__(self, other: Operand) -> Vector2:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2(self.x - pair[0], self.y - pair[1])

    def __mul__(self, other: Operand) -> Vector2:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2(self.x * pair[0], self.y * pair[1])

    def __rmul__(self, other: Operand) -> Vector2:
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> Vector2:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2(self.x / pair[0], self.y / pair[1])

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g}"

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_squared(self, other: Vector2) -> float:
        return (self - other).length_squared()

    def distance(self, other: Vector2) -> float:
        return (self - other).length()

    def normalized(self) -> Vector2:
        """Unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def get_angle_between(self, other: Vector2) -> float:
        """Unsigned angle in radians; both vectors are expected to be unit length."""
        return math.acos(self.dot(other))

    def get_signed_angle_between(self, other: Vector2) -> float:
        """Signed angle in radians from this vector to ``other``."""
        cross = self.x * other.y - self.y * other.x
        dot = self.x * other.x + self.y * other.y
        return math.atan2(cross, dot)

    def get_angle(self) -> float:
        return math.atan2(self.y, self.x)

    @staticmethod
    def rotate(vector: Vector2, angle: float) -> Vector2:
        """Return ``vector`` rotated by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        return Vector2(vector.x * cos - vector.y * sin, vector.x * sin + vector.y * cos)


Vector2.ONE = Vector2(1, 1)
Vector2.ZERO = Vector2(0, 0)
Vector2.UP = Vector2(0, -1)
Vector2.DOWN = Vector2(0, 1)
Vector2.LEFT = Vector2(-1, 0)
Vector2.RIGHT = Vector2(1, 0)


def parse_vector2(text: str) -> Vector2:
    """Parse the first line of ``text`` written as ``{x, y}``."""
    line = text.partition("\n")[0]
    start = line.find("{") + 1
    comma = line.find(",")
    if comma < 0:
        raise ValueError(f"not a vector: {line!r}")
    close = line.find("}")
    end = close if close >= 0 else len(line)
    return Vector2(float(line[start:comma]), float(line[comma + 1:end]))