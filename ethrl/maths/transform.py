"""Position, rotation and scale of an actor, with its composed matrix."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from ethrl.maths.mathutils import deg_to_rad
from ethrl.maths.matrix import Matrix2x2, Matrix3x3
from ethrl.maths.vector2 import Vector2
from ethrl.serialization import Serializable, get_float, get_vector2


@dataclass
class Transform(Serializable):
    """Rotation is in degrees; ``matrix`` is refreshed by :meth:`update`."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    scale: Vector2 = field(default_factory=lambda: Vector2(1, 1))
    matrix: Matrix3x3 = field(default_factory=Matrix3x3)

    def read(self, value: Mapping) -> None:
        """Read ``Position``, ``Scale`` and ``Rotation`` where present."""
        position = get_vector2(value, "Position")
        if position is not None:
            self.position = position
        scale = get_vector2(value, "Scale")
        if scale is not None:
            self.scale = scale
        rotation = get_float(value, "Rotation")
        if rotation is not None:
            self.rotation = rotation

    def update(self, parent: Optional[Matrix3x3] = None) -> None:
        """Recompute ``matrix``, composed with ``parent`` when given."""
        local = self.to_matrix3()
        self.matrix = local if parent is None else parent * local

    def to_matrix2(self) -> Matrix2x2:
        """Scale followed by rotation, without translation."""
        return Matrix2x2.create_scale(self.scale) * Matrix2x2.create_rotation(deg_to_rad(self.rotation))

    def to_matrix3(self) -> Matrix3x3:
        """Translation * rotation * scale."""
        translation = Matrix3x3.create_translation(self.position)
        rotation = Matrix3x3.create_rotation(deg_to_rad(self.rotation))
        return translation * rotation * Matrix3x3.create_scale(self.scale)