"""Simple integrated motion: velocity, acceleration and damping."""

from __future__ import annotations

from collections.abc import Mapping

from ethrl.framework.component import Component
from ethrl.maths.vector2 import Vector2
from ethrl.serialization import get_float, get_vector2


class PhysicsComponent(Component):
    """Moves its actor by its velocity, which forces accelerate and damping slows."""

    def __init__(self) -> None:
        super().__init__()
        self.velocity = Vector2()
        self.acceleration = Vector2()
        self.damping = 0.99

    def update(self) -> None:
        """Integrate one frame, then clear the accumulated acceleration."""
        dt = self.owner.clock.delta_time
        self.velocity = self.velocity + self.acceleration * dt
        transform = self.owner.transform
        transform.position = transform.position + self.velocity * dt
        self.velocity = self.velocity * self.damping
        self.acceleration = Vector2.ZERO

    def apply_force(self, force: Vector2) -> None:
        self.acceleration = self.acceleration + force

    def read(self, value: Mapping) -> None:
        """Read ``Damping``, ``Velocity`` and ``Acceleration`` where present."""
        damping = get_float(value, "Damping")
        if damping is not None:
            self.damping = damping
        velocity = get_vector2(value, "Velocity")
        if velocity is not None:
            self.velocity = velocity
        acceleration = get_vector2(value, "Acceleration")
        if acceleration is not None:
            self.acceleration = acceleration