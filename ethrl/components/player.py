"""The player-controlled character."""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar

from ethrl.components.character import CharacterComponent
from ethrl.components.physics import PhysicsComponent
from ethrl.components.sprite_anim import SpriteAnimComponent
from ethrl.core.logger import log
from ethrl.framework.actor import Actor
from ethrl.framework.events import Event
from ethrl.inputs import (
    BUTTON_LEFT, KEY_A, KEY_D, KEY_S, KEY_SPACE, KEY_W, InputSystem, KeyState,
)
from ethrl.maths.mathutils import lerp
from ethrl.maths.vector2 import Vector2
from ethrl.serialization import get_float

JUMP_FORCE = 525


class PlayerComponent(CharacterComponent):
    """Moves with WASD, jumps with space, attacks with the left mouse button."""

    inputs: ClassVar[InputSystem] = InputSystem()

    def __init__(self) -> None:
        super().__init__()
        self.jump = 3000.0
        self.ground_count = 0

    def initialize(self) -> None:
        super().initialize()

    def _held(self, key: int) -> bool:
        return self.inputs.get_key_state(key) == KeyState.HELD

    def update(self) -> None:
        owner = self.owner
        anim = owner.get_component(SpriteAnimComponent)

        direction = Vector2.ZERO
        if self._held(KEY_W):
            direction = Vector2.UP
        if self._held(KEY_A):
            direction = Vector2.LEFT
        if self._held(KEY_S):
            direction = Vector2.DOWN
            if anim is not None:
                anim.set_sequence("Crouch")
        if self._held(KEY_D):
            direction = Vector2.RIGHT

        velocity = Vector2()
        physics = owner.get_component(PhysicsComponent)
        if physics is not None:
            physics.apply_force(direction * self.speed)
            velocity = physics.velocity

        if anim is not None:
            if velocity.x != 0:
                anim.horizontal_flip = velocity.x < 0
            anim.set_sequence("Run" if abs(velocity.x) > 0 else "Idle")

        if self.ground_count > 0 and self.inputs.get_key_state(KEY_SPACE) == KeyState.PRESSED:
            if physics is not None:
                if anim is not None:
                    anim.set_sequence("Jump")
                physics.apply_force(Vector2.UP * JUMP_FORCE)

        if self.inputs.get_button_state(BUTTON_LEFT) == KeyState.PRESSED and anim is not None:
            anim.set_sequence("Attack")

        scene = owner.scene
        camera = scene.get_actor_from_name("Camera") if scene is not None else None
        if camera is not None:
            camera.transform.position = lerp(camera.transform.position, owner.transform.position,
                                             10 * owner.clock.delta_time)

    def on_collision_enter(self, other: Actor) -> None:
        if other.tag == "Ground":
            self.ground_count += 1
        if other.name == "Coin":
            self.events.notify(Event(name="EVENT_ADD_POINTS", data=100))
            other.destroy()
        if other.tag == "Enemy":
            log("Health: %g", self.health)
            self.events.notify(Event(name="EVENT_DAMAGE", receiver=other, data=self.damage))
            other.destroy()

    def on_collision_exit(self, other: Actor) -> None:
        if other.tag == "Ground":
            self.ground_count -= 1

    def on_notify(self, event: Event) -> None:
        """Take damage; when health runs out, destroy the owner and announce the death."""
        if event.name != "EVENT_DAMAGE":
            return
        self.health -= float(event.data)
        anim = self.owner.get_component(SpriteAnimComponent)
        if anim is not None:
            anim.set_sequence("Damaged")
        if self.health <= 0:
            self.owner.destroy()
            self.events.notify(Event(name="EVENT_PLAYER_DEAD"))

    def read(self, value: Mapping) -> None:
        super().read(value)
        jump = get_float(value, "Jump")
        if jump is not None:
            self.jump = jump