"""An enemy character that chases the player and hurts it on contact."""

from __future__ import annotations

from collections.abc import Mapping

from ethrl.components.character import CharacterComponent
from ethrl.components.physics import PhysicsComponent
from ethrl.framework.actor import Actor
from ethrl.framework.events import Event


class EnemyComponent(CharacterComponent):
    """Pushes its actor towards the actor named ``Player`` at ``speed``."""

    def initialize(self) -> None:
        super().initialize()

    def update(self) -> None:
        """Apply a force of ``speed`` towards the player, if there is one."""
        scene = self.owner.scene
        player = scene.get_actor_from_name("Player") if scene is not None else None
        if player is None:
            return
        direction = player.transform.position - self.owner.transform.position
        force = direction.normalized() * self.speed
        physics = self.owner.get_component(PhysicsComponent)
        if physics is not None:
            physics.apply_force(force)

    def on_collision_enter(self, other: Actor) -> None:
        """Send this enemy's damage to a player it touches."""
        if other.tag == "Player":
            self.events.notify(Event(name="EVENT_DAMAGE", receiver=other, data=self.damage))

    def on_collision_exit(self, other: Actor) -> None:
        """Leaving contact has no effect."""

    def on_notify(self, event: Event) -> None:
        """Take damage; the owner is destroyed when health runs out."""
        if event.name != "EVENT_DAMAGE":
            return
        self.health -= float(event.data)
        if self.health <= 0:
            self.owner.destroy()

    def read(self, value: Mapping) -> None:
        super().read(value)