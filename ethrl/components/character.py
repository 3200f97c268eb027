"""Base for components that give an actor health and react to game events."""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar

from ethrl.framework.component import Collision, Component
from ethrl.framework.events import EventManager, Notifiable
from ethrl.serialization import get_float

CHARACTER_EVENTS = ("EVENT_DAMAGE", "EVENT_PICKUP", "EVENT_HEALTH")


class CharacterComponent(Component, Collision, Notifiable):
    """Health, damage and speed, with event and collision callbacks.

    ``events`` is the shared event manager that game events travel through.
    """

    events: ClassVar[EventManager] = EventManager()

    def __init__(self) -> None:
        super().__init__()
        self.health = 100.0
        self.damage = 10.0
        self.speed = 0.0

    def initialize(self) -> None:
        """Listen for events aimed at the owner and hook into its collision component."""
        for name in CHARACTER_EVENTS:
            self.events.subscribe(name, self.on_notify, self.owner)
        hook = next((component for component in self.owner.components
                     if callable(getattr(component, "set_collision_enter", None))), None)
        if hook is not None:
            hook.set_collision_enter(self.on_collision_enter)
            hook.set_collision_exit(self.on_collision_exit)

    def release(self) -> None:
        """Stop receiving damage events for the owner."""
        self.events.unsubscribe("EVENT_DAMAGE", self.owner)

    def read(self, value: Mapping) -> None:
        health = get_float(value, "Health")
        if health is not None:
            self.health = health
        damage = get_float(value, "Damage")
        if damage is not None:
            self.damage = damage
        speed = get_float(value, "Speed")
        if speed is not None:
            self.speed = speed