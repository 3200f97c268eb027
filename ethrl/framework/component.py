"""Behaviour attached to an actor, and the collision callback interface."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from ethrl.framework.factory import GameObject
from ethrl.serialization import Serializable

if TYPE_CHECKING:
    from ethrl.framework.actor import Actor


class Component(GameObject, Serializable):
    """A piece of behaviour owned by one actor."""

    def __init__(self) -> None:
        self.owner: Optional[Actor] = None

    def clone(self) -> Component:
        """Member-wise copy: containers are copied, shared objects and the owner are kept."""
        duplicate = copy.copy(self)
        for name, value in vars(self).items():
            if isinstance(value, (list, dict, set)):
                setattr(duplicate, name, copy.copy(value))
        return duplicate

    def initialize(self) -> None:
        """Components need no preparation unless they override this."""

    @abstractmethod
    def update(self) -> None:
        """Advance the component by one frame."""

    @abstractmethod
    def read(self, value: Mapping) -> Any:
        """Read the component's settings from a JSON object."""


class Collision(ABC):
    """Receives notice when its actor starts or stops touching another."""

    @abstractmethod
    def on_collision_enter(self, other: Actor) -> None:
        """Called when contact with ``other`` begins."""

    @abstractmethod
    def on_collision_exit(self, other: Actor) -> None:
        """Called when contact with ``other`` ends."""