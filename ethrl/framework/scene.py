"""The collection of live actors that make up a level."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, List, Optional, Type, TypeVar

from ethrl.framework.actor import Actor
from ethrl.framework.factory import Factory, GameObject
from ethrl.serialization import Serializable, get_bool, get_string

if TYPE_CHECKING:
    from ethrl.framework.game import Game

A = TypeVar("A")


class Scene(GameObject, Serializable):
    """Owns actors, updates and draws them, and drops destroyed ones."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game
        self.actors: List[Actor] = []

    def clone(self) -> Scene:
        """An empty scene for the same game."""
        return Scene(self.game)

    def initialize(self) -> None:
        # Actors added while initializing are initialized too.
        for actor in self.actors:
            actor.initialize()

    def update(self) -> None:
        """Update every actor and remove those that ended up destroyed."""
        kept = []
        for actor in self.actors:
            actor.update()
            if not actor.destroyed:
                kept.append(actor)
        self.actors = kept

    def draw(self, renderer: Any) -> None:
        for actor in self.actors:
            actor.draw(renderer)

    def read(self, value: Mapping) -> None:
        """Create the actors listed under ``actors``; prefabs go to the factory."""
        actors = value.get("actors") if isinstance(value, Mapping) else None
        if not isinstance(actors, list):
            raise ValueError("scene document has no 'actors' array")
        factory = Factory.instance()
        for actor_value in actors:
            kind = get_string(actor_value, "type") or ""
            actor = factory.create(kind)
            if not isinstance(actor, Actor):
                continue
            actor.read(actor_value)
            if get_bool(actor_value, "prefab"):
                factory.register_prefab(actor.name, actor)
            else:
                self.add(actor)

    def add(self, actor: Actor) -> None:
        actor.scene = self
        self.actors.append(actor)

    def remove_all(self) -> None:
        for actor in self.actors:
            actor.destroy()
        self.actors.clear()

    def get_actor(self, actor_type: Type[A]) -> Optional[A]:
        """The first actor that is an instance of ``actor_type``."""
        return next((a for a in self.actors if isinstance(a, actor_type)), None)

    def get_actor_from_name(self, name: str) -> Optional[Actor]:
        return next((a for a in self.actors if a.name == name), None)

    def get_actors_from_tag(self, tag: str) -> List[Actor]:
        return [a for a in self.actors if a.tag == tag]