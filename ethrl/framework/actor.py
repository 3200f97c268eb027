"""An entity in a scene: a transform with components and child actors."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, List, Optional, Type, TypeVar

from ethrl.core.clock import Time
from ethrl.framework.component import Component
from ethrl.framework.factory import Factory, GameObject
from ethrl.maths.transform import Transform
from ethrl.serialization import Serializable, get_bool, get_float, get_string

if TYPE_CHECKING:
    from ethrl.framework.scene import Scene

C = TypeVar("C")


class Actor(GameObject, Serializable):
    """A named, tagged object whose behaviour comes from its components."""

    clock: ClassVar[Time] = Time()

    def __init__(self, transform: Optional[Transform] = None, name: str = "", tag: str = "") -> None:
        self.transform = transform if transform is not None else Transform()
        self.name = name
        self.tag = tag
        self.lifespan = 0.0
        self.active = True
        self.destroyed = False
        self.scene: Optional[Scene] = None
        self.parent: Optional[Actor] = None
        self.components: List[Component] = []
        self.children: List[Actor] = []

    def clone(self) -> Actor:
        """Copy name, tag, lifespan, transform, scene and clones of the components."""
        duplicate = Actor(copy.copy(self.transform), self.name, self.tag)
        duplicate.lifespan = self.lifespan
        duplicate.scene = self.scene
        for component in self.components:
            duplicate.add_component(component.clone())
        return duplicate

    def initialize(self) -> None:
        for component in self.components:
            component.initialize()
        for child in self.children:
            child.initialize()

    def update(self) -> None:
        """Count down the lifespan, update components and children, refresh the matrix."""
        if not self.active:
            return
        if self.lifespan != 0:
            self.lifespan -= self.clock.delta_time
            if self.lifespan <= 0:
                self.destroy()
        for component in self.components:
            component.update()
        for child in self.children:
            child.update()
        self.transform.update(self.parent.transform.matrix if self.parent is not None else None)

    def draw(self, renderer: Any) -> None:
        """Draw every component that can draw itself, then the children."""
        if not self.active:
            return
        for component in self.components:
            draw = getattr(component, "draw", None)
            if callable(draw):
                draw(renderer)
        for child in self.children:
            child.draw(renderer)

    def read(self, value: Mapping) -> None:
        """Read identity, transform and components created through the factory."""
        tag = get_string(value, "tag")
        if tag is not None:
            self.tag = tag
        name = get_string(value, "name")
        if name is not None:
            self.name = name
        active = get_bool(value, "m_Active")
        if active is not None:
            self.active = active
        lifespan = get_float(value, "LifeSpan")
        if lifespan is not None:
            self.lifespan = lifespan

        transform = value.get("transform")
        if transform is not None:
            self.transform.read(transform)

        components = value.get("components")
        if isinstance(components, list):
            for component_value in components:
                kind = get_string(component_value, "type") or ""
                component = Factory.instance().create(kind)
                if isinstance(component, Component):
                    component.read(component_value)
                    self.add_component(component)

    def add_child(self, child: Actor) -> None:
        child.parent = self
        child.scene = self.scene
        self.children.append(child)

    def add_component(self, component: Component) -> None:
        component.owner = self
        self.components.append(component)

    def get_component(self, component_type: Type[C]) -> Optional[C]:
        """The first component that is an instance of ``component_type``."""
        return next((c for c in self.components if isinstance(c, component_type)), None)

    def destroy(self) -> None:
        """Mark the actor for removal from its scene."""
        self.destroyed = True