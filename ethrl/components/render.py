"""Base for components that draw their actor."""

from __future__ import annotations

import copy
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from ethrl.framework.component import Component
from ethrl.framework.resources import ResourceManager
from ethrl.maths.color import Rect
from ethrl.maths.vector2 import Vector2

if TYPE_CHECKING:
    from ethrl.renderer.renderer import Renderer


class RenderComponent(Component):
    """A component with a source rectangle, registration point and horizontal flip.

    ``resources`` is the shared resource cache and ``graphics`` the renderer that
    textures are created for.
    """

    resources: ClassVar[ResourceManager] = ResourceManager()
    graphics: ClassVar[Optional["Renderer"]] = None

    def __init__(self) -> None:
        super().__init__()
        self._source = Rect()
        self.registration = Vector2(0.5, 0.5)
        self.horizontal_flip = False

    @property
    def source(self) -> Rect:
        """The region of the texture that is drawn."""
        return self._source

    @source.setter
    def source(self, rect: Rect) -> None:
        self._source = rect

    def clone(self) -> RenderComponent:
        duplicate = super().clone()
        duplicate._source = copy.copy(self._source)
        return duplicate

    @abstractmethod
    def draw(self, renderer: Any) -> None:
        """Draw the owning actor with ``renderer``."""