"""A component that turns its actor into the camera the renderer looks through."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ethrl.components.render import RenderComponent
from ethrl.framework.component import Component
from ethrl.maths.mathutils import deg_to_rad
from ethrl.maths.matrix import Matrix3x3
from ethrl.maths.vector2 import Vector2
from ethrl.serialization import get_vector2


class CameraComponent(Component):
    """Builds view and viewport matrices and hands them to the renderer.

    ``renderer`` defaults to the renderer shared by render components.
    """

    def __init__(self) -> None:
        super().__init__()
        self.viewport_size = Vector2()
        self.view = Matrix3x3.identity()
        self.viewport = Matrix3x3.identity()
        self.renderer: Optional[Any] = None

    def _target(self) -> Optional[Any]:
        return self.renderer if self.renderer is not None else RenderComponent.graphics

    def initialize(self) -> None:
        self.set_viewport(self.viewport_size)

    def update(self) -> None:
        """Follow the owner: the view undoes its translation and rotation."""
        transform = self.owner.transform
        translation = Matrix3x3.create_translation(-transform.position)
        rotation = Matrix3x3.create_rotation(-deg_to_rad(transform.rotation))
        self.view = translation * rotation
        target = self._target()
        if target is not None:
            target.view = self.view

    def set_viewport(self, size: Vector2) -> None:
        """Centre the view in a viewport of ``size``."""
        self.viewport = Matrix3x3.create_translation(size * 0.5)
        target = self._target()
        if target is not None:
            target.viewport = self.viewport

    def read(self, value: Mapping) -> None:
        size = get_vector2(value, "ViewportSize")
        if size is not None:
            self.viewport_size = size