"""A component that draws a line model at its actor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ethrl.components.render import RenderComponent
from ethrl.renderer.model import Model
from ethrl.serialization import get_string


class ModelComponent(RenderComponent):
    """Draws ``model`` through the owner's transform."""

    def __init__(self) -> None:
        super().__init__()
        self.model: Optional[Model] = None

    def update(self) -> None:
        """Models are static."""

    def draw(self, renderer: Any) -> None:
        if self.model is not None:
            self.model.draw(renderer, self.owner.transform)

    def read(self, value: Mapping) -> None:
        """Load the model file named by ``model_name``."""
        name = get_string(value, "model_name") or ""
        model = self.resources.get(name, Model)
        if model is None:
            raise ValueError(f"resource {name!r} is not a model")
        self.model = model