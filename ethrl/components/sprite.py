"""A component drawing a single texture region for its actor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ethrl.components.render import RenderComponent
from ethrl.maths.color import Rect
from ethrl.renderer.texture import Texture
from ethrl.serialization import get_rect, get_string


class SpriteComponent(RenderComponent):
    """Draws ``texture`` (or its ``source`` region) at the owner's transform."""

    def __init__(self) -> None:
        super().__init__()
        self.texture: Optional[Texture] = None

    def update(self) -> None:
        """Sprites are static."""

    def draw(self, renderer: Any) -> None:
        renderer.draw_region(self.texture, self.source, self.owner.transform,
                             self.registration, self.horizontal_flip)

    def read(self, value: Mapping) -> None:
        """Load ``SpriteName``; ``source`` defaults to the whole texture."""
        name = get_string(value, "SpriteName") or ""
        texture = self.resources.get(name, Texture, self.graphics)
        if texture is None:
            raise ValueError(f"resource {name!r} is not a texture")
        self.texture = texture
        source = get_rect(value, "source")
        if source is None:
            size = texture.size
            source = Rect(0, 0, int(size.x), int(size.y))
        self.source = source