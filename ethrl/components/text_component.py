"""A component that renders a line of text for its actor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ethrl.components.render import RenderComponent
from ethrl.maths.color import Color
from ethrl.maths.vector2 import Vector2
from ethrl.renderer.font import Font
from ethrl.renderer.texture import Texture
from ethrl.serialization import get_color, get_int, get_string, get_vector2


class TextComponent(RenderComponent):
    """Renders ``text`` in ``font_name`` at ``font_size`` into a texture."""

    def __init__(self) -> None:
        super().__init__()
        self.text = ""
        self.font_name = ""
        self.font_size = 0
        self.registration = Vector2()
        self.color = Color.WHITE
        self.font: Optional[Font] = None
        self.texture: Optional[Texture] = None

    def update(self) -> None:
        """Text only changes through :meth:`set_text`."""

    def draw(self, renderer: Any) -> None:
        renderer.draw_transform(self.texture, self.owner.transform, self.registration)

    def set_text(self, text: str) -> None:
        """Render ``text`` into this component's texture."""
        if self.font is None:
            raise RuntimeError("text component has no font")
        if self.texture is None:
            self.texture = Texture()
        self.texture.create_from_surface(self.font.create_surface(text, self.color), self.graphics)
        self.text = text

    def read(self, value: Mapping) -> None:
        """Read text, font and colour settings, then render the text."""
        text = get_string(value, "Text")
        if text is not None:
            self.text = text
        font_name = get_string(value, "FontName")
        if font_name is not None:
            self.font_name = font_name
        font_size = get_int(value, "FontSize")
        if font_size is not None:
            self.font_size = font_size
        registration = get_vector2(value, "Registration")
        if registration is not None:
            self.registration = registration
        color = get_color(value, "color")
        if color is not None:
            self.color = color

        font = self.resources.get(self.font_name, Font, self.font_size)
        if font is None:
            raise ValueError(f"resource {self.font_name!r} is not a font")
        self.font = font
        self.texture = Texture()
        self.set_text(self.text)