"""A piece of text rendered once and drawn at a screen position."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import pygame

from ethrl.maths.color import Color
from ethrl.maths.vector2 import Vector2
from ethrl.renderer.font import Font

if TYPE_CHECKING:
    from ethrl.renderer.renderer import Renderer


class Text:
    """Text rendered with a font and kept as a surface."""

    def __init__(self, font: Optional[Font] = None) -> None:
        self.font = font
        self.surface: Optional[pygame.Surface] = None

    def create(self, renderer: Any, text: str, color: Color) -> None:
        """Render ``text`` in ``color`` with this text's font."""
        if self.font is None:
            raise ValueError("text has no font")
        self.surface = self.font.create_surface(text, color)

    def draw(self, renderer: Renderer, position: Vector2) -> None:
        """Draw the rendered text with its top-left corner at ``position``."""
        if self.surface is None:
            raise RuntimeError("text has not been created")
        if renderer.surface is None:
            raise RuntimeError("renderer has no target surface")
        renderer.surface.blit(self.surface, (int(position.x), int(position.y)))