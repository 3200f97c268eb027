"""Images that can be drawn by the renderer."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import pygame

from ethrl.core.logger import log
from ethrl.framework.resources import Resource
from ethrl.maths.vector2 import Vector2


class Texture(Resource):
    """A pygame surface loaded from an image file or built from another surface."""

    def __init__(self, surface: Optional[pygame.Surface] = None) -> None:
        self.surface = surface

    def create(self, name: str, *args: Any) -> None:
        """Load the image file ``name``; the optional first argument is the renderer."""
        renderer = args[0] if args else None
        self.load(name, renderer)

    def create_from_surface(self, surface: Optional[pygame.Surface], renderer: Any = None) -> None:
        """Take ``surface`` as this texture's image."""
        if surface is None:
            log("Error creating texture from an empty surface")
            raise ValueError("cannot create a texture from no surface")
        self.surface = surface

    def load(self, filename: str, renderer: Any = None) -> None:
        """Load ``filename``; raises FileNotFoundError or ValueError on failure."""
        if not filename or not Path(filename).is_file():
            log("Error could not load texture %s", str(filename))
            raise FileNotFoundError(f"no such image: {filename}")
        try:
            surface = pygame.image.load(filename)
        except pygame.error as error:
            log("%s", str(error))
            raise ValueError(f"cannot read image {filename}: {error}") from error
        if pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self.surface = surface

    @property
    def size(self) -> Vector2:
        """Width and height in pixels; zero when nothing is loaded."""
        if self.surface is None:
            return Vector2(0, 0)
        width, height = self.surface.get_size()
        return Vector2(width, height)