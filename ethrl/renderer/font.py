"""TrueType fonts that render text onto surfaces."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import pygame

from ethrl.core.logger import log
from ethrl.framework.resources import Resource
from ethrl.maths.color import Color


class Font(Resource):
    """A font at one point size; a filename of None selects pygame's default font."""

    def __init__(self, filename: Optional[str] = None, font_size: Optional[int] = None) -> None:
        self._font: Optional[pygame.font.Font] = None
        if font_size is not None:
            self.load(filename, font_size)

    def create(self, name: str, *args: Any) -> None:
        """Load the font file ``name``; the first argument is the point size."""
        if not args:
            raise TypeError("Font.create needs a font size")
        self.load(name, int(args[0]))

    def create_surface(self, text: str, color: Color) -> pygame.Surface:
        """Render ``text`` without anti-aliasing in ``color``."""
        if self._font is None:
            raise RuntimeError("font is not loaded")
        return self._font.render(text, False, tuple(color))

    def load(self, filename: Optional[str], font_size: int) -> None:
        """Open ``filename`` at ``font_size``; raises FileNotFoundError or ValueError."""
        if not pygame.font.get_init():
            pygame.font.init()
        if filename is not None and not Path(filename).is_file():
            log("Error could not load font %s", str(filename))
            raise FileNotFoundError(f"no such font: {filename}")
        try:
            self._font = pygame.font.Font(filename, font_size)
        except (pygame.error, OSError) as error:
            log("Font error: %s", str(error))
            raise ValueError(f"cannot read font {filename}: {error}") from error