"""Drawing onto a window or any pygame surface."""

from __future__ import annotations

from typing import Optional

import pygame

from ethrl.maths.color import Color, Rect
from ethrl.maths.mathutils import deg_to_rad, rad_to_deg
from ethrl.maths.matrix import Matrix3x3
from ethrl.maths.transform import Transform
from ethrl.maths.vector2 import Vector2
from ethrl.renderer.texture import Texture


def _image(texture: Texture) -> pygame.Surface:
    if texture.surface is None:
        raise ValueError("texture has no image")
    return texture.surface


class Renderer:
    """Draws textures, lines and points; angles are in degrees, clockwise."""

    def __init__(self, surface: Optional[pygame.Surface] = None) -> None:
        self.surface = surface
        self.width = surface.get_width() if surface is not None else 0
        self.height = surface.get_height() if surface is not None else 0
        self.clear_color = Color(0, 0, 0, 255)
        self.view = Matrix3x3.identity()
        self.viewport = Matrix3x3.identity()

    def initialize(self) -> None:
        self.view = Matrix3x3.identity()
        self.viewport = Matrix3x3.identity()
        pygame.display.init()
        pygame.font.init()

    def shutdown(self) -> None:
        self.surface = None
        pygame.font.quit()
        pygame.display.quit()

    def create_window(self, name: str, width: int, height: int, fullscreen: bool = False) -> None:
        self.width = width
        self.height = height
        flags = pygame.FULLSCREEN if fullscreen else pygame.RESIZABLE
        self.surface = pygame.display.set_mode((width, height), flags)
        pygame.display.set_caption(name)

    def _target(self) -> pygame.Surface:
        if self.surface is None:
            raise RuntimeError("no render target; create a window first")
        return self.surface

    def begin_frame(self) -> None:
        self._target().fill(tuple(self.clear_color))

    def end_frame(self) -> None:
        if self.surface is not None and self.surface is pygame.display.get_surface():
            pygame.display.flip()

    def _blit(self, image: pygame.Surface, topleft: Vector2, size: Vector2, origin: Vector2,
              angle: float, flip: bool = False) -> None:
        target = self._target()
        width, height = int(size.x), int(size.y)
        if width <= 0 or height <= 0:
            return
        if image.get_size() != (width, height):
            image = pygame.transform.scale(image, (width, height))
        if flip:
            image = pygame.transform.flip(image, True, False)
        left, top = int(topleft.x), int(topleft.y)
        if angle == 0:
            target.blit(image, (left, top))
            return
        pivot_local = Vector2(int(origin.x), int(origin.y))
        pivot = Vector2(left, top) + pivot_local
        offset = Vector2.rotate(Vector2(width / 2, height / 2) - pivot_local, deg_to_rad(angle))
        rotated = pygame.transform.rotate(image, -angle)
        center = pivot + offset
        rotated_width, rotated_height = rotated.get_size()
        target.blit(rotated, (int(center.x - rotated_width / 2), int(center.y - rotated_height / 2)))

    def draw_texture(self, texture: Texture, position: Vector2, angle: float = 0.0,
                     scale: Vector2 = Vector2(1, 1), registration: Vector2 = Vector2(0.5, 0.5)) -> None:
        """Draw the whole texture centred on ``position``."""
        size = texture.size * scale
        self._blit(_image(texture), position - size * 0.5, size, size * registration, angle)

    def draw_transform(self, texture: Texture, transform: Transform,
                       registration: Vector2 = Vector2(0.5, 0.5)) -> None:
        """Draw the whole texture at the transform's position, rotation and scale."""
        size = texture.size * transform.scale
        self._blit(_image(texture), transform.position - size * 0.5, size, size * registration,
                   transform.rotation)

    def draw_region(self, texture: Texture, source: Rect, transform: Transform,
                    registration: Vector2 = Vector2(0.5, 0.5), flip_h: bool = False) -> None:
        """Draw part of a texture through the viewport, view and the transform's matrix."""
        image = _image(texture)
        area = pygame.Rect(source.x, source.y, source.w, source.h).clip(image.get_rect())
        if area.width == 0 or area.height == 0:
            return
        matrix = self.viewport * self.view * transform.matrix
        size = Vector2(source.w, source.h) * matrix.get_scale()
        origin = size * registration
        self._blit(image.subsurface(area), matrix.get_translation() - origin, size, origin,
                   rad_to_deg(matrix.get_rotation()), flip_h)

    def draw_line(self, start: Vector2, end: Vector2, color: Color = Color.WHITE) -> None:
        pygame.draw.line(self._target(), tuple(color), (start.x, start.y), (end.x, end.y))

    def draw_point(self, point: Vector2, color: Color = Color.WHITE) -> None:
        self._target().set_at((int(point.x), int(point.y)), tuple(color))