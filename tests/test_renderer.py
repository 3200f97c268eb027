import pygame
import pytest

from ethrl.maths.color import Color, Rect
from ethrl.maths.transform import Transform
from ethrl.maths.vector2 import Vector2
from ethrl.renderer.renderer import Renderer
from ethrl.renderer.texture import Texture

GREEN = (0, 255, 0, 255)


def _renderer(size=(20, 20)):
    renderer = Renderer(pygame.Surface(size))
    renderer.begin_frame()
    return renderer


def _square(size=4):
    surface = pygame.Surface((size, size))
    surface.fill(GREEN)
    return Texture(surface)


def test_size_taken_from_surface():
    renderer = Renderer(pygame.Surface((30, 10)))
    assert (renderer.width, renderer.height) == (30, 10)


def test_begin_frame_clears_with_clear_color():
    renderer = Renderer(pygame.Surface((5, 5)))
    renderer.clear_color = Color(100, 0, 0, 255)
    renderer.begin_frame()
    assert tuple(renderer.surface.get_at((2, 2))) == (100, 0, 0, 255)


def test_draw_point_sets_pixel():
    renderer = _renderer()
    renderer.draw_point(Vector2(3, 4), Color.BLUE)
    assert tuple(renderer.surface.get_at((3, 4))) == tuple(Color.BLUE)


def test_draw_line_colors_pixels_along_it():
    renderer = _renderer()
    renderer.draw_line(Vector2(2, 7), Vector2(12, 7), Color.RED)
    assert tuple(renderer.surface.get_at((2, 7))) == tuple(Color.RED)
    assert tuple(renderer.surface.get_at((12, 7))) == tuple(Color.RED)
    assert tuple(renderer.surface.get_at((7, 8))) == tuple(renderer.clear_color)


def test_draw_texture_centres_on_position():
    renderer = _renderer()
    renderer.draw_texture(_square(), Vector2(10, 10))
    assert tuple(renderer.surface.get_at((10, 10))) == GREEN
    assert tuple(renderer.surface.get_at((0, 0))) == tuple(renderer.clear_color)


def test_rotating_a_square_keeps_its_centre():
    renderer = _renderer()
    renderer.draw_texture(_square(), Vector2(10, 10), 90.0)
    assert tuple(renderer.surface.get_at((10, 10))) == GREEN


def test_draw_transform_scales():
    renderer = _renderer()
    renderer.draw_transform(_square(), Transform(position=Vector2(10, 10), scale=Vector2(2, 2)))
    assert tuple(renderer.surface.get_at((7, 7))) == GREEN
    assert tuple(renderer.surface.get_at((15, 15))) == tuple(renderer.clear_color)


@pytest.mark.parametrize("flip", [False, True])
def test_draw_region_flip(flip):
    surface = pygame.Surface((2, 1))
    surface.set_at((0, 0), Color.RED)
    surface.set_at((1, 0), Color.BLUE)
    transform = Transform(position=Vector2(5, 5))
    transform.update()
    renderer = _renderer()
    renderer.draw_region(Texture(surface), Rect(0, 0, 2, 1), transform, Vector2(0.5, 0.5), flip)
    left, right = (Color.BLUE, Color.RED) if flip else (Color.RED, Color.BLUE)
    assert tuple(renderer.surface.get_at((4, 4))) == tuple(left)
    assert tuple(renderer.surface.get_at((5, 4))) == tuple(right)


def test_drawing_without_target_raises():
    with pytest.raises(RuntimeError):
        Renderer().draw_point(Vector2(0, 0), Color.WHITE)


def test_drawing_empty_texture_raises():
    with pytest.raises(ValueError):
        _renderer().draw_texture(Texture(), Vector2(1, 1))