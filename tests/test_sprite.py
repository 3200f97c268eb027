import pygame
import pytest

from ethrl.components.sprite import SpriteComponent
from ethrl.framework.actor import Actor
from ethrl.maths.color import Rect


def _image_file(tmp_path, size=(8, 4), name="sprite.bmp"):
    surface = pygame.Surface(size)
    surface.fill((0, 255, 0))
    path = tmp_path / name
    pygame.image.save(surface, str(path))
    return str(path)


class _Recorder:
    def __init__(self):
        self.calls = []

    def draw_region(self, *args):
        self.calls.append(args)


def test_read_defaults_source_to_whole_texture(tmp_path):
    sprite = SpriteComponent()
    sprite.read({"SpriteName": _image_file(tmp_path, (8, 4))})
    assert sprite.source == Rect(0, 0, 8, 4)


def test_read_uses_given_source(tmp_path):
    sprite = SpriteComponent()
    sprite.read({"SpriteName": _image_file(tmp_path), "source": [1, 2, 3, 4]})
    assert sprite.source == Rect(1, 2, 3, 4)


def test_same_name_shares_texture(tmp_path):
    path = _image_file(tmp_path)
    first, second = SpriteComponent(), SpriteComponent()
    first.read({"SpriteName": path})
    second.read({"SpriteName": path})
    assert first.texture is second.texture


def test_missing_texture_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SpriteComponent().read({"SpriteName": str(tmp_path / "nothing.png")})


def test_draw_passes_owner_transform(tmp_path):
    actor = Actor()
    sprite = SpriteComponent()
    sprite.read({"SpriteName": _image_file(tmp_path)})
    sprite.horizontal_flip = True
    actor.add_component(sprite)
    recorder = _Recorder()
    sprite.draw(recorder)
    assert recorder.calls == [(sprite.texture, sprite.source, actor.transform, sprite.registration, True)]