"""Registration of the engine's built-in object types with the factory."""

from __future__ import annotations

from typing import Optional

from ethrl.components.audio_component import AudioComponent
from ethrl.components.camera import CameraComponent
from ethrl.components.model_component import ModelComponent
from ethrl.components.physics import PhysicsComponent
from ethrl.components.player import PlayerComponent
from ethrl.components.sprite import SpriteComponent
from ethrl.components.sprite_anim import SpriteAnimComponent
from ethrl.components.text_component import TextComponent
from ethrl.components.tilemap import TilemapComponent
from ethrl.framework.actor import Actor
from ethrl.framework.factory import Factory

_BUILTIN_TYPES = (
    Actor,
    AudioComponent,
    PhysicsComponent,
    PlayerComponent,
    ModelComponent,
    SpriteComponent,
    SpriteAnimComponent,
    TextComponent,
    TilemapComponent,
    CameraComponent,
)


def register_classes(factory: Optional[Factory] = None) -> None:
    """Register every built-in type under its class name."""
    target = factory if factory is not None else Factory.instance()
    for cls in _BUILTIN_TYPES:
        target.register(cls.__name__, cls)