"""The side-scrolling game: title screen, levels of enemies and coins, lives and score."""

from __future__ import annotations

import enum
from typing import Any, Iterable, Optional, Sequence

from ethrl.components.character import CharacterComponent
from ethrl.components.player import PlayerComponent
from ethrl.components.text_component import TextComponent
from ethrl.core.clock import Time
from ethrl.core.logger import log
from ethrl.framework.actor import Actor
from ethrl.framework.events import Event, EventManager, Notifiable
from ethrl.framework.factory import Factory
from ethrl.framework.game import Game
from ethrl.framework.scene import Scene
from ethrl.game.enemy import EnemyComponent
from ethrl.inputs import KEY_SPACE, InputSystem, KeyState
from ethrl.maths.randomness import random_float
from ethrl.maths.vector2 import Vector2
from ethrl.serialization import JsonLoadError, load

SCENE_NAMES = ("Scenes/Prefabs.txt", "Scenes/Tilemap.txt", "Scenes/Level.txt")

# (prefab, count, lowest x, highest x, y)
LEVEL_SPAWNS = (
    ("Coin", 10, 150, 1250, 100.0),
    ("Ghost", 3, 150, 800, 100.0),
    ("Coin", 5, 500, 1000, 1150.0),
    ("Bat", 2, 400, 900, 900.0),
    ("Demon", 2, 500, 900, 1000.0),
    ("Boss", 2, 800, 1500, 2000.0),
)

LIVES = 3
DEATH_DELAY = 3.0


class GameState(enum.Enum):
    TITLE_SCREEN = enum.auto()
    START_LEVEL = enum.auto()
    GAME = enum.auto()
    PLAYER_DEATH = enum.auto()
    GAME_OVER = enum.auto()


class TheGame(Game, Notifiable):
    """Loads the scene files, spawns each level and keeps score and lives."""

    def __init__(
        self,
        scene_names: Iterable[str] = SCENE_NAMES,
        events: Optional[EventManager] = None,
        inputs: Optional[InputSystem] = None,
        clock: Optional[Time] = None,
        factory: Optional[Factory] = None,
    ) -> None:
        super().__init__()
        self.scene_names: Sequence[str] = tuple(scene_names)
        self.events = events if events is not None else CharacterComponent.events
        self.inputs = inputs if inputs is not None else PlayerComponent.inputs
        self.clock = clock if clock is not None else Actor.clock
        self.factory = factory if factory is not None else Factory.instance()
        self.state = GameState.TITLE_SCREEN
        self.state_timer = 0.0
        self.lives = LIVES

    def initialize(self) -> None:
        """Read every scene file that can be loaded and listen for game events."""
        self.factory.register("EnemyComponent", EnemyComponent)
        self.scene = Scene(self)
        for name in self.scene_names:
            try:
                document = load(name)
            except (JsonLoadError, OSError, ValueError):
                log("Could not load scene %s", name)
                continue
            try:
                self.scene.read(document)
            except ValueError:
                log("Could not read scene %s", name)
        self.scene.initialize()
        self.events.subscribe("EVENT_ADD_POINTS", self.on_notify, None)
        self.events.subscribe("EVENT_PLAYER_DEAD", self.on_notify, None)

    def shutdown(self) -> None:
        if self.scene is not None:
            self.scene.remove_all()

    def _spawn_level(self) -> None:
        for prefab, count, low, high, y in LEVEL_SPAWNS:
            for _ in range(count):
                actor = self.factory.create(prefab)
                if not isinstance(actor, Actor):
                    continue
                actor.transform.position = Vector2(random_float(low, high), y)
                actor.initialize()
                self.scene.add(actor)

    def update(self) -> None:
        """Advance the state machine, then the scene."""
        if self.state is GameState.TITLE_SCREEN:
            if self.inputs.get_key_state(KEY_SPACE) == KeyState.PRESSED:
                title = self.scene.get_actor_from_name("Title")
                if title is not None:
                    title.active = False
                self.state = GameState.START_LEVEL
        elif self.state is GameState.START_LEVEL:
            self._spawn_level()
            self.state = GameState.GAME
        elif self.state is GameState.GAME:
            score = self.scene.get_actor_from_name("Score")
            text = score.get_component(TextComponent) if score is not None else None
            if text is not None:
                text.set_text(str(self.score))
        elif self.state is GameState.PLAYER_DEATH:
            self.state_timer -= self.clock.delta_time
            if self.state_timer:
                self.state = GameState.START_LEVEL if self.lives > 0 else GameState.GAME_OVER
        self.scene.update()

    def draw(self, renderer: Any) -> None:
        self.scene.draw(renderer)

    def on_add_points(self, event: Event) -> None:
        self.add_points(int(event.data))
        log("%s", event.name)
        log("%d", self.score)

    def on_player_death(self, event: Event) -> None:
        self.state = GameState.PLAYER_DEATH
        self.lives -= 1
        self.state_timer = DEATH_DELAY

    def on_notify(self, event: Event) -> None:
        if event.name == "EVENT_ADD_POINTS":
            self.add_points(int(event.data))
            log("%d", self.score)
        if event.name == "EVENT_PLAYER_DEAD":
            self.on_player_death(event)