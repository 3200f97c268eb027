"""Start the game in a window and run it until Escape is pressed."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from ethrl.components.audio_component import AudioComponent
from ethrl.components.character import CharacterComponent
from ethrl.components.player import PlayerComponent
from ethrl.components.render import RenderComponent
from ethrl.core.files import set_file_path
from ethrl.engine import register_classes
from ethrl.framework.actor import Actor
from ethrl.framework.factory import Factory
from ethrl.game.the_game import TheGame
from ethrl.inputs import KEY_ESCAPE, KeyState
from ethrl.maths.color import Color
from ethrl.renderer.renderer import Renderer

WINDOW_TITLE = "Neumont"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="ethrl", description="Run the game.")
    parser.add_argument("--assets", default="../Assets", help="directory holding the game's assets")
    args = parser.parse_args(argv)

    set_file_path(args.assets)

    renderer = Renderer()
    inputs = PlayerComponent.inputs
    audio = AudioComponent.audio
    resources = RenderComponent.resources
    events = CharacterComponent.events
    clock = Actor.clock
    factory = Factory.instance()

    renderer.initialize()
    inputs.initialize()
    audio.initialize()
    resources.initialize()
    events.initialize()

    register_classes(factory)

    renderer.create_window(WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, False)
    renderer.clear_color = Color(100, 0, 0, 255)
    RenderComponent.graphics = renderer

    game = TheGame(events=events, inputs=inputs, clock=clock, factory=factory)
    try:
        game.initialize()
        quit_requested = False
        while not quit_requested:
            clock.tick()
            inputs.update()
            audio.update()
            events.update()

            if inputs.get_key_state(KEY_ESCAPE) == KeyState.PRESSED:
                quit_requested = True

            game.update()

            renderer.begin_frame()
            game.draw(renderer)
            renderer.end_frame()
    finally:
        game.shutdown()
        factory.shutdown()
        events.shutdown()
        audio.shutdown()
        renderer.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())