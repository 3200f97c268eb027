"""A component that plays a named sound for its actor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar

from ethrl.audio import AudioChannel, AudioSystem
from ethrl.framework.component import Component
from ethrl.serialization import get_bool, get_float, get_string


class AudioComponent(Component):
    """Plays ``sound_name`` through ``audio``, optionally as soon as it is initialized."""

    audio: ClassVar[AudioSystem] = AudioSystem()

    def __init__(self) -> None:
        super().__init__()
        self.channel = AudioChannel()
        self.sound_name = ""
        self.volume = 1.0
        self.pitch = 1.0
        self.play_on_start = False
        self.loop = False

    def initialize(self) -> None:
        if self.play_on_start:
            self.play()

    def update(self) -> None:
        """Playback needs no per-frame work."""

    def play(self) -> None:
        """Stop what this component is playing and start its sound again."""
        self.channel.stop()
        self.channel = self.audio.play_audio(self.sound_name, self.volume, self.pitch, self.loop)

    def stop(self) -> None:
        self.channel.stop()

    def read(self, value: Mapping) -> None:
        """Read the sound settings and load the sound file named by ``SoundName``."""
        name = get_string(value, "SoundName")
        if name is not None:
            self.sound_name = name
        volume = get_float(value, "Volume")
        if volume is not None:
            self.volume = volume
        pitch = get_float(value, "Pitch")
        if pitch is not None:
            self.pitch = pitch
        play_on_start = get_bool(value, "PlayOnStart")
        if play_on_start is not None:
            self.play_on_start = play_on_start
        loop = get_bool(value, "Loop")
        if loop is not None:
            self.loop = loop
        self.audio.add_audio(self.sound_name, self.sound_name)