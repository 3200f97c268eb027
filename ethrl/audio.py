"""Sound loading and playback on pygame's mixer."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import pygame

from ethrl.core.logger import log

MAX_CHANNELS = 32


class AudioChannel:
    """A handle to a sound that may still be playing.

    The mixer plays sounds at their native rate, so ``pitch`` is kept as requested.
    """

    def __init__(self, channel: Optional[Any] = None, pitch: float = 1.0) -> None:
        self._channel = channel
        self.pitch = pitch

    def is_playing(self) -> bool:
        return self._channel is not None and bool(self._channel.get_busy())

    def stop(self) -> None:
        if self.is_playing():
            self._channel.stop()

    @property
    def volume(self) -> float:
        """Current volume, or 0 when nothing is playing."""
        return float(self._channel.get_volume()) if self.is_playing() else 0.0

    @volume.setter
    def volume(self, value: float) -> None:
        if self.is_playing():
            self._channel.set_volume(value)


class AudioSystem:
    """Loads sounds under names and plays them."""

    def __init__(self, loader: Optional[Callable[[str], Any]] = None) -> None:
        self._loader = loader if loader is not None else pygame.mixer.Sound
        self._sounds: Dict[str, Any] = {}

    def initialize(self) -> None:
        pygame.mixer.init()
        pygame.mixer.set_num_channels(MAX_CHANNELS)

    def shutdown(self) -> None:
        """Stop and forget every sound and close the mixer."""
        for sound in self._sounds.values():
            sound.stop()
        self._sounds.clear()
        if pygame.mixer.get_init():
            pygame.mixer.quit()

    def update(self) -> None:
        """Keep the event queue serviced so the mixer's end events do not pile up."""
        if pygame.mixer.get_init() and pygame.display.get_init():
            pygame.event.pump()

    def add_audio(self, name: str, filename: str) -> None:
        """Load ``filename`` under ``name`` unless that name is already taken."""
        if name in self._sounds:
            return
        try:
            sound = self._loader(filename)
        except (pygame.error, OSError):
            log("Error creating sound %s.", filename)
            return
        self._sounds[name] = sound

    def play_audio(self, name: str, volume: float = 1.0, pitch: float = 1.0, loop: bool = False) -> AudioChannel:
        """Play the sound ``name``; an idle channel is returned if it is unknown."""
        sound = self._sounds.get(name)
        if sound is None:
            log("Error could not find sound %s.", name)
            return AudioChannel()
        channel = sound.play(loops=-1 if loop else 0)
        if channel is not None:
            channel.set_volume(volume)
        return AudioChannel(channel, pitch)