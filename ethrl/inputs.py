"""Keyboard and mouse state, compared frame to frame."""

from __future__ import annotations

import enum
from typing import Iterable, Sequence, Tuple

import pygame

from ethrl.maths.vector2 import Vector2

KEY_SPACE = pygame.K_SPACE
KEY_W = pygame.K_w
KEY_S = pygame.K_s
KEY_A = pygame.K_a
KEY_D = pygame.K_d
KEY_ESCAPE = pygame.K_ESCAPE

BUTTON_LEFT = 0
BUTTON_MIDDLE = 1
BUTTON_RIGHT = 2

_BUTTON_COUNT = 3


class KeyState(enum.Enum):
    IDLE = 0
    PRESSED = 1
    HELD = 2
    RELEASED = 3


def _state(down: bool, previously_down: bool) -> KeyState:
    if down:
        return KeyState.HELD if previously_down else KeyState.PRESSED
    return KeyState.RELEASED if previously_down else KeyState.IDLE


class InputSystem:
    """Tracks which keys and mouse buttons are down this frame and the last."""

    def __init__(self) -> None:
        self._held: set = set()
        self._keys: frozenset = frozenset()
        self._prev_keys: frozenset = frozenset()
        self._buttons: Tuple[bool, ...] = (False,) * _BUTTON_COUNT
        self._prev_buttons: Tuple[bool, ...] = (False,) * _BUTTON_COUNT
        self.mouse_position = Vector2()

    def initialize(self) -> None:
        """Start with nothing pressed, this frame and the last."""
        self._held.clear()
        self._keys = self._prev_keys = frozenset()
        self._buttons = self._prev_buttons = (False,) * _BUTTON_COUNT

    def shutdown(self) -> None:
        """Forget every held key."""
        self._held.clear()

    def update(self) -> None:
        """Pump the pygame event queue and record the new keyboard and mouse state."""
        for event in pygame.event.get():
            if event.type == pygame.KEYDOWN:
                self._held.add(event.key)
            elif event.type == pygame.KEYUP:
                self._held.discard(event.key)
        self.apply_state(self._held, pygame.mouse.get_pressed(_BUTTON_COUNT), pygame.mouse.get_pos())

    def apply_state(self, keys: Iterable[int], buttons: Sequence[bool], position: Sequence[float]) -> None:
        """Move the current state to previous and take ``keys``, ``buttons`` and ``position`` as current."""
        buttons = tuple(bool(button) for button in buttons)
        if len(buttons) != _BUTTON_COUNT:
            raise ValueError(f"expected {_BUTTON_COUNT} mouse buttons, got {len(buttons)}")
        self._prev_keys, self._keys = self._keys, frozenset(keys)
        self._prev_buttons, self._buttons = self._buttons, buttons
        self.mouse_position = Vector2(*position)

    def get_key_state(self, key: int) -> KeyState:
        return _state(self.get_key_down(key), self.get_previous_key_down(key))

    def get_key_down(self, key: int) -> bool:
        return key in self._keys

    def get_previous_key_down(self, key: int) -> bool:
        return key in self._prev_keys

    def get_button_state(self, button: int) -> KeyState:
        return _state(self.get_button_down(button), self.get_previous_button_down(button))

    def get_button_down(self, button: int) -> bool:
        return self._buttons[button]

    def get_previous_button_down(self, button: int) -> bool:
        return self._prev_buttons[button]