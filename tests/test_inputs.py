from unittest import mock

import pygame
import pytest

from ethrl.inputs import BUTTON_LEFT, BUTTON_RIGHT, KEY_SPACE, KEY_W, InputSystem, KeyState
from ethrl.maths.vector2 import Vector2

UP = (False, False, False)
LEFT_DOWN = (True, False, False)


@pytest.fixture
def inputs():
    system = InputSystem()
    system.initialize()
    return system


def test_key_idle_initially(inputs):
    assert inputs.get_key_state(KEY_SPACE) is KeyState.IDLE


def test_key_pressed_then_held_then_released(inputs):
    inputs.apply_state({KEY_SPACE}, UP, (0, 0))
    assert inputs.get_key_state(KEY_SPACE) is KeyState.PRESSED
    inputs.apply_state({KEY_SPACE}, UP, (0, 0))
    assert inputs.get_key_state(KEY_SPACE) is KeyState.HELD
    inputs.apply_state(set(), UP, (0, 0))
    assert inputs.get_key_state(KEY_SPACE) is KeyState.RELEASED
    inputs.apply_state(set(), UP, (0, 0))
    assert inputs.get_key_state(KEY_SPACE) is KeyState.IDLE


def test_key_down_and_previous(inputs):
    inputs.apply_state({KEY_W}, UP, (0, 0))
    inputs.apply_state(set(), UP, (0, 0))
    assert inputs.get_key_down(KEY_W) is False
    assert inputs.get_previous_key_down(KEY_W) is True


def test_button_states(inputs):
    inputs.apply_state(set(), LEFT_DOWN, (0, 0))
    assert inputs.get_button_state(BUTTON_LEFT) is KeyState.PRESSED
    assert inputs.get_button_state(BUTTON_RIGHT) is KeyState.IDLE
    inputs.apply_state(set(), LEFT_DOWN, (0, 0))
    assert inputs.get_button_state(BUTTON_LEFT) is KeyState.HELD
    inputs.apply_state(set(), UP, (0, 0))
    assert inputs.get_button_state(BUTTON_LEFT) is KeyState.RELEASED


def test_mouse_position_recorded(inputs):
    inputs.apply_state(set(), UP, (12, 34))
    assert inputs.mouse_position == Vector2(12, 34)


def test_wrong_button_count_rejected(inputs):
    with pytest.raises(ValueError):
        inputs.apply_state(set(), (True,), (0, 0))


def test_unknown_button_raises(inputs):
    with pytest.raises(IndexError):
        inputs.get_button_down(5)


def test_update_reads_pygame_events_and_mouse(inputs):
    events = [pygame.event.Event(pygame.KEYDOWN, key=KEY_SPACE)]
    with mock.patch("pygame.event.get", return_value=events), mock.patch(
        "pygame.mouse.get_pressed", return_value=LEFT_DOWN
    ), mock.patch("pygame.mouse.get_pos", return_value=(7, 9)):
        inputs.update()
    assert inputs.get_key_state(KEY_SPACE) is KeyState.PRESSED
    assert inputs.get_button_down(BUTTON_LEFT) is True
    assert inputs.mouse_position == Vector2(7, 9)


def test_update_key_up_releases(inputs):
    with mock.patch("pygame.mouse.get_pressed", return_value=UP), mock.patch(
        "pygame.mouse.get_pos", return_value=(0, 0)
    ):
        with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.KEYDOWN, key=KEY_W)]):
            inputs.update()
        with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.KEYUP, key=KEY_W)]):
            inputs.update()
    assert inputs.get_key_state(KEY_W) is KeyState.RELEASED