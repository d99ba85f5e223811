"""
Gamepad event source: joystick buttons are forwarded to the keyboard as bound keys,
so gameplay only has to check keyboard actions.

Gamepads are identified by their pygame *instance id* (what JOYBUTTON* and
JOYDEVICEREMOVED report), not by the device index JOYDEVICEADDED carries.
"""
from __future__ import annotations

import pygame

from .input_config import debug_log
from .keyboard import Keyboard


def _instance_id(event) -> int:
    # pygame 2 reports instance_id; legacy joystick events only carry joy.
    if hasattr(event, "instance_id"):
        return int(event.instance_id)
    return int(getattr(event, "joy", 0))


class Gamepads:
    def __init__(self, keyboard: Keyboard):
        self.keyboard = keyboard
        # instance id -> pygame Joystick (kept open so pygame keeps sending its events)
        self._joysticks: dict[int, object] = {}
        self._bindings: dict[tuple[int, int], int] = {}

    @property
    def connected(self) -> set[int]:
        """Instance ids of the gamepads currently plugged in."""
        return set(self._joysticks)

    def bind_gamepad(self, index: int, button: int, key: int) -> None:
        """Make `button` on the gamepad with instance id `index` act as keyboard `key`."""
        self._bindings[(int(index), int(button))] = int(key)
        debug_log(f"bind gamepad {index} button {button} -> key {key}")

    def unbind_gamepad(self, index: int, button: int) -> None:
        self._bindings.pop((int(index), int(button)), None)

    def _on_added(self, event) -> None:
        try:
            joystick = pygame.joystick.Joystick(event.device_index)
        except pygame.error as e:
            debug_log(f"gamepad at device index {event.device_index} could not be opened: {e}")
            return
        instance_id = int(joystick.get_instance_id())
        self._joysticks[instance_id] = joystick
        debug_log(f"gamepad {instance_id} connected (device index {event.device_index})")

    def handle_event(self, event) -> bool:
        if event.type == pygame.JOYDEVICEADDED:
            self._on_added(event)
            return False
        if event.type == pygame.JOYDEVICEREMOVED:
            instance_id = _instance_id(event)
            self._joysticks.pop(instance_id, None)
            debug_log(f"gamepad {instance_id} disconnected")
            return False
        if event.type in (pygame.JOYBUTTONDOWN, pygame.JOYBUTTONUP):
            key = self._bindings.get((_instance_id(event), int(event.button)))
            if key is None:
                return False
            return self.keyboard.trigger_key_event(key, event.type == pygame.JOYBUTTONDOWN)
        return False
