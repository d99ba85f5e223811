"""
Routes pygame events to the input sources.

If a source handles an event and the config says prevent_default, the engine's
fallback handler (window close, debug keys, ...) does not see it.
"""
from __future__ import annotations

from typing import Callable, Iterable, Optional

import pygame

from .gamepad import Gamepads
from .input_config import InputConfig, debug_log
from .keyboard import Keyboard
from .pointer import Pointer


class InputDispatcher:
    def __init__(
        self,
        config: InputConfig,
        pointer: Optional[Pointer] = None,
        keyboard: Optional[Keyboard] = None,
        gamepads: Optional[Gamepads] = None,
        default_handler: Optional[Callable] = None,
    ):
        self.config = config
        self.pointer = pointer or Pointer()
        self.keyboard = keyboard or Keyboard()
        self.gamepads = gamepads or Gamepads(self.keyboard)
        self.default_handler = default_handler

    def dispatch(self, event) -> bool:
        """Offer one event to every source. Returns True if any source handled it."""
        handled = False
        for source in (self.pointer, self.keyboard, self.gamepads):
            if source.handle_event(event):
                handled = True

        if handled and self.config.prevent_default:
            debug_log(f"default suppressed for event type {event.type}", self.config)
            return handled
        if self.default_handler is not None:
            self.default_handler(event)
        return handled

    def pump(self, events: Optional[Iterable] = None) -> int:
        """Dispatch a batch (pygame's queue by default). Returns how many were handled."""
        if events is None:
            events = pygame.event.get()
        return sum(1 for event in events if self.dispatch(event))
