"""
Pointer event source: pygame mouse events -> PointerEvent callbacks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame

from .input_config import debug_log

POINTER_DOWN = "pointerdown"
POINTER_UP = "pointerup"
POINTER_MOVE = "pointermove"
WHEEL = "wheel"

POINTER_EVENT_TYPES = (POINTER_DOWN, POINTER_UP, POINTER_MOVE, WHEEL)


@dataclass(frozen=True)
class PointerEvent:
    type: str
    x: float
    y: float
    button: int = 0
    wheel_x: float = 0.0
    wheel_y: float = 0.0


class Pointer:
    """Tracks the pointer position and held buttons, and fans events out to callbacks."""

    def __init__(self):
        self.x: float = 0.0
        self.y: float = 0.0
        self.buttons: set[int] = set()
        self._callbacks: dict[str, list[Callable[[PointerEvent], None]]] = {
            t: [] for t in POINTER_EVENT_TYPES
        }

    def register_pointer_event(self, event_type: str, callback: Callable[[PointerEvent], None]) -> None:
        if event_type not in self._callbacks:
            raise ValueError(f"unknown pointer event type: {event_type!r}")
        self._callbacks[event_type].append(callback)

    def release_pointer_event(self, event_type: str, callback: Callable[[PointerEvent], None] | None = None) -> None:
        """Remove one callback, or all callbacks for the type when callback is None."""
        if event_type not in self._callbacks:
            raise ValueError(f"unknown pointer event type: {event_type!r}")
        if callback is None:
            self._callbacks[event_type].clear()
        else:
            self._callbacks[event_type] = [cb for cb in self._callbacks[event_type] if cb is not callback]

    def _translate(self, event) -> PointerEvent | None:
        if event.type == pygame.MOUSEMOTION:
            self.x, self.y = event.pos
            return PointerEvent(POINTER_MOVE, self.x, self.y)
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.x, self.y = event.pos
            self.buttons.add(event.button)
            return PointerEvent(POINTER_DOWN, self.x, self.y, button=event.button)
        if event.type == pygame.MOUSEBUTTONUP:
            self.x, self.y = event.pos
            self.buttons.discard(event.button)
            return PointerEvent(POINTER_UP, self.x, self.y, button=event.button)
        # Pygame 2 mouse wheel event
        if hasattr(pygame, "MOUSEWHEEL") and event.type == pygame.MOUSEWHEEL:
            return PointerEvent(WHEEL, self.x, self.y, wheel_x=event.x, wheel_y=event.y)
        return None

    def handle_event(self, event) -> bool:
        """Returns True if at least one callback received the event."""
        pe = self._translate(event)
        if pe is None:
            return False
        callbacks = list(self._callbacks[pe.type])
        for cb in callbacks:
            cb(pe)
        if callbacks:
            debug_log(f"{pe.type} at ({pe.x}, {pe.y}) -> {len(callbacks)} callback(s)")
        return bool(callbacks)
