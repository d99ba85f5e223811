"""
Keyboard event source: maps pygame key codes to named actions.
"""
from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from .input_config import debug_log


@dataclass
class _ActionState:
    lock: bool = False
    locked: bool = False
    # Physical keys currently held for this action (several keys may share one action).
    held: set = field(default_factory=set)


class Keyboard:
    """
    Tracks which bound actions are pressed.

    Usage:
        kb.bind_key(pygame.K_LEFT, "left")
        kb.bind_key(pygame.K_SPACE, "jump", lock=True)
        ...
        if kb.is_key_pressed("jump"):
            ...
    """

    def __init__(self):
        self._bindings: dict[int, str] = {}
        self._actions: dict[str, _ActionState] = {}

    def bind_key(self, key: int, action: str, lock: bool | None = None) -> None:
        """
        Bind a key to an action.

        With lock=True, is_key_pressed() reports the action once per physical press.
        lock=None keeps the action's current lock setting (off for a new action).
        """
        key = int(key)
        if self._bindings.get(key, action) != action:
            self.unbind_key(key)
        self._bindings[key] = action
        state = self._actions.setdefault(action, _ActionState())
        if lock is not None:
            state.lock = bool(lock)
            if not state.lock:
                state.locked = False
        debug_log(f"bind key {key} -> {action!r} (lock={state.lock})")

    def unbind_key(self, key: int) -> None:
        action = self._bindings.pop(int(key), None)
        if action is None:
            return
        state = self._actions.get(action)
        if state is not None:
            state.held.discard(int(key))
            if not state.held:
                state.locked = False
            if action not in self._bindings.values():
                del self._actions[action]
        debug_log(f"unbind key {key} ({action!r})")

    def get_bound_key_action(self, key: int) -> str | None:
        return self._bindings.get(int(key))

    def key_status(self, action: str) -> bool:
        """Raw pressed state, ignoring lock."""
        state = self._actions.get(action)
        return bool(state and state.held)

    def is_key_pressed(self, action: str) -> bool:
        state = self._actions.get(action)
        if state is None or not state.held or state.locked:
            return False
        if state.lock:
            state.locked = True
        return True

    def trigger_key_event(self, key: int, status: bool) -> bool:
        """
        Simulate a key press (status=True) or release for a bound key.

        Returns True if the key is bound.
        """
        key = int(key)
        action = self._bindings.get(key)
        if action is None:
            return False
        state = self._actions[action]
        if status:
            state.held.add(key)
        else:
            state.held.discard(key)
            if not state.held:
                state.locked = False
        return True

    def reset(self) -> None:
        """Release every action (e.g. on focus loss)."""
        for state in self._actions.values():
            state.held.clear()
            state.locked = False

    def handle_event(self, event) -> bool:
        if event.type == pygame.KEYDOWN:
            return self.trigger_key_event(event.key, True)
        if event.type == pygame.KEYUP:
            return self.trigger_key_event(event.key, False)
        return False
