"""
Input configuration passed to whatever binds platform events (see InputDispatcher).
"""

from __future__ import annotations

from dataclasses import dataclass

from config import DEBUG_INPUT, INPUT_PREVENT_DEFAULT


@dataclass
class InputConfig:
    # When True, events handled by an input source skip the engine's fallback handler.
    prevent_default: bool = True
    debug: bool = False

    @classmethod
    def from_settings(cls) -> "InputConfig":
        return cls(prevent_default=INPUT_PREVENT_DEFAULT, debug=DEBUG_INPUT)


_DEFAULT_CONFIG: InputConfig | None = None


def get_input_config() -> InputConfig:
    """Process-wide default config, built from config.py on first use."""
    global _DEFAULT_CONFIG
    if _DEFAULT_CONFIG is None:
        _DEFAULT_CONFIG = InputConfig.from_settings()
    return _DEFAULT_CONFIG


def set_input_config(cfg: InputConfig | None) -> None:
    """Replace the default config. None rebuilds it from config.py on next access."""
    global _DEFAULT_CONFIG
    _DEFAULT_CONFIG = cfg


def debug_log(msg: str, cfg: InputConfig | None = None) -> None:
    cfg = cfg or get_input_config()
    if not cfg.debug:
        return
    print(f"[input] {msg}")
