"""
Determinism helpers.

Goals:
- Provide a single seeded RNG that the math helpers draw from by default
- Let callers swap in their own source (tests, per-thread generators)

Non-goals:
- Cryptographic security
- Perfect cross-language reproducibility (this is Python's Mersenne Twister)
"""

from __future__ import annotations

import random
from typing import Protocol

from config import SIM_SEED


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1). `random.Random` qualifies."""

    def random(self) -> float:
        ...


_SEED: int = int(SIM_SEED) & 0xFFFFFFFF
_SHARED_RNG: random.Random = random.Random(_SEED)


def set_sim_seed(seed: int) -> None:
    """Reseed the shared RNG (seed is reduced to 32 bits)."""
    global _SEED, _SHARED_RNG
    _SEED = int(seed) & 0xFFFFFFFF
    _SHARED_RNG = random.Random(_SEED)


def get_sim_seed() -> int:
    return _SEED


def get_rng() -> random.Random:
    """Shared RNG; its sequence depends on call order across all users."""
    return _SHARED_RNG
