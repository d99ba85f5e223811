"""
Determinism-friendly helpers.

Small primitives (seeded RNG streams) so the math helpers and input code can avoid
the unseeded global `random` module.
"""
