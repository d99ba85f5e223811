"""
Math utility functions shared by gameplay, rendering and input code.

Everything here is a pure function of its arguments, except the random helpers,
which draw from a RandomSource (the shared seeded RNG in game.sim.determinism
unless one is passed in).

Note: `random`, `round` and `pow` intentionally shadow the builtins inside this
module; call them as `math_utils.round(...)` etc.
"""
from __future__ import annotations

import math
from typing import Optional

from game.sim.determinism import RandomSource, get_rng

# degrees -> radians
DEG_TO_RAD = math.pi / 180.0
# radians -> degrees
RAD_TO_DEG = 180.0 / math.pi
# full turn
TAU = math.pi * 2
# quarter turn
ETA = math.pi * 0.5
# default tolerance for float comparisons
EPSILON = 0.000001

_ODD_BITS_32 = 0xAAAAAAAA


def _trunc(x: float) -> int:
    """Truncate toward zero; NaN and +/-inf become 0."""
    if isinstance(x, int):
        return x
    if not math.isfinite(x):
        return 0
    return int(x)


def _pow10(exp: float) -> float:
    try:
        return 10.0 ** exp
    except OverflowError:
        return math.inf


def is_power_of_two(val: int) -> bool:
    """
    True if `val` has exactly one bit set.

    Uses the `val & (val - 1)` trick as-is, so 0 also reports True.
    Python ints do not wrap at 32 bits, so negative values are never powers of two.
    """
    val = _trunc(val)
    return (val & (val - 1)) == 0


def is_power_of_four(val: int) -> bool:
    """True if `val` is 4**k for some k >= 0 (32-bit range)."""
    val = _trunc(val)
    if val in (0, 2, 3):
        return False
    if val == 1:
        return True
    # A power of four has its single bit on an even position.
    return (val & (val - 1)) == 0 and (val & _ODD_BITS_32) == 0


def next_power_of_two(val: int) -> int:
    """
    Smallest power of two >= val.

    Bit-smearing over 32 bits; only meaningful for 1 <= val <= 2**31.
    """
    val = _trunc(val) - 1
    val |= val >> 1
    val |= val >> 2
    val |= val >> 4
    val |= val >> 8
    val |= val >> 16
    return val + 1


def deg_to_rad(angle: float) -> float:
    """Convert an angle in degrees to radians. deg_to_rad(60) -> 1.0471..."""
    return angle * DEG_TO_RAD


def rad_to_deg(radians: float) -> float:
    """Convert an angle in radians to degrees. rad_to_deg(1.0471975511965976) -> 60"""
    return radians * RAD_TO_DEG


def clamp(val: float, low: float, high: float) -> float:
    """Clamp val to [low, high]. low > high is not checked."""
    return low if val < low else high if val > high else val


def random(min: int, max: int, rng: Optional[RandomSource] = None) -> int:
    """
    Random integer in [min, max).

    random(5, 10) -> one of 5, 6, 7, 8, 9
    """
    if rng is None:
        rng = get_rng()
    return _trunc(rng.random() * (max - min)) + min


def random_float(min: float, max: float, rng: Optional[RandomSource] = None) -> float:
    """Random float in [min, max)."""
    if rng is None:
        rng = get_rng()
    return rng.random() * (max - min) + min


def weighted_random(min: int, max: int, rng: Optional[RandomSource] = None) -> int:
    """Random integer in [min, max), biased toward `min` (the uniform sample is squared)."""
    if rng is None:
        rng = get_rng()
    u = rng.random()
    return _trunc(u * u * (max - min)) + min


def round(num: float, dec: int = 0) -> float:
    """
    Round `num` to `dec` decimal digits. round(10.33333, 2) -> 10.33

    Adds 0.5 then truncates toward zero, which matches half-up rounding for
    num >= 0 only. Negative values come out one step toward zero:
    round(-2.7) -> -2.0.

    Non-finite intermediates truncate to 0, as in a 32-bit integer cast.
    """
    scale = _pow10(dec)
    if scale == 0:
        return math.nan
    return _trunc(0.5 + num * scale) / scale


def to_be_close_to(expected: float, actual: float, precision: int = 2) -> bool:
    """True if `actual` is within half a unit of the `precision`-th decimal of `expected`."""
    return abs(expected - actual) < _pow10(-precision) / 2


def pow(n: float) -> float:
    """Square of n. Only squares; not a general exponent."""
    return n * n


square = pow
