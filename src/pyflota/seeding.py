"""Seed derivation and the seeded scalar generator.

Every synthetic value in pyflota comes from :func:`scalar`.  It is a pure
function of ``(seed, offset)``: there is no generator object, no global
state, and no dependence on call order.  Two UI surfaces asking for the
same attribute of the same entity therefore always agree.
"""

from __future__ import annotations

import math

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000
_LARGEST_BELOW_ONE = math.nextafter(1.0, 0.0)


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def derive_seed(entity_id: str) -> int:
    """Return a stable non-negative integer seed for *entity_id*.

    32-bit rolling hash (``h = h * 31 + unit``) over the UTF-16 code
    units of the string, taken as a signed 32-bit value and then made
    non-negative.  Stable across processes; ``derive_seed("") == 0``.
    """
    data = entity_id.encode("utf-16-le", errors="surrogatepass")
    value = 0
    for pos in range(0, len(data), 2):
        unit = data[pos] | (data[pos + 1] << 8)
        value = ((value << 5) - value + unit) & _INT32_MASK
    return abs(_to_int32(value))


def scalar(seed: float, offset: float = 0) -> float:
    """Return a deterministic float in ``[0, 1)`` for ``(seed, offset)``."""
    x = math.sin(seed + offset) * 10000
    frac = x - math.floor(x)
    # x - floor(x) can round up to 1.0 for tiny negative x.
    return min(frac, _LARGEST_BELOW_ONE)


def random_int(seed: float, low: int, high: int, offset: float = 0) -> int:
    """Return a deterministic integer in ``[low, high]`` (both inclusive)."""
    if high < low:
        raise ValueError(f"high must be >= low, got low={low} high={high}")
    return math.floor(scalar(seed, offset) * (high - low + 1)) + low


def scalar_index(length: int, seed: float, offset: float = 0) -> int:
    """Return a deterministic index in ``range(length)``."""
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    return min(math.floor(scalar(seed, offset) * length), length - 1)
