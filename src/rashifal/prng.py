"""Seeded pseudo-random generator for repeatable template selection.

Not for security use. The exact bit operations are part of the output
contract: a given seed must keep producing the same sequence across
releases, since cached and compared horoscopes depend on it.

Seeding is a 32-bit FNV-1a fold over the seed's UTF-16 code units
(offset basis 2166136261, prime 16777619). Each draw adds the Weyl
increment 0x6D2B79F5 to the accumulator and runs the mulberry32
finaliser:

    t = (h ^ h >> 15) * (h | 1)
    t = (t + (t ^ t >> 7) * (t | 61)) ^ t
    out = t ^ t >> 14

with every step reduced mod 2**32. The draw is ``out / 2**32``.
"""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619
_WEYL_STEP = 0x6D2B79F5
_SCALE = 4294967296.0  # 2**32


def _code_units(seed: str) -> tuple[int, ...]:
    """UTF-16 code units of seed. Equal to code points for BMP text."""
    raw = seed.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(raw) // 2}H", raw)


def fnv1a_32(seed: str) -> int:
    h = _FNV_OFFSET
    for unit in _code_units(seed):
        h = ((h ^ unit) * _FNV_PRIME) & _MASK
    return h


class SeededRandom:
    """Deterministic uniform draws in [0, 1) from a seed string.

    Each instance owns its accumulator; never share one across signs or dates.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: str) -> None:
        self._state = fnv1a_32(seed)

    def next(self) -> float:
        h = (self._state + _WEYL_STEP) & _MASK
        self._state = h
        t = ((h ^ (h >> 15)) * (h | 1)) & _MASK
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & _MASK)) & _MASK) ^ t
        return ((t ^ (t >> 14)) & _MASK) / _SCALE

    __call__ = next


def create(seed: str) -> SeededRandom:
    return SeededRandom(seed)
