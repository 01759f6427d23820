"""Portable seeded RNG (mulberry32).

The server and every client must draw the exact same sequence from the same
seed.  All state lives in one unsigned 32-bit word and every operation is
masked to 32 bits, reproducing two's-complement wraparound on any platform.

The constants below are part of the client/server wire contract.  Changing
any of them requires bumping ``SEED_SCHEME_VERSION`` in ``seeding``.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

UINT32_MASK = 0xFFFFFFFF
UINT32_RANGE = 0x100000000

MULBERRY32_INCREMENT = 0x6D2B79F5
GOLDEN_RATIO_32 = 0x9E3779B9

DEFAULT_SEED = 1

_T = TypeVar("_T")


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiplication."""
    return (a * b) & UINT32_MASK


def normalize_seed(seed: object) -> int:
    """Coerce an arbitrary value into a non-zero unsigned 32-bit seed.

    ``floor(abs(seed))`` wrapped to 32 bits.  Zero, non-finite and
    non-numeric inputs all become ``DEFAULT_SEED``.
    """
    if isinstance(seed, bool) or seed is None:
        return DEFAULT_SEED
    if isinstance(seed, int):
        normalized = abs(seed) & UINT32_MASK
    else:
        try:
            value = float(seed)  # type: ignore[arg-type]
        except (TypeError, ValueError, OverflowError):
            return DEFAULT_SEED
        if not math.isfinite(value):
            return DEFAULT_SEED
        normalized = math.floor(abs(value)) & UINT32_MASK
    return normalized or DEFAULT_SEED


class SeededRandom:
    """Deterministic uniform float stream bound to one 32-bit state word.

    A stream must be consumed by exactly one caller in a fixed order.  To
    generate in parallel, derive child seeds up front instead of sharing a
    stream.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: object) -> None:
        self._state = normalize_seed(seed)

    @property
    def state(self) -> int:
        return self._state

    def next_float(self) -> float:
        """Return the next value in [0.0, 1.0)."""
        self._state = (self._state + MULBERRY32_INCREMENT) & UINT32_MASK
        s = self._state
        t = _imul(s ^ (s >> 15), 1 | s)
        t ^= (t + _imul(t ^ (t >> 7), 61 | t)) & UINT32_MASK
        return (t ^ (t >> 14)) / UINT32_RANGE

    __call__ = next_float

    def next_int(self, low: int, high: int) -> int:
        """Return an integer in [low, high] inclusive."""
        return low + int(self.next_float() * (high - low + 1))

    def next_bool(self, probability: float = 0.5) -> bool:
        return self.next_float() < probability

    def uniform(self, low: float, high: float) -> float:
        return low + self.next_float() * (high - low)

    def pick(self, items: Sequence[_T]) -> _T | None:
        """Uniform pick; ``None`` (and no draw) for an empty sequence."""
        if not items:
            return None
        return items[int(self.next_float() * len(items))]


def create_stream(seed: object) -> SeededRandom:
    """Build a fresh stream from ``seed`` (normalized first)."""
    return SeededRandom(seed)


def _wrap_component(seed: object) -> int | None:
    """``floor(seed)`` as two's-complement uint32; ``None`` when not a finite number."""
    if isinstance(seed, bool) or seed is None:
        return None
    if isinstance(seed, int):
        return seed & UINT32_MASK
    try:
        value = float(seed)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(value):
        return None
    return math.floor(value) & UINT32_MASK


def combine_seeds(*seeds: object) -> int:
    """Fold several seeds into one, skipping values that are not numbers.

    Order-sensitive; used to mix a master seed with event counters.  Unlike
    ``normalize_seed``, components keep their sign bits (``-1`` becomes
    ``0xFFFFFFFF``) and zero is a valid component.
    """
    state = 0
    for seed in seeds:
        component = _wrap_component(seed)
        if component is None:
            continue
        state ^= (component + GOLDEN_RATIO_32 + (state << 6) + (state >> 2)) & UINT32_MASK
        state &= UINT32_MASK
    return state
