"""
Random Source - Seeded Xorshift Generator
=========================================

Every stochastic draw in the engine (recurrent-memory candidates, latency
jitter, bias jitter, synthetic frames) comes from a ``RandomSource``.

The generator emulates 32-bit signed integer arithmetic:

    s ^= s << 13      (wraps to int32)
    s ^= s >> 17      (arithmetic shift)
    s ^= s << 5       (wraps to int32)
    out = (|s| mod 1000) / 1000

so a given seed always yields the same infinite sequence of floats in
[0, 1), matching the browser dashboard draw for draw. The transform has a
fixed point at zero; a zero seed is remapped to ``ZERO_SEED_FALLBACK``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


DEFAULT_SEED = 7
ZERO_SEED_FALLBACK = 0x6D2B79F5     # any non-zero int32 escapes the fixed point
_RESOLUTION = 1000


def _to_int32(value: int) -> int:
    """Wrap an arbitrary Python int to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


class RandomSource:
    """
    Deterministic float generator with explicit, inspectable state.

    Example:
        rng = RandomSource(seed=7)
        rng.next()   # same value on every run
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        state = _to_int32(int(seed))
        if state == 0:
            logger.warning(
                "Seed %r reduces to the xorshift zero fixed point; using 0x%08X",
                seed, ZERO_SEED_FALLBACK,
            )
            state = ZERO_SEED_FALLBACK
        self.seed = int(seed)
        self.state = state

    def next(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        s = self.state
        s = _to_int32(s ^ (s << 13))
        s ^= s >> 17
        s = _to_int32(s ^ (s << 5))
        self.state = s
        magnitude = -s if s < 0 else s
        return (magnitude % _RESOLUTION) / _RESOLUTION

    __call__ = next

    def take(self, n: int) -> List[float]:
        """Draw n values."""
        return [self.next() for _ in range(n)]

    def uniform(self, lo: float, hi: float) -> float:
        """Draw a float in [lo, hi)."""
        return lo + (hi - lo) * self.next()

    def jitter(self, spread: float) -> float:
        """Centered jitter in [-spread/2, spread/2)."""
        return (self.next() - 0.5) * spread

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed}, state={self.state})"


class SequenceSource(RandomSource):
    """
    Replays a fixed list of draws, cycling when exhausted.

    Used wherever a test (or a replay) needs exact control over the
    values the engine consumes.
    """

    def __init__(self, values: Iterable[float], seed: Optional[int] = None):
        self.values = [float(v) for v in values]
        if not self.values:
            raise ValueError("SequenceSource needs at least one value")
        for v in self.values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"draw {v!r} outside [0, 1)")
        self.seed = seed if seed is not None else 0
        self.state = 0
        self.position = 0

    def next(self) -> float:
        value = self.values[self.position % len(self.values)]
        self.position += 1
        return value

    __call__ = next

    def __repr__(self) -> str:
        return f"SequenceSource(n={len(self.values)}, position={self.position})"


__all__ = [
    'DEFAULT_SEED',
    'ZERO_SEED_FALLBACK',
    'RandomSource',
    'SequenceSource',
]
