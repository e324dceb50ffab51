"""
Scalar helpers shared by every engine stage.

All rounding that reaches a snapshot goes through ``js_round`` so that
exported values match the dashboard's historical output (halves round
toward +inf rather than to even).
"""

from __future__ import annotations

import math


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation a + (b - a) * t."""
    return a + (b - a) * t


def sigmoid(x: float) -> float:
    """Logistic function. Saturates instead of overflowing."""
    if x < -700.0:
        return 0.0
    return 1.0 / (1.0 + math.exp(-x))


def js_round(value: float) -> int:
    """Round half toward +inf (``Math.round`` semantics)."""
    return int(math.floor(value + 0.5))


__all__ = ['clamp', 'lerp', 'sigmoid', 'js_round']
