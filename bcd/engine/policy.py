"""
Policy Adapter - Reward-Shaped Weight Vector
============================================

A scalar reward is computed from the current frame and fusion summary:

    r = clamp((assertiveness − hedging + 100·mean − 40·variance) / 150
              + (gazeStability − cursorEntropy) / 200,  −0.6, 0.8)

and nudges four policy weights with a decreasing per-index step size:

    w_i ← clamp(w_i + r·(0.1 − 0.015·i),  0.05, 0.45)

The weights are not renormalized. No snapshot field reads
them today; they are adaptive state kept for later consumers.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .frames import SensorFrame
from .fusion import FusionResult
from .numeric import clamp


INITIAL_POLICY = (0.32, 0.28, 0.24, 0.18)
POLICY_MIN = 0.05
POLICY_MAX = 0.45
REWARD_MIN = -0.6
REWARD_MAX = 0.8


def compute_reward(frame: SensorFrame, fusion: FusionResult) -> float:
    return clamp(
        (frame.text.assertiveness - frame.text.hedging + fusion.mean * 100 - fusion.variance * 40) / 150
        + (frame.behavior.gaze_stability - frame.behavior.cursor_entropy) / 200,
        REWARD_MIN,
        REWARD_MAX,
    )


class PolicyAdapter:
    """Bounded weight vector adapted once per step."""

    def __init__(self, weights: Optional[Sequence[float]] = None):
        self.weights = np.array(weights if weights is not None else INITIAL_POLICY, dtype=np.float64)
        self._rates = 0.1 - np.arange(len(self.weights)) * 0.015

    def update(self, reward: float) -> np.ndarray:
        self.weights = np.clip(self.weights + reward * self._rates, POLICY_MIN, POLICY_MAX)
        return self.weights.copy()

    def __repr__(self) -> str:
        return f"PolicyAdapter(weights={self.weights.round(4).tolist()})"


__all__ = [
    'INITIAL_POLICY',
    'POLICY_MIN',
    'POLICY_MAX',
    'REWARD_MIN',
    'REWARD_MAX',
    'compute_reward',
    'PolicyAdapter',
]
