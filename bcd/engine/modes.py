"""
Mode Tracker - Dirichlet-Style Concentrations over Behavioral Modes
===================================================================

Five concentrations, one per behavioral mode, decay geometrically each
step and re-accumulate from three cues:

    stressSignal  = clamp(eda/100 + (1 − hrv/100))
    deceptionCue  = clamp(hedging/100 + pitchVar/200)
    deliberateCue = clamp(gazeStability/100 + fusionMean)

    α ← 0.98·α
    α[RATIONAL]   += 0.9·deliberateCue
    α[EMOTIONAL]  += 0.6·fusionMean
    α[DECEPTIVE]  += 1.1·deceptionCue
    α[IMPULSIVE]  += 0.9·stressSignal
    α[DELIBERATE] += 0.8·deliberateCue

The distribution is α normalized to percentages, with a confidence band
that narrows as a mode accumulates mass:

    width_i = max(4, 14 − 0.9·α_i)
    ci_i    = [max(0, round(p_i − width_i)), min(100, round(p_i + width_i))]

The band is computed from the unrounded percentage and is not forced to
contain the rounded score.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .frames import SensorFrame
from .fusion import FusionResult
from .numeric import clamp, js_round


class BehavioralMode(IntEnum):
    RATIONAL = 0
    EMOTIONAL = 1
    DECEPTIVE = 2
    IMPULSIVE = 3
    DELIBERATE = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


MODE_NAMES: Tuple[str, ...] = tuple(m.label for m in BehavioralMode)
INITIAL_CONCENTRATION = 1.4
CONCENTRATION_DECAY = 0.98
CONCENTRATION_FLOOR = 1e-9      # keeps α strictly positive under long zero-cue runs


# =============================================================================
# Cues
# =============================================================================

@dataclass(frozen=True)
class Cues:
    """Intermediate behavioral hypotheses, each in [0, 1]."""
    stress_signal: float
    deception_cue: float
    deliberate_cue: float


def derive_cues(frame: SensorFrame, fusion: FusionResult) -> Cues:
    return Cues(
        stress_signal=clamp(frame.physio.eda / 100 + (1 - frame.physio.hrv / 100), 0, 1),
        deception_cue=clamp(frame.text.hedging / 100 + frame.voice.pitch_var / 200, 0, 1),
        deliberate_cue=clamp(frame.behavior.gaze_stability / 100 + fusion.mean, 0, 1),
    )


# =============================================================================
# Distribution
# =============================================================================

@dataclass(frozen=True)
class ModeScore:
    mode: str
    score: int
    ci: Tuple[int, int]

    def to_dict(self):
        return {'mode': self.mode, 'score': self.score, 'ci': [self.ci[0], self.ci[1]]}


class ModeTracker:
    """Owns the concentration vector."""

    def __init__(self, concentration: Optional[Sequence[float]] = None):
        if concentration is None:
            concentration = [INITIAL_CONCENTRATION] * len(BehavioralMode)
        self.concentration = np.array(concentration, dtype=np.float64)
        if self.concentration.shape != (len(BehavioralMode),):
            raise ValueError(f"expected {len(BehavioralMode)} concentrations")

    def update(self, cues: Cues, fusion_mean: float) -> np.ndarray:
        alpha = np.maximum(self.concentration * CONCENTRATION_DECAY, CONCENTRATION_FLOOR)
        alpha[BehavioralMode.RATIONAL] += cues.deliberate_cue * 0.9
        alpha[BehavioralMode.EMOTIONAL] += fusion_mean * 0.6
        alpha[BehavioralMode.DECEPTIVE] += cues.deception_cue * 1.1
        alpha[BehavioralMode.IMPULSIVE] += cues.stress_signal * 0.9
        alpha[BehavioralMode.DELIBERATE] += cues.deliberate_cue * 0.8
        self.concentration = alpha
        return alpha.copy()

    def distribution(self) -> List[ModeScore]:
        alpha = [float(v) for v in self.concentration]
        total = 0.0
        for v in alpha:
            total += v
        scores = []
        for mode in BehavioralMode:
            a = alpha[mode]
            raw = a / total * 100
            width = max(4.0, 14 - a * 0.9)
            scores.append(ModeScore(
                mode=mode.label,
                score=js_round(raw),
                ci=(max(0, js_round(raw - width)), min(100, js_round(raw + width))),
            ))
        return scores


__all__ = [
    'BehavioralMode',
    'MODE_NAMES',
    'INITIAL_CONCENTRATION',
    'CONCENTRATION_DECAY',
    'CONCENTRATION_FLOOR',
    'Cues',
    'derive_cues',
    'ModeScore',
    'ModeTracker',
]
